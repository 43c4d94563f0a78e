"""
Numeric helpers backed by SciPy.

The standard-normal quantile function is the inverse CDF used by the range
constructors to turn a credibility percentage into a z-score.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from scipy.special import erfinv

from pysatl_rvalgebra.errors import ConstructionError


def ppf(q: float) -> float:
    """
    Percent point function (inverse CDF) of the standard normal distribution.

    Parameters
    ----------
    q : float
        Probability from [0, 1].

    Returns
    -------
    float
        Quantile ``z`` with ``P(Z <= z) = q``; ``-inf`` / ``inf`` for 0 / 1.

    Raises
    ------
    ValueError
        If probability is outside [0, 1].
    """
    if not 0.0 <= q <= 1.0:
        raise ValueError("Probability must be in [0, 1]")
    return float(math.sqrt(2) * erfinv(2 * q - 1))


def square(x: float) -> float:
    """Return ``x ** 2``."""
    return x * x


def credibility_to_z(credibility: float) -> float:
    """
    Z-score of a symmetric credibility interval.

    Parameters
    ----------
    credibility : float
        Percentage of probability mass inside the interval, in (0, 100).

    Returns
    -------
    float
        ``ppf(0.5 * (1 + credibility / 100))``.

    Raises
    ------
    ConstructionError
        If credibility is outside the open interval (0, 100).
    """
    if not 0.0 < credibility < 100.0:
        raise ConstructionError(f"Credibility must lie in (0, 100), got {credibility!r}")
    return ppf(0.5 * (1 + credibility / 100))


__all__ = ["ppf", "square", "credibility_to_z"]
