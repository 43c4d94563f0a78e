"""
Exceptions and warnings raised by the random-variable algebra.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class RvAlgebraError(Exception):
    """Base class for all library errors."""


class ConstructionError(RvAlgebraError, ValueError):
    """
    Invalid distribution parameters.

    Raised at construction time when a parametrization constraint does not
    hold (e.g. ``max < min`` or a non-positive log-normal scale).
    """


class DegenerateDivisionError(RvAlgebraError, ZeroDivisionError):
    """Division by a provably zero operand while ``zero_division="raise"``."""


class DegenerateDivisionWarning(RuntimeWarning):
    """Division by a provably zero operand was folded to ``Constant(0)``."""


__all__ = [
    "RvAlgebraError",
    "ConstructionError",
    "DegenerateDivisionError",
    "DegenerateDivisionWarning",
]
