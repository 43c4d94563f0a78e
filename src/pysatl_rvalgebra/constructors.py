"""
Public Constructors
===================

Entry points for building primitive leaves:

- direct constructors with native parameters: :class:`Normal`,
  :class:`LogNormal`, :class:`Triangular`, :class:`Uniform`,
  :class:`Poisson`, :class:`Constant`, :class:`Discrete`;
- derived constructors: ``Normal.from_mean``, ``Normal.from_range``,
  ``LogNormal.from_mean``, ``LogNormal.from_range``;
- :func:`to`, the credibility-interval shorthand.

Notes
-----
Calling a constructor class returns a
:class:`~pysatl_rvalgebra.distributions.distribution.ParametricFamilyDistribution`
leaf, and ``isinstance(leaf, Normal)`` checks the leaf's family, so the
constructors double as variant tags.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, ClassVar

from pysatl_rvalgebra.config import get_config
from pysatl_rvalgebra.distributions.distribution import ParametricFamilyDistribution
from pysatl_rvalgebra.families.configuration import configure_families_register
from pysatl_rvalgebra.types import FamilyName

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pysatl_rvalgebra.families.parametric_family import ParametricFamily


class _FamilyConstructorMeta(type):
    """Makes ``isinstance`` test a leaf's family instead of its Python class."""

    def __instancecheck__(cls, instance: Any) -> bool:
        family_name = getattr(cls, "family_name", None)
        if family_name is None:
            return isinstance(instance, ParametricFamilyDistribution)
        return isinstance(instance, ParametricFamilyDistribution) and (
            instance.family_name == family_name
        )


class FamilyConstructor(metaclass=_FamilyConstructorMeta):
    """Base of the constructor classes; never instantiated itself."""

    family_name: ClassVar[FamilyName]

    @classmethod
    def family(cls) -> ParametricFamily:
        """The registered family behind this constructor."""
        return configure_families_register().get(cls.family_name)


class Normal(FamilyConstructor):
    """
    Normal distribution ``Normal(mean, std_dev)``.

    A negative ``std_dev`` is replaced by its absolute value.
    """

    family_name = FamilyName.NORMAL

    def __new__(cls, mean: float, std_dev: float) -> ParametricFamilyDistribution:  # type: ignore[misc]
        return cls.family()(mu=mean, sigma=abs(std_dev))

    @classmethod
    def from_mean(cls, mean: float, std_dev: float) -> ParametricFamilyDistribution:
        """Same as the direct constructor."""
        return cls(mean, std_dev)

    @classmethod
    def from_range(
        cls, x: float, y: float, credibility: float
    ) -> ParametricFamilyDistribution:
        """
        Normal with ``credibility`` percent of its mass in ``[x, y]``.

        ``mean = (x + y) / 2`` and ``std_dev = (y - mean) / z`` where
        ``z = ppf(0.5 * (1 + credibility / 100))``.
        """
        return cls.family()(parametrization_name="range", x=x, y=y, credibility=credibility)


class LogNormal(FamilyConstructor):
    """Log-normal distribution ``LogNormal(location, scale)`` in log space."""

    family_name = FamilyName.LOG_NORMAL

    def __new__(cls, location: float, scale: float) -> ParametricFamilyDistribution:  # type: ignore[misc]
        return cls.family()(mu=location, sigma=scale)

    @classmethod
    def from_mean(cls, mean: float, std_dev: float) -> ParametricFamilyDistribution:
        """Moment-matched log-normal with the given arithmetic mean and std."""
        return cls.family()(parametrization_name="meanStd", mean=mean, std=std_dev)

    @classmethod
    def from_range(
        cls, x: float, y: float, credibility: float
    ) -> ParametricFamilyDistribution:
        """Log-normal with ``credibility`` percent of its mass in ``[x, y]``, ``0 < x < y``."""
        return cls.family()(parametrization_name="range", x=x, y=y, credibility=credibility)


class Triangular(FamilyConstructor):
    """Triangular distribution ``Triangular(minimum, mode, maximum)``."""

    family_name = FamilyName.TRIANGULAR

    def __new__(cls, minimum: float, mode: float, maximum: float) -> ParametricFamilyDistribution:  # type: ignore[misc]
        return cls.family()(minimum=minimum, mode=mode, maximum=maximum)


class Uniform(FamilyConstructor):
    """Uniform distribution ``Uniform(minimum, maximum)``."""

    family_name = FamilyName.UNIFORM

    def __new__(cls, minimum: float, maximum: float) -> ParametricFamilyDistribution:  # type: ignore[misc]
        return cls.family()(minimum=minimum, maximum=maximum)


class Poisson(FamilyConstructor):
    """Poisson distribution ``Poisson(lam)``."""

    family_name = FamilyName.POISSON

    def __new__(cls, lam: float) -> ParametricFamilyDistribution:  # type: ignore[misc]
        return cls.family()(lam=lam)


class Constant(FamilyConstructor):
    """Point mass ``Constant(value)``."""

    family_name = FamilyName.CONSTANT

    def __new__(cls, value: float) -> ParametricFamilyDistribution:  # type: ignore[misc]
        return cls.family()(value=value)


class Discrete(FamilyConstructor):
    """Weighted choice ``Discrete(values, weights)``."""

    family_name = FamilyName.DISCRETE

    def __new__(  # type: ignore[misc]
        cls, values: Sequence[float], weights: Sequence[float]
    ) -> ParametricFamilyDistribution:
        return cls.family()(values=values, weights=weights)


def to(x: float, y: float, credibility: float | None = None) -> ParametricFamilyDistribution:
    """
    Distribution from ``x`` to ``y``.

    Log-normal when ``x > 0``, normal otherwise: quantities that must stay
    positive are modelled log-normally.

    Parameters
    ----------
    x, y : float
        Ends of the credibility interval.
    credibility : float, optional
        Percentage of mass inside ``[x, y]``; defaults to the configured
        ``default_credibility`` (90).
    """
    if credibility is None:
        credibility = get_config().default_credibility
    if x > 0:
        return LogNormal.from_range(x, y, credibility)
    return Normal.from_range(x, y, credibility)


__all__ = [
    "FamilyConstructor",
    "Normal",
    "LogNormal",
    "Triangular",
    "Uniform",
    "Poisson",
    "Constant",
    "Discrete",
    "to",
]
