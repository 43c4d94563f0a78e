"""
Log-normal distribution family implementation.

Contains the LogNormal family with log-space, arithmetic moment and
credibility-range parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import cast

import numpy as np

from pysatl_rvalgebra.families.parametric_family import ParametricFamily
from pysatl_rvalgebra.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_rvalgebra.families.registry import ParametricFamilyRegister
from pysatl_rvalgebra.special import credibility_to_z, square
from pysatl_rvalgebra.types import CharacteristicName, FamilyName, Kind, NumericArray


def configure_log_normal_family() -> None:
    """
    Configure and register the LogNormal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOG_NORMAL):
        return

    LOG_NORMAL_DOC = """
    Log-normal distribution.

    X is log-normal when ln X ~ Normal(μ, σ). The base parametrization uses
    the log-space location μ and scale σ > 0.

        mean   = exp(μ + σ²/2)
        median = exp(μ)

    Products and quotients of independent log-normals are log-normal, and so
    are positive multiples, which is what the simplifier exploits.
    """

    def mean_func(parameters: Parametrization) -> float:
        """Arithmetic mean exp(μ + σ²/2)."""
        parameters = cast(_LocScale, parameters)
        return math.exp(parameters.mu + square(parameters.sigma) / 2)

    def var_func(parameters: Parametrization) -> float:
        """Arithmetic variance (exp(σ²) - 1)·exp(2μ + σ²)."""
        parameters = cast(_LocScale, parameters)
        s2 = square(parameters.sigma)
        return math.expm1(s2) * math.exp(2 * parameters.mu + s2)

    def median_func(parameters: Parametrization) -> float:
        """Median exp(μ)."""
        parameters = cast(_LocScale, parameters)
        return math.exp(parameters.mu)

    def sampler(parameters: Parametrization, rng: np.random.Generator, n: int) -> NumericArray:
        parameters = cast(_LocScale, parameters)
        return rng.lognormal(parameters.mu, parameters.sigma, size=n)

    LogNormal = ParametricFamily(
        name=FamilyName.LOG_NORMAL,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["locScale", "meanStd", "range"],
        distr_characteristics={
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.MEDIAN: median_func,
        },
        sampler=sampler,
    )
    LogNormal.__doc__ = LOG_NORMAL_DOC

    @parametrization(family=LogNormal, name="locScale")
    class _LocScale(Parametrization):
        """
        Log-space parametrization.

        Parameters
        ----------
        mu : float
            Location, the mean of ln X
        sigma : float
            Scale, the standard deviation of ln X
        """

        mu: float
        sigma: float

        @constraint(description="mu is not NaN")
        def check_mu_defined(self) -> bool:
            return not math.isnan(self.mu)

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            """Check that scale is positive."""
            return self.sigma > 0

    @parametrization(family=LogNormal, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Arithmetic moments parametrization (method of moments).

        Parameters
        ----------
        mean : float
            Mean of X
        std : float
            Standard deviation of X
        """

        mean: float
        std: float

        @constraint(description="mean > 0")
        def check_mean_positive(self) -> bool:
            return self.mean > 0

        @constraint(description="std > 0")
        def check_std_positive(self) -> bool:
            return self.std > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Moment matching to the log-space parameters.

                μ = ln(mean² / √(mean² + std²))
                σ = √(ln(1 + std² / mean²))
            """
            m2 = square(self.mean)
            s2 = square(self.std)
            mu = math.log(m2 / math.sqrt(m2 + s2))
            sigma = math.sqrt(math.log1p(s2 / m2))
            return _LocScale(mu=mu, sigma=sigma)

    @parametrization(family=LogNormal, name="range")
    class _Range(Parametrization):
        """
        Credibility-interval parametrization, symmetric in log space.

        Parameters
        ----------
        x : float
            Lower end of the interval, positive
        y : float
            Upper end of the interval
        credibility : float
            Percentage of mass inside the interval, in (0, 100)
        """

        x: float
        y: float
        credibility: float

        @constraint(description="x > 0")
        def check_positive(self) -> bool:
            return self.x > 0

        @constraint(description="x < y")
        def check_ordered(self) -> bool:
            return self.x < self.y

        @constraint(description="0 < credibility < 100")
        def check_credibility(self) -> bool:
            return 0 < self.credibility < 100

        def transform_to_base_parametrization(self) -> Parametrization:
            log_y = math.log(self.y)
            mu = (math.log(self.x) + log_y) / 2
            sigma = (log_y - mu) / credibility_to_z(self.credibility)
            return _LocScale(mu=mu, sigma=sigma)

    ParametricFamilyRegister.register(LogNormal)
