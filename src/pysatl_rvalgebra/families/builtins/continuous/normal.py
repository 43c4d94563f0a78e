"""
Normal distribution family implementation.

Contains the Normal family with the mean/std and credibility-range
parameterizations.
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
from pysatl_rvalgebra.special import credibility_to_z
from pysatl_rvalgebra.types import CharacteristicName, FamilyName, Kind, NumericArray


def configure_normal_family() -> None:
    """
    Configure and register the Normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    NORMAL_DOC = """
    Normal (Gaussian) distribution.

    Defined by its mean (μ) and standard deviation (σ ≥ 0). A zero standard
    deviation is allowed and describes a point mass at μ.

    Closed under addition and subtraction of independent normals and under
    affine maps x -> a·x + b, which is what the simplifier exploits.
    """

    def mean_func(parameters: Parametrization) -> float:
        """Mean of normal distribution."""
        parameters = cast(_MeanStd, parameters)
        return parameters.mu

    def var_func(parameters: Parametrization) -> float:
        """Variance of normal distribution."""
        parameters = cast(_MeanStd, parameters)
        return parameters.sigma**2

    def sampler(parameters: Parametrization, rng: np.random.Generator, n: int) -> NumericArray:
        parameters = cast(_MeanStd, parameters)
        return rng.normal(parameters.mu, parameters.sigma, size=n)

    Normal = ParametricFamily(
        name=FamilyName.NORMAL,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["meanStd", "range"],
        distr_characteristics={
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.MEDIAN: mean_func,
        },
        sampler=sampler,
    )
    Normal.__doc__ = NORMAL_DOC

    @parametrization(family=Normal, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Standard parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        sigma : float
            Standard deviation; stored as its absolute value
        """

        mu: float
        sigma: float

        def __post_init__(self) -> None:
            Parametrization.__post_init__(self)
            object.__setattr__(self, "sigma", abs(self.sigma))

        @constraint(description="mu is not NaN")
        def check_mu_defined(self) -> bool:
            return not math.isnan(self.mu)

        @constraint(description="sigma >= 0")
        def check_sigma_non_negative(self) -> bool:
            """Check that standard deviation is a number (NaN fails)."""
            return self.sigma >= 0

    @parametrization(family=Normal, name="range")
    class _Range(Parametrization):
        """
        Credibility-interval parametrization.

        ``credibility`` percent of the mass lies in ``[x, y]``, symmetric
        around the mean.

        Parameters
        ----------
        x : float
            Lower end of the interval
        y : float
            Upper end of the interval
        credibility : float
            Percentage of mass inside the interval, in (0, 100)
        """

        x: float
        y: float
        credibility: float

        @constraint(description="x <= y")
        def check_ordered(self) -> bool:
            return self.x <= self.y

        @constraint(description="0 < credibility < 100")
        def check_credibility(self) -> bool:
            return 0 < self.credibility < 100

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            mu = (self.x + self.y) / 2
            sigma = (self.y - mu) / credibility_to_z(self.credibility)
            return _MeanStd(mu=mu, sigma=sigma)

    ParametricFamilyRegister.register(Normal)
