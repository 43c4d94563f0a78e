"""
Poisson distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import cast

import numpy as np
from scipy.stats import poisson

from pysatl_rvalgebra.families.parametric_family import ParametricFamily
from pysatl_rvalgebra.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_rvalgebra.families.registry import ParametricFamilyRegister
from pysatl_rvalgebra.types import CharacteristicName, FamilyName, Kind, NumericArray


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    POISSON_DOC = """
    Poisson distribution.

    Number of events in a fixed interval when events occur independently at
    a constant average rate λ > 0. Mean and variance both equal λ.
    """

    def rate_func(parameters: Parametrization) -> float:
        return cast(_Rate, parameters).lam

    def median_func(parameters: Parametrization) -> float:
        return float(poisson.median(cast(_Rate, parameters).lam))

    def sampler(parameters: Parametrization, rng: np.random.Generator, n: int) -> NumericArray:
        return rng.poisson(cast(_Rate, parameters).lam, size=n).astype(np.float64)

    Poisson = ParametricFamily(
        name=FamilyName.POISSON,
        kind=Kind.DISCRETE,
        distr_parametrizations=["rate"],
        distr_characteristics={
            CharacteristicName.MEAN: rate_func,
            CharacteristicName.VAR: rate_func,
            CharacteristicName.MEDIAN: median_func,
        },
        sampler=sampler,
    )
    Poisson.__doc__ = POISSON_DOC

    @parametrization(family=Poisson, name="rate")
    class _Rate(Parametrization):
        """
        Parameters
        ----------
        lam : float
            Expected number of events (λ)
        """

        lam: float

        @constraint(description="lam > 0")
        def check_lam_positive(self) -> bool:
            return self.lam > 0

    ParametricFamilyRegister.register(Poisson)
