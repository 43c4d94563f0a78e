"""
Uniform distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import cast

import numpy as np

from pysatl_rvalgebra.families.parametric_family import ParametricFamily
from pysatl_rvalgebra.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_rvalgebra.families.registry import ParametricFamilyRegister
from pysatl_rvalgebra.types import CharacteristicName, FamilyName, Kind, NumericArray


def configure_uniform_family() -> None:
    """
    Configure and register the Uniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.UNIFORM):
        return

    UNIFORM_DOC = """
    Uniform (continuous) distribution.

    All intervals of the same length inside [minimum, maximum] are equally
    probable. It is often used when there is no prior knowledge about the
    possible values of a variable beyond its bounds.
    """

    def mean_func(parameters: Parametrization) -> float:
        """Midpoint of the bounds."""
        p = cast(_MinMax, parameters)
        return (p.minimum + p.maximum) / 2

    def var_func(parameters: Parametrization) -> float:
        p = cast(_MinMax, parameters)
        return (p.maximum - p.minimum) ** 2 / 12

    def sampler(parameters: Parametrization, rng: np.random.Generator, n: int) -> NumericArray:
        p = cast(_MinMax, parameters)
        return rng.uniform(p.minimum, p.maximum, size=n)

    Uniform = ParametricFamily(
        name=FamilyName.UNIFORM,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["minMax"],
        distr_characteristics={
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.MEDIAN: mean_func,
        },
        sampler=sampler,
    )
    Uniform.__doc__ = UNIFORM_DOC

    @parametrization(family=Uniform, name="minMax")
    class _MinMax(Parametrization):
        """
        Standard parametrization of uniform distribution.

        Parameters
        ----------
        minimum : float
            Lower bound of the distribution
        maximum : float
            Upper bound of the distribution
        """

        minimum: float
        maximum: float

        @constraint(description="minimum <= maximum")
        def check_bounds(self) -> bool:
            """Check that lower bound does not exceed upper bound."""
            return self.minimum <= self.maximum

    ParametricFamilyRegister.register(Uniform)
