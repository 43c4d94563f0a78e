"""
Constant (degenerate) distribution family implementation.

A constant is also how scalar operands enter the expression algebra.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import cast

import numpy as np

from pysatl_rvalgebra.families.parametric_family import ParametricFamily
from pysatl_rvalgebra.families.parametrizations import Parametrization, parametrization
from pysatl_rvalgebra.families.registry import ParametricFamilyRegister
from pysatl_rvalgebra.types import CharacteristicName, FamilyName, Kind, NumericArray


def configure_constant_family() -> None:
    """
    Configure and register the Constant distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CONSTANT):
        return

    def value_func(parameters: Parametrization) -> float:
        return cast(_Value, parameters).value

    def var_func(_: Parametrization) -> float:
        return 0.0

    def sampler(parameters: Parametrization, rng: np.random.Generator, n: int) -> NumericArray:
        return np.full(n, cast(_Value, parameters).value, dtype=np.float64)

    Constant = ParametricFamily(
        name=FamilyName.CONSTANT,
        kind=Kind.DISCRETE,
        distr_parametrizations=["value"],
        distr_characteristics={
            CharacteristicName.MEAN: value_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.MEDIAN: value_func,
        },
        sampler=sampler,
    )
    Constant.__doc__ = "Point mass: every draw returns ``value``."

    @parametrization(family=Constant, name="value")
    class _Value(Parametrization):
        value: float

    ParametricFamilyRegister.register(Constant)
