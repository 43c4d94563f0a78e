"""
Triangular distribution family implementation.
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
from pysatl_rvalgebra.types import CharacteristicName, FamilyName, Kind, NumericArray


def configure_triangular_family() -> None:
    """
    Configure and register the Triangular distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.TRIANGULAR):
        return

    TRIANGULAR_DOC = """
    Triangular distribution on [minimum, maximum] peaking at mode.

    A degenerate triangle (minimum == maximum) is a point mass.
    """

    def mean_func(parameters: Parametrization) -> float:
        p = cast(_MinModeMax, parameters)
        return (p.minimum + p.mode + p.maximum) / 3

    def var_func(parameters: Parametrization) -> float:
        p = cast(_MinModeMax, parameters)
        a, c, b = p.minimum, p.mode, p.maximum
        return (a * a + b * b + c * c - a * b - a * c - b * c) / 18

    def median_func(parameters: Parametrization) -> float:
        p = cast(_MinModeMax, parameters)
        a, c, b = p.minimum, p.mode, p.maximum
        if a == b:
            return a
        if c >= (a + b) / 2:
            return a + math.sqrt((b - a) * (c - a) / 2)
        return b - math.sqrt((b - a) * (b - c) / 2)

    def sampler(parameters: Parametrization, rng: np.random.Generator, n: int) -> NumericArray:
        p = cast(_MinModeMax, parameters)
        # numpy rejects a zero-width triangle
        if p.minimum == p.maximum:
            return np.full(n, p.minimum, dtype=np.float64)
        return rng.triangular(p.minimum, p.mode, p.maximum, size=n)

    Triangular = ParametricFamily(
        name=FamilyName.TRIANGULAR,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["minModeMax"],
        distr_characteristics={
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.MEDIAN: median_func,
        },
        sampler=sampler,
    )
    Triangular.__doc__ = TRIANGULAR_DOC

    @parametrization(family=Triangular, name="minModeMax")
    class _MinModeMax(Parametrization):
        """
        Parameters
        ----------
        minimum : float
            Lower bound
        mode : float
            Peak of the density
        maximum : float
            Upper bound
        """

        minimum: float
        mode: float
        maximum: float

        @constraint(description="minimum <= mode <= maximum")
        def check_ordered(self) -> bool:
            return self.minimum <= self.mode <= self.maximum

    ParametricFamilyRegister.register(Triangular)
