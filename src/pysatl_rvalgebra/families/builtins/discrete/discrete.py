"""
Weighted discrete distribution family implementation.

Draws one of a finite list of values with probability proportional to its
weight.
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


def configure_discrete_family() -> None:
    """
    Configure and register the weighted Discrete distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.DISCRETE):
        return

    DISCRETE_DOC = """
    Weighted discrete distribution over an explicit list of values.

    Weights are stored as given and must be non-negative with a positive
    sum; they are normalised by their sum when sampling, so weights that sum
    to 1 behave exactly as probabilities.
    """

    def _probabilities(p: _ValuesWeights) -> NumericArray:
        weights = np.asarray(p.weights, dtype=np.float64)
        return weights / weights.sum()

    def mean_func(parameters: Parametrization) -> float:
        p = cast(_ValuesWeights, parameters)
        return float(np.dot(p.values, _probabilities(p)))

    def var_func(parameters: Parametrization) -> float:
        p = cast(_ValuesWeights, parameters)
        values = np.asarray(p.values, dtype=np.float64)
        probs = _probabilities(p)
        mean = float(np.dot(values, probs))
        return float(np.dot((values - mean) ** 2, probs))

    def median_func(parameters: Parametrization) -> float:
        """Smallest value whose cumulative probability reaches one half."""
        p = cast(_ValuesWeights, parameters)
        values = np.asarray(p.values, dtype=np.float64)
        order = np.argsort(values, kind="stable")
        cumulative = np.cumsum(_probabilities(p)[order])
        idx = min(int(np.searchsorted(cumulative, 0.5, side="left")), len(values) - 1)
        return float(values[order][idx])

    def sampler(parameters: Parametrization, rng: np.random.Generator, n: int) -> NumericArray:
        """
        Inverse transform over the running sum of weights.

        For ``r ~ U[0, total)`` the draw is the first value whose cumulative
        weight exceeds ``r``; rounding past the end selects the last value.
        """
        p = cast(_ValuesWeights, parameters)
        values = np.asarray(p.values, dtype=np.float64)
        cumulative = np.cumsum(np.asarray(p.weights, dtype=np.float64))
        r = rng.random(n) * cumulative[-1]
        idx = np.searchsorted(cumulative, r, side="right")
        return values[np.minimum(idx, len(values) - 1)]

    Discrete = ParametricFamily(
        name=FamilyName.DISCRETE,
        kind=Kind.DISCRETE,
        distr_parametrizations=["valuesWeights"],
        distr_characteristics={
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.MEDIAN: median_func,
        },
        sampler=sampler,
    )
    Discrete.__doc__ = DISCRETE_DOC

    @parametrization(family=Discrete, name="valuesWeights")
    class _ValuesWeights(Parametrization):
        """
        Parameters
        ----------
        values : tuple[float, ...]
            Possible outcomes, in order
        weights : tuple[float, ...]
            Relative weight of each outcome
        """

        values: tuple[float, ...]
        weights: tuple[float, ...]

        @constraint(description="len(values) == len(weights)")
        def check_same_length(self) -> bool:
            return len(self.values) == len(self.weights)

        @constraint(description="at least one value")
        def check_not_empty(self) -> bool:
            return len(self.values) > 0

        @constraint(description="weights >= 0")
        def check_weights_non_negative(self) -> bool:
            return all(w >= 0 for w in self.weights)

        @constraint(description="0 < sum(weights) < inf")
        def check_total_weight(self) -> bool:
            total = math.fsum(self.weights)
            return 0 < total < math.inf

    ParametricFamilyRegister.register(Discrete)
