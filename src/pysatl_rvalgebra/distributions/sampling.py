"""
Sampling Engine
===============

This module defines the sampling protocol and its default implementation:

- :class:`SamplingStrategy` — draws ``n`` outcomes from an expression node.
- :class:`DefaultSamplingStrategy` — evaluates the tree by structural
  recursion: leaves draw from their family sampler, operations sample both
  operands independently and combine them elementwise.

Notes
-----
- Nothing is cached between calls; a sub-expression used twice is drawn twice.
- Floating-point anomalies (division by a sampled zero, overflow) are not
  intercepted: infinities and NaN flow through to the caller.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache
from typing import TYPE_CHECKING, Protocol

import numpy as np

from pysatl_rvalgebra.config import random_source
from pysatl_rvalgebra.distributions.distribution import ParametricFamilyDistribution
from pysatl_rvalgebra.distributions.operation import Operation

if TYPE_CHECKING:
    from pysatl_rvalgebra.distributions.node import ExpressionNode
    from pysatl_rvalgebra.types import NumericArray


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a 1-D array of outcomes)."""

    def sample(
        self, n: int, node: ExpressionNode, rng: np.random.Generator | None = None
    ) -> NumericArray: ...


class DefaultSamplingStrategy(SamplingStrategy):
    """
    Recursive tree evaluator.

    Returns
    -------
    NumericArray
        ``float64`` array of shape ``(n,)``.

    Raises
    ------
    ValueError
        If ``n`` is negative.
    TypeError
        If the tree contains an unknown node type.
    """

    def sample(
        self, n: int, node: ExpressionNode, rng: np.random.Generator | None = None
    ) -> NumericArray:
        if n < 0:
            raise ValueError(f"Number of samples must be non-negative, got {n}")
        generator = random_source() if rng is None else rng
        return self._evaluate(node, int(n), generator)

    def _evaluate(self, node: ExpressionNode, n: int, rng: np.random.Generator) -> NumericArray:
        if isinstance(node, ParametricFamilyDistribution):
            drawn = node.family.sample(node.parameters, n, rng)
            return np.asarray(drawn, dtype=np.float64).reshape(n)

        if isinstance(node, Operation):
            left = self._evaluate(node.left, n, rng)
            right = self._evaluate(node.right, n, rng)
            with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
                return np.asarray(node.operator.apply(left, right), dtype=np.float64)

        raise TypeError(f"Cannot sample from {type(node).__name__}")


@lru_cache(maxsize=1)
def default_sampling_strategy() -> DefaultSamplingStrategy:
    """Shared stateless strategy instance."""
    return DefaultSamplingStrategy()
