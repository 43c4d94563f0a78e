"""
Expression Node Interface
=========================

This module defines :class:`ExpressionNode`, the common base of every random
variable in the algebra: primitive distribution leaves and deferred
operations alike.

Notes
-----
- Arithmetic operators never mutate their operands; each application asks the
  simplifier for a new node (a folded leaf or an :class:`Operation`).
- Operands that are neither nodes nor real scalars yield ``NotImplemented``,
  so Python raises ``TypeError``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from pysatl_rvalgebra.types import OperatorName

if TYPE_CHECKING:
    from typing import Any

    import numpy as np

    from pysatl_rvalgebra.distributions.sampling import SamplingStrategy
    from pysatl_rvalgebra.types import NumericArray


class ExpressionNode(ABC):
    """Public random-variable interface used by the simplifier and the sampler."""

    __slots__ = ()

    # Make NumPy scalars defer to the reflected operators below.
    __array_ufunc__ = None

    @abstractmethod
    def to_formula(self) -> str:
        """Render the node as an infix formula (diagnostic only)."""

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        from pysatl_rvalgebra.distributions.sampling import default_sampling_strategy

        return default_sampling_strategy()

    def sample(self, rng: np.random.Generator | None = None) -> float:
        """
        Draw a single outcome.

        Parameters
        ----------
        rng : numpy.random.Generator, optional
            Source of randomness; defaults to the process-wide generator.
        """
        return float(self.sampling_strategy.sample(1, self, rng=rng)[0])

    def nsample(self, n: int, rng: np.random.Generator | None = None) -> NumericArray:
        """
        Draw ``n`` independent outcomes.

        Parameters
        ----------
        n : int
            Number of outcomes, ``n >= 0``.
        rng : numpy.random.Generator, optional
            Source of randomness; defaults to the process-wide generator.

        Returns
        -------
        NumericArray
            1-D ``float64`` array of exactly ``n`` values, in draw order.
        """
        return self.sampling_strategy.sample(n, self, rng=rng)

    def __str__(self) -> str:
        return self.to_formula()

    def _combine(self, operator: OperatorName, other: Any, *, reflected: bool) -> Any:
        from pysatl_rvalgebra.algebra.simplifier import combine, is_scalar

        if not isinstance(other, ExpressionNode) and not is_scalar(other):
            return NotImplemented
        if reflected:
            return combine(operator, other, self)
        return combine(operator, self, other)

    def __add__(self, other: Any) -> ExpressionNode:
        return self._combine(OperatorName.ADD, other, reflected=False)

    def __radd__(self, other: Any) -> ExpressionNode:
        return self._combine(OperatorName.ADD, other, reflected=True)

    def __sub__(self, other: Any) -> ExpressionNode:
        return self._combine(OperatorName.SUB, other, reflected=False)

    def __rsub__(self, other: Any) -> ExpressionNode:
        return self._combine(OperatorName.SUB, other, reflected=True)

    def __mul__(self, other: Any) -> ExpressionNode:
        return self._combine(OperatorName.MUL, other, reflected=False)

    def __rmul__(self, other: Any) -> ExpressionNode:
        return self._combine(OperatorName.MUL, other, reflected=True)

    def __truediv__(self, other: Any) -> ExpressionNode:
        return self._combine(OperatorName.DIV, other, reflected=False)

    def __rtruediv__(self, other: Any) -> ExpressionNode:
        return self._combine(OperatorName.DIV, other, reflected=True)
