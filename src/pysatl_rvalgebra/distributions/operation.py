"""
Deferred binary operations.

An :class:`Operation` keeps both operands untouched and combines their
outcomes only when sampled.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass

from pysatl_rvalgebra.distributions.node import ExpressionNode
from pysatl_rvalgebra.types import OperatorName


@dataclass(frozen=True, slots=True)
class Operation(ExpressionNode):
    """
    Operation node of the expression tree.

    Parameters
    ----------
    operator : OperatorName
        Operator applied elementwise to the sampled outcomes.
    left : ExpressionNode
        Left operand.
    right : ExpressionNode
        Right operand.

    Raises
    ------
    TypeError
        If an operand is not an :class:`ExpressionNode`.
    """

    operator: OperatorName
    left: ExpressionNode
    right: ExpressionNode

    def __post_init__(self) -> None:
        object.__setattr__(self, "operator", OperatorName(self.operator))
        for side in (self.left, self.right):
            if not isinstance(side, ExpressionNode):
                raise TypeError(f"Operation operands must be ExpressionNode, got {type(side)!r}")

    @property
    def children(self) -> tuple[ExpressionNode, ExpressionNode]:
        return self.left, self.right

    def to_formula(self) -> str:
        return f"({self.left.to_formula()} {self.operator.symbol} {self.right.to_formula()})"
