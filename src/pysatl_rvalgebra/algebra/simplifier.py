"""
Algebraic Simplifier
====================

Every operator application between two expressions (or an expression and a
real scalar) goes through :meth:`Simplifier.combine`, which either folds the
operands into a single closed-form leaf or wraps them, unmodified, in an
:class:`~pysatl_rvalgebra.distributions.operation.Operation`.

Notes
-----
- A zero ``Constant`` operand is settled before the table is consulted, for
  every left operand: ``x / 0`` follows the zero-division policy and
  ``x * 0``, ``0 * x``, ``0 / x`` fold to ``Constant(0)``.
- ``combine`` is total: a missing table entry, a rule declining (``None``),
  or a rule producing parameters that fail validation all fall through to
  the wrap branch.
- Scalars are lifted to ``Constant`` leaves before lookup, so a wrapped
  scalar operand appears in the tree as a ``Constant``.
- Besides ``TypeError`` for bad operands, the only error ``combine`` may
  surface is :class:`~pysatl_rvalgebra.errors.DegenerateDivisionError`, and
  only when the configuration asks for it.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache
from numbers import Real
from typing import TYPE_CHECKING

from pysatl_rvalgebra.algebra.rules import DEFAULT_RULES, fold_zero_operand
from pysatl_rvalgebra.distributions.distribution import ParametricFamilyDistribution
from pysatl_rvalgebra.distributions.node import ExpressionNode
from pysatl_rvalgebra.distributions.operation import Operation
from pysatl_rvalgebra.errors import ConstructionError
from pysatl_rvalgebra.families.configuration import configure_families_register
from pysatl_rvalgebra.types import FamilyName, OperatorName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_rvalgebra.algebra.rules import Rule, RuleKey

logger = logging.getLogger(__name__)


def is_scalar(value: Any) -> bool:
    """Whether ``value`` is a real number usable as an operand (``bool`` excluded)."""
    return isinstance(value, Real) and not isinstance(value, bool)


def as_node(value: Any) -> ExpressionNode:
    """
    Lift an operand to an expression node.

    Raises
    ------
    TypeError
        If ``value`` is neither an :class:`ExpressionNode` nor a real scalar.
    """
    if isinstance(value, ExpressionNode):
        return value
    if is_scalar(value):
        return configure_families_register().get(FamilyName.CONSTANT)(value=float(value))
    raise TypeError(f"Unsupported operand of type {type(value).__name__!r}")


def _family_of(node: ExpressionNode) -> str | None:
    if isinstance(node, ParametricFamilyDistribution):
        return node.family_name
    return None


class Simplifier:
    """
    Fold-or-wrap dispatcher over a rule table.

    Parameters
    ----------
    rules : Mapping[RuleKey, Rule], optional
        Table keyed by ``(operator, left family, right family)``; defaults to
        :data:`~pysatl_rvalgebra.algebra.rules.DEFAULT_RULES`.
    """

    def __init__(self, rules: Mapping[RuleKey, Rule] | None = None) -> None:
        self._rules: dict[RuleKey, Rule] = dict(DEFAULT_RULES if rules is None else rules)

    @property
    def rules(self) -> Mapping[RuleKey, Rule]:
        return self._rules

    def lookup(
        self, operator: OperatorName, left: ExpressionNode, right: ExpressionNode
    ) -> Rule | None:
        """Return the rule for the operand families, if any."""
        left_family, right_family = _family_of(left), _family_of(right)
        if left_family is None or right_family is None:
            return None
        return self._rules.get((operator, left_family, right_family))

    def combine(self, operator: OperatorName | str, left: Any, right: Any) -> ExpressionNode:
        """
        Apply ``operator`` to two operands.

        Parameters
        ----------
        operator : OperatorName or str
            One of ``add``, ``sub``, ``mul``, ``div``.
        left, right : ExpressionNode or real scalar
            Operands; scalars become ``Constant`` leaves.

        Returns
        -------
        ExpressionNode
            A new folded leaf, or an ``Operation`` holding both operands.

        Raises
        ------
        TypeError
            If an operand is not a node or a real scalar.
        DegenerateDivisionError
            On a provable division by zero under ``zero_division="raise"``.
        """
        operator = OperatorName(operator)
        left_node, right_node = as_node(left), as_node(right)

        settled = fold_zero_operand(operator, left_node, right_node)
        if settled is not None:
            logger.debug(
                "Folded %s %s %s into %s", left_node, operator.symbol, right_node, settled
            )
            return settled

        rule = self.lookup(operator, left_node, right_node)
        if rule is not None:
            try:
                folded = rule(left_node, right_node)
            except ConstructionError as exc:
                logger.debug("Rule %s declined %s: %s", rule.__name__, operator, exc)
                folded = None
            if folded is not None:
                logger.debug(
                    "Folded %s %s %s into %s",
                    left_node,
                    operator.symbol,
                    right_node,
                    folded,
                )
                return folded

        logger.debug("Wrapped %s %s %s", left_node, operator.symbol, right_node)
        return Operation(operator, left_node, right_node)


@lru_cache(maxsize=1)
def default_simplifier() -> Simplifier:
    """Shared simplifier backed by the default rule table."""
    return Simplifier()


def combine(operator: OperatorName | str, left: Any, right: Any) -> ExpressionNode:
    """Fold or wrap ``left <operator> right`` with the default simplifier."""
    return default_simplifier().combine(operator, left, right)


def add(left: Any, right: Any) -> ExpressionNode:
    """Named form of ``left + right``."""
    return combine(OperatorName.ADD, left, right)


def sub(left: Any, right: Any) -> ExpressionNode:
    """Named form of ``left - right``."""
    return combine(OperatorName.SUB, left, right)


def mul(left: Any, right: Any) -> ExpressionNode:
    """Named form of ``left * right``."""
    return combine(OperatorName.MUL, left, right)


def div(left: Any, right: Any) -> ExpressionNode:
    """Named form of ``left / right``."""
    return combine(OperatorName.DIV, left, right)
