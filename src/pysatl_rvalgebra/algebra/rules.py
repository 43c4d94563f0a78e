"""
Closed-form Folding Rules
=========================

Each rule receives the two operands of a binary operation (scalars already
lifted to ``Constant`` leaves) and returns either the folded leaf or
``None`` when the pairing has no closed form for these particular values.
All rules assume the operands are independent.

The table :data:`DEFAULT_RULES` maps ``(operator, left family, right family)``
to a rule; pairings absent from the table are never folded. Zero operands
never reach a rule: the simplifier settles them first, for every family.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import os
import warnings
from typing import TYPE_CHECKING, cast

from pysatl_rvalgebra.config import ZERO_DIVISION_RAISE, get_config
from pysatl_rvalgebra.errors import DegenerateDivisionError, DegenerateDivisionWarning
from pysatl_rvalgebra.families.configuration import configure_families_register
from pysatl_rvalgebra.special import square
from pysatl_rvalgebra.types import FamilyName, OperatorName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, TypeAlias

    from pysatl_rvalgebra.distributions.distribution import ParametricFamilyDistribution
    from pysatl_rvalgebra.distributions.node import ExpressionNode

    Rule: TypeAlias = Callable[[ExpressionNode, ExpressionNode], ExpressionNode | None]
    RuleKey: TypeAlias = tuple[OperatorName, str, str]

_PACKAGE_DIR = os.path.dirname(os.path.dirname(__file__))

ADD = OperatorName.ADD
SUB = OperatorName.SUB
MUL = OperatorName.MUL
DIV = OperatorName.DIV

NORMAL = FamilyName.NORMAL
LOG_NORMAL = FamilyName.LOG_NORMAL
CONSTANT = FamilyName.CONSTANT


def _leaf(family_name: FamilyName, **values: Any) -> ParametricFamilyDistribution:
    return configure_families_register().get(family_name)(**values)


def _constant(value: float) -> ParametricFamilyDistribution:
    return _leaf(CONSTANT, value=value)


def _normal(mu: float, sigma: float) -> ParametricFamilyDistribution:
    return _leaf(NORMAL, mu=mu, sigma=sigma)


def _log_normal(mu: float, sigma: float) -> ParametricFamilyDistribution:
    return _leaf(LOG_NORMAL, mu=mu, sigma=sigma)


def _values(node: ExpressionNode) -> dict[str, Any]:
    return cast("ParametricFamilyDistribution", node).parameters.parameters


def _normal_params(node: ExpressionNode) -> tuple[float, float]:
    p = _values(node)
    return p["mu"], p["sigma"]


def _log_normal_params(node: ExpressionNode) -> tuple[float, float]:
    """
    Log-space location and scale.

    These are the stored base parameters; they coincide with the moment
    recovery ``loc = ln(median)``, ``scale² = 2·(ln(mean) - loc)``.
    """
    p = _values(node)
    return p["mu"], p["sigma"]


def _constant_value(node: ExpressionNode) -> float:
    return cast(float, _values(node)["value"])


def is_zero_constant(node: ExpressionNode) -> bool:
    """Whether ``node`` is the point mass ``Constant(0)``."""
    return getattr(node, "family_name", None) == CONSTANT and _constant_value(node) == 0


def degenerate_division(dividend: ExpressionNode) -> ExpressionNode:
    """
    Outcome of dividing ``dividend`` by a provably zero operand.

    Raises
    ------
    DegenerateDivisionError
        When the active configuration has ``zero_division="raise"``.
    """
    if get_config().zero_division == ZERO_DIVISION_RAISE:
        raise DegenerateDivisionError(f"Division of {dividend} by zero")
    warnings.warn(
        f"Division of {dividend} by zero folded to Constant(0)",
        DegenerateDivisionWarning,
        skip_file_prefixes=(_PACKAGE_DIR,),
    )
    return _constant(0.0)


def fold_zero_operand(
    operator: OperatorName, left: ExpressionNode, right: ExpressionNode
) -> ExpressionNode | None:
    """
    Settle operations with a zero ``Constant`` operand, whatever the other side is.

    ``x / 0`` follows :func:`degenerate_division`; ``x * 0``, ``0 * x`` and
    ``0 / x`` are ``Constant(0)``. Returns ``None`` when no operand is zero.
    """
    if operator is DIV and is_zero_constant(right):
        return degenerate_division(left)
    if operator is MUL and (is_zero_constant(left) or is_zero_constant(right)):
        return _constant(0.0)
    if operator is DIV and is_zero_constant(left):
        return _constant(0.0)
    return None


# --------------------------------------------------------------------- #
# Normal
# --------------------------------------------------------------------- #


def add_normals(left: ExpressionNode, right: ExpressionNode) -> ExpressionNode:
    (m1, s1), (m2, s2) = _normal_params(left), _normal_params(right)
    return _normal(m1 + m2, math.sqrt(square(s1) + square(s2)))


def sub_normals(left: ExpressionNode, right: ExpressionNode) -> ExpressionNode:
    (m1, s1), (m2, s2) = _normal_params(left), _normal_params(right)
    return _normal(m1 - m2, math.sqrt(square(s1) + square(s2)))


def add_normal_constant(left: ExpressionNode, right: ExpressionNode) -> ExpressionNode:
    mu, sigma = _normal_params(left)
    return _normal(mu + _constant_value(right), sigma)


def add_constant_normal(left: ExpressionNode, right: ExpressionNode) -> ExpressionNode:
    mu, sigma = _normal_params(right)
    return _normal(_constant_value(left) + mu, sigma)


def sub_normal_constant(left: ExpressionNode, right: ExpressionNode) -> ExpressionNode:
    mu, sigma = _normal_params(left)
    return _normal(mu - _constant_value(right), sigma)


def sub_constant_normal(left: ExpressionNode, right: ExpressionNode) -> ExpressionNode:
    mu, sigma = _normal_params(right)
    return _normal(_constant_value(left) - mu, sigma)


def _scale_normal(normal: ExpressionNode, factor: float) -> ExpressionNode:
    mu, sigma = _normal_params(normal)
    return _normal(mu * factor, sigma * abs(factor))


def mul_normal_constant(left: ExpressionNode, right: ExpressionNode) -> ExpressionNode:
    return _scale_normal(left, _constant_value(right))


def mul_constant_normal(left: ExpressionNode, right: ExpressionNode) -> ExpressionNode:
    return _scale_normal(right, _constant_value(left))


def div_normal_constant(left: ExpressionNode, right: ExpressionNode) -> ExpressionNode:
    divisor = _constant_value(right)
    mu, sigma = _normal_params(left)
    return _normal(mu / divisor, sigma / abs(divisor))


# --------------------------------------------------------------------- #
# LogNormal
# --------------------------------------------------------------------- #


def mul_log_normals(left: ExpressionNode, right: ExpressionNode) -> ExpressionNode:
    (l1, s1), (l2, s2) = _log_normal_params(left), _log_normal_params(right)
    return _log_normal(l1 + l2, math.sqrt(square(s1) + square(s2)))


def div_log_normals(left: ExpressionNode, right: ExpressionNode) -> ExpressionNode:
    (l1, s1), (l2, s2) = _log_normal_params(left), _log_normal_params(right)
    return _log_normal(l1 - l2, math.sqrt(square(s1) + square(s2)))


def _scale_log_normal(log_normal: ExpressionNode, factor: float) -> ExpressionNode | None:
    # a negative multiple is no longer log-normal
    if factor < 0:
        return None
    loc, scale = _log_normal_params(log_normal)
    return _log_normal(loc + math.log(factor), scale)


def mul_log_normal_constant(left: ExpressionNode, right: ExpressionNode) -> ExpressionNode | None:
    return _scale_log_normal(left, _constant_value(right))


def mul_constant_log_normal(left: ExpressionNode, right: ExpressionNode) -> ExpressionNode | None:
    return _scale_log_normal(right, _constant_value(left))


def div_log_normal_constant(left: ExpressionNode, right: ExpressionNode) -> ExpressionNode | None:
    divisor = _constant_value(right)
    if divisor < 0:
        return None
    loc, scale = _log_normal_params(left)
    return _log_normal(loc - math.log(divisor), scale)


def div_constant_log_normal(left: ExpressionNode, right: ExpressionNode) -> ExpressionNode | None:
    """1/X is log-normal with negated location; c/X shifts it by ln c."""
    dividend = _constant_value(left)
    if dividend < 0:
        return None
    loc, scale = _log_normal_params(right)
    return _log_normal(math.log(dividend) - loc, scale)


# --------------------------------------------------------------------- #
# Constant
# --------------------------------------------------------------------- #


def _fold_constants(operator: OperatorName) -> Rule:
    def rule(left: ExpressionNode, right: ExpressionNode) -> ExpressionNode:
        a, b = _constant_value(left), _constant_value(right)
        return _constant(operator.apply(a, b))

    rule.__name__ = f"{operator}_constants"
    return rule


DEFAULT_RULES: dict[RuleKey, Rule] = {
    (ADD, NORMAL, NORMAL): add_normals,
    (SUB, NORMAL, NORMAL): sub_normals,
    (ADD, NORMAL, CONSTANT): add_normal_constant,
    (ADD, CONSTANT, NORMAL): add_constant_normal,
    (SUB, NORMAL, CONSTANT): sub_normal_constant,
    (SUB, CONSTANT, NORMAL): sub_constant_normal,
    (MUL, NORMAL, CONSTANT): mul_normal_constant,
    (MUL, CONSTANT, NORMAL): mul_constant_normal,
    (DIV, NORMAL, CONSTANT): div_normal_constant,
    (MUL, LOG_NORMAL, LOG_NORMAL): mul_log_normals,
    (DIV, LOG_NORMAL, LOG_NORMAL): div_log_normals,
    (MUL, LOG_NORMAL, CONSTANT): mul_log_normal_constant,
    (MUL, CONSTANT, LOG_NORMAL): mul_constant_log_normal,
    (DIV, LOG_NORMAL, CONSTANT): div_log_normal_constant,
    (DIV, CONSTANT, LOG_NORMAL): div_constant_log_normal,
    **{(op, CONSTANT, CONSTANT): _fold_constants(op) for op in OperatorName},
}
"""Default fold table keyed by ``(operator, left family, right family)``."""
