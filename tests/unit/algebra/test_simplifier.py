from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
import operator
import warnings

import numpy as np
import pytest

from pysatl_rvalgebra.algebra import Simplifier, add, as_node, combine, div, is_scalar, mul, sub
from pysatl_rvalgebra.config import config_context
from pysatl_rvalgebra.constructors import (
    Constant,
    Discrete,
    LogNormal,
    Normal,
    Poisson,
    Triangular,
    Uniform,
)
from pysatl_rvalgebra.distributions import ExpressionNode, Operation
from pysatl_rvalgebra.errors import DegenerateDivisionError, DegenerateDivisionWarning
from pysatl_rvalgebra.types import OperatorName

OPERATORS = [operator.add, operator.sub, operator.mul, operator.truediv]


class TestOperandLifting:
    @pytest.mark.parametrize("value", [1, 2.5, np.float64(3.0), np.int32(-4)])
    def test_real_scalars_are_operands(self, value):
        assert is_scalar(value)
        assert as_node(value) == Constant(float(value))

    @pytest.mark.parametrize("value", [True, "1", None, [1.0], 1 + 2j])
    def test_other_values_are_not_operands(self, value):
        assert not is_scalar(value)
        with pytest.raises(TypeError, match="Unsupported operand"):
            as_node(value)

    def test_nodes_pass_through(self):
        node = Normal(0, 1)
        assert as_node(node) is node

    @pytest.mark.parametrize("bad", ["a", None, True, [1, 2]])
    def test_operators_reject_unsupported_operands(self, bad):
        with pytest.raises(TypeError):
            Normal(0, 1) + bad
        with pytest.raises(TypeError):
            bad * Normal(0, 1)


class TestNormalFolding:
    @pytest.mark.parametrize(
        "m1, s1, m2, s2",
        [(0.0, 1.0, 2.0, 1.5), (-3.0, 0.5, 3.0, 0.5), (10.0, 0.0, 1.0, 2.0)],
    )
    def test_sum_of_normals(self, m1, s1, m2, s2):
        assert Normal(m1, s1) + Normal(m2, s2) == Normal(m1 + m2, math.sqrt(s1 * s1 + s2 * s2))

    @pytest.mark.parametrize(
        "m1, s1, m2, s2",
        [(0.0, 1.0, 2.0, 1.5), (5.0, 3.0, 5.0, 4.0)],
    )
    def test_difference_of_normals(self, m1, s1, m2, s2):
        assert Normal(m1, s1) - Normal(m2, s2) == Normal(m1 - m2, math.sqrt(s1 * s1 + s2 * s2))

    def test_from_mean_sum(self):
        total = Normal.from_mean(0, 1) + Normal.from_mean(2, 1.5)

        assert isinstance(total, Normal)
        assert total.parameters.mu == pytest.approx(2.0)
        assert total.parameters.sigma == pytest.approx(1.8028, abs=1e-4)

    def test_scalar_shifts(self):
        x = Normal(1.0, 2.0)

        assert x + 5 == Normal(6.0, 2.0)
        assert 5 + x == Normal(6.0, 2.0)
        assert x - 5 == Normal(-4.0, 2.0)
        assert 3 - x == Normal(2.0, 2.0)
        assert x + Constant(5.0) == Normal(6.0, 2.0)

    def test_scalar_multiples(self):
        x = Normal(1.0, 2.0)

        assert x * 3 == Normal(3.0, 6.0)
        assert 3 * x == Normal(3.0, 6.0)
        assert x * -2 == Normal(-2.0, 4.0)
        assert x / 4 == Normal(0.25, 0.5)
        assert x / -0.5 == Normal(-2.0, 4.0)

    def test_numpy_scalar_operands(self):
        x = Normal(1.0, 2.0)

        assert np.float64(3.0) * x == Normal(3.0, 6.0)
        assert np.float64(1.0) + x == Normal(2.0, 2.0)

    def test_multiplication_by_zero(self):
        assert Normal(1.0, 1.0) * 0 == Constant(0.0)
        assert 0.0 * Normal(1.0, 1.0) == Constant(0.0)

    def test_division_by_zero_folds_to_zero_with_warning(self):
        with pytest.warns(DegenerateDivisionWarning, match="by zero"):
            result = Normal(1.0, 1.0) / 0.0

        assert result == Constant(0.0)

    def test_division_by_zero_raises_when_configured(self):
        with config_context(zero_division="raise"):
            with pytest.raises(DegenerateDivisionError):
                Normal(1.0, 1.0) / 0
            with pytest.raises(ZeroDivisionError):
                Normal(1.0, 1.0) / Constant(0.0)

    def test_folded_result_validity_is_checked(self):
        # 0 * inf is NaN, so the fold is rejected and the operands are kept
        result = Normal(0.0, 1.0) * math.inf

        assert isinstance(result, Operation)
        assert result.right == Constant(math.inf)

    def test_products_and_quotients_of_normals_are_wrapped(self):
        x, y = Normal(0.0, 1.0), Normal(1.0, 1.0)

        assert isinstance(x * y, Operation)
        assert isinstance(x / y, Operation)


class TestLogNormalFolding:
    def test_product(self):
        result = LogNormal(1.0, 0.3) * LogNormal(2.0, 0.4)

        assert isinstance(result, LogNormal)
        assert result.parameters.mu == pytest.approx(3.0)
        assert result.parameters.sigma == pytest.approx(0.5)

    def test_quotient(self):
        result = LogNormal(1.0, 0.3) / LogNormal(2.0, 0.4)

        assert isinstance(result, LogNormal)
        assert result.parameters.mu == pytest.approx(-1.0)
        assert result.parameters.sigma == pytest.approx(0.5)

    def test_positive_scalar_multiple(self):
        x = LogNormal(1.0, 0.3)

        assert (x * 2).parameters.mu == pytest.approx(1.0 + math.log(2))
        assert (2 * x).parameters.mu == pytest.approx(1.0 + math.log(2))
        assert (x * 2).parameters.sigma == pytest.approx(0.3)
        assert (x / 2).parameters.mu == pytest.approx(1.0 - math.log(2))

    def test_reciprocal(self):
        result = 1 / LogNormal(1.0, 0.3)

        assert isinstance(result, LogNormal)
        assert result.parameters.mu == pytest.approx(-1.0)
        assert result.parameters.sigma == pytest.approx(0.3)
        assert (5 / LogNormal(1.0, 0.3)).parameters.mu == pytest.approx(math.log(5) - 1.0)

    def test_zero_multiple_and_zero_dividend(self):
        x = LogNormal(1.0, 0.3)

        assert x * 0 == Constant(0.0)
        assert 0 / x == Constant(0.0)

    def test_division_by_zero(self):
        with pytest.warns(DegenerateDivisionWarning):
            assert LogNormal(1.0, 0.3) / 0 == Constant(0.0)
        with config_context(zero_division="raise"), pytest.raises(DegenerateDivisionError):
            LogNormal(1.0, 0.3) / 0

    @pytest.mark.parametrize(
        "build",
        [
            lambda x: x * -2,
            lambda x: -2 * x,
            lambda x: x / -2,
            lambda x: -2 / x,
        ],
    )
    def test_negative_scalars_are_wrapped(self, build):
        x = LogNormal(1.0, 0.3)
        result = build(x)

        assert isinstance(result, Operation)
        assert Constant(-2.0) in result.children
        assert x in result.children

    def test_sums_of_log_normals_are_wrapped(self):
        assert isinstance(LogNormal(0, 1) + LogNormal(0, 1), Operation)
        assert isinstance(LogNormal(0, 1) + 1, Operation)


class TestConstantFolding:
    @pytest.mark.parametrize("op", OPERATORS)
    @pytest.mark.parametrize("a, b", [(3.0, 4.0), (-2.5, 0.5), (0.0, 7.0)])
    def test_constant_arithmetic(self, op, a, b):
        assert op(Constant(a), Constant(b)) == Constant(op(a, b))

    def test_scalar_and_constant(self):
        assert Constant(2.0) * 3 == Constant(6.0)
        assert 10 / Constant(4.0) == Constant(2.5)

    def test_division_by_zero_constant(self):
        with pytest.warns(DegenerateDivisionWarning):
            assert Constant(1.0) / Constant(0.0) == Constant(0.0)
        with pytest.warns(DegenerateDivisionWarning):
            assert Constant(0.0) / 0 == Constant(0.0)
        with config_context(zero_division="raise"), pytest.raises(DegenerateDivisionError):
            Constant(1.0) / 0


ANY_DIVIDEND = [
    pytest.param(lambda: Uniform(0, 1), id="uniform"),
    pytest.param(lambda: Poisson(2.0), id="poisson"),
    pytest.param(lambda: Triangular(0, 1, 2), id="triangular"),
    pytest.param(lambda: Discrete([1, 2], [0.5, 0.5]), id="discrete"),
    pytest.param(lambda: Normal(0, 1) * Normal(0, 1), id="operation"),
    pytest.param(lambda: LogNormal(0, 1) + Normal(0, 1), id="mixed-operation"),
]


class TestZeroOperands:
    @pytest.mark.parametrize("build", ANY_DIVIDEND)
    @pytest.mark.parametrize("zero", [0, 0.0, -0.0])
    def test_division_by_zero_scalar_folds_with_warning(self, build, zero):
        with pytest.warns(DegenerateDivisionWarning, match="by zero"):
            result = build() / zero

        assert result == Constant(0.0)
        np.testing.assert_array_equal(result.nsample(3), np.zeros(3))

    @pytest.mark.parametrize("build", ANY_DIVIDEND)
    def test_division_by_zero_constant_folds_with_warning(self, build):
        with pytest.warns(DegenerateDivisionWarning):
            assert build() / Constant(0.0) == Constant(0.0)

    @pytest.mark.parametrize("build", ANY_DIVIDEND)
    def test_division_by_zero_raises_when_configured(self, build):
        dividend = build()
        with config_context(zero_division="raise"), pytest.raises(DegenerateDivisionError):
            dividend / 0
        with config_context(zero_division="raise"), pytest.raises(DegenerateDivisionError):
            div(dividend, Constant(0.0))

    def test_zero_over_zero_follows_division_policy(self):
        with pytest.warns(DegenerateDivisionWarning):
            assert Constant(0.0) / 0 == Constant(0.0)
        with config_context(zero_division="raise"), pytest.raises(DegenerateDivisionError):
            0 / Constant(0.0)

    @pytest.mark.parametrize("build", ANY_DIVIDEND)
    def test_multiplication_by_zero_folds(self, build):
        node = build()

        assert node * 0 == Constant(0.0)
        assert 0.0 * node == Constant(0.0)
        assert node * Constant(0.0) == Constant(0.0)

    @pytest.mark.parametrize("build", ANY_DIVIDEND)
    def test_zero_dividend_folds(self, build):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert 0 / build() == Constant(0.0)

    def test_empty_rule_table_still_settles_zero(self):
        simplifier = Simplifier(rules={})

        assert simplifier.combine("mul", Poisson(1.0), 0) == Constant(0.0)
        with pytest.warns(DegenerateDivisionWarning):
            assert simplifier.combine("div", Poisson(1.0), 0) == Constant(0.0)

    def test_non_zero_scalars_still_wrap(self):
        result = Uniform(0, 1) / 2

        assert isinstance(result, Operation)
        assert result.right == Constant(2.0)


class TestWrapping:
    @pytest.mark.parametrize(
        "left, right",
        [
            (Poisson(3.0), Poisson(4.0)),
            (Poisson(3.0), Constant(2.0)),
            (Triangular(0, 1, 2), Constant(1.0)),
            (Uniform(0, 1), Uniform(0, 1)),
            (Discrete([1, 2], [0.5, 0.5]), Constant(3.0)),
            (Normal(0, 1), LogNormal(0, 1)),
            (Constant(2.0), Uniform(0, 1)),
        ],
    )
    @pytest.mark.parametrize("op", OPERATORS)
    def test_unmatched_pairings_keep_operands(self, op, left, right):
        result = op(left, right)

        assert isinstance(result, Operation)
        assert result.left is left
        assert result.right is right

    def test_scalar_operand_is_stored_as_constant(self):
        result = Poisson(3.0) * 2

        assert isinstance(result, Operation)
        assert result.operator == OperatorName.MUL
        assert result.left == Poisson(3.0)
        assert result.right == Constant(2.0)

    def test_reflected_scalar_keeps_order(self):
        result = 2 - Uniform(0, 1)

        assert result.left == Constant(2.0)
        assert result.right == Uniform(0, 1)

    def test_operation_operands_are_never_folded(self):
        inner = Normal(0, 1) * Normal(0, 1)
        result = inner + Normal(0, 1)

        assert isinstance(result, Operation)
        assert result.left is inner
        assert result.right == Normal(0, 1)

    def test_operands_are_not_mutated(self):
        x, y = Normal(0.0, 1.0), Normal(2.0, 1.5)
        _ = x + y

        assert x == Normal(0.0, 1.0)
        assert y == Normal(2.0, 1.5)

    @pytest.mark.filterwarnings("ignore::pysatl_rvalgebra.errors.DegenerateDivisionWarning")
    def test_combine_is_total(self):
        nodes = [
            Normal(0, 1),
            LogNormal(0, 1),
            Triangular(0, 1, 2),
            Uniform(0, 1),
            Poisson(2.0),
            Constant(0.0),
            Constant(-1.5),
            Discrete([1, 2], [1, 1]),
            Normal(0, 1) * Normal(0, 1),
        ]
        for left in nodes:
            for right in nodes:
                for op in OperatorName:
                    assert isinstance(combine(op, left, right), ExpressionNode)


class TestSimplifierObject:
    def test_empty_table_always_wraps(self):
        simplifier = Simplifier(rules={})

        result = simplifier.combine("add", Normal(0, 1), Normal(1, 1))
        assert result == Operation(OperatorName.ADD, Normal(0, 1), Normal(1, 1))
        assert simplifier.lookup(OperatorName.ADD, Normal(0, 1), Normal(1, 1)) is None

    def test_custom_rule(self):
        def max_of_constants(left, right):
            return Constant(max(left.parameters.value, right.parameters.value))

        simplifier = Simplifier(rules={(OperatorName.ADD, "Constant", "Constant"): max_of_constants})

        assert simplifier.combine(OperatorName.ADD, 2, 5) == Constant(5.0)

    def test_declining_rule_wraps(self):
        simplifier = Simplifier(rules={(OperatorName.MUL, "Normal", "Normal"): lambda left, right: None})

        assert isinstance(simplifier.combine("mul", Normal(0, 1), Normal(0, 1)), Operation)

    def test_unknown_operator(self):
        with pytest.raises(ValueError):
            combine("pow", Normal(0, 1), 2)

    def test_named_combinators(self):
        x, y = Normal(0.0, 1.0), Normal(2.0, 1.5)

        assert add(x, y) == x + y
        assert sub(x, y) == x - y
        assert mul(x, 2) == x * 2
        assert div(x, 2) == x / 2
        assert add(1, 2) == Constant(3.0)

    def test_debug_logging(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="pysatl_rvalgebra.algebra.simplifier"):
            _ = Normal(0, 1) + Normal(0, 1)
            _ = Poisson(1.0) + Poisson(1.0)

        assert "Folded" in caplog.text
        assert "Wrapped" in caplog.text

    def test_no_warning_for_regular_folds(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            _ = Normal(0, 1) / 2
            _ = Constant(1.0) / 4
