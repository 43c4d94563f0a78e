from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses
from typing import Any

import numpy as np
import pytest

from pysatl_rvalgebra.errors import ConstructionError
from pysatl_rvalgebra.families import (
    ParametricFamily,
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from pysatl_rvalgebra.types import Kind
from tests.unit.families.test_basic import TestBaseFamily


class TestParametrizationAPI(TestBaseFamily):
    def test_constraint_is_a_simple_holder(self) -> None:
        def is_positive(obj: object) -> bool:
            return getattr(obj, "value", 0) > 0

        c = ParametrizationConstraint(description="Value must be positive", check=is_positive)
        assert c.description == "Value must be positive"
        assert c.check is is_positive

    def test_constraint_decorator_marks_function(self) -> None:
        @constraint("Value must be positive")
        def check_positive(self: Any) -> bool:  # noqa: ANN001 (test signature)
            return getattr(self, "value", 0) > 0

        assert getattr(check_positive, "__is_constraint", None) is True
        assert getattr(check_positive, "__constraint_description", None) == "Value must be positive"

    def test_constraint_on_staticmethod_is_rejected(self) -> None:
        family = ParametricFamily(
            name="Static",
            kind=Kind.DISCRETE,
            distr_parametrizations=["base"],
            distr_characteristics={},
            sampler=lambda p, rng, n: np.zeros(n),
        )

        with pytest.raises(TypeError, match="instance method"):

            @parametrization(family=family, name="base")
            class Base(Parametrization):
                value: float

                @staticmethod
                @constraint("never")
                def check() -> bool:
                    return False

    def test_decorator_builds_frozen_dataclass(self) -> None:
        family = self.make_default_family()
        Base = family.parametrizations["base"]

        obj = Base(value=1.25)  # type: ignore[call-arg]
        assert obj.name == "base"
        assert obj.parameters == {"value": 1.25}
        assert getattr(Base, "__family__", None) is family
        assert getattr(Base, "__param_name__", None) == "base"
        assert dataclasses.is_dataclass(Base)
        with pytest.raises(dataclasses.FrozenInstanceError):
            obj.value = 2.0  # type: ignore[misc]

    def test_numeric_fields_are_coerced(self) -> None:
        Base = self.make_default_family().parametrizations["base"]

        obj = Base(value=np.int64(3))  # type: ignore[call-arg]
        assert type(obj.value) is float  # type: ignore[attr-defined]
        assert obj == Base(value=3.0)  # type: ignore[call-arg]

    def test_validate_collects_constraints_in_order(self) -> None:
        Base = self.make_default_family().parametrizations["base"]

        assert [c.description for c in Base(value=1.0).constraints] == ["value > 0"]  # type: ignore[call-arg]
        Base(value=1.0).validate()  # type: ignore[call-arg]
        with pytest.raises(ConstructionError, match=r'Default: constraint "value > 0"'):
            Base(value=-1.0).validate()  # type: ignore[call-arg]

    def test_construction_error_is_a_value_error(self) -> None:
        Base = self.make_default_family().parametrizations["base"]

        with pytest.raises(ValueError):
            Base(value=0.0).validate()  # type: ignore[call-arg]

    # ---------- Family-level conversion to base ----------

    def test_to_base_uses_family_logic(self) -> None:
        family = self.make_default_family()
        BaseCls = family.parametrizations["base"]
        AltCls = family.parametrizations["alt"]

        base_params = BaseCls(value=5.0)  # type: ignore[call-arg]
        assert family.to_base(base_params) is base_params

        base_from_alt = family.to_base(AltCls(doubled=3.0))  # type: ignore[call-arg]
        assert isinstance(base_from_alt, BaseCls)
        assert base_from_alt.value == 1.5  # type: ignore[attr-defined]

    def test_distribution_stores_base_parameters(self) -> None:
        family = self.make_default_family()

        leaf = family(parametrization_name="alt", doubled=4.0)
        assert leaf.family_name == "Default"
        assert leaf.parameters == family.parametrizations["base"](value=2.0)  # type: ignore[call-arg]
        assert leaf == family(value=2.0)

    def test_distribution_validates_converted_parameters(self) -> None:
        family = self.make_default_family()

        with pytest.raises(ConstructionError, match="value > 0"):
            family(parametrization_name="alt", doubled=-4.0)

    def test_unknown_parametrization_name(self) -> None:
        family = self.make_default_family()

        with pytest.raises(KeyError):
            family(parametrization_name="nope", value=1.0)

    def test_undeclared_parametrization_cannot_register(self) -> None:
        family = self.make_default_family()

        with pytest.raises(ValueError, match="not declared"):

            @family.parametrization(name="other")
            class Other(Parametrization):
                value: float

    def test_parametrization_cannot_register_twice(self) -> None:
        family = self.make_default_family()

        with pytest.raises(ValueError, match="already registered"):

            @family.parametrization(name="base")
            class Again(Parametrization):
                value: float

    def test_characteristic_lookup(self) -> None:
        family = self.make_default_family()
        params = family.parametrizations["alt"](doubled=6.0)  # type: ignore[call-arg]

        assert family.characteristic("mean", params) == 3.0
        with pytest.raises(KeyError, match="var"):
            family.characteristic("var", params)

    def test_sampler_receives_base_parameters(self) -> None:
        family = self.make_default_family()
        params = family.parametrizations["alt"](doubled=6.0)  # type: ignore[call-arg]

        np.testing.assert_array_equal(
            family.sample(params, 3, np.random.default_rng(0)), np.full(3, 3.0)
        )
