"""
Concrete distribution leaves with specific parameter values.

A leaf pairs a family name with the family's base parametrization. All
behaviour (characteristics, sampling) is resolved through the family
registry.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_rvalgebra.distributions.node import ExpressionNode
from pysatl_rvalgebra.types import CharacteristicName, FamilyName

if TYPE_CHECKING:
    from typing import Any

    from pysatl_rvalgebra.families.parametric_family import ParametricFamily
    from pysatl_rvalgebra.families.parametrizations import Parametrization
    from pysatl_rvalgebra.types import Kind


def _format_value(value: Any) -> str:
    if isinstance(value, tuple):
        return "[" + ", ".join(_format_value(v) for v in value) + "]"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


@dataclass(frozen=True, slots=True, repr=False)
class ParametricFamilyDistribution(ExpressionNode):
    """
    A primitive distribution leaf.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    parameters : Parametrization
        Parameter values, always in the family's base parametrization.
    """

    family_name: str
    parameters: Parametrization

    @property
    def family(self) -> ParametricFamily:
        """
        Get the parametric family this distribution belongs to.

        Returns
        -------
        ParametricFamily
            The parametric family of this distribution.
        """
        from pysatl_rvalgebra.families.configuration import configure_families_register

        return configure_families_register().get(self.family_name)

    @property
    def kind(self) -> Kind:
        """Discrete or continuous."""
        return self.family.kind

    def is_family(self, name: str) -> bool:
        return self.family_name == name

    def characteristic(self, name: CharacteristicName) -> float:
        return self.family.characteristic(name, self.parameters)

    def mean(self) -> float:
        """Analytical mean."""
        return self.characteristic(CharacteristicName.MEAN)

    def var(self) -> float:
        """Analytical variance."""
        return self.characteristic(CharacteristicName.VAR)

    def median(self) -> float:
        """Analytical median."""
        return self.characteristic(CharacteristicName.MEDIAN)

    def to_formula(self) -> str:
        if self.family_name == FamilyName.CONSTANT:
            return _format_value(self.parameters.parameters["value"])
        args = ", ".join(f"{k}={_format_value(v)}" for k, v in self.parameters.parameters.items())
        return f"{self.family_name}({args})"

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.parameters.parameters.items())
        return f"{self.family_name}({args})"
