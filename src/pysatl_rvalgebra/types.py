"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout the random-variable
algebra.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import operator
from collections.abc import Callable
from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution.
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[np.float64]
"""Type alias for arrays of drawn outcomes."""

ParametrizationName = str
"""Type alias for parametrization names."""


class CharacteristicName(StrEnum):
    """
    Enumeration of analytical characteristics exposed by the families.

    Note
    ----------
    The simplifier only relies on ``mean`` and ``median``; ``var`` is
    available for introspection.
    """

    MEAN = "mean"
    VAR = "var"
    MEDIAN = "median"


class FamilyName(StrEnum):
    NORMAL = "Normal"
    LOG_NORMAL = "LogNormal"
    TRIANGULAR = "Triangular"
    UNIFORM = "Uniform"
    POISSON = "Poisson"
    CONSTANT = "Constant"
    DISCRETE = "Discrete"


class OperatorName(StrEnum):
    """
    Binary operators of the expression algebra.

    Each member knows its infix symbol and how to apply itself to scalars or
    NumPy arrays (elementwise).
    """

    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"

    @property
    def symbol(self) -> str:
        """Infix symbol used when rendering formulas."""
        return _SYMBOLS[self]

    def apply(self, left: Any, right: Any) -> Any:
        """Apply the operator to two scalars or arrays."""
        return _FUNCTIONS[self](left, right)


_SYMBOLS: dict[OperatorName, str] = {
    OperatorName.ADD: "+",
    OperatorName.SUB: "-",
    OperatorName.MUL: "*",
    OperatorName.DIV: "/",
}

_FUNCTIONS: dict[OperatorName, Callable[[Any, Any], Any]] = {
    OperatorName.ADD: operator.add,
    OperatorName.SUB: operator.sub,
    OperatorName.MUL: operator.mul,
    OperatorName.DIV: operator.truediv,
}


__all__ = [
    "Kind",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "ParametrizationName",
    "CharacteristicName",
    "FamilyName",
    "OperatorName",
]
