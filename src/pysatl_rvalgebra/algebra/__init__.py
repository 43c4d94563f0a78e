"""
Algebra subpackage

Closed-form folding rules (:mod:`.rules`) and the fold-or-wrap dispatcher
(:mod:`.simplifier`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .rules import DEFAULT_RULES, degenerate_division, fold_zero_operand
from .simplifier import (
    Simplifier,
    add,
    as_node,
    combine,
    default_simplifier,
    div,
    is_scalar,
    mul,
    sub,
)

__all__ = [
    "DEFAULT_RULES",
    "degenerate_division",
    "fold_zero_operand",
    "Simplifier",
    "default_simplifier",
    "combine",
    "add",
    "sub",
    "mul",
    "div",
    "as_node",
    "is_scalar",
]
