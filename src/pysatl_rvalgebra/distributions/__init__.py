"""
Distributions subpackage

Expression tree and sampling engine:

- node protocol with operator overloads (:mod:`.node`);
- primitive distribution leaves (:mod:`.distribution`);
- deferred operations (:mod:`.operation`);
- sampling protocol and recursive evaluator (:mod:`.sampling`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .distribution import ParametricFamilyDistribution
from .node import ExpressionNode
from .operation import Operation
from .sampling import DefaultSamplingStrategy, SamplingStrategy, default_sampling_strategy

__all__ = [
    "ExpressionNode",
    "ParametricFamilyDistribution",
    "Operation",
    "SamplingStrategy",
    "DefaultSamplingStrategy",
    "default_sampling_strategy",
]
