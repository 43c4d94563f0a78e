"""
Built-in distribution families.

This package contains the primitive distributions available by default:
Normal, LogNormal, Triangular and Uniform (continuous); Constant, Poisson and
weighted Discrete (discrete).
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_rvalgebra.families.builtins.continuous import (
    configure_log_normal_family,
    configure_normal_family,
    configure_triangular_family,
    configure_uniform_family,
)
from pysatl_rvalgebra.families.builtins.discrete import (
    configure_constant_family,
    configure_discrete_family,
    configure_poisson_family,
)

__all__ = [
    "configure_normal_family",
    "configure_log_normal_family",
    "configure_triangular_family",
    "configure_uniform_family",
    "configure_constant_family",
    "configure_poisson_family",
    "configure_discrete_family",
]
