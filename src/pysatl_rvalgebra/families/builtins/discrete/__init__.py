"""
Built-in discrete distribution families.

This module contains implementations of discrete parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_rvalgebra.families.builtins.discrete.constant import configure_constant_family
from pysatl_rvalgebra.families.builtins.discrete.discrete import configure_discrete_family
from pysatl_rvalgebra.families.builtins.discrete.poisson import configure_poisson_family

__all__ = [
    "configure_constant_family",
    "configure_poisson_family",
    "configure_discrete_family",
]
