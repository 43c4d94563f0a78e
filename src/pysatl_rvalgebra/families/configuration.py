"""
Distribution Families Configuration
====================================

This module registers the built-in primitive families:

- continuous: :class:`Normal`, :class:`LogNormal`, :class:`Triangular`,
  :class:`Uniform`;
- discrete: :class:`Constant`, :class:`Poisson`, :class:`Discrete`.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Configuration is lazy: it happens on the first request for a family.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_rvalgebra.families.builtins import (
    configure_constant_family,
    configure_discrete_family,
    configure_log_normal_family,
    configure_normal_family,
    configure_poisson_family,
    configure_triangular_family,
    configure_uniform_family,
)
from pysatl_rvalgebra.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_normal_family()
    configure_log_normal_family()
    configure_triangular_family()
    configure_uniform_family()
    configure_constant_family()
    configure_poisson_family()
    configure_discrete_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
