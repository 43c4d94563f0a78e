"""
PySATL RV Algebra
=================

Symbolic random variables for back-of-the-envelope estimation: build
primitive distributions, combine them with ``+ - * /``, and sample the
result. Analytically tractable combinations fold into a closed-form
distribution; everything else stays a lazy operation tree.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .algebra import Simplifier, add, combine, div, mul, sub
from .config import (
    RvAlgebraConfig,
    config_context,
    configure,
    get_config,
    random_source,
    reset_config,
    seed,
)
from .constructors import *
from .constructors import __all__ as _constructors_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-rvalgebra")
__all__ = [
    "__version__",
    "Simplifier",
    "combine",
    "add",
    "sub",
    "mul",
    "div",
    "RvAlgebraConfig",
    "get_config",
    "configure",
    "reset_config",
    "config_context",
    "random_source",
    "seed",
    *_constructors_all,
    *_distr_all,
    *_errors_all,
    *_types_all,
]

del _constructors_all
del _distr_all
del _errors_all
del _types_all
