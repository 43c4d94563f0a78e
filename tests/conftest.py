from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import pytest

from pysatl_rvalgebra.config import reset_config, seed
from pysatl_rvalgebra.families.configuration import reset_families_register

pytest.importorskip("scipy")


@pytest.fixture(autouse=True)
def _fresh_state() -> Generator[None, Any, None]:
    reset_families_register()
    reset_config()
    seed(20250101)
    yield
    reset_config()
