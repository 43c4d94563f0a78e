"""
Runtime Configuration
=====================

Library-wide options and the process-wide random source.

- :class:`RvAlgebraConfig` — immutable option set (zero-division contract,
  default credibility for :func:`~pysatl_rvalgebra.constructors.to`).
- :func:`get_config` / :func:`configure` / :func:`reset_config` — cached
  accessor and mutators for the active options.
- :class:`RandomSource` — singleton holding the default
  :class:`numpy.random.Generator` used by the sampling engine.

Notes
-----
- No auto-configuration happens on import; the first call to
  :func:`get_config` builds the defaults.
- Reseeding the random source is an extension point for reproducible
  experiments and tests; the sampling contract itself does not require it.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from functools import lru_cache
from typing import TYPE_CHECKING, ClassVar

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

logger = logging.getLogger(__name__)

ZERO_DIVISION_CONSTANT = "constant"
ZERO_DIVISION_RAISE = "raise"


@dataclass(frozen=True, slots=True)
class RvAlgebraConfig:
    """
    Active library options.

    Parameters
    ----------
    zero_division : {"constant", "raise"}, default "constant"
        What the simplifier does when an expression is divided by an operand
        that is provably zero at construction time. ``"constant"`` folds the
        result to ``Constant(0)`` and emits a
        :class:`~pysatl_rvalgebra.errors.DegenerateDivisionWarning`;
        ``"raise"`` raises
        :class:`~pysatl_rvalgebra.errors.DegenerateDivisionError`.
    default_credibility : float, default 90.0
        Credibility (in percent) used by ``to`` when none is given.

    Raises
    ------
    ValueError
        If an option holds an unsupported value.
    """

    zero_division: str = ZERO_DIVISION_CONSTANT
    default_credibility: float = 90.0

    def __post_init__(self) -> None:
        if self.zero_division not in (ZERO_DIVISION_CONSTANT, ZERO_DIVISION_RAISE):
            raise ValueError(
                f"zero_division must be '{ZERO_DIVISION_CONSTANT}' or "
                f"'{ZERO_DIVISION_RAISE}', got {self.zero_division!r}"
            )
        if not 0.0 < self.default_credibility < 100.0:
            raise ValueError(
                f"default_credibility must lie in (0, 100), got {self.default_credibility!r}"
            )


_overrides: dict[str, Any] = {}


@lru_cache(maxsize=1)
def get_config() -> RvAlgebraConfig:
    """
    Return the active configuration.

    Returns
    -------
    RvAlgebraConfig
        Defaults merged with every override applied through :func:`configure`.
    """
    return RvAlgebraConfig(**_overrides)


def configure(**overrides: Any) -> RvAlgebraConfig:
    """
    Update the active configuration.

    Parameters
    ----------
    **overrides
        Option values keyed by :class:`RvAlgebraConfig` field name.

    Returns
    -------
    RvAlgebraConfig
        The new active configuration.

    Raises
    ------
    ValueError
        If an option name is unknown or a value is invalid. The active
        configuration is left untouched in that case.
    """
    known = {f.name for f in fields(RvAlgebraConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(f"Unknown configuration option(s): {', '.join(sorted(unknown))}")

    candidate = replace(get_config(), **overrides)
    _overrides.update(overrides)
    get_config.cache_clear()
    logger.debug("Configuration updated: %s", candidate)
    return get_config()


def reset_config() -> None:
    """Drop all overrides and return to the defaults."""
    _overrides.clear()
    get_config.cache_clear()


@contextmanager
def config_context(**overrides: Any) -> Iterator[RvAlgebraConfig]:
    """
    Temporarily apply configuration overrides.

    The previous overrides are restored on exit, even if the body raises.
    """
    saved = dict(_overrides)
    try:
        yield configure(**overrides)
    finally:
        _overrides.clear()
        _overrides.update(saved)
        get_config.cache_clear()


class RandomSource:
    """
    Singleton holder of the process-wide random generator.

    The generator is created lazily from OS entropy; :meth:`reseed` replaces
    it with a deterministic one.
    """

    _instance: ClassVar[RandomSource | None] = None
    _generator: np.random.Generator

    def __new__(cls) -> RandomSource:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._generator = np.random.default_rng()
        return cls._instance

    @property
    def generator(self) -> np.random.Generator:
        """The shared generator."""
        return self._generator

    def reseed(self, seed: int | None) -> None:
        """
        Replace the shared generator.

        Parameters
        ----------
        seed : int or None
            Seed for :func:`numpy.random.default_rng`; ``None`` draws fresh
            entropy from the OS.
        """
        self._generator = np.random.default_rng(seed)


def random_source() -> np.random.Generator:
    """Return the process-wide generator used when no ``rng`` is supplied."""
    return RandomSource().generator


def seed(value: int | None) -> None:
    """Reseed the process-wide generator."""
    RandomSource().reseed(value)


__all__ = [
    "RvAlgebraConfig",
    "get_config",
    "configure",
    "reset_config",
    "config_context",
    "RandomSource",
    "random_source",
    "seed",
    "ZERO_DIVISION_CONSTANT",
    "ZERO_DIVISION_RAISE",
]
