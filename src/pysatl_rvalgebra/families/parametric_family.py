"""
Parametric family definitions and management infrastructure.

This module contains the main class for defining parametric families of
primitive distributions, including support for multiple parametrizations,
analytical characteristics, and vectorised samplers.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, dataclass_transform

from pysatl_rvalgebra.distributions.distribution import ParametricFamilyDistribution

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, TypeAlias

    import numpy as np

    from pysatl_rvalgebra.families.parametrizations import Parametrization
    from pysatl_rvalgebra.types import (
        CharacteristicName,
        Kind,
        NumericArray,
        ParametrizationName,
    )

    CharacteristicFunction: TypeAlias = Callable[[Parametrization], float]
    Sampler: TypeAlias = Callable[[Parametrization, np.random.Generator, int], NumericArray]

logger = logging.getLogger(__name__)


class ParametricFamily:
    """
    A family of distributions with multiple parametrizations.

    Represents a parametric family of distributions (e.g., normal, lognormal)
    that can be parameterized in different ways. Manages parametrizations,
    analytical characteristics, and the sampler, and provides the factory
    method for creating distribution leaves.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    kind : Kind
        Whether the family is discrete or continuous.
    distr_parametrizations : list[ParametrizationName]
        List of parametrization names (first is base parametrization).
    distr_characteristics : dict[CharacteristicName, Callable]
        Mapping from characteristic names to functions of the base
        parametrization.
    sampler : Callable[[Parametrization, numpy.random.Generator, int], NumericArray]
        Draws ``n`` independent values for the given base parameters.
    """

    def __init__(
        self,
        name: str,
        kind: Kind,
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: dict[CharacteristicName, CharacteristicFunction],
        sampler: Sampler,
    ):
        self._name = name
        self._kind = kind
        self._sampler = sampler

        # Ordered names; the first one is the base parametrization name
        self.parametrization_names: list[ParametrizationName] = distr_parametrizations
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]

        # Runtime registry of parametrization classes
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        self.distr_characteristics = dict(distr_characteristics)

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def kind(self) -> Kind:
        """Get the family kind."""
        return self._kind

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Get mapping from parametrization names to classes."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Get the base parametrization class.

        Raises
        ------
        ValueError
            If base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register a parametrization class.

        Raises
        ------
        ValueError
            If name is already registered or not declared for the family.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared for {self.name}.")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """
        Convert parameters to the base parametrization.

        Parameters
        ----------
        parameters : Parametrization
            Parameters in any parametrization.

        Returns
        -------
        Parametrization
            Equivalent parameters in base parametrization.
        """
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def characteristic(self, name: CharacteristicName, parameters: Parametrization) -> float:
        """
        Evaluate an analytical characteristic for base parameters.

        Raises
        ------
        KeyError
            If the family provides no such characteristic.
        """
        try:
            func = self.distr_characteristics[name]
        except KeyError as exc:
            raise KeyError(f"{self.name} provides no analytical '{name}'") from exc
        return float(func(self.to_base(parameters)))

    def sample(
        self, parameters: Parametrization, n: int, rng: np.random.Generator
    ) -> NumericArray:
        """
        Draw ``n`` independent values.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters (any parametrization of this family).
        n : int
            Number of draws.
        rng : numpy.random.Generator
            Source of randomness.

        Returns
        -------
        NumericArray
            1-D ``float64`` array of length ``n``.
        """
        return self._sampler(self.to_base(parameters), rng, n)

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a distribution leaf with given parameters.

        The parameters are validated, converted to the base parametrization
        and validated again, so every leaf holds valid base parameters.

        Parameters
        ----------
        parametrization_name : str, optional
            Name of parametrization to use (defaults to base).
        **parameters_values
            Parameter values for the distribution.

        Returns
        -------
        ParametricFamilyDistribution
            Leaf holding the base parameters.

        Raises
        ------
        KeyError
            If parametrization name is not registered.
        ConstructionError
            If parameters don't satisfy constraints.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        base_parameters = self.to_base(parameters)
        if base_parameters is not parameters:
            base_parameters.validate()

        logger.debug("Created %s leaf from %s=%s", self.name, parameters.name, parameters)
        return ParametricFamilyDistribution(self.name, base_parameters)

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Create a class decorator that registers a parametrization.

        Parameters
        ----------
        name : str
            Name of the parametrization.

        Returns
        -------
        Callable[[type[Parametrization]], type[Parametrization]]
            Class decorator for registering parametrizations.
        """
        from pysatl_rvalgebra.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution
