"""
Characteristic Registry
=======================

A registry of conversion methods, keyed by the characteristic they produce.
The computation strategy consults it for every characteristic a distribution
does not provide analytically.

- No auto-configuration in the constructor.
- :func:`characteristic_registry` builds the singleton instance once (via
  ``@lru_cache``) and seeds it with the default conversions.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from functools import lru_cache
from typing import TYPE_CHECKING, Any, ClassVar, Self

from pysatl_poisson.distributions.computation import ComputationMethod
from pysatl_poisson.distributions.fitters import fit_ppf_to_median, fit_var_to_std
from pysatl_poisson.types import CharacteristicName

if TYPE_CHECKING:
    from pysatl_poisson.types import GenericCharacteristicName


class CharacteristicRegistry:
    """Singleton mapping a target characteristic to its conversion method."""

    _instance: ClassVar[Self | None] = None
    _methods: dict[GenericCharacteristicName, ComputationMethod[Any, Any]]

    def __new__(cls) -> Self:
        if cls._instance is None:
            self = super().__new__(cls)
            self._methods = {}
            cls._instance = self
        return cls._instance

    def add_computation(self, method: ComputationMethod[Any, Any]) -> None:
        """
        Register a conversion method for ``method.target``.

        Notes
        -----
        * Duplicate registrations for the same target are ignored with a warning.
        """
        if method.target in self._methods:
            warnings.warn(
                f"Computation for {method.target} have been already added. "
                "The new one will not be taken into account",
                UserWarning,
                stacklevel=2,
            )
            return
        self._methods[method.target] = method

    def get(self, target: GenericCharacteristicName) -> ComputationMethod[Any, Any] | None:
        """Get the conversion method producing ``target``, if any."""
        return self._methods.get(target)

    @property
    def targets(self) -> frozenset[GenericCharacteristicName]:
        """All characteristics the registry can derive."""
        return frozenset(self._methods)

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None


def _configure(reg: CharacteristicRegistry) -> None:
    """Default configuration: ``var -> std`` and ``ppf -> median``."""
    reg.add_computation(
        ComputationMethod[Any, Any](
            target=CharacteristicName.STD,
            sources=[CharacteristicName.VAR],
            fitter=fit_var_to_std,
        )
    )
    reg.add_computation(
        ComputationMethod[Any, Any](
            target=CharacteristicName.MEDIAN,
            sources=[CharacteristicName.PPF],
            fitter=fit_ppf_to_median,
        )
    )


@lru_cache(maxsize=1)
def characteristic_registry() -> CharacteristicRegistry:
    """
    Return a cached, configured characteristic registry (singleton instance).

    Notes
    -----
    - Configuration is applied exactly once per process via LRU caching.
    """
    reg = CharacteristicRegistry()
    _configure(reg)
    return reg


def reset_characteristic_registry() -> None:
    """
    Reset the cached characteristic registry.
    """
    characteristic_registry.cache_clear()
    CharacteristicRegistry._reset()
