"""
Computation Strategies
======================

This module defines the pluggable strategy interface and its default
implementation:

- :class:`ComputationStrategy`: resolves characteristic methods.
- :class:`DefaultComputationStrategy`: resolves analyticals, then derived
  conversions from the characteristic registry, optionally caching the fitted
  conversions.
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

from pysatl_poisson.distributions.computation import (
    AnalyticalComputation,
    FittedComputationMethod,
)
from pysatl_poisson.types import (
    GenericCharacteristicName,
)

from .registry import characteristic_registry

if TYPE_CHECKING:
    from .distribution import Distribution

type Method[In, Out] = AnalyticalComputation[In, Out] | FittedComputationMethod[In, Out]


class ComputationStrategy[In, Out](Protocol):
    """Protocol for characteristic resolution strategies."""

    enable_caching: bool

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]: ...


class DefaultComputationStrategy[In, Out]:
    """
    Default characteristic resolver.

    Resolution order
    ----------------
    1. If the distribution provides an analytical implementation, return it.
    2. Else, if caching is enabled and the method is cached, return it.
    3. Else, fit the registry conversion producing the characteristic; the
       fitter may recursively resolve its sources via the strategy.

    Parameters
    ----------
    enable_caching : bool, default False
        If ``True``, cache fitted conversions keyed by distribution and target
        characteristic.

    Raises
    ------
    RuntimeError
        If no conversion produces the characteristic, or a cycle is detected
        during resolution.
    """

    def __init__(self, enable_caching: bool = False) -> None:
        self.enable_caching = enable_caching
        self._cache: dict[tuple[int, GenericCharacteristicName], FittedComputationMethod[In, Out]]
        self._cache = {}
        self._resolving: dict[int, set[GenericCharacteristicName]] = {}

    def _push_guard(self, distr: "Distribution", state: GenericCharacteristicName) -> None:
        key = id(distr)
        seen = self._resolving.setdefault(key, set())
        if state in seen:
            raise RuntimeError(
                f"Cycle detected while resolving '{state}'. "
                "Provide at least one analytical base characteristic in the distribution."
            )
        seen.add(state)

    def _pop_guard(self, distr: "Distribution", state: GenericCharacteristicName) -> None:
        key = id(distr)
        seen = self._resolving.get(key)
        if seen is not None:
            seen.discard(state)
            if not seen:
                self._resolving.pop(key, None)

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]:
        """
        Resolve an analytical or fitted method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name to resolve.
        distr : Distribution
            The distribution providing the analytical base.
        **options
            Passed to the fitter when a conversion is required.

        Returns
        -------
        Method
            Analytical or fitted callable implementing ``state``.
        """
        if state in distr.analytical_computations:
            return distr.analytical_computations[state]

        cache_key = (id(distr), state)
        if self.enable_caching:
            cached = self._cache.get(cache_key)
            if cached is not None:
                return cached

        method = characteristic_registry().get(state)
        if method is None:
            raise RuntimeError(
                f"No analytical computation or conversion available for '{state}'."
            )

        self._push_guard(distr, state)
        try:
            fitted: FittedComputationMethod[In, Out] = method.fit(distr, **options)
        finally:
            self._pop_guard(distr, state)

        if self.enable_caching:
            self._cache[cache_key] = fitted
        return fitted
