from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pysatl_poisson.distributions import (
    AnalyticalComputation,
    ComputationStrategy,
    DefaultComputationStrategy,
    Distribution,
    IntegerLatticeDiscreteSupport,
)
from pysatl_poisson.types import (
    EuclideanDistributionType,
    GenericCharacteristicName,
    UnivariateDiscrete,
)


@dataclass(slots=True)
class StandaloneDiscreteUnivariateDistribution(Distribution):
    """
    Minimal standalone univariate discrete distribution.

    Notes
    -----
    - Lives on the non-negative integers.
    - A fresh default computation strategy is attached unless one is given.
    """

    _analytical: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]
    _strategy: ComputationStrategy[Any, Any]

    def __init__(
        self,
        analytical_computations: (
            Iterable[AnalyticalComputation[Any, Any]]
            | Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]
        ) = (),
        strategy: ComputationStrategy[Any, Any] | None = None,
    ) -> None:
        if isinstance(analytical_computations, Mapping):
            self._analytical = dict(analytical_computations)
        else:
            self._analytical = {ac.target: ac for ac in analytical_computations}
        self._strategy = DefaultComputationStrategy() if strategy is None else strategy

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        """Distribution type descriptor (kind and dimension)."""
        return UnivariateDiscrete

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Mapping from characteristic name to analytical callable."""
        return self._analytical

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        """Computation strategy instance."""
        return self._strategy

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(residue=0, modulus=1, min_k=0)
