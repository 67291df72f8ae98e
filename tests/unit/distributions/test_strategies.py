from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import Any

import pytest

from pysatl_poisson.distributions.computation import (
    AnalyticalComputation,
    ComputationMethod,
    FittedComputationMethod,
)
from pysatl_poisson.distributions.registry import characteristic_registry
from pysatl_poisson.distributions.strategies import DefaultComputationStrategy
from tests.unit.distributions.test_basic import DistributionTestBase
from tests.utils.mocks import StandaloneDiscreteUnivariateDistribution


class TestDefaultComputationStrategy(DistributionTestBase):
    def test_analytical_is_returned_as_is(self) -> None:
        distr = self.make_geometric_distribution()
        strategy = DefaultComputationStrategy[Any, Any]()

        method = strategy.query_method(self.PMF, distr)
        assert method is distr.analytical_computations[self.PMF]
        assert isinstance(method, AnalyticalComputation)

    def test_std_derived_from_var(self) -> None:
        distr = self.make_geometric_distribution(success=0.5)
        std = distr.query_method(self.STD)

        assert isinstance(std, FittedComputationMethod)
        assert std(None) == pytest.approx(math.sqrt(2.0))

    def test_median_derived_from_ppf(self) -> None:
        distr = self.make_geometric_distribution(success=0.25)
        median = distr.query_method(self.MEDIAN)

        assert median(None) == distr.query_method(self.PPF)(0.5)

    def test_missing_characteristic_raises(self) -> None:
        distr = self.make_geometric_distribution()
        with pytest.raises(RuntimeError, match="No analytical computation or conversion"):
            distr.query_method("entropy")

    def test_missing_source_raises(self) -> None:
        distr = StandaloneDiscreteUnivariateDistribution()
        with pytest.raises(RuntimeError):
            distr.query_method(self.STD)

    def test_caching_disabled_by_default(self) -> None:
        strategy = DefaultComputationStrategy[Any, Any]()
        distr = self.make_geometric_distribution(strategy=strategy)

        first = strategy.query_method(self.STD, distr)
        second = strategy.query_method(self.STD, distr)
        assert first is not second

    def test_caching_enabled(self) -> None:
        strategy = DefaultComputationStrategy[Any, Any](enable_caching=True)
        distr = self.make_geometric_distribution(strategy=strategy)

        first = strategy.query_method(self.STD, distr)
        second = strategy.query_method(self.STD, distr)
        assert first is second

        other = self.make_geometric_distribution(strategy=strategy)
        assert strategy.query_method(self.STD, other) is not first

    def test_cycle_detected(self) -> None:
        def fit_loop(distribution: Any, **_: Any) -> FittedComputationMethod[Any, Any]:
            distribution.query_method("loop")
            raise AssertionError("unreachable")

        characteristic_registry().add_computation(
            ComputationMethod[Any, Any](target="loop", sources=["loop"], fitter=fit_loop)
        )
        distr = self.make_geometric_distribution()
        with pytest.raises(RuntimeError, match="Cycle detected"):
            distr.query_method("loop")

        # the guard is released after a failed resolution
        with pytest.raises(RuntimeError, match="Cycle detected"):
            distr.query_method("loop")
