from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings

import numpy as np
import pytest
from scipy.stats import poisson as scipy_poisson

import pysatl_poisson
from pysatl_poisson import (
    DomainError,
    DomainErrorWarning,
    Policy,
    cdf,
    cdf_complement,
    kurtosis,
    kurtosis_excess,
    make_poisson,
    mean,
    median,
    mode,
    pdf,
    quantile,
    quantile_complement,
    range_of_definition,
    skewness,
    standard_deviation,
    support_range,
    variance,
)


class TestMakePoisson:
    def test_defaults(self) -> None:
        dist = make_poisson()
        assert dist.parameters.parameters == {"mean": 1.0}
        assert dist.dtype == np.float64
        assert dist.policy == Policy()

    def test_rejects_invalid_mean(self) -> None:
        with pytest.raises(DomainError, match="mean must be finite and > 0"):
            make_poisson(-3.0)

    def test_recovering_policy(self) -> None:
        dist = make_poisson(0.0, policy=Policy(domain_error="ignore"))
        assert pdf(dist, 0) == 0.0
        assert cdf(dist, 0) == 0.0
        assert cdf_complement(dist, 0) == 1.0


class TestAccessors:
    def setup_method(self) -> None:
        self.dist = make_poisson(4.0)

    def test_evaluators(self) -> None:
        assert pdf(self.dist, 4) == pytest.approx(0.1953668148, rel=1e-9)
        assert cdf(self.dist, 4) == pytest.approx(0.6288369352, rel=1e-9)
        assert cdf_complement(self.dist, 4) == pytest.approx(1.0 - 0.6288369352, rel=1e-9)
        assert quantile(self.dist, 0.5) == 4.0
        assert quantile_complement(self.dist, 0.5) == 4.0

    def test_moments(self) -> None:
        assert mean(self.dist) == 4.0
        assert mode(self.dist) == 4.0
        assert variance(self.dist) == 4.0
        assert standard_deviation(self.dist) == pytest.approx(2.0)
        assert skewness(self.dist) == pytest.approx(0.5)
        assert kurtosis(self.dist) == pytest.approx(3.25)
        assert kurtosis_excess(self.dist) == pytest.approx(0.25)

    def test_median_is_half_quantile(self) -> None:
        for lam in (0.7, 4.0, 10.0, 33.3):
            dist = make_poisson(lam)
            assert median(dist) == quantile(dist, 0.5) == scipy_poisson.median(lam)

    def test_ranges(self) -> None:
        assert support_range(self.dist) == (0.0, np.finfo(np.float64).max)
        assert range_of_definition(self.dist) == support_range(self.dist)

    def test_arrays(self) -> None:
        k = np.arange(12)
        np.testing.assert_allclose(pdf(self.dist, k), scipy_poisson.pmf(k, 4.0), rtol=1e-12)
        np.testing.assert_allclose(
            cdf(self.dist, k) + cdf_complement(self.dist, k), np.ones_like(k, dtype=float)
        )

    def test_quantile_round_trip(self) -> None:
        dist = make_poisson(10.0)
        k = quantile(dist, 0.5)
        assert cdf(dist, k) >= 0.5
        assert cdf(dist, k - 1) < 0.5

    def test_invalid_arguments(self) -> None:
        with pytest.raises(DomainError, match="^pmf: k must be finite"):
            pdf(self.dist, -1)
        with pytest.raises(DomainError, match="^ppf: probability must be in"):
            quantile(self.dist, 1.5)

        lenient = make_poisson(4.0, policy=Policy(domain_error="ignore"))
        assert math.isnan(quantile_complement(lenient, -0.5))


def test_public_api_exports() -> None:
    for name in ("make_poisson", "Policy", "DomainError", "ParametricFamily", "CharacteristicName"):
        assert name in pysatl_poisson.__all__
        assert hasattr(pysatl_poisson, name)


class TestDomainWarnings:
    def setup_method(self) -> None:
        self.policy = Policy(domain_error="warn")
        self.dist = make_poisson(4.0, policy=self.policy)

    def test_evaluator_warnings_point_at_caller(self) -> None:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            assert math.isnan(pdf(self.dist, -1))
            assert math.isnan(quantile(self.dist, 2.0))
        assert [w.category for w in caught] == [DomainErrorWarning, DomainErrorWarning]
        assert all(w.filename == __file__ for w in caught)
        assert caught[0].lineno != caught[1].lineno

    def test_construction_warning_points_at_caller(self) -> None:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            make_poisson(-1.0, policy=self.policy)
        assert caught
        assert caught[0].filename == __file__
        assert "mean must be finite and > 0" in str(caught[0].message)
