from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_poisson.families import ParametricFamilyDistribution, ParametricFamilyRegister
from pysatl_poisson.policies import DomainError, Policy, get_policy, policy_context
from pysatl_poisson.types import UnivariateDiscrete
from tests.unit.families.test_basic import TestBaseFamily


class TestDistributionCreation(TestBaseFamily):
    def setup_method(self) -> None:
        self.family = self.make_default_family()
        ParametricFamilyRegister.register(self.family)

    def test_base_by_default(self) -> None:
        distribution = self.family.distribution(value=2.0)

        assert isinstance(distribution, ParametricFamilyDistribution)
        assert distribution.family is self.family
        assert distribution.family_name == "Default"
        assert distribution.parametrization_name == "base"
        assert distribution.distribution_type == UnivariateDiscrete
        assert distribution.support is None
        assert distribution.dtype == np.float64

    def test_call_is_distribution(self) -> None:
        distribution = self.family(value=2.0, parametrization_name="alt")
        assert distribution.parametrization_name == "alt"
        assert distribution.parameters.parameters == {"value": 2.0}

    def test_unknown_parametrization(self) -> None:
        with pytest.raises(KeyError):
            self.family.distribution("nope", value=1.0)

    def test_unsupported_dtype(self) -> None:
        with pytest.raises(TypeError):
            self.family.distribution(value=1.0, dtype=np.int32)

    def test_policy_captured_at_construction(self) -> None:
        distribution = self.family.distribution(value=1.0)
        assert distribution.policy == get_policy()

        with policy_context(discrete_quantile="real") as policy:
            inside = self.family.distribution(value=1.0)
        assert inside.policy is policy
        assert distribution.policy != policy

        explicit = Policy(domain_error="warn")
        assert self.family.distribution(value=1.0, policy=explicit).policy is explicit

    def test_own_constraints_checked(self) -> None:
        with pytest.raises(DomainError, match="value must be < 100"):
            self.family.distribution("alt", value=150.0)

    def test_base_constraints_checked_after_transform(self) -> None:
        with pytest.raises(DomainError, match="value must be > 0"):
            self.family.distribution("alt", value=-1.0)

    def test_recovering_policy_keeps_invalid_values(self) -> None:
        distribution = self.family.distribution(value=-1.0, policy=Policy(domain_error="ignore"))
        assert distribution.parameters.parameters == {"value": -1.0}

    def test_computation_strategy_is_family_strategy(self) -> None:
        distribution = self.family.distribution(value=1.0)
        assert distribution.computation_strategy is self.family.computation_strategy

    def test_base_parametrization_must_be_registered(self) -> None:
        from pysatl_poisson.families import ParametricFamily

        family = ParametricFamily(
            name="Empty",
            distr_type=UnivariateDiscrete,
            distr_parametrizations=["base"],
            distr_characteristics={},
        )
        with pytest.raises(ValueError, match="is not registered"):
            family.distribution(value=1.0)
