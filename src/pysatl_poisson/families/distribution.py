"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_poisson.distributions.distribution import Distribution
from pysatl_poisson.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    import numpy as np

    from pysatl_poisson.distributions.computation import AnalyticalComputation
    from pysatl_poisson.distributions.strategies import ComputationStrategy
    from pysatl_poisson.distributions.support import Support
    from pysatl_poisson.families.parametric_family import ParametricFamily
    from pysatl_poisson.families.parametrizations import Parametrization
    from pysatl_poisson.policies import Policy
    from pysatl_poisson.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@dataclass(frozen=True, slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Represents a concrete distribution with specific parameter values,
    providing methods for computation. Instances are immutable.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    _distribution_type : DistributionType
        Type of this distribution.
    parameters : Parametrization
        Parameter values for this distribution.
    _support : Support or None
        Support of this distribution.
    policy : Policy
        Error and quantile policy captured at construction.
    dtype : numpy.dtype
        Floating-point element type of computed values.
    """

    family_name: str
    _distribution_type: DistributionType
    parameters: Parametrization
    _support: Support | None
    policy: Policy
    dtype: np.dtype[Any]
    _analytical_cache: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._distribution_type

    @property
    def family(self) -> ParametricFamily:
        """
        Get the parametric family this distribution belongs to.

        Returns
        -------
        ParametricFamily
            The parametric family of this distribution.
        """
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def parametrization_name(self) -> str:
        """Get the name of the parametrization the distribution was built with."""
        return self.parameters.name

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Get analytical computations for this distribution.

        Lazily computed and cached per instance.
        """
        if not self._analytical_cache:
            self._analytical_cache.update(
                self.family._build_analytical_computations(self.parameters, self.policy, self.dtype)
            )
        return self._analytical_cache

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        """Get the computation strategy for this distribution."""
        return self.family.computation_strategy

    @property
    def support(self) -> Support | None:
        """Get the support of this distribution."""
        return self._support
