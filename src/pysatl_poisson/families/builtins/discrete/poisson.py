"""
Poisson distribution family implementation.

Contains the Poisson family with mean and rate parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from pysatl_poisson.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_poisson.families.parametric_family import ParametricFamily
from pysatl_poisson.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_poisson.families.registry import ParametricFamilyRegister
from pysatl_poisson.stats import poisson as _poisson
from pysatl_poisson.stats.poisson import MEAN_NZ_MESSAGE
from pysatl_poisson.types import (
    CharacteristicName,
    FamilyName,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any

    import numpy as np

    from pysatl_poisson.policies import Policy
    from pysatl_poisson.types import NumericArray


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    POISSON_DOC = """
    Poisson distribution.

    The Poisson distribution is a discrete probability distribution of the
    number of events k occurring in a fixed interval when events happen
    independently at a constant average rate. It has a single parameter, the
    mean λ, or equivalently a rate r and an exposure t with λ = r * t.

    Probability mass function:
        P(X = k) = exp(-λ) * λ^k / k!  for k = 0, 1, 2, ...

    Non-integral k is evaluated through the gamma function. The cumulative
    functions are expressed through the regularized incomplete gamma
    functions: P(X <= k) = Q(k + 1, λ) and P(X > k) = P(k + 1, λ).
    """

    def pmf(
        parameters: Parametrization, k: NumericArray, *, policy: Policy, dtype: np.dtype[Any]
    ) -> NumericArray:
        """
        Probability mass function for Poisson distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mean: float (mean parameter)
        k : NumericArray
            Event counts at which to evaluate the probability mass function

        Returns
        -------
        NumericArray
            Probability mass values at points k
        """
        parameters = cast(_Mean, parameters)
        return cast("NumericArray", _poisson.pmf(parameters.mean, k, policy=policy, dtype=dtype))

    def cdf(
        parameters: Parametrization, k: NumericArray, *, policy: Policy, dtype: np.dtype[Any]
    ) -> NumericArray:
        """
        Cumulative distribution function for Poisson distribution.

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ k) for each point k
        """
        parameters = cast(_Mean, parameters)
        return cast("NumericArray", _poisson.cdf(parameters.mean, k, policy=policy, dtype=dtype))

    def sf(
        parameters: Parametrization, k: NumericArray, *, policy: Policy, dtype: np.dtype[Any]
    ) -> NumericArray:
        """
        Survival function (complemented CDF) for Poisson distribution.

        Returns
        -------
        NumericArray
            Probabilities P(X > k) for each point k
        """
        parameters = cast(_Mean, parameters)
        return cast("NumericArray", _poisson.sf(parameters.mean, k, policy=policy, dtype=dtype))

    def ppf(
        parameters: Parametrization, p: NumericArray, *, policy: Policy, dtype: np.dtype[Any]
    ) -> NumericArray:
        """
        Percent point function (inverse CDF) for Poisson distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mean: float (mean parameter)
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Smallest counts k with P(X ≤ k) ≥ p:
            - For p ≤ exp(-λ): returns 0.0
            - For p = 1: returns np.inf

        Raises
        ------
        DomainError
            If probability is outside [0, 1] or the mean is zero
        """
        parameters = cast(_Mean, parameters)
        return cast("NumericArray", _poisson.ppf(parameters.mean, p, policy=policy, dtype=dtype))

    def isf(
        parameters: Parametrization, q: NumericArray, *, policy: Policy, dtype: np.dtype[Any]
    ) -> NumericArray:
        """Inverse survival function: smallest counts k with P(X > k) ≤ q."""
        parameters = cast(_Mean, parameters)
        return cast("NumericArray", _poisson.isf(parameters.mean, q, policy=policy, dtype=dtype))

    def mean_func(parameters: Parametrization, _: Any, *, policy: Policy, dtype: Any) -> Any:
        """Mean of Poisson distribution."""
        parameters = cast(_Mean, parameters)
        return _poisson.mean_of(parameters.mean, dtype)

    def mode_func(parameters: Parametrization, _: Any, *, policy: Policy, dtype: Any) -> Any:
        """Mode of Poisson distribution, floor(λ)."""
        parameters = cast(_Mean, parameters)
        return _poisson.mode_of(parameters.mean, dtype)

    def var_func(parameters: Parametrization, _: Any, *, policy: Policy, dtype: Any) -> Any:
        """Variance of Poisson distribution."""
        parameters = cast(_Mean, parameters)
        return _poisson.variance_of(parameters.mean, dtype)

    def skew_func(parameters: Parametrization, _: Any, *, policy: Policy, dtype: Any) -> Any:
        """Skewness of Poisson distribution, 1/sqrt(λ)."""
        parameters = cast(_Mean, parameters)
        return _poisson.skewness_of(parameters.mean, dtype)

    def kurt_func(
        parameters: Parametrization, _: Any, *, policy: Policy, dtype: Any, excess: bool = False
    ) -> Any:
        """Raw or excess kurtosis of Poisson distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mean: float (mean parameter)
        excess : bool
            A value defines if there will be raw or excess kurtosis
            default is False

        Returns
        -------
        Any
            Kurtosis value, 3 + 1/λ raw or 1/λ excess
        """
        parameters = cast(_Mean, parameters)
        return _poisson.kurtosis_of(parameters.mean, dtype, excess=excess)

    def support_range_func(
        _1: Parametrization, _2: Any, *, policy: Policy, dtype: Any
    ) -> tuple[Any, Any]:
        """Range of k over which the mass is positive, [0, max value of dtype]."""
        return _poisson.support_range(dtype)

    def _support(_: Parametrization) -> IntegerLatticeDiscreteSupport:
        """Support of Poisson distribution"""
        return IntegerLatticeDiscreteSupport(residue=0, modulus=1, min_k=0)

    Poisson = ParametricFamily(
        name=FamilyName.POISSON,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["mean", "rate"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.SF: sf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.ISF: isf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.MODE: mode_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
            CharacteristicName.SUPPORT_RANGE: support_range_func,
        },
        support_by_parametrization=_support,
    )
    Poisson.__doc__ = POISSON_DOC

    @parametrization(family=Poisson, name="mean")
    class _Mean(Parametrization):
        """
        Mean parametrization of Poisson distribution.

        Parameters
        ----------
        mean : float
            Mean number of events (λ) of the distribution
        """

        mean: float = 1.0

        @constraint(description=MEAN_NZ_MESSAGE)
        def check_mean_positive(self) -> bool:
            """Check that the mean is finite and positive."""
            return math.isfinite(self.mean) and self.mean > 0

    @parametrization(family=Poisson, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization of Poisson distribution.

        Parameters
        ----------
        rate : float
            Mean number of events per unit of exposure
        exposure : float
            Length of the observation interval, λ = rate * exposure
        """

        rate: float
        exposure: float = 1.0

        @constraint(description="rate must be finite and > 0")
        def check_rate_positive(self) -> bool:
            """Check that the rate is finite and positive."""
            return math.isfinite(self.rate) and self.rate > 0

        @constraint(description="exposure must be finite and > 0")
        def check_exposure_positive(self) -> bool:
            """Check that the exposure is finite and positive."""
            return math.isfinite(self.exposure) and self.exposure > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Mean parametrization.

            Returns
            -------
            Parametrization
                Mean parametrization instance
            """
            return _Mean(mean=self.rate * self.exposure)

    ParametricFamilyRegister.register(Poisson)
