"""
Functional Accessors
====================

Free functions over a Poisson distribution, for callers who prefer
``cdf(dist, k)`` to ``dist.query_method("cdf")(k)``. Every function resolves
the characteristic through the distribution's computation strategy, so the
distribution's policy and element type apply.

Examples
--------
>>> dist = make_poisson(4.0)
>>> round(float(pdf(dist, 4)), 4)
0.1954
>>> float(quantile(dist, 0.5))
4.0
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_poisson.families.configuration import configure_families_register
from pysatl_poisson.types import CharacteristicName, FamilyName

if TYPE_CHECKING:
    from typing import Any

    from numpy.typing import DTypeLike

    from pysatl_poisson.distributions.distribution import Distribution
    from pysatl_poisson.families.distribution import ParametricFamilyDistribution
    from pysatl_poisson.policies import Policy


def make_poisson(
    mean: float = 1.0, *, policy: Policy | None = None, dtype: DTypeLike = np.float64
) -> ParametricFamilyDistribution:
    """
    Create a Poisson distribution.

    Parameters
    ----------
    mean : float, default 1.0
        Mean number of events λ; must be finite and positive.
    policy : Policy, optional
        Error and quantile policy; the context default when omitted.
    dtype : DTypeLike, default numpy.float64
        Element type of computed values (``float32`` or ``float64``).

    Raises
    ------
    DomainError
        If ``mean`` is not finite and positive and the policy raises. Under a
        recovering policy the distribution is created anyway and its
        characteristics report the invalid mean.
    """
    family = configure_families_register().get(FamilyName.POISSON)
    return family.distribution(policy=policy, dtype=dtype, mean=mean)


def _evaluate(dist: Distribution, name: CharacteristicName, value: Any, **options: Any) -> Any:
    return dist.query_method(name)(value, **options)


def pdf(dist: Distribution, k: Any) -> Any:
    """Probability mass ``P(X = k)``."""
    return _evaluate(dist, CharacteristicName.PMF, k)


def cdf(dist: Distribution, k: Any) -> Any:
    """Cumulative probability ``P(X <= k)``."""
    return _evaluate(dist, CharacteristicName.CDF, k)


def cdf_complement(dist: Distribution, k: Any) -> Any:
    """Complemented cumulative probability ``P(X > k)``."""
    return _evaluate(dist, CharacteristicName.SF, k)


def quantile(dist: Distribution, p: Any) -> Any:
    """Smallest ``k`` with ``cdf(dist, k) >= p``."""
    return _evaluate(dist, CharacteristicName.PPF, p)


def quantile_complement(dist: Distribution, q: Any) -> Any:
    """Smallest ``k`` with ``cdf_complement(dist, k) <= q``."""
    return _evaluate(dist, CharacteristicName.ISF, q)


def mean(dist: Distribution) -> Any:
    return _evaluate(dist, CharacteristicName.MEAN, None)


def mode(dist: Distribution) -> Any:
    return _evaluate(dist, CharacteristicName.MODE, None)


def variance(dist: Distribution) -> Any:
    return _evaluate(dist, CharacteristicName.VAR, None)


def standard_deviation(dist: Distribution) -> Any:
    return _evaluate(dist, CharacteristicName.STD, None)


def skewness(dist: Distribution) -> Any:
    return _evaluate(dist, CharacteristicName.SKEW, None)


def kurtosis(dist: Distribution) -> Any:
    return _evaluate(dist, CharacteristicName.KURT, None)


def kurtosis_excess(dist: Distribution) -> Any:
    return _evaluate(dist, CharacteristicName.KURT, None, excess=True)


def median(dist: Distribution) -> Any:
    """Median, the quantile at one half."""
    return _evaluate(dist, CharacteristicName.MEDIAN, None)


def support_range(dist: Distribution) -> tuple[Any, Any]:
    """Range of ``k`` over which the mass is positive."""
    return _evaluate(dist, CharacteristicName.SUPPORT_RANGE, None)


def range_of_definition(dist: Distribution) -> tuple[Any, Any]:
    """Range of ``k`` accepted by the characteristics; same as the support."""
    return _evaluate(dist, CharacteristicName.SUPPORT_RANGE, None)


__all__ = [
    "make_poisson",
    "pdf",
    "cdf",
    "cdf_complement",
    "quantile",
    "quantile_complement",
    "mean",
    "mode",
    "variance",
    "standard_deviation",
    "skewness",
    "kurtosis",
    "kurtosis_excess",
    "median",
    "support_range",
    "range_of_definition",
]
