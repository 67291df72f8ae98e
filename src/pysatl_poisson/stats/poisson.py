"""
Poisson Evaluators
==================

Array-aware evaluation of the Poisson characteristics for a mean ``λ``.

Every evaluator validates its arguments before computing anything. Invalid
arguments are reported through the :class:`~pysatl_poisson.policies.Policy`:
the raising policy aborts the call with
:class:`~pysatl_poisson.policies.DomainError`, the recovering policies place
``NaN`` at the offending positions and compute the rest.

The count ``k`` is accepted as a float. Non-integral counts are evaluated
through the gamma function, i.e. the mass function is the continuous
extension ``exp(-λ) λ^k / Γ(k + 1)``; callers that want the strict discrete
law must round ``k`` themselves.

Scalar arguments produce NumPy scalars of the element type, arrays produce
arrays of the same shape.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from pysatl_poisson.policies import DiscreteQuantile
from pysatl_poisson.stats.special import (
    float_traits,
    gamma_p,
    gamma_p_inva,
    gamma_q,
    gamma_q_inva,
    lgamma,
    unchecked_factorial,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from numpy.typing import DTypeLike

    from pysatl_poisson.policies import Policy
    from pysatl_poisson.types import BoolArray, NumericArray

_logger = logging.getLogger(__name__)

MEAN_MESSAGE = "mean must be finite and >= 0"
MEAN_NZ_MESSAGE = "mean must be finite and > 0"
K_MESSAGE = "k must be finite and >= 0"
PROBABILITY_MESSAGE = "probability must be in [0, 1]"


# --------------------------------------------------------------------- #
# Validation
# --------------------------------------------------------------------- #


def check_mean(function: str, mean: float, policy: Policy) -> float | None:
    """
    Check that the mean is finite and non-negative.

    Returns
    -------
    float or None
        ``None`` if the mean is valid, otherwise the error result produced by
        the policy.
    """
    if not math.isfinite(mean) or mean < 0:
        return policy.report_domain_error(function, MEAN_MESSAGE, mean)
    return None


def check_mean_nz(function: str, mean: float, policy: Policy) -> float | None:
    """
    Check that the mean is finite and strictly positive.

    Returns
    -------
    float or None
        ``None`` if the mean is valid, otherwise the error result produced by
        the policy.
    """
    if not math.isfinite(mean) or mean <= 0:
        return policy.report_domain_error(function, MEAN_NZ_MESSAGE, mean)
    return None


def _check_elements(
    function: str, values: NumericArray, invalid: BoolArray, message: str, policy: Policy
) -> BoolArray:
    if invalid.any():
        policy.report_domain_error(function, message, values[invalid].flat[0])
    return invalid


def check_k(function: str, k: NumericArray, policy: Policy) -> BoolArray:
    """
    Check that event counts are finite and non-negative.

    Returns
    -------
    BoolArray
        Mask of the offending elements (empty of ``True`` when all are valid).
    """
    with np.errstate(invalid="ignore"):
        invalid = ~np.isfinite(k) | (k < 0)
    return _check_elements(function, k, invalid, K_MESSAGE, policy)


def check_probability(function: str, p: NumericArray, policy: Policy) -> BoolArray:
    """
    Check that probabilities are finite and lie in ``[0, 1]``.

    Returns
    -------
    BoolArray
        Mask of the offending elements.
    """
    with np.errstate(invalid="ignore"):
        invalid = ~np.isfinite(p) | (p < 0) | (p > 1)
    return _check_elements(function, p, invalid, PROBABILITY_MESSAGE, policy)


def _as_array(x: Any, dtype: DTypeLike) -> NumericArray:
    return np.asarray(x, dtype=dtype)


def _filled(shape_like: NumericArray, value: float) -> Any:
    return np.full_like(shape_like, value)[()]


# --------------------------------------------------------------------- #
# Probability mass function
# --------------------------------------------------------------------- #


def pmf_by_factorial(mean: float, k: NumericArray, dtype: DTypeLike = np.float64) -> NumericArray:
    """
    ``exp(-λ) λ^k / k!`` with ``k!`` taken from the factorial table.

    ``k`` must hold integers below ``max_factorial(dtype)``.
    """
    lam = np.asarray(mean, dtype=dtype)
    k = np.asarray(k, dtype=dtype)
    return np.exp(-lam) * np.power(lam, k) / unchecked_factorial(k, dtype)


def pmf_by_lgamma(mean: float, k: NumericArray, dtype: DTypeLike = np.float64) -> NumericArray:
    """
    ``exp(-λ + k ln λ - lgamma(k + 1))``, free of overflow for large ``k``.

    The exponent is accumulated in double precision whatever the element type.
    """
    lam = np.asarray(mean, dtype=np.float64)
    k = np.asarray(k, dtype=np.float64)
    return np.exp(-lam + np.log(lam) * k - lgamma(k + 1)).astype(dtype, copy=False)


def pmf(mean: float, k: Any, *, policy: Policy, dtype: DTypeLike = np.float64) -> Any:
    """
    Probability mass ``P(X = k)``.

    Parameters
    ----------
    mean : float
        Mean ``λ``; zero is accepted and yields zero mass everywhere.
    k : float or NumericArray
        Event counts.
    policy : Policy
        Error policy.
    dtype : DTypeLike
        Element type.

    Returns
    -------
    float or NumericArray
        Probability mass at ``k``.
    """
    function = "pmf"
    k_arr = _as_array(k, dtype)
    if (error := check_mean(function, mean, policy)) is not None:
        return _filled(k_arr, error)
    invalid = check_k(function, k_arr, policy)
    safe_k = np.where(invalid, 0, k_arr)

    if mean == 0:
        # All-zero convention for a zero mean, k = 0 included.
        out = np.zeros_like(safe_k)
    else:
        traits = float_traits(dtype)
        out = np.empty_like(safe_k)
        zero = safe_k == 0
        fast = ~zero & (np.floor(safe_k) == safe_k) & (safe_k < traits.max_factorial)
        # exp(-λ) is subnormal here and keeps too few bits for the product.
        if fast.any() and mean > -math.log(traits.min_normal):
            _logger.debug("pmf: mean %s leaves the factorial path, using lgamma", mean)
            fast[...] = False
        slow = ~zero & ~fast

        out[zero] = np.exp(-np.asarray(mean, dtype=dtype))
        with np.errstate(over="ignore", invalid="ignore"):
            out[fast] = pmf_by_factorial(mean, safe_k[fast], dtype)
        # λ^k overflows well before k! does.
        overflowed = fast & ~(np.isfinite(out) & (out > 0))
        if overflowed.any():
            _logger.debug("pmf: %d factorial-path values overflowed, using lgamma", overflowed.sum())
            slow |= overflowed
        out[slow] = pmf_by_lgamma(mean, safe_k[slow], dtype)

    out[invalid] = np.nan
    return out[()]


# --------------------------------------------------------------------- #
# Cumulative distribution and its complement
# --------------------------------------------------------------------- #


def _cumulative(
    function: str,
    mean: float,
    k: Any,
    *,
    policy: Policy,
    dtype: DTypeLike,
    zero_mean_value: float,
    at_zero: Callable[[NumericArray], NumericArray],
    tail: Callable[[NumericArray, NumericArray], NumericArray],
) -> Any:
    k_arr = _as_array(k, dtype)
    if (error := check_mean(function, mean, policy)) is not None:
        return _filled(k_arr, error)
    invalid = check_k(function, k_arr, policy)
    safe_k = np.where(invalid, 0, k_arr)

    if mean == 0:
        out = np.full_like(safe_k, zero_mean_value)
    else:
        lam = np.asarray(mean, dtype=dtype)
        out = np.empty_like(safe_k)
        zero = safe_k == 0
        out[zero] = at_zero(lam)
        out[~zero] = tail(safe_k[~zero] + 1, lam)

    out[invalid] = np.nan
    return out[()]


def cdf(mean: float, k: Any, *, policy: Policy, dtype: DTypeLike = np.float64) -> Any:
    """
    Cumulative probability ``P(X <= k) = Q(k + 1, λ)``.

    A zero mean yields zero, ``k = 0`` yields ``exp(-λ)``.
    """
    return _cumulative(
        "cdf",
        mean,
        k,
        policy=policy,
        dtype=dtype,
        zero_mean_value=0.0,
        at_zero=lambda lam: np.exp(-lam),
        tail=gamma_q,
    )


def sf(mean: float, k: Any, *, policy: Policy, dtype: DTypeLike = np.float64) -> Any:
    """
    Complemented cumulative probability ``P(X > k) = P(k + 1, λ)``.

    Computed directly rather than as ``1 - cdf`` so that values close to zero
    keep their relative precision. A zero mean yields one, ``k = 0`` yields
    ``-expm1(-λ)``.
    """
    return _cumulative(
        "sf",
        mean,
        k,
        policy=policy,
        dtype=dtype,
        zero_mean_value=1.0,
        at_zero=lambda lam: -np.expm1(-lam),
        tail=gamma_p,
    )


# --------------------------------------------------------------------- #
# Quantiles
# --------------------------------------------------------------------- #


def _scalar_cdf(mean: float, k: int) -> float:
    if k == 0:
        return math.exp(-mean)
    return float(gamma_q(k + 1, mean))


def _scalar_sf(mean: float, k: int) -> float:
    if k == 0:
        return -math.expm1(-mean)
    return float(gamma_p(k + 1, mean))


def _smallest_k_cdf_at_least(mean: float, p: float, estimate: float) -> float:
    k = max(math.ceil(estimate), 0)
    while k > 0 and _scalar_cdf(mean, k - 1) >= p:
        k -= 1
    while _scalar_cdf(mean, k) < p:
        k += 1
    return float(k)


def _smallest_k_sf_at_most(mean: float, q: float, estimate: float) -> float:
    k = max(math.ceil(estimate), 0)
    while k > 0 and _scalar_sf(mean, k - 1) <= q:
        k -= 1
    while _scalar_sf(mean, k) > q:
        k += 1
    return float(k)


def _quantile(
    function: str,
    mean: float,
    prob: Any,
    *,
    policy: Policy,
    dtype: DTypeLike,
    solve: Callable[[float], float],
) -> Any:
    p_arr = _as_array(prob, dtype)
    invalid = check_probability(function, p_arr, policy)
    if (error := check_mean_nz(function, mean, policy)) is not None:
        return _filled(p_arr, error)

    out = np.empty_like(p_arr)
    for index in np.ndindex(p_arr.shape):
        out[index] = np.nan if invalid[index] else solve(float(p_arr[index]))
    return out[()]


def ppf(mean: float, p: Any, *, policy: Policy, dtype: DTypeLike = np.float64) -> Any:
    """
    Quantile: the smallest ``k`` with ``cdf(k) >= p``.

    ``p <= exp(-λ)`` is answered with zero without solving anything. Otherwise
    ``k + 1`` solves ``Q(k + 1, λ) = p``; under
    ``DiscreteQuantile.INTEGER_ROUND_UP`` the root is moved to the smallest
    integer that satisfies the inequality, under ``DiscreteQuantile.REAL`` it
    is returned as is. ``p = 1`` yields ``inf``.

    Raises
    ------
    DomainError
        If ``p`` is outside ``[0, 1]`` or the mean is not strictly positive
        (raising policy only).
    """

    def solve(p: float) -> float:
        if p <= math.exp(-mean):
            return 0.0
        estimate = gamma_q_inva(mean, p) - 1
        if policy.discrete_quantile is DiscreteQuantile.REAL or math.isinf(estimate):
            return estimate
        return _smallest_k_cdf_at_least(mean, p, estimate)

    return _quantile("ppf", mean, p, policy=policy, dtype=dtype, solve=solve)


def isf(mean: float, q: Any, *, policy: Policy, dtype: DTypeLike = np.float64) -> Any:
    """
    Quantile of the complement: the smallest ``k`` with ``sf(k) <= q``.

    Zero is returned when ``-q <= expm1(-λ)``, i.e. when ``sf(0) <= q``.
    Otherwise ``k + 1`` solves ``P(k + 1, λ) = q`` and is rounded as in
    :func:`ppf`. ``q = 0`` yields ``inf``.
    """

    def solve(q: float) -> float:
        if -q <= math.expm1(-mean):
            return 0.0
        estimate = gamma_p_inva(mean, q) - 1
        if policy.discrete_quantile is DiscreteQuantile.REAL or math.isinf(estimate):
            return estimate
        return _smallest_k_sf_at_most(mean, q, estimate)

    return _quantile("isf", mean, q, policy=policy, dtype=dtype, solve=solve)


# --------------------------------------------------------------------- #
# Moments
# --------------------------------------------------------------------- #


# The mean is validated once, at construction. Under a recovering policy an
# invalid mean flows through IEEE arithmetic (inf, NaN) instead of raising.


def _scalar(value: float, dtype: DTypeLike) -> Any:
    return np.dtype(dtype).type(value)


def mean_of(mean: float, dtype: DTypeLike = np.float64) -> Any:
    return _scalar(mean, dtype)


def mode_of(mean: float, dtype: DTypeLike = np.float64) -> Any:
    return np.floor(_scalar(mean, dtype))


def variance_of(mean: float, dtype: DTypeLike = np.float64) -> Any:
    return _scalar(mean, dtype)


def skewness_of(mean: float, dtype: DTypeLike = np.float64) -> Any:
    lam = _scalar(mean, dtype)
    with np.errstate(divide="ignore", invalid="ignore"):
        return lam.dtype.type(1) / np.sqrt(lam)


def kurtosis_of(mean: float, dtype: DTypeLike = np.float64, excess: bool = False) -> Any:
    """Raw kurtosis ``3 + 1/λ``, or the excess ``1/λ``."""
    lam = _scalar(mean, dtype)
    with np.errstate(divide="ignore", invalid="ignore"):
        excess_kurtosis = lam.dtype.type(1) / lam
    if excess:
        return excess_kurtosis
    return lam.dtype.type(3) + excess_kurtosis


def support_range(dtype: DTypeLike = np.float64) -> tuple[Any, Any]:
    """
    Range of ``k`` over which the mass is positive.

    The upper end is the largest finite value of the element type rather than
    infinity.
    """
    return _scalar(0, dtype), _scalar(float_traits(dtype).max_value, dtype)


__all__ = [
    "check_mean",
    "check_mean_nz",
    "check_k",
    "check_probability",
    "pmf_by_factorial",
    "pmf_by_lgamma",
    "pmf",
    "cdf",
    "sf",
    "ppf",
    "isf",
    "mean_of",
    "mode_of",
    "variance_of",
    "skewness_of",
    "kurtosis_of",
    "support_range",
]
