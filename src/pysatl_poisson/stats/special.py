"""
Special Functions
=================

Numerical primitives the Poisson characteristics are expressed in:

- regularized incomplete gamma functions ``P(a, x)`` and ``Q(a, x)``;
- their inverses with respect to the shape ``a``;
- ``lgamma`` and a factorial table valid below :func:`max_factorial`;
- :class:`FloatTraits` describing each supported element type.

The incomplete gamma functions and ``lgamma`` come from :mod:`scipy.special`.
SciPy has no inverse in ``a``, so it is obtained by bracketing the root of the
monotone map ``a -> P(a, x)`` (or ``Q``) and refining it with
:func:`scipy.optimize.toms748`.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import numpy as np
from scipy.optimize import toms748
from scipy.special import factorial, gammainc, gammaincc, gammaln

if TYPE_CHECKING:
    from numpy.typing import DTypeLike

    from pysatl_poisson.types import NumericArray, ScalarFunc

_logger = logging.getLogger(__name__)

# Largest n with n! finite in the element type.
_MAX_FACTORIAL: dict[np.dtype[Any], int] = {
    np.dtype(np.float32): 34,
    np.dtype(np.float64): 170,
}

_MAX_BRACKET_STEPS = 2100


@dataclass(frozen=True, slots=True)
class FloatTraits:
    """
    Numeric properties of a floating-point element type.

    Parameters
    ----------
    dtype : numpy.dtype
        The element type.
    max_factorial : int
        Largest argument accepted by the factorial table.
    """

    dtype: np.dtype[Any]
    max_factorial: int

    @property
    def epsilon(self) -> float:
        """Machine epsilon of the element type."""
        return float(np.finfo(self.dtype).eps)

    @property
    def max_value(self) -> float:
        """Largest finite value of the element type."""
        return float(np.finfo(self.dtype).max)

    @property
    def min_normal(self) -> float:
        """Smallest positive normal value of the element type."""
        return float(np.finfo(self.dtype).tiny)


@lru_cache(maxsize=None)
def _float_traits(dtype: np.dtype[Any]) -> FloatTraits:
    try:
        return FloatTraits(dtype=dtype, max_factorial=_MAX_FACTORIAL[dtype])
    except KeyError as exc:
        supported = ", ".join(str(d) for d in _MAX_FACTORIAL)
        raise TypeError(f"Unsupported element type {dtype}; expected one of {supported}") from exc


def float_traits(dtype: DTypeLike) -> FloatTraits:
    """
    Get the traits of a supported element type.

    Raises
    ------
    TypeError
        If ``dtype`` is not ``float32`` or ``float64``.
    """
    return _float_traits(np.dtype(dtype))


def max_factorial(dtype: DTypeLike = np.float64) -> int:
    """Largest ``n`` for which :func:`unchecked_factorial` is defined."""
    return float_traits(dtype).max_factorial


@lru_cache(maxsize=None)
def _factorial_table(dtype: np.dtype[Any]) -> NumericArray:
    n = np.arange(_float_traits(dtype).max_factorial + 1)
    table = factorial(n, exact=False).astype(dtype)
    table.setflags(write=False)
    return table


def unchecked_factorial(n: Any, dtype: DTypeLike = np.float64) -> Any:
    """
    Look up ``n!`` in the factorial table of ``dtype``.

    ``n`` must hold non-negative integers not above :func:`max_factorial`;
    no check is made.
    """
    table = _factorial_table(np.dtype(dtype))
    return table[np.asarray(n).astype(np.intp)]


def lgamma(x: Any) -> Any:
    """Natural logarithm of the gamma function."""
    return gammaln(x)


def gamma_p(a: Any, x: Any) -> Any:
    """Regularized lower incomplete gamma function ``P(a, x)``."""
    return gammainc(a, x)


def gamma_q(a: Any, x: Any) -> Any:
    """Regularized upper incomplete gamma function ``Q(a, x) = 1 - P(a, x)``."""
    return gammaincc(a, x)


def _bracket_increasing(func: ScalarFunc, guess: float) -> tuple[float, float]:
    """Find ``lo < hi`` with ``func(lo) <= 0 <= func(hi)`` for an increasing ``func``."""
    if func(guess) < 0:
        lo, hi = guess, 2.0 * guess
        for _ in range(_MAX_BRACKET_STEPS):
            if func(hi) >= 0:
                return lo, hi
            lo, hi = hi, 2.0 * hi
    else:
        lo, hi = 0.5 * guess, guess
        for _ in range(_MAX_BRACKET_STEPS):
            if func(lo) <= 0:
                return lo, hi
            lo, hi = 0.5 * lo, lo
    raise RuntimeError(f"Unable to bracket a root starting from {guess!r}")


def _solve_increasing(func: ScalarFunc, guess: float) -> float:
    lo, hi = _bracket_increasing(func, guess)
    _logger.debug("Root bracketed in [%r, %r]", lo, hi)
    f_lo = func(lo)
    if f_lo == 0:
        return lo
    if math.isinf(hi):
        return math.inf
    f_hi = func(hi)
    if f_hi == 0:
        return hi
    return float(toms748(func, lo, hi))


def gamma_q_inva(x: float, q: float) -> float:
    """
    Inverse of ``Q(a, x)`` with respect to ``a``.

    Parameters
    ----------
    x : float
        Second argument of ``Q``, ``x > 0``.
    q : float
        Target value in ``[0, 1]``.

    Returns
    -------
    float
        ``a > 0`` such that ``Q(a, x) = q``. ``Q`` grows from 0 to 1 as ``a``
        runs over ``(0, inf)``, so ``q = 0`` yields ``0.0`` and ``q = 1``
        yields ``inf``.
    """
    if q == 0:
        return 0.0
    if q == 1:
        return math.inf

    def residual(a: float) -> float:
        return float(gammaincc(a, x)) - q

    return _solve_increasing(residual, max(x, 1.0))


def gamma_p_inva(x: float, p: float) -> float:
    """
    Inverse of ``P(a, x)`` with respect to ``a``.

    Parameters
    ----------
    x : float
        Second argument of ``P``, ``x > 0``.
    p : float
        Target value in ``[0, 1]``.

    Returns
    -------
    float
        ``a > 0`` such that ``P(a, x) = p``. ``P`` decreases from 1 to 0 as
        ``a`` runs over ``(0, inf)``, so ``p = 1`` yields ``0.0`` and ``p = 0``
        yields ``inf``.
    """
    if p == 1:
        return 0.0
    if p == 0:
        return math.inf

    def residual(a: float) -> float:
        return p - float(gammainc(a, x))

    return _solve_increasing(residual, max(x, 1.0))


__all__ = [
    "FloatTraits",
    "float_traits",
    "max_factorial",
    "unchecked_factorial",
    "lgamma",
    "gamma_p",
    "gamma_q",
    "gamma_p_inva",
    "gamma_q_inva",
]
