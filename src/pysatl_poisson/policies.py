"""
Evaluation Policies
===================

A :class:`Policy` decides what happens when an argument falls outside the
domain of a characteristic, and how the quantiles of a discrete distribution
are reported.

- :class:`ErrorAction`: raise :class:`DomainError`, return ``NaN`` silently,
  or return ``NaN`` after emitting :class:`DomainErrorWarning`.
- :class:`DiscreteQuantile`: report the smallest integer satisfying the
  quantile inequality, or the real-valued root of the incomplete gamma
  relation.

The default policy lives in a context variable. Distributions capture it once,
at construction, so changing the default never alters existing objects.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import os
import math
import warnings
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

_logger = logging.getLogger(__name__)

# Warnings are attributed to the first frame outside the package.
_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__)) + os.sep


class DomainError(ValueError):
    """
    Raised when an argument lies outside the domain of a characteristic.

    Parameters
    ----------
    function : str
        Name of the operation that rejected the argument.
    message : str
        Description of the violated requirement.
    value : Any
        The offending value.
    """

    def __init__(self, function: str, message: str, value: Any) -> None:
        self.function = function
        self.message = message
        self.value = value
        super().__init__(f"{function}: {message} (got {value})")


class DomainErrorWarning(UserWarning):
    """Emitted instead of :class:`DomainError` under ``ErrorAction.WARN``."""


class ErrorAction(StrEnum):
    RAISE = "raise"
    IGNORE = "ignore"
    WARN = "warn"


class DiscreteQuantile(StrEnum):
    """
    Reporting mode for quantiles of discrete distributions.

    Attributes
    ----------
    INTEGER_ROUND_UP : str
        Smallest integer ``k`` with ``cdf(k) >= p`` (``sf(k) <= q`` for the
        complement).
    REAL : str
        Real-valued solution of the incomplete gamma relation, not rounded.
    """

    INTEGER_ROUND_UP = "integer_round_up"
    REAL = "real"


@dataclass(frozen=True, slots=True)
class Policy:
    """
    Policy consulted by every characteristic of a distribution.

    Parameters
    ----------
    domain_error : ErrorAction, default ErrorAction.RAISE
        Reaction to arguments outside the domain.
    discrete_quantile : DiscreteQuantile, default DiscreteQuantile.INTEGER_ROUND_UP
        How quantiles are reported.
    """

    domain_error: ErrorAction = ErrorAction.RAISE
    discrete_quantile: DiscreteQuantile = DiscreteQuantile.INTEGER_ROUND_UP

    def __post_init__(self) -> None:
        object.__setattr__(self, "domain_error", ErrorAction(self.domain_error))
        object.__setattr__(self, "discrete_quantile", DiscreteQuantile(self.discrete_quantile))

    def report_domain_error(self, function: str, message: str, value: Any) -> float:
        """
        Report a domain error.

        Parameters
        ----------
        function : str
            Name of the operation that rejected the argument.
        message : str
            Description of the violated requirement.
        value : Any
            The offending value.

        Returns
        -------
        float
            ``NaN``, the result to hand back in place of a computed value.

        Raises
        ------
        DomainError
            If the policy action is ``ErrorAction.RAISE``.
        """
        if self.domain_error is ErrorAction.RAISE:
            raise DomainError(function, message, value)

        _logger.debug("Domain error in %s: %s (got %s)", function, message, value)
        if self.domain_error is ErrorAction.WARN:
            warnings.warn(
                f"{function}: {message} (got {value})",
                DomainErrorWarning,
                skip_file_prefixes=(_PACKAGE_DIR,),
            )
        return math.nan


_DEFAULT_POLICY: ContextVar[Policy] = ContextVar("pysatl_poisson_policy", default=Policy())


def get_policy() -> Policy:
    """Return the default policy of the current context."""
    return _DEFAULT_POLICY.get()


def set_policy(policy: Policy) -> None:
    """Replace the default policy of the current context."""
    _DEFAULT_POLICY.set(policy)


@contextmanager
def policy_context(**overrides: Any) -> Iterator[Policy]:
    """
    Temporarily override fields of the default policy.

    Parameters
    ----------
    **overrides
        Field values passed to :func:`dataclasses.replace`.

    Yields
    ------
    Policy
        The policy in effect inside the block.

    Examples
    --------
    >>> with policy_context(domain_error="ignore"):
    ...     dist = make_poisson(0.0)
    """
    policy = replace(get_policy(), **overrides)
    token = _DEFAULT_POLICY.set(policy)
    try:
        yield policy
    finally:
        _DEFAULT_POLICY.reset(token)


__all__ = [
    "DomainError",
    "DomainErrorWarning",
    "ErrorAction",
    "DiscreteQuantile",
    "Policy",
    "get_policy",
    "set_policy",
    "policy_context",
]
