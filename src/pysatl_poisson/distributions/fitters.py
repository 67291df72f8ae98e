"""
Derived characteristics built on top of other characteristics.

- ``std`` as the square root of ``var``;
- ``median`` as ``ppf(0.5)``.

Neither has a closed form of its own, so a distribution's median is always the
value its quantile function reports.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, cast

import numpy as np
from mypy_extensions import KwArg

from pysatl_poisson.distributions.computation import FittedComputationMethod
from pysatl_poisson.types import CharacteristicName

if TYPE_CHECKING:
    from pysatl_poisson.distributions.distribution import Distribution
    from pysatl_poisson.distributions.strategies import Method
    from pysatl_poisson.types import GenericCharacteristicName


def _resolve(distribution: Distribution, name: GenericCharacteristicName) -> Method[Any, Any]:
    """
    Resolve a characteristic from the distribution.

    Raises
    ------
    RuntimeError
        If the distribution does not provide a computation strategy.
    """
    try:
        return distribution.query_method(name)
    except AttributeError as e:
        raise RuntimeError(
            "Distribution must provide computation_strategy.query_method(name, distribution)."
        ) from e


def fit_var_to_std(distribution: Distribution, /, **_: Any) -> FittedComputationMethod[Any, Any]:
    """Build ``std`` as ``sqrt(var)``."""
    var_func = _resolve(distribution, CharacteristicName.VAR)

    def _std(data: Any, **kwargs: Any) -> Any:
        return np.sqrt(var_func(data, **kwargs))

    return FittedComputationMethod[Any, Any](
        target=CharacteristicName.STD,
        sources=[CharacteristicName.VAR],
        func=cast(Callable[[Any, KwArg(Any)], Any], _std),
    )


def fit_ppf_to_median(
    distribution: Distribution, /, **_: Any
) -> FittedComputationMethod[Any, Any]:
    """Build ``median`` as ``ppf(0.5)``; the argument passed to it is ignored."""
    ppf_func = _resolve(distribution, CharacteristicName.PPF)

    def _median(_data: Any, **kwargs: Any) -> Any:
        return ppf_func(0.5, **kwargs)

    return FittedComputationMethod[Any, Any](
        target=CharacteristicName.MEDIAN,
        sources=[CharacteristicName.PPF],
        func=cast(Callable[[Any, KwArg(Any)], Any], _median),
    )
