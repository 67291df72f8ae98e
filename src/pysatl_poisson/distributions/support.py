"""
Support primitives for discrete distributions.

- :class:`Support`: anything that can answer membership queries.
- :class:`DiscreteSupport`: ordered enumeration of a discrete set of points.
- :class:`IntegerLatticeDiscreteSupport`: ``{residue + n * modulus}``,
  optionally bounded; the Poisson law lives on the lattice ``k >= 0``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from itertools import count, takewhile
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_poisson.types import BoolArray, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterator


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def iter_points(self) -> Iterator[Number]: ...


@dataclass(frozen=True, slots=True)
class IntegerLatticeDiscreteSupport(DiscreteSupport):
    """
    Integer lattice ``{residue + n * modulus | n in Z}`` clipped to
    ``[min_k, max_k]``.

    Parameters
    ----------
    residue : int
        Any point of the lattice.
    modulus : int
        Positive step between consecutive points.
    min_k, max_k : int or None
        Inclusive bounds; ``None`` leaves that side unbounded.
    """

    residue: int = 0
    modulus: int = 1
    min_k: int | None = None
    max_k: int | None = None

    def __post_init__(self) -> None:
        if self.modulus <= 0:
            raise ValueError("modulus must be a positive integer.")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        with np.errstate(invalid="ignore"):
            mask = np.isfinite(xf) & (np.floor(xf) == xf)
            v = np.where(mask, xf, self.residue).astype(np.int64)
        if self.min_k is not None:
            mask &= v >= self.min_k
        if self.max_k is not None:
            mask &= v <= self.max_k
        mask &= ((v - self.residue) % self.modulus) == 0

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def _align_up(self, k: int) -> int:
        offset = (k - self.residue) % self.modulus
        return k if offset == 0 else k + self.modulus - offset

    def first(self) -> int | None:
        if self.min_k is None:
            return None
        first = self._align_up(self.min_k)
        if self.max_k is not None and first > self.max_k:
            return None
        return first

    def iter_points(self) -> Iterator[int]:
        if self.min_k is None:
            raise RuntimeError(
                "Cannot iterate points of a left-unbounded IntegerLatticeDiscreteSupport. "
                "Provide min_k to enable enumeration."
            )
        first = self.first()
        if first is None:
            return iter(())
        points = count(first, self.modulus)
        if self.max_k is None:
            return points
        max_k = self.max_k
        return takewhile(lambda k: k <= max_k, points)

    __iter__ = iter_points


__all__ = [
    "Support",
    "DiscreteSupport",
    "IntegerLatticeDiscreteSupport",
]
