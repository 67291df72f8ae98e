"""
Distributions subpackage

Interfaces and default implementations for probability distributions:

- distribution protocol (:mod:`.distribution`);
- computation primitives (:mod:`.computation`);
- derived-characteristic fitters and their registry (:mod:`.fitters`,
  :mod:`.registry`);
- pluggable computation strategies (:mod:`.strategies`);
- discrete supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import (
    AnalyticalComputation,
    ComputationMethod,
    FittedComputationMethod,
)
from .distribution import Distribution
from .registry import characteristic_registry, reset_characteristic_registry
from .strategies import (
    ComputationStrategy,
    DefaultComputationStrategy,
)
from .support import DiscreteSupport, IntegerLatticeDiscreteSupport, Support

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "ComputationMethod",
    "FittedComputationMethod",
    # distribution
    "Distribution",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
    # registry
    "characteristic_registry",
    "reset_characteristic_registry",
    # support
    "Support",
    "DiscreteSupport",
    "IntegerLatticeDiscreteSupport",
]
