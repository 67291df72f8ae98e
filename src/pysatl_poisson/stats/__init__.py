"""
Numerical Backends
==================

- :mod:`.special`: incomplete gamma functions, their inverses in the shape
  parameter, ``lgamma`` and the factorial table;
- :mod:`.poisson`: validated, array-aware Poisson evaluators built on them.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
