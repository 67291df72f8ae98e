"""
Built-in distribution families.

This package contains implementations of standard statistical distribution families
that are available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_poisson.families.builtins.discrete import configure_poisson_family

__all__ = [
    "configure_poisson_family",
]
