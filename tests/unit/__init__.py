"""
PySATL Poisson
==============

Unit tests of the Poisson family: evaluators, special functions, policies
and the parametric family framework.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
