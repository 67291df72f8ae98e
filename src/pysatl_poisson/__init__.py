"""
PySATL Poisson
==============

The Poisson distribution as a PySATL parametric family: probability mass,
cumulative and complemented cumulative probabilities, quantiles of both tails
and the descriptive moments, evaluated through the incomplete gamma functions
with a configurable domain-error policy.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .accessors import *
from .accessors import __all__ as _accessors_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .families import *
from .families import __all__ as _family_all
from .policies import *
from .policies import __all__ as _policies_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-poisson")
__all__ = [
    "__version__",
    *_accessors_all,
    *_distr_all,
    *_family_all,
    *_policies_all,
    *_types_all,
]

del _accessors_all
del _distr_all
del _family_all
del _policies_all
del _types_all
