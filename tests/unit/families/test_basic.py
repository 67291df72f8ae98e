from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

from pysatl_poisson.families import ParametricFamily, Parametrization, constraint
from pysatl_poisson.types import (
    GenericCharacteristicName,
    UnivariateDiscrete,
)


def _scaled(p: Any, x: Any, **_: Any) -> Any:
    return p.value * x


class TestBaseFamily:
    PMF: GenericCharacteristicName = "pmf"
    CDF: GenericCharacteristicName = "cdf"
    MEAN: GenericCharacteristicName = "mean"

    def make_default_family(
        self,
        distr_characteristics: dict[GenericCharacteristicName, dict[str, object]] | None = None,
        name: str = "Default",
    ) -> ParametricFamily:
        if distr_characteristics is None:
            distr_characteristics = {
                self.PMF: {"base": _scaled},
                self.CDF: {"alt": _scaled, "base": _scaled},
                self.MEAN: {"base": lambda p, x, **_: p.value},
            }
        fam = ParametricFamily(
            name=name,
            distr_type=UnivariateDiscrete,
            distr_parametrizations=["base", "alt"],
            distr_characteristics=distr_characteristics,  # type: ignore[arg-type]
        )

        @fam.parametrization(name="base")
        class Base(Parametrization):
            value: float

            @constraint(description="value must be > 0")
            def check_value_positive(self) -> bool:
                return self.value > 0

        @fam.parametrization(name="alt")
        class Alt(Parametrization):
            value: float

            @constraint(description="value must be < 100")
            def check_value_bounded(self) -> bool:
                return self.value < 100

            def transform_to_base_parametrization(self) -> Parametrization:
                return Base(value=self.value)  # type: ignore[call-arg]

        return fam
