from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from itertools import islice
from math import inf, nan

import numpy as np
import pytest

from pysatl_poisson.distributions.support import (
    DiscreteSupport,
    IntegerLatticeDiscreteSupport,
    Support,
)


class TestIntegerLatticeDiscreteSupport:
    support_examples = {
        "counts": IntegerLatticeDiscreteSupport(residue=0, modulus=1, min_k=0),
        "boundless": IntegerLatticeDiscreteSupport(residue=0, modulus=1),
        "bounded_left": IntegerLatticeDiscreteSupport(residue=1, modulus=2, min_k=5),
        "bounded_right": IntegerLatticeDiscreteSupport(residue=1, modulus=3, max_k=10),
        "full_bounded": IntegerLatticeDiscreteSupport(residue=0, modulus=2, min_k=0, max_k=10),
    }

    def test_satisfies_protocols(self):
        support = self.support_examples["counts"]
        assert isinstance(support, Support)
        assert isinstance(support, DiscreteSupport)

    def test_invalid_modulus_raises(self):
        with pytest.raises(ValueError):
            IntegerLatticeDiscreteSupport(residue=0, modulus=0)

    @pytest.mark.parametrize(
        "support_name, point, expected_result",
        [
            ("counts", 0, True),
            ("counts", 7.0, True),
            ("counts", -1, False),
            ("counts", 2.5, False),
            ("counts", inf, False),
            ("counts", nan, False),
            ("boundless", -4, True),
            ("bounded_left", 1, False),
            ("bounded_left", 5, True),
            ("bounded_right", 1, True),
            ("bounded_right", 13, False),
            ("full_bounded", 0, True),
            ("full_bounded", -2, False),
        ],
    )
    def test_contains_scalar(self, support_name, point, expected_result):
        support = self.support_examples[support_name]
        assert (point in support) is expected_result
        assert support.contains(point) is expected_result

    @pytest.mark.parametrize(
        "support_name, points, expected_result",
        [
            ("counts", np.array([-1.0, 0.0, 0.5, 3.0, np.nan]), [False, True, False, True, False]),
            ("bounded_left", np.array([3, 4, 5, 6]), [False, False, True, False]),
            ("full_bounded", np.array([-2, 0, 10, 12]), [False, True, True, False]),
            ("boundless", np.array([]), []),
        ],
    )
    def test_contains_array(self, support_name, points, expected_result):
        support = self.support_examples[support_name]
        result = support.contains(points)
        assert isinstance(result, np.ndarray)
        assert result.tolist() == expected_result

    def test_iter_points(self):
        assert list(islice(self.support_examples["counts"], 5)) == [0, 1, 2, 3, 4]
        assert list(islice(self.support_examples["bounded_left"].iter_points(), 3)) == [5, 7, 9]
        assert list(self.support_examples["full_bounded"].iter_points()) == [0, 2, 4, 6, 8, 10]

    @pytest.mark.parametrize("support_name", ["boundless", "bounded_right"])
    def test_iter_points_requires_left_bound(self, support_name):
        with pytest.raises(RuntimeError):
            list(self.support_examples[support_name].iter_points())

    def test_iter_points_of_empty_lattice(self):
        support = IntegerLatticeDiscreteSupport(residue=0, modulus=2, min_k=10, max_k=5)
        assert list(support.iter_points()) == []
        assert support.first() is None

    @pytest.mark.parametrize(
        "support_name, expected_first",
        [
            ("counts", 0),
            ("boundless", None),
            ("bounded_left", 5),
            ("bounded_right", None),
            ("full_bounded", 0),
        ],
    )
    def test_first(self, support_name, expected_first):
        assert self.support_examples[support_name].first() == expected_first

    def test_first_aligns_to_lattice(self):
        support = IntegerLatticeDiscreteSupport(residue=1, modulus=3, min_k=2)
        assert support.first() == 4
        assert list(islice(support, 3)) == [4, 7, 10]
