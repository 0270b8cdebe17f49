# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pandas as pd
import pytest

from offplan.comparison import TIED_SCORE, ComparisonMetric


def metric(values, higher_is_better=True) -> ComparisonMetric:
    return ComparisonMetric(
        name="metric",
        values=pd.Series(values, index=[f"q{i}" for i in range(len(values))]),
        higher_is_better=higher_is_better,
    )


class TestNormalized:
    def test_min_max_scaling(self):
        scores = metric([10.0, 15.0, 20.0]).normalized()
        assert scores.tolist() == pytest.approx([0, 50, 100])

    def test_lower_is_better_inverted(self):
        scores = metric([10.0, 15.0, 20.0], higher_is_better=False).normalized()
        assert scores.tolist() == pytest.approx([100, 50, 0])

    def test_tie(self):
        scores = metric([7.0, 7.0]).normalized()
        assert scores.tolist() == [TIED_SCORE, TIED_SCORE]

    def test_keeps_quote_index(self):
        scores = metric([1.0, 3.0]).normalized()
        assert list(scores.index) == ["q0", "q1"]
        assert scores.name == "metric"


class TestBestQuote:
    def test_unique_best(self):
        assert metric([1.0, 3.0, 2.0]).best_quote_id() == "q1"

    def test_lower_is_better(self):
        assert metric([1.0, 3.0, 2.0], higher_is_better=False).best_quote_id() == "q0"

    def test_shared_best(self):
        assert metric([3.0, 3.0, 2.0]).best_quote_id() is None
