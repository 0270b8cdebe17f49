# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Appreciation Curve Unit Tests

Phase selection, compounding across phase boundaries and monthly
interpolation on the reference quote (10% / 6% / 3%, two construction
years, five growth years).
"""

from __future__ import annotations

import numpy as np
import pytest

from offplan.appreciation import AppreciationCurve
from offplan.core.primitives import AppreciationPhaseEnum

BASE = 1_000_000.0


@pytest.fixture
def curve(sample_inputs) -> AppreciationCurve:
    return AppreciationCurve.from_inputs(sample_inputs)


class TestPhases:
    def test_construction_years_from_timeline(self, curve):
        assert curve.construction_years == 2

    @pytest.mark.parametrize(
        "year, phase",
        [
            (1, AppreciationPhaseEnum.CONSTRUCTION),
            (2, AppreciationPhaseEnum.CONSTRUCTION),
            (3, AppreciationPhaseEnum.GROWTH),
            (7, AppreciationPhaseEnum.GROWTH),
            (8, AppreciationPhaseEnum.MATURE),
            (30, AppreciationPhaseEnum.MATURE),
        ],
    )
    def test_phase_for_year(self, curve, year, phase):
        assert curve.phase_for_year(year) == phase

    def test_rate_for_year(self, curve):
        assert curve.rate_for_year(1) == 10
        assert curve.rate_for_year(3) == 6
        assert curve.rate_for_year(8) == 3


class TestValues:
    def test_zero_years_returns_base_exactly(self, curve):
        assert curve.value_at(BASE, 0) == BASE
        assert curve.value_at_month(BASE, 0) == BASE

    def test_value_at_handover(self, curve):
        assert curve.value_at(BASE, 2) == pytest.approx(1_210_000)

    def test_compounding_continues_across_phases(self, curve):
        expected = BASE * 1.10**2 * 1.06**5 * 1.03
        assert curve.value_at(BASE, 8) == pytest.approx(expected)

    def test_values_vector_matches_value_at(self, curve):
        values = curve.values(BASE, 10)
        assert len(values) == 11
        assert values[0] == BASE
        for year in range(11):
            assert values[year] == pytest.approx(curve.value_at(BASE, year))
        assert np.all(np.diff(values) > 0)

    def test_month_interpolation(self, curve):
        lower = curve.value_at(BASE, 2)
        upper = curve.value_at(BASE, 3)
        assert curve.value_at_month(BASE, 24) == pytest.approx(lower)
        assert curve.value_at_month(BASE, 30) == pytest.approx((lower + upper) / 2)

    def test_negative_rates_depreciate(self):
        curve = AppreciationCurve(
            construction_rate=-5, growth_rate=0, mature_rate=0, construction_years=1
        )
        assert curve.value_at(BASE, 3) == pytest.approx(950_000)
