# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import math

import pytest

from offplan.analysis import analyze_hold, financing_schedule
from offplan.rental import RentalIncomeProjector

from ...conftest import make_inputs


def hold_for(inputs, financing=None):
    return analyze_hold(inputs, RentalIncomeProjector.from_inputs(inputs), financing)


class TestHoldAnalysis:
    def test_reference_quote(self, sample_inputs):
        hold = hold_for(sample_inputs)
        assert hold.total_capital_invested == pytest.approx(1_045_000)
        assert hold.gross_annual_rent == pytest.approx(70_000)
        assert hold.net_annual_rent == pytest.approx(52_000)
        assert hold.rental_yield_on_investment == pytest.approx(52_000 / 1_045_000 * 100)
        assert hold.years_to_break_even == pytest.approx(1_045_000 / 52_000)
        assert hold.short_term_net_annual_rent is None
        assert hold.coverage_ratio is None

    def test_mid_year_handover_uses_full_year(self, mid_year_inputs):
        # The half rented handover year does not dilute the hold figures
        assert hold_for(mid_year_inputs).net_annual_rent == pytest.approx(52_000)

    def test_never_breaks_even(self):
        hold = hold_for(make_inputs(unit_size_sqft=10_000))
        assert hold.net_annual_rent < 0
        assert math.isinf(hold.years_to_break_even)

    def test_short_term_stream(self):
        hold = hold_for(make_inputs(show_short_term_comparison=True))
        gross = 800 * 365 * 0.70
        assert hold.short_term_net_annual_rent == pytest.approx(gross * 0.60 - 18_000)

    def test_coverage_with_financing(self, sample_inputs, sample_mortgage):
        financing = financing_schedule(sample_inputs, sample_mortgage)
        hold = hold_for(sample_inputs, financing)
        assert hold.coverage_ratio == pytest.approx(
            52_000 / 12 / financing.monthly_payment * 100
        )
