# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Recommendation Engine Tests

Quotes are built from the reference inputs and differ in a single field so
the expected scores can be worked out by hand: a metric that differs scales
to 100 / 0 and every tied metric contributes 50.
"""

from __future__ import annotations

import pytest

from offplan.analysis import quote
from offplan.comparison import ComparedQuote, extract_metrics, recommend
from offplan.core.primitives import ComparisonSettings, InvalidInputError, InvestmentFocusEnum

from ...conftest import make_inputs, make_mortgage

ROI = InvestmentFocusEnum.ROI
SAFETY = InvestmentFocusEnum.SAFETY
CASHFLOW = InvestmentFocusEnum.CASHFLOW


def compared(quote_id: str, name: str, **overrides) -> ComparedQuote:
    return ComparedQuote(quote_id=quote_id, name=name, result=quote(make_inputs(**overrides)))


class TestPreconditions:
    def test_needs_two_quotes(self):
        assert recommend([]) is None
        assert recommend([compared("a", "Quote A")]) is None


class TestZoneMaturity:
    @pytest.fixture
    def result(self):
        return recommend(
            [
                compared("a", "Quote A", zone_maturity_level=90.0),
                compared("b", "Quote B", zone_maturity_level=40.0),
            ]
        )

    def test_safety_scores(self, result):
        # 0.4 x 100 + 0.3 x 50 + 0.3 x 50 against 0.4 x 0 + 0.3 x 50 + 0.3 x 50
        assert result.for_quote("a").scores[SAFETY] == 70
        assert result.for_quote("b").scores[SAFETY] == 30
        assert result.winners[SAFETY] == ("a",)
        assert result.for_quote("a").winner[SAFETY]
        assert not result.for_quote("b").winner[SAFETY]

    def test_tied_categories(self, result):
        for focus in (ROI, CASHFLOW):
            assert result.winners[focus] == ("a", "b")
            assert result.for_quote("a").scores[focus] == 50
            assert result.for_quote("b").winner[focus]
        assert result.explanations[ROI] == "Quote A, Quote B tie for the best roi score."

    def test_highlights(self, result):
        assert result.for_quote("a").highlights == ("Most Mature Zone",)
        assert result.for_quote("b").highlights == ()

    def test_safety_explanation(self, result):
        assert result.explanations[SAFETY] == (
            "Quote A provides the most stability with 90% zone maturity and lower payment risk."
        )

    def test_input_order_kept(self, result):
        assert [r.quote_id for r in result.recommendations] == ["a", "b"]
        assert result.for_quote("missing") is None


class TestConstructionAppreciation:
    @pytest.fixture
    def result(self):
        return recommend(
            [
                compared("a", "Quote A"),
                compared("b", "Quote B", construction_appreciation=14.0),
            ]
        )

    def test_roi_winner(self, result):
        assert result.winners[ROI] == ("b",)
        assert result.for_quote("b").scores[ROI] == 100
        assert result.for_quote("a").scores[ROI] == 0
        assert "Highest ROE" in result.for_quote("b").highlights
        roe = result.metrics.at["b", "annualized_roe"]
        assert result.explanations[ROI] == (
            f"Quote B offers the highest return potential with {roe:.1f}% "
            f"annualized ROE at 36 months."
        )

    def test_volatility_favours_steadier_quote(self, result):
        # Volatility 7 against 11; zone and pre-handover share tie
        assert result.for_quote("a").scores[SAFETY] == 65
        assert result.for_quote("b").scores[SAFETY] == 35
        assert "Lowest Risk" in result.for_quote("a").highlights

    def test_scores_bounded(self, result):
        for rec in result.recommendations:
            assert all(0 <= score <= 100 for score in rec.scores.values())


class TestCashflow:
    def test_higher_yield_wins(self):
        result = recommend(
            [
                compared("a", "Quote A", rental_yield_percent=8.0),
                compared("b", "Quote B"),
            ]
        )
        assert result.winners[CASHFLOW] == ("a",)
        assert result.for_quote("a").scores[CASHFLOW] == 100
        assert "Best Yield" in result.for_quote("a").highlights
        assert result.explanations[CASHFLOW].startswith("Quote A delivers the strongest rental income")


class TestMetricTable:
    def test_break_even_capped(self):
        quotes = [
            compared("a", "Quote A"),
            compared("b", "Quote B", unit_size_sqft=10_000.0),
        ]
        table = extract_metrics(quotes, ComparisonSettings(break_even_cap_years=100.0))
        assert table.at["a", "years_to_break_even"] == pytest.approx(1_045_000 / 52_000)
        assert table.at["b", "years_to_break_even"] == 100.0

    def test_reference_months(self, sample_inputs):
        result = quote(sample_inputs)
        table = extract_metrics([ComparedQuote(quote_id="a", result=result)])
        assert table.at["a", "annualized_roe"] == pytest.approx(result.scenario_at(36).annualized_roe)
        assert table.at["a", "total_profit"] == pytest.approx(result.scenario_at(60).profit)
        assert table.at["a", "average_appreciation"] == pytest.approx(19 / 3)

    def test_undefined_roe_ranks_with_worst_defined(self):
        # Financed with a collapsing construction phase: the loss at month 36
        # exceeds the equity left in the deal, so the ROE is undefined
        wiped_out = ComparedQuote(
            quote_id="a",
            result=quote(make_inputs(construction_appreciation=-60.0), make_mortgage()),
        )
        losing = ComparedQuote(
            quote_id="b",
            result=quote(make_inputs(construction_appreciation=-10.0), make_mortgage()),
        )
        assert not wiped_out.result.scenario_at(36).roe_defined
        assert losing.result.scenario_at(36).annualized_roe < 0

        table = extract_metrics([wiped_out, losing])
        assert table.at["a", "annualized_roe"] == pytest.approx(table.at["b", "annualized_roe"])

        result = recommend([wiped_out, losing])
        assert result.winners[ROI] == ("b",)
        assert "Highest ROE" not in result.for_quote("a").highlights

    def test_duplicate_quote_ids_rejected(self):
        quotes = [
            compared("q", "Quote A", zone_maturity_level=90.0),
            compared("q", "Quote B", zone_maturity_level=40.0),
        ]
        with pytest.raises(InvalidInputError) as exc_info:
            recommend(quotes)
        assert exc_info.value.field == "quote_id"
