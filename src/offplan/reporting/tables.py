# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Presentation tables

DataFrame views of quote results for rendering and export layers. The
tables only rename and arrange figures already computed by the engine.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import pandas as pd

from ..analysis import ExitScenario, YearlyProjectionPoint
from ..comparison import RecommendationResult
from ..core.primitives import InvestmentFocusEnum
from ..payments import PaymentSchedule

_FOCUS_LABELS = {
    InvestmentFocusEnum.ROI: "ROI",
    InvestmentFocusEnum.SAFETY: "Safety",
    InvestmentFocusEnum.CASHFLOW: "Cashflow",
}


def projection_frame(projection: Sequence[YearlyProjectionPoint]) -> pd.DataFrame:
    """
    Yearly projection as a table indexed by projection year.

    Short-term and mortgage columns are omitted when they carry no data.
    """
    if not projection:
        return pd.DataFrame()

    df = pd.DataFrame(
        {
            "Calendar Year": [p.calendar_year for p in projection],
            "Phase": [p.phase.value for p in projection],
            "Property Value": [p.property_value for p in projection],
            "Rented Months": [p.rented_months for p in projection],
            "Gross Rent": [p.gross_rent for p in projection],
            "Service Charges": [p.service_charges for p in projection],
            "Net Rent": [p.net_rent for p in projection],
            "Cumulative Net Income": [p.cumulative_net_income for p in projection],
        },
        index=pd.Index([p.year for p in projection], name="Year"),
    )

    if any(p.alt_net_rent is not None for p in projection):
        df["Short-Term Gross Rent"] = [p.alt_gross_rent for p in projection]
        df["Short-Term Net Rent"] = [p.alt_net_rent for p in projection]

    if any(p.mortgage_payment > 0 for p in projection):
        df["Mortgage Principal"] = [p.mortgage_principal for p in projection]
        df["Mortgage Interest"] = [p.mortgage_interest for p in projection]
        df["Mortgage Insurance"] = [p.mortgage_insurance for p in projection]
        df["Mortgage Balance"] = [p.mortgage_balance for p in projection]

    return df


def schedule_frame(schedule: PaymentSchedule) -> pd.DataFrame:
    """Payment schedule indexed by calendar month, with cumulative columns."""
    df = pd.DataFrame(
        {
            "Month Offset": [e.month for e in schedule.entries],
            "Payment": [" + ".join(e.labels) for e in schedule.entries],
            "Percent": [e.percent_of_price for e in schedule.entries],
            "Amount": [e.amount for e in schedule.entries],
        },
        index=pd.PeriodIndex([e.period for e in schedule.entries], freq="M", name="Month"),
    )
    df["Cumulative Percent"] = df["Percent"].cumsum()
    df["Cumulative Amount"] = df["Amount"].cumsum()
    return df


def scenarios_frame(scenarios: Iterable[ExitScenario]) -> pd.DataFrame:
    """Exit scenarios indexed by exit month."""
    rows = {
        s.exit_month: {
            "Equity Invested": s.equity_invested,
            "Property Value": s.property_value,
            "Exit Costs": s.exit_costs,
            "Unpaid Purchase Balance": s.outstanding_purchase_balance,
            "Mortgage Balance": s.outstanding_mortgage_balance,
            "Net Sale Proceeds": s.net_sale_proceeds,
            "Cumulative Rent": s.cumulative_rent,
            "Financing Costs": s.financing_costs,
            "Profit": s.profit,
            "Annualized ROE %": s.annualized_roe,
            "Paid %": s.paid_percent,
            "Threshold Met": s.is_threshold_met,
            "Advance Required": s.advance_required,
        }
        for s in scenarios
    }
    df = pd.DataFrame.from_dict(rows, orient="index")
    df.index.name = "Exit Month"
    return df


def recommendation_frame(result: RecommendationResult) -> pd.DataFrame:
    """Category scores, wins and highlights per compared quote."""
    records = []
    for rec in result.recommendations:
        row = {"Quote": rec.name}
        for focus, score in rec.scores.items():
            row[f"{_FOCUS_LABELS[focus]} Score"] = score
        row["Wins"] = ", ".join(f.value for f, won in rec.winner.items() if won)
        row["Highlights"] = ", ".join(rec.highlights)
        records.append(pd.Series(row, name=rec.quote_id))
    df = pd.DataFrame(records)
    df.index.name = "Quote ID"
    return df
