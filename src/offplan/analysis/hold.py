# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Buy-and-hold view of a quote: yield on the capital invested and break-even."""

from __future__ import annotations

import math
from typing import Optional

from ..core.inputs import InvestmentInputs
from ..core.primitives import Model
from ..debt import AmortizationSchedule, coverage_ratio
from ..rental import RentalIncomeProjector


class HoldAnalysis(Model):
    """
    Attributes:
        total_capital_invested: Purchase price plus entry costs
        gross_annual_rent: Gross rent of the first full rental year
        net_annual_rent: Net rent of the first full rental year
        rental_yield_on_investment: Net rent over capital invested (%)
        years_to_break_even: Years of net rent repaying the capital;
            infinite when net rent is not positive
        short_term_net_annual_rent: Short-term stream net rent, when compared
        coverage_ratio: Monthly net rent over mortgage payment (%), when financed
    """

    total_capital_invested: float
    gross_annual_rent: float
    net_annual_rent: float
    rental_yield_on_investment: float
    years_to_break_even: float
    short_term_net_annual_rent: Optional[float] = None
    coverage_ratio: Optional[float] = None


def analyze_hold(
    inputs: InvestmentInputs,
    projector: RentalIncomeProjector,
    financing: Optional[AmortizationSchedule] = None,
) -> HoldAnalysis:
    """Hold metrics of a quote based on its first full rental year."""
    capital = inputs.base_price + inputs.entry_costs
    first_year = projector.full_year(1)
    net = first_year.net_rent

    coverage = None
    if financing is not None:
        coverage = coverage_ratio(net / 12, financing.monthly_payment)

    return HoldAnalysis(
        total_capital_invested=capital,
        gross_annual_rent=first_year.gross_rent,
        net_annual_rent=net,
        rental_yield_on_investment=net / capital * 100 if capital > 0 else 0.0,
        years_to_break_even=capital / net if net > 0 else math.inf,
        short_term_net_annual_rent=first_year.alt_net_rent,
        coverage_ratio=coverage,
    )
