# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Exit scenario analysis.

Prices a hypothetical resale at a given month after booking. On an off-plan
resale the buyer takes over the remaining payment plan, so the seller's net
proceeds exclude the unpaid purchase balance as well as any outstanding
mortgage.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

from ..appreciation import AppreciationCurve
from ..core.inputs import InvestmentInputs, MortgageInputs
from ..core.primitives import ExitSettings, Model, QuoteTimeline
from ..debt import AmortizationSchedule
from ..payments import PaymentSchedule
from .projection import YearlyProjectionPoint

logger = logging.getLogger(__name__)


class ExitScenario(Model):
    """
    Outcome of selling at ``exit_month``.

    Attributes:
        exit_month: Month offset from booking
        equity_invested: Cash put in by the buyer through the exit month
        property_value: Market value at exit
        exit_costs: Agent commission and NOC fee
        outstanding_purchase_balance: Scheduled payments not yet due
        outstanding_mortgage_balance: Mortgage balance repaid from the sale
        net_sale_proceeds: Cash returned to the seller
        cumulative_rent: Net rent received through the exit month
        financing_costs: Mortgage interest and insurance paid through exit
        profit: Proceeds plus rent minus equity and financing costs
        annualized_roe: Annualized return on equity (%), None when undefined
        roe_defined: Whether ``annualized_roe`` could be computed
        paid_percent: Share of the price paid through the exit month
        is_threshold_met: Whether the developer's resale threshold is reached
        advance_required: Amount to pay in advance to reach the threshold
    """

    exit_month: int
    equity_invested: float
    property_value: float
    exit_costs: float
    outstanding_purchase_balance: float
    outstanding_mortgage_balance: float = 0.0
    net_sale_proceeds: float
    cumulative_rent: float
    financing_costs: float = 0.0
    profit: float
    annualized_roe: Optional[float] = None
    roe_defined: bool = False
    paid_percent: float = 0.0
    is_threshold_met: bool = True
    advance_required: float = 0.0

    @property
    def exit_years(self) -> float:
        return self.exit_month / 12

    @property
    def total_roe(self) -> Optional[float]:
        """Profit as a percentage of equity, not annualized."""
        if self.equity_invested <= 0:
            return None
        return self.profit / self.equity_invested * 100


def annualized_roe(profit: float, equity: float, exit_month: int) -> Optional[float]:
    """
    ``((1 + profit/equity)^(12/exit_month) − 1) × 100``.

    None when equity or the exit month is not positive, or when the loss
    exceeds the equity so the growth base is not positive.
    """
    if equity <= 0 or exit_month <= 0:
        return None
    base = 1 + profit / equity
    if base <= 0:
        return None
    return (base ** (12 / exit_month) - 1) * 100


def default_exit_months(
    timeline: QuoteTimeline, settings: Optional[ExitSettings] = None
) -> Tuple[int, ...]:
    """Configured exit months plus, optionally, the handover month."""
    settings = settings or ExitSettings()
    months = set(settings.default_exit_months)
    if settings.include_handover_exit:
        months.add(timeline.construction_months)
    return tuple(sorted(months))


class ExitScenarioAnalyzer(Model):
    """
    Analyzes exits of one quote against its yearly projection.

    Attributes:
        inputs: Quote inputs (appreciation bonus already applied)
        projection: Yearly projection of the quote
        schedule: Payment schedule of the quote
        mortgage: Mortgage terms, when financed
        financing: Amortization of the mortgage, when financed
    """

    inputs: InvestmentInputs
    projection: Tuple[YearlyProjectionPoint, ...]
    schedule: PaymentSchedule
    mortgage: Optional[MortgageInputs] = None
    financing: Optional[AmortizationSchedule] = None

    @property
    def curve(self) -> AppreciationCurve:
        return AppreciationCurve.from_inputs(self.inputs)

    def cumulative_rent_at(self, exit_month: int) -> float:
        """Net rent received through ``exit_month``, prorated within the final year."""
        if exit_month <= 0 or not self.projection:
            return 0.0
        full_years, remainder = divmod(exit_month, 12)
        if remainder == 0 and full_years <= len(self.projection):
            return self.projection[full_years - 1].cumulative_net_income
        if full_years >= len(self.projection):
            logger.warning(
                f"Exit month {exit_month} is beyond the {len(self.projection)}-year "
                f"projection; rent is counted through the last projected year"
            )
            return self.projection[-1].cumulative_net_income

        rent = self.projection[full_years - 1].cumulative_net_income if full_years else 0.0
        partial = self.projection[full_years]
        if partial.rented_months > 0:
            handover_month = self.schedule.handover_month
            rented_so_far = max(0, exit_month - max(handover_month, 12 * full_years))
            rent += partial.net_rent * min(rented_so_far, partial.rented_months) / partial.rented_months
        return rent

    def analyze(self, exit_month: int) -> ExitScenario:
        """Price an exit at ``exit_month`` (months after booking)."""
        inputs = self.inputs
        schedule = self.schedule
        financed = self.financing is not None and self.mortgage is not None

        equity = schedule.paid_through(exit_month) + inputs.entry_costs
        mortgage_balance = 0.0
        financing_costs = 0.0
        if financed and exit_month >= self.financing.start_month:
            loan = self.financing.loan_amount
            equity += (
                self.mortgage.upfront_fees(loan)
                - loan
                + self.financing.principal_through(exit_month)
            )
            mortgage_balance = self.financing.balance_at(exit_month)
            financing_costs = self.financing.interest_through(
                exit_month
            ) + self.financing.insurance_through(exit_month)

        value = self.curve.value_at_month(inputs.base_price, exit_month)
        exit_costs = inputs.exit_noc_fee
        if inputs.exit_agent_commission_enabled:
            exit_costs += value * inputs.exit_agent_commission_percent / 100

        unpaid = schedule.remaining_after(exit_month)
        proceeds = value - exit_costs - mortgage_balance - unpaid
        rent = self.cumulative_rent_at(exit_month)
        profit = proceeds + rent - equity - financing_costs
        roe = annualized_roe(profit, equity, exit_month)

        paid_percent = schedule.paid_percent_through(exit_month)
        shortfall = max(0.0, inputs.minimum_exit_threshold - paid_percent)

        return ExitScenario(
            exit_month=exit_month,
            equity_invested=equity,
            property_value=value,
            exit_costs=exit_costs,
            outstanding_purchase_balance=unpaid,
            outstanding_mortgage_balance=mortgage_balance,
            net_sale_proceeds=proceeds,
            cumulative_rent=rent,
            financing_costs=financing_costs,
            profit=profit,
            annualized_roe=roe,
            roe_defined=roe is not None,
            paid_percent=paid_percent,
            is_threshold_met=shortfall == 0,
            advance_required=inputs.base_price * shortfall / 100,
        )

    def analyze_many(self, exit_months: Iterable[int]) -> Tuple[ExitScenario, ...]:
        """Analyze each distinct exit month, in increasing order."""
        return tuple(self.analyze(month) for month in sorted(set(exit_months)))
