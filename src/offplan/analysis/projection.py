# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Yearly projection assembly.

Merges the appreciation curve, the rental projector and the mortgage
amortization into one record per projection year, from the booking year
through the hold horizon. Cumulative net income is the only figure carried
across years; it is recomputed from scratch on every call.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..appreciation import AppreciationCurve
from ..core.inputs import InvestmentInputs, MortgageInputs
from ..core.primitives import GlobalSettings, Model, PhaseEnum
from ..debt import AmortizationSchedule, amortize
from ..rental import RentalIncomeProjector

logger = logging.getLogger(__name__)


class YearlyProjectionPoint(Model):
    """
    Projection of a single year.

    Attributes:
        year: Projection year (1-based, year 1 starts at booking)
        calendar_year: Calendar year label
        phase: Construction, handover or hold; display only
        property_value: Property value at the end of the year
        rented_months: Months of the year after handover
        gross_rent: Long-term gross rent
        service_charges: Owner service charges
        net_rent: Gross rent minus service charges
        cumulative_net_income: Net rent summed from year 1 through this year
        alt_gross_rent: Short-term gross revenue, when compared
        alt_net_rent: Short-term net revenue, when compared
        mortgage_principal: Principal repaid during the year
        mortgage_interest: Interest paid during the year
        mortgage_insurance: Insurance paid during the year
        mortgage_balance: Balance outstanding at the end of the year
    """

    year: int
    calendar_year: int
    phase: PhaseEnum
    property_value: float
    rented_months: int = 0
    gross_rent: float = 0.0
    service_charges: float = 0.0
    net_rent: float = 0.0
    cumulative_net_income: float = 0.0
    alt_gross_rent: Optional[float] = None
    alt_net_rent: Optional[float] = None
    mortgage_principal: float = 0.0
    mortgage_interest: float = 0.0
    mortgage_insurance: float = 0.0
    mortgage_balance: float = 0.0

    @property
    def mortgage_payment(self) -> float:
        return self.mortgage_principal + self.mortgage_interest


def financing_schedule(
    inputs: InvestmentInputs, mortgage: Optional[MortgageInputs]
) -> Optional[AmortizationSchedule]:
    """Amortization of the handover balance; None when the quote is not financed."""
    if mortgage is None or not mortgage.enabled:
        return None
    loan = mortgage.loan_amount(inputs.base_price, inputs.pre_handover_percent)
    if loan <= 0:
        return None
    schedule = amortize(
        loan,
        mortgage.interest_rate,
        mortgage.term_years,
        annual_insurance=mortgage.annual_insurance(loan),
        start_month=inputs.timeline.construction_months,
    )
    if schedule.is_empty:
        logger.warning(f"Mortgage of {loan:,.0f} has no repayment schedule; treated as unfinanced")
        return None
    return schedule


def build_points(
    inputs: InvestmentInputs,
    curve: AppreciationCurve,
    projector: RentalIncomeProjector,
    financing: Optional[AmortizationSchedule],
    horizon_years: int,
) -> List[YearlyProjectionPoint]:
    """Assemble points from already built components."""
    timeline = inputs.timeline
    values = curve.values(inputs.base_price, horizon_years)

    points: List[YearlyProjectionPoint] = []
    cumulative = 0.0
    for year in range(1, horizon_years + 1):
        value = float(values[year])
        rent = projector.project_year(year, value)
        cumulative += rent.net_rent

        principal = interest = insurance = balance = 0.0
        if financing is not None:
            first_month, last_month = timeline.year_months(year)
            rows = financing.rows_between(first_month, last_month)
            principal = float(rows["Principal"].sum())
            interest = float(rows["Interest"].sum())
            insurance = financing.annual_insurance * len(rows) / 12
            balance = financing.balance_at(last_month)

        points.append(
            YearlyProjectionPoint(
                year=year,
                calendar_year=timeline.calendar_year(year),
                phase=timeline.phase(year),
                property_value=value,
                rented_months=rent.rented_months,
                gross_rent=rent.gross_rent,
                service_charges=rent.service_charges,
                net_rent=rent.net_rent,
                cumulative_net_income=cumulative,
                alt_gross_rent=rent.alt_gross_rent,
                alt_net_rent=rent.alt_net_rent,
                mortgage_principal=principal,
                mortgage_interest=interest,
                mortgage_insurance=insurance,
                mortgage_balance=balance,
            )
        )
    return points


def assemble(
    inputs: InvestmentInputs,
    mortgage: Optional[MortgageInputs] = None,
    settings: Optional[GlobalSettings] = None,
    horizon_years: Optional[int] = None,
) -> List[YearlyProjectionPoint]:
    """
    Assemble the yearly projection of a quote.

    The appreciation bonus of value differentiators is not applied here;
    callers apply it once to the inputs beforehand (``quote`` does).

    Args:
        inputs: Quote inputs
        mortgage: Optional mortgage terms; ignored unless enabled
        settings: Global settings (horizon and rent basis)
        horizon_years: Override of the default horizon

    Returns:
        One point per year 1..horizon, in increasing year order
    """
    settings = settings or GlobalSettings()
    timeline = inputs.timeline
    if horizon_years is None:
        horizon_years = timeline.default_horizon(
            settings.projection.min_horizon_years,
            settings.projection.holding_period_years,
        )
    horizon_years = max(1, horizon_years)

    curve = AppreciationCurve.from_inputs(inputs)
    projector = RentalIncomeProjector.from_inputs(
        inputs, curve, settings.projection.rent_basis
    )
    financing = financing_schedule(inputs, mortgage)

    logger.debug(
        f"Assembling {horizon_years} years: handover year {timeline.handover_year_index}, "
        f"financed={financing is not None}"
    )
    return build_points(inputs, curve, projector, financing, horizon_years)
