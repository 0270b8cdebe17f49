# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Mortgage analysis of a financed quote.

Summarizes what financing the handover balance costs: the cash gap left at
handover, one-time fees, insurance, lifetime interest, equity built through
principal repayment, and how monthly cashflow holds up when the interest
rate is shocked upward.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..core.inputs import MortgageInputs
from ..core.primitives import CashflowStatusEnum, Model, MortgageSettings
from .amortization import AmortizationSchedule, amortize, coverage_ratio, level_payment

logger = logging.getLogger(__name__)


class StressScenario(Model):
    """
    Monthly cashflow of a financed unit at one interest rate.

    Attributes:
        rate: Annual interest rate (%)
        monthly_payment: Level mortgage payment at ``rate``
        monthly_debt_service: Payment plus monthly share of insurance
        net_cashflow: Net monthly rent minus debt service
        status: POSITIVE, TIGHT (shortfall within the tight band of debt
            service) or NEGATIVE
    """

    rate: float
    monthly_payment: float
    monthly_debt_service: float
    net_cashflow: float
    status: CashflowStatusEnum


class MortgageAnalysis(Model):
    """Fees, totals, equity build-up and stress tests of a mortgage."""

    loan_amount: float
    monthly_payment: float
    total_interest: float
    total_loan_payments: float

    # Cash the buyer must still find at handover
    gap_percent: float
    gap_amount: float

    processing_fee: float
    valuation_fee: float
    registration_fee: float
    total_upfront_fees: float

    annual_life_insurance: float
    annual_property_insurance: float
    total_annual_insurance: float
    total_insurance_over_term: float

    total_interest_and_fees: float
    principal_paid_year_5: float
    principal_paid_year_10: float
    coverage_ratio: Optional[float] = None
    stress_scenarios: Tuple[StressScenario, ...] = ()
    schedule: AmortizationSchedule

    @property
    def has_gap(self) -> bool:
        return self.gap_amount > 0


def classify_cashflow(
    net_cashflow: float, debt_service: float, tight_band: float = 0.10
) -> CashflowStatusEnum:
    """Classify monthly cashflow after debt service."""
    if net_cashflow >= 0:
        return CashflowStatusEnum.POSITIVE
    if net_cashflow >= -debt_service * tight_band:
        return CashflowStatusEnum.TIGHT
    return CashflowStatusEnum.NEGATIVE


def analyze_mortgage(
    mortgage: MortgageInputs,
    base_price: float,
    pre_handover_percent: float,
    monthly_rent: float = 0.0,
    monthly_service_charges: float = 0.0,
    settings: Optional[MortgageSettings] = None,
    start_month: int = 0,
) -> MortgageAnalysis:
    """
    Analyze the mortgage financing the handover balance of a quote.

    Args:
        mortgage: Mortgage terms
        base_price: Purchase price of the unit
        pre_handover_percent: Share of the price paid before handover
        monthly_rent: Gross monthly rent used by coverage and stress tests
        monthly_service_charges: Monthly service charges deducted from rent
        settings: Stress test settings
        start_month: Month offset of the drawdown (the handover month)

    Returns:
        MortgageAnalysis. The stress scenarios start with the quoted rate,
        followed by each configured rate shock.
    """
    settings = settings or MortgageSettings()
    loan = mortgage.loan_amount(base_price, pre_handover_percent)

    handover_balance = base_price * (1 - pre_handover_percent / 100)
    gap_amount = max(0.0, handover_balance - loan)

    insurance_life = loan * mortgage.life_insurance_percent / 100 if loan > 0 else 0.0
    insurance_property = mortgage.property_insurance if loan > 0 else 0.0
    annual_insurance = insurance_life + insurance_property

    schedule = amortize(
        loan,
        mortgage.interest_rate,
        mortgage.term_years,
        annual_insurance=annual_insurance,
        start_month=start_month,
    )

    processing_fee = loan * mortgage.processing_fee_percent / 100
    registration_fee = loan * mortgage.registration_fee_percent / 100
    valuation_fee = mortgage.valuation_fee if loan > 0 else 0.0
    upfront = mortgage.upfront_fees(loan)
    insurance_over_term = annual_insurance * mortgage.term_years if loan > 0 else 0.0

    net_monthly_rent = monthly_rent - monthly_service_charges
    monthly_insurance = annual_insurance / 12
    scenarios = []
    for shock in (0.0,) + tuple(settings.stress_rate_increments):
        rate = mortgage.interest_rate + shock
        payment = level_payment(loan, rate, mortgage.term_years)
        debt_service = payment + monthly_insurance
        cashflow = net_monthly_rent - debt_service
        scenarios.append(
            StressScenario(
                rate=rate,
                monthly_payment=payment,
                monthly_debt_service=debt_service,
                net_cashflow=cashflow,
                status=classify_cashflow(cashflow, debt_service, settings.tight_cashflow_band),
            )
        )

    logger.debug(
        f"Mortgage {loan:,.0f}: gap {gap_amount:,.0f}, fees {upfront:,.0f}, "
        f"stress statuses {[s.status.value for s in scenarios]}"
    )

    return MortgageAnalysis(
        loan_amount=loan,
        monthly_payment=schedule.monthly_payment,
        total_interest=schedule.total_interest,
        total_loan_payments=schedule.total_payments,
        gap_percent=gap_amount / base_price * 100 if base_price > 0 else 0.0,
        gap_amount=gap_amount,
        processing_fee=processing_fee,
        valuation_fee=valuation_fee,
        registration_fee=registration_fee,
        total_upfront_fees=upfront,
        annual_life_insurance=insurance_life,
        annual_property_insurance=insurance_property,
        total_annual_insurance=annual_insurance,
        total_insurance_over_term=insurance_over_term,
        total_interest_and_fees=schedule.total_interest + upfront + insurance_over_term,
        principal_paid_year_5=schedule.principal_paid_by_loan_year(5),
        principal_paid_year_10=schedule.principal_paid_by_loan_year(10),
        coverage_ratio=coverage_ratio(net_monthly_rent, schedule.monthly_payment),
        stress_scenarios=tuple(scenarios),
        schedule=schedule,
    )
