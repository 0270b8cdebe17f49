# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Mortgage amortization calculations"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import pandas as pd
from pyxirr import pmt

from ..core.primitives import Model, PositiveFloat, PositiveInt

logger = logging.getLogger(__name__)

MONTHLY_COLUMNS = [
    "Period",
    "Loan Year",
    "Begin Balance",
    "Payment",
    "Interest",
    "Principal",
    "End Balance",
]


def level_payment(principal: float, annual_rate: float, term_years: int) -> float:
    """
    Fixed monthly payment of a fully amortizing loan.

    ``M = P·r(1+r)^n / ((1+r)^n − 1)`` with ``r`` the monthly rate; a zero
    rate spreads the principal evenly: ``M = P / n``.
    """
    n = term_years * 12
    if principal <= 0 or n <= 0:
        return 0.0
    monthly_rate = annual_rate / 100 / 12
    if monthly_rate > 0:
        return pmt(monthly_rate, n, principal) * -1
    return principal / n


def coverage_ratio(monthly_net_rent: float, monthly_payment: float) -> Optional[float]:
    """
    Monthly net rent as a percentage of the monthly mortgage payment.

    Not clamped: values above 100 mean rent more than covers the payment.
    Returns None when there is no payment to cover.
    """
    if monthly_payment <= 0:
        return None
    return monthly_net_rent / monthly_payment * 100


class AmortizationSchedule(Model):
    """
    Monthly and yearly amortization of a mortgage drawn at handover.

    Payment ``i`` (1-based) falls in month ``start_month + i``, months being
    offsets from booking.

    Attributes:
        loan_amount: Principal drawn
        annual_rate: Annual interest rate (%)
        term_years: Amortization term in years
        annual_insurance: Flat yearly insurance (life and property)
        start_month: Month offset of the drawdown
        monthly_payment: Level monthly payment
        monthly: One row per payment, indexed by month offset ("Month")
        yearly: Loan-year rollups of payment, interest, principal and
            insurance with the end-of-year balance, indexed by "Loan Year"
    """

    loan_amount: PositiveFloat
    annual_rate: PositiveFloat
    term_years: PositiveInt
    annual_insurance: PositiveFloat = 0.0
    start_month: PositiveInt = 0
    monthly_payment: PositiveFloat = 0.0
    monthly: pd.DataFrame
    yearly: pd.DataFrame

    @property
    def is_empty(self) -> bool:
        return self.monthly.empty

    @property
    def payoff_month(self) -> int:
        """Month offset of the final payment."""
        return self.start_month + self.term_years * 12

    @property
    def total_interest(self) -> float:
        return float(self.monthly["Interest"].sum())

    @property
    def total_payments(self) -> float:
        return float(self.monthly["Payment"].sum())

    @property
    def total_insurance(self) -> float:
        return self.annual_insurance * self.term_years if not self.is_empty else 0.0

    def principal_through(self, month: int) -> float:
        """Principal repaid in months up to and including ``month``."""
        return float(self.monthly.loc[self.monthly.index <= month, "Principal"].sum())

    def interest_through(self, month: int) -> float:
        """Interest paid in months up to and including ``month``."""
        return float(self.monthly.loc[self.monthly.index <= month, "Interest"].sum())

    def insurance_through(self, month: int) -> float:
        """Insurance accrued from drawdown through ``month``, prorated monthly."""
        if self.is_empty:
            return 0.0
        months = min(max(0, month - self.start_month), self.term_years * 12)
        return self.annual_insurance * months / 12

    def balance_at(self, month: int) -> float:
        """Outstanding balance after the payment of ``month``; zero before drawdown."""
        if self.is_empty or month < self.start_month:
            return 0.0
        paid = self.monthly.loc[self.monthly.index <= month, "End Balance"]
        if paid.empty:
            return self.loan_amount
        return float(paid.iloc[-1])

    def principal_paid_by_loan_year(self, loan_year: int) -> float:
        """Cumulative principal repaid by the end of loan year ``loan_year``."""
        if self.is_empty or loan_year <= 0:
            return 0.0
        return float(self.yearly.loc[self.yearly.index <= loan_year, "Principal"].sum())

    def rows_between(self, first_month: int, last_month: int) -> pd.DataFrame:
        """Monthly rows whose month offset lies in ``[first_month, last_month]``."""
        index = self.monthly.index
        return self.monthly.loc[(index >= first_month) & (index <= last_month)]


def amortize(
    loan_amount: float,
    annual_rate: float,
    term_years: int,
    annual_insurance: float = 0.0,
    start_month: int = 0,
) -> AmortizationSchedule:
    """
    Build the amortization schedule of a fixed-rate mortgage.

    Each month's interest is the opening balance times the monthly rate and
    principal is the level payment minus interest. The final payment retires
    whatever balance remains, so the schedule always ends at exactly zero.

    Args:
        loan_amount: Principal drawn at ``start_month``
        annual_rate: Annual interest rate (%)
        term_years: Amortization term in years
        annual_insurance: Flat yearly insurance added to yearly rollups
        start_month: Month offset (from booking) of the drawdown

    Returns:
        AmortizationSchedule; empty frames when there is nothing to amortize
    """
    total_payments = term_years * 12
    if loan_amount <= 0 or total_payments <= 0:
        return AmortizationSchedule(
            loan_amount=max(0.0, loan_amount),
            annual_rate=annual_rate,
            term_years=term_years,
            annual_insurance=0.0,
            start_month=start_month,
            monthly=pd.DataFrame(columns=MONTHLY_COLUMNS, index=pd.Index([], name="Month")),
            yearly=pd.DataFrame(
                columns=["Payment", "Interest", "Principal", "End Balance", "Insurance"],
                index=pd.Index([], name="Loan Year"),
            ),
        )

    monthly_rate = annual_rate / 100 / 12
    payment = level_payment(loan_amount, annual_rate, term_years)

    payments = np.zeros(total_payments)
    interest_paid = np.zeros(total_payments)
    principal_paid = np.zeros(total_payments)
    balances = np.zeros(total_payments + 1)  # Extra element for initial balance
    balances[0] = loan_amount

    for i in range(total_payments):
        current_balance = balances[i]
        interest_payment = current_balance * monthly_rate
        if i == total_payments - 1:
            # Final payment retires the remaining balance
            principal_payment = current_balance
            payments[i] = current_balance + interest_payment
        else:
            principal_payment = payment - interest_payment
            payments[i] = payment
        interest_paid[i] = interest_payment
        principal_paid[i] = principal_payment
        balances[i + 1] = current_balance - principal_payment

    periods = np.arange(1, total_payments + 1)
    monthly = pd.DataFrame(
        {
            "Period": periods,
            "Month": start_month + periods,
            "Loan Year": (periods - 1) // 12 + 1,
            "Begin Balance": balances[:-1],
            "Payment": payments,
            "Interest": interest_paid,
            "Principal": principal_paid,
            "End Balance": balances[1:],
        }
    )
    monthly.set_index("Month", inplace=True)

    yearly = monthly.groupby("Loan Year").agg(
        {
            "Payment": "sum",
            "Interest": "sum",
            "Principal": "sum",
            "End Balance": "last",
        }
    )
    yearly["Insurance"] = annual_insurance

    logger.debug(
        f"Amortized {loan_amount:,.0f} at {annual_rate:.2f}% over {term_years}y: "
        f"payment {payment:,.2f}/month, interest {interest_paid.sum():,.0f}"
    )

    return AmortizationSchedule(
        loan_amount=loan_amount,
        annual_rate=annual_rate,
        term_years=term_years,
        annual_insurance=annual_insurance,
        start_month=start_month,
        monthly_payment=payment,
        monthly=monthly,
        yearly=yearly,
    )
