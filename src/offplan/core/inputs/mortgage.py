# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from ..primitives import Model, Percent, PositiveFloat, StrictlyPositiveInt


class MortgageInputs(Model):
    """
    Optional mortgage financing of the handover balance.

    Financing applies to the amount due at handover, not to the full price:
    ``loan = base_price × (1 − pre_handover%) × financing%``.

    Attributes:
        enabled: Whether the quote is financed at all
        financing_percent: Share of the handover balance financed
        interest_rate: Annual interest rate (%)
        term_years: Amortization term in years
        processing_fee_percent: Bank processing fee (% of loan)
        valuation_fee: Flat valuation fee
        registration_fee_percent: Mortgage registration fee (% of loan)
        life_insurance_percent: Annual life insurance (% of loan)
        property_insurance: Flat annual property insurance
    """

    enabled: bool = False
    financing_percent: Percent = 60.0
    interest_rate: PositiveFloat = 4.5
    term_years: StrictlyPositiveInt = 25
    processing_fee_percent: Percent = 1.0
    valuation_fee: PositiveFloat = 3000.0
    registration_fee_percent: Percent = 0.25
    life_insurance_percent: Percent = 0.4
    property_insurance: PositiveFloat = 1500.0

    def loan_amount(self, base_price: float, pre_handover_percent: float) -> float:
        """Loan drawn at handover; zero when financing is disabled."""
        if not self.enabled:
            return 0.0
        handover_balance = base_price * (1 - pre_handover_percent / 100)
        return handover_balance * self.financing_percent / 100

    def upfront_fees(self, loan_amount: float) -> float:
        """One-time processing, valuation and registration fees."""
        if loan_amount <= 0:
            return 0.0
        return (
            loan_amount * self.processing_fee_percent / 100
            + self.valuation_fee
            + loan_amount * self.registration_fee_percent / 100
        )

    def annual_insurance(self, loan_amount: float) -> float:
        """Flat yearly life and property insurance."""
        if loan_amount <= 0:
            return 0.0
        return loan_amount * self.life_insurance_percent / 100 + self.property_insurance
