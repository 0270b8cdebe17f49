# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Investment input schema.

A closed, versioned description of one off-plan quote: price, payment plan,
entry and exit costs, appreciation phases and rental assumptions. Instances
are immutable; derived quantities are exposed as properties.
"""

from __future__ import annotations

import hashlib
from typing import Any, Tuple

from pydantic import Field, model_validator

from ..primitives import (
    InvalidInputError,
    MilestoneTriggerEnum,
    Model,
    MonthOfYear,
    Percent,
    PositiveFloat,
    PositiveInt,
    QuarterOfYear,
    QuoteTimeline,
)

CURRENT_SCHEMA_VERSION = 3

REQUIRED_FIELDS = (
    "base_price",
    "booking_month",
    "booking_year",
    "handover_quarter",
    "handover_year",
)


class PaymentMilestone(Model):
    """
    Additional payment released by a date or a construction-progress trigger.

    Attributes:
        trigger: DATE (months after booking) or CONSTRUCTION (% complete)
        trigger_value: Month offset from booking, or construction percentage
        percent: Share of the base price paid at this milestone
        label: Free-form description shown in schedules
    """

    trigger: MilestoneTriggerEnum = MilestoneTriggerEnum.DATE
    trigger_value: PositiveFloat = 0.0
    percent: Percent = 0.0
    label: str = ""


class PostHandoverInstallment(Model):
    """Installment paid a number of months after handover."""

    months_after_handover: PositiveInt = 0
    percent: Percent = 0.0
    label: str = ""


class ShortTermRentalConfig(Model):
    """Assumptions of the alternate (holiday-home) income stream."""

    average_daily_rate: PositiveFloat = 800.0
    occupancy_percent: Percent = 70.0
    operating_expense_percent: Percent = 25.0
    management_fee_percent: Percent = 15.0


class InvestmentInputs(Model):
    """
    Complete input set for quoting an off-plan investment.

    All percentages are expressed on a 0-100 scale. The payment plan
    (pre-handover share, milestones, handover and post-handover shares) is
    expected to total 100%; the engine tolerates and reports any drift.

    Examples:
        >>> inputs = InvestmentInputs(
        ...     base_price=1_000_000,
        ...     booking_month=1, booking_year=2025,
        ...     handover_quarter=1, handover_year=2027,
        ... )
        >>> inputs.timeline.construction_months
        24
    """

    schema_version: PositiveInt = CURRENT_SCHEMA_VERSION

    # Property and calendar
    base_price: float
    booking_month: MonthOfYear
    booking_year: int
    handover_quarter: QuarterOfYear
    handover_year: int
    unit_size_sqft: PositiveFloat = 0.0

    # Payment plan
    pre_handover_percent: Percent = 20.0
    additional_payments: Tuple[PaymentMilestone, ...] = ()
    has_post_handover_plan: bool = False
    post_handover_percent: Percent = 0.0
    post_handover_payments: Tuple[PostHandoverInstallment, ...] = ()

    # Entry costs
    registration_fee_percent: Percent = 4.0
    admin_fee: PositiveFloat = 0.0
    oqood_fee: PositiveFloat = 5000.0

    # Appreciation phases (% per year)
    construction_appreciation: float = 12.0
    growth_appreciation: float = 8.0
    mature_appreciation: float = 4.0
    growth_period_years: PositiveInt = 5

    # Long-term rental
    rental_yield_percent: Percent = 8.5
    rent_growth_rate: float = 4.0
    service_charge_per_sqft: PositiveFloat = 18.0

    # Short-term rental comparison
    show_short_term_comparison: bool = False
    short_term_rental: ShortTermRentalConfig = Field(default_factory=ShortTermRentalConfig)
    adr_growth_rate: float = 3.0

    # Exit
    exit_agent_commission_enabled: bool = False
    exit_agent_commission_percent: Percent = 2.0
    exit_noc_fee: PositiveFloat = 5000.0
    minimum_exit_threshold: Percent = 30.0

    # Market context
    zone_maturity_level: Percent = 60.0
    value_differentiators: Tuple[str, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def check_required_fields(cls, data: Any) -> Any:
        """Report missing or unusable structural fields by name."""
        if not isinstance(data, dict):
            return data
        for name in REQUIRED_FIELDS:
            if data.get(name) is None:
                raise InvalidInputError(name)
        try:
            base_price = float(data["base_price"])
        except (TypeError, ValueError):
            raise InvalidInputError("base_price", "base_price must be a number") from None
        if base_price <= 0:
            raise InvalidInputError("base_price", "base_price must be greater than zero")
        if not 1 <= _as_int(data["booking_month"], "booking_month") <= 12:
            raise InvalidInputError("booking_month", "booking_month must be between 1 and 12")
        if not 1 <= _as_int(data["handover_quarter"], "handover_quarter") <= 4:
            raise InvalidInputError("handover_quarter", "handover_quarter must be between 1 and 4")
        _as_int(data["booking_year"], "booking_year")
        _as_int(data["handover_year"], "handover_year")
        return data

    @property
    def timeline(self) -> QuoteTimeline:
        """Booking-to-handover calendar of this quote."""
        return QuoteTimeline.from_dates(
            booking_month=self.booking_month,
            booking_year=self.booking_year,
            handover_quarter=self.handover_quarter,
            handover_year=self.handover_year,
        )

    @property
    def registration_fee(self) -> float:
        """Land registration fee charged on the base price."""
        return self.base_price * self.registration_fee_percent / 100

    @property
    def entry_costs(self) -> float:
        """Fees paid on top of the price at booking."""
        return self.registration_fee + self.admin_fee + self.oqood_fee

    @property
    def milestones_percent(self) -> float:
        return sum(m.percent for m in self.additional_payments)

    @property
    def post_handover_installments_percent(self) -> float:
        return sum(p.percent for p in self.post_handover_payments)

    @property
    def average_appreciation(self) -> float:
        """Mean of the three phase rates."""
        return (
            self.construction_appreciation
            + self.growth_appreciation
            + self.mature_appreciation
        ) / 3

    @property
    def appreciation_volatility(self) -> float:
        """Spread between the construction and mature phase rates."""
        return abs(self.construction_appreciation - self.mature_appreciation)

    def fingerprint(self) -> str:
        """Stable hash of the inputs, usable as a caller-owned cache key."""
        return hashlib.sha256(self.model_dump_json().encode("utf-8")).hexdigest()


def _as_int(value: Any, field: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidInputError(field, f"{field} must be an integer") from None
