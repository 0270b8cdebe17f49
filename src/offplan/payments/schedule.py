# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Payment schedule builder.

Turns the percentage-based payment plan of a quote into a dated monthly
schedule of cash outflows:

- Booking (month 0): the pre-handover share not covered by milestones
  falling before handover
- Milestones: at a month offset (date trigger) or at the month a
  construction percentage is reached (construction trigger)
- Handover (month H): whatever the pre-handover share, late milestones and
  the post-handover plan leave unpaid
- Post-handover installments: ``H + months_after_handover``

Entries are sorted by month and entries sharing a month are merged. The
builder never forces the plan to total 100%: drift is logged and reported
on the schedule, unless strict mode is enabled in ``ScheduleSettings``.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

import pandas as pd

from ..core.inputs import InvestmentInputs
from ..core.primitives import (
    MilestoneTriggerEnum,
    Model,
    ScheduleImbalanceError,
    ScheduleSettings,
)
from .progress import construction_to_month, round_half_up

logger = logging.getLogger(__name__)


class PaymentEntry(Model):
    """
    One month of scheduled payments.

    Attributes:
        month: Month offset from booking
        period: Calendar month of the payment
        percent_of_price: Share of the base price due in this month
        amount: Currency amount due in this month
        labels: Names of the payments merged into this entry
    """

    month: int
    period: pd.Period
    percent_of_price: float
    amount: float
    labels: Tuple[str, ...] = ()


class PaymentSchedule(Model):
    """Chronologically ordered payment entries of one quote."""

    base_price: float
    handover_month: int
    entries: Tuple[PaymentEntry, ...]

    @property
    def total_percent(self) -> float:
        return sum(e.percent_of_price for e in self.entries)

    @property
    def total_amount(self) -> float:
        return sum(e.amount for e in self.entries)

    @property
    def drift(self) -> float:
        """Deviation (percentage points) of the plan total from 100%."""
        return self.total_percent - 100.0

    def paid_through(self, month: int) -> float:
        """Amount paid in months up to and including ``month``."""
        return sum(e.amount for e in self.entries if e.month <= month)

    def paid_percent_through(self, month: int) -> float:
        """Share of the price paid in months up to and including ``month``."""
        return sum(e.percent_of_price for e in self.entries if e.month <= month)

    def remaining_after(self, month: int) -> float:
        """Scheduled amount still unpaid after ``month``."""
        return sum(e.amount for e in self.entries if e.month > month)

    def pre_handover_amount(self) -> float:
        """Amount paid before the handover month."""
        return sum(e.amount for e in self.entries if e.month < self.handover_month)

    def month_threshold_met(self, threshold_percent: float) -> Optional[int]:
        """First month at which cumulative payments reach ``threshold_percent``."""
        cumulative = 0.0
        for entry in self.entries:
            cumulative += entry.percent_of_price
            if cumulative >= threshold_percent:
                return entry.month
        return None


def build_schedule(
    inputs: InvestmentInputs, settings: Optional[ScheduleSettings] = None
) -> PaymentSchedule:
    """
    Build the monthly payment schedule of a quote.

    Args:
        inputs: Quote inputs carrying the payment plan
        settings: Schedule settings (progress curve, strictness)

    Returns:
        PaymentSchedule with merged, chronologically sorted entries

    Raises:
        ScheduleImbalanceError: In strict mode, when the plan total drifts
            from 100% by more than the configured tolerance
    """
    settings = settings or ScheduleSettings()
    timeline = inputs.timeline
    handover_month = timeline.construction_months

    raw: List[Tuple[int, float, str]] = []
    before_handover = 0.0
    at_or_after_handover = 0.0

    for index, milestone in enumerate(inputs.additional_payments):
        if milestone.percent <= 0:
            continue
        if milestone.trigger == MilestoneTriggerEnum.CONSTRUCTION:
            month = construction_to_month(
                milestone.trigger_value, handover_month, settings.progress_curve
            )
            label = milestone.label or f"{milestone.trigger_value:g}% construction"
        else:
            month = round_half_up(milestone.trigger_value)
            label = milestone.label or f"Month {month}"
        raw.append((month, milestone.percent, label))
        if month < handover_month:
            before_handover += milestone.percent
        else:
            at_or_after_handover += milestone.percent
        logger.debug(f"Milestone {index} ({label}) placed at month {month}")

    booking_percent = inputs.pre_handover_percent - before_handover
    if booking_percent < 0:
        logger.warning(
            f"Milestones before handover ({before_handover:.2f}%) exceed the "
            f"pre-handover share ({inputs.pre_handover_percent:.2f}%); booking payment set to 0"
        )
        booking_percent = 0.0
    raw.append((0, booking_percent, "Booking"))

    post_handover_percent = (
        inputs.post_handover_percent if inputs.has_post_handover_plan else 0.0
    )
    handover_percent = (
        100.0 - inputs.pre_handover_percent - at_or_after_handover - post_handover_percent
    )
    if handover_percent < 0:
        logger.warning(
            f"Payment plan leaves {handover_percent:.2f}% due at handover; set to 0"
        )
        handover_percent = 0.0
    raw.append((handover_month, handover_percent, "Handover"))

    if inputs.has_post_handover_plan:
        for installment in inputs.post_handover_payments:
            if installment.percent <= 0:
                continue
            month = handover_month + installment.months_after_handover
            label = installment.label or f"Handover + {installment.months_after_handover}m"
            raw.append((month, installment.percent, label))

    schedule = PaymentSchedule(
        base_price=inputs.base_price,
        handover_month=handover_month,
        entries=_merge_entries(raw, inputs.base_price, timeline.period_at),
    )

    drift = schedule.drift
    if abs(drift) > settings.balance_tolerance_percent:
        if settings.strict_balance:
            raise ScheduleImbalanceError(schedule.total_percent, settings.balance_tolerance_percent)
        logger.warning(
            f"Payment plan totals {schedule.total_percent:.2f}% of the price "
            f"(drift {drift:+.2f} points); residual is the caller's responsibility"
        )
    return schedule


def _merge_entries(raw, base_price: float, period_at) -> Tuple[PaymentEntry, ...]:
    """Sum entries sharing a month, drop empty ones and sort chronologically."""
    merged: Dict[int, Tuple[float, List[str]]] = {}
    for month, percent, label in raw:
        if percent <= 0:
            continue
        total, labels = merged.get(month, (0.0, []))
        merged[month] = (total + percent, labels + [label])

    return tuple(
        PaymentEntry(
            month=month,
            period=period_at(month),
            percent_of_price=percent,
            amount=base_price * percent / 100,
            labels=tuple(labels),
        )
        for month, (percent, labels) in sorted(merged.items())
    )
