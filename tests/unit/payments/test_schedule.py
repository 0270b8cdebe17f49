# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Payment Schedule Unit Tests

Test Coverage:
1. Booking and handover payments of a plain plan
2. Date and construction milestones before and after handover
3. Post-handover installments
4. Merging of payments falling in the same month
5. Permissive drift reporting and strict rejection
6. Cumulative paid / remaining / resale threshold helpers
"""

from __future__ import annotations

import pandas as pd
import pytest

from offplan.core.inputs import PaymentMilestone, PostHandoverInstallment
from offplan.core.primitives import (
    InvalidInputError,
    MilestoneTriggerEnum,
    ProgressCurveEnum,
    ScheduleImbalanceError,
    ScheduleSettings,
)
from offplan.payments import build_schedule

from ...conftest import make_inputs


def _months(schedule):
    return [e.month for e in schedule.entries]


def _percents(schedule):
    return [e.percent_of_price for e in schedule.entries]


class TestBasicPlan:
    def test_booking_and_handover(self, sample_inputs):
        schedule = build_schedule(sample_inputs)
        assert _months(schedule) == [0, 24]
        assert _percents(schedule) == pytest.approx([20, 80])
        assert [e.amount for e in schedule.entries] == pytest.approx([200_000, 800_000])
        assert schedule.total_percent == pytest.approx(100)
        assert schedule.drift == pytest.approx(0)
        assert schedule.handover_month == 24

    def test_entries_carry_calendar_months_and_labels(self, sample_inputs):
        booking, handover = build_schedule(sample_inputs).entries
        assert booking.period == pd.Period("2025-01", freq="M")
        assert handover.period == pd.Period("2027-01", freq="M")
        assert booking.labels == ("Booking",)
        assert handover.labels == ("Handover",)


class TestMilestones:
    def test_date_and_construction_milestones(self):
        inputs = make_inputs(
            pre_handover_percent=30,
            additional_payments=(
                PaymentMilestone(trigger=MilestoneTriggerEnum.DATE, trigger_value=6, percent=10),
                PaymentMilestone(
                    trigger=MilestoneTriggerEnum.CONSTRUCTION, trigger_value=50, percent=10
                ),
            ),
        )
        schedule = build_schedule(inputs)
        assert _months(schedule) == [0, 6, 12, 24]
        assert _percents(schedule) == pytest.approx([10, 10, 10, 70])
        assert schedule.total_percent == pytest.approx(100)

    def test_s_curve_moves_construction_milestones(self):
        inputs = make_inputs(
            pre_handover_percent=30,
            additional_payments=(
                PaymentMilestone(
                    trigger=MilestoneTriggerEnum.CONSTRUCTION, trigger_value=40, percent=10
                ),
            ),
        )
        linear = build_schedule(inputs)
        s_curve = build_schedule(inputs, ScheduleSettings(progress_curve=ProgressCurveEnum.S_CURVE))
        assert 10 in _months(linear)  # round(0.40 * 24)
        assert 12 in _months(s_curve)  # 40% built at 50% of the timeline

    def test_milestone_after_handover_reduces_handover_payment(self):
        inputs = make_inputs(
            additional_payments=(
                PaymentMilestone(trigger=MilestoneTriggerEnum.DATE, trigger_value=30, percent=10),
            ),
        )
        schedule = build_schedule(inputs)
        assert _months(schedule) == [0, 24, 30]
        assert _percents(schedule) == pytest.approx([20, 70, 10])

    def test_payments_in_the_same_month_are_merged(self):
        inputs = make_inputs(
            additional_payments=(
                PaymentMilestone(
                    trigger=MilestoneTriggerEnum.DATE, trigger_value=0, percent=5, label="EOI"
                ),
            ),
        )
        schedule = build_schedule(inputs)
        first = schedule.entries[0]
        assert first.month == 0
        assert first.percent_of_price == pytest.approx(20)
        assert set(first.labels) == {"EOI", "Booking"}

    def test_zero_percent_milestones_are_dropped(self):
        inputs = make_inputs(
            additional_payments=(
                PaymentMilestone(trigger=MilestoneTriggerEnum.DATE, trigger_value=6, percent=0),
            ),
        )
        assert _months(build_schedule(inputs)) == [0, 24]

    def test_oversized_milestones_floor_booking_at_zero(self):
        inputs = make_inputs(
            pre_handover_percent=10,
            additional_payments=(
                PaymentMilestone(trigger=MilestoneTriggerEnum.DATE, trigger_value=6, percent=20),
            ),
        )
        schedule = build_schedule(inputs)
        assert _months(schedule) == [6, 24]
        assert schedule.drift == pytest.approx(10)


class TestPostHandoverPlan:
    def test_installments_after_handover(self):
        inputs = make_inputs(
            has_post_handover_plan=True,
            post_handover_percent=30,
            post_handover_payments=(
                PostHandoverInstallment(months_after_handover=6, percent=15),
                PostHandoverInstallment(months_after_handover=12, percent=15),
            ),
        )
        schedule = build_schedule(inputs)
        assert _months(schedule) == [0, 24, 30, 36]
        assert _percents(schedule) == pytest.approx([20, 50, 15, 15])
        assert schedule.total_percent == pytest.approx(100)

    def test_installments_ignored_without_plan_flag(self):
        inputs = make_inputs(
            post_handover_percent=30,
            post_handover_payments=(PostHandoverInstallment(months_after_handover=6, percent=30),),
        )
        assert _months(build_schedule(inputs)) == [0, 24]


class TestDrift:
    @pytest.fixture
    def unbalanced_inputs(self):
        # Installments cover 20 of the 30 post-handover points
        return make_inputs(
            has_post_handover_plan=True,
            post_handover_percent=30,
            post_handover_payments=(PostHandoverInstallment(months_after_handover=6, percent=20),),
        )

    def test_drift_is_reported_not_fixed(self, unbalanced_inputs, caplog):
        schedule = build_schedule(unbalanced_inputs)
        assert schedule.total_percent == pytest.approx(90)
        assert schedule.drift == pytest.approx(-10)
        assert "drift" in caplog.text

    def test_strict_mode_rejects_drift(self, unbalanced_inputs):
        with pytest.raises(ScheduleImbalanceError) as exc_info:
            build_schedule(unbalanced_inputs, ScheduleSettings(strict_balance=True))
        assert isinstance(exc_info.value, InvalidInputError)
        assert exc_info.value.total_percent == pytest.approx(90)

    def test_strict_mode_tolerates_small_drift(self):
        inputs = make_inputs(
            has_post_handover_plan=True,
            post_handover_percent=30,
            post_handover_payments=(
                PostHandoverInstallment(months_after_handover=6, percent=29.8),
            ),
        )
        schedule = build_schedule(inputs, ScheduleSettings(strict_balance=True))
        assert schedule.drift == pytest.approx(-0.2)


class TestCumulativeHelpers:
    def test_paid_and_remaining(self, sample_inputs):
        schedule = build_schedule(sample_inputs)
        assert schedule.paid_through(23) == pytest.approx(200_000)
        assert schedule.paid_through(24) == pytest.approx(1_000_000)
        assert schedule.remaining_after(23) == pytest.approx(800_000)
        assert schedule.paid_percent_through(12) == pytest.approx(20)
        assert schedule.pre_handover_amount() == pytest.approx(200_000)

    def test_month_threshold_met(self, sample_inputs):
        schedule = build_schedule(sample_inputs)
        assert schedule.month_threshold_met(20) == 0
        assert schedule.month_threshold_met(30) == 24
        assert schedule.month_threshold_met(101) is None

    def test_entries_strictly_chronological(self):
        inputs = make_inputs(
            pre_handover_percent=40,
            additional_payments=(
                PaymentMilestone(trigger=MilestoneTriggerEnum.DATE, trigger_value=18, percent=10),
                PaymentMilestone(trigger=MilestoneTriggerEnum.DATE, trigger_value=3, percent=10),
                PaymentMilestone(
                    trigger=MilestoneTriggerEnum.CONSTRUCTION, trigger_value=25, percent=10
                ),
            ),
        )
        months = _months(build_schedule(inputs))
        assert months == sorted(set(months))
