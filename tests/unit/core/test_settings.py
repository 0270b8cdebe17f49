# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest
from pydantic import ValidationError

from offplan.core.primitives import (
    ComparisonSettings,
    ExitSettings,
    GlobalSettings,
    ProgressCurveEnum,
    ProjectionSettings,
    RentBasisEnum,
    ScheduleSettings,
)


def test_global_settings_default_instantiation():
    """GlobalSettings composes every settings group with its defaults."""
    settings = GlobalSettings()
    assert settings.schedule.progress_curve == ProgressCurveEnum.LINEAR
    assert settings.schedule.strict_balance is False
    assert settings.projection.min_horizon_years == 10
    assert settings.projection.holding_period_years == 5
    assert settings.projection.rent_basis == RentBasisEnum.PURCHASE_PRICE
    assert settings.exit.default_exit_months == (12, 24, 36, 60, 120)
    assert settings.mortgage.stress_rate_increments == (1.0, 2.0)
    assert settings.comparison.roe_reference_month == 36
    assert settings.comparison.profit_reference_month == 60


def test_global_settings_custom_instantiation():
    settings = GlobalSettings(
        schedule=ScheduleSettings(strict_balance=True),
        projection={"min_horizon_years": 15},
    )
    assert settings.schedule.strict_balance is True
    assert settings.projection.min_horizon_years == 15


def test_exit_months_are_sorted_and_deduplicated():
    assert ExitSettings(default_exit_months=(60, 12, 12)).default_exit_months == (12, 60)


def test_exit_months_must_be_positive():
    with pytest.raises(ValidationError, match="Exit months must be positive"):
        ExitSettings(default_exit_months=(0, 12))


def test_settings_reject_unknown_fields():
    with pytest.raises(ValidationError):
        GlobalSettings(reporting={})


@pytest.mark.parametrize(
    "factory",
    [
        lambda: ProjectionSettings(min_horizon_years=0),
        lambda: ComparisonSettings(roe_reference_month=0),
        lambda: ComparisonSettings(profit_reference_month=0),
    ],
)
def test_horizon_and_reference_months_must_be_positive(factory):
    with pytest.raises(ValidationError):
        factory()
