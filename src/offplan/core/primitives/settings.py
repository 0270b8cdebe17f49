# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Tuple

from pydantic import Field, field_validator

from .enums import ProgressCurveEnum, RentBasisEnum
from .model import Model
from .types import PositiveFloat, PositiveInt, StrictlyPositiveInt


class ScheduleSettings(Model):
    """Settings for payment schedule construction."""

    progress_curve: ProgressCurveEnum = Field(
        default=ProgressCurveEnum.LINEAR,
        description="Mapping of construction-progress milestones onto the construction timeline.",
    )
    strict_balance: bool = Field(
        default=False,
        description="If True, reject payment plans that do not total 100% instead of reporting the drift.",
    )
    balance_tolerance_percent: PositiveFloat = Field(
        default=0.5,
        description="Allowed deviation (percentage points) of the plan total from 100%.",
    )


class ProjectionSettings(Model):
    """Settings for the yearly projection horizon and rent basis."""

    min_horizon_years: StrictlyPositiveInt = Field(
        default=10, description="Shortest projection horizon in years."
    )
    holding_period_years: PositiveInt = Field(
        default=5, description="Years held after the handover year."
    )
    rent_basis: RentBasisEnum = Field(
        default=RentBasisEnum.PURCHASE_PRICE,
        description="Value the gross rental yield applies to in the first rental year.",
    )


class ExitSettings(Model):
    """Settings for exit scenario generation."""

    default_exit_months: Tuple[int, ...] = Field(
        default=(12, 24, 36, 60, 120),
        description="Exit months (from booking) analyzed when the caller requests none.",
    )
    include_handover_exit: bool = Field(
        default=True, description="Also analyze an exit at the handover month."
    )

    @field_validator("default_exit_months")
    @classmethod
    def validate_exit_months(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        """Exit months must be positive; duplicates are removed and order normalized."""
        if any(month <= 0 for month in v):
            raise ValueError("Exit months must be positive")
        return tuple(sorted(set(v)))


class MortgageSettings(Model):
    """Settings for mortgage stress testing."""

    stress_rate_increments: Tuple[float, ...] = Field(
        default=(1.0, 2.0),
        description="Interest rate shocks (percentage points) applied on top of the quoted rate.",
    )
    tight_cashflow_band: PositiveFloat = Field(
        default=0.10,
        description="Shortfall, as a fraction of monthly debt service, still classified as tight.",
    )


class ComparisonSettings(Model):
    """Settings for the multi-quote recommendation engine."""

    roe_reference_month: StrictlyPositiveInt = Field(
        default=36, description="Exit month whose annualized ROE feeds the ROI score."
    )
    profit_reference_month: StrictlyPositiveInt = Field(
        default=60, description="Exit month whose total profit feeds the ROI score."
    )
    break_even_cap_years: PositiveFloat = Field(
        default=100.0,
        description="Years-to-break-even value used for quotes that never break even.",
    )


# --- Main Global Settings Class ---


class GlobalSettings(Model):
    """Global engine settings

    Groups the tunable behaviour of every component by functional area.
    Settings are passed explicitly; the engine keeps no module-level state.
    """

    schedule: ScheduleSettings = Field(default_factory=ScheduleSettings)
    projection: ProjectionSettings = Field(default_factory=ProjectionSettings)
    exit: ExitSettings = Field(default_factory=ExitSettings)
    mortgage: MortgageSettings = Field(default_factory=MortgageSettings)
    comparison: ComparisonSettings = Field(default_factory=ComparisonSettings)
