# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Offplan Core Primitives

Essential building blocks shared by every component of the quoting engine:
the immutable model base, constrained types, enums, settings, the quote
timeline and the engine's error types.
"""

from .enums import (
    AppreciationPhaseEnum,
    CashflowStatusEnum,
    DifferentiatorCategoryEnum,
    InvestmentFocusEnum,
    MilestoneTriggerEnum,
    PhaseEnum,
    ProgressCurveEnum,
    RentBasisEnum,
)
from .errors import InvalidInputError, ScheduleImbalanceError
from .model import Model
from .settings import (
    ComparisonSettings,
    ExitSettings,
    GlobalSettings,
    MortgageSettings,
    ProjectionSettings,
    ScheduleSettings,
)
from .timeline import QuoteTimeline, quarter_start_month
from .types import (
    MonthOfYear,
    Percent,
    PositiveFloat,
    PositiveInt,
    QuarterOfYear,
    StrictlyPositiveFloat,
    StrictlyPositiveInt,
)

__all__ = [
    "AppreciationPhaseEnum",
    "CashflowStatusEnum",
    "ComparisonSettings",
    "DifferentiatorCategoryEnum",
    "ExitSettings",
    "GlobalSettings",
    "InvalidInputError",
    "InvestmentFocusEnum",
    "MilestoneTriggerEnum",
    "Model",
    "MonthOfYear",
    "MortgageSettings",
    "Percent",
    "PhaseEnum",
    "PositiveFloat",
    "PositiveInt",
    "ProgressCurveEnum",
    "ProjectionSettings",
    "QuarterOfYear",
    "QuoteTimeline",
    "RentBasisEnum",
    "ScheduleImbalanceError",
    "ScheduleSettings",
    "StrictlyPositiveFloat",
    "StrictlyPositiveInt",
    "quarter_start_month",
]
