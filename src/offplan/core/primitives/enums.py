# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class MilestoneTriggerEnum(str, Enum):
    """
    What releases an additional pre-handover payment.

    DATE milestones fall a fixed number of months after booking.
    CONSTRUCTION milestones fall when construction reaches a given
    percentage, mapped onto the construction timeline by a progress curve.
    """

    DATE = "date"
    CONSTRUCTION = "construction"


class ProgressCurveEnum(str, Enum):
    """Mapping from construction progress (%) to elapsed construction time."""

    LINEAR = "linear"
    S_CURVE = "s_curve"  # Slow foundations, fast superstructure, slow finishing


class PhaseEnum(str, Enum):
    """Lifecycle phase of a projection year."""

    CONSTRUCTION = "construction"
    HANDOVER = "handover"
    HOLD = "hold"


class AppreciationPhaseEnum(str, Enum):
    """Appreciation phase selecting the compounding rate for a year."""

    CONSTRUCTION = "construction"
    GROWTH = "growth"
    MATURE = "mature"


class RentBasisEnum(str, Enum):
    """
    Value the gross rental yield is applied to in the first rental year.

    PURCHASE_PRICE: yield on the price paid (market convention for quotes)
    PROPERTY_VALUE: yield on the appreciated value of that year
    """

    PURCHASE_PRICE = "purchase_price"
    PROPERTY_VALUE = "property_value"


class CashflowStatusEnum(str, Enum):
    """Classification of monthly cashflow after debt service."""

    POSITIVE = "positive"
    TIGHT = "tight"
    NEGATIVE = "negative"


class InvestmentFocusEnum(str, Enum):
    """Scoring categories of the multi-quote recommendation."""

    ROI = "roi"
    SAFETY = "safety"
    CASHFLOW = "cashflow"


class DifferentiatorCategoryEnum(str, Enum):
    """Catalog grouping of value differentiators."""

    LOCATION = "location"
    UNIT = "unit"
    DEVELOPER = "developer"
    TRANSPORT = "transport"
    FINANCIAL = "financial"
    AMENITIES = "amenities"
