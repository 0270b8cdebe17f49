# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Construction progress curves.

Maps construction progress (% complete) to elapsed construction time (% of
the booking-to-handover period) and back. The linear curve is the default;
the S-curve reflects high-rise construction, where foundations and finishing
take longer per percentage point than the superstructure.
"""

from __future__ import annotations

import math

import numpy as np

from ..core.primitives import ProgressCurveEnum

# (timeline %, construction %) breakpoints of a 30-40 storey tower build
S_CURVE_TIMELINE = np.array([0, 25, 42, 50, 58, 67, 75, 89, 100], dtype=float)
S_CURVE_CONSTRUCTION = np.array([0, 18, 35, 40, 50, 65, 75, 90, 100], dtype=float)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def timeline_to_construction(
    timeline_percent: float, curve: ProgressCurveEnum = ProgressCurveEnum.LINEAR
) -> float:
    """Construction progress (%) reached after ``timeline_percent`` of the schedule."""
    t = min(100.0, max(0.0, timeline_percent))
    if curve == ProgressCurveEnum.S_CURVE:
        return float(np.interp(t, S_CURVE_TIMELINE, S_CURVE_CONSTRUCTION))
    return t


def construction_to_timeline(
    construction_percent: float, curve: ProgressCurveEnum = ProgressCurveEnum.LINEAR
) -> float:
    """Share of the schedule (%) elapsed when construction reaches ``construction_percent``."""
    c = min(100.0, max(0.0, construction_percent))
    if curve == ProgressCurveEnum.S_CURVE:
        return float(np.interp(c, S_CURVE_CONSTRUCTION, S_CURVE_TIMELINE))
    return c


def construction_to_month(
    construction_percent: float,
    total_months: int,
    curve: ProgressCurveEnum = ProgressCurveEnum.LINEAR,
) -> int:
    """Month offset from booking at which a construction milestone is reached."""
    timeline_percent = construction_to_timeline(construction_percent, curve)
    return round_half_up(timeline_percent / 100 * total_months)


def month_to_construction(
    month: int,
    total_months: int,
    curve: ProgressCurveEnum = ProgressCurveEnum.LINEAR,
) -> float:
    """Construction progress (%) at a month offset from booking."""
    if total_months <= 0:
        return 100.0
    return timeline_to_construction(month / total_months * 100, curve)
