# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .progress import (
    construction_to_month,
    construction_to_timeline,
    month_to_construction,
    round_half_up,
    timeline_to_construction,
)
from .schedule import PaymentEntry, PaymentSchedule, build_schedule

__all__ = [
    "PaymentEntry",
    "PaymentSchedule",
    "build_schedule",
    "construction_to_month",
    "construction_to_timeline",
    "month_to_construction",
    "round_half_up",
    "timeline_to_construction",
]
