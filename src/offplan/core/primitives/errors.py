# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Errors raised by the quoting engine.

The engine prefers defaults over failures: only structurally required
inputs (base price, booking date, handover date) are rejected. The errors
do not derive from ``ValueError``: pydantic validators propagate them
unchanged instead of folding them into a ``ValidationError``.
"""

from __future__ import annotations

from typing import Optional


class InvalidInputError(Exception):
    """A structurally required input is missing or unusable."""

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f"Missing or invalid required input: '{field}'")


class ScheduleImbalanceError(InvalidInputError):
    """Payment plan percentages do not add up to 100 (strict mode only)."""

    def __init__(self, total_percent: float, tolerance: float):
        self.total_percent = total_percent
        self.tolerance = tolerance
        super().__init__(
            "payment_plan",
            f"Payment plan totals {total_percent:.2f}% of the price "
            f"(expected 100% ± {tolerance:.2f})",
        )
