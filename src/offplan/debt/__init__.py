# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Mortgage financing of the handover balance: amortization schedules,
coverage and stress analysis.
"""

from .amortization import AmortizationSchedule, amortize, coverage_ratio, level_payment
from .analysis import MortgageAnalysis, StressScenario, analyze_mortgage, classify_cashflow

__all__ = [
    "AmortizationSchedule",
    "MortgageAnalysis",
    "StressScenario",
    "amortize",
    "analyze_mortgage",
    "classify_cashflow",
    "coverage_ratio",
    "level_payment",
]
