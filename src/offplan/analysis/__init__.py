# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Quote analysis: yearly projection assembly, exit scenarios, hold metrics
and the ``quote`` entry point running the full pipeline.
"""

from .api import QuoteResult, quote
from .exit import ExitScenario, ExitScenarioAnalyzer, annualized_roe, default_exit_months
from .hold import HoldAnalysis, analyze_hold
from .projection import YearlyProjectionPoint, assemble, build_points, financing_schedule

__all__ = [
    "ExitScenario",
    "ExitScenarioAnalyzer",
    "HoldAnalysis",
    "QuoteResult",
    "YearlyProjectionPoint",
    "analyze_hold",
    "annualized_roe",
    "assemble",
    "build_points",
    "default_exit_months",
    "financing_schedule",
    "quote",
]
