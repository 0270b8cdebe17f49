# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Offplan Core

Primitives shared across the engine and the closed input schema consumed by
every component.
"""

from .inputs import (
    InvestmentInputs,
    MortgageInputs,
    PaymentMilestone,
    PostHandoverInstallment,
    ShortTermRentalConfig,
    migrate_inputs,
)
from .primitives import GlobalSettings, InvalidInputError, QuoteTimeline

__all__ = [
    "GlobalSettings",
    "InvalidInputError",
    "InvestmentInputs",
    "MortgageInputs",
    "PaymentMilestone",
    "PostHandoverInstallment",
    "QuoteTimeline",
    "ShortTermRentalConfig",
    "migrate_inputs",
]
