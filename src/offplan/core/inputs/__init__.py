# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .differentiators import (
    APPRECIATION_BONUS_CAP,
    VALUE_DIFFERENTIATORS,
    ValueDifferentiator,
    apply_appreciation_bonus,
    calculate_appreciation_bonus,
    get_differentiators_by_category,
)
from .investment import (
    CURRENT_SCHEMA_VERSION,
    InvestmentInputs,
    PaymentMilestone,
    PostHandoverInstallment,
    ShortTermRentalConfig,
)
from .migration import migrate_inputs, stamp_schema_version
from .mortgage import MortgageInputs

__all__ = [
    "APPRECIATION_BONUS_CAP",
    "CURRENT_SCHEMA_VERSION",
    "InvestmentInputs",
    "MortgageInputs",
    "PaymentMilestone",
    "PostHandoverInstallment",
    "ShortTermRentalConfig",
    "VALUE_DIFFERENTIATORS",
    "ValueDifferentiator",
    "apply_appreciation_bonus",
    "calculate_appreciation_bonus",
    "get_differentiators_by_category",
    "migrate_inputs",
    "stamp_schema_version",
]
