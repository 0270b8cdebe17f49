# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for Offplan testing.

The reference quote used across the suite:
- Price 1,000,000, 20% paid before handover, the rest at handover
- Booking January 2025, handover Q1 2027 (24 construction months)
- Appreciation 10% / 6% / 3% with a 5-year growth phase
- 7% gross yield, 1,000 sqft at 18 per sqft service charges
"""

from __future__ import annotations

from typing import Any

import pytest

from offplan.core.inputs import InvestmentInputs, MortgageInputs
from offplan.core.primitives import GlobalSettings


def make_inputs(**overrides: Any) -> InvestmentInputs:
    """Reference quote inputs with optional field overrides."""
    fields = dict(
        base_price=1_000_000.0,
        booking_month=1,
        booking_year=2025,
        handover_quarter=1,
        handover_year=2027,
        unit_size_sqft=1_000.0,
        pre_handover_percent=20.0,
        construction_appreciation=10.0,
        growth_appreciation=6.0,
        mature_appreciation=3.0,
        growth_period_years=5,
        rental_yield_percent=7.0,
        rent_growth_rate=4.0,
        service_charge_per_sqft=18.0,
        registration_fee_percent=4.0,
        admin_fee=0.0,
        oqood_fee=5_000.0,
        exit_noc_fee=5_000.0,
    )
    fields.update(overrides)
    return InvestmentInputs(**fields)


def make_mortgage(**overrides: Any) -> MortgageInputs:
    """Enabled mortgage on the handover balance with optional overrides."""
    fields = dict(enabled=True, financing_percent=60.0, interest_rate=4.5, term_years=25)
    fields.update(overrides)
    return MortgageInputs(**fields)


@pytest.fixture
def sample_inputs() -> InvestmentInputs:
    return make_inputs()


@pytest.fixture
def mid_year_inputs() -> InvestmentInputs:
    """Handover in July 2026: 18 construction months, a half rented year."""
    return make_inputs(handover_quarter=3, handover_year=2026)


@pytest.fixture
def sample_mortgage() -> MortgageInputs:
    return make_mortgage()


@pytest.fixture
def sample_settings() -> GlobalSettings:
    return GlobalSettings()
