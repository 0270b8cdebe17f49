# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .projector import (
    SERVICE_CHARGE_INFLATION,
    RentalIncomeProjector,
    RentalYear,
    first_rental_year,
)

__all__ = [
    "SERVICE_CHARGE_INFLATION",
    "RentalIncomeProjector",
    "RentalYear",
    "first_rental_year",
]
