# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Phased appreciation curve.

Property value compounds annually at one of three rates depending on the
phase of the year: construction (up to and including the handover year),
growth (the next ``growth_period_years`` years) and mature (afterwards).
Compounding is continuous across phases; no phase re-bases the value.
"""

from __future__ import annotations

import numpy as np
from pydantic import Field

from ..core.inputs import InvestmentInputs
from ..core.primitives import AppreciationPhaseEnum, Model, PositiveInt


class AppreciationCurve(Model):
    """
    Converts a phase-based annual appreciation schedule into property values.

    Attributes:
        construction_rate: Annual appreciation (%) during construction years
        growth_rate: Annual appreciation (%) during the growth phase
        mature_rate: Annual appreciation (%) once the area has matured
        growth_period_years: Length of the growth phase in years
        construction_years: Whole years using the construction rate

    Example:
        >>> curve = AppreciationCurve(
        ...     construction_rate=10, growth_rate=6, mature_rate=3,
        ...     growth_period_years=5, construction_years=2,
        ... )
        >>> round(curve.value_at(1_000_000, 2))
        1210000
    """

    construction_rate: float
    growth_rate: float
    mature_rate: float
    growth_period_years: PositiveInt = 5
    construction_years: PositiveInt = Field(default=0)

    @classmethod
    def from_inputs(cls, inputs: InvestmentInputs) -> "AppreciationCurve":
        """Build the curve of a quote; the construction length comes from its timeline."""
        return cls(
            construction_rate=inputs.construction_appreciation,
            growth_rate=inputs.growth_appreciation,
            mature_rate=inputs.mature_appreciation,
            growth_period_years=inputs.growth_period_years,
            construction_years=inputs.timeline.construction_years,
        )

    def phase_for_year(self, year: int) -> AppreciationPhaseEnum:
        """Phase governing elapsed year ``year`` (1-based)."""
        if year <= self.construction_years:
            return AppreciationPhaseEnum.CONSTRUCTION
        if year <= self.construction_years + self.growth_period_years:
            return AppreciationPhaseEnum.GROWTH
        return AppreciationPhaseEnum.MATURE

    def rate_for_year(self, year: int) -> float:
        """Annual appreciation rate (%) applied in elapsed year ``year``."""
        phase = self.phase_for_year(year)
        if phase == AppreciationPhaseEnum.CONSTRUCTION:
            return self.construction_rate
        if phase == AppreciationPhaseEnum.GROWTH:
            return self.growth_rate
        return self.mature_rate

    def growth_factors(self, years: int) -> np.ndarray:
        """Per-year growth factors ``1 + rate/100`` for years 1..years."""
        rates = np.array([self.rate_for_year(y) for y in range(1, years + 1)], dtype=float)
        return 1.0 + rates / 100.0

    def values(self, base_price: float, years: int) -> np.ndarray:
        """
        Property values at whole years 0..years.

        Element 0 is the base price itself; element ``y`` is ``value_at(base_price, y)``.
        """
        out = np.empty(years + 1, dtype=float)
        out[0] = base_price
        value = base_price
        for i, factor in enumerate(self.growth_factors(years), start=1):
            value *= factor
            out[i] = value
        return out

    def value_at(self, base_price: float, elapsed_years: int) -> float:
        """
        Property value after ``elapsed_years`` whole years.

        Fractional years are not interpolated here; ``elapsed_years == 0``
        returns the base price unchanged.
        """
        if elapsed_years <= 0:
            return base_price
        value = base_price
        for year in range(1, int(elapsed_years) + 1):
            value *= 1 + self.rate_for_year(year) / 100
        return value

    def value_at_month(self, base_price: float, months: int) -> float:
        """Value at a month offset, linearly interpolated between bounding whole years."""
        if months <= 0:
            return base_price
        whole_years, remainder = divmod(months, 12)
        lower = self.value_at(base_price, whole_years)
        if remainder == 0:
            return lower
        upper = lower * (1 + self.rate_for_year(whole_years + 1) / 100)
        return lower + (upper - lower) * remainder / 12
