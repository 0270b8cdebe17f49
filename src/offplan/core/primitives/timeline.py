# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import math
from typing import Tuple

import pandas as pd
from pydantic import field_validator

from .enums import PhaseEnum
from .model import Model
from .types import MonthOfYear, QuarterOfYear


def quarter_start_month(quarter: int) -> int:
    """First calendar month (1-12) of a quarter (1-4)."""
    return (quarter - 1) * 3 + 1


class QuoteTimeline(Model):
    """
    Calendar frame of a single quote, from booking to handover and beyond.

    Months are counted as offsets from the booking month (booking = month 0).
    Projection year ``y`` covers months ``12(y-1)+1 .. 12y``; the handover
    year is the projection year containing the handover month.

    Attributes:
        booking_date: Monthly period of the booking (reservation) payment.
        handover_date: Monthly period of handover, the first month of the
            handover quarter.

    Examples:
        >>> timeline = QuoteTimeline.from_dates(
        ...     booking_month=1, booking_year=2025,
        ...     handover_quarter=1, handover_year=2027,
        ... )
        >>> timeline.construction_months
        24
        >>> timeline.handover_year_index
        2
    """

    booking_date: pd.Period
    handover_date: pd.Period

    @field_validator("booking_date", "handover_date", mode="before")
    @classmethod
    def normalize_period(cls, v) -> pd.Period:
        """Ensure dates are monthly pd.Period values."""
        if isinstance(v, pd.Period):
            return v if v.freqstr == "M" else v.asfreq("M")
        return pd.Period(v, freq="M")

    @classmethod
    def from_dates(
        cls,
        booking_month: MonthOfYear,
        booking_year: int,
        handover_quarter: QuarterOfYear,
        handover_year: int,
    ) -> "QuoteTimeline":
        """Create a timeline from booking month/year and handover quarter/year."""
        return cls(
            booking_date=pd.Period(year=booking_year, month=booking_month, freq="M"),
            handover_date=pd.Period(
                year=handover_year,
                month=quarter_start_month(handover_quarter),
                freq="M",
            ),
        )

    @property
    def construction_months(self) -> int:
        """Months from booking to handover; at least one month."""
        diff = (self.handover_date - self.booking_date).n
        return max(1, diff)

    @property
    def construction_years(self) -> int:
        """Whole projection years touched by construction (the handover year included)."""
        return math.ceil(self.construction_months / 12)

    @property
    def handover_year_index(self) -> int:
        """Projection year (1-based) that contains the handover month."""
        return self.construction_years

    @property
    def booking_year(self) -> int:
        return self.booking_date.year

    def calendar_year(self, year: int) -> int:
        """Calendar year label of projection year ``year``."""
        return self.booking_year + year - 1

    def period_at(self, month: int) -> pd.Period:
        """Calendar month of a month offset from booking."""
        return self.booking_date + month

    def year_of_month(self, month: int) -> int:
        """Projection year containing month offset ``month`` (month 0 belongs to year 1)."""
        return max(1, math.ceil(month / 12))

    def year_months(self, year: int) -> Tuple[int, int]:
        """First and last month offsets covered by projection year ``year``."""
        return 12 * (year - 1) + 1, 12 * year

    def rented_months(self, year: int) -> int:
        """Months of projection year ``year`` after handover (0-12)."""
        return min(12, max(0, 12 * year - self.construction_months))

    def phase(self, year: int) -> PhaseEnum:
        """Lifecycle phase flag of projection year ``year``."""
        if year < self.handover_year_index:
            return PhaseEnum.CONSTRUCTION
        if year == self.handover_year_index:
            return PhaseEnum.HANDOVER
        return PhaseEnum.HOLD

    def default_horizon(self, min_years: int, holding_period_years: int) -> int:
        """Projection horizon: max(min_years, handover year + holding period)."""
        return max(min_years, self.handover_year_index + holding_period_years)

    def period_index(self, months: int) -> pd.PeriodIndex:
        """Monthly PeriodIndex starting at booking."""
        return pd.period_range(start=self.booking_date, periods=months, freq="M")
