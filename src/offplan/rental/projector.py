# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rental income projection.

Long-term rent starts the month after handover. The first rental year
applies the gross yield to its basis (purchase price, or the appreciated
property value of that year), later rental years compound at the rent
growth rate, and a handover falling mid-year prorates the first year.

An alternate short-term (holiday-home) stream can be projected side by side
from ADR, occupancy and operating costs. The two streams are never summed.
"""

from __future__ import annotations

from typing import Optional

from ..appreciation import AppreciationCurve
from ..core.inputs import InvestmentInputs
from ..core.primitives import Model, QuoteTimeline, RentBasisEnum

# Annual escalation of service charges; not user-configurable
SERVICE_CHARGE_INFLATION = 0.02

DAYS_PER_YEAR = 365


class RentalYear(Model):
    """
    Rental figures of one projection year.

    Attributes:
        year: Projection year (1-based)
        rented_months: Months of the year after handover (0-12)
        gross_rent: Long-term gross rent
        service_charges: Owner service charges
        net_rent: Gross rent minus service charges
        alt_gross_rent: Short-term gross revenue, when the comparison is enabled
        alt_net_rent: Short-term revenue net of operating, management and
            service charges, when the comparison is enabled
    """

    year: int
    rented_months: int = 0
    gross_rent: float = 0.0
    service_charges: float = 0.0
    net_rent: float = 0.0
    alt_gross_rent: Optional[float] = None
    alt_net_rent: Optional[float] = None


class RentalIncomeProjector(Model):
    """
    Projects yearly gross/net rent of a quote.

    Attributes:
        inputs: Quote inputs carrying rent assumptions
        rent_basis: Value the gross yield applies to in the first rental year
        first_rental_value: Property value in the first rental year; only
            used with ``RentBasisEnum.PROPERTY_VALUE``
    """

    inputs: InvestmentInputs
    rent_basis: RentBasisEnum = RentBasisEnum.PURCHASE_PRICE
    first_rental_value: Optional[float] = None

    @classmethod
    def from_inputs(
        cls,
        inputs: InvestmentInputs,
        curve: Optional[AppreciationCurve] = None,
        rent_basis: RentBasisEnum = RentBasisEnum.PURCHASE_PRICE,
    ) -> "RentalIncomeProjector":
        """Build a projector; ``curve`` supplies the first rental year value."""
        first_value = None
        if rent_basis == RentBasisEnum.PROPERTY_VALUE:
            curve = curve or AppreciationCurve.from_inputs(inputs)
            first_year = first_rental_year(inputs.timeline)
            first_value = curve.value_at(inputs.base_price, first_year)
        return cls(inputs=inputs, rent_basis=rent_basis, first_rental_value=first_value)

    @property
    def timeline(self) -> QuoteTimeline:
        return self.inputs.timeline

    @property
    def first_year_gross_rent(self) -> float:
        """Annualized gross rent of the first rental year."""
        if self.rent_basis == RentBasisEnum.PROPERTY_VALUE and self.first_rental_value is not None:
            basis = self.first_rental_value
        else:
            basis = self.inputs.base_price
        return basis * self.inputs.rental_yield_percent / 100

    @property
    def first_year_service_charges(self) -> float:
        return self.inputs.unit_size_sqft * self.inputs.service_charge_per_sqft

    def full_year(self, rental_year: int) -> RentalYear:
        """
        Annualized (unprorated) figures of the ``rental_year``-th year of renting.

        Rental year 1 is the first year with tenants.
        """
        inputs = self.inputs
        k = max(1, rental_year) - 1
        gross = self.first_year_gross_rent * (1 + inputs.rent_growth_rate / 100) ** k
        service = self.first_year_service_charges * (1 + SERVICE_CHARGE_INFLATION) ** k

        alt_gross = alt_net = None
        if inputs.show_short_term_comparison:
            str_cfg = inputs.short_term_rental
            adr = str_cfg.average_daily_rate * (1 + inputs.adr_growth_rate / 100) ** k
            alt_gross = adr * DAYS_PER_YEAR * str_cfg.occupancy_percent / 100
            cost_share = (str_cfg.operating_expense_percent + str_cfg.management_fee_percent) / 100
            alt_net = alt_gross * (1 - cost_share) - service

        return RentalYear(
            year=rental_year,
            rented_months=12,
            gross_rent=gross,
            service_charges=service,
            net_rent=gross - service,
            alt_gross_rent=alt_gross,
            alt_net_rent=alt_net,
        )

    def project_year(
        self, year: int, property_value_at_year: Optional[float] = None
    ) -> RentalYear:
        """
        Figures of projection year ``year`` (1-based, counted from booking).

        Construction years produce zero rent; the year containing a mid-year
        handover is prorated by its rented months.

        Args:
            year: Projection year
            property_value_at_year: Property value of ``year``. With the
                property-value rent basis it sets the first rental year's
                gross rent; later years compound from that figure.
        """
        rented = self.timeline.rented_months(year)
        if rented == 0:
            empty_alt = 0.0 if self.inputs.show_short_term_comparison else None
            return RentalYear(year=year, alt_gross_rent=empty_alt, alt_net_rent=empty_alt)

        rental_year = year - first_rental_year(self.timeline) + 1
        projector = self
        if (
            rental_year == 1
            and property_value_at_year is not None
            and self.rent_basis == RentBasisEnum.PROPERTY_VALUE
        ):
            projector = self.model_copy(update={"first_rental_value": property_value_at_year})
        annual = projector.full_year(rental_year)
        share = rented / 12
        return RentalYear(
            year=year,
            rented_months=rented,
            gross_rent=annual.gross_rent * share,
            service_charges=annual.service_charges * share,
            net_rent=annual.net_rent * share,
            alt_gross_rent=None if annual.alt_gross_rent is None else annual.alt_gross_rent * share,
            alt_net_rent=None if annual.alt_net_rent is None else annual.alt_net_rent * share,
        )


def first_rental_year(timeline: QuoteTimeline) -> int:
    """First projection year with at least one rented month."""
    return timeline.construction_months // 12 + 1
