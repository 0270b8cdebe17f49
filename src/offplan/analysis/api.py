# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Quote Analysis API

Public entry point running the whole pipeline for one quote: appreciation
bonus, payment schedule, mortgage amortization, yearly projection, exit
scenarios and the hold analysis.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional, Tuple

from ..appreciation import AppreciationCurve
from ..core.inputs import InvestmentInputs, MortgageInputs, apply_appreciation_bonus
from ..core.primitives import GlobalSettings, Model, QuoteTimeline
from ..debt import AmortizationSchedule, MortgageAnalysis, analyze_mortgage
from ..payments import PaymentSchedule, build_schedule
from ..rental import RentalIncomeProjector
from .exit import ExitScenario, ExitScenarioAnalyzer, default_exit_months
from .hold import HoldAnalysis, analyze_hold
from .projection import YearlyProjectionPoint, build_points, financing_schedule

logger = logging.getLogger(__name__)


class QuoteResult(Model):
    """
    Complete analysis of one quote.

    Attributes:
        inputs: Inputs the analysis ran on (appreciation bonus applied)
        mortgage: Mortgage terms, when provided
        settings: Settings the analysis ran with
        schedule: Payment schedule
        projection: Yearly projection points
        scenarios: Exit scenarios, ordered by exit month
        hold: Buy-and-hold metrics
        financing: Mortgage amortization, when financed
        mortgage_analysis: Fees, stress tests and coverage, when financed
    """

    inputs: InvestmentInputs
    mortgage: Optional[MortgageInputs] = None
    settings: GlobalSettings
    schedule: PaymentSchedule
    projection: Tuple[YearlyProjectionPoint, ...]
    scenarios: Tuple[ExitScenario, ...]
    hold: HoldAnalysis
    financing: Optional[AmortizationSchedule] = None
    mortgage_analysis: Optional[MortgageAnalysis] = None

    @property
    def timeline(self) -> QuoteTimeline:
        return self.inputs.timeline

    @property
    def analyzer(self) -> ExitScenarioAnalyzer:
        return ExitScenarioAnalyzer(
            inputs=self.inputs,
            projection=self.projection,
            schedule=self.schedule,
            mortgage=self.mortgage,
            financing=self.financing,
        )

    def scenario_at(self, exit_month: int) -> Optional[ExitScenario]:
        """Precomputed scenario for ``exit_month``, if it was analyzed."""
        for scenario in self.scenarios:
            if scenario.exit_month == exit_month:
                return scenario
        return None

    def exit_at(self, exit_month: int) -> ExitScenario:
        """Scenario for ``exit_month``, analyzing it on demand when needed."""
        return self.scenario_at(exit_month) or self.analyzer.analyze(exit_month)


def quote(
    inputs: InvestmentInputs,
    mortgage: Optional[MortgageInputs] = None,
    exit_months: Optional[Iterable[int]] = None,
    settings: Optional[GlobalSettings] = None,
) -> QuoteResult:
    """
    Analyze one off-plan quote.

    Workflow:
      1) Apply the value-differentiator appreciation bonus to the inputs
      2) Build the payment schedule
      3) Amortize the mortgage, when enabled
      4) Assemble a yearly projection long enough for every exit
      5) Analyze exits and the buy-and-hold case

    Args:
        inputs: Quote inputs, as entered (no bonus applied)
        mortgage: Optional mortgage terms
        exit_months: Exit months to analyze; defaults to the configured
            months plus the handover month. The comparison reference months
            are always analyzed as well.
        settings: Global settings

    Returns:
        QuoteResult holding every intermediate and final figure

    Raises:
        ScheduleImbalanceError: In strict schedule mode, when the payment
            plan does not total 100%
    """
    settings = settings or GlobalSettings()
    inputs = apply_appreciation_bonus(inputs)
    timeline = inputs.timeline

    schedule = build_schedule(inputs, settings.schedule)

    months = set(exit_months) if exit_months is not None else set(
        default_exit_months(timeline, settings.exit)
    )
    months.update(
        (settings.comparison.roe_reference_month, settings.comparison.profit_reference_month)
    )
    months = {m for m in months if m > 0}

    horizon = timeline.default_horizon(
        settings.projection.min_horizon_years, settings.projection.holding_period_years
    )
    if months:
        horizon = max(horizon, math.ceil(max(months) / 12))

    curve = AppreciationCurve.from_inputs(inputs)
    projector = RentalIncomeProjector.from_inputs(inputs, curve, settings.projection.rent_basis)
    financing = financing_schedule(inputs, mortgage)
    projection = tuple(build_points(inputs, curve, projector, financing, horizon))

    analyzer = ExitScenarioAnalyzer(
        inputs=inputs,
        projection=projection,
        schedule=schedule,
        mortgage=mortgage,
        financing=financing,
    )
    scenarios = analyzer.analyze_many(months)

    mortgage_analysis = None
    if financing is not None:
        first_year = projector.full_year(1)
        mortgage_analysis = analyze_mortgage(
            mortgage,
            inputs.base_price,
            inputs.pre_handover_percent,
            monthly_rent=first_year.gross_rent / 12,
            monthly_service_charges=first_year.service_charges / 12,
            settings=settings.mortgage,
            start_month=timeline.construction_months,
        )

    logger.info(
        f"Quoted {inputs.base_price:,.0f}: {len(projection)} years, "
        f"{len(scenarios)} exits, financed={financing is not None}"
    )

    return QuoteResult(
        inputs=inputs,
        mortgage=mortgage,
        settings=settings,
        schedule=schedule,
        projection=projection,
        scenarios=scenarios,
        hold=analyze_hold(inputs, projector, financing),
        financing=financing,
        mortgage_analysis=mortgage_analysis,
    )
