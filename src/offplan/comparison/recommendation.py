# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Multi-quote recommendation engine.

Scores independently analyzed quotes against each other in three
categories (ROI, safety, cashflow). Each raw metric is min-max scaled
across the compared set, weighted within its category and rounded to a
whole 0-100 score. Every quote sharing the top score of a category wins it.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from ..analysis import QuoteResult
from ..core.primitives import ComparisonSettings, InvalidInputError, InvestmentFocusEnum, Model
from ..payments import round_half_up
from .metrics import ComparisonMetric

logger = logging.getLogger(__name__)

# (metric name, weight, higher is better) per category
CATEGORY_WEIGHTS: Dict[InvestmentFocusEnum, Tuple[Tuple[str, float, bool], ...]] = {
    InvestmentFocusEnum.ROI: (
        ("annualized_roe", 0.4, True),
        ("total_profit", 0.3, True),
        ("average_appreciation", 0.3, True),
    ),
    InvestmentFocusEnum.SAFETY: (
        ("zone_maturity", 0.4, True),
        ("volatility", 0.3, False),
        ("pre_handover_percent", 0.3, False),
    ),
    InvestmentFocusEnum.CASHFLOW: (
        ("rental_yield", 0.4, True),
        ("net_annual_rent", 0.3, True),
        ("years_to_break_even", 0.3, False),
    ),
}

# Highlight tag, metric and direction; only a unique best raw value earns the tag
HIGHLIGHTS: Tuple[Tuple[str, str, bool], ...] = (
    ("Highest ROE", "annualized_roe", True),
    ("Most Mature Zone", "zone_maturity", True),
    ("Best Yield", "rental_yield", True),
    ("Lowest Risk", "volatility", False),
)


class ComparedQuote(Model):
    """A quote taking part in a comparison."""

    quote_id: str
    name: str = "Quote"
    result: QuoteResult


class QuoteRecommendation(Model):
    """Scores, category wins and highlight tags of one compared quote."""

    quote_id: str
    name: str
    scores: Dict[InvestmentFocusEnum, int]
    winner: Dict[InvestmentFocusEnum, bool]
    highlights: Tuple[str, ...] = ()


class RecommendationResult(Model):
    """
    Outcome of a comparison.

    Attributes:
        recommendations: One entry per compared quote, in input order
        winners: Quote ids holding the top score of each category
        explanations: One sentence per category describing its winner(s)
        metrics: Raw metric table (quotes x metrics)
    """

    recommendations: Tuple[QuoteRecommendation, ...]
    winners: Dict[InvestmentFocusEnum, Tuple[str, ...]]
    explanations: Dict[InvestmentFocusEnum, str]
    metrics: pd.DataFrame

    def for_quote(self, quote_id: str) -> Optional[QuoteRecommendation]:
        for rec in self.recommendations:
            if rec.quote_id == quote_id:
                return rec
        return None


def extract_metrics(
    quotes: Sequence[ComparedQuote], settings: Optional[ComparisonSettings] = None
) -> pd.DataFrame:
    """
    Raw metric table, one row per quote id.

    An undefined annualized ROE (loss exceeding equity) takes the lowest
    defined ROE of the set, or 0 when none is defined.
    """
    settings = settings or ComparisonSettings()
    ids = [q.quote_id for q in quotes]
    duplicates = sorted({qid for qid in ids if ids.count(qid) > 1})
    if duplicates:
        raise InvalidInputError("quote_id", f"Duplicate quote ids: {', '.join(duplicates)}")

    rows = {}
    for q in quotes:
        result = q.result
        inputs = result.inputs
        roe_exit = result.exit_at(settings.roe_reference_month)
        profit_exit = result.exit_at(settings.profit_reference_month)
        rows[q.quote_id] = {
            "annualized_roe": roe_exit.annualized_roe if roe_exit.roe_defined else np.nan,
            "total_profit": profit_exit.profit,
            "average_appreciation": inputs.average_appreciation,
            "zone_maturity": inputs.zone_maturity_level,
            "volatility": inputs.appreciation_volatility,
            "pre_handover_percent": inputs.pre_handover_percent,
            "rental_yield": result.hold.rental_yield_on_investment,
            "net_annual_rent": result.hold.net_annual_rent,
            "years_to_break_even": min(
                result.hold.years_to_break_even, settings.break_even_cap_years
            ),
        }
    table = pd.DataFrame.from_dict(rows, orient="index")
    if table.empty:
        return table
    # Undefined ROE ranks with the worst defined ROE of the set
    roe = table["annualized_roe"].astype(float)
    table["annualized_roe"] = roe.fillna(roe.min() if roe.notna().any() else 0.0)
    return table


def recommend(
    quotes: Sequence[ComparedQuote], settings: Optional[ComparisonSettings] = None
) -> Optional[RecommendationResult]:
    """
    Score quotes against each other.

    Args:
        quotes: Analyzed quotes; ids must be unique
        settings: Reference exit months and the break-even cap

    Returns:
        RecommendationResult, or None when fewer than two quotes are given

    Raises:
        InvalidInputError: If two quotes share a quote id
    """
    if len(quotes) < 2:
        logger.debug(f"Recommendation needs at least two quotes, got {len(quotes)}")
        return None

    settings = settings or ComparisonSettings()
    table = extract_metrics(quotes, settings)

    scores = pd.DataFrame(index=table.index)
    for focus, components in CATEGORY_WEIGHTS.items():
        weighted = sum(
            ComparisonMetric(
                name=name, values=table[name], higher_is_better=higher
            ).normalized()
            * weight
            for name, weight, higher in components
        )
        total_weight = sum(weight for _, weight, _ in components)
        scores[focus] = (weighted / total_weight).map(round_half_up)

    winners = {
        focus: tuple(scores.index[scores[focus] == scores[focus].max()])
        for focus in CATEGORY_WEIGHTS
    }

    highlight_holders: Dict[str, List[str]] = {}
    for tag, name, higher in HIGHLIGHTS:
        holder = ComparisonMetric(
            name=name, values=table[name], higher_is_better=higher
        ).best_quote_id()
        if holder is not None:
            highlight_holders.setdefault(holder, []).append(tag)

    names = {q.quote_id: q.name for q in quotes}
    recommendations = tuple(
        QuoteRecommendation(
            quote_id=q.quote_id,
            name=q.name,
            scores={focus: int(scores.at[q.quote_id, focus]) for focus in CATEGORY_WEIGHTS},
            winner={focus: q.quote_id in winners[focus] for focus in CATEGORY_WEIGHTS},
            highlights=tuple(highlight_holders.get(q.quote_id, ())),
        )
        for q in quotes
    )

    explanations = {
        focus: _explain(focus, winners[focus], names, table, settings)
        for focus in CATEGORY_WEIGHTS
    }

    logger.debug(f"Category winners: {winners}")
    return RecommendationResult(
        recommendations=recommendations,
        winners=winners,
        explanations=explanations,
        metrics=table,
    )


def _explain(
    focus: InvestmentFocusEnum,
    winner_ids: Tuple[str, ...],
    names: Dict[str, str],
    table: pd.DataFrame,
    settings: ComparisonSettings,
) -> str:
    """One-sentence description of a category's winner(s)."""
    if len(winner_ids) > 1:
        tied = ", ".join(names[qid] for qid in winner_ids)
        return f"{tied} tie for the best {focus.value} score."
    winner = winner_ids[0]
    name = names[winner]
    metrics = table.loc[winner]
    if focus == InvestmentFocusEnum.ROI:
        return (
            f"{name} offers the highest return potential with "
            f"{metrics['annualized_roe']:.1f}% annualized ROE at "
            f"{settings.roe_reference_month} months."
        )
    if focus == InvestmentFocusEnum.SAFETY:
        return (
            f"{name} provides the most stability with {metrics['zone_maturity']:g}% "
            f"zone maturity and lower payment risk."
        )
    return f"{name} delivers the strongest rental income at {metrics['rental_yield']:.1f}% yield."
