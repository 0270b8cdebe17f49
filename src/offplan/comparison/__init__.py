# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .metrics import TIED_SCORE, ComparisonMetric
from .recommendation import (
    CATEGORY_WEIGHTS,
    HIGHLIGHTS,
    ComparedQuote,
    QuoteRecommendation,
    RecommendationResult,
    extract_metrics,
    recommend,
)

__all__ = [
    "CATEGORY_WEIGHTS",
    "ComparedQuote",
    "ComparisonMetric",
    "HIGHLIGHTS",
    "QuoteRecommendation",
    "RecommendationResult",
    "TIED_SCORE",
    "extract_metrics",
    "recommend",
]
