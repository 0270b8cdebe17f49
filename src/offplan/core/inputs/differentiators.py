# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Value differentiators and the appreciation bonus.

Some project features (waterfront, metro access, premium developer...) add
a fixed number of percentage points to every appreciation phase. The bonus
is applied to ``InvestmentInputs`` before the appreciation curve is built,
so the curve itself never knows about differentiators.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple

from ..primitives import DifferentiatorCategoryEnum, Model
from .investment import InvestmentInputs

logger = logging.getLogger(__name__)

# Maximum total appreciation bonus (percentage points)
APPRECIATION_BONUS_CAP = 2.0


class ValueDifferentiator(Model):
    """Catalog entry describing one project or unit feature."""

    id: str
    name: str
    category: DifferentiatorCategoryEnum
    impacts_appreciation: bool = False
    appreciation_bonus: float = 0.0


_C = DifferentiatorCategoryEnum

VALUE_DIFFERENTIATORS: Tuple[ValueDifferentiator, ...] = (
    # Location
    ValueDifferentiator(id="waterfront", name="Waterfront", category=_C.LOCATION, impacts_appreciation=True, appreciation_bonus=0.5),
    ValueDifferentiator(id="ocean-view", name="Ocean View", category=_C.LOCATION, impacts_appreciation=True, appreciation_bonus=0.3),
    ValueDifferentiator(id="master-community", name="Master Community", category=_C.LOCATION, impacts_appreciation=True, appreciation_bonus=0.3),
    ValueDifferentiator(id="emerging-zone", name="Emerging Zone", category=_C.LOCATION, impacts_appreciation=True, appreciation_bonus=0.3),
    ValueDifferentiator(id="beach-access", name="Beach Access", category=_C.LOCATION),
    ValueDifferentiator(id="golf-view", name="Golf View", category=_C.LOCATION),
    # Unit
    ValueDifferentiator(id="corner-unit", name="Corner Unit", category=_C.UNIT, impacts_appreciation=True, appreciation_bonus=0.2),
    ValueDifferentiator(id="top-floor", name="Top Floor", category=_C.UNIT, impacts_appreciation=True, appreciation_bonus=0.3),
    ValueDifferentiator(id="skyline-view", name="Skyline View", category=_C.UNIT, impacts_appreciation=True, appreciation_bonus=0.2),
    ValueDifferentiator(id="furnished", name="Furnished", category=_C.UNIT),
    ValueDifferentiator(id="private-pool", name="Private Pool", category=_C.UNIT),
    # Developer
    ValueDifferentiator(id="premium-developer", name="Premium Developer", category=_C.DEVELOPER, impacts_appreciation=True, appreciation_bonus=0.4),
    ValueDifferentiator(id="branded-residence", name="Branded Residence", category=_C.DEVELOPER),
    ValueDifferentiator(id="hotel-managed", name="Hotel Managed", category=_C.DEVELOPER),
    # Transport
    ValueDifferentiator(id="metro-adjacent", name="Metro Adjacent", category=_C.TRANSPORT, impacts_appreciation=True, appreciation_bonus=0.3),
    # Financial
    ValueDifferentiator(id="low-entry", name="Low Entry Point", category=_C.FINANCIAL),
    ValueDifferentiator(id="accessible-payment", name="Accessible Payment Plan", category=_C.FINANCIAL),
    # Amenities
    ValueDifferentiator(id="premium-amenities", name="Premium Amenities", category=_C.AMENITIES),
    ValueDifferentiator(id="smart-home", name="Smart Home", category=_C.AMENITIES),
)

_BY_ID: Dict[str, ValueDifferentiator] = {d.id: d for d in VALUE_DIFFERENTIATORS}


def get_differentiators_by_category(
    category: DifferentiatorCategoryEnum,
) -> List[ValueDifferentiator]:
    return [d for d in VALUE_DIFFERENTIATORS if d.category == category]


def calculate_appreciation_bonus(selected_ids: Iterable[str]) -> float:
    """
    Total appreciation bonus of the selected differentiators.

    Unknown ids are ignored. The sum is capped at ``APPRECIATION_BONUS_CAP``.
    """
    total = 0.0
    for diff_id in dict.fromkeys(selected_ids):
        diff = _BY_ID.get(diff_id)
        if diff is None:
            logger.debug(f"Ignoring unknown value differentiator '{diff_id}'")
            continue
        if diff.impacts_appreciation:
            total += diff.appreciation_bonus
    return min(total, APPRECIATION_BONUS_CAP)


def apply_appreciation_bonus(inputs: InvestmentInputs) -> InvestmentInputs:
    """
    Return inputs whose three phase rates include the differentiator bonus.

    The selected ids stay on the returned inputs for display; the bonus is
    added to the construction, growth and mature rates alike.
    """
    bonus = calculate_appreciation_bonus(inputs.value_differentiators)
    if bonus == 0:
        return inputs
    logger.debug(f"Applying appreciation bonus of +{bonus:.2f} points")
    return inputs.model_copy(
        update={
            "construction_appreciation": inputs.construction_appreciation + bonus,
            "growth_appreciation": inputs.growth_appreciation + bonus,
            "mature_appreciation": inputs.mature_appreciation + bonus,
        }
    )
