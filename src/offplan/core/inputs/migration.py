# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Load-boundary migration of saved input sets.

Saved quotes are opaque dictionaries stamped with a schema version. Before a
saved quote reaches the engine it is migrated forward once:

1. Version-specific fix-ups (v1 -> v2 -> v3)
2. Legacy aliases mapped onto the current field names
3. Unknown keys dropped, malformed optional fields reset to their defaults
4. The current schema version stamped

Missing or unusable structural fields (base price, booking date, handover
date) are the only reason migration fails; they raise ``InvalidInputError``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from ..primitives import InvalidInputError
from .investment import CURRENT_SCHEMA_VERSION, REQUIRED_FIELDS, InvestmentInputs

logger = logging.getLogger(__name__)

_TRIGGER_ALIASES = {
    "time": "date",
    "date": "date",
    "construction": "construction",
}

_MILESTONE_KEY_ALIASES = {
    "type": "trigger",
    "payment_percent": "percent",
}

_INSTALLMENT_KEY_ALIASES = {
    "trigger_value": "months_after_handover",
    "payment_percent": "percent",
}


def migrate_inputs(saved: Optional[Mapping[str, Any]]) -> InvestmentInputs:
    """
    Migrate a saved input set to the current schema and validate it.

    Args:
        saved: Raw saved inputs (any schema version), or None

    Returns:
        InvestmentInputs stamped with the current schema version

    Raises:
        InvalidInputError: If a structurally required field is missing or unusable
    """
    data: Dict[str, Any] = dict(saved or {})
    version = _saved_version(data.pop("schema_version", None))

    if version < 2:
        # Legacy single rental mode became a side-by-side comparison flag
        if data.pop("rental_mode", None) == "short-term" and not data.get(
            "show_short_term_comparison"
        ):
            data["show_short_term_comparison"] = True
        logger.debug("Migrated saved inputs from schema v1 to v2")

    if version < 3:
        # Post-handover plans were introduced in v3; defaults come from the schema
        logger.debug("Migrated saved inputs from schema v2 to v3")

    data["additional_payments"] = _normalize_items(
        data.get("additional_payments"), _MILESTONE_KEY_ALIASES, "additional_payments"
    )
    data["post_handover_payments"] = _normalize_items(
        data.get("post_handover_payments"), _INSTALLMENT_KEY_ALIASES, "post_handover_payments"
    )
    if "short_term_rental" in data and not isinstance(data["short_term_rental"], Mapping):
        logger.warning("Discarding malformed short_term_rental; using defaults")
        data.pop("short_term_rental")
    if not isinstance(data.get("value_differentiators", []), (list, tuple)):
        logger.warning("Discarding malformed value_differentiators")
        data.pop("value_differentiators")

    known_fields = set(InvestmentInputs.model_fields)
    for key in [k for k in data if k not in known_fields]:
        logger.debug(f"Dropping unknown input field '{key}'")
        data.pop(key)

    # Explicit None means "not set" for optional fields
    for key in [k for k, v in data.items() if v is None and k not in REQUIRED_FIELDS]:
        data.pop(key)

    data["schema_version"] = CURRENT_SCHEMA_VERSION
    return _validate_with_defaults(data)


def stamp_schema_version(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy of ``data`` stamped with the current schema version, ready to save."""
    return {**data, "schema_version": CURRENT_SCHEMA_VERSION}


def _saved_version(raw: Any) -> int:
    """Schema version of a saved set; unreadable versions are treated as v1."""
    if raw is None or isinstance(raw, bool):
        return 1
    try:
        version = int(raw)
    except (TypeError, ValueError):
        logger.warning(f"Unreadable schema_version {raw!r}; migrating from v1")
        return 1
    return max(1, version)


def _normalize_items(
    items: Any, key_aliases: Mapping[str, str], field: str
) -> List[Dict[str, Any]]:
    """Coerce a saved list of milestones/installments into current-schema dicts."""
    if items is None:
        return []
    if not isinstance(items, (list, tuple)):
        logger.warning(f"Discarding malformed {field}; expected a list")
        return []

    normalized = []
    for index, item in enumerate(items):
        if not isinstance(item, Mapping):
            logger.warning(f"Discarding malformed entry {index} of {field}")
            continue
        entry = {key_aliases.get(k, k): v for k, v in item.items()}
        entry.pop("id", None)
        if "trigger" in entry:
            trigger = _TRIGGER_ALIASES.get(str(entry["trigger"]))
            if trigger is None:
                logger.warning(
                    f"Unknown trigger '{entry['trigger']}' in {field}[{index}]; treating as date"
                )
                trigger = "date"
            entry["trigger"] = trigger
        if entry.get("label") is None:
            entry["label"] = ""
        normalized.append(entry)
    return normalized


def _validate_with_defaults(data: Dict[str, Any]) -> InvestmentInputs:
    """Validate, resetting each malformed optional field to its default."""
    while True:
        try:
            return InvestmentInputs.model_validate(data)
        except ValidationError as e:
            bad_fields = {err["loc"][0] for err in e.errors() if err["loc"]}
            for name in bad_fields:
                if name in REQUIRED_FIELDS:
                    raise InvalidInputError(name) from e
            removable = [name for name in bad_fields if name in data]
            if not removable:
                raise InvalidInputError(
                    "inputs", f"Saved inputs could not be migrated: {e}"
                ) from e
            for name in removable:
                logger.warning(f"Resetting malformed input '{name}' to its default")
                data.pop(name)
