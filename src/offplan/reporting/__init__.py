# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Offplan Reporting

Tabular views of quote results for rendering and export.
"""

from .tables import projection_frame, recommendation_frame, scenarios_frame, schedule_frame

__all__ = [
    "projection_frame",
    "recommendation_frame",
    "scenarios_frame",
    "schedule_frame",
]
