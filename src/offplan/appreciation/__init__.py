# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .curve import AppreciationCurve

__all__ = ["AppreciationCurve"]
