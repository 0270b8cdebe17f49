# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for Offplan components.

Each package mirrors a package of ``offplan`` and tests it in isolation,
using the reference quote fixtures from ``tests/conftest.py``.
"""
