# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging
import warnings

# Silence pandas FutureWarning related to monthly frequency alias 'M'.
# Offplan standardizes on monthly periods for payment dates and timelines.
warnings.filterwarnings(
    "ignore",
    message=".*'M' is deprecated and will be removed in a future version.*",
    category=FutureWarning,
)

"""
Offplan - Off-Plan Property Investment Quoting Engine

Projects the cashflows of buying a unit before it is built: the payment
plan, phased appreciation, rental income after handover, optional mortgage
financing, resale at any month and a side-by-side ranking of quotes.

Key Entry Points:
- offplan.analysis.quote() - Full analysis of one quote
- offplan.comparison.recommend() - Score several analyzed quotes
- offplan.core.inputs.migrate_inputs() - Load saved inputs of any schema version
- offplan.reporting.* - DataFrame views of results

Example Usage:
    ```python
    from offplan.analysis import quote
    from offplan.core.inputs import InvestmentInputs

    inputs = InvestmentInputs(
        base_price=1_000_000,
        booking_month=1, booking_year=2025,
        handover_quarter=1, handover_year=2027,
    )
    result = quote(inputs)
    print(result.scenario_at(36).annualized_roe)
    ```
"""

# Libraries leave handler configuration to the application
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "analysis",
    "appreciation",
    "comparison",
    "core",
    "debt",
    "payments",
    "rental",
    "reporting",
]


_LAZY_MODULES = {name: f"offplan.{name}" for name in __all__}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'offplan' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
