# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional

import numpy as np
import pandas as pd

from ..core.primitives import Model

TIED_SCORE = 50.0


class ComparisonMetric(Model):
    """
    One raw metric across the compared quotes.

    Attributes:
        name: Metric label
        values: Raw values indexed by quote id
        higher_is_better: False for metrics where less is preferable
            (volatility, capital due before handover, break-even time)
    """

    name: str
    values: pd.Series
    higher_is_better: bool = True

    def normalized(self) -> pd.Series:
        """
        Min-max scale the values to 0-100.

        The best raw value maps to 100 and the worst to 0, so lower-is-better
        metrics are inverted. When every quote ties the score is 50.
        """
        values = self.values.astype(float)
        low, high = values.min(), values.max()
        if np.isclose(high, low):
            return pd.Series(TIED_SCORE, index=values.index, name=self.name)
        scaled = 100 * (values - low) / (high - low)
        if not self.higher_is_better:
            scaled = 100 - scaled
        return scaled.rename(self.name)

    def best_quote_id(self) -> Optional[str]:
        """Quote holding the single best raw value; None when the best is shared."""
        values = self.values.astype(float)
        best = values.max() if self.higher_is_better else values.min()
        holders = values.index[np.isclose(values.to_numpy(), best)]
        if len(holders) != 1:
            return None
        return holders[0]
