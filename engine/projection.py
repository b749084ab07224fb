"""
Monthly projection generator: deterministic 12-period revenue/expense/profit curve.

For period index i (0-based), with the scenario-adjusted figures:

    revenue_i  = monthly_revenue * (1 + step * i)          step = 0.02 by default
    expenses_i = monthly_fixed_costs + rate/100 * revenue_i
    profit_i   = revenue_i - expenses_i

The intra-year ramp is independent of the scenario's own growth rate (that
rate has already shaped monthly_revenue). The period count comes from
ProjectionConfig, never from the project's time horizon.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from core.config import DEFAULT_CONFIG, ProjectionConfig
from core.schema import PROJECTION_COLUMNS
from core.utils import excel_round
from scenarios.base import AdjustedFigures


@dataclass(frozen=True)
class MonthlyProjection:
    month: int  # 1-based
    revenue: float
    expenses: float
    profit: float

    def to_dict(self) -> Dict[str, float]:
        return {"month": self.month, "revenue": self.revenue,
                "expenses": self.expenses, "profit": self.profit}


def generate_monthly_projections(
    adjusted: AdjustedFigures,
    *,
    config: Optional[ProjectionConfig] = None,
) -> List[MonthlyProjection]:
    """
    Build the projection sequence for one scenario.

    Returns a new list on every call; recomputing for the same figures
    always yields the same values.
    """
    cfg = config or DEFAULT_CONFIG
    n = int(cfg.projection_months)

    idx = np.arange(n, dtype=float)
    revenue = adjusted.monthly_revenue * (1.0 + cfg.monthly_growth_step * idx)
    expenses = adjusted.monthly_fixed_costs + adjusted.variable_cost_fraction * revenue
    profit = revenue - expenses

    d = cfg.currency_decimals
    revenue_r = excel_round(revenue, d)
    expenses_r = excel_round(expenses, d)
    profit_r = excel_round(profit, d)

    return [
        MonthlyProjection(
            month=i + 1,
            revenue=float(revenue_r[i]),
            expenses=float(expenses_r[i]),
            profit=float(profit_r[i]),
        )
        for i in range(n)
    ]


def projections_to_dataframe(projections: Sequence[MonthlyProjection]) -> pd.DataFrame:
    """One row per period with columns month, revenue, expenses, profit."""
    return pd.DataFrame(
        [p.to_dict() for p in projections],
        columns=list(PROJECTION_COLUMNS),
    )
