"""
Project-level cost breakdown.

Always built from the base (unadjusted) inputs: it describes the baseline cost
structure of the project, so enabling/disabling scenarios never changes it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from core.config import DEFAULT_CONFIG, ProjectionConfig
from core.schema import ProjectInputs


@dataclass(frozen=True)
class CostBreakdown:
    initial_investment: float
    fixed_costs_annual: float
    variable_costs_annual: float

    @property
    def total(self) -> float:
        return self.initial_investment + self.fixed_costs_annual + self.variable_costs_annual

    def to_dict(self) -> Dict[str, float]:
        return {
            "initialInvestment": self.initial_investment,
            "fixedCosts": self.fixed_costs_annual,
            "variableCosts": self.variable_costs_annual,
        }


def compute_cost_breakdown(
    inputs: ProjectInputs,
    *,
    config: Optional[ProjectionConfig] = None,
) -> CostBreakdown:
    cfg = config or DEFAULT_CONFIG
    months = cfg.months_per_year
    return CostBreakdown(
        initial_investment=float(inputs.initial_investment),
        fixed_costs_annual=float(inputs.monthly_fixed_costs) * months,
        variable_costs_annual=(
            float(inputs.expected_monthly_revenue) * (float(inputs.variable_cost_rate) / 100.0) * months
        ),
    )
