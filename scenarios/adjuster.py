"""
ScenarioAdjuster: applies a scenario's growth / cost percentages to base figures.

    revenue            x (1 + growth_rate/100)
    fixed costs        x (1 + cost_adjustment/100)
    variable cost rate x (1 + cost_adjustment/100)

No validation happens here. An adjustment below -100% gives a negative
multiplier and that propagates arithmetically into negative revenue or costs.
"""

from __future__ import annotations

from core.schema import ProjectInputs, ScenarioParameters
from core.utils import pct_to_multiplier

from .base import AdjustedFigures


def adjust_for_scenario(inputs: ProjectInputs, scenario: ScenarioParameters) -> AdjustedFigures:
    growth_multiplier = pct_to_multiplier(scenario.growth_rate)
    cost_multiplier = pct_to_multiplier(scenario.cost_adjustment)

    return AdjustedFigures(
        monthly_revenue=float(inputs.expected_monthly_revenue) * growth_multiplier,
        monthly_fixed_costs=float(inputs.monthly_fixed_costs) * cost_multiplier,
        variable_cost_rate=float(inputs.variable_cost_rate) * cost_multiplier,
    )
