from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AdjustedFigures:
    """
    Scenario-adjusted monthly figures for one project.

    Ephemeral: derived per (project, scenario) pair and never stored.
    variable_cost_rate stays a percentage of revenue.
    """

    monthly_revenue: float
    monthly_fixed_costs: float
    variable_cost_rate: float

    @property
    def variable_cost_fraction(self) -> float:
        return self.variable_cost_rate / 100.0
