"""
Default scenario set attached to every new project.

Realistic is the baseline; Optimistic assumes faster growth and slightly
cheaper costs; Pessimistic assumes slow growth and a cost overrun.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from core.schema import ScenarioName, ScenarioParameters


@dataclass(frozen=True)
class ScenarioPreset:
    """Default adjustment percentages for one named scenario."""
    name: ScenarioName
    growth_rate: float
    cost_adjustment: float
    description: str

    def to_parameters(self, *, enabled: bool = True) -> ScenarioParameters:
        return ScenarioParameters(
            name=self.name,
            growth_rate=self.growth_rate,
            cost_adjustment=self.cost_adjustment,
            enabled=enabled,
        )


# Insertion order is the order scenarios are created for a new project.
DEFAULT_SCENARIOS: Dict[ScenarioName, ScenarioPreset] = {
    ScenarioName.REALISTIC: ScenarioPreset(
        name=ScenarioName.REALISTIC,
        growth_rate=15.0,
        cost_adjustment=0.0,
        description="Expected growth, costs as budgeted",
    ),
    ScenarioName.OPTIMISTIC: ScenarioPreset(
        name=ScenarioName.OPTIMISTIC,
        growth_rate=25.0,
        cost_adjustment=-5.0,
        description="Strong demand, small savings on costs",
    ),
    ScenarioName.PESSIMISTIC: ScenarioPreset(
        name=ScenarioName.PESSIMISTIC,
        growth_rate=8.0,
        cost_adjustment=15.0,
        description="Weak demand and a cost overrun",
    ),
}


def default_scenarios() -> Tuple[ScenarioParameters, ...]:
    """Fresh, enabled ScenarioParameters for each preset, in creation order."""
    return tuple(p.to_parameters() for p in DEFAULT_SCENARIOS.values())
