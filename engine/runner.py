"""
Analysis runner: runs every enabled scenario of a project through the engine.

For each enabled scenario, in input order:
    adjust_for_scenario -> compute_financial_metrics
                        -> generate_monthly_projections
and once per project:
    compute_cost_breakdown

The result is an AnalysisBundle. It is built fresh on every call and never
cached; the same inputs always give an identical bundle. An empty or fully
disabled scenario list is a valid input and gives a bundle with no scenario
results and a populated cost breakdown.

Each scenario is all-or-nothing: an exception computing one scenario
propagates to the caller instead of leaving a hole in the bundle.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from core.config import DEFAULT_CONFIG, ProjectionConfig
from core.schema import ProjectInputs, ScenarioName, ScenarioParameters
from pm.metrics import FinancialMetrics, compute_financial_metrics
from scenarios.adjuster import adjust_for_scenario

from .breakdown import CostBreakdown, compute_cost_breakdown
from .projection import MonthlyProjection, generate_monthly_projections

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioResult:
    scenario: ScenarioParameters
    metrics: FinancialMetrics
    projections: Tuple[MonthlyProjection, ...]

    def to_dict(self) -> Dict[str, Any]:
        s = self.scenario
        return {
            "scenario": {
                "name": s.name.value,
                "enabled": s.enabled,
                "growthRate": s.growth_rate,
                "costAdjustment": s.cost_adjustment,
            },
            "financialMetrics": self.metrics.to_dict(),
            "monthlyProjections": [p.to_dict() for p in self.projections],
        }


@dataclass(frozen=True)
class AnalysisBundle:
    """Complete per-request engine output for one project."""
    project: ProjectInputs
    scenarios: Tuple[ScenarioResult, ...]
    cost_breakdown: CostBreakdown
    # counts let callers check that every enabled scenario produced a result
    n_scenarios_in: int = 0
    n_scenarios_enabled: int = 0

    @property
    def is_empty(self) -> bool:
        return len(self.scenarios) == 0

    def get(self, name: ScenarioName) -> Optional[ScenarioResult]:
        """First result for the given scenario name, or None."""
        key = ScenarioName(name)
        for r in self.scenarios:
            if r.scenario.name == key:
                return r
        return None

    def to_dict(self) -> Dict[str, Any]:
        p = self.project
        return {
            "project": {
                "name": p.name,
                "goal": p.goal,
                "industry": p.industry,
                "timeHorizon": p.time_horizon_months,
                "initialInvestment": p.initial_investment,
                "monthlyFixedCosts": p.monthly_fixed_costs,
                "variableCosts": p.variable_cost_rate,
                "expectedMonthlyRevenue": p.expected_monthly_revenue,
            },
            "scenarios": [r.to_dict() for r in self.scenarios],
            "costBreakdown": self.cost_breakdown.to_dict(),
        }


def run_scenario(
    inputs: ProjectInputs,
    scenario: ScenarioParameters,
    *,
    config: Optional[ProjectionConfig] = None,
) -> ScenarioResult:
    """Metrics + projections for a single scenario (enabled flag is not checked)."""
    cfg = config or DEFAULT_CONFIG
    adjusted = adjust_for_scenario(inputs, scenario)
    metrics = compute_financial_metrics(
        inputs.initial_investment, adjusted, scenario.name, config=cfg
    )
    projections = generate_monthly_projections(adjusted, config=cfg)
    return ScenarioResult(scenario=scenario, metrics=metrics, projections=tuple(projections))


def run_analysis(
    inputs: ProjectInputs,
    scenarios: Iterable[ScenarioParameters],
    *,
    config: Optional[ProjectionConfig] = None,
) -> AnalysisBundle:
    """
    Build the AnalysisBundle for one project.

    Parameters
    ----------
    inputs : ProjectInputs
        Base project figures
    scenarios : iterable of ScenarioParameters
        All scenarios of the project; disabled ones are skipped
    config : ProjectionConfig, optional
        Projection constants and rounding; DEFAULT_CONFIG when omitted

    Returns
    -------
    AnalysisBundle whose scenario results follow the input order.
    """
    cfg = config or DEFAULT_CONFIG
    all_scenarios = list(scenarios)
    enabled = [s for s in all_scenarios if s.enabled]

    n_skipped = len(all_scenarios) - len(enabled)
    if n_skipped:
        logger.debug("Skipping %d disabled scenario(s) for project %r", n_skipped, inputs.name)
    if not enabled:
        logger.debug("No enabled scenarios for project %r; returning empty bundle", inputs.name)

    results = tuple(run_scenario(inputs, s, config=cfg) for s in enabled)

    bundle = AnalysisBundle(
        project=inputs,
        scenarios=results,
        cost_breakdown=compute_cost_breakdown(inputs, config=cfg),
        n_scenarios_in=len(all_scenarios),
        n_scenarios_enabled=len(enabled),
    )
    logger.debug(
        "Analysis for project %r: %d/%d scenarios computed",
        inputs.name, len(results), len(all_scenarios),
    )
    return bundle
