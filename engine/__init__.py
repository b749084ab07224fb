"""
Projection engine: deterministic monthly projections, cost breakdown and the analysis runner.
"""

from .projection import MonthlyProjection, generate_monthly_projections, projections_to_dataframe
from .breakdown import CostBreakdown, compute_cost_breakdown
from .runner import AnalysisBundle, ScenarioResult, run_analysis, run_scenario

__all__ = [
    "MonthlyProjection",
    "generate_monthly_projections",
    "projections_to_dataframe",
    "CostBreakdown",
    "compute_cost_breakdown",
    "AnalysisBundle",
    "ScenarioResult",
    "run_analysis",
    "run_scenario",
]
