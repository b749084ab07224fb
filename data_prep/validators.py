"""
Business validation of project inputs and scenarios before they enter the engine.

The engine itself accepts any numbers and lets odd values propagate. These
checks give the caller a readable list of problems:
- Negative investment, costs or revenue (blocking)
- Horizon below one month (blocking)
- Variable cost rate outside 0-100%
- Inputs that will make a metric non-finite (zero investment / revenue)
- Adjustments below -100% (negative multipliers)
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from core.config import DEFAULT_CONFIG, ProjectionConfig
from core.schema import ProjectInputs, ScenarioParameters


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a project."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_project_inputs(
    inputs: ProjectInputs,
    scenarios: Sequence[ScenarioParameters] = (),
    *,
    config: Optional[ProjectionConfig] = None,
) -> ValidationResult:
    """
    Run all checks on a project and its scenarios.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    cfg = config or DEFAULT_CONFIG
    result = ValidationResult()

    # --- Amounts ---
    amounts = {
        "Initial investment": inputs.initial_investment,
        "Monthly fixed costs": inputs.monthly_fixed_costs,
        "Expected monthly revenue": inputs.expected_monthly_revenue,
    }
    for label, value in amounts.items():
        if value < 0:
            result.errors.append(f"{label} is negative ({value}).")

    if inputs.initial_investment == 0:
        result.warnings.append("Initial investment is 0; ROI is undefined.")
    if inputs.expected_monthly_revenue == 0:
        result.warnings.append("Expected monthly revenue is 0; profit margin is undefined.")

    # --- Variable cost rate (percent of revenue) ---
    rate = inputs.variable_cost_rate
    if rate < 0 or rate > 100:
        result.warnings.append(
            f"Variable cost rate {rate} is outside 0-100; check it is a percentage of revenue."
        )

    # --- Horizon ---
    if inputs.time_horizon_months < 1:
        result.errors.append(f"Time horizon must be at least 1 month (got {inputs.time_horizon_months}).")
    elif inputs.time_horizon_months != cfg.projection_months:
        result.warnings.append(
            f"Time horizon is {inputs.time_horizon_months} months; projections always cover "
            f"{cfg.projection_months} months."
        )

    # --- Scenarios ---
    for s in scenarios:
        if s.growth_rate < -100:
            result.warnings.append(
                f"{s.name.value}: growth rate {s.growth_rate}% gives negative revenue."
            )
        if s.cost_adjustment < -100:
            result.warnings.append(
                f"{s.name.value}: cost adjustment {s.cost_adjustment}% gives negative costs."
            )

    counts = Counter(s.name for s in scenarios)
    dups = sorted(n.value for n, c in counts.items() if c > 1)
    if dups:
        result.warnings.append(f"Duplicate scenario names: {dups}.")

    if scenarios and not any(s.enabled for s in scenarios):
        result.warnings.append("No scenario is enabled; the analysis will be empty.")

    return result
