"""
Input value types and canonical field names.

ProjectInputs and ScenarioParameters are what the engine consumes. They are
immutable for the duration of an analysis run; every derived value is a pure
function of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class ScenarioName(str, Enum):
    OPTIMISTIC = "Optimistic"
    REALISTIC = "Realistic"
    PESSIMISTIC = "Pessimistic"


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


# Store-side (camelCase) names of the required numeric project fields.
PROJECT_INPUT_FIELDS: Tuple[str, ...] = (
    "initialInvestment",
    "monthlyFixedCosts",
    "variableCosts",
    "expectedMonthlyRevenue",
)

PROJECTION_COLUMNS: Tuple[str, ...] = ("month", "revenue", "expenses", "profit")


@dataclass(frozen=True)
class ProjectInputs:
    """
    Static financial inputs of one project.

    variable_cost_rate is a percentage of revenue (20.0 means 20%). It is
    expected in [0, 100] but the engine does not enforce that.
    """

    initial_investment: float
    monthly_fixed_costs: float
    variable_cost_rate: float
    expected_monthly_revenue: float
    time_horizon_months: int = 12

    # descriptive metadata, carried through for reporting only
    name: str = "Untitled Project"
    goal: str = "No goal specified"
    industry: str = "Other"


@dataclass(frozen=True)
class ScenarioParameters:
    """A named set of percentage adjustments applied to a project's base figures."""

    name: ScenarioName
    growth_rate: float = 0.0
    cost_adjustment: float = 0.0
    enabled: bool = True
