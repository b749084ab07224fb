"""
Parse store records into engine inputs.

Records arrive as mappings keyed by the store's camelCase column names, with
numeric values as Decimal, str or plain numbers. Values are coerced to float;
a required field that is absent, None or not numeric raises
InvalidInputError. Zero and negative values are accepted here (see
data_prep.validators for the business checks).
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.errors import InvalidInputError
from core.schema import ProjectInputs, ScenarioName, ScenarioParameters

logger = logging.getLogger(__name__)


class ProjectRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    initial_investment: float = Field(alias="initialInvestment")
    monthly_fixed_costs: float = Field(alias="monthlyFixedCosts")
    variable_cost_rate: float = Field(alias="variableCosts")
    expected_monthly_revenue: float = Field(alias="expectedMonthlyRevenue")
    time_horizon_months: int = Field(12, alias="timeHorizon")

    name: str = "Untitled Project"
    goal: str = "No goal specified"
    industry: str = "Other"

    def to_inputs(self) -> ProjectInputs:
        return ProjectInputs(**self.model_dump())


class ScenarioRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: ScenarioName
    growth_rate: float = Field(alias="growthRate")
    cost_adjustment: float = Field(alias="costAdjustment")
    enabled: bool = True

    @field_validator("enabled", mode="before")
    @classmethod
    def _null_enabled_is_off(cls, v):
        # nullable column; only an explicit true enables the scenario
        return False if v is None else v

    def to_parameters(self) -> ScenarioParameters:
        return ScenarioParameters(**self.model_dump())


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(x) for x in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


def parse_project_inputs(record: Mapping[str, Any]) -> ProjectInputs:
    """Build ProjectInputs from a project record (camelCase or snake_case keys)."""
    try:
        parsed = ProjectRecord.model_validate(dict(record))
    except ValidationError as exc:
        raise InvalidInputError(f"Invalid project record: {_describe(exc)}") from exc
    return parsed.to_inputs()


def parse_scenario(record: Mapping[str, Any]) -> ScenarioParameters:
    """
    Build ScenarioParameters from a scenario record.
    The name must be one of Optimistic / Realistic / Pessimistic.
    """
    try:
        parsed = ScenarioRecord.model_validate(dict(record))
    except ValidationError as exc:
        raise InvalidInputError(f"Invalid scenario record: {_describe(exc)}") from exc
    return parsed.to_parameters()


def parse_scenarios(records: Iterable[Mapping[str, Any]]) -> List[ScenarioParameters]:
    """Parse scenario records, keeping their order. Fails on the first bad record."""
    out = []
    for i, rec in enumerate(records):
        try:
            out.append(parse_scenario(rec))
        except InvalidInputError:
            logger.error("Scenario record %d could not be parsed", i)
            raise
    return out
