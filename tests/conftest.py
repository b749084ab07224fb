from __future__ import annotations

import pytest

from core.schema import ProjectInputs, ScenarioName, ScenarioParameters


@pytest.fixture
def base_inputs() -> ProjectInputs:
    return ProjectInputs(
        initial_investment=50000.0,
        monthly_fixed_costs=5000.0,
        variable_cost_rate=20.0,
        expected_monthly_revenue=15000.0,
        time_horizon_months=12,
        name="Corner Bakery",
    )


@pytest.fixture
def realistic() -> ScenarioParameters:
    return ScenarioParameters(name=ScenarioName.REALISTIC, growth_rate=15.0, cost_adjustment=0.0)


@pytest.fixture
def optimistic() -> ScenarioParameters:
    return ScenarioParameters(name=ScenarioName.OPTIMISTIC, growth_rate=25.0, cost_adjustment=-5.0)


@pytest.fixture
def pessimistic() -> ScenarioParameters:
    return ScenarioParameters(name=ScenarioName.PESSIMISTIC, growth_rate=8.0, cost_adjustment=15.0)


@pytest.fixture
def all_scenarios(realistic, optimistic, pessimistic):
    return [realistic, optimistic, pessimistic]
