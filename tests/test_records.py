from decimal import Decimal

import pytest

from core.errors import InvalidInputError
from core.schema import ScenarioName
from data_prep.records import parse_project_inputs, parse_scenario, parse_scenarios


def _project_record(**overrides):
    rec = {
        "name": "Food Truck",
        "goal": "Break even in year one",
        "industry": "Food & Beverage",
        "timeHorizon": 12,
        "initialInvestment": Decimal("50000.00"),
        "monthlyFixedCosts": Decimal("5000.00"),
        "variableCosts": Decimal("20"),
        "expectedMonthlyRevenue": Decimal("15000.00"),
    }
    rec.update(overrides)
    return rec


def test_decimal_store_values_are_converted():
    inputs = parse_project_inputs(_project_record())
    assert inputs.initial_investment == 50000.0
    assert inputs.variable_cost_rate == 20.0
    assert isinstance(inputs.expected_monthly_revenue, float)
    assert inputs.name == "Food Truck"


def test_string_values_are_converted():
    inputs = parse_project_inputs(_project_record(initialInvestment="1234.56", timeHorizon="24"))
    assert inputs.initial_investment == pytest.approx(1234.56)
    assert inputs.time_horizon_months == 24


def test_snake_case_keys_are_accepted():
    inputs = parse_project_inputs({
        "initial_investment": 1,
        "monthly_fixed_costs": 2,
        "variable_cost_rate": 3,
        "expected_monthly_revenue": 4,
    })
    assert inputs.variable_cost_rate == 3.0
    assert inputs.time_horizon_months == 12
    assert inputs.industry == "Other"


def test_zero_and_negative_values_are_not_parse_errors():
    inputs = parse_project_inputs(_project_record(initialInvestment=0, monthlyFixedCosts=-10))
    assert inputs.initial_investment == 0.0
    assert inputs.monthly_fixed_costs == -10.0


@pytest.mark.parametrize("field", ["initialInvestment", "monthlyFixedCosts", "variableCosts",
                                   "expectedMonthlyRevenue"])
def test_missing_required_field_raises(field):
    rec = _project_record()
    del rec[field]
    with pytest.raises(InvalidInputError):
        parse_project_inputs(rec)


def test_none_required_field_raises():
    with pytest.raises(InvalidInputError):
        parse_project_inputs(_project_record(initialInvestment=None))


def test_non_numeric_field_raises():
    with pytest.raises(InvalidInputError, match="monthlyFixedCosts"):
        parse_project_inputs(_project_record(monthlyFixedCosts="lots"))


def test_invalid_input_error_is_a_value_error():
    assert issubclass(InvalidInputError, ValueError)


def test_parse_scenario():
    s = parse_scenario({"name": "Pessimistic", "growthRate": "8", "costAdjustment": Decimal("15"),
                        "enabled": False, "projectId": 7})
    assert s.name is ScenarioName.PESSIMISTIC
    assert s.growth_rate == 8.0
    assert s.cost_adjustment == 15.0
    assert s.enabled is False


def test_scenario_enabled_defaults_to_true():
    s = parse_scenario({"name": "Realistic", "growthRate": 15, "costAdjustment": 0})
    assert s.enabled is True


def test_unknown_scenario_name_is_rejected():
    with pytest.raises(InvalidInputError, match="name"):
        parse_scenario({"name": "Apocalyptic", "growthRate": 0, "costAdjustment": 0})


def test_parse_scenarios_keeps_order():
    records = [
        {"name": "Pessimistic", "growthRate": 8, "costAdjustment": 15},
        {"name": "Optimistic", "growthRate": 25, "costAdjustment": -5},
    ]
    assert [s.name for s in parse_scenarios(records)] == [ScenarioName.PESSIMISTIC, ScenarioName.OPTIMISTIC]


def test_parse_scenarios_fails_on_bad_record():
    records = [
        {"name": "Realistic", "growthRate": 15, "costAdjustment": 0},
        {"name": "Realistic", "growthRate": "fast", "costAdjustment": 0},
    ]
    with pytest.raises(InvalidInputError):
        parse_scenarios(records)


def test_null_enabled_parses_as_disabled():
    [s] = parse_scenarios([{"name": "Realistic", "growthRate": Decimal("15"),
                            "costAdjustment": Decimal("0"), "enabled": None}])
    assert s.name is ScenarioName.REALISTIC
    assert s.enabled is False
    assert s.growth_rate == 15.0


def test_non_boolean_enabled_is_still_rejected():
    with pytest.raises(InvalidInputError, match="enabled"):
        parse_scenario({"name": "Realistic", "growthRate": 15, "costAdjustment": 0, "enabled": "maybe"})
