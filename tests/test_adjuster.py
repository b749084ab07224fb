import pytest

from core.schema import ScenarioName, ScenarioParameters
from scenarios.adjuster import adjust_for_scenario
from scenarios.presets import DEFAULT_SCENARIOS, default_scenarios


def test_realistic_adjusts_revenue_only(base_inputs, realistic):
    adj = adjust_for_scenario(base_inputs, realistic)
    assert adj.monthly_revenue == pytest.approx(17250.0)
    assert adj.monthly_fixed_costs == pytest.approx(5000.0)
    assert adj.variable_cost_rate == pytest.approx(20.0)


def test_pessimistic_scales_both_cost_bases(base_inputs, pessimistic):
    adj = adjust_for_scenario(base_inputs, pessimistic)
    assert adj.monthly_revenue == pytest.approx(16200.0)
    assert adj.monthly_fixed_costs == pytest.approx(5750.0)
    assert adj.variable_cost_rate == pytest.approx(23.0)
    assert adj.variable_cost_fraction == pytest.approx(0.23)


def test_adjustment_below_minus_100_goes_negative(base_inputs):
    s = ScenarioParameters(name=ScenarioName.PESSIMISTIC, growth_rate=-150.0, cost_adjustment=-200.0)
    adj = adjust_for_scenario(base_inputs, s)
    assert adj.monthly_revenue == pytest.approx(-7500.0)
    assert adj.monthly_fixed_costs == pytest.approx(-5000.0)
    assert adj.variable_cost_rate == pytest.approx(-20.0)


def test_adjuster_does_not_mutate_inputs(base_inputs, optimistic):
    before = base_inputs
    adjust_for_scenario(base_inputs, optimistic)
    assert base_inputs == before
    assert base_inputs.expected_monthly_revenue == 15000.0


def test_default_presets_order_and_values():
    names = [s.name for s in default_scenarios()]
    assert names == [ScenarioName.REALISTIC, ScenarioName.OPTIMISTIC, ScenarioName.PESSIMISTIC]
    assert DEFAULT_SCENARIOS[ScenarioName.OPTIMISTIC].growth_rate == 25.0
    assert DEFAULT_SCENARIOS[ScenarioName.OPTIMISTIC].cost_adjustment == -5.0
    assert DEFAULT_SCENARIOS[ScenarioName.PESSIMISTIC].cost_adjustment == 15.0
    assert all(s.enabled for s in default_scenarios())


def test_default_scenarios_returns_fresh_tuple():
    assert default_scenarios() == default_scenarios()
    assert default_scenarios() is not default_scenarios()
