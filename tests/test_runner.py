from dataclasses import replace
from decimal import Decimal

import pytest

import engine.runner as runner_mod
from core.schema import ScenarioName
from data_prep.records import parse_scenarios
from engine.runner import run_analysis, run_scenario


def test_bundle_contains_every_enabled_scenario_in_input_order(base_inputs, all_scenarios):
    bundle = run_analysis(base_inputs, all_scenarios)
    assert [r.scenario.name for r in bundle.scenarios] == [
        ScenarioName.REALISTIC, ScenarioName.OPTIMISTIC, ScenarioName.PESSIMISTIC,
    ]
    assert bundle.n_scenarios_in == 3
    assert bundle.n_scenarios_enabled == 3
    assert all(len(r.projections) == 12 for r in bundle.scenarios)


def test_input_order_is_not_sorted(base_inputs, realistic, optimistic, pessimistic):
    bundle = run_analysis(base_inputs, [pessimistic, realistic, optimistic])
    assert [r.scenario.name.value for r in bundle.scenarios] == ["Pessimistic", "Realistic", "Optimistic"]


def test_disabled_scenarios_are_filtered(base_inputs, realistic, optimistic, pessimistic):
    bundle = run_analysis(base_inputs, [realistic, replace(optimistic, enabled=False), pessimistic])
    names = [r.scenario.name for r in bundle.scenarios]
    assert ScenarioName.OPTIMISTIC not in names
    assert names == [ScenarioName.REALISTIC, ScenarioName.PESSIMISTIC]
    assert bundle.n_scenarios_in == 3
    assert bundle.n_scenarios_enabled == 2


def test_all_disabled_gives_empty_bundle_with_breakdown(base_inputs, all_scenarios):
    bundle = run_analysis(base_inputs, [replace(s, enabled=False) for s in all_scenarios])
    assert bundle.scenarios == ()
    assert bundle.is_empty
    assert bundle.cost_breakdown.fixed_costs_annual == 60000.0
    assert bundle.cost_breakdown.initial_investment == 50000.0


def test_no_scenarios_at_all(base_inputs):
    bundle = run_analysis(base_inputs, [])
    assert bundle.is_empty
    assert bundle.n_scenarios_in == 0
    assert bundle.to_dict()["scenarios"] == []


def test_deterministic(base_inputs, all_scenarios):
    assert run_analysis(base_inputs, all_scenarios) == run_analysis(base_inputs, all_scenarios)


def test_accepts_generator_input(base_inputs, all_scenarios):
    bundle = run_analysis(base_inputs, (s for s in all_scenarios))
    assert len(bundle.scenarios) == 3


def test_scenario_independence(base_inputs, realistic, optimistic, pessimistic):
    alone = run_analysis(base_inputs, [pessimistic]).get(ScenarioName.PESSIMISTIC)
    crowded = run_analysis(
        base_inputs,
        [replace(optimistic, growth_rate=400.0), realistic, pessimistic],
    ).get(ScenarioName.PESSIMISTIC)
    assert alone == crowded
    assert alone == run_scenario(base_inputs, pessimistic)


def test_worked_example_through_runner(base_inputs, realistic):
    result = run_analysis(base_inputs, [realistic]).get(ScenarioName.REALISTIC)
    assert result.metrics.roi == 211.2
    assert result.metrics.break_even_months == 5.7
    assert result.projections[0].revenue == pytest.approx(17250.0)


def test_zero_investment_does_not_raise(base_inputs, realistic):
    bundle = run_analysis(replace(base_inputs, initial_investment=0.0), [realistic])
    roi = bundle.scenarios[0].metrics.roi
    assert roi == float("inf")


def test_get_returns_none_for_missing(base_inputs, realistic):
    bundle = run_analysis(base_inputs, [realistic])
    assert bundle.get(ScenarioName.OPTIMISTIC) is None
    assert bundle.get("Realistic") is not None


def test_failure_in_one_scenario_propagates(base_inputs, all_scenarios, monkeypatch):
    real = runner_mod.compute_financial_metrics

    def flaky(investment, adjusted, name, *, config=None):
        if name is ScenarioName.OPTIMISTIC:
            raise ArithmeticError("boom")
        return real(investment, adjusted, name, config=config)

    monkeypatch.setattr(runner_mod, "compute_financial_metrics", flaky)
    with pytest.raises(ArithmeticError):
        run_analysis(base_inputs, all_scenarios)


def test_to_dict_wire_shape(base_inputs, realistic):
    d = run_analysis(base_inputs, [realistic]).to_dict()
    assert set(d) == {"project", "scenarios", "costBreakdown"}
    assert d["project"]["variableCosts"] == 20.0
    s = d["scenarios"][0]
    assert s["scenario"]["name"] == "Realistic"
    assert s["financialMetrics"]["breakEven"] == 5.7
    assert len(s["monthlyProjections"]) == 12
    assert s["monthlyProjections"][0]["month"] == 1


def test_stored_row_with_null_enabled_is_skipped(base_inputs):
    rows = [
        {"name": "Realistic", "growthRate": Decimal("15"), "costAdjustment": Decimal("0"), "enabled": None},
        {"name": "Pessimistic", "growthRate": Decimal("8"), "costAdjustment": Decimal("15"), "enabled": True},
    ]
    bundle = run_analysis(base_inputs, parse_scenarios(rows))
    assert [r.scenario.name for r in bundle.scenarios] == [ScenarioName.PESSIMISTIC]
    assert bundle.n_scenarios_in == 2
    assert bundle.n_scenarios_enabled == 1
