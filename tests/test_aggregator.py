from dataclasses import replace

from engine.runner import run_analysis
from pm.aggregator import build_comparison_table, cost_breakdown_frame, projections_frame


def test_comparison_table_raw_values(base_inputs, all_scenarios):
    table = build_comparison_table(run_analysis(base_inputs, all_scenarios))
    assert list(table.columns) == ["Metric", "Realistic", "Optimistic", "Pessimistic"]
    t = table.set_index("Metric")
    assert list(t.index) == ["ROI", "Break-even (months)", "Profit (12 mo)", "Profit Margin", "Risk Level"]
    assert t.loc["ROI", "Realistic"] == 211.2
    assert t.loc["Break-even (months)", "Pessimistic"] == 7.4
    assert t.loc["Risk Level", "Optimistic"] == "Low"


def test_comparison_table_formatted(base_inputs, all_scenarios):
    t = build_comparison_table(run_analysis(base_inputs, all_scenarios), formatted=True).set_index("Metric")
    assert t.loc["ROI", "Realistic"] == "211.2%"
    assert t.loc["Break-even (months)", "Realistic"] == "5.7 mo"
    assert t.loc["Profit (12 mo)", "Realistic"] == "$105.6K"
    assert t.loc["Profit Margin", "Realistic"] == "51.0%"
    assert t.loc["Risk Level", "Pessimistic"] == "High"


def test_comparison_table_shows_na_for_non_finite(base_inputs, realistic):
    bundle = run_analysis(replace(base_inputs, initial_investment=0.0), [realistic])
    t = build_comparison_table(bundle, formatted=True).set_index("Metric")
    assert t.loc["ROI", "Realistic"] == "N/A"


def test_empty_bundle_gives_empty_tables(base_inputs, all_scenarios):
    bundle = run_analysis(base_inputs, [replace(s, enabled=False) for s in all_scenarios])
    table = build_comparison_table(bundle)
    assert list(table.columns) == ["Metric"]
    assert len(table) == 0
    proj = projections_frame(bundle)
    assert len(proj) == 0
    assert list(proj.columns) == ["scenario", "month", "revenue", "expenses", "profit"]


def test_projections_frame_long_format(base_inputs, all_scenarios):
    df = projections_frame(run_analysis(base_inputs, all_scenarios))
    assert len(df) == 36
    assert df.groupby("scenario").size().to_dict() == {"Optimistic": 12, "Pessimistic": 12, "Realistic": 12}


def test_cost_breakdown_frame(base_inputs, all_scenarios):
    df = cost_breakdown_frame(run_analysis(base_inputs, all_scenarios).cost_breakdown)
    assert df["component"].tolist() == ["Initial Investment", "Fixed Costs (annual)", "Variable Costs (annual)"]
    assert df["amount"].iloc[0] == 50000.0
