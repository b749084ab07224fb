"""
Cross-scenario views of an AnalysisBundle, shaped for tables and charts.

  build_comparison_table:  one row per metric, one column per enabled scenario
  projections_frame:       long-format monthly projections for all scenarios
  cost_breakdown_frame:    the three cost components as rows

An empty bundle is a normal "no data" state: every helper returns an empty
DataFrame with its usual columns instead of raising.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Tuple

import pandas as pd

from .formatting import format_currency, format_months, format_percentage

if TYPE_CHECKING:
    from engine.breakdown import CostBreakdown
    from engine.runner import AnalysisBundle


# (row label, FinancialMetrics attribute, formatter)
COMPARISON_METRICS: Tuple[Tuple[str, str, Callable], ...] = (
    ("ROI", "roi", format_percentage),
    ("Break-even (months)", "break_even_months", format_months),
    ("Profit (12 mo)", "net_profit_annual", format_currency),
    ("Profit Margin", "profit_margin_percent", format_percentage),
    ("Risk Level", "risk_level", lambda v: v.value),
)


def build_comparison_table(bundle: "AnalysisBundle", *, formatted: bool = False) -> pd.DataFrame:
    """
    Metric-by-scenario comparison table.

    Parameters
    ----------
    bundle : AnalysisBundle
        Output of engine.runner.run_analysis()
    formatted : bool
        If True, cells are display strings ("211.2%", "5.7 mo", "N/A");
        otherwise raw rounded numbers (and the risk label string).

    Returns
    -------
    DataFrame with a "Metric" column followed by one column per scenario,
    in bundle order. With no scenarios only the "Metric" column is present.
    """
    names = [r.scenario.name.value for r in bundle.scenarios]
    if not names:
        return pd.DataFrame(columns=["Metric"])

    rows = []
    for label, attr, fmt in COMPARISON_METRICS:
        row = {"Metric": label}
        for name, result in zip(names, bundle.scenarios):
            value = getattr(result.metrics, attr)
            if formatted:
                row[name] = fmt(value)
            else:
                row[name] = value.value if attr == "risk_level" else value
        rows.append(row)

    return pd.DataFrame(rows, columns=["Metric"] + names)


def projections_frame(bundle: "AnalysisBundle") -> pd.DataFrame:
    """Columns: scenario, month, revenue, expenses, profit."""
    records: List[dict] = []
    for result in bundle.scenarios:
        for p in result.projections:
            records.append({"scenario": result.scenario.name.value, **p.to_dict()})
    return pd.DataFrame(records, columns=["scenario", "month", "revenue", "expenses", "profit"])


def cost_breakdown_frame(breakdown: "CostBreakdown") -> pd.DataFrame:
    """Columns: component, amount."""
    return pd.DataFrame(
        [
            {"component": "Initial Investment", "amount": breakdown.initial_investment},
            {"component": "Fixed Costs (annual)", "amount": breakdown.fixed_costs_annual},
            {"component": "Variable Costs (annual)", "amount": breakdown.variable_costs_annual},
        ],
        columns=["component", "amount"],
    )
