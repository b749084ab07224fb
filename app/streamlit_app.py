"""
Scenario Projection Dashboard
=============================

Interactive preview of a project's profitability under three scenarios
(Realistic / Optimistic / Pessimistic). Every number on the page comes from
the same engine functions used by the server-side analysis, so the preview
and the authoritative result cannot drift apart.

Sections:
  1. Project inputs (sidebar form)
  2. Scenario toggles and adjustments (sidebar)
  3. KPI summary for the selected scenario
  4. Revenue vs expenses, profit projection and cost breakdown charts
  5. Scenario comparison table and recommendations

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path

import altair as alt
import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.errors import InvalidInputError
from core.schema import ScenarioName

from data_prep.records import parse_project_inputs, parse_scenarios
from data_prep.transform import transform_project_record, transform_scenario_record
from data_prep.validators import validate_project_inputs

from scenarios.presets import DEFAULT_SCENARIOS

from engine.runner import run_analysis

from pm.aggregator import build_comparison_table, cost_breakdown_frame, projections_frame
from pm.decisions import (
    explain_financial_metrics,
    generate_missing_data_questions,
    generate_recommendations,
)
from pm.formatting import format_currency, format_months, format_percentage

logger = logging.getLogger(__name__)

INDUSTRIES = ["Retail", "Food & Beverage", "Technology", "Services", "Manufacturing", "Other"]
LANGUAGES = {"English": "en", "Français": "fr"}


# ---------------------------------------------------------------------------
# Chart helpers
# ---------------------------------------------------------------------------
def _plot_revenue_expenses(proj: pd.DataFrame, *, title: str, height: int = 300):
    if len(proj) == 0:
        st.info("No data to plot.")
        return
    long = proj.melt(id_vars=["month"], value_vars=["revenue", "expenses"],
                     var_name="series", value_name="value")
    chart = (
        alt.Chart(long).mark_line(point=True)
        .encode(
            x=alt.X("month:O", title="Month"),
            y=alt.Y("value:Q", title="Amount ($)", axis=alt.Axis(format=",.0f")),
            color=alt.Color("series:N", title="Series"),
        )
        .properties(title=title, height=height)
    )
    st.altair_chart(chart, use_container_width=True)


def _plot_profit_by_scenario(all_proj: pd.DataFrame, *, height: int = 300):
    if len(all_proj) == 0:
        st.info("No scenario data available.")
        return
    chart = (
        alt.Chart(all_proj).mark_line(point=True)
        .encode(
            x=alt.X("month:O", title="Month"),
            y=alt.Y("profit:Q", title="Profit ($)", axis=alt.Axis(format=",.0f")),
            color=alt.Color("scenario:N", title="Scenario"),
            tooltip=["scenario", "month", "revenue", "expenses", "profit"],
        )
        .properties(title="Monthly Profit Projection", height=height)
    )
    st.altair_chart(chart, use_container_width=True)


def _plot_cost_breakdown(breakdown_df: pd.DataFrame, *, height: int = 300):
    if breakdown_df["amount"].sum() <= 0:
        st.info("No costs to break down.")
        return
    chart = (
        alt.Chart(breakdown_df).mark_arc(innerRadius=50)
        .encode(
            theta=alt.Theta("amount:Q"),
            color=alt.Color("component:N", title="Component"),
            tooltip=["component", alt.Tooltip("amount:Q", format=",.2f")],
        )
        .properties(title="Cost Breakdown", height=height)
    )
    st.altair_chart(chart, use_container_width=True)


def main():
    """Console entry point: launch this file under `streamlit run`."""
    subprocess.run([sys.executable, "-m", "streamlit", "run", str(Path(__file__).resolve())], check=False)


def _render():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # ═══════════════════════════════════════════════════════════════════════
    # PAGE CONFIG
    # ═══════════════════════════════════════════════════════════════════════
    st.set_page_config(page_title="Scenario Projection", layout="wide")
    st.title("Scenario Projection")
    st.caption("Profitability of a project under Realistic, Optimistic and Pessimistic assumptions")

    # ═══════════════════════════════════════════════════════════════════════
    # SIDEBAR: project inputs and scenarios
    # ═══════════════════════════════════════════════════════════════════════
    with st.sidebar:
        st.header("Project")
        raw_project = {
            "name": st.text_input("Project name", value="New Store"),
            "goal": st.text_input("Goal", value="Open a second location"),
            "industry": st.selectbox("Industry", options=INDUSTRIES, index=0),
            "timeHorizon": st.number_input("Time horizon (months)", min_value=1, value=12, step=1),
            "initialInvestment": st.number_input("Initial investment ($)", min_value=0.0,
                                                 value=50000.0, step=1000.0),
            "monthlyFixedCosts": st.number_input("Monthly fixed costs ($)", min_value=0.0,
                                                 value=5000.0, step=100.0),
            "variableCosts": st.number_input("Variable costs (% of revenue)", min_value=0.0,
                                             max_value=100.0, value=20.0, step=1.0),
            "expectedMonthlyRevenue": st.number_input("Expected monthly revenue ($)", min_value=0.0,
                                                      value=15000.0, step=500.0),
        }

        st.header("Scenarios")
        raw_scenarios = []
        for preset in DEFAULT_SCENARIOS.values():
            label = preset.name.value
            with st.expander(label, expanded=False):
                st.caption(preset.description)
                enabled = st.checkbox("Enabled", value=True, key=f"{label}_enabled")
                growth = st.slider("Growth rate (%)", -50.0, 100.0, float(preset.growth_rate),
                                   step=1.0, key=f"{label}_growth")
                cost = st.slider("Cost adjustment (%)", -50.0, 100.0, float(preset.cost_adjustment),
                                 step=1.0, key=f"{label}_cost")
            raw_scenarios.append({"name": label, "enabled": enabled,
                                  "growthRate": growth, "costAdjustment": cost})

        language = LANGUAGES[st.selectbox("Language", options=list(LANGUAGES))]

    questions = generate_missing_data_questions(raw_project, language=language)
    if questions:
        with st.expander("Missing information", expanded=True):
            for q in questions:
                st.markdown(f"- {q}")

    # ═══════════════════════════════════════════════════════════════════════
    # PARSE + VALIDATE
    # ═══════════════════════════════════════════════════════════════════════
    try:
        inputs = parse_project_inputs(transform_project_record(raw_project))
        scenarios = parse_scenarios(transform_scenario_record(s) for s in raw_scenarios)
    except InvalidInputError as exc:
        st.error(str(exc))
        st.stop()

    vr = validate_project_inputs(inputs, scenarios)
    if not vr.is_valid:
        st.error("Input validation failed:\n" + vr.summary())
        st.stop()
    for w in vr.warnings:
        st.warning(w)

    # ═══════════════════════════════════════════════════════════════════════
    # RUN ENGINE
    # ═══════════════════════════════════════════════════════════════════════
    bundle = run_analysis(inputs, scenarios)
    logger.info("Analysed %r: %d of %d scenarios enabled",
                inputs.name, bundle.n_scenarios_enabled, bundle.n_scenarios_in)
    all_proj = projections_frame(bundle)

    st.subheader(f"Project: {inputs.name}")

    if bundle.is_empty:
        st.info("No scenario is enabled. Enable at least one scenario in the sidebar.")
    else:
        names = [r.scenario.name.value for r in bundle.scenarios]
        default_idx = names.index(ScenarioName.REALISTIC.value) if ScenarioName.REALISTIC.value in names else 0
        selected = st.radio("Scenario", options=names, index=default_idx, horizontal=True)
        result = bundle.get(ScenarioName(selected))

        # --- 1. KPI row ---
        m = result.metrics
        k1, k2, k3, k4, k5 = st.columns(5)
        k1.metric("ROI", format_percentage(m.roi))
        k2.metric("Break-even", format_months(m.break_even_months))
        k3.metric("Net Profit (12 mo)", format_currency(m.net_profit_annual))
        k4.metric("Profit Margin", format_percentage(m.profit_margin_percent))
        k5.metric("Risk Level", m.risk_level.value)

        if m.break_even_months < 0:
            st.warning("Monthly profit is negative under this scenario: the investment is never recovered.")

        with st.expander("What do these numbers mean?", expanded=False):
            st.markdown(explain_financial_metrics(m, language=language))

        # --- 2. Revenue vs expenses + cost breakdown ---
        left, right = st.columns([2, 1])
        with left:
            _plot_revenue_expenses(
                all_proj[all_proj["scenario"] == selected],
                title=f"Revenue vs Expenses ({selected})",
            )
        with right:
            _plot_cost_breakdown(cost_breakdown_frame(bundle.cost_breakdown))

    # --- 3. Profit projection, all scenarios ---
    _plot_profit_by_scenario(all_proj)

    # --- 4. Comparison table ---
    st.markdown("**Scenario Comparison**")
    if bundle.is_empty:
        st.info("No scenario data available.")
    else:
        st.dataframe(build_comparison_table(bundle, formatted=True),
                     use_container_width=True, hide_index=True)

    with st.expander("Monthly projection table", expanded=False):
        st.dataframe(all_proj, use_container_width=True, hide_index=True)

    # --- 5. Recommendations ---
    st.markdown("**Recommendations**")
    for rec in generate_recommendations(bundle, language=language):
        st.markdown(f"- {rec}")


if __name__ == "__main__":
    _render()
