"""
Per-scenario financial metric computation.

Computes ROI, break-even period, annual net profit, profit margin and the
risk label for ONE scenario from its adjusted monthly figures.

Division by zero is not an error here: a zero investment gives a non-finite
ROI, a zero revenue gives a non-finite margin, and a non-positive monthly
profit gives a negative or non-finite break-even. Those values are returned
as-is (never clamped) and left to the presentation layer.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Optional

from core.config import DEFAULT_CONFIG, ProjectionConfig
from core.schema import RiskLevel, ScenarioName
from core.utils import excel_round, safe_divide
from scenarios.base import AdjustedFigures

logger = logging.getLogger(__name__)


# Static lookup: the label depends on the scenario name only, not on results.
RISK_LEVELS: Dict[ScenarioName, RiskLevel] = {
    ScenarioName.OPTIMISTIC: RiskLevel.LOW,
    ScenarioName.REALISTIC: RiskLevel.MEDIUM,
    ScenarioName.PESSIMISTIC: RiskLevel.HIGH,
}


@dataclass(frozen=True)
class FinancialMetrics:
    """Rounded summary metrics for one scenario."""
    roi: float                    # percent, 1 decimal
    break_even_months: float      # months, 1 decimal
    net_profit_annual: float      # currency, 2 decimals
    profit_margin_percent: float  # percent, 1 decimal
    risk_level: RiskLevel

    @property
    def non_finite_fields(self) -> tuple:
        return tuple(
            k for k in ("roi", "break_even_months", "net_profit_annual", "profit_margin_percent")
            if not math.isfinite(getattr(self, k))
        )

    def to_dict(self) -> Dict[str, object]:
        """Wire shape used by the dashboard and the recommendation collaborator."""
        return {
            "roi": self.roi,
            "breakEven": self.break_even_months,
            "netProfit": self.net_profit_annual,
            "profitMargin": self.profit_margin_percent,
            "riskLevel": self.risk_level.value,
        }


def risk_level_for(name: ScenarioName) -> RiskLevel:
    return RISK_LEVELS[ScenarioName(name)]


def compute_financial_metrics(
    initial_investment: float,
    adjusted: AdjustedFigures,
    scenario_name: ScenarioName,
    *,
    config: Optional[ProjectionConfig] = None,
) -> FinancialMetrics:
    """
    Compute the metric set for one scenario.

    Parameters
    ----------
    initial_investment : float
        Unadjusted project investment (the scenario never scales it)
    adjusted : AdjustedFigures
        Output of scenarios.adjust_for_scenario()
    scenario_name : ScenarioName
        Selects the risk label

    Returns
    -------
    FinancialMetrics with roi / break-even / margin rounded to
    config.percent_decimals and net profit to config.currency_decimals.
    """
    cfg = config or DEFAULT_CONFIG
    investment = float(initial_investment)
    months = cfg.months_per_year

    # Annualized figures (full precision; rounding only at emission)
    annual_revenue = adjusted.monthly_revenue * months
    annual_fixed_costs = adjusted.monthly_fixed_costs * months
    annual_variable_costs = adjusted.variable_cost_fraction * annual_revenue
    net_profit_annual = annual_revenue - annual_fixed_costs - annual_variable_costs

    roi = safe_divide(net_profit_annual, investment) * 100.0

    monthly_profit = (
        adjusted.monthly_revenue
        - adjusted.monthly_fixed_costs
        - adjusted.variable_cost_fraction * adjusted.monthly_revenue
    )
    break_even = safe_divide(investment, monthly_profit)

    profit_margin = safe_divide(net_profit_annual, annual_revenue) * 100.0

    metrics = FinancialMetrics(
        roi=excel_round(roi, cfg.percent_decimals),
        break_even_months=excel_round(break_even, cfg.percent_decimals),
        net_profit_annual=excel_round(net_profit_annual, cfg.currency_decimals),
        profit_margin_percent=excel_round(profit_margin, cfg.percent_decimals),
        risk_level=risk_level_for(scenario_name),
    )

    if metrics.non_finite_fields:
        logger.warning(
            "Scenario %s produced non-finite metrics: %s",
            ScenarioName(scenario_name).value,
            ", ".join(metrics.non_finite_fields),
        )
    return metrics
