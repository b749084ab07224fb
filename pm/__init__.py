"""
Reporting outputs: per-scenario metrics, cross-scenario comparison, formatting
and recommendation support.
"""

from .metrics import FinancialMetrics, compute_financial_metrics, risk_level_for
from .aggregator import build_comparison_table, projections_frame, cost_breakdown_frame
from .decisions import (
    RecommendationProvider,
    StaticRecommendationProvider,
    build_recommendation_context,
    explain_financial_metrics,
    generate_missing_data_questions,
    generate_recommendations,
)
from .formatting import format_currency, format_percentage, format_months

__all__ = [
    "FinancialMetrics",
    "compute_financial_metrics",
    "risk_level_for",
    "build_comparison_table",
    "projections_frame",
    "cost_breakdown_frame",
    "RecommendationProvider",
    "StaticRecommendationProvider",
    "build_recommendation_context",
    "generate_recommendations",
    "explain_financial_metrics",
    "generate_missing_data_questions",
    "format_currency",
    "format_percentage",
    "format_months",
]
