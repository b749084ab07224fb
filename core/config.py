"""
Projection configuration.
Scenario presets live in scenarios/presets.py (DEFAULT_SCENARIOS).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectionConfig:
    # the projection is always this many periods, whatever the project horizon
    projection_months: int = 12
    monthly_growth_step: float = 0.02

    months_per_year: int = 12

    # output rounding (presentational only, applied at emission)
    percent_decimals: int = 1
    currency_decimals: int = 2


DEFAULT_CONFIG = ProjectionConfig()
