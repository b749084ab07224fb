"""
Scenario layer: turns a project's base monthly figures into scenario-adjusted figures.
"""

from .base import AdjustedFigures
from .adjuster import adjust_for_scenario
from .presets import DEFAULT_SCENARIOS, ScenarioPreset, default_scenarios

__all__ = [
    "AdjustedFigures",
    "adjust_for_scenario",
    "DEFAULT_SCENARIOS",
    "ScenarioPreset",
    "default_scenarios",
]
