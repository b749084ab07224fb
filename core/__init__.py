"""
Core package: schema definitions, configuration, errors and shared utilities.
No business logic lives here.
"""

from .schema import (
    ProjectInputs,
    ScenarioParameters,
    ScenarioName,
    RiskLevel,
    PROJECT_INPUT_FIELDS,
    PROJECTION_COLUMNS,
)
from .config import ProjectionConfig, DEFAULT_CONFIG
from .errors import InvalidInputError
from .utils import excel_round, pct_to_multiplier, safe_divide

__all__ = [
    "ProjectInputs",
    "ScenarioParameters",
    "ScenarioName",
    "RiskLevel",
    "PROJECT_INPUT_FIELDS",
    "PROJECTION_COLUMNS",
    "ProjectionConfig",
    "DEFAULT_CONFIG",
    "InvalidInputError",
    "excel_round",
    "pct_to_multiplier",
    "safe_divide",
]
