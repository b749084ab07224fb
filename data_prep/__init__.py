"""
Data preparation: defaulting raw payloads, parsing store records, validation.
"""

from .transform import (
    PROJECT_FORM_FIELDS,
    missing_project_fields,
    transform_project_record,
    transform_scenario_record,
)
from .records import (
    ProjectRecord,
    ScenarioRecord,
    parse_project_inputs,
    parse_scenario,
    parse_scenarios,
)
from .validators import ValidationResult, validate_project_inputs

__all__ = [
    "PROJECT_FORM_FIELDS",
    "missing_project_fields",
    "transform_project_record",
    "transform_scenario_record",
    "ProjectRecord",
    "ScenarioRecord",
    "parse_project_inputs",
    "parse_scenario",
    "parse_scenarios",
    "ValidationResult",
    "validate_project_inputs",
]
