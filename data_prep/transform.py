"""
Caller-side defaulting for raw form / API payloads.

The engine requires fully resolved inputs. These helpers fill the gaps the
way the data-entry layer does before a record is stored:

  project:  name "Untitled Project", goal "No goal specified", industry "Other",
            timeHorizon 12 (strings parsed as base-10 int), numeric fields "0"
  scenario: growthRate / costAdjustment "0", enabled coerced to bool if given

missing_project_fields lists the fields of a partial payload that still need
an answer, so the caller can ask for them before defaults are applied.

Numeric values are kept as strings so the store receives them without any
binary floating-point rounding.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple

from core.schema import PROJECT_INPUT_FIELDS

_PROJECT_TEXT_DEFAULTS: Dict[str, str] = {
    "name": "Untitled Project",
    "goal": "No goal specified",
    "industry": "Other",
}

# every user-supplied project field, in form order
PROJECT_FORM_FIELDS: Tuple[str, ...] = ("name", "goal", "industry", "timeHorizon") + PROJECT_INPUT_FIELDS


def _numeric_str(value: Any) -> str:
    return "0" if value is None else str(value)


def transform_project_record(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a new project record containing only the stored fields, with defaults applied."""
    out: Dict[str, Any] = {}
    for key, default in _PROJECT_TEXT_DEFAULTS.items():
        out[key] = data.get(key) or default

    horizon = data.get("timeHorizon")
    if horizon is None:
        out["timeHorizon"] = 12
    elif isinstance(horizon, str):
        out["timeHorizon"] = int(horizon, 10)
    else:
        out["timeHorizon"] = horizon

    for key in PROJECT_INPUT_FIELDS:
        out[key] = _numeric_str(data.get(key))

    if data.get("userId") is not None:
        out["userId"] = data["userId"]
    return out


def transform_scenario_record(data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Return a new scenario record with numeric defaults; {} for an empty payload."""
    if not data:
        return {}

    out: Dict[str, Any] = {}
    for key in ("projectId", "name"):
        if key in data:
            out[key] = data[key]
    if "enabled" in data:
        out["enabled"] = bool(data["enabled"])

    out["growthRate"] = _numeric_str(data.get("growthRate"))
    out["costAdjustment"] = _numeric_str(data.get("costAdjustment"))
    return out


def missing_project_fields(data: Optional[Mapping[str, Any]]) -> List[str]:
    """
    Fields of a partial project payload that still need an answer, in form order.

    A field counts as missing when it is absent or falsy: None, "", 0 and
    Decimal("0") are all missing, while the string "0" is a given value.
    """
    data = data or {}
    return [key for key in PROJECT_FORM_FIELDS if not data.get(key)]
