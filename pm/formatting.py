"""
Display formatting for metrics.

None and non-finite values (a zero investment, a zero revenue, a project that
never breaks even) render as "N/A" so they stay visible instead of being
masked as zero.
"""

from __future__ import annotations

import math
from typing import Optional, Union

from core.utils import excel_round

Number = Union[int, float, str, None]

NOT_AVAILABLE = "N/A"


def _to_float(value: Number) -> Optional[float]:
    """Finite float or None. -0.0 becomes 0.0."""
    if value is None:
        return None
    try:
        v = float(value)
    except (TypeError, ValueError):
        return None
    return v + 0.0 if math.isfinite(v) else None


def format_currency(value: Number) -> str:
    """$12.3K for values of 1000 and above, $12.34 otherwise."""
    v = _to_float(value)
    if v is None:
        return NOT_AVAILABLE
    if v >= 1000:
        return f"${excel_round(v / 1000, 1):.1f}K"
    return f"${excel_round(v, 2):.2f}"


def format_percentage(value: Number) -> str:
    v = _to_float(value)
    if v is None:
        return NOT_AVAILABLE
    return f"{excel_round(v, 1):.1f}%"


def format_months(value: Number) -> str:
    v = _to_float(value)
    if v is None:
        return NOT_AVAILABLE
    return f"{excel_round(v, 1):.1f} mo"
