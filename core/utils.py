from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

import numpy as np

# wide enough for any finite float at any practical number of places
_ROUND_CONTEXT = Context(prec=400)


def pct_to_multiplier(pct: float) -> float:
    """Turn a percentage adjustment (15 -> +15%) into a multiplier (1.15)."""
    return 1.0 + float(pct) / 100.0


def safe_divide(numerator: float, denominator: float) -> float:
    """
    IEEE division: x/0 gives +/-inf and 0/0 gives nan instead of raising.
    Non-finite results are valid outputs and are left for the caller to format.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def _round_half_up(v: float, decimals: int) -> float:
    if not math.isfinite(v):
        return v
    q = Decimal(repr(v)).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP,
                                  context=_ROUND_CONTEXT)
    # -0.0 -> 0.0
    return float(q) + 0.0


def excel_round(x, decimals: int = 2):
    """
    Excel ROUND: half away from zero (vectorized). Non-finite values pass through.

    Rounding is done on the shortest decimal reading of each float (its repr),
    so 4.35 -> 4.4 and 1.005 -> 1.01 even though the nearest binary values sit
    just below the tie. A result of zero is always +0.0.
    """
    if np.ndim(x) == 0:
        return _round_half_up(float(x), decimals)
    x = np.asarray(x, dtype=float)
    return np.vectorize(lambda v: _round_half_up(float(v), decimals), otypes=[float])(x)
