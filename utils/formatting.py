"""Display formatting helpers (French conventions)."""

import math

NARROW_NBSP = "\u202f"
NBSP = "\u00a0"
PLACEHOLDER = "–"


def _is_missing(x):
    return x is None or (isinstance(x, float) and (math.isnan(x) or math.isinf(x)))


def _group(text):
    """Swap Python's ',' grouping and '.' decimal point for the French ones."""
    return text.replace(",", "X").replace(".", ",").replace("X", NARROW_NBSP)


def fr_currency(x, symbol="€"):
    """Round to the nearest unit, e.g. 47501.4 -> '47 501 €'."""
    if _is_missing(x):
        return PLACEHOLDER
    return f"{_group(f'{round(x):,d}')}{NBSP}{symbol}"


def fr_percent(ratio, decimals=1):
    """Format a ratio as a percentage, e.g. 0.6167 -> '61,7 %'."""
    if _is_missing(ratio):
        return PLACEHOLDER
    return f"{_group(f'{ratio * 100:,.{decimals}f}')}{NBSP}%"


def fr_decimal(x, decimals=2):
    if _is_missing(x):
        return PLACEHOLDER
    return _group(f"{x:,.{decimals}f}")
