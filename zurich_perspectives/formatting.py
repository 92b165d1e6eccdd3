"""Shared formatting helpers for display values."""

import math


def _missing(value) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def format_chf(value) -> str:
    """Format an amount as whole Swiss francs, e.g. ``CHF 85,000``."""
    if _missing(value):
        return "N/A"
    try:
        return f"CHF {value:,.0f}"
    except (ValueError, TypeError):
        return "N/A"


def format_percentage(value, decimals=1) -> str:
    if _missing(value):
        return "N/A"
    try:
        return f"{value:.{decimals}f}%"
    except (ValueError, TypeError):
        return "N/A"


def format_number(value, decimals=0) -> str:
    """Format a numeric value with commas."""
    if _missing(value):
        return "N/A"
    try:
        if decimals == 0:
            return f"{value:,.0f}"
        return f"{value:,.{decimals}f}"
    except (ValueError, TypeError):
        return "N/A"


def format_large_chf(value) -> str:
    """Compact CHF amounts for budget figures (``CHF 4.4 bn``, ``CHF 250k``)."""
    if _missing(value):
        return "N/A"
    try:
        if abs(value) >= 1_000_000_000:
            return f"CHF {value / 1_000_000_000:,.1f} bn"
        if abs(value) >= 1_000_000:
            return f"CHF {value / 1_000_000:,.1f} m"
        if abs(value) >= 10_000:
            return f"CHF {value / 1_000:,.0f}k"
        return format_chf(value)
    except (ValueError, TypeError):
        return "N/A"
