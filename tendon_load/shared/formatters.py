"""
Formatting utilities for display.

Used by the console report and the CLI.
"""

import math


def format_tli(value: float) -> str:
    """
    Format a TLI value.

    Args:
        value: Tendon Load Index

    Returns:
        Formatted string (e.g., '1,234.5'), '—' for non-finite values
    """
    if not math.isfinite(value):
        return "—"
    return f"{value:,.1f}"


def format_ratio(ratio: float) -> str:
    """
    Format ratio to the historical average as a multiplier.

    Returns:
        Formatted string (e.g., '1.25×')
    """
    if not math.isfinite(ratio):
        return "—"
    return f"{ratio:.2f}×"


def format_rest_days(min_days: int, max_days: int) -> str:
    """
    Format a rest-day range.

    Returns:
        '1 day', '1–2 days', '0–1 days'
    """
    if min_days == max_days:
        unit = "day" if min_days == 1 else "days"
        return f"{min_days} {unit}"
    return f"{min_days}–{max_days} days"


def format_percent(fraction: float) -> str:
    """Format a 0..1 fraction as a percentage (e.g., '57.7%')."""
    return f"{fraction * 100:.1f}%"
