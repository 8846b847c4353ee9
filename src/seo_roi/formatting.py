"""Display formatting for result figures."""

from __future__ import annotations

from seo_roi.projection.traffic import round_half_up

__all__ = [
    "format_number",
    "format_decimal",
    "format_currency",
    "format_percentage",
    "format_break_even",
]


def format_number(value: float) -> str:
    """Whole number with thousands separators: ``12,345``."""
    return f"{round_half_up(value):,}"


def format_decimal(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}"


def format_currency(value: float, decimals: int = 2) -> str:
    """``$1,234.56``; negatives render as ``-$1,234.56``."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.{decimals}f}"


def format_percentage(value: float, decimals: int = 2) -> str:
    return f"{value:.{decimals}f}%"


def format_break_even(value: float | None) -> str:
    """``5.1 months`` or ``N/A`` when break-even is not reached."""
    if value is None:
        return "N/A"
    return f"{value:.1f} months"
