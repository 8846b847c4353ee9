"""Break-even month: where cumulative revenue increase first covers cumulative cost."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["find_break_even", "display_break_even", "verify_break_even_consistency"]


def find_break_even(
    cumulative_cost: Sequence[float],
    cumulative_revenue_increase: Sequence[float],
) -> float | None:
    """Fractional break-even month, or ``None`` if not reached within the series.

    Scans months 1..N for the first month whose cumulative revenue
    increase is at least the cumulative cost and interpolates linearly
    between the deficit of the month before and the surplus of that month.
    Month 0 (nothing spent, nothing earned) never counts as break-even.
    """
    for month in range(1, len(cumulative_cost)):
        revenue = cumulative_revenue_increase[month]
        cost = cumulative_cost[month]
        if revenue < cost:
            continue
        if month == 1:
            return 1.0
        deficit = cumulative_cost[month - 1] - cumulative_revenue_increase[month - 1]
        surplus = revenue - cost
        return (month - 1) + deficit / (deficit + surplus)
    return None


def display_break_even(value: float | None) -> float | None:
    """One-decimal value for display; the unrounded value stays authoritative."""
    if value is None:
        return None
    return round(value, 1)


def verify_break_even_consistency(
    break_even: float | None,
    cumulative_cost: Sequence[float],
    cumulative_revenue_increase: Sequence[float],
    *,
    tolerance: float = 0.5,
) -> bool:
    """Check a reported break-even against the chart series it came from.

    Re-derives the crossover independently from the cost/revenue lines
    a chart would draw and compares within *tolerance* months.
    """
    crossover: float | None = None
    for month in range(1, len(cumulative_cost)):
        gap_now = cumulative_revenue_increase[month] - cumulative_cost[month]
        if gap_now < 0:
            continue
        gap_before = cumulative_cost[month - 1] - cumulative_revenue_increase[month - 1]
        total = gap_before + gap_now
        crossover = (month - 1) + gap_before / total if month > 1 and total > 0 else float(month)
        break

    if break_even is None or crossover is None:
        return break_even is None and crossover is None
    return abs(break_even - crossover) <= tolerance
