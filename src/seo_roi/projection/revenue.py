"""Revenue and cost aggregation over a monthly traffic series."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from seo_roi.inputs import CalculatorInput

__all__ = ["RevenueSeries", "aggregate", "monthly_revenue_for"]


@dataclass(frozen=True)
class RevenueSeries:
    """Parallel per-month series, index = month (0..N)."""

    baseline_monthly_revenue: float
    monthly_revenue: tuple[float, ...]
    additional_revenue: tuple[float, ...]
    cumulative_cost: tuple[float, ...]
    cumulative_revenue_increase: tuple[float, ...]

    @property
    def months(self) -> int:
        return len(self.monthly_revenue) - 1


def monthly_revenue_for(traffic: float, conversion_rate: float, average_order_value: float, decimals: int = 2) -> float:
    """Revenue for one month of traffic, rounded to the currency unit."""
    return round(traffic * conversion_rate / 100 * average_order_value, decimals)


def aggregate(
    calc_input: CalculatorInput,
    traffic: Sequence[int],
    *,
    decimals: int = 2,
) -> RevenueSeries:
    """Convert traffic into revenue and accumulate cost and revenue increase.

    Every product and every running sum is rounded to *decimals* places,
    so large magnitudes accumulate no binary drift beyond one unit.
    """
    rate: float = calc_input.conversion_rate  # type: ignore[assignment]
    aov: float = calc_input.average_order_value  # type: ignore[assignment]
    monthly_cost: float = calc_input.monthly_seo_cost  # type: ignore[assignment]

    baseline = monthly_revenue_for(traffic[0], rate, aov, decimals)

    monthly = [baseline]
    additional = [0.0]
    cumulative_cost = [0.0]
    cumulative_increase = [0.0]

    for month in range(1, len(traffic)):
        revenue = monthly_revenue_for(traffic[month], rate, aov, decimals)
        extra = round(revenue - baseline, decimals)
        monthly.append(revenue)
        additional.append(extra)
        cumulative_cost.append(round(monthly_cost * month, decimals))
        cumulative_increase.append(round(cumulative_increase[-1] + extra, decimals))

    return RevenueSeries(
        baseline_monthly_revenue=baseline,
        monthly_revenue=tuple(monthly),
        additional_revenue=tuple(additional),
        cumulative_cost=tuple(cumulative_cost),
        cumulative_revenue_increase=tuple(cumulative_increase),
    )
