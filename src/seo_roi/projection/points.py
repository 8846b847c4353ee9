"""Per-month projection rows combining traffic, revenue and cost."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from seo_roi.projection.revenue import RevenueSeries

__all__ = ["ProjectionPoint", "build_points", "instantaneous_roi"]


@dataclass(frozen=True)
class ProjectionPoint:
    """One month of the projection (month 0 is the starting point)."""

    month: int
    traffic: int
    monthly_revenue: float
    additional_revenue: float
    cumulative_cost: float
    cumulative_revenue_increase: float
    instantaneous_roi: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "month": self.month,
            "traffic": self.traffic,
            "monthly_revenue": self.monthly_revenue,
            "additional_revenue": self.additional_revenue,
            "cumulative_cost": self.cumulative_cost,
            "cumulative_revenue_increase": self.cumulative_revenue_increase,
            "instantaneous_roi": self.instantaneous_roi,
        }


def instantaneous_roi(cumulative_cost: float, cumulative_revenue_increase: float) -> float:
    """Return on spend so far, in percent; 0 before anything is spent."""
    if cumulative_cost <= 0:
        return 0.0
    return round((cumulative_revenue_increase - cumulative_cost) / cumulative_cost * 100, 4)


def build_points(traffic: Sequence[int], series: RevenueSeries) -> tuple[ProjectionPoint, ...]:
    return tuple(
        ProjectionPoint(
            month=month,
            traffic=traffic[month],
            monthly_revenue=series.monthly_revenue[month],
            additional_revenue=series.additional_revenue[month],
            cumulative_cost=series.cumulative_cost[month],
            cumulative_revenue_increase=series.cumulative_revenue_increase[month],
            instantaneous_roi=instantaneous_roi(
                series.cumulative_cost[month], series.cumulative_revenue_increase[month]
            ),
        )
        for month in range(len(traffic))
    )
