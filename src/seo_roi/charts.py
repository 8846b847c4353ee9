"""Chart adapter — repackages projection rows for a charting front end.

Performs no calculation of its own beyond reshaping; the ROI line is
clamped at -100 % purely for display.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass
from enum import StrEnum
from typing import Any

from seo_roi.projection.points import ProjectionPoint

__all__ = [
    "ChartKind",
    "TrafficPoint",
    "RevenuePoint",
    "CostRoiPoint",
    "traffic_series",
    "revenue_series",
    "cost_roi_series",
    "to_chart_data",
]

ROI_DISPLAY_FLOOR = -100.0


class ChartKind(StrEnum):
    TRAFFIC = "traffic"
    REVENUE = "revenue"
    COST_ROI = "cost_roi"


@dataclass(frozen=True)
class TrafficPoint:
    month: int
    current: int
    projected: int


@dataclass(frozen=True)
class RevenuePoint:
    month: int
    current: float
    projected: float


@dataclass(frozen=True)
class CostRoiPoint:
    month: int
    cumulative_cost: float
    cumulative_revenue_increase: float
    roi_percent: float


def traffic_series(points: Sequence[ProjectionPoint]) -> tuple[TrafficPoint, ...]:
    """Flat "without SEO" line against the projected traffic."""
    baseline = points[0].traffic
    return tuple(TrafficPoint(p.month, baseline, p.traffic) for p in points)


def revenue_series(points: Sequence[ProjectionPoint]) -> tuple[RevenuePoint, ...]:
    baseline = points[0].monthly_revenue
    return tuple(RevenuePoint(p.month, baseline, p.monthly_revenue) for p in points)


def cost_roi_series(points: Sequence[ProjectionPoint]) -> tuple[CostRoiPoint, ...]:
    return tuple(
        CostRoiPoint(p.month, p.cumulative_cost, p.cumulative_revenue_increase, p.instantaneous_roi)
        for p in points
    )


def to_chart_data(
    series: Sequence[TrafficPoint] | Sequence[RevenuePoint] | Sequence[CostRoiPoint],
    kind: ChartKind,
) -> dict[str, Any]:
    """Labels + datasets layout understood by common JS chart libraries."""
    rows = [asdict(point) for point in series]
    labels = [f"Month {row['month']}" for row in rows]

    if kind is ChartKind.TRAFFIC:
        datasets = [
            {"label": "Current Traffic", "data": [r["current"] for r in rows], "type": "line"},
            {"label": "Projected Traffic", "data": [r["projected"] for r in rows], "type": "line"},
        ]
    elif kind is ChartKind.REVENUE:
        datasets = [
            {"label": "Current Revenue", "data": [r["current"] for r in rows], "type": "bar"},
            {"label": "Projected Revenue", "data": [r["projected"] for r in rows], "type": "bar"},
        ]
    else:
        datasets = [
            {
                "label": "Cumulative Cost ($)",
                "data": [r["cumulative_cost"] for r in rows],
                "type": "bar",
                "yAxisID": "y",
            },
            {
                "label": "Cumulative Revenue Increase ($)",
                "data": [r["cumulative_revenue_increase"] for r in rows],
                "type": "bar",
                "yAxisID": "y",
            },
            {
                "label": "ROI (%)",
                "data": [max(ROI_DISPLAY_FLOOR, r["roi_percent"]) for r in rows],
                "type": "line",
                "yAxisID": "y1",
            },
        ]

    return {"labels": labels, "datasets": datasets}
