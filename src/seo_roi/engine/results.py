"""Calculation result — the figures a marketer needs to judge an SEO budget.

Initial and projected monthly revenue, total spend, ROI over the
timeframe, the break-even month, three chart-ready series and the
recommendation blocks.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from seo_roi.charts import CostRoiPoint, RevenuePoint, TrafficPoint
from seo_roi.formatting import format_break_even, format_currency, format_number
from seo_roi.projection.points import ProjectionPoint
from seo_roi.scoring.recommendations import RecommendationBlock

__all__ = ["CalculationResult"]


@dataclass(frozen=True)
class CalculationResult:
    """Immutable outcome of one successful calculation."""

    # Inputs (echo back for transparency)
    current_traffic: int
    target_traffic: int
    timeframe_months: int
    monthly_seo_cost: float

    # Revenue
    initial_revenue: float
    projected_revenue: float
    revenue_increase: float
    average_monthly_increase: float

    # Cost & return
    total_cost: float
    roi_percent: float

    # Break-even (None = not reached within the timeframe)
    break_even_month: float | None
    break_even_display: float | None

    # Series
    points: tuple[ProjectionPoint, ...]
    traffic_chart: tuple[TrafficPoint, ...]
    revenue_chart: tuple[RevenuePoint, ...]
    cost_roi_chart: tuple[CostRoiPoint, ...]

    recommendations: tuple[RecommendationBlock, ...]

    @property
    def break_even_reached(self) -> bool:
        return self.break_even_month is not None

    @property
    def total_revenue_increase(self) -> float:
        return self.points[-1].cumulative_revenue_increase

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": {
                "current_traffic": self.current_traffic,
                "target_traffic": self.target_traffic,
                "timeframe_months": self.timeframe_months,
            },
            "revenue": {
                "initial_monthly": round(self.initial_revenue, 2),
                "projected_monthly": round(self.projected_revenue, 2),
                "monthly_increase": round(self.revenue_increase, 2),
                "average_monthly_increase": round(self.average_monthly_increase, 2),
                "total_increase": round(self.total_revenue_increase, 2),
            },
            "cost": {
                "monthly_seo_cost": round(self.monthly_seo_cost, 2),
                "total_cost": round(self.total_cost, 2),
            },
            "roi": {
                "roi_percent": round(self.roi_percent, 2),
            },
            "break_even": {
                "reached": self.break_even_reached,
                "month": self.break_even_month,
                "display": self.break_even_display,
            },
            "series": {
                "projection": [p.to_dict() for p in self.points],
                "traffic": [asdict(p) for p in self.traffic_chart],
                "revenue": [asdict(p) for p in self.revenue_chart],
                "cost_roi": [asdict(p) for p in self.cost_roi_chart],
            },
            "recommendations": [r.to_dict() for r in self.recommendations],
        }

    def to_executive_summary(self) -> str:
        """One-paragraph plain-English overview."""
        if self.break_even_reached:
            payback = f"The investment pays for itself after about {format_break_even(self.break_even_display)}."
        else:
            payback = f"The investment does not pay for itself within {self.timeframe_months} months."
        return (
            f"Growing organic traffic from {format_number(self.current_traffic)} to "
            f"{format_number(self.target_traffic)} monthly visitors over "
            f"{self.timeframe_months} months lifts monthly revenue from "
            f"{format_currency(self.initial_revenue)} to "
            f"{format_currency(self.projected_revenue)}. "
            f"A monthly SEO investment of {format_currency(self.monthly_seo_cost)} "
            f"({format_currency(self.total_cost)} in total) returns "
            f"{format_currency(self.total_revenue_increase)} in additional revenue, "
            f"an ROI of {self.roi_percent:.2f}%. {payback}"
        )
