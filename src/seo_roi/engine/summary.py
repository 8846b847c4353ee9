"""Summary figures, sanity checks and result assembly."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from seo_roi.charts import cost_roi_series, revenue_series, traffic_series
from seo_roi.engine.results import CalculationResult
from seo_roi.errors import CalculationError, ErrorKind
from seo_roi.inputs import CalculatorInput
from seo_roi.projection.break_even import display_break_even
from seo_roi.projection.points import build_points
from seo_roi.projection.revenue import RevenueSeries
from seo_roi.scoring.recommendations import generate_recommendations
from seo_roi.settings import Settings, get_settings

__all__ = ["summarize"]

logger = logging.getLogger(__name__)


def _check_sanity(
    calc_input: CalculatorInput,
    traffic: Sequence[int],
    roi_percent: float,
    break_even: float | None,
    settings: Settings,
) -> None:
    """Reject nonsensical results instead of returning silently wrong numbers."""
    if traffic[-1] != calc_input.target_traffic:
        raise CalculationError(
            ErrorKind.BOUNDARY_MISMATCH,
            f"Projected traffic ends at {traffic[-1]} instead of the target "
            f"{calc_input.target_traffic:g}.",
        )

    if roi_percent > settings.roi_ceiling_percent:
        raise CalculationError(
            ErrorKind.UNREALISTIC_ROI,
            f"Projected ROI of {roi_percent:,.0f}% exceeds the realistic ceiling of "
            f"{settings.roi_ceiling_percent:,.0f}%. Please review your inputs.",
        )

    # Revenue growth equals the traffic ratio; the cents-rounded baseline can be 0
    growth = traffic[-1] / traffic[0] if traffic[0] > 0 else math.inf
    if growth > settings.max_revenue_growth_multiple:
        raise CalculationError(
            ErrorKind.UNREALISTIC_GROWTH,
            f"Projected revenue grows {growth:,.0f}x, more than the "
            f"{settings.max_revenue_growth_multiple:g}x considered realistic. "
            "Please review your traffic targets.",
        )

    if break_even is not None and break_even < 1:
        raise CalculationError(
            ErrorKind.INCONSISTENT_BREAK_EVEN,
            f"Break-even at month {break_even:.2f} is inconsistent with the projection.",
        )


def summarize(
    calc_input: CalculatorInput,
    traffic: Sequence[int],
    series: RevenueSeries,
    break_even: float | None,
    *,
    settings: Settings | None = None,
) -> CalculationResult:
    """Derive ROI and averages, run sanity checks, attach charts and advice.

    Raises:
        CalculationError: zero total cost or a failed sanity check.
    """
    settings = settings or get_settings()
    decimals = settings.currency_decimals
    months = series.months

    total_cost = series.cumulative_cost[-1]
    if total_cost == 0:
        raise CalculationError(ErrorKind.DIVISION_BY_ZERO, "Total SEO cost is zero; ROI is undefined.")

    baseline = series.baseline_monthly_revenue
    projected = series.monthly_revenue[-1]
    total_increase = series.cumulative_revenue_increase[-1]

    roi_percent = (total_increase - total_cost) / total_cost * 100
    average_increase = round(sum(series.additional_revenue[1:]) / months, decimals)

    _check_sanity(calc_input, traffic, roi_percent, break_even, settings)

    recommendations = generate_recommendations(
        calc_input, roi_percent, break_even, settings=settings
    )
    points = build_points(traffic, series)
    logger.debug(
        "Summary: total_cost=%.2f total_increase=%.2f roi=%.2f%% blocks=%d",
        total_cost,
        total_increase,
        roi_percent,
        len(recommendations),
    )

    return CalculationResult(
        current_traffic=traffic[0],
        target_traffic=traffic[-1],
        timeframe_months=months,
        monthly_seo_cost=calc_input.monthly_seo_cost,  # type: ignore[arg-type]
        initial_revenue=baseline,
        projected_revenue=projected,
        revenue_increase=round(projected - baseline, decimals),
        average_monthly_increase=average_increase,
        total_cost=total_cost,
        roi_percent=roi_percent,
        break_even_month=break_even,
        break_even_display=display_break_even(break_even),
        points=points,
        traffic_chart=traffic_series(points),
        revenue_chart=revenue_series(points),
        cost_roi_chart=cost_roi_series(points),
        recommendations=tuple(recommendations),
    )
