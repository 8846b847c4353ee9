"""Tests for chart series and the chart-data adapter."""

from __future__ import annotations

from seo_roi.charts import (
    ChartKind,
    CostRoiPoint,
    cost_roi_series,
    revenue_series,
    to_chart_data,
    traffic_series,
)
from seo_roi.inputs import CalculatorInput
from seo_roi.projection.points import ProjectionPoint, build_points
from seo_roi.projection.revenue import aggregate


def _points(calc_input: CalculatorInput) -> tuple[ProjectionPoint, ...]:
    traffic = [1000, 1530, 2000]
    return build_points(traffic, aggregate(calc_input, traffic))


class TestSeries:
    def test_traffic_series_has_flat_baseline(self, two_month_input: CalculatorInput) -> None:
        series = traffic_series(_points(two_month_input))
        assert [p.current for p in series] == [1000, 1000, 1000]
        assert [p.projected for p in series] == [1000, 1530, 2000]

    def test_revenue_series(self, two_month_input: CalculatorInput) -> None:
        series = revenue_series(_points(two_month_input))
        assert [p.current for p in series] == [2000.0, 2000.0, 2000.0]
        assert [p.projected for p in series] == [2000.0, 3060.0, 4000.0]

    def test_cost_roi_series(self, two_month_input: CalculatorInput) -> None:
        series = cost_roi_series(_points(two_month_input))
        assert series[2] == CostRoiPoint(2, 2000.0, 3060.0, 53.0)


class TestChartData:
    def test_labels(self, two_month_input: CalculatorInput) -> None:
        data = to_chart_data(traffic_series(_points(two_month_input)), ChartKind.TRAFFIC)
        assert data["labels"] == ["Month 0", "Month 1", "Month 2"]
        assert [d["label"] for d in data["datasets"]] == ["Current Traffic", "Projected Traffic"]

    def test_revenue_bars(self, two_month_input: CalculatorInput) -> None:
        data = to_chart_data(revenue_series(_points(two_month_input)), ChartKind.REVENUE)
        assert {d["type"] for d in data["datasets"]} == {"bar"}
        assert data["datasets"][1]["data"] == [2000.0, 3060.0, 4000.0]

    def test_cost_roi_axes(self, two_month_input: CalculatorInput) -> None:
        data = to_chart_data(cost_roi_series(_points(two_month_input)), ChartKind.COST_ROI)
        axes = {d["label"]: d["yAxisID"] for d in data["datasets"]}
        assert axes == {
            "Cumulative Cost ($)": "y",
            "Cumulative Revenue Increase ($)": "y",
            "ROI (%)": "y1",
        }

    def test_roi_line_clamped_for_display(self) -> None:
        series = [CostRoiPoint(0, 0, 0, 0.0), CostRoiPoint(1, 100, 0, -150.0)]
        data = to_chart_data(series, ChartKind.COST_ROI)
        assert data["datasets"][2]["data"] == [0.0, -100.0]
        # Series themselves are not altered
        assert series[1].roi_percent == -150.0
