"""Tests for revenue and cost aggregation."""

from __future__ import annotations

import pytest

from seo_roi.inputs import CalculatorInput
from seo_roi.projection.points import build_points, instantaneous_roi
from seo_roi.projection.revenue import aggregate, monthly_revenue_for
from seo_roi.projection.traffic import project_traffic


class TestMonthlyRevenue:
    def test_traffic_times_conversion_times_order_value(self) -> None:
        assert monthly_revenue_for(1000, 2, 100) == 2000.0

    def test_rounded_to_cents(self) -> None:
        assert monthly_revenue_for(333, 1.5, 9.99) == 49.9


class TestAggregate:
    def test_two_month_figures(self, two_month_input: CalculatorInput) -> None:
        series = aggregate(two_month_input, [1000, 1530, 2000])
        assert series.months == 2
        assert series.baseline_monthly_revenue == 2000.0
        assert series.monthly_revenue == (2000.0, 3060.0, 4000.0)
        assert series.additional_revenue == (0.0, 1060.0, 2000.0)
        assert series.cumulative_cost == (0.0, 1000.0, 2000.0)
        assert series.cumulative_revenue_increase == (0.0, 1060.0, 3060.0)

    def test_month_zero_is_baseline(self, mid_size_input: CalculatorInput) -> None:
        series = aggregate(mid_size_input, project_traffic(mid_size_input))
        assert series.monthly_revenue[0] == series.baseline_monthly_revenue == 10_000.0
        assert series.additional_revenue[0] == 0
        assert series.cumulative_cost[0] == 0
        assert series.cumulative_revenue_increase[0] == 0

    def test_cost_grows_linearly(self, mid_size_input: CalculatorInput) -> None:
        series = aggregate(mid_size_input, project_traffic(mid_size_input))
        for month, cost in enumerate(series.cumulative_cost):
            assert cost == 2000 * month

    def test_cumulative_increase_is_running_sum(self, mid_size_input: CalculatorInput) -> None:
        series = aggregate(mid_size_input, project_traffic(mid_size_input))
        running = 0.0
        for month in range(1, series.months + 1):
            running += series.additional_revenue[month]
            assert series.cumulative_revenue_increase[month] == pytest.approx(running, abs=0.01)

    def test_final_month_revenue_at_target(self, mid_size_input: CalculatorInput) -> None:
        series = aggregate(mid_size_input, project_traffic(mid_size_input))
        assert series.monthly_revenue[-1] == 20_000.0


class TestProjectionPoints:
    def test_points_mirror_series(self, two_month_input: CalculatorInput) -> None:
        traffic = [1000, 1530, 2000]
        points = build_points(traffic, aggregate(two_month_input, traffic))
        assert [p.month for p in points] == [0, 1, 2]
        assert [p.traffic for p in points] == traffic
        assert points[2].cumulative_revenue_increase == 3060.0
        assert points[0].instantaneous_roi == 0.0
        assert points[1].instantaneous_roi == 6.0
        assert points[2].instantaneous_roi == 53.0

    def test_instantaneous_roi_before_spend(self) -> None:
        assert instantaneous_roi(0, 0) == 0.0

    def test_point_to_dict(self, two_month_input: CalculatorInput) -> None:
        traffic = [1000, 1530, 2000]
        point = build_points(traffic, aggregate(two_month_input, traffic))[1]
        assert point.to_dict() == {
            "month": 1,
            "traffic": 1530,
            "monthly_revenue": 3060.0,
            "additional_revenue": 1060.0,
            "cumulative_cost": 1000.0,
            "cumulative_revenue_increase": 1060.0,
            "instantaneous_roi": 6.0,
        }
