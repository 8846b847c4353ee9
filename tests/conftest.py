"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest

from seo_roi.inputs import DEFAULT_INPUT, CalculatorInput, CompetitionLevel
from seo_roi.settings import Settings


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(log_json=False, log_level="WARNING")


@pytest.fixture()
def default_input() -> CalculatorInput:
    """Initial calculator form state (1000 → 2000 visitors, 12 months)."""
    return DEFAULT_INPUT


@pytest.fixture()
def two_month_input() -> CalculatorInput:
    """Short projection whose figures are easy to check by hand.

    Traffic 1000 → 1530 → 2000; revenue 2000 → 3060 → 4000 per month.
    """
    return DEFAULT_INPUT.model_copy(update={"timeframe_months": 2})


@pytest.fixture()
def mid_size_input() -> CalculatorInput:
    """Mid-size site with high conversion; breaks even between months 4 and 6."""
    return DEFAULT_INPUT.model_copy(
        update={
            "current_traffic": 5000,
            "target_traffic": 10000,
            "conversion_rate": 4,
            "average_order_value": 50,
            "monthly_seo_cost": 2000,
        }
    )


@pytest.fixture()
def low_traffic_input() -> CalculatorInput:
    """500 → 1500 visitors at 1.5 % and $80; the late S-curve never pays back."""
    return DEFAULT_INPUT.model_copy(
        update={
            "current_traffic": 500,
            "target_traffic": 1500,
            "conversion_rate": 1.5,
            "average_order_value": 80,
            "monthly_seo_cost": 1000,
        }
    )


@pytest.fixture()
def never_break_even_input() -> CalculatorInput:
    return DEFAULT_INPUT.model_copy(
        update={
            "current_traffic": 200,
            "target_traffic": 400,
            "conversion_rate": 0.5,
            "average_order_value": 20,
            "monthly_seo_cost": 1000,
            "competition_level": CompetitionLevel.HIGH,
        }
    )
