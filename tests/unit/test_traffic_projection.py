"""Tests for the S-curve traffic projection."""

from __future__ import annotations

from seo_roi.inputs import DEFAULT_INPUT, CalculatorInput, CompetitionLevel
from seo_roi.projection.traffic import growth_profile, project_traffic, round_half_up


def _with(**changes: object) -> CalculatorInput:
    return DEFAULT_INPUT.model_copy(update=changes)


def _is_monotone(values: list[int]) -> bool:
    return all(b >= a for a, b in zip(values, values[1:]))


class TestRoundHalfUp:
    def test_halves_round_up(self) -> None:
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(1141.73) == 1142

    def test_below_half_rounds_down(self) -> None:
        assert round_half_up(1000.49) == 1000


class TestGrowthProfile:
    def test_small_site_band(self) -> None:
        profile = growth_profile(_with(current_traffic=200, target_traffic=400))
        assert profile.growth_rate == 0.07
        assert profile.midpoint == 8  # round(12 * 0.7)
        assert profile.ramp_up_months == 7
        assert profile.early_months == 3

    def test_established_site_band(self) -> None:
        profile = growth_profile(_with(current_traffic=250_000, target_traffic=300_000))
        assert profile.growth_rate == 0.55
        assert profile.midpoint == 7  # round(12 * 0.6)
        assert profile.ramp_up_months == 2
        assert profile.early_months == 0

    def test_band_edges_are_exclusive(self) -> None:
        assert growth_profile(_with(current_traffic=499, target_traffic=600)).growth_rate == 0.09
        assert growth_profile(_with(current_traffic=500, target_traffic=600)).growth_rate == 0.12

    def test_competition_adjusts_rate_and_ramp(self) -> None:
        high = growth_profile(_with(competition_level=CompetitionLevel.HIGH))
        low = growth_profile(_with(competition_level=CompetitionLevel.LOW))
        medium = growth_profile(DEFAULT_INPUT)
        assert high.growth_rate < medium.growth_rate < low.growth_rate
        assert high.ramp_up_months == medium.ramp_up_months + 1
        assert low.ramp_up_months == medium.ramp_up_months - 1

    def test_ramp_never_below_one_month(self) -> None:
        profile = growth_profile(
            _with(current_traffic=100_000, target_traffic=200_000, competition_level=CompetitionLevel.LOW)
        )
        assert profile.ramp_up_months == 1


class TestProjectTraffic:
    def test_two_month_projection_by_hand(self, two_month_input: CalculatorInput) -> None:
        assert project_traffic(two_month_input) == [1000, 1530, 2000]

    def test_single_month_lands_on_target(self) -> None:
        assert project_traffic(_with(timeframe_months=1)) == [1000, 2000]

    def test_boundaries_pinned(self) -> None:
        for current, target, months in [(200, 400, 12), (500, 1500, 12), (5000, 10000, 24), (300_000, 310_000, 60)]:
            traffic = project_traffic(
                _with(current_traffic=current, target_traffic=target, timeframe_months=months)
            )
            assert len(traffic) == months + 1
            assert traffic[0] == current
            assert traffic[-1] == target

    def test_monotone_non_decreasing(self) -> None:
        for current in (150, 450, 900, 4000, 40_000, 150_000, 500_000):
            for months in (3, 12, 36, 60):
                traffic = project_traffic(
                    _with(current_traffic=current, target_traffic=current * 2, timeframe_months=months)
                )
                assert _is_monotone(traffic), (current, months)

    def test_values_are_whole_visitors(self) -> None:
        traffic = project_traffic(_with(current_traffic=5000, target_traffic=10000))
        assert all(isinstance(v, int) for v in traffic)

    def test_never_below_current(self, never_break_even_input: CalculatorInput) -> None:
        traffic = project_traffic(never_break_even_input)
        assert min(traffic) == 200

    def test_near_flat_start_for_new_sites(self, never_break_even_input: CalculatorInput) -> None:
        traffic = project_traffic(never_break_even_input)
        # First three months stay within a few visitors of the start
        assert traffic[3] - traffic[0] < 10
        assert traffic[-1] - traffic[-2] > traffic[1] - traffic[0]

    def test_tiny_gap(self) -> None:
        traffic = project_traffic(_with(current_traffic=1000, target_traffic=1001))
        assert traffic[0] == 1000
        assert traffic[-1] == 1001
        assert set(traffic) == {1000, 1001}
        assert _is_monotone(traffic)

    def test_tiny_gap_lost_to_rounding(self) -> None:
        assert project_traffic(
            _with(current_traffic=1000, target_traffic=1001, timeframe_months=1)
        ) == [1000, 1001]

    def test_zero_timeframe(self) -> None:
        assert project_traffic(_with(timeframe_months=0)) == [1000]

    def test_deterministic(self, mid_size_input: CalculatorInput) -> None:
        assert project_traffic(mid_size_input) == project_traffic(mid_size_input)
