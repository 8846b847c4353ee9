"""Reference scenarios — regression fixtures for the projection engine.

Each scenario pairs a realistic input with the break-even window the
model is expected to produce (or ``None`` when the investment should
not pay for itself within the timeframe).  ``run_scenarios()`` also
cross-checks every reported break-even against the cost/revenue lines
of its own chart.

Run from the command line with ``seo-roi-scenarios``.
"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from typing import Any

from seo_roi.engine.calculator import compute
from seo_roi.inputs import DEFAULT_INPUT, CalculatorInput, CompetitionLevel
from seo_roi.logging import configure_logging, get_logger
from seo_roi.projection.break_even import verify_break_even_consistency
from seo_roi.settings import Settings, get_settings

__all__ = [
    "Scenario",
    "ScenarioOutcome",
    "ScenarioReport",
    "SCENARIOS",
    "run_scenarios",
    "main",
]


@dataclass(frozen=True)
class Scenario:
    name: str
    calc_input: CalculatorInput
    expected_range: tuple[float, float] | None  # None = never breaks even


def _scenario_input(**changes: Any) -> CalculatorInput:
    return DEFAULT_INPUT.model_copy(update=changes)


SCENARIOS: tuple[Scenario, ...] = (
    Scenario(
        "Low traffic site (500 visitors)",
        _scenario_input(
            current_traffic=500,
            target_traffic=1500,
            conversion_rate=1.5,
            average_order_value=80,
            monthly_seo_cost=1000,
        ),
        None,
    ),
    Scenario(
        "Very low traffic site (300 visitors)",
        _scenario_input(
            current_traffic=300,
            target_traffic=1200,
            conversion_rate=2,
            average_order_value=100,
            monthly_seo_cost=1000,
        ),
        (11, 13),
    ),
    Scenario(
        "Mid-size site with high conversion",
        _scenario_input(
            current_traffic=5000,
            target_traffic=10000,
            conversion_rate=4,
            average_order_value=50,
            monthly_seo_cost=2000,
        ),
        (4, 6),
    ),
    Scenario(
        "High-ticket item with low conversion",
        _scenario_input(
            current_traffic=1000,
            target_traffic=2000,
            conversion_rate=0.5,
            average_order_value=1000,
            monthly_seo_cost=1500,
        ),
        (6, 7),
    ),
    Scenario(
        "Never breaks even",
        _scenario_input(
            current_traffic=200,
            target_traffic=400,
            conversion_rate=0.5,
            average_order_value=20,
            monthly_seo_cost=1000,
            competition_level=CompetitionLevel.HIGH,
        ),
        None,
    ),
)


@dataclass(frozen=True)
class ScenarioOutcome:
    name: str
    passed: bool
    expected: str
    actual: str
    consistent_with_chart: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "passed": self.passed,
            "expected": self.expected,
            "actual": self.actual,
            "consistent_with_chart": self.consistent_with_chart,
        }


@dataclass
class ScenarioReport:
    outcomes: list[ScenarioOutcome] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(o.passed and o.consistent_with_chart for o in self.outcomes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "passed": self.passed,
            "total": len(self.outcomes),
            "failed": sum(1 for o in self.outcomes if not o.passed),
            "results": [o.to_dict() for o in self.outcomes],
        }


def _describe_expected(expected: tuple[float, float] | None) -> str:
    if expected is None:
        return "Not reached"
    return f"Between months {expected[0]:g} and {expected[1]:g}"


def _run_one(scenario: Scenario, settings: Settings) -> ScenarioOutcome:
    outcome = compute(scenario.calc_input, settings=settings)
    expected = _describe_expected(scenario.expected_range)

    if not outcome.ok:
        return ScenarioOutcome(
            name=scenario.name,
            passed=False,
            expected=expected,
            actual=f"Failed: {outcome.message}",  # type: ignore[union-attr]
            consistent_with_chart=False,
        )

    result = outcome.result  # type: ignore[union-attr]
    break_even = result.break_even_month

    if scenario.expected_range is None:
        passed = break_even is None
    else:
        low, high = scenario.expected_range
        passed = break_even is not None and low <= break_even <= high

    chart = result.cost_roi_chart
    consistent = verify_break_even_consistency(
        break_even,
        [p.cumulative_cost for p in chart],
        [p.cumulative_revenue_increase for p in chart],
    )
    actual = "Not reached" if break_even is None else f"Month {result.break_even_display}"
    return ScenarioOutcome(scenario.name, passed, expected, actual, consistent)


def run_scenarios(
    scenarios: tuple[Scenario, ...] = SCENARIOS,
    *,
    settings: Settings | None = None,
) -> ScenarioReport:
    """Compute every scenario and compare against its expected break-even."""
    settings = settings or get_settings()
    report = ScenarioReport()
    for scenario in scenarios:
        report.outcomes.append(_run_one(scenario, settings))
    return report


def main() -> int:
    settings = get_settings()
    configure_logging(json_output=settings.log_json, level=settings.log_level)
    log = get_logger(component="scenarios")

    report = run_scenarios(settings=settings)
    log.info(
        "scenarios_finished",
        passed=report.passed,
        total=len(report.outcomes),
    )
    print(json.dumps(report.to_dict(), indent=2))
    return 0 if report.passed else 1


if __name__ == "__main__":
    sys.exit(main())
