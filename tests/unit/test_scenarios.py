"""Tests for the reference scenario harness."""

from __future__ import annotations

import json

import pytest

from seo_roi.demo.scenarios import SCENARIOS, Scenario, main, run_scenarios
from seo_roi.inputs import DEFAULT_INPUT
from seo_roi.settings import Settings


class TestRunScenarios:
    def test_all_reference_scenarios_pass(self, test_settings: Settings) -> None:
        report = run_scenarios(settings=test_settings)
        failing = [o.to_dict() for o in report.outcomes if not (o.passed and o.consistent_with_chart)]
        assert failing == []
        assert report.passed
        assert len(report.outcomes) == len(SCENARIOS)

    def test_wrong_expectation_is_reported(self, test_settings: Settings) -> None:
        scenario = Scenario("Optimistic guess", DEFAULT_INPUT.model_copy(update={"timeframe_months": 1}), (3, 4))
        report = run_scenarios((scenario,), settings=test_settings)
        outcome = report.outcomes[0]
        assert not outcome.passed
        assert outcome.actual == "Month 1.0"
        assert outcome.expected == "Between months 3 and 4"
        assert outcome.consistent_with_chart
        assert not report.passed

    def test_failed_calculation_is_reported(self, test_settings: Settings) -> None:
        scenario = Scenario("Broken input", DEFAULT_INPUT.model_copy(update={"monthly_seo_cost": 0}), None)
        outcome = run_scenarios((scenario,), settings=test_settings).outcomes[0]
        assert not outcome.passed
        assert outcome.actual.startswith("Failed:")

    def test_report_to_dict(self, test_settings: Settings) -> None:
        data = run_scenarios(settings=test_settings).to_dict()
        assert data["passed"] is True
        assert data["failed"] == 0
        assert data["total"] == len(SCENARIOS)
        assert {"name", "passed", "expected", "actual", "consistent_with_chart"} == set(data["results"][0])


class TestMain:
    def test_prints_report_and_exits_zero(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(
            "seo_roi.demo.scenarios.configure_logging", lambda **kwargs: None
        )
        assert main() == 0
        out = capsys.readouterr().out
        report = json.loads(out[out.index("{\n") :])
        assert report["passed"] is True
