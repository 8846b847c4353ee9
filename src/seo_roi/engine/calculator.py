"""Calculator — validate → project → aggregate → break-even → summarize."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from seo_roi.engine.summary import summarize
from seo_roi.errors import CALCULATION_ERROR_KEY, CalculationError, ErrorKind
from seo_roi.logging import calculation_scope, get_logger
from seo_roi.projection.break_even import find_break_even
from seo_roi.projection.revenue import aggregate
from seo_roi.projection.traffic import project_traffic
from seo_roi.settings import get_settings
from seo_roi.validation import validate

if TYPE_CHECKING:
    from structlog import BoundLogger

    from seo_roi.engine.results import CalculationResult
    from seo_roi.inputs import CalculatorInput
    from seo_roi.settings import Settings

__all__ = ["CalculationSuccess", "CalculationFailure", "CalculationOutcome", "compute"]


@dataclass(frozen=True)
class CalculationSuccess:
    result: CalculationResult

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class CalculationFailure:
    """No projection was produced.

    ``errors`` is field-keyed for validation failures; every other kind
    carries a single message under ``CALCULATION_ERROR_KEY``.
    """

    kind: ErrorKind
    errors: dict[str, str]

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        if CALCULATION_ERROR_KEY in self.errors:
            return self.errors[CALCULATION_ERROR_KEY]
        count = len(self.errors)
        return f"{count} field{'s' if count != 1 else ''} need{'' if count != 1 else 's'} attention"


CalculationOutcome = CalculationSuccess | CalculationFailure


def compute(calc_input: CalculatorInput, *, settings: Settings | None = None) -> CalculationOutcome:
    """Run the full projection for one input snapshot.

    Never raises for invalid input or a failed sanity check; those come
    back as a ``CalculationFailure``.  Identical input yields an equal
    outcome.
    """
    settings = settings or get_settings()
    with calculation_scope() as cid:
        return _run(calc_input, settings, get_logger(calculation_id=cid))


def _run(calc_input: CalculatorInput, settings: Settings, log: BoundLogger) -> CalculationOutcome:
    errors = validate(calc_input, settings=settings)
    if errors:
        if CALCULATION_ERROR_KEY in errors:
            kind = ErrorKind.PRECISION_LIMIT
        else:
            kind = ErrorKind.VALIDATION
        log.info("calculation_rejected", kind=kind.value, fields=sorted(errors))
        return CalculationFailure(kind=kind, errors=errors)

    try:
        traffic = project_traffic(calc_input)
        series = aggregate(calc_input, traffic, decimals=settings.currency_decimals)
        break_even = find_break_even(series.cumulative_cost, series.cumulative_revenue_increase)
        result = summarize(calc_input, traffic, series, break_even, settings=settings)
    except CalculationError as exc:
        log.warning("calculation_failed", kind=exc.kind.value, reason=exc.message)
        return CalculationFailure(kind=exc.kind, errors={CALCULATION_ERROR_KEY: exc.message})

    log.info(
        "calculation_completed",
        months=result.timeframe_months,
        roi_percent=round(result.roi_percent, 2),
        break_even_month=result.break_even_display,
    )
    return CalculationSuccess(result=result)
