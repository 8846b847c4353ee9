"""Input validation — field-keyed error messages, no side effects.

``validate()`` gates the engine: a non-empty mapping means no projection
is computed.  Field rules run first; the precision guard only runs once
every field is individually valid and reports under the reserved
calculation key.

``advisories()`` returns non-blocking warnings for values that are valid
but likely to produce less reliable projections.
"""

from __future__ import annotations

import math

from seo_roi.errors import CALCULATION_ERROR_KEY
from seo_roi.inputs import FIELD_LABELS, CalculatorInput
from seo_roi.settings import Settings, get_settings

__all__ = ["validate", "check_precision", "advisories"]

# ── Plausibility ceilings ────────────────────────────────────────────
MAX_CURRENT_TRAFFIC = 10_000_000
MAX_TARGET_TRAFFIC = 20_000_000
MAX_AVERAGE_ORDER_VALUE = 1_000_000
MAX_MONTHLY_SEO_COST = 1_000_000
MIN_TIMEFRAME_MONTHS = 1
MAX_TIMEFRAME_MONTHS = 60

# ── Advisory thresholds ──────────────────────────────────────────────
HIGH_AVERAGE_ORDER_VALUE = 10_000
HIGH_MONTHLY_SEO_COST = 100_000
HIGH_TARGET_TRAFFIC = 10_000_000

_INVESTMENT_FIELDS = ("content_pct", "link_building_pct", "technical_pct")


def _number(errors: dict[str, str], field: str, value: object) -> float | None:
    """The value when it is a finite number; anything else records an error."""
    if value is None:
        return None
    label = FIELD_LABELS[field]
    if isinstance(value, bool) or not isinstance(value, int | float):
        errors[field] = f"{label} must be a number"
        return None
    if not math.isfinite(value):
        errors[field] = f"{label} must be a finite number"
        return None
    return value


def _required_positive(errors: dict[str, str], field: str, value: object) -> float | None:
    """Present, finite, non-zero, non-negative.  Returns the value when it passed."""
    label = FIELD_LABELS[field]
    if value is None:
        errors[field] = f"{label} is required"
        return None
    number = _number(errors, field, value)
    if number is None:
        return None
    if number == 0:
        errors[field] = f"{label} cannot be zero"
    elif number < 0:
        errors[field] = f"{label} cannot be negative"
    else:
        return number
    return None


def validate(calc_input: CalculatorInput, *, settings: Settings | None = None) -> dict[str, str]:
    """Validate a snapshot.  Empty mapping means valid."""
    errors: dict[str, str] = {}

    current = _required_positive(errors, "current_traffic", calc_input.current_traffic)
    if current is not None:
        if current != int(current):
            errors["current_traffic"] = "Current traffic must be a whole number of visitors"
        elif current > MAX_CURRENT_TRAFFIC:
            errors["current_traffic"] = "Current traffic value is unrealistically high"

    target = _required_positive(errors, "target_traffic", calc_input.target_traffic)
    if target is not None:
        if target != int(target):
            errors["target_traffic"] = "Target traffic must be a whole number of visitors"
        elif current is not None and target <= current:
            errors["target_traffic"] = "Target traffic must be greater than current traffic"
        elif target > MAX_TARGET_TRAFFIC:
            errors["target_traffic"] = "Target traffic value is unrealistically high"

    rate = _required_positive(errors, "conversion_rate", calc_input.conversion_rate)
    if rate is not None and rate > 100:
        errors["conversion_rate"] = "Conversion rate cannot exceed 100%"

    aov = _required_positive(errors, "average_order_value", calc_input.average_order_value)
    if aov is not None and aov > MAX_AVERAGE_ORDER_VALUE:
        errors["average_order_value"] = "Average order value is unrealistically high"

    cost = _required_positive(errors, "monthly_seo_cost", calc_input.monthly_seo_cost)
    if cost is not None and cost > MAX_MONTHLY_SEO_COST:
        errors["monthly_seo_cost"] = "Monthly SEO cost is unrealistically high"

    months = _required_positive(errors, "timeframe_months", calc_input.timeframe_months)
    if months is not None:
        if months != int(months):
            errors["timeframe_months"] = "Timeframe must be a whole number of months"
        elif months > MAX_TIMEFRAME_MONTHS:
            errors["timeframe_months"] = f"Timeframe cannot exceed {MAX_TIMEFRAME_MONTHS} months"

    kd = _number(errors, "keyword_difficulty", calc_input.keyword_difficulty)
    if kd is not None:
        if kd < 1:
            errors["keyword_difficulty"] = "Keyword difficulty must be at least 1"
        elif kd > 100:
            errors["keyword_difficulty"] = "Keyword difficulty cannot exceed 100"

    ctr = _number(errors, "organic_ctr", calc_input.organic_ctr)
    if ctr is not None and not 0 <= ctr <= 100:
        errors["organic_ctr"] = "Organic click-through rate must be between 0% and 100%"

    keywords = _number(errors, "keyword_count", calc_input.keyword_count)
    if keywords is not None and keywords < 0:
        errors["keyword_count"] = "Keyword count cannot be negative"

    _validate_investment_mix(calc_input, errors)

    if not errors:
        precision = check_precision(calc_input, settings=settings)
        if precision:
            errors[CALCULATION_ERROR_KEY] = precision

    return errors


def _validate_investment_mix(calc_input: CalculatorInput, errors: dict[str, str]) -> None:
    values = {
        field: _number(errors, field, getattr(calc_input, field)) for field in _INVESTMENT_FIELDS
    }

    for field, value in values.items():
        if value is not None and value < 0:
            errors[field] = f"{FIELD_LABELS[field]} cannot be negative"

    shares = [value for value in values.values() if value is not None]
    if len(shares) < len(_INVESTMENT_FIELDS):
        return

    total = sum(shares)
    if not math.isclose(total, 100, abs_tol=1e-9):
        message = f"Investment allocations total {total:g}%, but must equal 100%"
        for field in _INVESTMENT_FIELDS:
            errors.setdefault(field, message)


def check_precision(calc_input: CalculatorInput, *, settings: Settings | None = None) -> str | None:
    """Reject magnitudes whose cumulative revenue could lose precision.

    Money is rounded to the smallest currency unit after every
    accumulation, so the cumulative revenue at the target traffic level,
    counted in that unit, must stay below the safe-integer limit.
    """
    settings = settings or get_settings()
    monthly_at_target = (
        calc_input.target_traffic  # type: ignore[operator]
        * calc_input.conversion_rate
        / 100
        * calc_input.average_order_value
    )
    smallest_units = monthly_at_target * 10**settings.currency_decimals
    cumulative = smallest_units * max(calc_input.timeframe_months or 1, 1)
    if cumulative >= settings.safe_integer_limit:
        return (
            "These inputs are too large to calculate precisely. "
            "Reduce target traffic, average order value, or the timeframe."
        )
    return None


def advisories(calc_input: CalculatorInput) -> dict[str, str]:
    """Non-blocking warnings about valid but extreme values."""
    notes: dict[str, str] = {}
    # Malformed values are reported by validate(), not here
    rejected: dict[str, str] = {}

    aov = _number(rejected, "average_order_value", calc_input.average_order_value)
    if aov is not None and aov > HIGH_AVERAGE_ORDER_VALUE:
        notes["average_order_value"] = "High order values may impact calculation accuracy"

    cost = _number(rejected, "monthly_seo_cost", calc_input.monthly_seo_cost)
    if cost is not None and cost > HIGH_MONTHLY_SEO_COST:
        notes["monthly_seo_cost"] = "Extremely high monthly SEO costs entered"

    target = _number(rejected, "target_traffic", calc_input.target_traffic)
    if target is not None and target > HIGH_TARGET_TRAFFIC:
        notes["target_traffic"] = "High traffic values may produce less accurate projections"

    shares = [_number(rejected, field, getattr(calc_input, field)) for field in _INVESTMENT_FIELDS]
    supplied = [share for share in shares if share is not None]
    if len(supplied) == len(shares):
        total = sum(supplied)
        if total > 100:
            notes["investment_mix"] = f"Total investment allocation exceeds 100% (currently {total:g}%)"
        elif 90 <= total < 100:
            notes["investment_mix"] = f"Total investment allocation is {total:g}%, should sum to 100%"

    return notes
