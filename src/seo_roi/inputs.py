"""Calculator input snapshot, plain-data parsing, and explicit update operations.

A :class:`CalculatorInput` is an immutable value built fresh from the
caller's state for every calculation.  Callers never mutate it; they
derive a new snapshot with :func:`apply_update`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from seo_roi.errors import CALCULATION_ERROR_KEY, InvalidUpdateError

__all__ = [
    "CompetitionLevel",
    "IndustryType",
    "CalculatorInput",
    "DEFAULT_INPUT",
    "FIELD_LABELS",
    "InputUpdate",
    "SetTraffic",
    "SetEconomics",
    "SetTimeframe",
    "SetMarket",
    "SetInvestmentMix",
    "SetSignals",
    "apply_update",
    "parse_input",
]


class CompetitionLevel(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class IndustryType(StrEnum):
    ECOMMERCE = "ecommerce"
    SAAS = "saas"
    LOCAL = "local"
    OTHER = "other"


def _aliases(name: str, *extra: str) -> AliasChoices:
    return AliasChoices(name, *extra)


class CalculatorInput(BaseModel):
    """Immutable snapshot of everything the engine needs.

    Every numeric field is optional at the type level: ``None`` means
    "not supplied" and is reported by the validator, not by pydantic.
    Plain data may use the UI's camelCase keys or the attribute names.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", allow_inf_nan=False)

    # Traffic & conversion economics
    current_traffic: float | None = Field(
        default=None, validation_alias=_aliases("current_traffic", "currentTraffic")
    )
    target_traffic: float | None = Field(
        default=None, validation_alias=_aliases("target_traffic", "targetTraffic")
    )
    conversion_rate: float | None = Field(
        default=None, validation_alias=_aliases("conversion_rate", "conversionRate")
    )
    average_order_value: float | None = Field(
        default=None,
        validation_alias=_aliases("average_order_value", "averageOrderValue"),
    )
    monthly_seo_cost: float | None = Field(
        default=None,
        validation_alias=_aliases("monthly_seo_cost", "monthlySEOCost", "monthlySeoCost"),
    )
    timeframe_months: int | None = Field(
        default=None,
        validation_alias=_aliases("timeframe_months", "timeframeMonths", "timeframe"),
    )

    # Market
    competition_level: CompetitionLevel = Field(
        default=CompetitionLevel.MEDIUM,
        validation_alias=_aliases("competition_level", "competitionLevel"),
    )
    industry_type: IndustryType = Field(
        default=IndustryType.ECOMMERCE,
        validation_alias=_aliases("industry_type", "industryType"),
    )
    keyword_difficulty: float | None = Field(
        default=None,
        validation_alias=_aliases("keyword_difficulty", "keywordDifficulty"),
    )

    # Investment breakdown (percent of monthly budget, advisory)
    content_pct: float | None = Field(
        default=None, validation_alias=_aliases("content_pct", "contentInvestment")
    )
    link_building_pct: float | None = Field(
        default=None,
        validation_alias=_aliases("link_building_pct", "linkBuildingInvestment"),
    )
    technical_pct: float | None = Field(
        default=None,
        validation_alias=_aliases("technical_pct", "technicalSEOInvestment"),
    )

    # Secondary signals for recommendations only
    organic_ctr: float | None = Field(
        default=None, validation_alias=_aliases("organic_ctr", "organicCTR")
    )
    keyword_count: int | None = Field(
        default=None, validation_alias=_aliases("keyword_count", "keywords")
    )

    @field_validator(
        "current_traffic",
        "target_traffic",
        "conversion_rate",
        "average_order_value",
        "monthly_seo_cost",
        "timeframe_months",
        "keyword_difficulty",
        "content_pct",
        "link_building_pct",
        "technical_pct",
        "organic_ctr",
        "keyword_count",
        mode="before",
    )
    @classmethod
    def _blank_is_missing(cls, value: Any) -> Any:
        # Empty form fields arrive as "" and mean "not supplied"
        if isinstance(value, str) and not value.strip():
            return None
        return value


FIELD_LABELS: dict[str, str] = {
    "current_traffic": "Current traffic",
    "target_traffic": "Target traffic",
    "conversion_rate": "Conversion rate",
    "average_order_value": "Average order value",
    "monthly_seo_cost": "Monthly SEO cost",
    "timeframe_months": "Timeframe",
    "competition_level": "Competition level",
    "industry_type": "Industry type",
    "keyword_difficulty": "Keyword difficulty",
    "content_pct": "Content investment",
    "link_building_pct": "Link building investment",
    "technical_pct": "Technical SEO investment",
    "organic_ctr": "Organic click-through rate",
    "keyword_count": "Keyword count",
}

# Every accepted spelling → attribute name
_FIELD_BY_ALIAS: dict[str, str] = {}
for _name, _field in CalculatorInput.model_fields.items():
    _choices = _field.validation_alias
    if isinstance(_choices, AliasChoices):
        for _choice in _choices.choices:
            _FIELD_BY_ALIAS[str(_choice)] = _name


# Initial state of the calculator form
DEFAULT_INPUT = CalculatorInput(
    current_traffic=1000,
    target_traffic=2000,
    conversion_rate=2,
    average_order_value=100,
    monthly_seo_cost=1000,
    timeframe_months=12,
    competition_level=CompetitionLevel.MEDIUM,
    industry_type=IndustryType.ECOMMERCE,
    keyword_difficulty=40,
    content_pct=30,
    link_building_pct=40,
    technical_pct=30,
    organic_ctr=3.5,
)


def parse_input(payload: Mapping[str, Any]) -> tuple[CalculatorInput | None, dict[str, str]]:
    """Build a snapshot from plain structured data.

    Returns ``(input, {})`` on success or ``(None, errors)`` where *errors*
    maps attribute names to messages for values pydantic could not coerce
    (non-numeric strings, unknown enum members, fractional months).
    """
    try:
        return CalculatorInput.model_validate(dict(payload)), {}
    except ValidationError as exc:
        return None, _field_errors(exc)


def _field_errors(exc: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for err in exc.errors():
        loc = err.get("loc", ())
        field = _FIELD_BY_ALIAS.get(str(loc[0]), str(loc[0])) if loc else CALCULATION_ERROR_KEY
        label = FIELD_LABELS.get(field, field)
        errors.setdefault(field, f"{label} is invalid: {err['msg']}")
    return errors


# ---------------------------------------------------------------------------
# Update operations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SetTraffic:
    current: float | None = None
    target: float | None = None


@dataclass(frozen=True)
class SetEconomics:
    conversion_rate: float | None = None
    average_order_value: float | None = None
    monthly_seo_cost: float | None = None


@dataclass(frozen=True)
class SetTimeframe:
    months: int


@dataclass(frozen=True)
class SetMarket:
    competition_level: CompetitionLevel | None = None
    industry_type: IndustryType | None = None
    keyword_difficulty: float | None = None


@dataclass(frozen=True)
class SetInvestmentMix:
    """Change investment percentages.

    With ``auto_balance`` set, a single remaining unset percentage is
    filled so the three total 100 (only when the remainder is non-negative).
    """

    content: float | None = None
    link_building: float | None = None
    technical: float | None = None
    auto_balance: bool = False


@dataclass(frozen=True)
class SetSignals:
    organic_ctr: float | None = None
    keyword_count: int | None = None


InputUpdate = SetTraffic | SetEconomics | SetTimeframe | SetMarket | SetInvestmentMix | SetSignals


def _changes(pairs: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in pairs.items() if value is not None}


def apply_update(current: CalculatorInput, update: InputUpdate) -> CalculatorInput:
    """Return a new snapshot with *update* applied; *current* is untouched.

    Raises:
        InvalidUpdateError: a value pydantic cannot coerce (field-keyed).
        TypeError: *update* is not one of the update operations.
    """
    if isinstance(update, SetTraffic):
        changes = _changes({"current_traffic": update.current, "target_traffic": update.target})
    elif isinstance(update, SetEconomics):
        changes = _changes(
            {
                "conversion_rate": update.conversion_rate,
                "average_order_value": update.average_order_value,
                "monthly_seo_cost": update.monthly_seo_cost,
            }
        )
    elif isinstance(update, SetTimeframe):
        changes = {"timeframe_months": update.months}
    elif isinstance(update, SetMarket):
        changes = _changes(
            {
                "competition_level": update.competition_level,
                "industry_type": update.industry_type,
                "keyword_difficulty": update.keyword_difficulty,
            }
        )
    elif isinstance(update, SetInvestmentMix):
        changes = _changes(
            {
                "content_pct": update.content,
                "link_building_pct": update.link_building,
                "technical_pct": update.technical,
            }
        )
    elif isinstance(update, SetSignals):
        changes = _changes(
            {"organic_ctr": update.organic_ctr, "keyword_count": update.keyword_count}
        )
    else:
        raise TypeError(f"Unsupported input update: {type(update).__name__}")

    updated = _rebuild(current, changes)
    if isinstance(update, SetInvestmentMix) and update.auto_balance:
        balance = _balance_remaining(updated)
        if balance:
            updated = _rebuild(updated, balance)
    return updated


def _rebuild(current: CalculatorInput, changes: dict[str, Any]) -> CalculatorInput:
    # model_copy does not validate
    try:
        return CalculatorInput.model_validate({**current.model_dump(), **changes})
    except ValidationError as exc:
        raise InvalidUpdateError(_field_errors(exc)) from exc


def _balance_remaining(snapshot: CalculatorInput) -> dict[str, float]:
    """Fill the one unset investment percentage so the mix totals 100."""
    mix = {
        "content_pct": snapshot.content_pct,
        "link_building_pct": snapshot.link_building_pct,
        "technical_pct": snapshot.technical_pct,
    }
    unset = [name for name, value in mix.items() if value is None]
    if len(unset) != 1:
        return {}
    remainder = 100 - sum(value for value in mix.values() if value is not None)
    if remainder < 0:
        return {}
    return {unset[0]: remainder}
