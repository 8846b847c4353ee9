"""Traffic projection — S-curve growth with a ramp-up discount.

Heuristic model, not fitted to data.  Each month's traffic increase is::

    gap × sigmoid(growth_rate × (month − midpoint)) × (1 − e^(−month / ramp_up))

where ``gap = target − current``.  Less established sites (lower current
traffic) get a smaller growth rate, a later midpoint and a longer ramp-up,
and the very smallest sites get an explicit near-flat start.  The raw
curve is then rescaled so the final month lands exactly on the target.

Traffic bands (current monthly visitors):

    < 300      rate 0.07  midpoint 70 %  ramp 7  flat start ≤ 3 months
    < 500      rate 0.09  midpoint 70 %  ramp 5  flat start ≤ 2 months
    < 1 000    rate 0.12  midpoint 65 %  ramp 4  flat start ≤ 1 month
    < 5 000    rate 0.20  midpoint 65 %  ramp 3
    < 50 000   rate 0.35  midpoint 60 %  ramp 2
    < 200 000  rate 0.45  midpoint 60 %  ramp 2
    ≥ 200 000  rate 0.55  midpoint 60 %  ramp 2
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from itertools import accumulate

from seo_roi.inputs import CalculatorInput, CompetitionLevel

__all__ = ["GrowthProfile", "growth_profile", "project_traffic", "round_half_up"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _TrafficBand:
    upper: float  # exclusive
    growth_rate: float
    midpoint_fraction: float
    ramp_up_months: int
    early_months: int = 0
    early_fraction: float = 0.0


_BANDS: tuple[_TrafficBand, ...] = (
    _TrafficBand(300, 0.07, 0.70, 7, early_months=3, early_fraction=0.005),
    _TrafficBand(500, 0.09, 0.70, 5, early_months=2, early_fraction=0.015),
    _TrafficBand(1_000, 0.12, 0.65, 4, early_months=1, early_fraction=0.025),
    _TrafficBand(5_000, 0.20, 0.65, 3),
    _TrafficBand(50_000, 0.35, 0.60, 2),
    _TrafficBand(200_000, 0.45, 0.60, 2),
    _TrafficBand(math.inf, 0.55, 0.60, 2),
)

_COMPETITION_RATE: dict[CompetitionLevel, float] = {
    CompetitionLevel.LOW: 1.2,
    CompetitionLevel.MEDIUM: 1.0,
    CompetitionLevel.HIGH: 0.8,
}

_COMPETITION_RAMP: dict[CompetitionLevel, int] = {
    CompetitionLevel.LOW: -1,
    CompetitionLevel.MEDIUM: 0,
    CompetitionLevel.HIGH: 1,
}


@dataclass(frozen=True)
class GrowthProfile:
    """Curve parameters derived from site maturity and competition."""

    growth_rate: float
    midpoint: int
    ramp_up_months: int
    early_months: int
    early_fraction: float


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from −∞ (like ``Math.round``)."""
    return math.floor(value + 0.5)


def _band(current_traffic: float) -> _TrafficBand:
    for band in _BANDS:
        if current_traffic < band.upper:
            return band
    return _BANDS[-1]


def growth_profile(calc_input: CalculatorInput) -> GrowthProfile:
    """Derive curve parameters for a validated input."""
    band = _band(calc_input.current_traffic)  # type: ignore[arg-type]
    competition = calc_input.competition_level
    timeframe = calc_input.timeframe_months or 0

    return GrowthProfile(
        growth_rate=band.growth_rate * _COMPETITION_RATE[competition],
        midpoint=round_half_up(timeframe * band.midpoint_fraction),
        ramp_up_months=max(1, band.ramp_up_months + _COMPETITION_RAMP[competition]),
        early_months=band.early_months,
        early_fraction=band.early_fraction,
    )


def _raw_increase(month: int, gap: float, profile: GrowthProfile) -> float:
    if month == 0:
        return 0.0
    if month <= profile.early_months:
        # Near-flat start: brand-new sites see almost nothing in the first months
        return gap * profile.early_fraction * month
    ramp_up = 1 - math.exp(-month / profile.ramp_up_months)
    s_curve = 1 / (1 + math.exp(-profile.growth_rate * (month - profile.midpoint)))
    return gap * s_curve * ramp_up


def project_traffic(calc_input: CalculatorInput) -> list[int]:
    """Monthly traffic for months ``0..timeframe`` inclusive.

    Month 0 equals current traffic and the last month equals target
    traffic exactly.  Values are whole visitors and never decrease.
    """
    current = int(calc_input.current_traffic)  # type: ignore[arg-type]
    target = int(calc_input.target_traffic)  # type: ignore[arg-type]
    timeframe = calc_input.timeframe_months or 0

    if timeframe <= 0:
        return [current]

    profile = growth_profile(calc_input)
    gap = target - current
    logger.debug(
        "Traffic profile: rate=%.4f midpoint=%d ramp=%d early=%d",
        profile.growth_rate,
        profile.midpoint,
        profile.ramp_up_months,
        profile.early_months,
    )

    # Running maximum keeps the flat start from ever exceeding the curve after it
    increases = list(
        accumulate((_raw_increase(m, gap, profile) for m in range(timeframe + 1)), max)
    )
    raw = [round_half_up(current + inc) for inc in increases]

    if raw[-1] == target or target <= current:
        return raw

    span = raw[-1] - current
    if span > 0:
        factor = gap / span
        scaled = [(value - current) * factor for value in raw]
    else:
        # Gap too small to survive rounding; scale the unrounded curve instead
        factor = gap / increases[-1]
        scaled = [inc * factor for inc in increases]

    logger.debug("Boundary correction factor %.6f (raw end %d, target %d)", factor, raw[-1], target)

    middle = [round_half_up(current + inc) for inc in scaled[1:-1]]
    return [current, *middle, target]
