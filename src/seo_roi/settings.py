"""Engine settings via environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings", "get_settings"]


class Settings(BaseSettings):
    """Central configuration — all values overridable from environment."""

    model_config = SettingsConfigDict(env_prefix="SEO_ROI_", frozen=True)

    # Sanity ceilings applied after a projection is computed
    roi_ceiling_percent: float = 10_000.0
    max_revenue_growth_multiple: float = 100.0

    # Precision guard (largest integer a double represents exactly)
    safe_integer_limit: int = 2**53 - 1
    currency_decimals: int = 2

    # Recommendation thresholds
    low_conversion_rate_percent: float = 1.0
    low_ctr_percent: float = 10.0
    min_keyword_count: int = 5

    # Logging
    log_level: str = "INFO"
    log_json: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read once from the environment."""
    return Settings()
