"""
Centralized settings and path configuration for the pricing package.

Values can be overridden with SHRIMP_PRICING_* environment variables.
"""
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..engine.models import (
    DEFAULT_TIER1_RATE,
    DEFAULT_TIER2_RATE,
    DEFAULT_TIER3_RATE,
    PenaltyTierConfig,
)


def get_project_root() -> Path:
    """Get the project root directory (where pyproject.toml lives)."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 3 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


def get_sample_base_table() -> Path:
    """Path of the sample GM base table shipped with the package."""
    return Path(__file__).resolve().parent.parent / 'data' / 'sample_base_prices.csv'


class Settings(BaseSettings):
    """Application settings loaded from SHRIMP_PRICING_* environment variables."""

    # ── Paths ────────────────────────────────────────────
    project_root: Path = Field(default_factory=get_project_root)
    sample_base_table: Path = Field(default_factory=get_sample_base_table)

    # ── Penalty tiers (Rp per size) ──────────────────────
    tier1_rate: float = DEFAULT_TIER1_RATE
    tier2_rate: float = DEFAULT_TIER2_RATE
    tier3_rate: float = DEFAULT_TIER3_RATE

    # ── Display (id-ID grouping: Rp88.000) ───────────────
    currency_symbol: str = "Rp"
    thousands_separator: str = "."

    # ── Logging ──────────────────────────────────────────
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="SHRIMP_PRICING_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def load(cls, project_root: Optional[Path] = None, **overrides) -> 'Settings':
        """Load settings from the environment, with optional explicit overrides."""
        if project_root is not None:
            overrides['project_root'] = project_root
        return cls(**overrides)

    def penalty_config(self) -> PenaltyTierConfig:
        """Build the PenaltyTierConfig for these settings."""
        return PenaltyTierConfig(
            tier1_rate=self.tier1_rate,
            tier2_rate=self.tier2_rate,
            tier3_rate=self.tier3_rate,
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
