"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
Environment variables use the TLI_ prefix (e.g. TLI_LOG_LEVEL=DEBUG).
"""

import logging
import sys

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tendon_load.shared.constants import DEFAULT_DENSITY_EXP_HB, DEFAULT_K_EDGE_EXP


_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === Session defaults ===
    default_historical_average: float = Field(
        default=1200.0,
        ge=0,
        description="4-week average TLI used when a session does not provide one"
    )

    # === Bouldering defaults ===
    default_density_exp: float = Field(default=0.5, ge=0)
    default_fatigue_rate: float = Field(default=0.02, ge=0)

    # === Hangboard defaults ===
    default_density_exp_hb: float = Field(default=DEFAULT_DENSITY_EXP_HB, ge=0)
    default_k_edge_exp: float = Field(default=DEFAULT_K_EDGE_EXP, ge=0)

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept any case, reject unknown levels."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = SettingsConfigDict(
        env_prefix="TLI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()


def setup_logging(level: str | None = None, stream=None) -> None:
    """
    Configure root logging.

    Args:
        level: Override for settings.log_level
        stream: Output stream (stdout by default)
    """
    level_name = (level or settings.log_level).upper()
    if settings.debug:
        level_name = "DEBUG"

    logging.basicConfig(
        level=getattr(logging, level_name),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(stream or sys.stdout),
        ],
        force=True,
    )
