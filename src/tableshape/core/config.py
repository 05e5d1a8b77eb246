"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Profiler settings.

    All settings can be overridden via environment variables.
    Prefix: TABLESHAPE_
    """

    model_config = SettingsConfigDict(
        env_prefix="TABLESHAPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Summary shape
    sample_row_count: int = Field(
        default=5,
        ge=0,
        description="Number of leading rows copied into the summary",
    )
    top_k_values: int = Field(
        default=10,
        ge=1,
        description="Number of most frequent values kept per categorical column",
    )

    # Performance caps (column counts above these skip the pairwise work)
    association_max_columns: int = Field(
        default=50,
        description="Association matrix is empty above this many columns",
    )
    keys_max_columns: int = Field(
        default=20,
        description="Key and dependency detection is empty above this many columns",
    )
    co_missing_max_columns: int = Field(
        default=50,
        description="Co-missing pair analysis is empty above this many columns",
    )
    co_missing_top_n: int = Field(
        default=10,
        ge=0,
        description="Number of co-missing column pairs to report",
    )

    # Outliers
    tukey_multiplier: float = Field(
        default=1.5,
        gt=0,
        description="IQR multiplier for Tukey fences",
    )
    zscore_threshold: float = Field(
        default=3.0,
        gt=0,
        description="Absolute z-score above which a value is an outlier",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")  # 'json' or 'console'


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
