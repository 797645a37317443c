"""
Configuration management for Mushaf.

Uses Pydantic Settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables with the MUSHAF_ prefix.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mushaf.core.segmenter import MarkerConvention


class MushafSettings(BaseSettings):
    """
    Configuration settings for Mushaf.

    All settings can be overridden via environment variables with MUSHAF_ prefix.

    Example:
        export MUSHAF_BASE_URL="https://ghazi369.pythonanywhere.com"
        export MUSHAF_REQUEST_DELAY="0.5"
        export MUSHAF_CONVENTION="mid_stream"
    """

    model_config = SettingsConfigDict(
        env_prefix="MUSHAF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ============ Source Settings ============

    base_url: str = Field(
        default="https://ghazi369.pythonanywhere.com",
        description="Base URL of the upstream Quran text source",
    )

    user_agent: str = Field(
        default="Mozilla/5.0 (compatible; MushafScraper/1.0)",
        description="User-Agent header sent with every request",
    )

    request_timeout: float = Field(
        default=30.0,
        description="HTTP timeout in seconds",
        gt=0.0,
        le=300.0,
    )

    max_retries: int = Field(
        default=3,
        description="Maximum attempts for a request that fails at the network level",
        ge=1,
        le=10,
    )

    # ============ Batch Settings ============

    request_delay: float = Field(
        default=0.3,
        description="Pause between surah requests in seconds",
        ge=0.0,
        le=60.0,
    )

    numerics_delay: float = Field(
        default=0.8,
        description="Pause between numerics requests in seconds",
        ge=0.0,
        le=60.0,
    )

    numerics_surahs: list[int] = Field(
        default=[1, 57, 104],
        description="Surahs enriched with numerics by default",
    )

    # ============ Parsing Settings ============

    convention: MarkerConvention = Field(
        default=MarkerConvention.END_OF_UNIT,
        description="Verse marker placement used when segmenting",
    )

    # ============ Output Settings ============

    output_path: Path = Field(
        default=Path("data/quran.json"),
        description="Location of the saved Quran dataset",
    )

    # ============ Validators ============

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Store the base URL without a trailing slash."""
        return v.rstrip("/")

    @field_validator("output_path", mode="before")
    @classmethod
    def convert_to_path(cls, v: str | Path) -> Path:
        """Convert string paths to Path objects."""
        if isinstance(v, str):
            return Path(v)
        return v

    @field_validator("numerics_surahs")
    @classmethod
    def check_surah_ids(cls, v: list[int]) -> list[int]:
        for surah_id in v:
            if surah_id < 1 or surah_id > 114:
                raise ValueError(f"Invalid surah_id: {surah_id}. Must be 1-114.")
        return v


# Default settings instance
_default_settings: MushafSettings | None = None


def get_settings() -> MushafSettings:
    """
    Get the default settings instance (lazily created).

    Returns:
        MushafSettings: The default settings
    """
    global _default_settings
    if _default_settings is None:
        _default_settings = MushafSettings()
    return _default_settings


def configure(**kwargs) -> MushafSettings:
    """
    Create and set new default settings.

    Args:
        **kwargs: Settings to override

    Returns:
        MushafSettings: The new settings instance
    """
    global _default_settings
    _default_settings = MushafSettings(**kwargs)
    return _default_settings
