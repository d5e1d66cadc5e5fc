"""
Texttab configuration.

Centralized configuration management with environment variables.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Texttab settings"""

    model_config = SettingsConfigDict(
        env_prefix="TEXTTAB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Calculations
    DEFAULT_FORMAT: str = "%,.2f"  # used by ^^col-sum / ^^col-avg without a format style
    NAN_TEXT: str = "NaN"

    # Layout wrapper
    LAYOUT_WIDTH: str = "20px"
    LAYOUT_MARGIN: str = "0px"

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
