"""
Application settings using Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        # Prefer local overrides while keeping .env as the default source
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Scanline sentinels
    scanline_black: int = Field(0, ge=0, le=255, description="Pixel value of a bar")
    scanline_white: int = Field(255, ge=0, le=255, description="Pixel value of a space")

    # Preprocessing
    binarize_threshold: int = Field(25, ge=0, le=255, description="Fixed binarization threshold")
    binarize_use_otsu: bool = Field(True, description="Let Otsu pick the threshold")

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @model_validator(mode="after")
    def check_sentinels(self) -> "Settings":
        if self.scanline_black == self.scanline_white:
            raise ValueError("scanline_black and scanline_white must differ")
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
