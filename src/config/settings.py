"""
Application settings using Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
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

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    # Classification
    description_locale: Literal["en", "fr"] = Field(
        "en", description="Language of barcode format descriptions"
    )

    # Scan session
    scan_duplicate_window: float = Field(
        3.0, ge=0.0, description="Seconds during which a repeated code is ignored"
    )
    scan_history_size: int = Field(5, ge=1, description="Recent scans kept per session")

    # Image decoding
    decoder_rotation_angles: list[int] = Field(
        default_factory=lambda: [0, 180],
        description="Rotations tried when decoding still images",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
