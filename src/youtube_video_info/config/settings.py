"""
Library settings and configuration management.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from ``YOUTUBE_VIDEO_INFO_*`` environment variables."""

    log_level: str = Field(default="INFO")

    # Endpoints
    watch_url: str = Field(default="https://www.youtube.com/watch")
    fragment_url: str = Field(default="https://www.youtube.com/watch_fragments_ajax")
    host: str = Field(default="www.youtube.com")

    # Request headers
    user_agent: str = Field(
        default="Mozilla/5.0 (X11; Linux x86_64; rv:42.0) Gecko/20100101 Firefox/42.0"
    )
    accept: str = Field(
        default="text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
    )
    default_language: str = Field(default="en-US")
    fragment_accept_language: str = Field(default="en-US;q=1.0,en;q=0.9")

    # Performance
    request_timeout: float = Field(default=30.0)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v: float) -> float:
        """Validate that the request timeout is positive."""
        if v <= 0:
            raise ValueError(f"request_timeout must be greater than 0, got {v}")
        return v

    def watch_page_url(self, video_id: str) -> str:
        """Canonical watch-page URL for a video."""
        return f"{self.watch_url}?v={video_id}"

    model_config = SettingsConfigDict(
        env_prefix="YOUTUBE_VIDEO_INFO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get library settings."""
    return Settings()
