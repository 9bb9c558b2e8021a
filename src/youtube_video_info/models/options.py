"""
Per-call options for ``fetch_video_info``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FetchOptions(BaseModel):
    """
    Options accepted by a single fetch.

    Attributes
    ----------
    language : str | None
        Sent as ``Accept-Language`` on the watch-page request and used as the
        record language when the page does not declare one. ``None`` uses
        ``Settings.default_language`` ("en-US").
    timeout : float | None
        Per-request deadline in seconds. ``None`` uses
        ``Settings.request_timeout``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    language: str | None = Field(default=None)
    timeout: float | None = Field(default=None)

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        """Validate that the timeout is positive if provided."""
        if v is not None and v <= 0:
            raise ValueError(f"timeout must be greater than 0, got {v}")
        return v
