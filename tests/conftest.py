"""
Pytest configuration and fixtures for youtube-video-info tests.
"""

from __future__ import annotations

import pytest

from youtube_video_info.config.settings import Settings


@pytest.fixture
def mock_settings() -> Settings:
    """Settings with deterministic endpoints for testing."""
    return Settings(
        watch_url="https://www.youtube.com/watch",
        fragment_url="https://www.youtube.com/watch_fragments_ajax",
        default_language="en-US",
        request_timeout=5.0,
        log_level="DEBUG",
    )
