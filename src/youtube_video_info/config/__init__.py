"""
Configuration management module for youtube-video-info.

Handles endpoint URLs, request headers, timeouts and logging level, all
overridable through environment variables.
"""

from __future__ import annotations

from youtube_video_info.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
