"""
Service layer for youtube-video-info.
"""

from __future__ import annotations

__all__: list[str] = []
