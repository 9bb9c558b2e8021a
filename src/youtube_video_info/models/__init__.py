"""
Data models for youtube-video-info.
"""

from __future__ import annotations

from youtube_video_info.models.options import FetchOptions
from youtube_video_info.models.video_record import RawFields, SessionTokens, VideoRecord
from youtube_video_info.models.watch_bodies import (
    CommentFragmentBody,
    RawBody,
    WatchPageBody,
    body_text,
)

__all__ = [
    "CommentFragmentBody",
    "FetchOptions",
    "RawBody",
    "RawFields",
    "SessionTokens",
    "VideoRecord",
    "WatchPageBody",
    "body_text",
]
