"""
youtube-video-info - Scrape metadata for a single YouTube video.

Fetches the watch page and the comment fragment for a video ID and merges the
extracted fields into one immutable ``VideoRecord``.
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "youtube-video-info"
__email__ = "noreply@youtube-video-info.dev"
__license__ = "MIT"

from youtube_video_info.exceptions import (
    FetchFailedError,
    InvalidArgumentError,
    ParseFailedError,
    VideoInfoError,
    VideoNotFoundError,
)
from youtube_video_info.models import FetchOptions, SessionTokens, VideoRecord
from youtube_video_info.services.watch.orchestrator import (
    fetch_video_info,
    fetch_video_info_async,
)

__all__ = [
    "__version__",
    "__author__",
    "__email__",
    "__license__",
    "fetch_video_info",
    "fetch_video_info_async",
    "FetchOptions",
    "SessionTokens",
    "VideoRecord",
    "VideoInfoError",
    "InvalidArgumentError",
    "FetchFailedError",
    "VideoNotFoundError",
    "ParseFailedError",
]
