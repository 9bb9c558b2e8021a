"""
Watch page scraping services.

Recovers video metadata from the YouTube watch page and the comment section
fragment, the two responses a browser receives when opening a video.

Modules
-------
patterns
    Selectors and regular expressions tied to YouTube's markup
normalizers
    Raw string to typed value conversion
token_extractor
    Session and comment token extraction from inline scripts
page_parser
    Watch-page field extraction
comment_parser
    Comment count extraction from the fragment response
watch_client
    The two HTTP stages
orchestrator
    Stage sequencing and result delivery
"""

from __future__ import annotations

from youtube_video_info.services.watch.comment_parser import extract_comment_count
from youtube_video_info.services.watch.orchestrator import (
    fetch_video_info,
    fetch_video_info_async,
)
from youtube_video_info.services.watch.page_parser import (
    extract_fields,
    normalize_fields,
    parse_watch_page,
)
from youtube_video_info.services.watch.token_extractor import extract_tokens

__all__ = [
    "extract_comment_count",
    "extract_fields",
    "extract_tokens",
    "fetch_video_info",
    "fetch_video_info_async",
    "normalize_fields",
    "parse_watch_page",
]
