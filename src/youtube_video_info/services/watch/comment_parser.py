"""
Comment count extraction from the watch-fragments AJAX response.

The response is a JSON document whose ``body["watch-discussion"]`` holds the
rendered comment section markup. The count is read from the section header
("Comments · 1,234").
"""

from __future__ import annotations

import json
import logging
from typing import Any

from bs4 import BeautifulSoup

from youtube_video_info.exceptions import ParseFailedError
from youtube_video_info.models.watch_bodies import CommentFragmentBody, body_text
from youtube_video_info.services.watch.patterns import (
    COMMENT_COUNT_RE,
    COMMENT_HEADER,
    COUNT_SEPARATOR_RE,
    DISCUSSION_KEY,
)

logger = logging.getLogger(__name__)


def _discussion_markup(document: Any) -> str | None:
    if not isinstance(document, dict):
        return None
    body = document.get("body")
    if not isinstance(body, dict):
        return None
    markup = body.get(DISCUSSION_KEY)
    if not isinstance(markup, str) or not markup:
        return None
    return markup


def extract_comment_count(body: CommentFragmentBody | str) -> int:
    """
    Extract the aggregate comment count from a comment fragment response.

    Parameters
    ----------
    body : CommentFragmentBody | str
        Raw JSON text of the fragment response.

    Returns
    -------
    int
        The comment count, or 0 when the discussion section, its header or
        the count pattern is missing (e.g. comments disabled).

    Raises
    ------
    ParseFailedError
        If the response is not valid JSON.
    """
    text = body_text(body)
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning("Malformed comment fragment response: %s", e)
        raise ParseFailedError(original_error=e) from e

    markup = _discussion_markup(document)
    if markup is None:
        logger.debug("Comment fragment has no discussion section")
        return 0

    soup = BeautifulSoup(markup, "html.parser")
    header = soup.select_one(COMMENT_HEADER)
    if header is None:
        return 0

    match = COMMENT_COUNT_RE.search(header.get_text())
    if not match or not match.group(1):
        return 0

    digits = COUNT_SEPARATOR_RE.sub("", match.group(1))
    return int(digits) if digits else 0
