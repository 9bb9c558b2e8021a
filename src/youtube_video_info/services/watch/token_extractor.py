"""
Session and comment token extraction from raw watch-page markup.

The tokens are assigned inside inline ``<script>`` blocks, so they are matched
against the raw body text rather than the parsed tree.
"""

from __future__ import annotations

import logging

from youtube_video_info.models.video_record import SessionTokens
from youtube_video_info.models.watch_bodies import WatchPageBody, body_text
from youtube_video_info.services.watch.patterns import (
    COMMENT_TOKEN_RE,
    SESSION_TOKEN_RE,
)

logger = logging.getLogger(__name__)


def extract_session_token(body: WatchPageBody | str) -> str | None:
    """Return the XSRF session token, or ``None`` if the page has none."""
    match = SESSION_TOKEN_RE.search(body_text(body))
    return match.group(1) if match else None


def extract_comment_token(body: WatchPageBody | str) -> str | None:
    """Return the comment continuation token, or ``None`` if the page has none."""
    match = COMMENT_TOKEN_RE.search(body_text(body))
    return match.group(1) if match else None


def extract_tokens(body: WatchPageBody | str) -> SessionTokens:
    """
    Extract both stage-2 tokens from a watch page.

    Either token may be missing; that is not an error. A page without a
    comment token still proceeds to the comment stage, which then reports
    zero comments.

    Parameters
    ----------
    body : WatchPageBody | str
        Raw watch-page markup.

    Returns
    -------
    SessionTokens
        The tokens found, each ``None`` when absent.
    """
    tokens = SessionTokens(
        session_token=extract_session_token(body),
        comment_token=extract_comment_token(body),
    )
    logger.debug("Found session token %s", tokens.session_token)
    logger.debug("Found comment token %s", tokens.comment_token)
    return tokens
