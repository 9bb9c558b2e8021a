"""
HTTP stages of a video info fetch.

Both requests go through the same ``httpx.AsyncClient``, which carries the
cookie jar established by the watch page into the comment fragment request.
The client is created per fetch by the orchestrator and passed in explicitly.

Functions
---------
fetch_watch_page
    Stage 1: GET the watch page.
fetch_comment_fragment
    Stage 2: POST the watch-fragments request for the comment section.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from youtube_video_info.config.settings import Settings
from youtube_video_info.exceptions import FetchFailedError
from youtube_video_info.models.video_record import SessionTokens
from youtube_video_info.models.watch_bodies import CommentFragmentBody, WatchPageBody

logger = logging.getLogger(__name__)

STAGE_WATCH_PAGE = "watch_page"
STAGE_COMMENT_FRAGMENT = "comment_fragment"


def build_watch_headers(settings: Settings, language: str) -> dict[str, str]:
    """
    Build browser-like headers for the watch-page request.

    Parameters
    ----------
    settings : Settings
        Library settings supplying host, user agent and accept values.
    language : str
        Value for ``Accept-Language``.

    Returns
    -------
    dict[str, str]
        Request headers.
    """
    return {
        "Host": settings.host,
        "User-Agent": settings.user_agent,
        "Accept": settings.accept,
        "Accept-Language": language,
        "Connection": "keep-alive",
        "Cache-Control": "max-age=0",
    }


def build_fragment_request(
    settings: Settings, video_id: str, tokens: SessionTokens
) -> dict[str, Any]:
    """
    Build query parameters, headers and form body for the comment request.

    Missing tokens are left out of the request rather than sent empty.

    Parameters
    ----------
    settings : Settings
        Library settings.
    video_id : str
        The video whose comments are requested.
    tokens : SessionTokens
        Tokens extracted from the watch page.

    Returns
    -------
    dict[str, Any]
        Keyword arguments for ``httpx.AsyncClient.post`` (``params``,
        ``headers``, ``data``).
    """
    params = {
        "v": video_id,
        "tr": "scroll",
        "distiller": "1",
        "ctoken": tokens.comment_token,
        "frags": "comments",
        "spf": "load",
    }
    data = {
        "session_token": tokens.session_token,
        "client_url": settings.watch_page_url(video_id),
    }
    return {
        "params": {k: v for k, v in params.items() if v is not None},
        "headers": {
            "accept-language": settings.fragment_accept_language,
            "content-type": "application/x-www-form-urlencoded",
            "cache-control": "no-cache",
        },
        "data": {k: v for k, v in data.items() if v is not None},
    }


def _check_response(
    response: httpx.Response, video_id: str, stage: str
) -> None:
    if 200 <= response.status_code < 300:
        return
    reason = response.reason_phrase or None
    logger.warning(
        "Fetching %s failed for video %s: %d - %s",
        stage,
        video_id,
        response.status_code,
        reason,
    )
    raise FetchFailedError(
        message=(
            f"Fetching {stage} for video '{video_id}' failed with status "
            f"{response.status_code}"
        ),
        video_id=video_id,
        stage=stage,
        status_code=response.status_code,
        reason=reason,
    )


def _transport_error(
    error: httpx.HTTPError, video_id: str, stage: str
) -> FetchFailedError:
    logger.warning(
        "Fetching %s failed for video %s: %s: %s",
        stage,
        video_id,
        type(error).__name__,
        error,
    )
    return FetchFailedError(
        message=(
            f"Fetching {stage} for video '{video_id}' failed: "
            f"{type(error).__name__}"
        ),
        video_id=video_id,
        stage=stage,
        status_code=None,
        reason=str(error) or type(error).__name__,
    )


async def fetch_watch_page(
    client: httpx.AsyncClient,
    video_id: str,
    language: str,
    settings: Settings,
    timeout: float | None = None,
) -> WatchPageBody:
    """
    Fetch the watch page for a video.

    Parameters
    ----------
    client : httpx.AsyncClient
        Per-fetch client holding the session cookie jar.
    video_id : str
        The video to fetch.
    language : str
        Sent as ``Accept-Language``.
    settings : Settings
        Library settings.
    timeout : float | None, optional
        Request deadline in seconds (default: ``settings.request_timeout``).

    Returns
    -------
    WatchPageBody
        The raw page markup.

    Raises
    ------
    FetchFailedError
        On a transport error or a non-2xx response.
    """
    logger.debug("Fetching YouTube page for %s", video_id)
    try:
        response = await client.get(
            settings.watch_url,
            params={"v": video_id},
            headers=build_watch_headers(settings, language),
            timeout=timeout or settings.request_timeout,
        )
    except httpx.HTTPError as e:
        raise _transport_error(e, video_id, STAGE_WATCH_PAGE) from e

    _check_response(response, video_id, STAGE_WATCH_PAGE)
    return WatchPageBody(text=response.text)


async def fetch_comment_fragment(
    client: httpx.AsyncClient,
    video_id: str,
    tokens: SessionTokens,
    settings: Settings,
    timeout: float | None = None,
) -> CommentFragmentBody:
    """
    Fetch the comment section fragment for a video.

    Must run on the same client as ``fetch_watch_page`` so the cookies set
    by the watch page accompany the request.

    Parameters
    ----------
    client : httpx.AsyncClient
        The client used for the watch page.
    video_id : str
        The video whose comments are requested.
    tokens : SessionTokens
        Tokens extracted from the watch page.
    settings : Settings
        Library settings.
    timeout : float | None, optional
        Request deadline in seconds (default: ``settings.request_timeout``).

    Returns
    -------
    CommentFragmentBody
        The raw JSON response text.

    Raises
    ------
    FetchFailedError
        On a transport error or a non-2xx response.
    """
    logger.debug("Fetching comment fragment for %s", video_id)
    try:
        response = await client.post(
            settings.fragment_url,
            timeout=timeout or settings.request_timeout,
            **build_fragment_request(settings, video_id, tokens),
        )
    except httpx.HTTPError as e:
        raise _transport_error(e, video_id, STAGE_COMMENT_FRAGMENT) from e

    _check_response(response, video_id, STAGE_COMMENT_FRAGMENT)
    return CommentFragmentBody(text=response.text)
