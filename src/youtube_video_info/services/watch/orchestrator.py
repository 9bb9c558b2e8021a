"""
Orchestrator for fetching a single video's metadata.

Sequences the two fetch stages:

1. GET the watch page and extract its fields.
2. Stop with ``VideoNotFoundError`` if no title was found.
3. Pull the session and comment tokens out of the same page body.
4. POST the comment fragment request on the same client (same cookies).
5. Attach the comment count and return the merged record.

Functions
---------
fetch_video_info
    Public entry point. Returns an awaitable, or drains the result into a
    completion callback.
fetch_video_info_async
    The pipeline coroutine itself.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Coroutine, Mapping
from typing import Any, Union

import httpx
from pydantic import ValidationError

from youtube_video_info.config.settings import Settings, get_settings
from youtube_video_info.exceptions import InvalidArgumentError, VideoNotFoundError
from youtube_video_info.models.options import FetchOptions
from youtube_video_info.models.video_record import VideoRecord
from youtube_video_info.services.watch.comment_parser import extract_comment_count
from youtube_video_info.services.watch.page_parser import parse_watch_page
from youtube_video_info.services.watch.token_extractor import extract_tokens
from youtube_video_info.services.watch.watch_client import (
    fetch_comment_fragment,
    fetch_watch_page,
)

logger = logging.getLogger(__name__)

CompletionCallback = Callable[[Union[Exception, None], Union[VideoRecord, None]], Any]
OptionsArg = Union[FetchOptions, Mapping[str, Any], CompletionCallback, None]

# Strong references to callback-mode tasks until they finish.
_background_tasks: set[asyncio.Task[None]] = set()


def _validate_video_id(video_id: Any) -> str:
    if not isinstance(video_id, str) or not video_id.strip():
        raise InvalidArgumentError()
    return video_id


def _resolve_options(options: Any) -> FetchOptions:
    if options is None:
        return FetchOptions()
    if isinstance(options, FetchOptions):
        return options
    if isinstance(options, Mapping):
        try:
            return FetchOptions.model_validate(dict(options))
        except ValidationError as e:
            raise InvalidArgumentError(f"invalid options: {e}") from e
    raise InvalidArgumentError(
        f"options must be FetchOptions, a mapping or a callback, "
        f"got {type(options).__name__}"
    )


async def _run_pipeline(
    video_id: str, options: FetchOptions, settings: Settings | None
) -> VideoRecord:
    settings = settings or get_settings()
    language = options.language or settings.default_language

    async with httpx.AsyncClient(
        cookies=httpx.Cookies(), follow_redirects=True
    ) as client:
        page = await fetch_watch_page(
            client, video_id, language, settings, timeout=options.timeout
        )

        record = parse_watch_page(page, video_id, language)
        if not record.has_title:
            logger.warning("No title found on watch page for %s", video_id)
            raise VideoNotFoundError(video_id)

        tokens = extract_tokens(page)
        fragment = await fetch_comment_fragment(
            client, video_id, tokens, settings, timeout=options.timeout
        )

    comment_count = extract_comment_count(fragment)
    logger.debug("Found %d comments for %s", comment_count, video_id)
    return record.model_copy(update={"comment_count": comment_count})


async def fetch_video_info_async(
    video_id: str,
    options: FetchOptions | Mapping[str, Any] | None = None,
    *,
    settings: Settings | None = None,
) -> VideoRecord:
    """
    Fetch and merge the metadata of a single video.

    Parameters
    ----------
    video_id : str
        The video to fetch.
    options : FetchOptions | Mapping[str, Any] | None, optional
        Per-call options (default: request language from settings).
    settings : Settings | None, optional
        Library settings (default: loaded from the environment).

    Returns
    -------
    VideoRecord
        The merged record, ``comment_count`` included.

    Raises
    ------
    InvalidArgumentError
        If ``video_id`` is empty.
    FetchFailedError
        If either HTTP request fails.
    VideoNotFoundError
        If the watch page has no title.
    ParseFailedError
        If the comment fragment response is not JSON.
    """
    video_id = _validate_video_id(video_id)
    return await _run_pipeline(video_id, _resolve_options(options), settings)


async def _drain(
    pending: Awaitable[VideoRecord], callback: CompletionCallback
) -> None:
    try:
        record = await pending
    except Exception as e:
        callback(e, None)
        return
    callback(None, record)


def fetch_video_info(
    video_id: str,
    options: OptionsArg = None,
    callback: CompletionCallback | None = None,
    *,
    settings: Settings | None = None,
) -> Coroutine[Any, Any, VideoRecord] | asyncio.Task[None] | None:
    """
    Fetch metadata for a video, as an awaitable or through a callback.

    Without a callback, returns a coroutine resolving to the
    ``VideoRecord``. With a callback, the same pipeline is drained into
    ``callback(error, record)``, which is invoked exactly once and replaces
    the awaitable for that call:

    - inside a running event loop the pipeline is scheduled as a task and
      the task is returned (it never raises the pipeline's error). The
      library holds a reference until the task finishes; an exception raised
      by the callback itself is stored on the task, so await it to observe
      that;
    - otherwise the pipeline runs to completion before this function
      returns ``None``.

    Parameters
    ----------
    video_id : str
        The video to fetch.
    options : FetchOptions | Mapping[str, Any] | Callable | None, optional
        Per-call options. A callable is taken as the completion callback and
        no other options apply (default: None).
    callback : Callable | None, optional
        Completion callback ``(error, record)`` (default: None).
    settings : Settings | None, optional
        Library settings (default: loaded from the environment).

    Returns
    -------
    Coroutine | asyncio.Task | None
        Coroutine when no callback is given; the scheduled task or ``None``
        in callback mode.

    Raises
    ------
    InvalidArgumentError
        Synchronously, before any I/O, if ``video_id`` is empty.

    Examples
    --------
    >>> record = await fetch_video_info("dQw4w9WgXcQ", {"language": "de-DE"})
    >>> fetch_video_info("dQw4w9WgXcQ", lambda err, rec: print(err or rec.title))
    """
    video_id = _validate_video_id(video_id)

    if callable(options) and not isinstance(options, Mapping):
        callback = options
        fetch_options = FetchOptions()
    else:
        fetch_options = _resolve_options(options)

    pending = _run_pipeline(video_id, fetch_options, settings)
    if callback is None:
        return pending

    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        asyncio.run(_drain(pending, callback))
        return None
    task = loop.create_task(_drain(pending, callback))
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
    return task
