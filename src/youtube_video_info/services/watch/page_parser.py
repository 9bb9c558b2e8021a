"""
Field extraction for YouTube watch pages.

Walks a fixed set of selectors over the parsed page and reports the raw
strings found there, then hands them to the normalizers for typed
conversion. Every location is read independently: a missing element only
leaves its own field empty.

Functions
---------
extract_fields
    Read raw field strings from a parsed watch page.
normalize_fields
    Convert raw field strings into a ``VideoRecord``.
parse_watch_page
    Parse, extract and normalize a watch-page body in one step.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from youtube_video_info.models.video_record import RawFields, VideoRecord
from youtube_video_info.models.watch_bodies import WatchPageBody, body_text
from youtube_video_info.services.watch import patterns
from youtube_video_info.services.watch.normalizers import (
    parse_duration,
    parse_family_friendly,
    parse_flag,
    parse_regions,
    parse_view_count,
    parse_votes,
)

logger = logging.getLogger(__name__)


def _attr(element: Tag | None, attribute: str) -> str | None:
    """Attribute value of an element; missing or empty counts as absent."""
    if element is None:
        return None
    value = element.get(attribute)
    if isinstance(value, list):
        value = " ".join(value)
    return value or None


def _select_attr(soup: BeautifulSoup, selector: str, attribute: str) -> str | None:
    return _attr(soup.select_one(selector), attribute)


def _select_text(soup: BeautifulSoup, selector: str) -> str | None:
    """Concatenated text of every match, or ``None`` when nothing matches."""
    elements = soup.select(selector)
    if not elements:
        return None
    return "".join(element.get_text() for element in elements)


def _extract_title(soup: BeautifulSoup) -> str | None:
    heading = soup.select_one(patterns.TITLE_HEADING)
    if heading is not None:
        title = heading.get_text().strip()
        if title:
            return title
    return _select_attr(soup, patterns.TITLE_META, "content")


def _extract_description(soup: BeautifulSoup) -> str | None:
    """
    Inner markup of the description block.

    The markup is re-serialized from the parsed tree, so character references
    come back decoded (``&#39;`` as ``'``, ``&nbsp;`` as U+00A0) while tags
    and the ``&amp;``, ``&lt;`` and ``&gt;`` escapes are kept.
    """
    description = soup.select_one(patterns.DESCRIPTION)
    if description is None:
        return None
    return description.decode_contents()


def _extract_owner(soup: BeautifulSoup) -> str | None:
    owner = _select_text(soup, patterns.OWNER_LINK)
    return owner.strip() if owner is not None else None


def _extract_tags(soup: BeautifulSoup) -> list[str]:
    tags: list[str] = []
    for tag_meta in soup.select(patterns.TAG_META):
        content = tag_meta.get("content")
        if content is not None:
            tags.append(str(content))
    return tags


def extract_fields(
    soup: BeautifulSoup, video_id: str, language: str | None = None
) -> RawFields:
    """
    Extract raw field strings from a parsed watch page.

    Parameters
    ----------
    soup : BeautifulSoup
        Parsed watch-page markup.
    video_id : str
        The requested video ID, copied onto the result.
    language : str | None, optional
        The language the page was requested in. Kept when the document
        does not declare its own ``lang`` (default: None).

    Returns
    -------
    RawFields
        Raw values; numbers and flags are still strings.
    """
    itemprops = {
        name: _select_attr(soup, selector, attribute)
        for name, selector, attribute in patterns.ITEMPROP_FIELDS
    }

    return RawFields(
        video_id=video_id,
        language=_select_attr(soup, "html", "lang") or language,
        title=_extract_title(soup),
        description=_extract_description(soup),
        owner=_extract_owner(soup),
        dislike_count=_select_text(soup, patterns.DISLIKE_BUTTON_TEXT),
        like_count=_select_text(soup, patterns.LIKE_BUTTON_TEXT),
        channel_thumbnail_url=_select_attr(
            soup, patterns.CHANNEL_THUMBNAIL_IMG, "data-thumb"
        ),
        tags=_extract_tags(soup),
        **itemprops,
    )


def normalize_fields(raw: RawFields) -> VideoRecord:
    """
    Convert raw field strings into a typed ``VideoRecord``.

    Parameters
    ----------
    raw : RawFields
        Output of ``extract_fields``.

    Returns
    -------
    VideoRecord
        Record with ``comment_count`` left at its default of 0.
    """
    return VideoRecord(
        video_id=raw.video_id,
        url=raw.url,
        language=raw.language,
        title=raw.title,
        description=raw.description,
        owner=raw.owner,
        channel_id=raw.channel_id,
        thumbnail_url=raw.thumbnail_url,
        embed_url=raw.embed_url,
        date_published=raw.date_published,
        genre=raw.genre,
        paid=parse_flag(raw.paid),
        unlisted=parse_flag(raw.unlisted),
        is_family_friendly=parse_family_friendly(raw.is_family_friendly),
        duration=parse_duration(raw.duration),
        views=parse_view_count(raw.views),
        regions_allowed=parse_regions(raw.regions_allowed),
        dislike_count=parse_votes(raw.dislike_count),
        like_count=parse_votes(raw.like_count),
        channel_thumbnail_url=raw.channel_thumbnail_url,
        tags=raw.tags,
    )


def parse_watch_page(
    body: WatchPageBody | str, video_id: str, language: str | None = None
) -> VideoRecord:
    """
    Parse a watch-page body into a ``VideoRecord``.

    Parameters
    ----------
    body : WatchPageBody | str
        Raw watch-page markup.
    video_id : str
        The requested video ID.
    language : str | None, optional
        The language the page was requested in (default: None).

    Returns
    -------
    VideoRecord
        The typed record. ``title`` may be ``None``; callers decide whether
        that means the video does not exist.
    """
    text = body_text(body)
    logger.debug("Parsing YouTube page %s", video_id)
    soup = BeautifulSoup(text, "html.parser")
    return normalize_fields(extract_fields(soup, video_id, language))
