"""
Scraping patterns for watch pages and comment fragments.

Every selector and regular expression that depends on YouTube's markup lives
here, so format drift upstream is fixed in one place.
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Inline script tokens (matched against the raw page body)
# ---------------------------------------------------------------------------

SESSION_TOKEN_RE = re.compile(r"""XSRF_TOKEN':\s*"(.+?)",""", re.IGNORECASE)
COMMENT_TOKEN_RE = re.compile(r"""COMMENTS_TOKEN':\s*"(.+?)",""", re.IGNORECASE)

# ---------------------------------------------------------------------------
# Value formats
# ---------------------------------------------------------------------------

# ISO-8601-like duration without an hours component: "PT4M13S", "PT45S".
DURATION_RE = re.compile(r"^[a-z]*(?:(\d+)M)?(\d+)S$", re.IGNORECASE)
LEADING_DIGITS_RE = re.compile(r"^\s*(\d+)")
NON_DIGIT_RE = re.compile(r"\D")

# "Comments · 1,234" in the comment section header.
COMMENT_COUNT_RE = re.compile(r"comments?\s*.\s*([\d,]+)", re.IGNORECASE)
COUNT_SEPARATOR_RE = re.compile(r"[\s,]")

# ---------------------------------------------------------------------------
# Watch page selectors
# ---------------------------------------------------------------------------

MAIN_COL = ".watch-main-col"

TITLE_HEADING = "#eow-title"
TITLE_META = f'{MAIN_COL} meta[itemprop="name"]'
DESCRIPTION = f"{MAIN_COL} #eow-description"
OWNER_LINK = ".yt-user-info > a"
CHANNEL_THUMBNAIL_IMG = ".yt-user-photo .yt-thumb-clip img"
LIKE_BUTTON_TEXT = ".like-button-renderer-like-button-unclicked span"
DISLIKE_BUTTON_TEXT = ".like-button-renderer-dislike-button-unclicked span"
TAG_META = 'meta[property="og:video:tag"]'


def itemprop(element: str, name: str) -> str:
    """Selector for an itemprop element inside the main column."""
    return f'{MAIN_COL} {element}[itemprop="{name}"]'


# (RawFields attribute, selector, attribute holding the value)
ITEMPROP_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("url", itemprop("link", "url"), "href"),
    ("channel_id", itemprop("meta", "channelId"), "content"),
    ("thumbnail_url", itemprop("link", "thumbnailUrl"), "href"),
    ("embed_url", itemprop("link", "embedURL"), "href"),
    ("date_published", itemprop("meta", "datePublished"), "content"),
    ("genre", itemprop("meta", "genre"), "content"),
    ("paid", itemprop("meta", "paid"), "content"),
    ("unlisted", itemprop("meta", "unlisted"), "content"),
    ("is_family_friendly", itemprop("meta", "isFamilyFriendly"), "content"),
    ("duration", itemprop("meta", "duration"), "content"),
    ("regions_allowed", itemprop("meta", "regionsAllowed"), "content"),
    ("views", itemprop("meta", "interactionCount"), "content"),
)

# ---------------------------------------------------------------------------
# Comment fragment
# ---------------------------------------------------------------------------

DISCUSSION_KEY = "watch-discussion"
COMMENT_HEADER = ".comment-section-header-renderer"
