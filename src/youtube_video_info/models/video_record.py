"""
Pydantic models for scraped video metadata.

Models
------
VideoRecord
    The immutable, typed result of a fetch.
RawFields
    Un-normalized strings pulled from the watch page markup.
SessionTokens
    Identifiers bridging the watch-page stage and the comment stage.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class VideoRecord(BaseModel):
    """
    Metadata recovered for a single video.

    Every field except ``video_id``, ``is_family_friendly``, ``tags`` and
    ``comment_count`` may be ``None``, meaning the page did not carry it.
    ``None`` is never conflated with an empty value.

    Serializes with the camelCase keys of the watch page's itemprops
    (``videoId``, ``thumbnailUrl``, ``embedURL``...) through ``to_dict()``.

    Attributes
    ----------
    video_id : str
        The requested video ID.
    url : str | None
        Canonical watch URL advertised by the page.
    language : str | None
        Document language, or the requested language when the page omits it.
    title : str | None
        Video title. A record without a title is not a valid video.
    description : str | None
        Inner markup of the description block (not plain text), re-serialized
        from the parsed page with character references decoded.
    owner : str | None
        Display name of the uploading channel.
    channel_id : str | None
        Channel ID of the uploader.
    thumbnail_url : str | None
        Video thumbnail URL.
    embed_url : str | None
        Embeddable player URL.
    date_published : str | None
        Publication date exactly as advertised (e.g. ``2009-10-24``).
    genre : str | None
        Category display name.
    paid : bool | None
        Whether the video is paid content.
    unlisted : bool | None
        Whether the video is unlisted.
    is_family_friendly : bool
        Family-friendly flag; ``False`` when unknown.
    duration : int | None
        Duration in whole seconds.
    views : int | None
        View count.
    regions_allowed : list[str] | None
        Region codes the video is viewable in.
    dislike_count : int | None
        Dislike count.
    like_count : int | None
        Like count.
    channel_thumbnail_url : str | None
        Avatar URL of the uploading channel.
    tags : list[str]
        Video tags in page order.
    comment_count : int
        Aggregate comment count; 0 when the comment section is unavailable.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    video_id: str
    url: str | None = None
    language: str | None = None
    title: str | None = None
    description: str | None = None
    owner: str | None = None
    channel_id: str | None = None
    thumbnail_url: str | None = None
    embed_url: str | None = Field(default=None, alias="embedURL")
    date_published: str | None = None
    genre: str | None = None
    paid: bool | None = None
    unlisted: bool | None = None
    is_family_friendly: bool = False
    duration: int | None = None
    views: int | None = None
    regions_allowed: list[str] | None = None
    dislike_count: int | None = None
    like_count: int | None = None
    channel_thumbnail_url: str | None = None
    tags: list[str] = Field(default_factory=list)
    comment_count: int = 0

    @field_validator("video_id")
    @classmethod
    def validate_video_id(cls, v: str) -> str:
        """
        Validate that the video ID is not blank.

        Parameters
        ----------
        v : str
            The video ID to validate.

        Returns
        -------
        str
            The validated video ID.

        Raises
        ------
        ValueError
            If the video ID is empty or whitespace-only.
        """
        if not v.strip():
            raise ValueError("video_id cannot be empty or whitespace-only")
        return v

    @field_validator(
        "duration", "views", "dislike_count", "like_count", "comment_count"
    )
    @classmethod
    def validate_non_negative(cls, v: int | None) -> int | None:
        """Validate that counts and durations are non-negative if provided."""
        if v is not None and v < 0:
            raise ValueError(f"value must be >= 0, got {v}")
        return v

    @property
    def has_title(self) -> bool:
        """Whether the record passed the title gate."""
        return self.title is not None

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize the record with camelCase keys.

        Returns
        -------
        dict[str, Any]
            All fields keyed by alias; absent fields are present as ``None``.
        """
        return self.model_dump(by_alias=True)


class RawFields(BaseModel):
    """
    Raw strings extracted from the watch page, prior to normalization.

    The field extractor never parses numbers or flags; it only reports what
    the markup says. ``None`` means the location was missing or empty.
    """

    model_config = ConfigDict(frozen=True)

    video_id: str
    url: str | None = None
    language: str | None = None
    title: str | None = None
    description: str | None = None
    owner: str | None = None
    channel_id: str | None = None
    thumbnail_url: str | None = None
    embed_url: str | None = None
    date_published: str | None = None
    genre: str | None = None
    paid: str | None = None
    unlisted: str | None = None
    is_family_friendly: str | None = None
    duration: str | None = None
    views: str | None = None
    regions_allowed: str | None = None
    dislike_count: str | None = None
    like_count: str | None = None
    channel_thumbnail_url: str | None = None
    tags: list[str] = Field(default_factory=list)


class SessionTokens(BaseModel):
    """
    Short-lived identifiers embedded in the watch page's inline scripts.

    Attributes
    ----------
    session_token : str | None
        XSRF token sent in the comment fragment form body.
    comment_token : str | None
        Continuation token selecting the comment section.
    """

    model_config = ConfigDict(frozen=True)

    session_token: str | None = None
    comment_token: str | None = None
