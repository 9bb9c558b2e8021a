"""
Raw response bodies of the two fetch stages.

Each stage knows which shape it received, so the body is wrapped in the
matching variant instead of being sniffed by content. Extractors accept only
their own variant.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class WatchPageBody(BaseModel):
    """Full HTML markup of a watch page."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["watch_page"] = "watch_page"
    text: str


class CommentFragmentBody(BaseModel):
    """JSON document wrapping the rendered comment section markup."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["comment_fragment"] = "comment_fragment"
    text: str


RawBody = Annotated[
    Union[WatchPageBody, CommentFragmentBody],
    Field(discriminator="kind"),
]
"""Discriminated union of the two body shapes, keyed on ``kind``."""


def body_text(body: RawBody | str) -> str:
    """Raw text of a stage body; plain strings pass through."""
    return body if isinstance(body, str) else body.text
