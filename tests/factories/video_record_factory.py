"""
Factory definitions for video record models.

Provides factory-boy factories for creating test instances of the scraped
video models with realistic and consistent test data.
"""

from __future__ import annotations

import factory

from youtube_video_info.models.video_record import RawFields, SessionTokens, VideoRecord


class VideoRecordFactory(factory.Factory):
    """Factory for VideoRecord models."""

    class Meta:
        model = VideoRecord

    video_id = factory.LazyFunction(lambda: "dQw4w9WgXcQ")
    url = factory.LazyFunction(lambda: "https://www.youtube.com/watch?v=dQw4w9WgXcQ")
    language = factory.LazyFunction(lambda: "en")
    title = factory.LazyFunction(
        lambda: "Rick Astley - Never Gonna Give You Up (Official Video)"
    )
    description = factory.LazyFunction(
        lambda: "The official video for 'Never Gonna Give You Up'<br/>by Rick Astley"
    )
    owner = factory.LazyFunction(lambda: "RickAstleyVEVO")
    channel_id = factory.LazyFunction(lambda: "UCuAXFkgsw1L7xaCfnd5JJOw")
    thumbnail_url = factory.LazyFunction(
        lambda: "https://i.ytimg.com/vi/dQw4w9WgXcQ/maxresdefault.jpg"
    )
    embed_url = factory.LazyFunction(
        lambda: "https://www.youtube.com/embed/dQw4w9WgXcQ"
    )
    date_published = factory.LazyFunction(lambda: "2009-10-24")
    genre = factory.LazyFunction(lambda: "Music")
    paid = factory.LazyFunction(lambda: False)
    unlisted = factory.LazyFunction(lambda: False)
    is_family_friendly = factory.LazyFunction(lambda: True)
    duration = factory.LazyFunction(lambda: 213)  # 3:33 in seconds
    views = factory.LazyFunction(lambda: 1400000000)
    regions_allowed = factory.LazyFunction(lambda: ["US", "GB", "CA"])
    dislike_count = factory.LazyFunction(lambda: 250000)
    like_count = factory.LazyFunction(lambda: 12000000)
    channel_thumbnail_url = factory.LazyFunction(
        lambda: "https://yt3.ggpht.com/avatar/photo.jpg"
    )
    tags = factory.LazyFunction(lambda: ["rick astley", "never gonna give you up"])
    comment_count = factory.LazyFunction(lambda: 2800000)


class RawFieldsFactory(factory.Factory):
    """Factory for RawFields models."""

    class Meta:
        model = RawFields

    video_id = factory.LazyFunction(lambda: "dQw4w9WgXcQ")
    url = factory.LazyFunction(lambda: "https://www.youtube.com/watch?v=dQw4w9WgXcQ")
    language = factory.LazyFunction(lambda: "en")
    title = factory.LazyFunction(
        lambda: "Rick Astley - Never Gonna Give You Up (Official Video)"
    )
    paid = factory.LazyFunction(lambda: "False")
    unlisted = factory.LazyFunction(lambda: "False")
    is_family_friendly = factory.LazyFunction(lambda: "True")
    duration = factory.LazyFunction(lambda: "PT3M33S")
    views = factory.LazyFunction(lambda: "1400000000")
    regions_allowed = factory.LazyFunction(lambda: "US,GB,CA")
    dislike_count = factory.LazyFunction(lambda: "250,000")
    like_count = factory.LazyFunction(lambda: "12,000,000")
    tags = factory.LazyFunction(lambda: ["rick astley", "never gonna give you up"])


class SessionTokensFactory(factory.Factory):
    """Factory for SessionTokens models."""

    class Meta:
        model = SessionTokens

    session_token = factory.LazyFunction(lambda: "QUFFLUhqbXNlc3Npb24=")
    comment_token = factory.LazyFunction(lambda: "EhYSC2RRdzR3OVdnWGNR")
