"""
Value normalizers for raw watch-page strings.

Each function is pure and total: unparseable input becomes ``None`` rather
than an exception. Already-normalized values pass through unchanged, so
applying a normalizer to its own output is a no-op.
"""

from __future__ import annotations

from youtube_video_info.services.watch.patterns import (
    DURATION_RE,
    LEADING_DIGITS_RE,
    NON_DIGIT_RE,
)


def parse_flag(raw: str | bool | None) -> bool | None:
    """
    Convert a ``"True"``/``"False"`` itemprop into a three-valued flag.

    Parameters
    ----------
    raw : str | bool | None
        Raw itemprop content.

    Returns
    -------
    bool | None
        ``True`` for ``"True"``, ``False`` for any other string, ``None``
        when the value is unknown.
    """
    if raw is None or isinstance(raw, bool):
        return raw
    return raw == "True"


def parse_family_friendly(raw: str | bool | None) -> bool:
    """Convert the family-friendly itemprop; unknown resolves to ``False``."""
    if isinstance(raw, bool):
        return raw
    return raw == "True"


def parse_duration(raw: str | int | None) -> int | None:
    """
    Parse a duration token such as ``PT4M13S`` into whole seconds.

    Hours are not part of the recognized format; ``PT1H2M3S`` yields
    ``None``.

    Parameters
    ----------
    raw : str | int | None
        Raw duration token.

    Returns
    -------
    int | None
        ``minutes * 60 + seconds``, or ``None`` if the token does not match.

    Examples
    --------
    >>> parse_duration("PT4M13S")
    253
    >>> parse_duration("PT45S")
    45
    """
    if raw is None or isinstance(raw, int):
        return raw
    match = DURATION_RE.match(raw)
    if not match:
        return None
    minutes = int(match.group(1)) if match.group(1) else 0
    seconds = int(match.group(2))
    return minutes * 60 + seconds


def parse_regions(raw: str | list[str] | None) -> list[str] | None:
    """Split a comma-separated region list; missing or empty gives ``None``."""
    if raw is None or isinstance(raw, list):
        return raw
    if not raw:
        return None
    return raw.split(",")


def parse_view_count(raw: str | int | None) -> int | None:
    """Parse the leading digits of a view count; non-numeric gives ``None``."""
    if raw is None or isinstance(raw, int):
        return raw
    match = LEADING_DIGITS_RE.match(raw)
    if not match:
        return None
    return int(match.group(1))


def parse_votes(raw: str | int | None) -> int | None:
    """
    Parse a locale-formatted vote count.

    Every non-digit character is dropped first, so ``"1,234"``, ``"1.234"``
    and ``"12 345"`` all parse.

    Parameters
    ----------
    raw : str | int | None
        Raw button text.

    Returns
    -------
    int | None
        The count, or ``None`` when no digits remain.
    """
    if raw is None or isinstance(raw, int):
        return raw
    digits = NON_DIGIT_RE.sub("", raw)
    if not digits:
        return None
    return int(digits)
