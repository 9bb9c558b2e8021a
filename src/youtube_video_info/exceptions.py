"""
Custom exceptions for the youtube-video-info library.

Only the four failure kinds below abort a fetch. Missing fields, missing
tokens and a missing comment section are not errors; they surface as
``None`` values or a zero comment count on the returned record.
"""

from __future__ import annotations


class VideoInfoError(Exception):
    """Base exception for all youtube-video-info errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize VideoInfoError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        """
        self.message = message
        super().__init__(message)


class InvalidArgumentError(VideoInfoError, ValueError):
    """
    Exception raised when a fetch is requested without a usable video ID.

    Raised synchronously by ``fetch_video_info`` before any network
    activity takes place.

    Examples
    --------
    >>> fetch_video_info("")
    Traceback (most recent call last):
        ...
    InvalidArgumentError: No video ID was provided.
    """

    def __init__(self, message: str = "No video ID was provided.") -> None:
        super().__init__(message)


class FetchFailedError(VideoInfoError):
    """
    Exception raised when either network stage fails.

    Covers transport errors (connection failures, timeouts) as well as
    non-2xx responses. No partial record is ever delivered alongside it.

    Attributes
    ----------
    message : str
        Human-readable error message.
    video_id : str
        The video whose fetch failed.
    stage : str
        ``"watch_page"`` or ``"comment_fragment"``.
    status_code : int | None
        Upstream HTTP status, or ``None`` for transport-level failures.
    reason : str | None
        Upstream reason phrase or the transport error description.

    Examples
    --------
    >>> try:
    ...     record = await fetch_video_info("dQw4w9WgXcQ")
    ... except FetchFailedError as e:
    ...     print(f"{e.stage} failed with {e.status_code}: {e.reason}")
    """

    def __init__(
        self,
        message: str,
        video_id: str,
        stage: str,
        status_code: int | None = None,
        reason: str | None = None,
    ) -> None:
        """
        Initialize FetchFailedError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        video_id : str
            The video whose fetch failed.
        stage : str
            Pipeline stage that failed.
        status_code : int | None, optional
            Upstream HTTP status code (default: None).
        reason : str | None, optional
            Upstream reason or transport error text (default: None).
        """
        self.video_id = video_id
        self.stage = stage
        self.status_code = status_code
        self.reason = reason
        super().__init__(message)


class VideoNotFoundError(VideoInfoError):
    """
    Exception raised when the watch page yields no title.

    The watch page was fetched successfully but neither the heading nor the
    metadata fallback carried a title, so the video is treated as
    nonexistent. The comment fragment is never requested in this case.

    Attributes
    ----------
    video_id : str
        The video that could not be found.
    """

    def __init__(self, video_id: str) -> None:
        self.video_id = video_id
        super().__init__(f"Video '{video_id}' does not exist")


class ParseFailedError(VideoInfoError):
    """
    Exception raised when the comment fragment response is not valid JSON.

    Distinct from a well-formed response that simply lacks the discussion
    section, which yields a comment count of zero.

    Attributes
    ----------
    original_error : Exception | None
        The decoding error that triggered this exception.
    """

    def __init__(
        self,
        message: str = "Comment fragment response is not valid JSON",
        original_error: Exception | None = None,
    ) -> None:
        self.original_error = original_error
        super().__init__(message)
