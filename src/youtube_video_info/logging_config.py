"""
Logging setup for applications embedding youtube-video-info.

The library itself only emits records through module loggers under the
``youtube_video_info`` namespace; nothing is configured on import.
"""

from __future__ import annotations

import logging

from youtube_video_info.config.settings import get_settings

LOGGER_NAME = "youtube_video_info"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    level: str | int | None = None,
    handler: logging.Handler | None = None,
) -> logging.Logger:
    """
    Attach a formatted handler to the library logger.

    Calling this more than once replaces the handler installed by the
    previous call instead of stacking duplicates.

    Parameters
    ----------
    level : str | int | None, optional
        Log level name or number. Defaults to ``Settings.log_level``.
    handler : logging.Handler | None, optional
        Handler to install (default: a ``StreamHandler`` on stderr).

    Returns
    -------
    logging.Logger
        The configured ``youtube_video_info`` logger.
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    library_logger = logging.getLogger(LOGGER_NAME)

    for existing in list(library_logger.handlers):
        if getattr(existing, "_youtube_video_info_handler", False):
            library_logger.removeHandler(existing)

    if handler is None:
        handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    handler._youtube_video_info_handler = True  # type: ignore[attr-defined]

    library_logger.addHandler(handler)
    library_logger.setLevel(level)
    return library_logger
