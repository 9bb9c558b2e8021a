"""
Pytest fixtures for watch page scraping tests.

No test in this package makes a live HTTP call; responses are built from the
samples in ``pages``.
"""

from __future__ import annotations

import pytest

from tests.unit.services.watch.pages import FULL_WATCH_PAGE, comment_fragment


@pytest.fixture
def full_watch_page() -> str:
    """A watch page carrying every extractable field."""
    return FULL_WATCH_PAGE


@pytest.fixture
def comment_fragment_factory():
    """Factory fixture building comment fragment JSON bodies."""
    return comment_fragment
