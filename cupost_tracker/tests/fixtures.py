# ============================================================================
# PYTEST FIXTURES
# ============================================================================

import pytest

from cupost_tracker.tests.conftest import FixtureConstants, PageBuilder, make_fetcher
from cupost_tracker.utils.timezone import TimezoneHandler


@pytest.fixture
def constants():
    """Provide access to test constants."""
    return FixtureConstants


@pytest.fixture
def page_builder():
    """Provide access to the page builder."""
    return PageBuilder


@pytest.fixture
def full_page_html():
    return PageBuilder.full_page()


@pytest.fixture
def full_page_fetcher(full_page_html):
    """Fetcher stub answering with a complete tracking page."""
    return make_fetcher(full_page_html)


@pytest.fixture
def seoul_timezone():
    return TimezoneHandler("Asia/Seoul")
