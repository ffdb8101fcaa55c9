"""Shared fixtures and test configuration for pytest."""

import pytest
import structlog

from dynamic_rendering.rendering.models import RequestContext
from tests.utils import (
    GOOGLEBOT_USER_AGENT,
    ORIGINAL_HTML,
    PREPROCESSED_HTML,
    RENDERED_HTML,
    FakeHtmlProcessor,
)

# Configure structlog before modules cache loggers with default configuration
structlog.reset_defaults()
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.StackInfoRenderer(),
        structlog.dev.ConsoleRenderer(exception_formatter=structlog.dev.plain_traceback),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
    context_class=dict,
    cache_logger_on_first_use=False,  # Don't cache during tests to allow reconfiguration
)


@pytest.fixture
def original_html():
    """Page as produced by the application."""
    return ORIGINAL_HTML


@pytest.fixture
def preprocessed_html():
    """Page after marker injection."""
    return PREPROCESSED_HTML


@pytest.fixture
def rendered_html():
    """Page after the browser executed its scripts."""
    return RENDERED_HTML


@pytest.fixture
def fake_processor():
    """Render processor returning the rendered sample page."""
    return FakeHtmlProcessor()


@pytest.fixture
def crawler_context():
    """Googlebot requesting an ok HTML page."""
    return RequestContext(
        user_agent=GOOGLEBOT_USER_AGENT,
        original_url="http://test.host/anonymous?scenario=ok-html",
        raw_response_body=ORIGINAL_HTML,
        response_status=200,
        response_content_type="text/html; charset=utf-8",
    )
