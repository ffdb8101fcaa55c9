"""Test utilities package."""

from .helpers import (
    BINGBOT_USER_AGENT,
    GOOGLEBOT_MOBILE_USER_AGENT,
    GOOGLEBOT_USER_AGENT,
    JSON_LD_BLOCK,
    MARKER_SCRIPT,
    ORIGINAL_HTML,
    PREPROCESSED_HTML,
    RENDERED_HTML,
    SAFARI_USER_AGENT,
    FakeHtmlProcessor,
)

__all__ = [
    "BINGBOT_USER_AGENT",
    "GOOGLEBOT_MOBILE_USER_AGENT",
    "GOOGLEBOT_USER_AGENT",
    "JSON_LD_BLOCK",
    "MARKER_SCRIPT",
    "ORIGINAL_HTML",
    "PREPROCESSED_HTML",
    "RENDERED_HTML",
    "SAFARI_USER_AGENT",
    "FakeHtmlProcessor",
]
