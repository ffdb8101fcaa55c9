"""Centralized constants for dynamic rendering.

Values that operators may want to tune are read from the environment;
everything else is part of the rendering contract and stays fixed.
"""

from os import environ

# Crawler detection
CRAWLER_USER_AGENT_PATTERN: str = environ.get(
    "CRAWLER_USER_AGENT_PATTERN",
    r"(googlebot|google-structured-data-testing-tool|bingbot)",
)
MOBILE_USER_AGENT_PATTERN: str = r"mobile"

# Viewports
MOBILE_VIEWPORT_WIDTH: int = 410
MOBILE_VIEWPORT_HEIGHT: int = 730
DESKTOP_VIEWPORT_WIDTH: int = 1400
DESKTOP_VIEWPORT_HEIGHT: int = 950

# Response suitability
HTTP_STATUS_OK: int = 200
HTML_MEDIA_TYPES: frozenset[str] = frozenset(["text/html", "application/xhtml+xml"])
DEFAULT_CHARSET: str = "utf-8"

# Marker script injected into <head> so client code can detect dynamic rendering
DYNAMIC_RENDERING_MARKER: str = (
    '<script type="text/javascript">window.dynamicRendering = true;</script>'
)

# Scripts stripped from the rendered document
JAVASCRIPT_SELECTOR: str = 'script:not([type]), script[type="text/javascript"]'

# Render options
CONVERT_METHOD_CONTENT: str = "content"
CONVERT_METHOD_URL: str = "url"
DEFAULT_WAIT_UNTIL: str = environ.get("RENDER_WAIT_UNTIL", "networkidle2")

# Browser
RENDER_BROWSER_TYPE: str = environ.get("RENDER_BROWSER_TYPE", "chromium")
RENDER_HEADLESS: bool = environ.get("RENDER_HEADLESS", "true").lower() == "true"
RENDER_TIMEOUT: float = float(environ.get("RENDER_TIMEOUT", "30"))
RENDER_DEADLINE: float | None = (
    float(environ["RENDER_DEADLINE"]) if environ.get("RENDER_DEADLINE") else None
)
BROWSER_LAUNCH_ARGS: tuple[str, ...] = (
    "--no-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--disable-extensions",
)

# Logging
DYNAMIC_RENDERING_LOG_LEVEL: str = environ.get("DYNAMIC_RENDERING_LOG_LEVEL", "info")
LOG_LEVELS: frozenset[str] = frozenset(["debug", "info", "warning", "error", "critical"])


class AppConstants:  # pylint: disable=too-few-public-methods
    """Attribute access to the module level constants."""

    def __getattr__(self, name: str):
        """Redirect to module level constants."""
        import sys  # pylint: disable=import-outside-toplevel

        return getattr(sys.modules[__name__], name)


CONSTANTS = AppConstants()
