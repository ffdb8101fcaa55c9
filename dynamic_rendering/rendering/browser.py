"""Headless browser process used to render HTML documents."""

from typing import Any, Literal, Optional, cast
from urllib.parse import urldefrag

import structlog
from playwright.async_api import Browser, Page, Playwright, Route, async_playwright
from pydantic import BaseModel, Field, field_validator

from ..constants import CONSTANTS
from ..core.exceptions import RenderError

logger = structlog.get_logger(__name__)

# Puppeteer style idle conditions have a single Playwright equivalent
WAIT_UNTIL_ALIASES = {
    "networkidle0": "networkidle",
    "networkidle2": "networkidle",
}
PLAYWRIGHT_WAIT_CONDITIONS = ("commit", "domcontentloaded", "load", "networkidle")


class BrowserConfig(BaseModel):
    """Configuration for the headless browser process."""

    browser_type: str = Field(
        default=CONSTANTS.RENDER_BROWSER_TYPE,
        description="Browser type (chromium, firefox, webkit)",
    )
    headless: bool = Field(default=CONSTANTS.RENDER_HEADLESS, description="Run browser headless")
    timeout: float = Field(
        default=CONSTANTS.RENDER_TIMEOUT, description="Navigation timeout in seconds"
    )
    launch_args: list[str] = Field(
        default_factory=lambda: list(CONSTANTS.BROWSER_LAUNCH_ARGS),
        description="Extra command line arguments for the browser process",
    )
    ignore_https_errors: bool = Field(default=True, description="Ignore HTTPS certificate errors")

    @field_validator("browser_type")
    @classmethod
    def validate_browser_type(cls, v):
        allowed_types = ["chromium", "firefox", "webkit"]
        if v not in allowed_types:
            raise ValueError(f"Browser type must be one of {allowed_types}")
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v


def playwright_wait_until(wait_until: Optional[str]) -> str:
    """Map a ``waitUntil`` option onto a Playwright load state."""
    if not wait_until:
        return "load"
    condition = WAIT_UNTIL_ALIASES.get(wait_until, wait_until)
    if condition not in PLAYWRIGHT_WAIT_CONDITIONS:
        raise RenderError(f"Unsupported waitUntil condition: {wait_until}")
    return condition


def _same_document(url: str, display_url: str) -> bool:
    return urldefrag(url).url.rstrip("/") == urldefrag(display_url).url.rstrip("/")


class HtmlProcessor:
    """Renders HTML through a browser process that lives for a single call.

    Every ``convert`` call starts Playwright, launches a browser, renders one
    document and tears everything down again, whatever the outcome.
    """

    def __init__(self, config: Optional[BrowserConfig] = None):
        self.config = config or BrowserConfig()

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    async def initialize(self) -> None:
        """Start Playwright and launch the browser process."""
        logger.debug("Spawning browser process", browser_type=self.config.browser_type)

        self._playwright = await async_playwright().start()
        browser_type = getattr(self._playwright, self.config.browser_type)
        self._browser = await browser_type.launch(
            headless=self.config.headless, args=self.config.launch_args
        )

    async def cleanup(self) -> None:
        """Close the browser and stop Playwright."""
        if self._browser:
            try:
                await self._browser.close()
            except Exception as e:  # pylint: disable=broad-exception-caught
                logger.warning("Error closing browser", error=str(e))
            self._browser = None

        if self._playwright:
            try:
                await self._playwright.stop()
            except Exception as e:  # pylint: disable=broad-exception-caught
                logger.warning("Error stopping Playwright", error=str(e))
            self._playwright = None

        logger.debug("Browser process cleaned up")

    async def convert(
        self, method: str, url_or_html: str, options: dict[str, Any]
    ) -> Optional[str]:
        """Render a document and return the resulting HTML.

        Args:
            method: ``"content"`` to render an HTML string, ``"url"`` to
                navigate to a URL
            url_or_html: HTML string or URL depending on ``method``
            options: ``waitUntil``, ``displayUrl`` and ``viewport`` render options

        Returns:
            Rendered HTML, or None when the browser produced nothing

        Raises:
            RenderError: If the method or wait condition is not supported
        """
        if method not in (CONSTANTS.CONVERT_METHOD_CONTENT, CONSTANTS.CONVERT_METHOD_URL):
            raise RenderError(f"Unsupported convert method: {method}")

        wait_until = playwright_wait_until(options.get("waitUntil"))

        try:
            await self.initialize()
            return await self._convert_internal(method, url_or_html, options, wait_until)
        finally:
            await self.cleanup()

    async def _convert_internal(
        self, method: str, url_or_html: str, options: dict[str, Any], wait_until: str
    ) -> Optional[str]:
        if not self._browser:
            raise RuntimeError("Browser not initialized")

        context_options: dict[str, Any] = {"ignore_https_errors": self.config.ignore_https_errors}
        viewport = options.get("viewport")
        if viewport:
            context_options["viewport"] = {
                "width": viewport["width"],
                "height": viewport["height"],
            }

        context = await self._browser.new_context(**context_options)
        context.set_default_timeout(self.config.timeout * 1000)
        page = await context.new_page()

        wait_until_literal = cast(
            "Literal['commit', 'domcontentloaded', 'load', 'networkidle']", wait_until
        )
        timeout_ms = self.config.timeout * 1000

        if method == CONSTANTS.CONVERT_METHOD_URL:
            response = await page.goto(
                url_or_html, wait_until=wait_until_literal, timeout=timeout_ms
            )
            if not response:
                logger.debug("Navigation returned no response", url=url_or_html)
                return None
        elif options.get("displayUrl"):
            if not await self._render_at_display_url(
                page, url_or_html, options["displayUrl"], wait_until_literal, timeout_ms
            ):
                return None
        else:
            await page.set_content(url_or_html, wait_until=wait_until_literal, timeout=timeout_ms)

        html = await page.content()
        return html or None

    async def _render_at_display_url(
        self,
        page: Page,
        html: str,
        display_url: str,
        wait_until: "Literal['commit', 'domcontentloaded', 'load', 'networkidle']",
        timeout_ms: float,
    ) -> bool:
        """Load ``html`` as if it had been served from ``display_url``.

        Only the document request is intercepted, so relative assets and
        XHR calls still reach the real site.
        """

        async def fulfill_document(route: Route) -> None:
            await route.fulfill(
                status=CONSTANTS.HTTP_STATUS_OK,
                content_type=f"text/html; charset={CONSTANTS.DEFAULT_CHARSET}",
                body=html,
            )

        await page.route(lambda url: _same_document(url, display_url), fulfill_document)

        logger.debug("Rendering content at display URL", url=display_url)
        response = await page.goto(display_url, wait_until=wait_until, timeout=timeout_ms)
        if not response:
            logger.debug("Navigation returned no response", url=display_url)
            return False
        return True
