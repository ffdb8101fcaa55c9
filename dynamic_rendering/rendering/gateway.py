"""Gateway to the headless render capability."""

import asyncio
from collections.abc import Callable
from typing import Any, Optional, Protocol

import structlog

from ..constants import CONSTANTS
from ..core.config import DynamicRenderingConfig, config
from ..core.exceptions import RenderError
from .browser import BrowserConfig, HtmlProcessor
from .models import Viewport

logger = structlog.get_logger(__name__)


class RenderProcessor(Protocol):
    """Anything that can turn a document into rendered HTML."""

    async def convert(
        self, method: str, url_or_html: str, options: dict[str, Any]
    ) -> Optional[str]: ...


def build_render_options(
    viewport: Viewport,
    display_url: str,
    base_options: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    """Merge the base render options with the per-request URL and viewport."""
    options = dict(base_options) if base_options is not None else {}
    options.update({"displayUrl": display_url, "viewport": viewport.as_dict()})
    return options


class RenderGateway:
    """Hands preprocessed HTML to a freshly created render processor."""

    def __init__(
        self,
        processor_factory: Callable[[], RenderProcessor] | None = None,
        browser_config: Optional[BrowserConfig] = None,
        settings: Optional[DynamicRenderingConfig] = None,
    ):
        self.settings = settings or config
        self.browser_config = browser_config or BrowserConfig()
        self.processor_factory = processor_factory or (
            lambda: HtmlProcessor(self.browser_config)
        )

        self.base_options: dict[str, Any] = {
            "waitUntil": self.settings.wait_until,
            **self.settings.extra_render_options,
        }

    async def render(self, content: str, viewport: Viewport, display_url: str) -> Optional[str]:
        """Render ``content`` as if served from ``display_url``.

        Returns:
            Rendered HTML, or None when the render capability produced nothing

        Raises:
            RenderError: If the configured render deadline is exceeded
        """
        options = build_render_options(viewport, display_url, self.base_options)
        processor = self.processor_factory()
        logger.debug("Dispatching render", url=display_url, viewport=options["viewport"])

        call = processor.convert(CONSTANTS.CONVERT_METHOD_CONTENT, content, options)
        if self.settings.render_deadline is None:
            return await call

        try:
            return await asyncio.wait_for(call, timeout=self.settings.render_deadline)
        except asyncio.TimeoutError as e:
            raise RenderError(
                f"Render exceeded deadline of {self.settings.render_deadline}s",
                url=display_url,
                cause=e,
            ) from e
