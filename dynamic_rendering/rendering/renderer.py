"""End-to-end dynamic rendering of a crawler response."""

from typing import Optional

import structlog

from ..constants import CONSTANTS
from ..core.config import DynamicRenderingConfig, config
from ..core.exceptions import ConfigurationError
from .browser import BrowserConfig
from .decision import RenderDecisionEngine
from .gateway import RenderGateway
from .models import RequestContext
from .postprocessor import HtmlPostprocessor
from .preprocessor import HtmlPreprocessor

logger = structlog.get_logger(__name__)


class DynamicRenderer:
    """Composes decision, preprocessing, rendering and postprocessing.

    Render capability failures are not caught here. They propagate to the
    host so that broken rendering infrastructure is visible, while requests
    that simply do not qualify pass through silently.
    """

    def __init__(
        self,
        decision_engine: Optional[RenderDecisionEngine] = None,
        preprocessor: Optional[HtmlPreprocessor] = None,
        gateway: Optional[RenderGateway] = None,
        postprocessor: Optional[HtmlPostprocessor] = None,
        log_level: Optional[str] = None,
        settings: Optional[DynamicRenderingConfig] = None,
    ):
        self.settings = settings or config
        self.decision_engine = decision_engine or RenderDecisionEngine(self.settings)
        self.preprocessor = preprocessor or HtmlPreprocessor()
        self.gateway = gateway or RenderGateway(settings=self.settings)
        self.postprocessor = postprocessor or HtmlPostprocessor()

        self.set_log_level(log_level or self.settings.log_level)

    def set_log_level(self, log_level: str) -> None:
        """Change the level of the per-render log line."""
        level = log_level.lower()
        if level not in CONSTANTS.LOG_LEVELS:
            raise ConfigurationError(f"Unsupported log level: {log_level}")
        self.log_level = level

    async def render(self, ctx: RequestContext) -> Optional[str]:
        """Render the response body for a crawler.

        Returns:
            The cleaned, rendered body, or None when the original body
            should be kept (not a crawler, not an ok HTML response, or the
            render capability produced nothing)
        """
        if not self.decision_engine.should_render(ctx):
            return None

        viewport = self.decision_engine.viewport_for(ctx)

        getattr(logger, self.log_level)(
            "Dynamic rendering",
            url=ctx.original_url,
            user_agent=ctx.user_agent,
            viewport=viewport.as_dict(),
        )

        content = self.preprocessor.inject(ctx.raw_response_body)
        rendered = await self.gateway.render(content, viewport, ctx.original_url)
        if rendered is None:
            logger.debug("Render produced no output, keeping original body", url=ctx.original_url)
            return None

        return self.postprocessor.clean(rendered)

    async def process(self, ctx: RequestContext) -> str:
        """Return the body that should be sent for this request."""
        rendered = await self.render(ctx)
        if rendered is None:
            return ctx.raw_response_body
        return rendered


def create_dynamic_renderer(
    browser_type: str = CONSTANTS.RENDER_BROWSER_TYPE,
    headless: bool = CONSTANTS.RENDER_HEADLESS,
    timeout: float = CONSTANTS.RENDER_TIMEOUT,
    log_level: Optional[str] = None,
    **kwargs,
) -> DynamicRenderer:
    """Create a dynamic renderer backed by a Playwright browser.

    Extra keyword arguments matching ``DynamicRenderingConfig`` fields
    (``wait_until``, ``render_deadline``, ...) override the defaults.
    """
    browser_config = BrowserConfig(browser_type=browser_type, headless=headless, timeout=timeout)
    settings = DynamicRenderingConfig(
        **{k: v for k, v in kwargs.items() if k in DynamicRenderingConfig.__dataclass_fields__}
    )

    return DynamicRenderer(
        gateway=RenderGateway(browser_config=browser_config, settings=settings),
        log_level=log_level,
        settings=settings,
    )
