"""Classification of requests that should receive a dynamically rendered page."""

import re

from ..constants import CONSTANTS
from ..core.config import DynamicRenderingConfig, config
from .models import DESKTOP_VIEWPORT, MOBILE_VIEWPORT, RequestContext, Viewport


def parse_media_type(content_type: str | None) -> str:
    """Return the bare, lower-cased media type of a Content-Type header value."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def is_html_media_type(
    content_type: str | None, html_media_types: frozenset[str] = config.html_media_types
) -> bool:
    """Check whether a Content-Type header value resolves to HTML."""
    return parse_media_type(content_type) in html_media_types


class RenderDecisionEngine:
    """Decides whether dynamic rendering applies and which viewport to use.

    All methods are pure functions of their arguments.
    """

    def __init__(self, settings: DynamicRenderingConfig | None = None):
        self.settings = settings or config

        self._crawler_pattern = re.compile(self.settings.crawler_user_agent_pattern, re.IGNORECASE)
        self._mobile_pattern = re.compile(self.settings.mobile_user_agent_pattern, re.IGNORECASE)

    def should_render(self, ctx: RequestContext) -> bool:
        """Crawler user agent and a successful HTML response are both required."""
        return self.is_crawler_user_agent(ctx.user_agent) and self.is_html_ok_response(
            ctx.response_status, ctx.response_content_type
        )

    def is_crawler_user_agent(self, user_agent: str | None) -> bool:
        if not user_agent:
            return False
        return self._crawler_pattern.search(user_agent) is not None

    def is_html_ok_response(self, status: int, content_type: str | None) -> bool:
        return status == CONSTANTS.HTTP_STATUS_OK and is_html_media_type(
            content_type, self.settings.html_media_types
        )

    def is_mobile_user_agent(self, user_agent: str | None) -> bool:
        if not user_agent:
            return False
        return self._mobile_pattern.search(user_agent) is not None

    def viewport_for(self, ctx: RequestContext) -> Viewport:
        if self.is_mobile_user_agent(ctx.user_agent):
            return MOBILE_VIEWPORT
        return DESKTOP_VIEWPORT
