"""Dynamic rendering pipeline for crawler requests.

Key Components:
    - RenderDecisionEngine: crawler and response classification, viewport choice
    - HtmlPreprocessor: marker script injection into the document head
    - RenderGateway / HtmlProcessor: headless browser rendering via Playwright
    - HtmlPostprocessor: removal of executable scripts from the snapshot
    - DynamicRenderer: the end-to-end pipeline

Example Usage:
    ```python
    from dynamic_rendering.rendering import RequestContext, create_dynamic_renderer

    renderer = create_dynamic_renderer()
    body = await renderer.process(
        RequestContext(
            user_agent="Googlebot/2.1",
            original_url="https://example.com/",
            raw_response_body=html,
            response_status=200,
            response_content_type="text/html; charset=utf-8",
        )
    )
    ```
"""

from dynamic_rendering.rendering.browser import BrowserConfig, HtmlProcessor
from dynamic_rendering.rendering.decision import RenderDecisionEngine, is_html_media_type
from dynamic_rendering.rendering.gateway import RenderGateway, build_render_options
from dynamic_rendering.rendering.models import (
    DESKTOP_VIEWPORT,
    MOBILE_VIEWPORT,
    RequestContext,
    Viewport,
)
from dynamic_rendering.rendering.postprocessor import HtmlPostprocessor
from dynamic_rendering.rendering.preprocessor import HtmlPreprocessor
from dynamic_rendering.rendering.renderer import DynamicRenderer, create_dynamic_renderer

__all__ = [
    # Data model
    "Viewport",
    "MOBILE_VIEWPORT",
    "DESKTOP_VIEWPORT",
    "RequestContext",
    # Decision
    "RenderDecisionEngine",
    "is_html_media_type",
    # HTML processing
    "HtmlPreprocessor",
    "HtmlPostprocessor",
    # Rendering
    "BrowserConfig",
    "HtmlProcessor",
    "RenderGateway",
    "build_render_options",
    "DynamicRenderer",
    "create_dynamic_renderer",
]
