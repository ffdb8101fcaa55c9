"""Middleware that serves dynamically rendered pages to crawlers."""

import codecs
from collections.abc import Callable, Iterable
from typing import Optional

import structlog
from starlette.datastructures import MutableHeaders
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from ...constants import CONSTANTS
from ...rendering.models import RequestContext
from ...rendering.renderer import DynamicRenderer

logger = structlog.get_logger(__name__)


def response_charset(content_type: Optional[str]) -> str:
    """Extract the charset parameter of a Content-Type value.

    Unknown or missing charsets fall back to UTF-8.
    """
    if content_type:
        for param in content_type.split(";")[1:]:
            key, _, value = param.partition("=")
            if key.strip().lower() == "charset" and value.strip():
                charset = value.strip().strip('"')
                try:
                    return codecs.lookup(charset).name
                except LookupError:
                    break
    return CONSTANTS.DEFAULT_CHARSET


class DynamicRenderingMiddleware(BaseHTTPMiddleware):  # pylint: disable=too-few-public-methods
    """Replaces HTML responses sent to crawlers with a rendered snapshot.

    Responses that do not qualify are returned untouched and their bodies are
    never buffered.
    """

    def __init__(
        self,
        app: ASGIApp,
        renderer: Optional[DynamicRenderer] = None,
        log_level: Optional[str] = None,
        paths: Optional[Iterable[str]] = None,
        exclude_paths: Optional[Iterable[str]] = None,
        condition: Optional[Callable[[Request], bool]] = None,
    ):
        """Initialize dynamic rendering middleware.

        Args:
            app: ASGI application
            renderer: Rendering pipeline, a Playwright backed one by default
            log_level: Level of the per-render log line, also applied to ``renderer``
            paths: Only handle requests whose path starts with one of these
            exclude_paths: Never handle requests whose path starts with one of these
            condition: Extra predicate deciding whether the hook runs
        """
        super().__init__(app)
        if renderer is None:
            renderer = DynamicRenderer(log_level=log_level)
        elif log_level is not None:
            renderer.set_log_level(log_level)
        self.renderer = renderer
        self.paths = tuple(paths) if paths is not None else None
        self.exclude_paths = tuple(exclude_paths or ())
        self.condition = condition

    def _hook_applies(self, request: Request) -> bool:
        path = request.url.path
        if self.paths is not None and not path.startswith(self.paths):
            return False
        if self.exclude_paths and path.startswith(self.exclude_paths):
            return False
        if self.condition is not None and not self.condition(request):
            return False
        return True

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Run the app and render its response for crawlers.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler

        Returns:
            The original response, or one carrying the rendered body
        """
        response = await call_next(request)

        if not self._hook_applies(request):
            return response

        engine = self.renderer.decision_engine
        user_agent = request.headers.get("User-Agent", "")
        content_type = response.headers.get("Content-Type", "")
        if not (
            engine.is_crawler_user_agent(user_agent)
            and engine.is_html_ok_response(response.status_code, content_type)
        ):
            return response

        chunks = []
        async for chunk in response.body_iterator:
            chunks.append(
                chunk if isinstance(chunk, bytes) else chunk.encode(CONSTANTS.DEFAULT_CHARSET)
            )
        body = b"".join(chunks)

        charset = response_charset(content_type)
        ctx = RequestContext(
            user_agent=user_agent,
            original_url=str(request.url),
            raw_response_body=body.decode(charset, errors="replace"),
            response_status=response.status_code,
            response_content_type=content_type,
        )

        rendered = await self.renderer.render(ctx)
        if rendered is None:
            new_body = body
        else:
            new_body = rendered.encode(charset, errors="replace")
            logger.debug(
                "Replaced response body with rendered snapshot",
                path=request.url.path,
                original_size=len(body),
                rendered_size=len(new_body),
            )

        headers = MutableHeaders(
            raw=[(k, v) for k, v in response.raw_headers if k.lower() != b"content-length"]
        )
        return Response(
            content=new_body,
            status_code=response.status_code,
            headers=headers,
        )


def enable_dynamic_rendering(app, log_level: str = "info", **hook_arguments) -> None:
    """Register dynamic rendering on an application.

    Args:
        app: FastAPI or Starlette application
        log_level: Level of the per-render log line
        **hook_arguments: Forwarded to ``DynamicRenderingMiddleware`` (``paths``,
            ``exclude_paths``, ``condition``, ``renderer``)
    """
    app.add_middleware(DynamicRenderingMiddleware, log_level=log_level, **hook_arguments)
