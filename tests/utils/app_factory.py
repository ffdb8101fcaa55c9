"""FastAPI application used by the middleware tests."""

from fastapi import FastAPI
from fastapi.responses import HTMLResponse, Response, StreamingResponse

from dynamic_rendering.api.middleware import enable_dynamic_rendering
from dynamic_rendering.rendering.gateway import RenderGateway
from dynamic_rendering.rendering.renderer import DynamicRenderer
from .helpers import ORIGINAL_HTML

NOT_FOUND_HTML = """<html>
  <head><title>404!</title></head>
  <body>404!</body>
</html>
"""

LATIN1_HTML = "<html><head></head><body><p>Café crème</p></body></html>"


def create_app(processor, **hook_arguments) -> FastAPI:
    """Build an application with dynamic rendering enabled on every route."""
    app = FastAPI()

    @app.get("/anonymous")
    async def index(scenario: str):
        if scenario == "ok-json":
            return {"hello": "world"}
        if scenario == "not-ok-html":
            return HTMLResponse(NOT_FOUND_HTML, status_code=404)
        if scenario == "ok-html":
            return HTMLResponse(ORIGINAL_HTML)
        if scenario == "cookies":
            response = HTMLResponse(ORIGINAL_HTML)
            response.set_cookie("first", "1")
            response.set_cookie("second", "2")
            return response
        if scenario == "latin-1":
            return Response(
                LATIN1_HTML.encode("latin-1"), media_type="text/html; charset=iso-8859-1"
            )
        if scenario == "streaming":

            async def chunks():
                half = len(ORIGINAL_HTML) // 2
                yield ORIGINAL_HTML[:half].encode()
                yield ORIGINAL_HTML[half:].encode()

            return StreamingResponse(chunks(), media_type="text/html")
        raise ValueError("Unknown test scenario")

    @app.get("/admin/dashboard")
    async def admin():
        return HTMLResponse(ORIGINAL_HTML)

    renderer = DynamicRenderer(gateway=RenderGateway(processor_factory=lambda: processor))
    enable_dynamic_rendering(app, renderer=renderer, **hook_arguments)
    return app
