"""API middleware modules for response post-processing."""

from .dynamic_rendering import DynamicRenderingMiddleware, enable_dynamic_rendering

__all__ = [
    "DynamicRenderingMiddleware",
    "enable_dynamic_rendering",
]
