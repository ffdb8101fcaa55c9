"""Custom exceptions for dynamic rendering."""


class DynamicRenderingError(Exception):
    """Base exception for dynamic rendering errors."""

    def __init__(self, message: str, url: str | None = None, cause: Exception | None = None):
        super().__init__(message)
        self.url = url
        self.cause = cause

    def __str__(self) -> str:
        msg = super().__str__()
        if self.url:
            msg = f"{msg} (URL: {self.url})"
        if self.cause:
            msg = f"{msg} (Caused by: {self.cause})"
        return msg


class RenderError(DynamicRenderingError):
    """Exception raised when the headless render capability fails."""

    pass


class ConfigurationError(DynamicRenderingError):
    """Exception raised for configuration-related errors."""

    pass
