"""Configuration settings for dynamic rendering."""

from dataclasses import dataclass, field

from ..constants import CONSTANTS
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class DynamicRenderingConfig:
    """Configuration for the dynamic rendering pipeline.

    Defaults come from the centralized constants, several of which can be
    overridden through environment variables.
    """

    # Crawler detection
    crawler_user_agent_pattern: str = CONSTANTS.CRAWLER_USER_AGENT_PATTERN
    mobile_user_agent_pattern: str = CONSTANTS.MOBILE_USER_AGENT_PATTERN

    # Response suitability
    html_media_types: frozenset[str] = CONSTANTS.HTML_MEDIA_TYPES

    # Rendering
    wait_until: str = CONSTANTS.DEFAULT_WAIT_UNTIL
    render_deadline: float | None = CONSTANTS.RENDER_DEADLINE
    extra_render_options: dict[str, object] = field(default_factory=dict)

    # Logging
    log_level: str = CONSTANTS.DYNAMIC_RENDERING_LOG_LEVEL

    def __post_init__(self):
        if self.log_level.lower() not in CONSTANTS.LOG_LEVELS:
            raise ConfigurationError(
                f"log_level must be one of {sorted(CONSTANTS.LOG_LEVELS)}, got {self.log_level!r}"
            )
        if self.render_deadline is not None and self.render_deadline <= 0:
            raise ConfigurationError("render_deadline must be positive")


# Global config instance
config = DynamicRenderingConfig()
