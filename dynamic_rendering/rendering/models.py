"""Value types shared by the dynamic rendering pipeline."""

from dataclasses import asdict, dataclass

from ..constants import CONSTANTS


@dataclass(frozen=True)
class Viewport:
    """Virtual screen dimensions used for a headless render."""

    width: int
    height: int

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


MOBILE_VIEWPORT = Viewport(
    width=CONSTANTS.MOBILE_VIEWPORT_WIDTH, height=CONSTANTS.MOBILE_VIEWPORT_HEIGHT
)
DESKTOP_VIEWPORT = Viewport(
    width=CONSTANTS.DESKTOP_VIEWPORT_WIDTH, height=CONSTANTS.DESKTOP_VIEWPORT_HEIGHT
)


@dataclass(frozen=True)
class RequestContext:
    """Snapshot of a request/response pair taken after the host produced a response."""

    user_agent: str
    original_url: str
    raw_response_body: str
    response_status: int
    response_content_type: str
