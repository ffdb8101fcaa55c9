"""HTML preprocessing before the document is handed to the headless browser."""

import re

import structlog

from ..constants import CONSTANTS

logger = structlog.get_logger(__name__)

HEAD_TAG_PATTERN = re.compile(r"<head(?:\s[^>]*)?>", re.IGNORECASE)


class HtmlPreprocessor:
    """Injects the dynamic rendering marker script into the document head."""

    def __init__(self, marker: str = CONSTANTS.DYNAMIC_RENDERING_MARKER):
        self.marker = marker

    def inject(self, html: str) -> str:
        """Insert the marker right after the first ``<head>`` opening tag.

        Only the first head tag is touched. Documents without a head tag are
        returned unchanged. Calling this twice on the same document inserts
        the marker twice.

        Args:
            html: Original response body

        Returns:
            HTML with the marker script, or the input when there is no head
        """
        match = HEAD_TAG_PATTERN.search(html)
        if match is None:
            logger.debug("No <head> tag found, skipping marker injection")
            return html

        return f"{html[: match.end()]}{self.marker}{html[match.end() :]}"
