"""HTML postprocessing of the rendered snapshot."""

import structlog
from bs4 import BeautifulSoup

from ..constants import CONSTANTS

logger = structlog.get_logger(__name__)


class HtmlPostprocessor:
    """Removes executable JavaScript from a rendered document.

    Scripts without a ``type`` attribute and ``text/javascript`` scripts are
    dropped; any other script type (JSON-LD structured data, templates) is
    kept verbatim.
    """

    def __init__(self, selector: str = CONSTANTS.JAVASCRIPT_SELECTOR):
        self.selector = selector

    def clean(self, html: str) -> str:
        # html.parser accepts fragments and broken markup without raising
        soup = BeautifulSoup(html, "html.parser")

        scripts_removed = 0
        for script in soup.select(self.selector):
            script.decompose()
            scripts_removed += 1

        if scripts_removed > 0:
            logger.debug("Removed script tags", count=scripts_removed)

        return str(soup)
