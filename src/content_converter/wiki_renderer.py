"""Content sniffing and dispatch between the block and HTML renderers."""

import logging
from typing import Optional

from src.ones_client.errors import ContentParseError

from .block_renderer import BlockRenderer
from .html_renderer import HtmlRenderer

logger = logging.getLogger(__name__)

EMPTY_CONTENT = "Content is empty"


class WikiContentRenderer:
    """Converts raw page content to AI-readable text.

    Content whose first non-whitespace character is '{' is rendered as a
    block document; if that fails the same content goes through the HTML
    renderer. Everything else is rendered as HTML directly. render() never
    raises and never returns an empty string.
    """

    def __init__(
        self,
        block_renderer: Optional[BlockRenderer] = None,
        html_renderer: Optional[HtmlRenderer] = None,
    ):
        self._block_renderer = block_renderer or BlockRenderer()
        self._html_renderer = html_renderer or HtmlRenderer()

    def render(self, raw: Optional[str]) -> str:
        if raw is None or not raw.strip():
            return EMPTY_CONTENT

        if raw.lstrip().startswith("{"):
            try:
                return self._block_renderer.render(raw)
            except ContentParseError as e:
                logger.info(f"Block document rendering failed, falling back to HTML: {e}")
            except Exception as e:
                logger.warning(f"Unexpected block rendering error, falling back to HTML: {e}")

        return self._html_renderer.render(raw)
