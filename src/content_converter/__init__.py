"""Content conversion module for wiki content → AI-readable text.

This module provides the WikiContentRenderer, which sniffs raw page content
and renders it with either the block document renderer or the HTML renderer.
"""

from .block_renderer import BlockRenderer, extract_text_from_text_array
from .html_renderer import HtmlRenderer
from .wiki_renderer import WikiContentRenderer

__all__ = [
    'BlockRenderer',
    'HtmlRenderer',
    'WikiContentRenderer',
    'extract_text_from_text_array',
]
