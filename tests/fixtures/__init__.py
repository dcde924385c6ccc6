"""Test fixtures for the ONES wiki tool.

This module provides:
- Block document builders and a sample document covering every block kind
- A sample HTML page for the HTML renderer
"""

from .wiki_documents import (
    SAMPLE_DOCUMENT,
    SAMPLE_HTML_PAGE,
    br_run,
    create_cell,
    create_doc,
    create_list_item,
    create_text,
    runs,
    to_json,
)

__all__ = [
    'SAMPLE_DOCUMENT',
    'SAMPLE_HTML_PAGE',
    'br_run',
    'create_cell',
    'create_doc',
    'create_list_item',
    'create_text',
    'runs',
    'to_json',
]
