"""MCP tool server for ONES wiki content.

This package provides the WikiContentTool facade and the FastMCP server that
registers it as the getWikiContent tool.
"""

from .server import create_server, run_server
from .wiki_tool import ContentResult, ContentStatus, WikiContentTool

__all__ = [
    'ContentResult',
    'ContentStatus',
    'WikiContentTool',
    'create_server',
    'run_server',
]
