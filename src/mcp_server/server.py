"""MCP server exposing the getWikiContent tool over stdio.

stdout carries the protocol, so nothing in this process may print to it;
logging is configured to stderr by the CLI.
"""

import logging
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from src.ones_client.auth import DEFAULT_TIMEOUT, Credentials

from .wiki_tool import TOOL_DESCRIPTION, TOOL_NAME, WIKI_URL_DESCRIPTION, WikiContentTool

logger = logging.getLogger(__name__)

SERVER_NAME = "ones-wiki"


def create_server(tool: WikiContentTool) -> FastMCP:
    """Create a FastMCP server with the wiki tool registered.

    Args:
        tool: The facade that serves every call

    Returns:
        A FastMCP instance ready to run
    """
    server = FastMCP(SERVER_NAME)

    @server.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)
    def get_wiki_content(
        wikiUrl: Annotated[str, Field(description=WIKI_URL_DESCRIPTION)],  # noqa: N803
    ) -> str:
        return tool.get_wiki_content(wikiUrl)

    return server


def run_server(credentials: Credentials, timeout: float = DEFAULT_TIMEOUT) -> None:
    """Build the tool and serve it over stdio until the client disconnects."""
    tool = WikiContentTool.from_credentials(credentials, timeout=timeout)
    server = create_server(tool)
    logger.info(f"Serving {TOOL_NAME} for {credentials.host} over stdio")
    server.run(transport="stdio")
