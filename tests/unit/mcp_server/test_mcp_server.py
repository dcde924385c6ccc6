"""Unit tests for mcp_server.server module."""

import asyncio
from unittest.mock import Mock, patch

import pytest

from src.mcp_server.server import SERVER_NAME, create_server, run_server
from src.mcp_server.wiki_tool import TOOL_DESCRIPTION, TOOL_NAME, WikiContentTool
from src.ones_client.auth import Credentials


@pytest.fixture
def tool():
    tool = Mock(spec=WikiContentTool)
    tool.get_wiki_content.return_value = "# Rendered page"
    return tool


class TestCreateServer:
    """Test cases for tool registration."""

    def test_server_name(self, tool):
        assert create_server(tool).name == SERVER_NAME

    def test_single_tool_registered(self, tool):
        tools = asyncio.run(create_server(tool).list_tools())

        assert [t.name for t in tools] == [TOOL_NAME]
        assert tools[0].description == TOOL_DESCRIPTION

    def test_wiki_url_parameter(self, tool):
        """The tool takes one required string parameter named wikiUrl."""
        schema = asyncio.run(create_server(tool).list_tools())[0].inputSchema

        assert list(schema["properties"]) == ["wikiUrl"]
        assert schema["properties"]["wikiUrl"]["type"] == "string"
        assert "wiki/#/team/" in schema["properties"]["wikiUrl"]["description"]
        assert schema["required"] == ["wikiUrl"]

    def test_call_delegates_to_facade(self, tool):
        server = create_server(tool)

        result = asyncio.run(server.call_tool(TOOL_NAME, {"wikiUrl": "https://h/x"}))

        tool.get_wiki_content.assert_called_once_with("https://h/x")
        assert "# Rendered page" in str(result)


class TestRunServer:
    """Test cases for the stdio entry point."""

    @patch("src.mcp_server.server.create_server")
    @patch("src.mcp_server.server.WikiContentTool")
    def test_runs_over_stdio(self, mock_tool_cls, mock_create_server):
        credentials = Credentials("h", "e@example.com", "pw")

        run_server(credentials, timeout=9.0)

        mock_tool_cls.from_credentials.assert_called_once_with(credentials, timeout=9.0)
        mock_create_server.assert_called_once_with(mock_tool_cls.from_credentials.return_value)
        mock_create_server.return_value.run.assert_called_once_with(transport="stdio")
