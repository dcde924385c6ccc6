"""Command-line interface for the ONES wiki MCP server.

This package provides the `ones-wiki` CLI tool, which runs the MCP server
over stdio or renders a single page to the terminal.
"""

from .models import ExitCode

__all__ = ['ExitCode']
