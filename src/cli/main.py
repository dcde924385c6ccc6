"""Main CLI entry point for the ones-wiki command.

This module provides the Typer application with two commands: `serve` runs
the MCP server over stdio, `fetch` renders a single wiki page to the terminal.
Connection settings come from ONES_* environment variables (or a .env file)
and can be overridden with options.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from src.cli.models import ExitCode
from src.cli.output import OutputHandler
from src.mcp_server.server import run_server
from src.mcp_server.wiki_tool import ContentResult, ContentStatus, WikiContentTool
from src.ones_client.auth import Authenticator
from src.ones_client.errors import ConfigurationError

VERSION = "0.1.0"

app = typer.Typer(
    name="ones-wiki",
    help="""ONES Wiki content for AI agents.

QUICK START:
  ones-wiki serve                     # Run the MCP server over stdio
  ones-wiki fetch <wiki_url>          # Print one page as text

Connection settings are read from ONES_HOST, ONES_EMAIL and ONES_PASSWORD
(environment or .env file) unless given as options.""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=True,
)

# Module logger
logger = logging.getLogger(__name__)

HostOption = typer.Option(None, "--host", help="ONES host (overrides ONES_HOST)")
EmailOption = typer.Option(None, "--email", help="Login email (overrides ONES_EMAIL)")
PasswordOption = typer.Option(
    None, "--password", help="Login password (overrides ONES_PASSWORD)"
)
TimeoutOption = typer.Option(
    None, "--timeout", help="HTTP timeout in seconds (overrides ONES_TIMEOUT, default 30)"
)
VerbosityOption = typer.Option(
    0, "--verbosity", "-v", help="Verbosity level: 0=warnings, 1=info, 2=debug"
)
LogdirOption = typer.Option(
    None, "--logdir", help="Directory for log files (creates timestamped log file)"
)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. Logs go to stderr because stdout belongs to the MCP protocol.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:  # verbosity >= 2
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)
    app_logger.handlers.clear()

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"ones-wiki_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _load_settings(
    output: OutputHandler,
    host: Optional[str],
    email: Optional[str],
    password: Optional[str],
    timeout: Optional[float],
) -> tuple:
    """Load credentials and timeout, exiting with CONFIG_ERROR when incomplete."""
    try:
        authenticator = Authenticator()
        credentials = authenticator.get_credentials(host=host, email=email, password=password)
        return credentials, authenticator.get_timeout(timeout)
    except ConfigurationError as e:
        output.error(str(e))
        raise typer.Exit(ExitCode.CONFIG_ERROR)


EXIT_CODES = {
    ContentStatus.RENDERED: ExitCode.SUCCESS,
    ContentStatus.LOGIN_FAILED: ExitCode.AUTH_ERROR,
    ContentStatus.INVALID_URL: ExitCode.GENERAL_ERROR,
    ContentStatus.FETCH_FAILED: ExitCode.NETWORK_ERROR,
    ContentStatus.UNEXPECTED_ERROR: ExitCode.GENERAL_ERROR,
}


def exit_code_for(result: ContentResult) -> ExitCode:
    """Map a tool result to an exit code."""
    return EXIT_CODES[result.status]


@app.command()
def serve(
    host: Optional[str] = HostOption,
    email: Optional[str] = EmailOption,
    password: Optional[str] = PasswordOption,
    timeout: Optional[float] = TimeoutOption,
    verbosity: int = VerbosityOption,
    logdir: Optional[str] = LogdirOption,
) -> None:
    """Run the getWikiContent MCP server over stdio."""
    _configure_logging(verbosity, logdir)
    output = OutputHandler(verbosity=verbosity, no_color=True)

    credentials, request_timeout = _load_settings(output, host, email, password, timeout)
    logger.info(f"Starting ONES Wiki MCP server for {credentials.host}")

    try:
        run_server(credentials, timeout=request_timeout)
    except KeyboardInterrupt:
        logger.info("Server stopped")


@app.command()
def fetch(
    wiki_url: str = typer.Argument(
        ...,
        help="Wiki page URL, e.g. https://example.com/wiki/#/team/<team>/space/<space>/page/<page>",
        metavar="WIKI_URL",
    ),
    host: Optional[str] = HostOption,
    email: Optional[str] = EmailOption,
    password: Optional[str] = PasswordOption,
    timeout: Optional[float] = TimeoutOption,
    verbosity: int = VerbosityOption,
    logdir: Optional[str] = LogdirOption,
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """Fetch one wiki page and print it as AI-friendly text."""
    _configure_logging(verbosity, logdir)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)

    credentials, request_timeout = _load_settings(output, host, email, password, timeout)
    output.debug(f"Host: {credentials.host}, timeout: {request_timeout}s")
    tool = WikiContentTool.from_credentials(credentials, timeout=request_timeout)

    with output.spinner("Fetching wiki page..."):
        result = tool.fetch_wiki_content(wiki_url)

    exit_code = exit_code_for(result)
    if exit_code != ExitCode.SUCCESS:
        output.error(result.text)
        raise typer.Exit(exit_code)

    typer.echo(result.text)
    output.info(f"Fetched {len(result.text)} characters")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ones-wiki version {VERSION}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """ONES Wiki content for AI agents."""


def main() -> None:
    """Main entry point for the CLI application."""
    app()


# Allow running as: python -m src.cli.main
if __name__ == "__main__":
    main()
