# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the two hello-world operations as MCP tools.  Each tool is a thin
#   wrapper around a core/ function: it logs the call, delegates, logs the
#   result and returns plain text.
#
# HOW IT WORKS (the flow):
#   1. The host (a desktop client, an agent, the MCP Inspector) launches this
#      server as a subprocess and talks JSON-RPC over stdin/stdout
#   2. It calls a tool by name (e.g. "say_hello")
#   3. FastMCP validates the arguments against the schema generated from the
#      handler signature, then routes the call to the function below
#   4. The function calls core/ logic and returns a string
#   5. FastMCP wraps the string in a single text content block
#
# REGISTRATION:
#   Tool names and descriptions come from core.models.TOOL_CATALOG.
#   create_server() walks the catalog and registers one handler per entry,
#   optionally prefixing names (see core/settings.py).
#
# RUNNING THIS SERVER:
#   Use the entry point:  python main.py   (or the hello-world-mcp script)
# =============================================================================

import logging
import sys
from collections.abc import Callable
from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from core.clock import current_time
from core.greeting import greet
from core.models import (
    CLOCK_TOOL,
    DEFAULT_LANGUAGE,
    DEFAULT_TIME_FORMAT,
    GREETING_TOOL,
    TOOL_CATALOG,
    Language,
    TimeFormat,
    tool_name,
)
from core.settings import Settings

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because stdout IS the MCP transport.  A single stray
# print() or log line on stdout corrupts the JSON-RPC stream and the host
# drops the connection.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for responses
#     - YELLOW for intermediate status messages
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"


def configure_logging(level: int | str = logging.INFO) -> None:
    """Send all log output to stderr with the [MCP] prefix."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(level)


def _log_request(tool: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool: str, text: str) -> str:
    """Log the tool response in GREEN, then return it."""
    logging.info(f"{_GREEN}  ← {tool} response: {text!r}{_RESET}")
    return text


# =============================================================================
# TOOL: say_hello
# =============================================================================
# The Annotated/Field metadata below becomes the JSON schema the host sees:
#   - `name` has no default, so it is listed under "required"
#   - `language` is a Literal, so it becomes an enum with a default
# Missing or out-of-set arguments are rejected by FastMCP before this
# function runs.
# =============================================================================
def say_hello(
    name: Annotated[str, Field(description=GREETING_TOOL.param("name").description)],
    language: Annotated[
        Language, Field(description=GREETING_TOOL.param("language").description)
    ] = DEFAULT_LANGUAGE,
) -> str:
    """Return a greeting for `name` in the requested language."""
    _log_request(GREETING_TOOL.name, name=name, language=language)
    return _log_response(GREETING_TOOL.name, greet(name, language))


# =============================================================================
# TOOL: get_time
# =============================================================================
def get_time(
    format: Annotated[
        TimeFormat, Field(description=CLOCK_TOOL.param("format").description)
    ] = DEFAULT_TIME_FORMAT,
) -> str:
    """Return the current time as "default", "rfc3339" or "unix" text."""
    _log_request(CLOCK_TOOL.name, format=format)
    return _log_response(CLOCK_TOOL.name, current_time(format))


# Catalog key → handler.  Must cover every TOOL_CATALOG entry.
HANDLERS: dict[str, Callable[..., str]] = {
    GREETING_TOOL.key: say_hello,
    CLOCK_TOOL.key: get_time,
}


# =============================================================================
# Server factory
# =============================================================================
def create_server(settings: Settings | None = None) -> FastMCP:
    """Create a FastMCP server with every catalog tool registered.

    Args:
        settings: Server identity and tool prefix.  Defaults to Settings().

    Returns:
        A ready-to-run FastMCP instance.

    Raises:
        RuntimeError: if a catalog entry has no handler.
    """
    settings = settings or Settings()
    server = FastMCP(settings.server_name, version=settings.server_version)

    for key, descriptor in TOOL_CATALOG.items():
        handler = HANDLERS.get(key)
        if handler is None:
            raise RuntimeError(f"No handler implemented for tool '{key}'")
        published = tool_name(descriptor, settings.tool_prefix)
        server.tool(name=published, description=descriptor.description)(handler)
        _log_status(f"Registered tool {published}")

    return server


def registered_tool_names(settings: Settings | None = None) -> list[str]:
    """Names the server publishes for `settings`, in catalog order."""
    prefix = (settings or Settings()).tool_prefix
    return [tool_name(descriptor, prefix) for descriptor in TOOL_CATALOG.values()]
