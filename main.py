# =============================================================================
# main.py  —  Entry Point for the Hello World MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#   (or, once installed:  hello-world-mcp)
#
# Normally you don't run this by hand: an MCP host launches it as a
# subprocess and speaks JSON-RPC over stdin/stdout.  For example, in a
# desktop client's config:
#
#   "hello-world": {"command": "uv", "args": ["run", "python", "/path/main.py"]}
#
# WHAT HAPPENS:
#   1. Loads .env (if any) and reads HELLO_MCP_* settings
#   2. Configures logging on stderr
#   3. Logs startup diagnostics (cwd, executable, tools) to help debug a host
#      that can't find or start the server
#   4. Runs the stdio transport until the host closes stdin
#
# EXIT CODES:
#   0  stdin closed (graceful shutdown) or Ctrl+C
#   1  bad configuration or the transport failed; reason logged to stderr
# =============================================================================

import logging
import os
import sys

from dotenv import load_dotenv

from core.settings import ConfigError, load_settings
from tools.mcp_server import configure_logging, create_server, registered_tool_names


def _working_dir() -> str:
    try:
        return os.getcwd()
    except OSError:
        return "unknown"


def _executable_path() -> str:
    return sys.executable or "unknown"


def main() -> int:
    """Run the server on stdio and return the process exit code."""
    load_dotenv()

    try:
        settings = load_settings()
    except ConfigError as e:
        configure_logging()
        logging.error(f"Invalid configuration: {e}")
        return 1

    configure_logging(settings.log_level_value)
    logging.debug(f"Working directory: {_working_dir()}")
    logging.debug(f"Executable path: {_executable_path()}")

    server = create_server(settings)
    logging.info(
        f"{settings.server_name} v{settings.server_version} starting on stdio "
        f"(tools: {', '.join(registered_tool_names(settings))})"
    )

    try:
        server.run(transport="stdio")
    except KeyboardInterrupt:
        logging.info("Interrupted, shutting down")
        return 0
    except Exception as e:
        logging.exception(f"Server run failed: {e}")
        return 1

    logging.info("Input stream closed, server shutting down")
    return 0


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    sys.exit(main())
