# =============================================================================
# core/settings.py  —  Runtime Configuration
# =============================================================================
#
# All settings are optional and come from environment variables.  main.py
# calls load_dotenv() first, so a local .env file works too.
#
#   HELLO_MCP_SERVER_NAME     Server identity reported to the host
#   HELLO_MCP_SERVER_VERSION  Server version
#   HELLO_MCP_TOOL_PREFIX     Prepended to every tool name ("go_" → go_say_hello)
#   HELLO_MCP_LOG_LEVEL       DEBUG / INFO / WARNING / ERROR / CRITICAL
#
# WHY A TOOL PREFIX?
#   A host (e.g. a desktop client) may launch several hello-world servers
#   side by side.  Tool names must be unique across all of them, so each
#   server can be given its own prefix.
# =============================================================================

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass


DEFAULT_SERVER_NAME = "Hello World Server"
DEFAULT_SERVER_VERSION = "1.0.0"
DEFAULT_LOG_LEVEL = "INFO"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""


@dataclass(frozen=True)
class Settings:
    server_name: str = DEFAULT_SERVER_NAME
    server_version: str = DEFAULT_SERVER_VERSION
    tool_prefix: str = ""
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from `environ` (defaults to os.environ).

    Raises:
        ConfigError: if HELLO_MCP_LOG_LEVEL is not a known level name.
    """
    env = os.environ if environ is None else environ

    log_level = (env.get("HELLO_MCP_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigError(
            f"HELLO_MCP_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}; "
            f"got '{log_level}'"
        )

    return Settings(
        server_name=env.get("HELLO_MCP_SERVER_NAME") or DEFAULT_SERVER_NAME,
        server_version=env.get("HELLO_MCP_SERVER_VERSION") or DEFAULT_SERVER_VERSION,
        tool_prefix=(env.get("HELLO_MCP_TOOL_PREFIX") or "").strip(),
        log_level=log_level,
    )
