import sys
from pathlib import Path

import pytest

# Ensure the repository root (containing core/, tools/, main.py) is importable
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from core.settings import Settings  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every HELLO_MCP_* variable for the duration of a test."""
    for key in (
        "HELLO_MCP_SERVER_NAME",
        "HELLO_MCP_SERVER_VERSION",
        "HELLO_MCP_TOOL_PREFIX",
        "HELLO_MCP_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
