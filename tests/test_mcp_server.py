"""
Protocol-level tests: run the FastMCP server in memory and talk to it
through fastmcp.Client, the same way a host would over stdio.
"""

import logging
import re
import time
from datetime import datetime, timezone

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError
from mcp.shared.exceptions import McpError

from core.models import TOOL_CATALOG
from core.settings import Settings
from tools.mcp_server import create_server, get_time, registered_tool_names, say_hello


async def _call(server, name, arguments):
    async with Client(server) as client:
        return await client.call_tool(name, arguments)


def _only_text(result) -> str:
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    return result.content[0].text


class TestToolListing:
    @pytest.mark.asyncio
    async def test_lists_catalog_tools(self, settings):
        async with Client(create_server(settings)) as client:
            tools = await client.list_tools()
        assert sorted(t.name for t in tools) == ["get_time", "say_hello"]

    @pytest.mark.asyncio
    async def test_say_hello_schema(self, settings):
        async with Client(create_server(settings)) as client:
            tools = {t.name: t for t in await client.list_tools()}
        tool = tools["say_hello"]
        schema = tool.inputSchema
        assert tool.description.startswith("Return a greeting")
        assert schema["required"] == ["name"]
        assert schema["properties"]["name"]["description"] == "Name of the person to greet"
        language = schema["properties"]["language"]
        assert language["enum"] == ["japanese", "english"]
        assert language["default"] == "japanese"

    @pytest.mark.asyncio
    async def test_get_time_schema(self, settings):
        async with Client(create_server(settings)) as client:
            tools = {t.name: t for t in await client.list_tools()}
        schema = tools["get_time"].inputSchema
        assert schema.get("required", []) == []
        assert schema["properties"]["format"]["enum"] == ["default", "rfc3339", "unix"]

    @pytest.mark.asyncio
    async def test_schemas_match_catalog(self, settings):
        async with Client(create_server(settings)) as client:
            tools = {t.name: t for t in await client.list_tools()}
        for descriptor in TOOL_CATALOG.values():
            tool = tools[descriptor.name]
            schema = tool.inputSchema
            assert tool.description == descriptor.description
            assert schema.get("required", []) == descriptor.required_params()
            assert set(schema["properties"]) == {p.name for p in descriptor.params}
            for spec in descriptor.params:
                prop = schema["properties"][spec.name]
                assert prop["description"] == spec.description
                if spec.allowed_values is None:
                    assert "enum" not in prop
                else:
                    assert prop["enum"] == list(spec.allowed_values)
                if spec.default is None:
                    assert "default" not in prop
                else:
                    assert prop["default"] == spec.default

    @pytest.mark.asyncio
    async def test_tool_prefix(self):
        settings = Settings(tool_prefix="go_")
        async with Client(create_server(settings)) as client:
            names = sorted(t.name for t in await client.list_tools())
            result = await client.call_tool("go_say_hello", {"name": "Alice", "language": "english"})
        assert names == ["go_get_time", "go_say_hello"]
        assert names == sorted(registered_tool_names(settings))
        assert _only_text(result) == "Hello, Alice!"

    def test_server_identity(self):
        server = create_server(Settings(server_name="Greeter"))
        assert server.name == "Greeter"


class TestSayHello:
    @pytest.mark.asyncio
    async def test_english(self, settings):
        result = await _call(create_server(settings), "say_hello", {"name": "Alice", "language": "english"})
        assert _only_text(result) == "Hello, Alice!"

    @pytest.mark.asyncio
    async def test_default_language(self, settings):
        result = await _call(create_server(settings), "say_hello", {"name": "太郎"})
        assert _only_text(result) == "こんにちは、太郎さん！"

    @pytest.mark.asyncio
    async def test_missing_name_is_rejected(self, settings, monkeypatch):
        called = []
        monkeypatch.setattr("tools.mcp_server.greet", lambda *a: called.append(a) or "")
        with pytest.raises(ToolError):
            await _call(create_server(settings), "say_hello", {"language": "english"})
        assert called == []

    @pytest.mark.asyncio
    async def test_language_outside_enum_is_rejected(self, settings):
        with pytest.raises(ToolError):
            await _call(create_server(settings), "say_hello", {"name": "Alice", "language": "french"})

    @pytest.mark.asyncio
    async def test_unknown_tool(self, settings):
        with pytest.raises((ToolError, McpError)):
            await _call(create_server(settings), "say_goodbye", {"name": "Alice"})


class TestGetTime:
    @pytest.mark.asyncio
    async def test_unix(self, settings):
        before = time.time()
        text = _only_text(await _call(create_server(settings), "get_time", {"format": "unix"}))
        assert re.fullmatch(r"^[0-9]+$", text)
        assert abs(int(text) - before) <= 2

    @pytest.mark.asyncio
    async def test_rfc3339(self, settings):
        before = datetime.now(timezone.utc)
        text = _only_text(await _call(create_server(settings), "get_time", {"format": "rfc3339"}))
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        assert abs((parsed - before).total_seconds()) <= 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("arguments", [{}, {"format": "default"}])
    async def test_default(self, settings, arguments):
        before = datetime.now()
        text = _only_text(await _call(create_server(settings), "get_time", arguments))
        parsed = datetime.strptime(text, "%Y-%m-%d %H:%M:%S")
        assert abs((parsed - before).total_seconds()) <= 2

    @pytest.mark.asyncio
    async def test_format_outside_enum_is_rejected(self, settings):
        with pytest.raises(ToolError):
            await _call(create_server(settings), "get_time", {"format": "12h"})


class TestHandlerFaults:
    @pytest.mark.asyncio
    async def test_fault_is_an_error_result_and_server_keeps_serving(self, settings, monkeypatch):
        def broken(*args):
            raise RuntimeError("clock unavailable")

        monkeypatch.setattr("tools.mcp_server.current_time", broken)
        async with Client(create_server(settings)) as client:
            failed = await client.call_tool("get_time", {}, raise_on_error=False)
            result = await client.call_tool("say_hello", {"name": "Alice", "language": "english"})
        assert failed.is_error
        assert _only_text(result) == "Hello, Alice!"


class TestHandlersDirectly:
    def test_registration_is_logged_at_info(self, caplog):
        caplog.set_level(logging.INFO)
        create_server(Settings(tool_prefix="go_"))
        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
        assert any("Registered tool go_say_hello" in m for m in messages)
        assert any("Registered tool go_get_time" in m for m in messages)

    def test_logs_to_stderr_only(self, capsys, caplog):
        caplog.set_level(logging.INFO)
        assert say_hello("Alice", "english") == "Hello, Alice!"
        captured = capsys.readouterr()
        assert captured.out == ""
        assert any("say_hello called with" in r.getMessage() for r in caplog.records)
        assert any("Hello, Alice!" in r.getMessage() for r in caplog.records)

    def test_get_time_default_argument(self):
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", get_time())
