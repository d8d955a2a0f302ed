import asyncio
from typing import Any

import pytest

from mcp_adk_adapter.core.models import (
    ClientInfo,
    ContentItem,
    ServerInfo,
    ToolCallResult,
    ToolDescriptor,
)


FETCH_URL = ToolDescriptor(
    name="fetch_url",
    description="fetch content from a URL",
    input_schema={
        "type": "object",
        "properties": {"url": {"type": "string"}},
        "required": ["url"],
    },
)

ADD = ToolDescriptor(
    name="add",
    description="add two integers",
    input_schema={
        "type": "object",
        "properties": {"b": {"type": "integer"}, "a": {"type": "integer"}},
    },
)


def text_result(text: str) -> ToolCallResult:
    return ToolCallResult(content=[ContentItem(type="text", text=text)])


class FakeToolClient:
    """In-memory ToolClient that records every request it receives."""

    def __init__(
        self,
        tools: list[ToolDescriptor] = None,
        results: dict[str, Any] = None,
        server_info: ServerInfo = None,
    ):
        self.tools = list(tools if tools is not None else [FETCH_URL, ADD])
        # tool name -> ToolCallResult, or an exception to raise
        self.results = dict(results or {})
        self.server_info = server_info or ServerInfo(
            name="fake-server", version="0.1.0", protocol_version="2025-11-25"
        )
        self.initialize_calls: list[tuple[str, ClientInfo]] = []
        self.list_calls = 0
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.call_delay = 0.0

    async def initialize(self, protocol_version: str, client_info: ClientInfo) -> ServerInfo:
        self.initialize_calls.append((protocol_version, client_info))
        return self.server_info

    async def list_tools(self) -> list[ToolDescriptor]:
        self.list_calls += 1
        return list(self.tools)

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> ToolCallResult:
        self.calls.append((name, arguments))
        if self.call_delay:
            await asyncio.sleep(self.call_delay)
        result = self.results.get(name, text_result(f"{name} ok"))
        if isinstance(result, BaseException):
            raise result
        return result


@pytest.fixture
def client():
    return FakeToolClient()
