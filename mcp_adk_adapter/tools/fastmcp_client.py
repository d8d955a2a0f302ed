# =============================================================================
# tools/fastmcp_client.py  -  ToolClient backed by fastmcp.Client
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Wraps a fastmcp.Client so McpAdapter can drive it, converting MCP wire
#   types (mcp.types.Tool, CallToolResult, TextContent, ...) into the plain
#   dataclasses from core/models.py.
#
# CONNECTION LIFETIME:
#   The caller owns the connection.  Use the bridge as an async context
#   manager (it enters the wrapped fastmcp.Client) and keep it open for as
#   long as the adapter and its tools are in use:
#
#     async with FastMCPToolClient.for_transport("server.py") as client:
#         adapter = await McpAdapter.create(client)
#         tools = await adapter.list_tools()
#
# HANDSHAKE:
#   for_transport() builds the fastmcp client with auto_initialize=False and
#   the legacy initialize handshake, so the handshake runs when the adapter
#   asks for it.  fastmcp fixes the offered protocol revision and client
#   identity when the client is constructed; the adapter checks the revision
#   the server answers with.
# =============================================================================

import logging
from typing import Any

import mcp.types as mcp_types
from fastmcp import Client

from mcp_adk_adapter.core.models import (
    CLIENT_INFO,
    ClientInfo,
    ContentItem,
    ServerInfo,
    ToolCallResult,
    ToolDescriptor,
)

logger = logging.getLogger(__name__)


class FastMCPToolClient:
    """Adapts a ``fastmcp.Client`` to the ToolClient interface."""

    def __init__(self, client: Client):
        self._client = client

    @classmethod
    def for_transport(cls, transport: Any, **client_kwargs: Any) -> "FastMCPToolClient":
        """Create a bridge over a new fastmcp.Client for ``transport``.

        ``transport`` is anything fastmcp accepts: a FastMCP server instance
        (in-memory), a script path, a URL or an MCP config dict.
        """
        client_kwargs.setdefault(
            "client_info",
            mcp_types.Implementation(name=CLIENT_INFO.name, version=CLIENT_INFO.version),
        )
        client_kwargs.setdefault("auto_initialize", False)
        client_kwargs.setdefault("mode", "legacy")
        return cls(Client(transport, **client_kwargs))

    @property
    def client(self) -> Client:
        return self._client

    async def __aenter__(self) -> "FastMCPToolClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self._client.__aexit__(exc_type, exc_val, exc_tb)

    async def initialize(self, protocol_version: str, client_info: ClientInfo) -> ServerInfo:
        logger.debug(
            f"initialize requested as {client_info.name}/{client_info.version} "
            f"(protocol {protocol_version})"
        )
        result = await self._client.initialize()
        return ServerInfo(
            name=result.server_info.name,
            version=result.server_info.version,
            protocol_version=result.protocol_version,
        )

    async def list_tools(self) -> list[ToolDescriptor]:
        tools = await self._client.list_tools()
        return [
            ToolDescriptor(
                name=tool.name,
                description=tool.description or "",
                input_schema=dict(tool.input_schema or {}),
            )
            for tool in tools
        ]

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> ToolCallResult:
        result = await self._client.call_tool_mcp(name, arguments)
        return ToolCallResult(
            content=[_to_content_item(block) for block in result.content],
            is_error=bool(result.is_error),
        )


def _to_content_item(block: Any) -> ContentItem:
    if isinstance(block, mcp_types.TextContent):
        return ContentItem(type="text", text=block.text)
    return ContentItem(type=getattr(block, "type", type(block).__name__))
