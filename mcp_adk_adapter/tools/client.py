# =============================================================================
# tools/client.py  -  The client interface the adapter consumes
# =============================================================================
#
# The adapter needs exactly three things from an MCP client:
#   1. initialize  -> handshake, once, before anything else
#   2. list_tools  -> the current tool catalog
#   3. call_tool   -> run one tool with a JSON object of arguments
#
# Anything with these coroutines works: the fastmcp bridge next door, a
# hand-written client over another SDK, or an in-memory fake in tests.
#
# THREAD/CALL SAFETY:
#   One client is shared by the adapter and every tool it produces, and the
#   agent may call several tools concurrently.  The adapter adds no locking;
#   the client has to tolerate concurrent call_tool() requests.
# =============================================================================

from typing import Any, Protocol, runtime_checkable

from mcp_adk_adapter.core.models import ClientInfo, ServerInfo, ToolCallResult, ToolDescriptor


@runtime_checkable
class ToolClient(Protocol):
    """Minimal MCP client surface used by McpAdapter and McpTool."""

    async def initialize(self, protocol_version: str, client_info: ClientInfo) -> ServerInfo:
        """Run the initialize handshake and return the server's identity."""
        ...

    async def list_tools(self) -> list[ToolDescriptor]:
        """Return the server's tool catalog, in server order."""
        ...

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> ToolCallResult:
        """Invoke ``name`` with ``arguments`` and return the raw reply."""
        ...
