# =============================================================================
# mcp_adk_adapter/__init__.py
# =============================================================================
# Exposes remote MCP tools to Google ADK agents as ordinary ADK tools.
#
# LAYERS (same split as any agent project: logic / protocol / framework):
#   core/   -> plain Python: models, config, errors, schema + result handling
#   tools/  -> the narrow MCP client interface and the fastmcp bridge
#   agent/  -> ADK-facing classes: McpTool (one tool) and McpAdapter (toolset)
#
# Typical use:
#
#   async with FastMCPToolClient.for_transport("server.py") as client:
#       adapter = await McpAdapter.create(client)
#       agent = Agent(name="helper", model=..., tools=[adapter])
# =============================================================================

from mcp_adk_adapter.agent.adapter import McpAdapter
from mcp_adk_adapter.agent.mcp_tool import McpTool
from mcp_adk_adapter.core.config import AdapterConfig
from mcp_adk_adapter.core.errors import (
    ConfigError,
    HandshakeError,
    ListToolsError,
    McpAdapterError,
    SchemaSerializationError,
)
from mcp_adk_adapter.core.models import (
    CLIENT_INFO,
    PROTOCOL_VERSION,
    ClientInfo,
    ContentItem,
    ServerInfo,
    ToolCallResult,
    ToolDescriptor,
)
from mcp_adk_adapter.tools.client import ToolClient
from mcp_adk_adapter.tools.fastmcp_client import FastMCPToolClient

__all__ = [
    "AdapterConfig",
    "CLIENT_INFO",
    "ClientInfo",
    "ConfigError",
    "ContentItem",
    "FastMCPToolClient",
    "HandshakeError",
    "ListToolsError",
    "McpAdapter",
    "McpAdapterError",
    "McpTool",
    "PROTOCOL_VERSION",
    "SchemaSerializationError",
    "ServerInfo",
    "ToolCallResult",
    "ToolClient",
    "ToolDescriptor",
]
