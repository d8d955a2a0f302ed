# =============================================================================
# agent/adapter.py  -  McpAdapter: MCP client -> ADK tools
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Owns the handshake with the MCP server and turns its tool catalog into
#   McpTool objects.
#
#   1. McpAdapter.create(client)  -> initialize handshake (fatal on failure)
#   2. adapter.list_tools()       -> one tools/list request, one McpTool each
#   3. tool.call(text)            -> one tools/call request per invocation
#
# ADK INTEGRATION:
#   McpAdapter is a BaseToolset, so it can go straight into an agent:
#
#     agent = Agent(name="helper", model=LiteLlm(...), tools=[adapter])
#
#   ADK calls get_tools() when it builds a request; tool_filter and
#   tool_name_prefix work as for any other toolset.
#
# NO CACHING:
#   list_tools() asks the server every time.  Tools returned earlier keep the
#   name/description/schema they were built with; call list_tools() again to
#   pick up changes on the server.
# =============================================================================

import asyncio
import logging
from typing import Any, Optional

from google.adk.agents.readonly_context import ReadonlyContext
from google.adk.tools.base_toolset import BaseToolset

from mcp_adk_adapter.agent.mcp_tool import McpTool
from mcp_adk_adapter.core.config import AdapterConfig
from mcp_adk_adapter.core.errors import HandshakeError, ListToolsError
from mcp_adk_adapter.core.models import (
    CLIENT_INFO,
    PROTOCOL_VERSION,
    SUPPORTED_PROTOCOL_VERSIONS,
    ServerInfo,
)
from mcp_adk_adapter.tools.client import ToolClient

logger = logging.getLogger(__name__)


class McpAdapter(BaseToolset):
    """Adapts an initialized MCP client to ADK tools.

    Do not construct directly; ``await McpAdapter.create(client)`` runs the
    handshake first and only returns an adapter when it succeeded.

    The adapter does not own ``client``: the caller opens and closes the
    connection, and must keep it open while the adapter's tools are in use.
    """

    def __init__(
        self,
        client: ToolClient,
        server_info: ServerInfo,
        config: Optional[AdapterConfig] = None,
        **toolset_kwargs: Any,
    ):
        super().__init__(**toolset_kwargs)
        self._client = client
        self.server_info = server_info
        self.config = config or AdapterConfig()

    @classmethod
    async def create(
        cls,
        client: ToolClient,
        config: Optional[AdapterConfig] = None,
        **toolset_kwargs: Any,
    ) -> "McpAdapter":
        """Handshake with the server behind ``client`` and build an adapter.

        Args:
            client: A connected ToolClient.
            config: Timeouts; defaults to AdapterConfig().
            **toolset_kwargs: Passed to ADK's BaseToolset (tool_filter,
                tool_name_prefix).

        Raises:
            HandshakeError: The handshake failed, timed out, or the server
                answered with an unsupported protocol revision.
        """
        config = config or AdapterConfig()

        deadline = asyncio.timeout(config.handshake_timeout)
        try:
            async with deadline:
                server_info = await client.initialize(PROTOCOL_VERSION, CLIENT_INFO)
        except TimeoutError as exc:
            if not deadline.expired():
                raise HandshakeError(f"initialize: {exc}") from exc
            raise HandshakeError(
                f"initialize: no reply within {config.handshake_timeout:g} seconds"
            ) from exc
        except Exception as exc:
            raise HandshakeError(f"initialize: {exc}") from exc

        if server_info.protocol_version not in SUPPORTED_PROTOCOL_VERSIONS:
            raise HandshakeError(
                f"initialize: unsupported protocol version from the server: "
                f"{server_info.protocol_version}"
            )

        logger.debug(
            f"Initialized with server name={server_info.name} "
            f"version={server_info.version}"
        )
        return cls(client, server_info, config, **toolset_kwargs)

    async def list_tools(self) -> list[McpTool]:
        """Fetch the server's tools and wrap each one, preserving server order.

        Raises:
            ListToolsError: The tools/list request failed or timed out.
            SchemaSerializationError: A descriptor's schema is not
                JSON-encodable; no tools are returned.
        """
        timeout = self.config.tool_timeout
        deadline = asyncio.timeout(timeout)
        try:
            async with deadline:
                descriptors = await self._client.list_tools()
        except TimeoutError as exc:
            if not deadline.expired():
                raise ListToolsError(f"list tools: {exc}") from exc
            raise ListToolsError(f"list tools: no reply within {timeout:g} seconds") from exc
        except Exception as exc:
            raise ListToolsError(f"list tools: {exc}") from exc

        tools = []
        for descriptor in descriptors:
            logger.debug(f"tool name={descriptor.name} description={descriptor.description}")
            tools.append(McpTool.from_descriptor(descriptor, self._client, timeout=timeout))
        return tools

    async def get_tools(
        self,
        readonly_context: Optional[ReadonlyContext] = None,
    ) -> list[McpTool]:
        tools = await self.list_tools()
        return [tool for tool in tools if self._is_tool_selected(tool, readonly_context)]
