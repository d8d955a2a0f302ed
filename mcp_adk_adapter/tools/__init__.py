# =============================================================================
# mcp_adk_adapter/tools/__init__.py
# =============================================================================
# The MCP side of the adapter.
#
#   client.py          -> ToolClient, the three calls the adapter needs
#   fastmcp_client.py  -> a ToolClient backed by fastmcp.Client
#
# Connecting, transports and session lifetime stay with the MCP library and
# the caller.  This package only translates between MCP wire types and the
# dataclasses in core/models.py.
# =============================================================================
