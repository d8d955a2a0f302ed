# =============================================================================
# mcp_adk_adapter/core/__init__.py
# =============================================================================
# Framework-agnostic half of the adapter.
#
# RULE:
#   Nothing in this package imports Google ADK, fastmcp or the MCP SDK.
#   Schema rendering, input parsing and result extraction are plain
#   functions over plain dataclasses, so they can be tested without a
#   server, a model or an event loop.
# =============================================================================
