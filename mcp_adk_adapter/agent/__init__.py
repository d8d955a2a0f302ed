# =============================================================================
# mcp_adk_adapter/agent/__init__.py
# =============================================================================
# The Google ADK side of the adapter.
#
#   mcp_tool.py  -> McpTool, one remote tool as an ADK BaseTool
#   adapter.py   -> McpAdapter, handshake + listing, usable as an ADK toolset
#
# An agent gets remote tools exactly like it gets local ones:
#
#   agent = Agent(name="helper", model=..., instruction=..., tools=[adapter])
# =============================================================================
