# =============================================================================
# core/errors.py  -  Setup-time exceptions
# =============================================================================
#
# TWO KINDS OF FAILURE:
#   Setup faults (handshake, listing, a malformed schema, bad config) raise
#   one of the exceptions below.  The caller has to deal with them before an
#   agent can run.
#
#   Invocation faults (bad input JSON, a remote error, a timeout) are NOT
#   represented here.  McpTool.call() turns them into a text result so the
#   agent loop reads them like any other tool output and can retry.
# =============================================================================


class McpAdapterError(Exception):
    """Base class for every error this package raises."""


class HandshakeError(McpAdapterError):
    """The initialize exchange failed or the server speaks an unknown revision."""


class ListToolsError(McpAdapterError):
    """The tools/list request failed."""


class SchemaSerializationError(McpAdapterError):
    """A tool's input schema could not be encoded as JSON."""

    def __init__(self, tool_name: str, reason: str):
        self.tool_name = tool_name
        super().__init__(f"marshal input schema for tool '{tool_name}': {reason}")


class ConfigError(McpAdapterError, ValueError):
    """An AdapterConfig value is missing, unknown or out of range."""
