# =============================================================================
# core/models.py  -  Data Models (what crosses the client boundary)
# =============================================================================
#
# These dataclasses are the adapter's own view of MCP traffic.  The client
# bridge (tools/fastmcp_client.py) converts SDK wire types into these, so the
# rest of the package never depends on a particular MCP SDK release.
#
# LIFETIME:
#   Everything here is received once and never mutated.  A ToolDescriptor is
#   a snapshot of the remote catalog at listing time; if the server changes
#   its tools later, the caller has to list again.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional


# Protocol revision offered during the initialize handshake.
PROTOCOL_VERSION = "2025-11-25"

# Revisions a server may answer with.  Anything else fails the handshake.
SUPPORTED_PROTOCOL_VERSIONS = (
    "2024-11-05",
    "2025-03-26",
    "2025-06-18",
    "2025-11-25",
)


@dataclass(frozen=True)
class ClientInfo:
    """Identity this adapter declares to the server."""

    name: str
    version: str


CLIENT_INFO = ClientInfo(name="mcp-adk-adapter", version="1.0.1")


@dataclass(frozen=True)
class ServerInfo:
    """What the server reported about itself in the handshake reply."""

    name: str
    version: str
    protocol_version: str


# -----------------------------------------------------------------------------
# ToolDescriptor - one entry of a tools/list reply
# -----------------------------------------------------------------------------
# input_schema holds the full JSON Schema object ({"type": "object",
# "properties": {...}, "required": [...]}).  Only the "properties" mapping is
# rendered into the tool description; see core/schema.py.  The mapping is
# left out of the hash, so descriptors still work as dict keys and set members.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolDescriptor:
    """A remote tool as advertised by the server."""

    name: str                          # Unique within one listing
    description: str = ""              # Free text, may be empty
    input_schema: dict[str, Any] = field(default_factory=dict, hash=False)

    @property
    def properties(self) -> Optional[dict[str, Any]]:
        """The schema's property map, or None when the server sent none."""
        return self.input_schema.get("properties")


@dataclass(frozen=True)
class ContentItem:
    """One block of a tool result.  Only text blocks carry ``text``."""

    type: str                          # "text", "image", "audio", "resource", ...
    text: Optional[str] = None


@dataclass(frozen=True)
class ToolCallResult:
    """The server's reply to tools/call."""

    content: list[ContentItem] = field(default_factory=list, hash=False)
    is_error: bool = False             # Tool-level failure reported in-band
