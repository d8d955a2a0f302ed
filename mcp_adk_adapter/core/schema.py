# =============================================================================
# core/schema.py  -  Input schema marshaling
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a tool's JSON Schema property map into compact, canonical bytes and
#   folds them into the tool description.
#
# WHY PUT THE SCHEMA IN THE DESCRIPTION?
#   A text-only agent never sees a structured schema.  The description is the
#   one channel every model reads, so the expected input shape goes there:
#
#     fetch content from a URL
#      The input schema is: {"url":{"type":"string"}}
#
# CANONICAL FORM:
#   Keys sorted, no whitespace, UTF-8, no NaN/Infinity.  Listing the same
#   catalog twice yields byte-identical schemas.
# =============================================================================

import json
from typing import Any, Optional

from mcp_adk_adapter.core.errors import SchemaSerializationError


SCHEMA_SEPARATOR = "\n The input schema is: "


def serialize_input_schema(tool_name: str, properties: Optional[dict[str, Any]]) -> bytes:
    """Encode a property map as canonical JSON bytes.

    A missing property map encodes as ``null``.

    Raises:
        SchemaSerializationError: The map holds values JSON cannot represent
            (sets, objects, NaN, cycles).
    """
    try:
        text = json.dumps(
            properties,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:
        raise SchemaSerializationError(tool_name, str(exc)) from exc
    return text.encode("utf-8")


def render_description(description: str, input_schema: bytes) -> str:
    """Description text followed by the schema rendered for a model to read."""
    return (description or "") + SCHEMA_SEPARATOR + input_schema.decode("utf-8")
