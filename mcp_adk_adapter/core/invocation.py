# =============================================================================
# core/invocation.py  -  Input parsing and result text for tool calls
# =============================================================================
#
# THE CONTRACT:
#   Every failure that happens while an agent is USING a tool comes back as
#   text, never as an exception.  A language model that sends broken JSON or
#   hits a flaky server reads the diagnostic like any other tool output and
#   can try again.  Raising here would end the agent loop instead.
#
#   All diagnostics share the "call the tool error: " prefix so a model (or a
#   log reader) can recognise them.
# =============================================================================

import json
from typing import Any, Optional

from mcp_adk_adapter.core.models import ToolCallResult


ERROR_PREFIX = "call the tool error: "

INVALID_INPUT_MESSAGE = (
    ERROR_PREFIX + "input must be valid json, retry tool calling with correct json"
)


def parse_tool_input(input_text: str) -> Optional[dict[str, Any]]:
    """Parse agent input into tool arguments.

    Returns:
        The argument mapping, an empty mapping for JSON ``null``, or None when
        the text is not a JSON object.
    """
    try:
        value = json.loads(input_text)
    except (TypeError, ValueError):
        return None
    if value is None:
        return {}
    if not isinstance(value, dict):
        return None
    return value


def describe_failure(detail: Any) -> str:
    """Diagnostic text for a failed call, embedding ``detail``."""
    if isinstance(detail, BaseException):
        detail = str(detail) or type(detail).__name__
    return f"{ERROR_PREFIX}{detail}"


def extract_result_text(result: ToolCallResult) -> str:
    """Pick the text an agent sees from a tools/call reply.

    A successful reply yields the text of its first content item.  In-band
    tool errors, empty replies and non-text first items become diagnostics.
    """
    if result.is_error:
        texts = [item.text for item in result.content if item.type == "text" and item.text]
        return describe_failure("\n".join(texts) or "the tool reported an error")

    if not result.content:
        return describe_failure("tool returned no content")

    first = result.content[0]
    if first.type != "text" or first.text is None:
        return describe_failure(f'unsupported content type "{first.type}"')
    return first.text
