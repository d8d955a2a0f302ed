# =============================================================================
# agent/mcp_tool.py  -  One remote MCP tool as a Google ADK tool
# =============================================================================
#
# WHAT THIS FILE DOES:
#   McpTool makes a single remote tool look local.  It has the usual tool
#   contract:
#     - name         -> the remote tool's name
#     - description  -> the remote description plus the input schema as text
#     - call(text)   -> parse the text as JSON arguments, run the remote tool,
#                       return its text output
#   and plugs into ADK through BaseTool (run_async + a function declaration).
#
# TEXT IN, TEXT OUT:
#   The model hands over one string of JSON and gets one string back.  Bad
#   JSON, remote errors and timeouts also come back as strings (see
#   core/invocation.py), so the agent loop keeps going and the model can
#   correct itself on the next turn.
#
#   The only thing that escapes call() is cancellation from the caller
#   (asyncio.CancelledError, including an outer asyncio.timeout() firing).
#
# CLIENT LIFETIME:
#   Every McpTool from one adapter holds a reference to the same client but
#   does not own it.  A tool is only usable while that client is connected;
#   nothing checks this at runtime.
# =============================================================================

import asyncio
import json
import logging
from typing import Any, Optional

from google.adk.tools.base_tool import BaseTool
from google.adk.tools.tool_context import ToolContext
from google.genai import types

from mcp_adk_adapter.core.config import DEFAULT_TOOL_TIMEOUT
from mcp_adk_adapter.core.invocation import (
    INVALID_INPUT_MESSAGE,
    describe_failure,
    extract_result_text,
    parse_tool_input,
)
from mcp_adk_adapter.core.models import ToolDescriptor
from mcp_adk_adapter.core.schema import render_description, serialize_input_schema
from mcp_adk_adapter.tools.client import ToolClient

logger = logging.getLogger(__name__)

# Name of the single string parameter declared to ADK.
INPUT_PARAMETER = "input"


class McpTool(BaseTool):
    """A remote MCP tool, callable with a JSON string of arguments.

    Build these with McpAdapter.list_tools() or McpTool.from_descriptor().
    """

    def __init__(
        self,
        *,
        name: str,
        description: str,
        input_schema: bytes,
        client: ToolClient,
        timeout: float = DEFAULT_TOOL_TIMEOUT,
    ):
        super().__init__(name=name, description=render_description(description, input_schema))
        # Name used on the wire.  ADK may rename the tool (tool_name_prefix).
        self.remote_name = name
        self.input_schema = input_schema
        properties = json.loads(input_schema)
        self._remote_parameters = frozenset(properties if isinstance(properties, dict) else ())
        self.timeout = timeout
        self._client = client

    @classmethod
    def from_descriptor(
        cls,
        descriptor: ToolDescriptor,
        client: ToolClient,
        timeout: float = DEFAULT_TOOL_TIMEOUT,
    ) -> "McpTool":
        """Wrap one descriptor from a tools/list reply.

        Raises:
            SchemaSerializationError: The descriptor's schema is not JSON-encodable.
        """
        schema = serialize_input_schema(descriptor.name, descriptor.properties)
        return cls(
            name=descriptor.name,
            description=descriptor.description,
            input_schema=schema,
            client=client,
            timeout=timeout,
        )

    async def call(self, input_text: str) -> str:
        """Run the remote tool with ``input_text`` parsed as a JSON object.

        Returns the tool's text output, or a "call the tool error: ..."
        diagnostic when the input is not a JSON object or the remote call
        fails, times out, or reports an error.
        """
        arguments = parse_tool_input(input_text)
        if arguments is None:
            logger.debug(f"{self.remote_name}: rejected non-JSON input {input_text!r}")
            return INVALID_INPUT_MESSAGE

        deadline = asyncio.timeout(self.timeout)
        try:
            async with deadline:
                result = await self._client.call_tool(self.remote_name, arguments)
        except TimeoutError as exc:
            if not deadline.expired():
                # Raised by the client itself, not by our deadline.
                logger.warning(f"{self.remote_name}: remote call failed: {exc!r}")
                return describe_failure(exc)
            logger.warning(f"{self.remote_name}: no reply within {self.timeout:g}s")
            return describe_failure(f"tool call timed out after {self.timeout:g} seconds")
        except Exception as exc:
            logger.warning(f"{self.remote_name}: remote call failed: {exc!r}")
            return describe_failure(exc)

        return extract_result_text(result)

    # -------------------------------------------------------------------------
    # ADK integration
    # -------------------------------------------------------------------------
    # The model sees one required string parameter, "input".  The expected
    # JSON shape is spelled out in the description, which is what a
    # text-only agent reads anyway.
    # -------------------------------------------------------------------------
    def _get_declaration(self) -> Optional[types.FunctionDeclaration]:
        return types.FunctionDeclaration(
            name=self.name,
            description=self.description,
            parameters=types.Schema(
                type=types.Type.OBJECT,
                properties={
                    INPUT_PARAMETER: types.Schema(
                        type=types.Type.STRING,
                        description="The tool arguments as a JSON object string.",
                    ),
                },
                required=[INPUT_PARAMETER],
            ),
        )

    async def run_async(self, *, args: dict[str, Any], tool_context: ToolContext) -> Any:
        raw = args.get(INPUT_PARAMETER)
        if raw is None or self._is_remote_input(raw):
            input_text = json.dumps(args)
        elif isinstance(raw, str):
            input_text = raw
        else:
            # Some models send the object itself instead of a string.
            input_text = json.dumps(raw)
        return await self.call(input_text)

    def _is_remote_input(self, raw: Any) -> bool:
        """True when "input" is the remote tool's own argument, not our wrapper.

        Only possible when the remote schema declares an "input" property and
        the value is not a JSON object (or the text of one).
        """
        if INPUT_PARAMETER not in self._remote_parameters or isinstance(raw, dict):
            return False
        return not (isinstance(raw, str) and parse_tool_input(raw) is not None)
