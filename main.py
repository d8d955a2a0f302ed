# =============================================================================
# main.py  -  Inspect an MCP server through the adapter
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py path/to/server.py list
#   uv run python main.py path/to/server.py call fetch_url '{"url": "https://example.com"}'
#   uv run python main.py http://localhost:8000/mcp list --timeout 10 -v
#
# WHAT HAPPENS:
#   1. Connects to the server with fastmcp (script path, URL, ...)
#   2. Runs the adapter handshake (McpAdapter.create)
#   3. "list": prints every tool exactly as an agent would see it
#      "call": runs one tool through McpTool.call and prints the text result
#
# This is the same path an ADK agent takes, minus the model, so it is the
# quickest way to see what descriptions and results a model will get.
#
# SETTINGS:
#   MCP_ADAPTER_TOOL_TIMEOUT / MCP_ADAPTER_HANDSHAKE_TIMEOUT are read from the
#   environment or a .env file; --timeout overrides the tool timeout.
# =============================================================================

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv

# Load .env before reading any settings.
load_dotenv()

from mcp_adk_adapter.agent.adapter import McpAdapter
from mcp_adk_adapter.core.config import AdapterConfig
from mcp_adk_adapter.core.errors import McpAdapterError
from mcp_adk_adapter.tools.fastmcp_client import FastMCPToolClient


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="List or call the tools of an MCP server as an ADK agent sees them.",
    )
    parser.add_argument("server", help="MCP server: script path, URL or config file")
    parser.add_argument("--timeout", type=float, help="per-call timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("list", help="print each tool's name and description")
    call = commands.add_parser("call", help="call one tool and print its text result")
    call.add_argument("tool", help="tool name")
    call.add_argument("input", nargs="?", default="{}", help="JSON object of arguments")
    return parser


async def run(args: argparse.Namespace) -> int:
    config = AdapterConfig.from_env(dotenv=False)
    if args.timeout is not None:
        config = config.with_tool_timeout(args.timeout)

    async with FastMCPToolClient.for_transport(args.server) as client:
        adapter = await McpAdapter.create(client, config)
        info = adapter.server_info
        logging.info(f"Connected to {info.name} {info.version} (protocol {info.protocol_version})")

        tools = await adapter.list_tools()

        if args.command == "list":
            for tool in tools:
                print("-" * 70)
                print(tool.name)
                print(tool.description)
            print("-" * 70)
            print(f"{len(tools)} tool(s)")
            return 0

        by_name = {tool.name: tool for tool in tools}
        tool = by_name.get(args.tool)
        if tool is None:
            print(f"unknown tool '{args.tool}'. Available: {sorted(by_name)}", file=sys.stderr)
            return 2
        print(await tool.call(args.input))
        return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # Logs go to STDERR so tool output on STDOUT stays clean.
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    try:
        return asyncio.run(run(args))
    except McpAdapterError as exc:
        logging.error(f"{exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
