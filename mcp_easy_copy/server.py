from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Sequence

from dotenv import load_dotenv
from fastmcp import FastMCP

from . import __version__
from .common.progress import log, print_error
from .config import Settings, load_settings
from .formatting import format_numbered
from .services import list_services
from .tools.registry import register_tools

SERVER_NAME = "mcp-easy-copy"


def create_server(settings: Settings, startup_services: Sequence[str]) -> FastMCP:
    """
    Build the FastMCP server with the service-list resource and tool.

    ``startup_services`` only feeds the tool description; the handlers
    themselves re-read the config on every call.
    """
    mcp = FastMCP(SERVER_NAME, version=__version__)
    register_tools(mcp, settings, startup_services)
    return mcp


async def serve(settings: Settings) -> None:
    services = await list_services(settings.candidate_paths, verbose=settings.debug)
    log(f"Startup services: {', '.join(services) or '(none)'}", settings.debug)
    mcp = create_server(settings, services)
    print("MCP Easy Copy server running...", file=sys.stderr)
    await mcp.run_async(transport="stdio", show_banner=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=SERVER_NAME,
        description="List the MCP services configured in Claude Desktop over MCP stdio.",
    )
    parser.add_argument(
        "--config",
        help="Path to claude_desktop_config.json, tried before the default locations.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Write debug diagnostics to stderr.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the configured services and exit instead of serving.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    settings = load_settings(config_path=args.config, debug=args.debug)

    if args.list:
        services = asyncio.run(list_services(settings.candidate_paths, verbose=settings.debug))
        print(format_numbered(services))
        return 0

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        return 0
    except Exception as exc:
        print_error(f"Failed to start server: {exc}")
        return 1
    return 0
