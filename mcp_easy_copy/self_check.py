"""Local self-check: build the server and report what it would expose."""

from __future__ import annotations

import asyncio

from dotenv import load_dotenv
from fastmcp import FastMCP

from .common.progress import print_error, print_ok, print_warn
from .config import Settings, load_settings
from .services import LookupStatus, load_services
from .tools.registry import register_tools


async def run_check(settings: Settings) -> int:
    lookup = await load_services(settings.candidate_paths, verbose=settings.debug)
    if lookup.status is LookupStatus.NOT_FOUND:
        print_warn("Claude Desktop configuration file not found in:")
        for path in settings.candidate_paths:
            print_warn(f"  {path}")
    elif lookup.status is LookupStatus.UNREADABLE:
        print_warn(f"Could not read {lookup.path}: {lookup.error}")
    else:
        print_ok(f"{len(lookup.services)} service(s) configured in {lookup.path}")

    try:
        mcp = FastMCP("Self-check MCP")
        register_tools(mcp, settings, lookup.services)
    except Exception as exc:
        print_error(f"Registration failed: {exc}")
        return 1
    print_ok("resource and tool registered.")
    return 0


def main() -> int:
    load_dotenv()
    return asyncio.run(run_check(load_settings()))


if __name__ == "__main__":
    raise SystemExit(main())
