from __future__ import annotations

from fastmcp import FastMCP

from ..common.progress import print_error
from ..config import Settings
from ..formatting import format_bulleted
from ..services import LookupStatus, load_services

RESOURCE_URI = "mcp-services://list"
RESOURCE_NAME = "mcp-services-list"

NOT_FOUND_MESSAGE = "Error: Claude Desktop configuration file not found."


def register(mcp: FastMCP, settings: Settings) -> None:
    @mcp.resource(RESOURCE_URI, name=RESOURCE_NAME, mime_type="text/plain")
    async def mcp_services_list() -> str:
        """
        List the MCP services configured in Claude Desktop.

        Read-only; the config file is re-read on every request.
        """
        lookup = await load_services(settings.candidate_paths, verbose=settings.debug)
        if lookup.status is LookupStatus.NOT_FOUND:
            return NOT_FOUND_MESSAGE
        if lookup.status is LookupStatus.UNREADABLE:
            print_error(f"Error reading MCP config {lookup.path}: {lookup.error}")
            return f"Error reading MCP configuration: {lookup.error}"
        return format_bulleted(lookup.services)
