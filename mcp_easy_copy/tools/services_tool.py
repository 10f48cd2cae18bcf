from __future__ import annotations

from typing import Sequence

from fastmcp import FastMCP

from ..config import Settings
from ..formatting import format_description, format_numbered
from ..services import list_services

# Leading underscores sort this tool to the top of the client's tool list.
TOOL_NAME = "_________available_mcp_services_for_easy_copy_________"


def register(mcp: FastMCP, settings: Settings, startup_services: Sequence[str]) -> None:
    @mcp.tool(name=TOOL_NAME, description=format_description(startup_services))
    async def available_mcp_services() -> str:
        current = await list_services(settings.candidate_paths, verbose=settings.debug)
        return format_numbered(current)
