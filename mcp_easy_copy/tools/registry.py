from __future__ import annotations

from typing import Sequence

from fastmcp import FastMCP

from ..config import Settings
from . import services_resource, services_tool


def register_tools(mcp: FastMCP, settings: Settings, startup_services: Sequence[str]) -> None:
    """Register the service-list resource and tool with the server."""
    services_resource.register(mcp, settings)
    services_tool.register(mcp, settings, startup_services)
