from __future__ import annotations

from typing import Sequence

HEADER = "📋 AVAILABLE MCP SERVICES:"
NO_SERVICES_MESSAGE = "No MCP services configured."
DEFAULT_TOOL_DESCRIPTION = "List all MCP services available in this Claude instance"
USAGE_HINT = (
    "Copy a service name to use in prompts like:\n"
    "• Can you use [service name] to...\n"
    "• Please call [service name] to..."
)
SEPARATOR = " │ "


def _render(lines: Sequence[str]) -> str:
    return HEADER + "\n" + "\n".join(lines) + "\n\n" + USAGE_HINT


def format_bulleted(services: Sequence[str]) -> str:
    """Dash-bulleted listing, used by the resource endpoint."""
    if not services:
        return NO_SERVICES_MESSAGE
    return _render([f"- {name}" for name in services])


def format_numbered(services: Sequence[str]) -> str:
    """Numbered listing, used by the tool endpoint."""
    if not services:
        return NO_SERVICES_MESSAGE
    return _render([f"{index}. {name}" for index, name in enumerate(services, start=1)])


def format_description(services: Sequence[str]) -> str:
    # Tool descriptions render on one line in the client, so no newlines here.
    if not services:
        return DEFAULT_TOOL_DESCRIPTION
    return f"│ {SEPARATOR.join(services)} │"
