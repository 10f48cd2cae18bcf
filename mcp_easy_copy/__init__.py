"""MCP server that lists the MCP services configured in Claude Desktop."""

__version__ = "1.0.0"
