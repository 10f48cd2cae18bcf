from mcp_easy_copy.formatting import (
    DEFAULT_TOOL_DESCRIPTION,
    NO_SERVICES_MESSAGE,
    format_bulleted,
    format_description,
    format_numbered,
)

USAGE = (
    "\n\nCopy a service name to use in prompts like:\n"
    "• Can you use [service name] to...\n"
    "• Please call [service name] to..."
)


def test_bulleted_list():
    assert format_bulleted(["github", "filesystem"]) == (
        "📋 AVAILABLE MCP SERVICES:\n- github\n- filesystem" + USAGE
    )


def test_numbered_list():
    assert format_numbered(["github", "filesystem"]) == (
        "📋 AVAILABLE MCP SERVICES:\n1. github\n2. filesystem" + USAGE
    )


def test_empty_lists_share_message():
    assert format_bulleted([]) == NO_SERVICES_MESSAGE
    assert format_numbered(()) == NO_SERVICES_MESSAGE
    assert NO_SERVICES_MESSAGE == "No MCP services configured."


def test_description_joins_with_separator():
    assert format_description(["x", "y"]) == "│ x │ y │"
    assert format_description(["solo"]) == "│ solo │"


def test_description_fallback():
    assert format_description([]) == DEFAULT_TOOL_DESCRIPTION
