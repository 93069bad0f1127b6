"""
MCP Tool Definitions
Static catalog of the tools served by the demo server.
"""

import copy
from typing import List, Dict, Any, Tuple

# Order is significant: tools/list returns descriptors in this order.
MCP_TOOLS: Tuple[Dict[str, Any], ...] = (
    {
        "name": "hello_world",
        "description": "Print a Hello World message",
        "inputSchema": {
            "type": "object",
            "properties": {
                "message": {
                    "type": "string",
                    "description": "Optional custom message",
                    "default": "Hello World",
                }
            },
        },
    },
    {
        "name": "greet",
        "description": "Send a greeting message",
        "inputSchema": {
            "type": "object",
            "properties": {
                "name": {
                    "type": "string",
                    "description": "Name of the person to greet",
                }
            },
            "required": ["name"],
        },
    },
)


def list_tools() -> List[Dict[str, Any]]:
    """Return a snapshot of the tool catalog, safe for callers to modify."""
    return copy.deepcopy(list(MCP_TOOLS))


def get_tool_names() -> List[str]:
    """Get all tool names, in catalog order."""
    return [tool["name"] for tool in MCP_TOOLS]
