"""
Configuration for MCP core tests.
"""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add project root to path for all tests
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from mcp_core.server.context import MCPContext, ServerInfo

ECHO_TOOL = {
    "name": "echo",
    "description": "Echo the text argument",
    "inputSchema": {
        "type": "object",
        "properties": {"text": {"type": "string", "description": "Text to echo"}},
        "required": ["text"],
    },
}


@pytest.fixture
def mock_router():
    """A tool router with a single echo tool."""
    router = Mock()
    router.get_available_tools.return_value = [ECHO_TOOL]

    def call_tool(name, arguments):
        if name != "echo":
            raise LookupError(f"Unknown tool: {name}")
        return {"content": [{"type": "text", "text": arguments.get("text", "")}]}

    router.call_tool.side_effect = call_tool
    return router


@pytest.fixture
def context(mock_router):
    return MCPContext(
        server_info=ServerInfo(name="test-server", version="9.9.9"),
        tool_router=mock_router,
    )
