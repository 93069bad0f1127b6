"""
MCP Tool Router - Centralized tool dispatch
"""

import logging
from typing import Dict, Any, Callable, List
from error_utils import ToolNotFoundError
from mcp_tools import get_tool_names, list_tools

logger = logging.getLogger(__name__)

HELLO_WORLD_FALLBACK = "Hello World from MCP Demo!"
GUEST_NAME = "Guest"


def text_content(text: str) -> Dict[str, Any]:
    """Wrap text as a tool call result with a single text item."""
    return {"content": [{"type": "text", "text": text}]}


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


class MCPToolRouter:
    """Routes MCP tool calls to appropriate implementations."""

    def __init__(self):
        self.tools: Dict[str, Callable] = {}
        self._register_tools()

    def _register_tools(self):
        """Register all available MCP tools."""
        implementations = {
            "hello_world": self._hello_world,
            "greet": self._greet,
        }
        self.tools = {name: implementations[name] for name in get_tool_names()}

    def call_tool(self, tool_name: Any, arguments: Any) -> Dict[str, Any]:
        """Route tool call to appropriate implementation.

        Raises:
            ToolNotFoundError: If ``tool_name`` is not a registered tool.
        """
        if not isinstance(tool_name, str) or tool_name not in self.tools:
            logger.warning(f"Unknown tool requested: {tool_name!r}")
            raise ToolNotFoundError(tool_name)

        if not isinstance(arguments, dict):
            arguments = {}

        logger.info(f"Calling tool: {tool_name} with args: {arguments}")
        return self.tools[tool_name](arguments)

    def get_available_tools(self) -> List[Dict[str, Any]]:
        """Get list of available MCP tools."""
        return list_tools()

    # Tool implementations
    def _hello_world(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        """Echo the custom message, or the default greeting."""
        message = arguments.get("message")
        return text_content(_as_text(message) if message else HELLO_WORLD_FALLBACK)

    def _greet(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        # "name" is declared required but a missing name greets the guest.
        name = arguments.get("name")
        name = _as_text(name) if name else GUEST_NAME
        return text_content(f"Hello, {name}! Welcome to MCP Demo!")
