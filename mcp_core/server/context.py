"""
Generic MCP Context management.

The context holds everything method handlers need that does not come from the
request: server identity, the default protocol version and the tool router. It
is built once at startup and shared read-only by all concurrent requests.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

DEFAULT_PROTOCOL_VERSION = "2024-11-05"


class ToolRouter(Protocol):
    """What the framework needs from an application's tool router."""

    def get_available_tools(self) -> List[Dict[str, Any]]: ...

    def call_tool(self, tool_name: Any, arguments: Any) -> Dict[str, Any]: ...


@dataclass(frozen=True)
class ServerInfo:
    """Server identity reported by ``initialize`` and the discovery endpoint."""

    name: str
    version: str = "1.0.0"

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "version": self.version}


@dataclass(frozen=True)
class MCPContext:
    """Immutable server context shared by all method handlers."""

    server_info: ServerInfo
    tool_router: Optional[ToolRouter] = None
    protocol_version: str = DEFAULT_PROTOCOL_VERSION
    capabilities: Dict[str, Any] = field(
        default_factory=lambda: {
            "tools": {"listChanged": False},
            "prompts": {},
            "resources": {},
            "roots": {"listChanged": False},
        }
    )

    def list_tools(self) -> List[Dict[str, Any]]:
        if self.tool_router is None:
            return []
        return self.tool_router.get_available_tools()
