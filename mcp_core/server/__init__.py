"""MCP Core Server components."""

from .unified_server import UnifiedMCPServer
from .context import MCPContext, ServerInfo
from .dispatcher import JSONRPCDispatcher, DispatchResult
from .events import EventStreamChannel

__all__ = [
    "UnifiedMCPServer",
    "MCPContext",
    "ServerInfo",
    "JSONRPCDispatcher",
    "DispatchResult",
    "EventStreamChannel",
]
