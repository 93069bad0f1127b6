"""
MCP Core - Generic Model Context Protocol implementation.

A standalone, reusable package for building MCP servers: JSON-RPC 2.0
dispatch, method handlers, a Server-Sent Events channel and HTTP/stdio
transports.
"""

from .server.unified_server import UnifiedMCPServer
from .server.context import MCPContext, ServerInfo
from .server.dispatcher import JSONRPCDispatcher, DispatchResult

__version__ = "1.0.0"

__all__ = [
    "UnifiedMCPServer",
    "MCPContext",
    "ServerInfo",
    "JSONRPCDispatcher",
    "DispatchResult",
]
