"""
MCP method handlers.

Every JSON-RPC method is served by a ``MethodHandler``. The dispatcher looks
handlers up in a plain dictionary, so supporting a new method means adding an
entry to the table returned by ``build_method_table``.
"""

import copy
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict

from .context import MCPContext
from .jsonrpc import InternalError, InvalidParamsError

logger = logging.getLogger(__name__)

DEMO_SESSION_ID = "demo-session"
SESSION_EXPIRES_IN = 600


class MethodHandler(ABC):
    """Interface for JSON-RPC method handlers."""

    @abstractmethod
    def handle(self, params: Dict[str, Any]) -> Any:
        """
        Handle a request and return its result.

        Args:
            params: Request params; always a dictionary, possibly empty

        Returns:
            The JSON-serializable ``result`` member of the response

        Raises:
            JSONRPCError: To report a JSON-RPC error to the caller
        """
        pass


class StaticResultHandler(MethodHandler):
    """Returns the same result for every call."""

    def __init__(self, result: Any):
        self._result = result

    def handle(self, params: Dict[str, Any]) -> Any:
        return copy.deepcopy(self._result)


class InitializeHandler(MethodHandler):
    """Capability handshake."""

    def __init__(self, context: MCPContext):
        self.context = context

    def handle(self, params: Dict[str, Any]) -> Any:
        # Echo the client's protocol version when it sends one.
        protocol_version = params.get("protocolVersion") or self.context.protocol_version
        return {
            "protocolVersion": protocol_version,
            "serverInfo": self.context.server_info.to_dict(),
            "capabilities": copy.deepcopy(self.context.capabilities),
        }


class ToolsListHandler(MethodHandler):
    def __init__(self, context: MCPContext):
        self.context = context

    def handle(self, params: Dict[str, Any]) -> Any:
        return {"tools": self.context.list_tools()}


class ToolsCallHandler(MethodHandler):
    """Invokes a tool through the context's tool router."""

    def __init__(self, context: MCPContext):
        self.context = context

    def handle(self, params: Dict[str, Any]) -> Any:
        tool_name = params.get("name")
        if not tool_name:
            raise InvalidParamsError("Invalid params: missing name")

        arguments = params.get("arguments") or {}
        if self.context.tool_router is None:
            raise InternalError(data={"message": "No tool router configured"})

        try:
            return self.context.tool_router.call_tool(tool_name, arguments)
        except Exception as e:
            logger.error(f"Error calling tool {tool_name}: {e}")
            raise InternalError(data={"message": str(e)}) from e


def build_method_table(context: MCPContext) -> Dict[str, MethodHandler]:
    """Build the method name to handler mapping for a server context."""
    ok = StaticResultHandler({"ok": True})
    return {
        # Handshake
        "initialize": InitializeHandler(context),
        "initialized": ok,
        "notifications/initialized": ok,
        # Sessions are placeholders; nothing is created or tracked.
        "sessions/create": StaticResultHandler(
            {"sessionId": DEMO_SESSION_ID, "expiresIn": SESSION_EXPIRES_IN}
        ),
        "sessions/keepalive": ok,
        "sessions/close": ok,
        "ping": StaticResultHandler({"pong": True}),
        # Empty capability listings
        "roots/list": StaticResultHandler({"roots": []}),
        "prompts/list": StaticResultHandler({"prompts": []}),
        "resources/list": StaticResultHandler({"resources": []}),
        "resources/read": StaticResultHandler({"contents": []}),
        # Tools
        "tools/list": ToolsListHandler(context),
        "tools/call": ToolsCallHandler(context),
    }
