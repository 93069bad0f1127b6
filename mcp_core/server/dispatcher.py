"""
JSON-RPC 2.0 dispatcher for MCP requests.

The dispatcher is transport independent: it takes a request body and returns a
``DispatchResult`` holding the HTTP status and the envelope to write, or no
body at all for notifications. It never raises; any fault escaping a handler
is reported as a ``-32000`` server error.
"""

import json
import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .context import MCPContext
from .handlers import MethodHandler, build_method_table
from .jsonrpc import (
    JSONRPC_VERSION,
    InvalidRequestError,
    JSONRPCError,
    MethodNotFoundError,
    ParseError,
    ServerError,
    error_response,
    is_notification,
    success_response,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of dispatching one request."""

    status_code: int
    body: Optional[Dict[str, Any]] = None


NO_CONTENT = DispatchResult(status_code=204)


def _reject_constant(name: str):
    # NaN and Infinity are not JSON and cannot be written back out.
    raise ValueError(f"Invalid JSON constant: {name}")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"Number out of range: {text}")
    return value


class JSONRPCDispatcher:
    """Validates envelopes and routes requests through a method table."""

    def __init__(
        self,
        context: MCPContext,
        method_table: Optional[Dict[str, MethodHandler]] = None,
    ):
        self.context = context
        self.methods = (
            method_table if method_table is not None else build_method_table(context)
        )

    def dispatch_raw(self, raw_body: Union[bytes, str]) -> DispatchResult:
        """Parse a raw request body and dispatch it."""
        try:
            message = json.loads(
                raw_body,
                parse_constant=_reject_constant,
                parse_float=_parse_finite_float,
            )
        except (ValueError, RecursionError) as e:
            logger.warning(f"[MCP] unparseable body: {e}")
            error = ParseError(data={"message": str(e)})
            return DispatchResult(error.http_status, error_response(None, error))
        return self.dispatch(message)

    def dispatch(self, message: Any) -> DispatchResult:
        """Dispatch an already decoded JSON-RPC message."""
        logger.info(f"[MCP] incoming: {json.dumps(message, default=str)}")

        if not isinstance(message, dict):
            error = InvalidRequestError("Invalid Request: jsonrpc must be 2.0")
            return DispatchResult(error.http_status, error_response(None, error))

        request_id = message.get("id")
        if message.get("jsonrpc") != JSONRPC_VERSION:
            error = InvalidRequestError("Invalid Request: jsonrpc must be 2.0")
            return DispatchResult(error.http_status, error_response(request_id, error))

        if is_notification(message):
            # Notifications are acknowledged without a body, even unknown ones.
            logger.debug(f"Notification received: {message.get('method')}")
            return NO_CONTENT

        try:
            result = self._route(message.get("method"), message.get("params"))
        except JSONRPCError as error:
            return DispatchResult(error.http_status, error_response(request_id, error))
        except Exception as e:
            logger.exception(f"[MCP] error: {e}")
            error = ServerError(data={"message": str(e)})
            return DispatchResult(error.http_status, error_response(request_id, error))

        return DispatchResult(200, success_response(request_id, result))

    def _route(self, method: Any, params: Any) -> Any:
        handler = self.methods.get(method) if isinstance(method, str) else None
        if handler is None:
            raise MethodNotFoundError(f"Method not found: {method}")

        if not isinstance(params, dict):
            params = {}
        return handler.handle(params)
