"""
JSON-RPC 2.0 primitives: error codes, error types and envelope builders.

Errors are raised as ``JSONRPCError`` subclasses and converted into response
envelopes by the dispatcher. Each error knows the HTTP status it is paired
with, so the transport never has to map codes itself.
"""

from typing import Any, Dict, Optional

JSONRPC_VERSION = "2.0"

# Standard JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

# Implementation-defined server error
SERVER_ERROR = -32000

HTTP_STATUS_BY_CODE: Dict[int, int] = {
    PARSE_ERROR: 400,
    INVALID_REQUEST: 400,
    INVALID_PARAMS: 400,
    METHOD_NOT_FOUND: 404,
    INTERNAL_ERROR: 500,
    SERVER_ERROR: 500,
}


class JSONRPCError(Exception):
    """Base class for errors that are reported as JSON-RPC error objects."""

    code = SERVER_ERROR
    default_message = "Server error"

    def __init__(self, message: Optional[str] = None, data: Any = None):
        self.message = message or self.default_message
        self.data = data
        super().__init__(self.message)

    @property
    def http_status(self) -> int:
        return HTTP_STATUS_BY_CODE.get(self.code, 500)

    def to_dict(self) -> Dict[str, Any]:
        """Build the error object; ``data`` is omitted when not set."""
        error = {"code": self.code, "message": self.message}
        if self.data is not None:
            error["data"] = self.data
        return error


class ParseError(JSONRPCError):
    code = PARSE_ERROR
    default_message = "Parse error"


class InvalidRequestError(JSONRPCError):
    code = INVALID_REQUEST
    default_message = "Invalid Request"


class MethodNotFoundError(JSONRPCError):
    code = METHOD_NOT_FOUND
    default_message = "Method not found"


class InvalidParamsError(JSONRPCError):
    code = INVALID_PARAMS
    default_message = "Invalid params"


class InternalError(JSONRPCError):
    code = INTERNAL_ERROR
    default_message = "Internal error"


class ServerError(JSONRPCError):
    code = SERVER_ERROR
    default_message = "Server error"


def success_response(request_id: Any, result: Any) -> Dict[str, Any]:
    """Build a success envelope echoing ``request_id`` unchanged."""
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}


def error_response(request_id: Any, error: JSONRPCError) -> Dict[str, Any]:
    """Build an error envelope echoing ``request_id`` unchanged."""
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "error": error.to_dict()}


def is_notification(message: Dict[str, Any]) -> bool:
    """A message with an absent or null id never receives a response body."""
    return message.get("id") is None
