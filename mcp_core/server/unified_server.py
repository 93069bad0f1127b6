"""
Generic Unified MCP Server - Transport framework.

A generic MCP server that can be configured with different tool routers to
serve any static tool catalog.

Supports:
- HTTP: JSON-RPC 2.0 over ``POST /mcp`` plus a Server-Sent Events channel on
  ``GET /mcp``, served by FastAPI and uvicorn
- stdio: the same tools served through FastMCP

Environment Configuration (used when no explicit value is passed):
- MCP_TRANSPORT: "http" (default), "stdio"
- MCP_HOST: "0.0.0.0"
- MCP_PORT: 3000
- MCP_KEEPALIVE_INTERVAL: 25 (seconds)
- MCP_LOG_LEVEL: "INFO"
"""

import os
import sys
import inspect
import logging
import asyncio
from typing import Any, Dict, List, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response, StreamingResponse
from mcp.server.fastmcp import FastMCP

from .context import DEFAULT_PROTOCOL_VERSION, MCPContext, ServerInfo, ToolRouter
from .dispatcher import JSONRPCDispatcher
from .events import DEFAULT_KEEPALIVE_INTERVAL, EventStreamChannel

# Configure logging early
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

MCP_PATH = "/mcp"
HEALTH_PATH = "/health"

CORS_PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, Cache-Control",
    "Access-Control-Max-Age": "86400",
}

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "Access-Control-Allow-Origin": "*",
}

SCHEMA_TYPES = {
    "string": str,
    "integer": int,
    "number": float,
    "boolean": bool,
    "object": dict,
    "array": list,
}


class UnifiedMCPServer:
    """Generic MCP server exposing a tool router over HTTP or stdio."""

    def __init__(
        self,
        tool_router: Optional[ToolRouter] = None,
        server_name: str = "Generic MCP Server",
        server_version: str = "1.0.0",
        protocol_version: str = DEFAULT_PROTOCOL_VERSION,
        transport: Optional[str] = None,
        host: Optional[str] = None,
        port: Optional[int] = None,
        keepalive_interval: Optional[float] = None,
        log_level: Optional[str] = None,
    ):
        """
        Initialize the unified MCP server.

        Args:
            tool_router: Tool router instance that lists and calls tools
            server_name: Name reported to clients
            server_version: Version reported to clients
            protocol_version: Protocol version used when a client sends none
            transport: "http" or "stdio"
            host: Host to bind the HTTP transport to
            port: Port to bind the HTTP transport to
            keepalive_interval: Seconds between SSE keepalive events
            log_level: Logging level name
        """
        # Read configuration from environment at runtime
        self.transport = (transport or os.getenv("MCP_TRANSPORT", "http")).lower()
        self.host = host or os.getenv("MCP_HOST", "0.0.0.0")
        self.port = port or int(os.getenv("MCP_PORT", "3000"))
        self.keepalive_interval = keepalive_interval or float(
            os.getenv("MCP_KEEPALIVE_INTERVAL", DEFAULT_KEEPALIVE_INTERVAL)
        )
        self.log_level = (log_level or os.getenv("MCP_LOG_LEVEL", "INFO")).upper()
        self.server_name = server_name

        logging.getLogger().setLevel(self.log_level)

        # Initialize core components
        self.context = MCPContext(
            server_info=ServerInfo(name=server_name, version=server_version),
            tool_router=tool_router,
            protocol_version=protocol_version,
        )
        self.tool_router = tool_router
        self.dispatcher = JSONRPCDispatcher(self.context)

        # Initialize transport-specific components
        self.app: Optional[FastAPI] = None
        self.mcp: Optional[FastMCP] = None

        self._setup_transport()

    def _setup_transport(self):
        """Setup transport layer based on configuration."""
        if self.transport == "stdio":
            self.mcp = FastMCP(self.server_name)
            if self.tool_router:
                self._register_fastmcp_tools()

        elif self.transport == "http":
            self.app = FastAPI(
                title=f"{self.server_name} MCP Server",
                version=self.context.server_info.version,
            )

            # Request logging and the CORS origin header on every response
            @self.app.middleware("http")
            async def log_requests(request: Request, call_next):
                logger.info(f"[HTTP] {request.method} {request.url.path}")
                response = await call_next(request)
                response.headers["Access-Control-Allow-Origin"] = "*"
                if response.status_code >= 400:
                    logger.warning(
                        f"Request: {request.method} {request.url} -> {response.status_code}"
                    )
                return response

            self._register_http_endpoints()

        else:
            raise ValueError(f"Unsupported transport: {self.transport}")

    def _register_fastmcp_tools(self):
        """Register tools for FastMCP transport."""
        for tool in self.tool_router.get_available_tools():
            tool_name = tool["name"]
            tool_func = self._create_fastmcp_tool_wrapper(tool)
            try:
                tool_decorator = self.mcp.tool(
                    name=tool_name, description=tool.get("description", "")
                )
                tool_decorator(tool_func)
            except Exception as e:
                # If tool registration fails, skip this tool
                logger.warning(f"Failed to register tool {tool_name}: {e}")

    def _create_fastmcp_tool_wrapper(self, tool: Dict[str, Any]):
        """Create a FastMCP tool function whose signature mirrors the tool schema.

        Every parameter is optional so the router's own fallbacks apply.
        """
        tool_name = tool["name"]
        properties = tool.get("inputSchema", {}).get("properties", {})

        def tool_wrapper(**kwargs) -> str:
            arguments = {k: v for k, v in kwargs.items() if v is not None}
            result = self.tool_router.call_tool(tool_name, arguments)
            return "\n".join(
                item["text"]
                for item in result.get("content", [])
                if item.get("type") == "text"
            )

        parameters = [
            inspect.Parameter(
                prop_name,
                inspect.Parameter.KEYWORD_ONLY,
                default=None,
                annotation=Optional[SCHEMA_TYPES.get(prop.get("type"), str)],
            )
            for prop_name, prop in properties.items()
        ]
        tool_wrapper.__name__ = tool_name
        tool_wrapper.__doc__ = tool.get("description", "")
        tool_wrapper.__signature__ = inspect.Signature(parameters, return_annotation=str)
        return tool_wrapper

    def _register_http_endpoints(self):
        """Register HTTP endpoints."""

        @self.app.options("/{full_path:path}")
        async def preflight(full_path: str):
            """CORS preflight acknowledgement."""
            return Response(status_code=204, headers=CORS_PREFLIGHT_HEADERS)

        @self.app.get("/")
        async def discovery():
            """MCP discovery endpoint."""
            return {
                **self.context.server_info.to_dict(),
                "protocol": "MCP",
                "protocolVersion": self.context.protocol_version,
                "endpoints": {"mcp": MCP_PATH, "health": HEALTH_PATH},
            }

        @self.app.get(HEALTH_PATH)
        async def health():
            """Health check endpoint."""
            return {"status": "ok", "message": "hello world"}

        @self.app.get(MCP_PATH)
        async def event_stream(request: Request):
            """Server-sent events channel: ready, then periodic keepalives."""
            channel = EventStreamChannel(
                is_disconnected=request.is_disconnected,
                keepalive_interval=self.keepalive_interval,
            )
            return StreamingResponse(
                channel.events(),
                media_type="text/event-stream",
                headers=SSE_HEADERS,
            )

        @self.app.post(MCP_PATH)
        async def handle_mcp_request(request: Request):
            """Handle MCP JSON-RPC requests."""
            body = await request.body()
            result = self.dispatcher.dispatch_raw(body)
            if result.body is None:
                return Response(status_code=result.status_code)
            return JSONResponse(status_code=result.status_code, content=result.body)

    def list_tools(self) -> List[Dict[str, Any]]:
        return self.context.list_tools()

    def print_banner(self):
        """Log the startup banner with endpoint URLs."""
        display_host = "localhost" if self.host == "0.0.0.0" else self.host
        logger.info("========================================")
        logger.info(f"{self.server_name} is running")
        logger.info("========================================")
        logger.info(f"Server: http://{self.host}:{self.port}")
        logger.info(f"Local:  http://{display_host}:{self.port}")
        logger.info(f"MCP endpoint: http://{self.host}:{self.port}{MCP_PATH}")
        logger.info(f"Health check: http://{self.host}:{self.port}{HEALTH_PATH}")
        logger.info("========================================")

    async def run_async(self):
        """Run the server asynchronously."""
        if self.app:
            config = uvicorn.Config(
                app=self.app,
                host=self.host,
                port=self.port,
                log_level=self.log_level.lower(),
            )
            server = uvicorn.Server(config)
            await server.serve()

    def run(self):
        """Run the server."""
        try:
            if self.transport == "stdio":
                logger.info(f"Starting {self.server_name} on stdio")
                self.mcp.run()
            else:
                self.print_banner()
                asyncio.run(self.run_async())
        except KeyboardInterrupt:
            logger.info("Server shutdown requested")
        except Exception as e:
            logger.error(f"Server error: {e}")
            sys.exit(1)
