"""
MCP Demo Server - main entry point.

Serves the demo tool catalog over HTTP (JSON-RPC on POST /mcp, Server-Sent
Events on GET /mcp) or over stdio.

Environment Configuration:
- MCP_TRANSPORT: "http" (default), "stdio"
- MCP_HOST: "0.0.0.0"
- MCP_PORT (or PORT): 3000
- MCP_KEEPALIVE_INTERVAL: 25
- MCP_LOG_LEVEL: "INFO"
"""

from demo_mcp_server import DemoMCPServer, main

__all__ = ["DemoMCPServer", "main"]


# Main entry point
if __name__ == "__main__":
    main()
