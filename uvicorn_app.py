#!/usr/bin/env python3
"""
Uvicorn-compatible entry point for the MCP demo server.

This module creates a FastAPI app instance that can be run with uvicorn,
supporting SSL certificates and custom host/port configurations.

Usage:
    uvicorn uvicorn_app:app --host 0.0.0.0 --port 3000

Environment Variables:
    MCP_KEEPALIVE_INTERVAL - Seconds between SSE keepalive events
    MCP_LOG_LEVEL - Logging level
"""

import os
from demo_mcp_server import DemoMCPServer

# uvicorn always serves HTTP
os.environ["MCP_TRANSPORT"] = "http"

# Create the server instance
server = DemoMCPServer()

# Expose the FastAPI app for uvicorn
app = server.app

if __name__ == "__main__":
    # This allows direct execution with python, but uvicorn is recommended
    import uvicorn

    uvicorn.run("uvicorn_app:app", host=server.host, port=server.port, reload=False)
