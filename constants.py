"""
Application constants for the MCP demo server.
Centralized location for all constant values used throughout the application.
"""

# Server identity
SERVER_NAME = "mcp-demo1"
SERVER_VERSION = "1.0.0"

# Protocol
DEFAULT_PROTOCOL_VERSION = "2024-11-05"

# Event stream
DEFAULT_KEEPALIVE_INTERVAL = 25  # seconds

# Default Values
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_TRANSPORT = "http"
DEFAULT_LOG_LEVEL = "INFO"
