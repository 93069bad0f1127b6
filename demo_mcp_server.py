"""
Demo-specific MCP Server using the generic MCP Core.

This server wraps the generic UnifiedMCPServer with the demo tool router,
server identity and the environment-driven configuration.
"""

from mcp_core import UnifiedMCPServer
from mcp_tool_router import MCPToolRouter
from config import get_server_config, validate_config
from constants import DEFAULT_PROTOCOL_VERSION, SERVER_NAME, SERVER_VERSION
from error_utils import ConfigurationError


class DemoMCPServer(UnifiedMCPServer):
    """Demo MCP server serving the hello_world and greet tools."""

    def __init__(self):
        issues = validate_config()
        if issues:
            raise ConfigurationError("; ".join(issues))

        config = get_server_config()
        super().__init__(
            tool_router=MCPToolRouter(),
            server_name=SERVER_NAME,
            server_version=SERVER_VERSION,
            protocol_version=DEFAULT_PROTOCOL_VERSION,
            transport=config["transport"],
            host=config["host"],
            port=config["port"],
            keepalive_interval=config["keepalive_interval"],
            log_level=config["log_level"],
        )


def main():
    """Main entry point for the demo MCP server."""
    server = DemoMCPServer()
    server.run()


if __name__ == "__main__":
    main()
