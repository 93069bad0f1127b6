#!/usr/bin/env python3
"""
MCP Server Launcher - Unified interface for all MCP server modes.

Usage:
    python run_mcp.py [transport] [options]

Transports:
    http        - JSON-RPC over HTTP with an SSE channel (default)
    stdio       - FastMCP server over stdio

Options:
    --host HOST         - Server host (default: 0.0.0.0)
    --port PORT         - Server port (default: 3000)
    --keepalive SECS    - Seconds between SSE keepalive events (default: 25)
    --log-level LEVEL   - Logging level (default: INFO)

Examples:
    python run_mcp.py                          # HTTP on 0.0.0.0:3000
    python run_mcp.py http --port 8080         # HTTP server on port 8080
    python run_mcp.py stdio                    # stdio for desktop clients
"""

import os
import sys
import argparse
import logging

from constants import (
    DEFAULT_HOST,
    DEFAULT_KEEPALIVE_INTERVAL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="MCP Demo Server Launcher",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "transport",
        nargs="?",
        default="http",
        choices=["http", "stdio"],
        help="Transport mode (default: http)",
    )

    parser.add_argument("--host", default=DEFAULT_HOST, help="Server host")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Server port")
    parser.add_argument(
        "--keepalive",
        type=float,
        default=DEFAULT_KEEPALIVE_INTERVAL,
        help="Seconds between SSE keepalive events",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level",
    )
    return parser


def apply_args_to_env(args: argparse.Namespace) -> None:
    """Set environment variables based on arguments."""
    os.environ["MCP_TRANSPORT"] = args.transport
    os.environ["MCP_HOST"] = args.host
    os.environ["MCP_PORT"] = str(args.port)
    os.environ["MCP_KEEPALIVE_INTERVAL"] = str(args.keepalive)
    os.environ["MCP_LOG_LEVEL"] = args.log_level


def main(argv=None):
    args = build_parser().parse_args(argv)
    apply_args_to_env(args)

    # Import after environment is set
    from demo_mcp_server import DemoMCPServer
    from error_utils import ConfigurationError

    logger.info(
        f"Starting MCP demo server: transport={args.transport} "
        f"address={args.host}:{args.port}"
    )

    try:
        server = DemoMCPServer()
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    server.run()


if __name__ == "__main__":
    main()
