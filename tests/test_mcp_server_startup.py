#!/usr/bin/env python3
"""
Tests for MCP server startup, configuration validation, and initialization.
"""

import os
import logging
from unittest.mock import patch

import pytest

from mcp_server import main
from demo_mcp_server import DemoMCPServer
from error_utils import ConfigurationError
import run_mcp


class TestMCPServerStartup:
    """Test MCP server startup and configuration."""

    def test_default_configuration(self, clean_env):
        """Test server startup with default configuration."""
        server = DemoMCPServer()

        assert server.transport == "http"
        assert server.host == "0.0.0.0"
        assert server.port == 3000
        assert server.keepalive_interval == 25.0

        assert server.tool_router is not None
        assert server.app is not None
        assert server.mcp is None
        assert server.context.server_info.name == "mcp-demo1"
        assert server.context.server_info.version == "1.0.0"
        assert server.context.protocol_version == "2024-11-05"

    def test_http_configuration(self, clean_env):
        os.environ["MCP_HOST"] = "127.0.0.1"
        os.environ["MCP_PORT"] = "8080"
        os.environ["MCP_KEEPALIVE_INTERVAL"] = "5"

        server = DemoMCPServer()

        assert server.host == "127.0.0.1"
        assert server.port == 8080
        assert server.keepalive_interval == 5.0

    def test_stdio_configuration(self, clean_env):
        os.environ["MCP_TRANSPORT"] = "stdio"

        server = DemoMCPServer()

        assert server.transport == "stdio"
        assert server.mcp is not None
        assert server.app is None

    def test_log_level_applied(self, clean_env):
        os.environ["MCP_LOG_LEVEL"] = "warning"
        root = logging.getLogger()
        previous = root.level
        try:
            DemoMCPServer()
            assert root.level == logging.WARNING
        finally:
            root.setLevel(previous)

    def test_invalid_configuration(self, clean_env):
        os.environ["MCP_TRANSPORT"] = "websocket"
        os.environ["MCP_PORT"] = "not-a-port"

        with pytest.raises(ConfigurationError) as exc_info:
            DemoMCPServer()
        assert "MCP_TRANSPORT" in str(exc_info.value)
        assert "MCP_PORT" in str(exc_info.value)

    def test_tools_available(self, clean_env):
        server = DemoMCPServer()
        assert [tool["name"] for tool in server.list_tools()] == ["hello_world", "greet"]


class TestMCPServerLifecycle:
    """Test run() wiring without binding sockets."""

    def test_http_run_serves_with_uvicorn(self, clean_env):
        server = DemoMCPServer()
        with patch("mcp_core.server.unified_server.uvicorn.Server") as server_cls:
            server_cls.return_value.serve.side_effect = self._noop_serve
            server.run()

        config = server_cls.call_args[0][0]
        assert config.host == "0.0.0.0"
        assert config.port == 3000
        assert config.app is server.app

    def test_stdio_run_uses_fastmcp(self, clean_env):
        os.environ["MCP_TRANSPORT"] = "stdio"
        server = DemoMCPServer()
        with patch.object(server.mcp, "run") as run:
            server.run()
        run.assert_called_once_with()

    def test_keyboard_interrupt_is_clean_shutdown(self, clean_env):
        server = DemoMCPServer()
        with patch.object(server, "run_async", side_effect=KeyboardInterrupt):
            server.run()

    def test_server_error_exits(self, clean_env):
        server = DemoMCPServer()
        with patch.object(server, "run_async", side_effect=OSError("port in use")):
            with pytest.raises(SystemExit) as exc_info:
                server.run()
        assert exc_info.value.code == 1

    def test_main_entry_point(self, clean_env):
        with patch.object(DemoMCPServer, "run") as run:
            main()
        run.assert_called_once_with()

    def test_entry_module_exports(self):
        import mcp_server

        assert mcp_server.__all__ == ["DemoMCPServer", "main"]
        assert mcp_server.DemoMCPServer is DemoMCPServer

    @staticmethod
    async def _noop_serve():
        return None


class TestLauncher:
    """Test the command line launcher."""

    def test_defaults(self):
        args = run_mcp.build_parser().parse_args([])
        assert args.transport == "http"
        assert args.host == "0.0.0.0"
        assert args.port == 3000
        assert args.keepalive == 25
        assert args.log_level == "INFO"

    def test_args_applied_to_environment(self, clean_env):
        args = run_mcp.build_parser().parse_args(
            ["stdio", "--port", "9001", "--keepalive", "2.5", "--log-level", "DEBUG"]
        )
        run_mcp.apply_args_to_env(args)

        assert os.environ["MCP_TRANSPORT"] == "stdio"
        assert os.environ["MCP_PORT"] == "9001"
        assert os.environ["MCP_KEEPALIVE_INTERVAL"] == "2.5"
        assert os.environ["MCP_LOG_LEVEL"] == "DEBUG"

    def test_main_runs_server(self, clean_env):
        with patch.object(DemoMCPServer, "run") as run:
            run_mcp.main(["http", "--port", "4000"])
        run.assert_called_once_with()
        assert os.environ["MCP_PORT"] == "4000"

    def test_rejects_unknown_transport(self):
        with pytest.raises(SystemExit):
            run_mcp.build_parser().parse_args(["oauth"])
