"""
Centralized configuration management for the MCP demo server.
Consolidates all environment variable access and default values.
"""

import os
from constants import (
    DEFAULT_HOST,
    DEFAULT_KEEPALIVE_INTERVAL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    DEFAULT_TRANSPORT,
)
from error_utils import safe_int_conversion, safe_float_conversion

VALID_TRANSPORTS = ("http", "stdio")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_env_str(key: str, default: str = "") -> str:
    """Get environment variable as string."""
    return os.getenv(key, default)


# Configuration getters (evaluated at runtime)
def get_transport() -> str:
    """Get MCP transport mode."""
    return get_env_str("MCP_TRANSPORT", DEFAULT_TRANSPORT).lower()


def get_host() -> str:
    """Get MCP host."""
    return get_env_str("MCP_HOST", DEFAULT_HOST)


def get_port() -> int:
    """Get MCP port, falling back to the conventional PORT variable."""
    raw = os.getenv("MCP_PORT") or os.getenv("PORT")
    return safe_int_conversion(raw, default=DEFAULT_PORT, min_val=1, max_val=65535)


def get_keepalive_interval() -> float:
    """Get seconds between keepalive events on the event stream."""
    return safe_float_conversion(
        os.getenv("MCP_KEEPALIVE_INTERVAL"),
        default=float(DEFAULT_KEEPALIVE_INTERVAL),
        min_val=0.001,
        max_val=3600,
    )


def get_log_level() -> str:
    """Get logging level name."""
    return get_env_str("MCP_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_server_config() -> dict:
    """Get server configuration."""
    return {
        "transport": get_transport(),
        "host": get_host(),
        "port": get_port(),
        "keepalive_interval": get_keepalive_interval(),
        "log_level": get_log_level(),
    }


def validate_config() -> list:
    """Validate configuration and return list of issues."""
    issues = []

    # Transport validation
    transport = get_transport()
    if transport not in VALID_TRANSPORTS:
        issues.append(f"Invalid MCP_TRANSPORT: {transport}")

    # Port validation
    raw_port = os.getenv("MCP_PORT") or os.getenv("PORT")
    if raw_port and safe_int_conversion(raw_port, default=-1, min_val=1, max_val=65535) < 0:
        issues.append(f"Invalid MCP_PORT: {raw_port}")

    # Log level validation
    level = get_log_level()
    if level not in VALID_LOG_LEVELS:
        issues.append(f"Invalid MCP_LOG_LEVEL: {level}")

    return issues
