"""
Configuration for application tests.
"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to path for all tests
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

CONFIG_VARS = (
    "MCP_TRANSPORT",
    "MCP_HOST",
    "MCP_PORT",
    "PORT",
    "MCP_KEEPALIVE_INTERVAL",
    "MCP_LOG_LEVEL",
)


@pytest.fixture
def clean_env():
    """Clean configuration variables before and after tests."""
    original_env = {var: os.environ.pop(var) for var in CONFIG_VARS if var in os.environ}

    yield

    for var in CONFIG_VARS:
        os.environ.pop(var, None)
    os.environ.update(original_env)
