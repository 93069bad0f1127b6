"""
Common error handling utilities shared by the configuration layer and tools.
"""

from typing import Optional, Any


def safe_int_conversion(
    value: Any,
    default: int = 0,
    min_val: Optional[int] = None,
    max_val: Optional[int] = None,
) -> int:
    """
    Safely convert a value to integer with bounds checking.

    Args:
        value: Value to convert
        default: Default value if conversion fails
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        int: Converted and validated integer
    """
    try:
        result = int(value)

        if min_val is not None and result < min_val:
            return default
        if max_val is not None and result > max_val:
            return default

        return result
    except (ValueError, TypeError):
        return default


def safe_float_conversion(
    value: Any,
    default: float = 0.0,
    min_val: Optional[float] = None,
    max_val: Optional[float] = None,
) -> float:
    """
    Safely convert a value to float with bounds checking.

    Args:
        value: Value to convert
        default: Default value if conversion fails
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        float: Converted and validated float
    """
    try:
        result = float(value)

        if min_val is not None and result < min_val:
            return default
        if max_val is not None and result > max_val:
            return default

        return result
    except (ValueError, TypeError):
        return default


class ConfigurationError(Exception):
    """Raised when configuration is invalid."""

    pass


class ToolNotFoundError(LookupError):
    """Raised when a tool name is not in the registry."""

    def __init__(self, tool_name: Any):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")
