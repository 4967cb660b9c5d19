"""
Core modules for the MCP checker JUnit converter.
"""

from mcpchecker_junit.core.config import Config
from mcpchecker_junit.core.errors import (
    MCPCheckerJUnitError,
    ConfigurationError,
    FileOpenError,
    InputReadError,
    DecodeError,
    SerializeError,
)

__all__ = [
    "Config",
    "MCPCheckerJUnitError",
    "ConfigurationError",
    "FileOpenError",
    "InputReadError",
    "DecodeError",
    "SerializeError",
]
