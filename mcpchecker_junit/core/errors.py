"""
Custom exceptions for the MCP checker JUnit converter.
"""


class MCPCheckerJUnitError(Exception):
    """Base exception for all converter errors."""
    pass


class ConfigurationError(MCPCheckerJUnitError):
    """Raised when configuration is invalid."""
    pass


class FileOpenError(MCPCheckerJUnitError):
    """Raised when the input file cannot be opened."""
    pass


class InputReadError(MCPCheckerJUnitError):
    """Raised when reading the input stream fails."""
    pass


class DecodeError(MCPCheckerJUnitError):
    """Raised when the input is not a well-formed array of task results."""
    pass


class SerializeError(MCPCheckerJUnitError):
    """Raised when the JUnit document cannot be serialized."""
    pass
