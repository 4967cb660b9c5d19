"""
MCP Checker JUnit Report

Converts MCP checker task results into JUnit XML for CI systems.
"""

__version__ = "0.1.0"
__author__ = "MCP Checker Team"

from mcpchecker_junit.core.config import Config
from mcpchecker_junit.reporting.generator import JUnitReportGenerator, convert_bytes

__all__ = [
    "Config",
    "JUnitReportGenerator",
    "convert_bytes",
]
