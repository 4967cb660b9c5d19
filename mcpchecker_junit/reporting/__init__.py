"""
Reporting module for the MCP checker JUnit converter.

This module provides:
- Task result and JUnit document data structures
- Decoding of MCP checker JSON output
- Classification, human-readable rendering and suite aggregation
- JUnit XML serialization
"""

from mcpchecker_junit.reporting.models import (
    Assertion,
    CallHistory,
    CaseOutcome,
    CaseStatus,
    JUnitReport,
    JUnitTestCase,
    JUnitTestSuite,
    PhaseOutput,
    ResourceRead,
    TaskResult,
    ToolCall,
)
from mcpchecker_junit.reporting.parser import TaskResultParser
from mcpchecker_junit.reporting.classifier import Classification, classify
from mcpchecker_junit.reporting.renderer import format_human_readable
from mcpchecker_junit.reporting.generator import JUnitReportGenerator, convert_bytes, extract_classname
from mcpchecker_junit.reporting.serializer import to_xml

__all__ = [
    "Assertion",
    "CallHistory",
    "CaseOutcome",
    "CaseStatus",
    "JUnitReport",
    "JUnitTestCase",
    "JUnitTestSuite",
    "PhaseOutput",
    "ResourceRead",
    "TaskResult",
    "ToolCall",
    "TaskResultParser",
    "Classification",
    "classify",
    "format_human_readable",
    "JUnitReportGenerator",
    "convert_bytes",
    "extract_classname",
    "to_xml",
]
