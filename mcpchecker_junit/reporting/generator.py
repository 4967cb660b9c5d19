"""
Convert MCP checker task results into a JUnit report.
"""

from typing import Iterable, List, Tuple

from mcpchecker_junit.core.logging import get_logger
from mcpchecker_junit.reporting.classifier import (
    build_system_err,
    classify,
    collect_phase_errors,
    merge_phase_errors,
)
from mcpchecker_junit.reporting.models import (
    JUnitReport,
    JUnitTestCase,
    JUnitTestSuite,
    TaskResult,
)
from mcpchecker_junit.reporting.parser import TaskResultParser
from mcpchecker_junit.reporting.renderer import format_human_readable
from mcpchecker_junit.reporting.serializer import to_xml

SUITE_NAME_PREFIX = "MCP Checker Tests"


def extract_classname(task_path: str, difficulty: str) -> str:
    """
    Derive a JUnit classname from the task path.

    e.g. "/home/.../tasks/create-function/create-function.yaml" -> "tasks.create-function"

    Falls back to the difficulty when the path is empty or has no ``tasks``
    directory followed by another segment.
    """
    if not task_path:
        return difficulty
    parts = task_path.split("/")
    for i, part in enumerate(parts):
        if part == "tasks" and i + 1 < len(parts):
            return f"tasks.{parts[i + 1]}"
    return difficulty


def group_by_label(results: Iterable[TaskResult]) -> List[Tuple[str, List[TaskResult]]]:
    """Group results by difficulty label, in order of first appearance."""
    groups = {}
    for result in results:
        groups.setdefault(result.label, []).append(result)
    return list(groups.items())


def convert_test_case(result: TaskResult) -> JUnitTestCase:
    """Build the JUnit test case for one task result."""
    phase_errors = collect_phase_errors(result)
    classification = merge_phase_errors(classify(result), phase_errors)

    return JUnitTestCase(
        name=result.task_name,
        classname=extract_classname(result.task_path, result.difficulty),
        status=classification.status,
        failure=classification.failure,
        error=classification.error,
        system_out=format_human_readable(result),
        system_err=build_system_err(result, phase_errors),
    )


class JUnitReportGenerator:
    """Aggregate task results into suites, one per difficulty."""

    def __init__(self, suite_name_prefix: str = SUITE_NAME_PREFIX):
        self.suite_name_prefix = suite_name_prefix
        self.logger = get_logger(__name__)

    def suite_name(self, label: str) -> str:
        return f"{self.suite_name_prefix} - {label}"

    def convert(self, results: Iterable[TaskResult]) -> JUnitReport:
        """
        Build a JUnit report.

        Args:
            results: Decoded task results, in input order

        Returns:
            JUnitReport with one suite per difficulty label
        """
        report = JUnitReport()

        for label, tasks in group_by_label(results):
            suite = JUnitTestSuite(name=self.suite_name(label))
            for task in tasks:
                suite.add_case(convert_test_case(task))

            self.logger.debug(
                f"Suite '{suite.name}': {suite.tests} tests, "
                f"{suite.failures} failures, {suite.errors} errors"
            )
            report.suites.append(suite)

        self.logger.info(report.summary)
        return report


def convert_bytes(data: bytes) -> str:
    """Decode raw MCP checker output and return the JUnit XML document."""
    results = TaskResultParser().parse_bytes(data)
    report = JUnitReportGenerator().convert(results)
    return to_xml(report)
