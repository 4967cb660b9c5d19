"""
JUnit XML serialization.
"""

import re
import xml.etree.ElementTree as ET
from typing import Optional

from mcpchecker_junit.core.errors import SerializeError
from mcpchecker_junit.reporting.models import CaseOutcome, JUnitReport, JUnitTestCase, JUnitTestSuite

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'

# Characters outside the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile(
    "[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def _xml_safe(text: str) -> str:
    """Replace characters XML cannot carry with U+FFFD."""
    return _INVALID_XML_CHARS.sub("\ufffd", text)


def _add_outcome(parent: ET.Element, tag: str, outcome: Optional[CaseOutcome]) -> None:
    if outcome is None:
        return
    element = ET.SubElement(
        parent,
        tag,
        {"message": _xml_safe(outcome.message), "type": _xml_safe(outcome.kind)},
    )
    if outcome.detail:
        element.text = _xml_safe(outcome.detail)


def _add_text(parent: ET.Element, tag: str, text: str) -> None:
    if text:
        ET.SubElement(parent, tag).text = _xml_safe(text)


def _testcase_element(parent: ET.Element, test_case: JUnitTestCase) -> ET.Element:
    testcase = ET.SubElement(
        parent,
        "testcase",
        {"name": _xml_safe(test_case.name), "classname": _xml_safe(test_case.classname)},
    )
    _add_outcome(testcase, "failure", test_case.failure)
    _add_outcome(testcase, "error", test_case.error)
    _add_text(testcase, "system-out", test_case.system_out)
    _add_text(testcase, "system-err", test_case.system_err)
    return testcase


def _testsuite_element(parent: ET.Element, suite: JUnitTestSuite) -> ET.Element:
    testsuite = ET.SubElement(
        parent,
        "testsuite",
        {
            "name": _xml_safe(suite.name),
            "tests": str(suite.tests),
            "failures": str(suite.failures),
            "errors": str(suite.errors),
            "skipped": str(suite.skipped),
        },
    )
    for test_case in suite.test_cases:
        _testcase_element(testsuite, test_case)
    return testsuite


def build_element(report: JUnitReport) -> ET.Element:
    """Build the ``<testsuites>`` element tree."""
    root = ET.Element("testsuites")
    for suite in report.suites:
        _testsuite_element(root, suite)
    return root


def to_xml(report: JUnitReport, indent: str = "  ") -> str:
    """Serialize a report to an XML document string, declaration included."""
    try:
        root = build_element(report)
        ET.indent(root, space=indent)
        body = ET.tostring(root, encoding="unicode")
    except (TypeError, ValueError) as e:
        raise SerializeError(f"failed to serialize JUnit report: {e}") from e
    # ElementTree leaves \r raw in text, which parsers would normalize to \n
    body = body.replace("\r", "&#13;")
    return XML_HEADER + body + "\n"
