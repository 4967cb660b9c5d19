"""
Data models for MCP checker task results and the JUnit report built from them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

UNKNOWN_LABEL = "unknown"


@dataclass
class Assertion:
    """Individual assertion result."""
    passed: bool = False


@dataclass
class ToolCall:
    """Single tool invocation recorded by the checker."""
    server_name: str = ""
    name: str = ""
    success: bool = False
    result: Dict[str, Any] = field(default_factory=dict)

    def structured_message(self) -> Optional[str]:
        """Return ``result.structuredContent.message`` if it is a non-empty string."""
        if not isinstance(self.result, dict):
            return None
        structured = self.result.get("structuredContent")
        if not isinstance(structured, dict):
            return None
        message = structured.get("message")
        if not isinstance(message, str) or not message:
            return None
        return message


@dataclass
class ResourceRead:
    """Single resource read recorded by the checker."""
    server_name: str = ""
    success: bool = False
    uri: str = ""


@dataclass
class CallHistory:
    """Tool calls and resource reads, in the order they happened."""
    tool_calls: List[ToolCall] = field(default_factory=list)
    resource_reads: List[ResourceRead] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.tool_calls and not self.resource_reads


@dataclass
class PhaseOutput:
    """Outcome of one task phase."""
    success: bool = False
    error: str = ""


@dataclass
class TaskResult:
    """One task result from the MCP checker."""
    task_name: str = ""
    task_path: str = ""
    task_passed: bool = False
    task_output: str = ""
    task_error: str = ""
    difficulty: str = ""
    assertion_results: Dict[str, Assertion] = field(default_factory=dict)
    all_assertions_passed: Optional[bool] = None  # None when absent from input
    call_history: CallHistory = field(default_factory=CallHistory)
    setup_output: PhaseOutput = field(default_factory=PhaseOutput)
    agent_output: PhaseOutput = field(default_factory=PhaseOutput)
    verify_output: PhaseOutput = field(default_factory=PhaseOutput)
    cleanup_output: PhaseOutput = field(default_factory=PhaseOutput)

    @property
    def label(self) -> str:
        """Difficulty used for grouping."""
        return self.difficulty or UNKNOWN_LABEL

    @property
    def assertions_passed(self) -> bool:
        """The reported ``allAssertionsPassed`` flag.

        When the key was absent from the input the flag is derived from
        ``assertion_results``. A missing flag is deliberately not read as
        ``false``, which would report every such passed task as an assertion
        failure.
        """
        if self.all_assertions_passed is not None:
            return self.all_assertions_passed
        return all(a.passed for a in self.assertion_results.values())

    @property
    def passed_assertion_count(self) -> int:
        return sum(1 for a in self.assertion_results.values() if a.passed)

    def phases(self) -> Iterator[Tuple[str, PhaseOutput]]:
        """Yield ``(title, output)`` for each phase in execution order."""
        yield "Setup", self.setup_output
        yield "Agent", self.agent_output
        yield "Verify", self.verify_output
        yield "Cleanup", self.cleanup_output


class CaseStatus(Enum):
    """Outcome category of a test case."""
    PASS = "PASS"
    FAILURE = "FAILURE"
    ERROR = "ERROR"


@dataclass
class CaseOutcome:
    """Payload of a ``<failure>`` or ``<error>`` element."""
    kind: str
    message: str
    detail: str = ""


@dataclass
class JUnitTestCase:
    """A ``<testcase>`` element."""
    name: str
    classname: str
    status: CaseStatus = CaseStatus.PASS
    failure: Optional[CaseOutcome] = None
    error: Optional[CaseOutcome] = None
    system_out: str = ""
    system_err: str = ""

    def __post_init__(self):
        if self.failure is not None and self.error is not None:
            raise ValueError(f"test case {self.name!r} cannot have both a failure and an error")


@dataclass
class JUnitTestSuite:
    """A ``<testsuite>`` element with counts accumulated as cases are added."""
    name: str
    test_cases: List[JUnitTestCase] = field(default_factory=list)
    failures: int = 0
    errors: int = 0
    skipped: int = 0

    def add_case(self, test_case: JUnitTestCase) -> None:
        self.test_cases.append(test_case)
        if test_case.failure is not None:
            self.failures += 1
        if test_case.error is not None:
            self.errors += 1

    @property
    def tests(self) -> int:
        return len(self.test_cases)

    @property
    def passed(self) -> int:
        return self.tests - self.failures - self.errors - self.skipped


@dataclass
class JUnitReport:
    """The ``<testsuites>`` root."""
    suites: List[JUnitTestSuite] = field(default_factory=list)

    @property
    def total_tests(self) -> int:
        return sum(s.tests for s in self.suites)

    @property
    def total_failures(self) -> int:
        return sum(s.failures for s in self.suites)

    @property
    def total_errors(self) -> int:
        return sum(s.errors for s in self.suites)

    @property
    def summary(self) -> str:
        """Human-readable one-line summary."""
        total = self.total_tests
        if total == 0:
            return "No task results found"
        passed = total - self.total_failures - self.total_errors
        return (
            f"Tasks: {total} total in {len(self.suites)} suite(s), "
            f"{passed} passed, {self.total_failures} failed, {self.total_errors} errors"
        )
