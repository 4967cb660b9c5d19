"""
Decide whether a task result is a pass, a failure or an error.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from mcpchecker_junit.reporting.models import (
    Assertion,
    CaseOutcome,
    CaseStatus,
    TaskResult,
)

EXECUTION_ERROR = "ExecutionError"
ASSERTION_FAILURE = "AssertionFailure"
PHASE_ERROR = "PhaseError"


@dataclass
class Classification:
    """Status of one task plus the failure or error payload, if any."""
    status: CaseStatus
    failure: Optional[CaseOutcome] = None
    error: Optional[CaseOutcome] = None


def failed_assertions(assertions: Dict[str, Assertion]) -> List[str]:
    """Names of failed assertions, sorted."""
    return sorted(name for name, assertion in assertions.items() if not assertion.passed)


def build_failure_content(result: TaskResult, failed: List[str]) -> str:
    content = "Failed Assertions:\n"
    for name in failed:
        content += f"  - {name}\n"

    if result.task_error:
        content += "\nError Details:\n"
        content += result.task_error

    return content


def classify(result: TaskResult) -> Classification:
    """Classify a task from its pass flag and assertion flag.

    Phase errors are not considered here; see ``merge_phase_errors``.
    """
    if not result.task_passed:
        return Classification(
            status=CaseStatus.ERROR,
            error=CaseOutcome(
                kind=EXECUTION_ERROR,
                message="Test execution failed",
                detail=result.task_error,
            ),
        )

    if not result.assertions_passed:
        failed = failed_assertions(result.assertion_results)
        return Classification(
            status=CaseStatus.FAILURE,
            failure=CaseOutcome(
                kind=ASSERTION_FAILURE,
                message=f"Assertion failures: {', '.join(failed)}",
                detail=build_failure_content(result, failed),
            ),
        )

    return Classification(status=CaseStatus.PASS)


def collect_phase_errors(result: TaskResult) -> str:
    """Concatenate the errors of all failed phases, or return ``""``."""
    errors = ""
    for title, output in result.phases():
        if not output.success and output.error:
            errors += f"{title} Phase Error:\n{output.error}\n\n"
    return errors.strip()


def merge_phase_errors(classification: Classification, phase_errors: str) -> Classification:
    """Attach phase errors to an existing payload, or turn a pass into an error."""
    if not phase_errors:
        return classification

    suffix = "\n\nPhase Errors:\n" + phase_errors
    if classification.error is not None:
        classification.error.detail += suffix
    elif classification.failure is not None:
        classification.failure.detail += suffix
    else:
        # Phase failed but the task reported a pass
        classification.status = CaseStatus.ERROR
        classification.error = CaseOutcome(
            kind=PHASE_ERROR,
            message="Phase execution failed",
            detail=phase_errors,
        )
    return classification


def build_system_err(result: TaskResult, phase_errors: str) -> str:
    """Raw error text for ``<system-err>``."""
    system_err = ""
    if not result.task_passed and result.task_error:
        system_err = result.task_error
    if phase_errors:
        system_err = f"{system_err}\n\n{phase_errors}" if system_err else phase_errors
    return system_err
