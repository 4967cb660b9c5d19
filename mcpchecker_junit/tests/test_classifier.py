from mcpchecker_junit.reporting.classifier import (
    build_system_err,
    classify,
    collect_phase_errors,
    failed_assertions,
    merge_phase_errors,
)
from mcpchecker_junit.reporting.models import Assertion, CaseStatus, PhaseOutput, TaskResult


def _result(**kwargs) -> TaskResult:
    defaults = dict(
        task_name="task",
        task_passed=True,
        difficulty="easy",
        assertion_results={"a": Assertion(True)},
        all_assertions_passed=True,
        setup_output=PhaseOutput(True, ""),
        agent_output=PhaseOutput(True, ""),
        verify_output=PhaseOutput(True, ""),
        cleanup_output=PhaseOutput(True, ""),
    )
    defaults.update(kwargs)
    return TaskResult(**defaults)


def test_failed_task_is_error_regardless_of_assertions():
    result = _result(
        task_passed=False,
        task_error="boom",
        assertion_results={"a": Assertion(False)},
        all_assertions_passed=False,
    )
    classification = classify(result)

    assert classification.status == CaseStatus.ERROR
    assert classification.failure is None
    assert classification.error.kind == "ExecutionError"
    assert classification.error.message == "Test execution failed"
    assert classification.error.detail == "boom"


def test_failed_assertions_are_failure_listing_exact_names():
    result = _result(
        assertion_results={"zeta": Assertion(False), "alpha": Assertion(False), "ok": Assertion(True)},
        all_assertions_passed=False,
    )
    classification = classify(result)

    assert classification.status == CaseStatus.FAILURE
    assert classification.error is None
    assert classification.failure.kind == "AssertionFailure"
    assert classification.failure.message == "Assertion failures: alpha, zeta"
    assert classification.failure.detail == "Failed Assertions:\n  - alpha\n  - zeta\n"


def test_failure_detail_includes_task_error():
    result = _result(
        task_error="details here",
        assertion_results={"a": Assertion(False)},
        all_assertions_passed=False,
    )
    detail = classify(result).failure.detail
    assert detail == "Failed Assertions:\n  - a\n\nError Details:\ndetails here"


def test_all_assertions_flag_is_authoritative():
    result = _result(assertion_results={"a": Assertion(False)}, all_assertions_passed=True)
    assert classify(result).status == CaseStatus.PASS


def test_assertions_flag_derived_when_absent():
    result = _result(assertion_results={"a": Assertion(False)}, all_assertions_passed=None)
    assert classify(result).status == CaseStatus.FAILURE


def test_passing_task_has_no_payload():
    classification = classify(_result())
    assert classification.status == CaseStatus.PASS
    assert classification.failure is None
    assert classification.error is None


def test_failed_assertions_sorted():
    assertions = {"b": Assertion(False), "a": Assertion(False), "c": Assertion(True)}
    assert failed_assertions(assertions) == ["a", "b"]


def test_collect_phase_errors_in_phase_order():
    result = _result(
        cleanup_output=PhaseOutput(False, "cleanup failed"),
        setup_output=PhaseOutput(False, "setup failed"),
        agent_output=PhaseOutput(False, ""),  # no text, not reported
        verify_output=PhaseOutput(True, "ignored"),
    )
    assert collect_phase_errors(result) == (
        "Setup Phase Error:\nsetup failed\n\nCleanup Phase Error:\ncleanup failed"
    )


def test_no_phase_errors_is_empty_string():
    assert collect_phase_errors(_result()) == ""


def test_phase_error_upgrades_pass_to_error():
    result = _result(agent_output=PhaseOutput(False, "agent crashed"))
    phase_errors = collect_phase_errors(result)
    classification = merge_phase_errors(classify(result), phase_errors)

    assert classification.status == CaseStatus.ERROR
    assert classification.error.kind == "PhaseError"
    assert classification.error.message == "Phase execution failed"
    assert classification.error.detail == "Agent Phase Error:\nagent crashed"


def test_phase_errors_appended_to_existing_error():
    result = _result(task_passed=False, task_error="boom", setup_output=PhaseOutput(False, "no setup"))
    classification = merge_phase_errors(classify(result), collect_phase_errors(result))

    assert classification.error.kind == "ExecutionError"
    assert classification.error.detail == "boom\n\nPhase Errors:\nSetup Phase Error:\nno setup"


def test_phase_errors_appended_to_existing_failure():
    result = _result(
        assertion_results={"a": Assertion(False)},
        all_assertions_passed=False,
        verify_output=PhaseOutput(False, "verify failed"),
    )
    classification = merge_phase_errors(classify(result), collect_phase_errors(result))

    assert classification.status == CaseStatus.FAILURE
    assert classification.error is None
    assert classification.failure.detail.endswith("\n\nPhase Errors:\nVerify Phase Error:\nverify failed")


def test_system_err_combines_task_and_phase_errors():
    result = _result(task_passed=False, task_error="boom")
    assert build_system_err(result, "") == "boom"
    assert build_system_err(result, "Setup Phase Error:\nx") == "boom\n\nSetup Phase Error:\nx"


def test_system_err_only_phase_errors_for_passing_task():
    result = _result(task_error="noise")
    assert build_system_err(result, "") == ""
    assert build_system_err(result, "Agent Phase Error:\ny") == "Agent Phase Error:\ny"
