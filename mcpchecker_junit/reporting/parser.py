"""
Parser for the JSON task results written by the MCP checker.
"""

import json
from typing import Any, Dict, List, Optional

from mcpchecker_junit.core.errors import DecodeError
from mcpchecker_junit.core.logging import get_logger
from mcpchecker_junit.reporting.models import (
    Assertion,
    CallHistory,
    PhaseOutput,
    ResourceRead,
    TaskResult,
    ToolCall,
)


class TaskResultParser:
    """Decode MCP checker output into ``TaskResult`` objects.

    Missing keys and ``null`` values take the zero value of the field.
    A present value of the wrong JSON type is a ``DecodeError``.
    """

    def __init__(self):
        self.logger = get_logger(__name__)

    def parse_bytes(self, data: bytes) -> List[TaskResult]:
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"input is not valid UTF-8: {e}") from e
        return self.parse_text(text)

    def parse_text(self, text: str) -> List[TaskResult]:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodeError(f"invalid JSON: {e}") from e
        return self.parse_data(data)

    def parse_data(self, data: Any) -> List[TaskResult]:
        """Convert an already-decoded JSON value."""
        if not isinstance(data, list):
            raise DecodeError(f"expected a JSON array of task results, got {_json_type(data)}")

        results = []
        for index, item in enumerate(data):
            where = f"result[{index}]"
            results.append(self._parse_result(item, where))

        self.logger.debug(f"Decoded {len(results)} task result(s)")
        return results

    def _parse_result(self, item: Any, where: str) -> TaskResult:
        obj = _require_object(item, where)
        return TaskResult(
            task_name=_get_str(obj, "taskName", where),
            task_path=_get_str(obj, "taskPath", where),
            task_passed=_get_bool(obj, "taskPassed", where),
            task_output=_get_str(obj, "taskOutput", where),
            task_error=_get_str(obj, "taskError", where),
            difficulty=_get_str(obj, "difficulty", where),
            assertion_results=self._parse_assertions(obj.get("assertionResults"), f"{where}.assertionResults"),
            all_assertions_passed=_get_optional_bool(obj, "allAssertionsPassed", where),
            call_history=self._parse_call_history(obj.get("callHistory"), f"{where}.callHistory"),
            setup_output=self._parse_phase(obj.get("setupOutput"), f"{where}.setupOutput"),
            agent_output=self._parse_phase(obj.get("agentOutput"), f"{where}.agentOutput"),
            verify_output=self._parse_phase(obj.get("verifyOutput"), f"{where}.verifyOutput"),
            cleanup_output=self._parse_phase(obj.get("cleanupOutput"), f"{where}.cleanupOutput"),
        )

    def _parse_assertions(self, value: Any, where: str) -> Dict[str, Assertion]:
        if value is None:
            return {}
        obj = _require_object(value, where)
        assertions = {}
        for name, entry in obj.items():
            entry_where = f"{where}[{name!r}]"
            entry_obj = _require_object(entry, entry_where) if entry is not None else {}
            assertions[name] = Assertion(passed=_get_bool(entry_obj, "passed", entry_where))
        return assertions

    def _parse_call_history(self, value: Any, where: str) -> CallHistory:
        if value is None:
            return CallHistory()
        obj = _require_object(value, where)

        tool_calls = []
        for i, call in enumerate(_get_list(obj, "ToolCalls", where)):
            call_where = f"{where}.ToolCalls[{i}]"
            call_obj = _require_object(call, call_where)
            result = call_obj.get("result")
            tool_calls.append(ToolCall(
                server_name=_get_str(call_obj, "serverName", call_where),
                name=_get_str(call_obj, "name", call_where),
                success=_get_bool(call_obj, "success", call_where),
                result=_require_object(result, f"{call_where}.result") if result is not None else {},
            ))

        resource_reads = []
        for i, read in enumerate(_get_list(obj, "ResourceReads", where)):
            read_where = f"{where}.ResourceReads[{i}]"
            read_obj = _require_object(read, read_where)
            resource_reads.append(ResourceRead(
                server_name=_get_str(read_obj, "serverName", read_where),
                success=_get_bool(read_obj, "success", read_where),
                uri=_get_str(read_obj, "uri", read_where),
            ))

        return CallHistory(tool_calls=tool_calls, resource_reads=resource_reads)

    def _parse_phase(self, value: Any, where: str) -> PhaseOutput:
        if value is None:
            return PhaseOutput()
        obj = _require_object(value, where)
        return PhaseOutput(
            success=_get_bool(obj, "Success", where),
            error=_get_str(obj, "Error", where),
        )


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _require_object(value: Any, where: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError(f"{where}: expected object, got {_json_type(value)}")
    return value


def _get_str(obj: Dict[str, Any], key: str, where: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"{where}.{key}: expected string, got {_json_type(value)}")
    return value


def _get_optional_bool(obj: Dict[str, Any], key: str, where: str) -> Optional[bool]:
    if key not in obj:
        return None
    return _get_bool(obj, key, where)


def _get_bool(obj: Dict[str, Any], key: str, where: str) -> bool:
    value = obj.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise DecodeError(f"{where}.{key}: expected boolean, got {_json_type(value)}")
    return value


def _get_list(obj: Dict[str, Any], key: str, where: str) -> List[Any]:
    value = obj.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise DecodeError(f"{where}.{key}: expected array, got {_json_type(value)}")
    return value
