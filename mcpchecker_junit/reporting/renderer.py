"""
Human-readable summary of a task result, embedded as ``<system-out>``.

Layout::

    Task: <name>
    Path: <path>
    Difficulty: <difficulty>
    Status: PASSED|FAILED
    Assertions: <passed>/<total> passed
    Call history: tools=<n> (<server>:<ok> ok, ...) resources=<n>
      Tool output:
        • <server>::<tool> (ok|failed)
          <structuredContent.message>
    Timeline:
      - note: <output line>

    Error:
      <error line>
"""

from typing import Dict, List

from mcpchecker_junit.reporting.models import TaskResult, ToolCall

MESSAGE_LIMIT = 200
MESSAGE_MAX_LINES = 3
MESSAGE_INDENT = " " * 6
WRAP_WIDTH = 100


def wrap_text(text: str, max_width: int) -> List[str]:
    """Greedy word wrap. Words longer than ``max_width`` are not split."""
    words = text.split()
    if not words:
        return []

    lines = []
    current_line = words[0]
    for word in words[1:]:
        if len(current_line) + 1 + len(word) <= max_width:
            current_line += " " + word
        else:
            lines.append(current_line)
            current_line = word
    lines.append(current_line)
    return lines


def group_tool_calls_by_server(tool_calls: List[ToolCall]) -> Dict[str, int]:
    """Successful call count per server, in order of first appearance."""
    groups: Dict[str, int] = {}
    for call in tool_calls:
        if call.success:
            groups[call.server_name] = groups.get(call.server_name, 0) + 1
    return groups


def format_tool_message(message: str) -> List[str]:
    """Lines (already indented) for a tool's structured message."""
    if len(message) > MESSAGE_LIMIT:
        lines = message.split("\n")
        if len(lines) > MESSAGE_MAX_LINES:
            return [
                f"{MESSAGE_INDENT}{lines[0].strip()}",
                f"{MESSAGE_INDENT}… (+{len(lines) - 1} lines)",
            ]
        return [f"{MESSAGE_INDENT}{message[:MESSAGE_LIMIT]}... (truncated)"]

    formatted = message.strip().replace("\n", "\n" + MESSAGE_INDENT)
    return [f"{MESSAGE_INDENT}{formatted}"]


def _format_call_history(result: TaskResult) -> List[str]:
    history = result.call_history
    tool_count = len(history.tool_calls)
    resource_count = len(history.resource_reads)
    if tool_count == 0 and resource_count == 0:
        return []

    summary = f"Call history: tools={tool_count}"
    servers = group_tool_calls_by_server(history.tool_calls)
    if servers:
        summary += " (" + ", ".join(f"{server}:{count} ok" for server, count in servers.items()) + ")"
    if resource_count > 0:
        summary += f" resources={resource_count}"
    lines = [summary]

    if history.tool_calls:
        lines.append("  Tool output:")
        for call in history.tool_calls:
            marker = "ok" if call.success else "failed"
            lines.append(f"    • {call.server_name}::{call.name} ({marker})")
            message = call.structured_message()
            if message:
                lines.extend(format_tool_message(message))
    return lines


def _format_timeline(task_output: str) -> List[str]:
    lines = ["Timeline:"]
    for line in task_output.split("\n"):
        line = line.strip()
        if not line:
            continue
        if len(line) > WRAP_WIDTH:
            for i, wrapped in enumerate(wrap_text(line, WRAP_WIDTH)):
                lines.append(f"  - note: {wrapped}" if i == 0 else f"    {wrapped}")
        else:
            lines.append(f"  - note: {line}")
    return lines


def format_human_readable(result: TaskResult) -> str:
    """Render a task result as the multi-line summary shown in CI."""
    lines = [
        f"Task: {result.task_name}",
        f"Path: {result.task_path}",
        f"Difficulty: {result.difficulty}",
        f"Status: {'PASSED' if result.task_passed else 'FAILED'}",
        f"Assertions: {result.passed_assertion_count}/{len(result.assertion_results)} passed",
    ]

    lines.extend(_format_call_history(result))

    if result.task_output:
        lines.extend(_format_timeline(result.task_output))

    if result.task_error:
        lines.append("")
        lines.append("Error:")
        lines.extend(f"  {line}" for line in result.task_error.split("\n") if line)

    return "\n".join(lines) + "\n"
