"""
PreToolUse hook adapter.

Reads a tool call as JSON on stdin ({"tool_name": ..., "tool_input": {...}})
and prints a hook decision on stdout. A variant file creation is denied with
the rejection message as the reason; the same message is surfaced to the user
through ``systemMessage``. Anything else prints ``{}`` (no opinion).
"""
import json
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple

from variant_guard.guard import VariantGuard, VariantRejected


def check_variant_file_creation(
    tool_name, tool_input, notify: Optional[Callable[[str, str], Any]] = None
) -> Tuple[bool, Optional[str]]:
    """
    Check if a tool call would create a variant-named file.
    Returns tuple: (should_block: bool, reason: str or None)
    """
    guard = VariantGuard(notify=notify)
    try:
        guard.before_tool_execution(tool_name, tool_input)
    except VariantRejected as e:
        return True, str(e)
    return False, None


def build_hook_output(tool_name, tool_input) -> Dict[str, Any]:
    """Build the JSON decision for one tool call."""
    notices: List[str] = []
    should_block, reason = check_variant_file_creation(
        tool_name, tool_input, notify=lambda message, variant: notices.append(message)
    )

    if not should_block:
        # Empty output = no opinion, let the agent handle normally
        return {}

    output: Dict[str, Any] = {
        "hookSpecificOutput": {
            "hookEventName": "PreToolUse",
            "permissionDecision": "deny",
            "permissionDecisionReason": reason,
        }
    }
    if notices:
        output["systemMessage"] = notices[0]
    return output


def main(stdin=None, stdout=None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        data = json.load(stdin)
    except (json.JSONDecodeError, ValueError):
        print(json.dumps({}), file=stdout)
        return 0

    if not isinstance(data, dict):
        print(json.dumps({}), file=stdout)
        return 0

    tool_name = data.get("tool_name")
    tool_input = data.get("tool_input", {})

    output = build_hook_output(tool_name, tool_input)
    print(json.dumps(output, ensure_ascii=False), file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
