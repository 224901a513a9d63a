"""
Before-tool-execution guard.

The host calls ``before_tool_execution(tool, args)`` before running any tool.
It returns normally to allow the call, or raises ``VariantRejected`` to abort
it when the call would create a file with a variant name.

    guard = VariantGuard(notify=lambda msg, variant: ui.toast(msg, variant))
    guard.before_tool_execution("write", {"filePath": "src/simple_utils.js"})
    # -> VariantRejected: Rejected write for "src/simple_utils.js". ...
"""
import asyncio
import inspect
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple

from variant_guard import config
from variant_guard.classifier import variant_tokens
from variant_guard.diff_scan import extract_added_files

# Argument keys, in priority order
PATH_KEYS = ("filePath", "path", "file_path")
PATCH_KEYS = ("patch", "content")

VIA_WRITE = "write"
VIA_PATCH = "patch(add)"

Notifier = Callable[[str, str], Any]


@dataclass(frozen=True)
class Rejection:
    path: str
    tool: str
    via: str
    message: str


class VariantRejected(Exception):
    """Raised to abort a tool call that would create a variant file."""

    def __init__(self, rejection: Rejection):
        super().__init__(rejection.message)
        self.rejection = rejection

    @property
    def path(self) -> str:
        return self.rejection.path

    @property
    def tool(self) -> str:
        return self.rejection.tool

    @property
    def via(self) -> str:
        return self.rejection.via


def format_rejection_message(path: str, via: str, tokens: Iterable[str] = (), tool: Optional[str] = None) -> str:
    tokens = list(tokens)
    token_note = ""
    if tokens:
        token_note = " (variant token: " + ", ".join(f'"{t}"' for t in tokens) + ")"
    action = via
    if tool and tool != via:
        action = f"{tool} ({via})"
    return (
        f'Rejected {action} for "{path}"{token_note}. '
        "Variant filenames such as \"enhanced\", \"simple\", \"backup\" or \"v2\" "
        "are not allowed: this project keeps a single source of truth. "
        "Edit the existing file in place, or produce a patch that updates the original."
    )


def _first_arg(args: Mapping[str, Any], keys: Tuple[str, ...]) -> Any:
    for key in keys:
        value = args.get(key)
        if value is not None:
            return value
    return None


def _candidate_paths(tool: str, args: Mapping[str, Any]) -> Tuple[Optional[str], List[str]]:
    """Return (via, candidate paths) for a tool call, or (None, []) if it is not guarded."""
    kind = tool.lower() if isinstance(tool, str) else ""

    if kind in config.create_tools():
        path = _first_arg(args, PATH_KEYS)
        return VIA_WRITE, [path] if isinstance(path, str) else []

    if kind in config.patch_tools():
        return VIA_PATCH, extract_added_files(_first_arg(args, PATCH_KEYS))

    return None, []


def find_rejection(
    tool: str,
    args: Optional[Mapping[str, Any]],
    banned: Optional[Iterable[str]] = None,
) -> Optional[Rejection]:
    """
    Decide whether a tool call must be rejected.

    Args:
        tool: Tool kind identifier (e.g. "write", "patch").
        args: Tool arguments.
        banned: Banned token set; defaults to the configured set.

    Returns:
        A Rejection for the first variant path, or None to allow the call.
    """
    if not isinstance(args, Mapping):
        args = {}

    via, paths = _candidate_paths(tool, args)
    for path in paths:
        tokens = variant_tokens(path, banned)
        if tokens:
            return Rejection(
                path=path,
                tool=tool,
                via=via,
                message=format_rejection_message(path, via, tokens, tool=tool),
            )
    return None


async def _await_notification(awaitable) -> None:
    await awaitable


def _loop_running() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


class VariantGuard:
    """
    Tool-call interceptor.

    Args:
        notify: Optional notification sink called as ``notify(message, "error")``
            before a rejection is raised. It may be a plain or an ``async``
            callable. Its failures are ignored.
        banned: Banned token set; defaults to the configured set.
    """

    def __init__(self, notify: Optional[Notifier] = None, banned: Optional[Iterable[str]] = None):
        self.notify = notify
        self.banned = frozenset(banned) if banned is not None else None

    def _notify(self, message: str) -> None:
        if self.notify is None:
            return
        result = None
        try:
            result = self.notify(message, "error")
            if inspect.isawaitable(result):
                if _loop_running():
                    # Cannot block inside the host's loop; see abefore_tool_execution
                    raise RuntimeError("async notifier called from a running event loop")
                asyncio.run(_await_notification(result))
        except Exception:
            # Never let the notification replace the rejection
            if inspect.iscoroutine(result):
                result.close()

    async def _anotify(self, message: str) -> None:
        if self.notify is None:
            return
        try:
            result = self.notify(message, "error")
            if inspect.isawaitable(result):
                await result
        except Exception:
            pass  # Never let the notification replace the rejection

    def before_tool_execution(self, tool: str, args: Optional[Mapping[str, Any]]) -> None:
        """
        Allow or reject a tool call.

        An async notifier is run to completion on a fresh event loop. Hosts
        already inside a running loop use ``abefore_tool_execution`` instead.
        """
        rejection = find_rejection(tool, args, self.banned)
        if rejection is None:
            return
        self._notify(rejection.message)
        raise VariantRejected(rejection)

    async def abefore_tool_execution(self, tool: str, args: Optional[Mapping[str, Any]]) -> None:
        """``before_tool_execution`` for hosts running an event loop."""
        rejection = find_rejection(tool, args, self.banned)
        if rejection is None:
            return
        await self._anotify(rejection.message)
        raise VariantRejected(rejection)


def before_tool_execution(
    tool: str,
    args: Optional[Mapping[str, Any]],
    notify: Optional[Notifier] = None,
) -> None:
    """Module-level shortcut for ``VariantGuard(notify).before_tool_execution``."""
    VariantGuard(notify=notify).before_tool_execution(tool, args)
