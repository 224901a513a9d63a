"""
Find files added by a patch.

This is a bounded line scan, not a diff parser. It recognizes:

- git headers: ``diff --git a/X b/Y`` followed within a few lines by
  ``new file mode ...`` or ``--- /dev/null``, then ``+++ b/<path>``
- the apply-patch envelope used by agent patch tools: ``*** Add File: <path>``

Renames, copies, binary diffs and other diff dialects are not detected.
"""
import re
from typing import List

GIT_HEADER_RE = re.compile(r"^diff --git a/.+ b/(.+)$")
NEW_FILE_MODE_RE = re.compile(r"^new file mode ")
DEV_NULL_RE = re.compile(r"^---\s+/dev/null\s*$")
NEW_PATH_RE = re.compile(r"^\+\+\+\s+b/(.+?)\s*$")
ADD_FILE_RE = re.compile(r"^\*\*\* Add File:\s*(.+?)\s*$")

# Lines after a git header searched for a new-file marker
MARKER_WINDOW = 8
# Lines from the marker searched for the +++ b/<path> line
PATH_WINDOW = 6


def _is_new_file_marker(line: str) -> bool:
    return bool(NEW_FILE_MODE_RE.match(line) or DEV_NULL_RE.match(line))


def _find_new_path(lines: List[str], start: int) -> str | None:
    for k in range(start, min(start + PATH_WINDOW, len(lines))):
        match = NEW_PATH_RE.match(lines[k])
        if match:
            return match.group(1)
    return None


def extract_added_files(diff_text) -> List[str]:
    """
    Extract paths of files newly created by a patch.

    Args:
        diff_text: Raw unified diff (or apply-patch envelope) text.

    Returns:
        Unique paths in order of first appearance. Empty for non-string
        input or text with no recognizable new-file headers.
    """
    if not isinstance(diff_text, str):
        return []

    found: dict[str, None] = {}
    lines = diff_text.splitlines()

    for i, line in enumerate(lines):
        add_match = ADD_FILE_RE.match(line)
        if add_match:
            found.setdefault(add_match.group(1), None)
            continue

        if not GIT_HEADER_RE.match(line):
            continue

        for j in range(i + 1, min(i + MARKER_WINDOW, len(lines))):
            if GIT_HEADER_RE.match(lines[j]):
                # Next file's header; this one was a modification
                break
            if _is_new_file_marker(lines[j]):
                path = _find_new_path(lines, j)
                if path:
                    found.setdefault(path, None)
                break

    return list(found)
