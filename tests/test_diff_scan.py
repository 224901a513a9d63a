"""Tests for extracting added files from patches."""
from variant_guard.diff_scan import extract_added_files


def new_file_diff(path: str, body=("x = 1",)) -> str:
    """git diff section creating ``path``."""
    lines = [
        f"diff --git a/{path} b/{path}",
        "new file mode 100644",
        "index 0000000..e69de29",
        "--- /dev/null",
        f"+++ b/{path}",
        f"@@ -0,0 +1,{len(body)} @@",
    ]
    lines.extend(f"+{line}" for line in body)
    return "\n".join(lines) + "\n"


def modified_file_diff(path: str) -> str:
    """git diff section modifying an existing ``path``."""
    return "\n".join([
        f"diff --git a/{path} b/{path}",
        "index 1111111..2222222 100644",
        f"--- a/{path}",
        f"+++ b/{path}",
        "@@ -1 +1 @@",
        "-old_value = 1",
        "+old_value = 2",
    ]) + "\n"


class TestGitDiffs:
    """Tests for git-style unified diffs."""

    def test_two_new_files(self):
        diff = new_file_diff("pkg/new_enhanced.py") + new_file_diff("pkg/normal.py")
        assert extract_added_files(diff) == ["pkg/new_enhanced.py", "pkg/normal.py"]

    def test_modified_file_ignored(self):
        diff = modified_file_diff("pkg/existing.py") + new_file_diff("pkg/added.py")
        assert extract_added_files(diff) == ["pkg/added.py"]

    def test_only_modifications(self):
        assert extract_added_files(modified_file_diff("pkg/existing.py")) == []

    def test_dev_null_without_new_file_mode(self):
        diff = "\n".join([
            "diff --git a/docs/guide_v2.md b/docs/guide_v2.md",
            "--- /dev/null",
            "+++ b/docs/guide_v2.md",
            "@@ -0,0 +1 @@",
            "+# Guide",
        ])
        assert extract_added_files(diff) == ["docs/guide_v2.md"]

    def test_duplicates_collapsed(self):
        diff = new_file_diff("pkg/a.py") + new_file_diff("pkg/b.py") + new_file_diff("pkg/a.py")
        assert extract_added_files(diff) == ["pkg/a.py", "pkg/b.py"]

    def test_crlf_line_endings(self):
        diff = new_file_diff("pkg/win.py").replace("\n", "\r\n")
        assert extract_added_files(diff) == ["pkg/win.py"]

    def test_mode_change_then_new_file(self):
        """A header without a marker does not borrow the next file's marker."""
        diff = "\n".join([
            "diff --git a/run.sh b/run.sh",
            "old mode 100644",
            "new mode 100755",
        ]) + "\n" + new_file_diff("pkg/fresh.py")
        assert extract_added_files(diff) == ["pkg/fresh.py"]

    def test_marker_beyond_window_ignored(self):
        diff = "\n".join(
            ["diff --git a/pkg/x.py b/pkg/x.py"]
            + ["similarity index 90%"] * 10
            + ["new file mode 100644", "--- /dev/null", "+++ b/pkg/x.py"]
        )
        assert extract_added_files(diff) == []

    def test_truncated_diff(self):
        """Header and marker but no +++ line: nothing found, no error."""
        diff = "diff --git a/pkg/cut.py b/pkg/cut.py\nnew file mode 100644\n"
        assert extract_added_files(diff) == []


class TestApplyPatchEnvelope:
    """Tests for the *** Add File: patch format."""

    def test_add_file(self):
        patch = "\n".join([
            "*** Begin Patch",
            "*** Add File: src/helpers_copy.py",
            "+def helper():",
            "+    pass",
            "*** Update File: src/main.py",
            "@@",
            "-a",
            "+b",
            "*** End Patch",
        ])
        assert extract_added_files(patch) == ["src/helpers_copy.py"]


class TestMalformedInput:
    """Non-diff input degrades to an empty result."""

    def test_empty_string(self):
        assert extract_added_files("") == []

    def test_plain_text(self):
        assert extract_added_files("just some words\n+++ b/not_a_header.py\n") == []

    def test_non_string(self):
        assert extract_added_files(None) == []
        assert extract_added_files(42) == []
        assert extract_added_files(["diff --git a/x b/x"]) == []
