#!/usr/bin/env python3
"""
variant-guard - block variant filenames (enhanced_foo.py, foo_v2.ts, foo_backup.js).

Subcommands:
    variant-guard check PATH...     Classify file paths
    variant-guard scan-diff [FILE]  List files added by a diff and flag variants
    variant-guard hook              PreToolUse hook: JSON tool call on stdin

Examples:

    git ls-files | variant-guard check
    git diff --cached | variant-guard scan-diff
"""

import sys

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from variant_guard import hook as hook_module
from variant_guard.classifier import tokenize, basename_of, variant_tokens
from variant_guard.diff_scan import extract_added_files

console = Console()
err_console = Console(stderr=True)


def _verdict_table(title: str, paths: list[str]) -> Table:
    table = Table(title=title)
    table.add_column("Path", style="cyan", overflow="fold")
    table.add_column("Tokens")
    table.add_column("Verdict")

    for path in paths:
        bad = set(variant_tokens(path))
        # Text, not markup: paths like "pages/[id].tsx" contain brackets
        tokens = Text()
        for i, token in enumerate(tokenize(basename_of(path))):
            if i:
                tokens.append(" ")
            tokens.append(token, style="bold red" if token in bad else "dim")
        verdict = Text("variant", style="red") if bad else Text("ok", style="green")
        table.add_row(Text(path), tokens, verdict)
    return table


def _report(title: str, paths: list[str], quiet: bool) -> None:
    offenders = [p for p in paths if variant_tokens(p)]
    if quiet:
        for path in offenders:
            click.echo(path)
    else:
        console.print(_verdict_table(title, paths))
        if offenders:
            err_console.print(
                f"❌ {len(offenders)} variant filename(s). Edit the existing file "
                "in place instead of creating an alternate copy."
            )
    if offenders:
        sys.exit(1)


@click.group()
@click.version_option(package_name="variant-guard")
def main():
    """
    Enforce a single source of truth: reject variant filenames such as
    enhanced_foo.js, foo_v2.py or foo_backup.ts.
    """


@main.command()
@click.argument("paths", nargs=-1)
@click.option("--quiet", "-q", is_flag=True, help="Only print offending paths")
def check(paths, quiet):
    """Classify PATHS (read one per line from stdin when none given)."""
    if not paths and not sys.stdin.isatty():
        paths = [line.strip() for line in sys.stdin if line.strip()]
    if not paths:
        raise click.UsageError("No paths given")
    _report("Filename check", list(paths), quiet)


@main.command("scan-diff")
@click.argument("diff_file", type=click.File("r"), default="-")
@click.option("--quiet", "-q", is_flag=True, help="Only print offending paths")
def scan_diff(diff_file, quiet):
    """List files added by a unified diff read from DIFF_FILE (default: stdin)."""
    added = extract_added_files(diff_file.read())
    if not added:
        if not quiet:
            console.print("✨ No added files found")
        return
    _report("Files added by diff", added, quiet)


@main.command()
def hook():
    """Run as a PreToolUse hook (tool call JSON on stdin, decision on stdout)."""
    sys.exit(hook_module.main())


if __name__ == "__main__":
    main()
