"""
Filename classification for variant files.

A "variant" file is a near-duplicate of an existing file whose name says so:
``enhanced_parser.py``, ``utils_v2.ts``, ``ConfigBackup.go``. Classification
only looks at the basename and never touches the filesystem.
"""
import re
from typing import Iterable, List, Optional

# Default banned tokens (case-insensitive, exact token match).
# Extend through ~/.variant-guard/config.yaml rather than editing this list.
BANNED_TOKENS = frozenset({
    "enhanced", "enhance",
    "simple", "simplified",
    "refactored", "refactor",
    "optimized", "optimize",
    "alternate", "alternative", "alt",
    "new", "final", "updated", "rewrite",
    "copy", "backup", "bak",
    "temp", "tmp",
    "legacy", "old",
})

# v2, v3, v10 ... but not "v" or "version"
VERSION_TOKEN_RE = re.compile(r"^v\d+$")

_SEPARATOR_RE = re.compile(r"[\\/]")
_EXTENSION_RE = re.compile(r"\.[^.]+$")
_CAMEL_BOUNDARY_RE = re.compile(r"([a-z0-9])([A-Z])")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def basename_of(path: str) -> str:
    """
    Final path segment, accepting both / and \\ separators.

    A path ending in a separator names a directory and has an empty basename.
    """
    return _SEPARATOR_RE.split(path)[-1]


def strip_extension(basename: str) -> str:
    """
    Remove the last extension only.

    ``archive.tar.gz`` -> ``archive.tar``. A name that is nothing but an
    extension (``.env``) is returned unchanged so it still yields a token.
    """
    stem = _EXTENSION_RE.sub("", basename)
    return stem if stem else basename


def tokenize(basename: str) -> List[str]:
    """
    Split a basename into lowercase word tokens.

    CamelCase boundaries and any non-alphanumeric run act as separators:

        >>> tokenize("FeatureEnhanced.go")
        ['feature', 'enhanced']
        >>> tokenize("parser_v2.rs")
        ['parser', 'v2']
    """
    stem = strip_extension(basename)
    snake = _CAMEL_BOUNDARY_RE.sub(r"\1_\2", stem).lower()
    return [t for t in _NON_ALNUM_RE.split(snake) if t]


def is_version_token(token: str) -> bool:
    return bool(VERSION_TOKEN_RE.match(token))


def variant_tokens(path: str, banned: Optional[Iterable[str]] = None) -> List[str]:
    """
    Return the tokens of ``path``'s basename that mark it as a variant.

    Args:
        path: File path, possibly with directory components.
        banned: Banned token set. Defaults to the configured set
            (built-in tokens plus user overrides).

    Returns:
        Offending tokens in the order they appear (empty if the name is clean).
    """
    if not isinstance(path, str) or not path:
        return []
    if banned is None:
        from variant_guard import config
        banned = config.banned_tokens()
    elif not isinstance(banned, (set, frozenset)):
        banned = frozenset(banned)

    return [
        t for t in tokenize(basename_of(path))
        if t in banned or is_version_token(t)
    ]


def is_variant_path(path: str, banned: Optional[Iterable[str]] = None) -> bool:
    """True if the basename of ``path`` signals a variant file."""
    return bool(variant_tokens(path, banned))
