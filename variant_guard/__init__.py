"""Reject tool calls that would create variant files (enhanced_foo.js, foo_v2.py, ...)."""

__version__ = "0.1.0"

from variant_guard.classifier import BANNED_TOKENS, is_variant_path, tokenize, variant_tokens
from variant_guard.diff_scan import extract_added_files
from variant_guard.guard import (
    Rejection,
    VariantGuard,
    VariantRejected,
    before_tool_execution,
    find_rejection,
)

__all__ = [
    "BANNED_TOKENS",
    "Rejection",
    "VariantGuard",
    "VariantRejected",
    "before_tool_execution",
    "extract_added_files",
    "find_rejection",
    "is_variant_path",
    "tokenize",
    "variant_tokens",
]
