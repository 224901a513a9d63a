"""
Centralized configuration for variant-guard.

Defaults are defined here. Users can override by creating
~/.variant-guard/config.yaml (plain JSON is accepted too, since JSON is YAML).

Example:

    extra_banned_tokens: [draft, wip]
    allowed_tokens: [new]
"""

from pathlib import Path
from typing import Any, FrozenSet, Optional

import yaml

from variant_guard.classifier import BANNED_TOKENS

# Default configuration values
DEFAULTS = {
    # Added to the built-in banned token list
    "extra_banned_tokens": [],
    # Removed from the banned token list (e.g. "new" in a codebase full of new_*_form files)
    "allowed_tokens": [],
    # Tool kinds that create a file from a target path
    "create_tools": ["write", "create"],
    # Tool kinds that apply a unified diff / patch envelope
    "patch_tools": ["patch", "apply_patch", "apply-diff"],
}

_config_cache: Optional[dict[str, Any]] = None
_banned_cache: Optional[FrozenSet[str]] = None


def config_path() -> Path:
    return Path.home() / ".variant-guard" / "config.yaml"


def _load_user_config() -> dict[str, Any]:
    """Load user config from ~/.variant-guard/config.yaml if it exists."""
    path = config_path()
    if path.exists():
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (yaml.YAMLError, IOError, UnicodeDecodeError):
            return {}
        return data if isinstance(data, dict) else {}
    return {}


def get_config() -> dict[str, Any]:
    """
    Get merged configuration (defaults + user overrides).

    Returns:
        Dict with all config values
    """
    global _config_cache
    if _config_cache is None:
        _config_cache = {**DEFAULTS, **_load_user_config()}
    return _config_cache


def get(key: str, default: Any = None) -> Any:
    """
    Get a specific config value.

    Args:
        key: Config key name
        default: Default if key not found

    Returns:
        Config value
    """
    config = get_config()
    return config.get(key, default)


def reload_config() -> dict[str, Any]:
    """
    Reload configuration from disk (clears cache).

    Returns:
        Fresh merged config
    """
    global _config_cache, _banned_cache
    _config_cache = None
    _banned_cache = None
    return get_config()


def _token_list(key: str) -> list[str]:
    value = get(key, DEFAULTS[key])
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple, set)):
        return []
    return [str(v).strip().lower() for v in value if str(v).strip()]


# Convenience accessors for common settings
def banned_tokens() -> FrozenSet[str]:
    """Effective banned token set: built-ins + extra_banned_tokens - allowed_tokens."""
    global _banned_cache
    if _banned_cache is None:
        extra = _token_list("extra_banned_tokens")
        allowed = _token_list("allowed_tokens")
        _banned_cache = frozenset((BANNED_TOKENS | set(extra)) - set(allowed))
    return _banned_cache


def create_tools() -> FrozenSet[str]:
    """Tool kinds treated as direct file creation."""
    return frozenset(_token_list("create_tools"))


def patch_tools() -> FrozenSet[str]:
    """Tool kinds treated as patch application."""
    return frozenset(_token_list("patch_tools"))
