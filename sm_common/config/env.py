"""Environment variable parsing utilities."""

from __future__ import annotations


def parse_bool_env(value: str | None) -> bool | None:
    """Parse a boolean from an environment variable string.

    Returns True for "1", "true", "yes", "on" (case-insensitive).
    Returns None if value is None.
    """
    if value is None:
        return None
    return value.strip().lower() in {"1", "true", "yes", "on"}


def parse_str_env(value: str | None) -> str | None:
    """Return a stripped string, or None when unset.

    An explicitly empty variable is kept as ``""`` so callers can tell
    "disabled" apart from "not configured".
    """
    if value is None:
        return None
    return value.strip()
