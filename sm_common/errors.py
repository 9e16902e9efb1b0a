"""Shared error taxonomy for shellmenu."""

from __future__ import annotations

from typing import Any, Mapping


def _normalize_context_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple)):
        return [_normalize_context_value(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {key: _normalize_context_value(val) for key, val in context.items()}


class LauncherError(Exception):
    """Base error type for typed failure handling."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.error_type, "message": str(self), "context": self.context}


class ConfigurationError(LauncherError):
    """Failure due to invalid runtime settings."""


class MenuFileError(LauncherError):
    """The menu file could not be read or parsed."""


class UnsupportedFormatError(MenuFileError):
    """The menu file extension is neither .json nor .yaml."""


class SelectorUnavailableError(LauncherError):
    """The interactive selector needs a terminal on stdin and stdout."""


class CommandLaunchError(LauncherError):
    """A menu command could not be started."""
