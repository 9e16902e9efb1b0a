"""Public API surface for sm_common."""

from sm_common.config.env import parse_bool_env, parse_str_env
from sm_common.errors import (
    CommandLaunchError,
    ConfigurationError,
    LauncherError,
    MenuFileError,
    SelectorUnavailableError,
    UnsupportedFormatError,
)
from sm_common.logging import configure_logging
from sm_common.settings import DEFAULT_PROFILE, DEFAULT_SHELL, LauncherSettings

__all__ = [
    "CommandLaunchError",
    "ConfigurationError",
    "DEFAULT_PROFILE",
    "DEFAULT_SHELL",
    "LauncherError",
    "LauncherSettings",
    "MenuFileError",
    "SelectorUnavailableError",
    "UnsupportedFormatError",
    "configure_logging",
    "parse_bool_env",
    "parse_str_env",
]
