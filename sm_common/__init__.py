"""Shared helpers for shellmenu."""

from sm_common.api import LauncherError, LauncherSettings, configure_logging

__all__ = ["configure_logging", "LauncherError", "LauncherSettings"]
