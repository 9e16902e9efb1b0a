"""Turn a leaf's command string into a process invocation.

Leading sentinels select how the command runs:

``!cmd``
    run ``cmd`` directly, without a shell or profile, echoing it first.
``_cmd``
    run ``cmd`` through the shell after sourcing the profile, without echo.
``cmd``
    run ``cmd`` through the shell after sourcing the profile, echoing it.

Shell-wrapped commands run with ``-o pipefail`` so a failing stage anywhere
in a pipeline fails the whole command.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from enum import Enum

from sm_common.settings import LauncherSettings

DIRECT_SENTINEL = "!"
QUIET_SENTINEL = "_"


class ExecutionMode(str, Enum):
    DIRECT = "direct"
    SHELL = "shell"


@dataclass(frozen=True)
class ExecutionSpec:
    raw_command: str
    command: str
    mode: ExecutionMode
    verbose: bool
    argv: tuple[str, ...]

    @property
    def display(self) -> str:
        return self.raw_command


def wrap_in_shell(command: str, settings: LauncherSettings) -> tuple[str, ...]:
    """Build ``<shell> -o pipefail -c ". <profile>; <command>"``."""
    line = command
    if settings.profile:
        line = f". {settings.profile}; {command}"
    return (settings.shell, "-o", "pipefail", "-c", line)


def direct_argv(command: str) -> tuple[str, ...]:
    try:
        return tuple(shlex.split(command))
    except ValueError:
        # Unbalanced quotes: hand the whole string over as the program name
        # and let the launch fail with the OS error.
        return (command,) if command else ()


def resolve_command(
    raw_command: str, settings: LauncherSettings | None = None
) -> ExecutionSpec:
    settings = settings or LauncherSettings()

    if raw_command.startswith(DIRECT_SENTINEL):
        command = raw_command[len(DIRECT_SENTINEL):]
        return ExecutionSpec(
            raw_command=raw_command,
            command=command,
            mode=ExecutionMode.DIRECT,
            verbose=True,
            argv=direct_argv(command),
        )

    command = raw_command
    verbose = True
    if command.startswith(QUIET_SENTINEL):
        command = command[len(QUIET_SENTINEL):]
        verbose = False

    argv = wrap_in_shell(command, settings) if command.strip() else ()
    return ExecutionSpec(
        raw_command=raw_command,
        command=command,
        mode=ExecutionMode.SHELL,
        verbose=verbose,
        argv=argv,
    )
