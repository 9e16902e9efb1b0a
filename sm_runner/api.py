"""Public API surface for sm_runner."""

from sm_runner.commands import (
    DIRECT_SENTINEL,
    QUIET_SENTINEL,
    ExecutionMode,
    ExecutionSpec,
    resolve_command,
    wrap_in_shell,
)
from sm_runner.executor import (
    CommandExecutor,
    ExecutionReporter,
    ExecutionResult,
    LoggingReporter,
    describe_returncode,
    run_attached,
)
from sm_runner.interrupts import ChildSignalGuard

__all__ = [
    "ChildSignalGuard",
    "CommandExecutor",
    "DIRECT_SENTINEL",
    "ExecutionMode",
    "ExecutionReporter",
    "ExecutionResult",
    "ExecutionSpec",
    "LoggingReporter",
    "QUIET_SENTINEL",
    "describe_returncode",
    "resolve_command",
    "run_attached",
    "wrap_in_shell",
]
