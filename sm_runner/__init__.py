"""Command resolution and execution for menu leaves."""

from sm_runner.api import CommandExecutor, ExecutionResult, ExecutionSpec, resolve_command

__all__ = ["CommandExecutor", "ExecutionResult", "ExecutionSpec", "resolve_command"]
