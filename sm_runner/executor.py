"""Run menu commands attached to the launcher's terminal."""

from __future__ import annotations

import logging
import signal
import subprocess
from dataclasses import dataclass
from typing import Callable, Protocol, Sequence

from sm_common.errors import CommandLaunchError
from sm_common.settings import LauncherSettings
from sm_menu.tree import MenuNode
from sm_runner.commands import ExecutionSpec, resolve_command
from sm_runner.interrupts import ChildSignalGuard

logger = logging.getLogger(__name__)

EXIT_NOT_FOUND = 127
EXIT_NOT_EXECUTABLE = 126
EXIT_LAUNCH_FAILED = 1

Launcher = Callable[[Sequence[str]], int]


@dataclass(frozen=True)
class ExecutionResult:
    returncode: int
    error: str | None = None
    interrupted: bool = False

    @property
    def ok(self) -> bool:
        return self.returncode == 0 and self.error is None


class ExecutionReporter(Protocol):
    def starting(self, spec: ExecutionSpec) -> None: ...

    def failed(self, spec: ExecutionSpec, message: str) -> None: ...


class LoggingReporter:
    """Reporter used when no terminal presenter is wired in."""

    def starting(self, spec: ExecutionSpec) -> None:
        logger.info("running %s", spec.display)

    def failed(self, spec: ExecutionSpec, message: str) -> None:
        logger.error("%s: %s", spec.display, message)


def run_attached(argv: Sequence[str]) -> int:
    """Run ``argv`` with the launcher's stdin, stdout and stderr and wait for it."""
    try:
        completed = subprocess.run(list(argv), check=False)
    except FileNotFoundError as exc:
        raise CommandLaunchError(
            str(exc), context={"argv": list(argv), "returncode": EXIT_NOT_FOUND}, cause=exc
        ) from exc
    except PermissionError as exc:
        raise CommandLaunchError(
            str(exc),
            context={"argv": list(argv), "returncode": EXIT_NOT_EXECUTABLE},
            cause=exc,
        ) from exc
    except (OSError, ValueError) as exc:
        # ValueError: arguments the OS cannot take, such as an embedded NUL.
        raise CommandLaunchError(
            str(exc),
            context={"argv": list(argv), "returncode": EXIT_LAUNCH_FAILED},
            cause=exc,
        ) from exc
    return completed.returncode


def describe_returncode(returncode: int) -> str:
    """Describe a failing return code the way a shell user expects to read it."""
    if returncode < 0:
        try:
            return f"signal: {signal.Signals(-returncode).name}"
        except ValueError:
            return f"signal: {-returncode}"
    return f"exit status {returncode}"


class CommandExecutor:
    """Resolve and run the command bound to a menu leaf.

    ``execute`` never raises for problems with the child: a non-zero exit, a
    launch failure or an absorbed interrupt all come back as an
    ExecutionResult after being reported.
    """

    def __init__(
        self,
        settings: LauncherSettings | None = None,
        *,
        reporter: ExecutionReporter | None = None,
        launcher: Launcher | None = None,
    ) -> None:
        self.settings = settings or LauncherSettings()
        self._reporter = reporter or LoggingReporter()
        self._launcher = launcher or run_attached

    def resolve(self, target: MenuNode | ExecutionSpec | str) -> ExecutionSpec:
        if isinstance(target, ExecutionSpec):
            return target
        if isinstance(target, MenuNode):
            return resolve_command(target.command, self.settings)
        return resolve_command(target, self.settings)

    def execute(self, target: MenuNode | ExecutionSpec | str) -> ExecutionResult:
        spec = self.resolve(target)
        self._reporter.starting(spec)

        if not spec.argv:
            return self._fail(spec, ExecutionResult(EXIT_LAUNCH_FAILED, "empty command"))

        logger.debug("Launching %s (%s)", spec.argv, spec.mode.value)
        with ChildSignalGuard() as guard:
            try:
                returncode = self._launcher(spec.argv)
            except CommandLaunchError as exc:
                code = exc.context.get("returncode", EXIT_LAUNCH_FAILED)
                return self._fail(
                    spec, ExecutionResult(code, str(exc), interrupted=guard.interrupted)
                )

        if returncode != 0:
            return self._fail(
                spec,
                ExecutionResult(
                    returncode, describe_returncode(returncode), interrupted=guard.interrupted
                ),
            )
        logger.debug("Command %r finished", spec.display)
        return ExecutionResult(0, interrupted=guard.interrupted)

    def _fail(self, spec: ExecutionSpec, result: ExecutionResult) -> ExecutionResult:
        message = result.error or describe_returncode(result.returncode)
        logger.info("Command %r failed: %s", spec.display, message)
        self._reporter.failed(spec, message)
        return result
