"""Select, run, show the menu again: the launcher's main loop."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sm_menu.tree import MenuTree
from sm_runner.executor import CommandExecutor, ExecutionResult
from sm_ui.tui.protocols import Presenter, Selector, Terminal

logger = logging.getLogger(__name__)


@dataclass
class SessionSummary:
    runs: int = 0
    failures: int = 0
    interrupted: int = 0

    def record(self, result: ExecutionResult) -> None:
        self.runs += 1
        if not result.ok:
            self.failures += 1
        if result.interrupted:
            self.interrupted += 1


def run_session(
    tree: MenuTree,
    selector: Selector,
    executor: CommandExecutor,
    terminal: Terminal,
    presenter: Presenter,
) -> SessionSummary:
    """Loop until the user quits the menu.

    After each command the menu comes back at the branch the command was
    picked from. Command failures are reported by the executor and never end
    the session.
    """
    summary = SessionSummary()
    selection = selector.display(tree.root)

    while selection.leaf is not None:
        summary.record(executor.execute(selection.leaf))
        presenter.line()
        selection = selector.display(selection.origin)

    terminal.clear_lines(selector.lines_rendered)
    logger.debug(
        "Session finished: %s run(s), %s failure(s), %s interrupted",
        summary.runs,
        summary.failures,
        summary.interrupted,
    )
    return summary
