from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from rich.console import Console

from sm_common.api import LauncherSettings, configure_logging
from sm_menu.tree import MenuTree
from sm_runner.executor import CommandExecutor
from sm_ui.tui.headless import HeadlessSelector
from sm_ui.tui.presenter import PresenterExecutionReporter, RichPresenter
from sm_ui.tui.protocols import Presenter, Selector, Terminal
from sm_ui.tui.selector import MenuSelector
from sm_ui.tui.terminal import TerminalCleaner, headless_terminal
from sm_ui.tui.theme import DEFAULT_SELECTOR_STYLE, SelectorStyle


@dataclass
class LauncherContext:
    """Container for the session's collaborators, initialized lazily."""

    headless: bool = False
    picks: list[str] = field(default_factory=list)
    style: SelectorStyle = DEFAULT_SELECTOR_STYLE

    _console: Optional[Console] = None
    _settings: Optional[LauncherSettings] = None
    _presenter: Optional[Presenter] = None
    _executor: Optional[CommandExecutor] = None
    _terminal: Optional[Terminal] = None

    @property
    def console(self) -> Console:
        if self._console is None:
            self._console = Console(highlight=False)
        return self._console

    @console.setter
    def console(self, value: Console) -> None:
        self._console = value

    @property
    def settings(self) -> LauncherSettings:
        if self._settings is None:
            self._settings = LauncherSettings.from_env()
        return self._settings

    @settings.setter
    def settings(self, value: LauncherSettings) -> None:
        self._settings = value

    @property
    def presenter(self) -> Presenter:
        if self._presenter is None:
            self._presenter = RichPresenter(self.console)
        return self._presenter

    @presenter.setter
    def presenter(self, value: Presenter) -> None:
        self._presenter = value

    @property
    def executor(self) -> CommandExecutor:
        if self._executor is None:
            self._executor = CommandExecutor(
                self.settings, reporter=PresenterExecutionReporter(self.presenter)
            )
        return self._executor

    @executor.setter
    def executor(self, value: CommandExecutor) -> None:
        self._executor = value

    @property
    def terminal(self) -> Terminal:
        if self._terminal is None:
            self._terminal = headless_terminal() if self.headless else TerminalCleaner()
        return self._terminal

    @terminal.setter
    def terminal(self, value: Terminal) -> None:
        self._terminal = value

    def selector_for(self, tree: MenuTree) -> Selector:
        if self.headless:
            return HeadlessSelector(tree, picks=list(self.picks))
        return MenuSelector(
            tree,
            style=self.style,
            back_exits_at_root=self.settings.back_exits_at_root,
        )


__all__ = ["LauncherContext", "configure_logging"]
