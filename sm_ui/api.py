"""Public API surface for sm_ui."""

from sm_ui.session import SessionSummary, run_session
from sm_ui.tui.headless import HeadlessSelector, RecordingPresenter
from sm_ui.tui.navigator import MenuNavigator, NavAction, Selection, SelectionState
from sm_ui.tui.presenter import PresenterExecutionReporter, RichPresenter
from sm_ui.tui.protocols import Presenter, Selector, Terminal
from sm_ui.tui.selector import MenuSelector
from sm_ui.tui.terminal import TerminalCleaner
from sm_ui.tui.theme import DEFAULT_SELECTOR_STYLE, SelectorStyle
from sm_ui.wiring.dependencies import LauncherContext

__all__ = [
    "DEFAULT_SELECTOR_STYLE",
    "HeadlessSelector",
    "LauncherContext",
    "MenuNavigator",
    "MenuSelector",
    "NavAction",
    "Presenter",
    "PresenterExecutionReporter",
    "RecordingPresenter",
    "RichPresenter",
    "Selection",
    "SelectionState",
    "Selector",
    "SelectorStyle",
    "SessionSummary",
    "Terminal",
    "TerminalCleaner",
    "run_session",
]
