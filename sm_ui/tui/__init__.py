"""
Terminal front ends for the menu: the interactive prompt_toolkit selector
and the scripted headless selector.
"""

from sm_ui.tui.headless import HeadlessSelector, RecordingPresenter
from sm_ui.tui.navigator import MenuNavigator, NavAction, Selection
from sm_ui.tui.presenter import RichPresenter
from sm_ui.tui.protocols import Presenter, Selector, Terminal
from sm_ui.tui.selector import MenuSelector
from sm_ui.tui.theme import SelectorStyle

__all__ = [
    "HeadlessSelector",
    "MenuNavigator",
    "MenuSelector",
    "NavAction",
    "Presenter",
    "RecordingPresenter",
    "RichPresenter",
    "Selection",
    "Selector",
    "SelectorStyle",
    "Terminal",
]
