from __future__ import annotations

import logging
from typing import Any

from prompt_toolkit.application import Application
from prompt_toolkit.input import Input
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.output import Output
from prompt_toolkit.styles import Style

from sm_common.errors import SelectorUnavailableError
from sm_menu.tree import MenuTree
from sm_ui.tui.capabilities import is_tty_available
from sm_ui.tui.keys import build_key_bindings
from sm_ui.tui.navigator import MenuNavigator, NavAction, Selection
from sm_ui.tui.render import Fragment, frame_height, menu_fragments
from sm_ui.tui.theme import DEFAULT_SELECTOR_STYLE, SelectorStyle, prompt_toolkit_menu_style

logger = logging.getLogger(__name__)


class _MenuSelectorApp:
    """Inline prompt_toolkit application for one selector run.

    The layout is a single window sized to the menu, drawn below the prompt
    rather than full screen; every key press redraws it in place.
    """

    def __init__(
        self,
        tree: MenuTree,
        start: int,
        *,
        style: SelectorStyle,
        back_exits_at_root: bool,
        input: Input | None = None,
        output: Output | None = None,
    ) -> None:
        self.navigator = MenuNavigator(tree, start, back_exits_at_root=back_exits_at_root)
        self.style = style
        self.control = FormattedTextControl(self._render, focusable=True, show_cursor=False)
        # Long rows are clipped, not wrapped, so one menu row is one screen row.
        self.window = Window(self.control, dont_extend_height=True, wrap_lines=False)

        self.app: Application[Selection] = Application(
            layout=Layout(HSplit([self.window])),
            key_bindings=build_key_bindings(self._on_action),
            style=Style.from_dict(dict(prompt_toolkit_menu_style(style))),
            full_screen=False,
            erase_when_done=False,
            input=input,
            output=output,
        )

    def _render(self) -> list[Fragment]:
        return menu_fragments(self.navigator, self.style)

    def _on_action(self, action: NavAction, event: Any) -> None:
        if self.navigator.done:
            # Ignore keys typed after the choice.
            return
        result = self.navigator.handle(action)
        if result is not None:
            event.app.exit(result=result)
            return
        event.app.invalidate()

    @property
    def rendered_height(self) -> int:
        """Screen rows the last drawn frame occupies."""
        info = self.window.render_info
        if info is None:
            return frame_height(self.navigator)
        return info.window_height

    def run(self) -> Selection:
        result = self.app.run()
        if result is None:
            return Selection(origin=self.navigator.state.current)
        return result


class MenuSelector:
    """Interactive selector drawing the menu inline with prompt_toolkit."""

    def __init__(
        self,
        tree: MenuTree,
        *,
        style: SelectorStyle = DEFAULT_SELECTOR_STYLE,
        back_exits_at_root: bool = False,
        input: Input | None = None,
        output: Output | None = None,
    ) -> None:
        self.tree = tree
        self.style = style
        self.back_exits_at_root = back_exits_at_root
        self._input = input
        self._output = output
        self.last_menu = tree.root
        self.lines_rendered = 0

    def _check_terminal(self) -> None:
        if self._input is not None and self._output is not None:
            return
        if not is_tty_available():
            raise SelectorUnavailableError(
                "The interactive menu needs a terminal; use --headless with --pick to script it."
            )

    def display(self, start: int | None = None) -> Selection:
        self._check_terminal()
        app = _MenuSelectorApp(
            self.tree,
            self.last_menu if start is None else start,
            style=self.style,
            back_exits_at_root=self.back_exits_at_root,
            input=self._input,
            output=self._output,
        )
        selection = app.run()
        self.last_menu = selection.origin
        self.lines_rendered = app.rendered_height
        if selection.leaf is not None:
            logger.debug(
                "Selected %s from %s",
                selection.leaf.label,
                " > ".join(self.tree.path_to(selection.origin)),
            )
        return selection
