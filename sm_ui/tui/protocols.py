from __future__ import annotations

from typing import Protocol

from sm_ui.tui.navigator import Selection


class Selector(Protocol):
    """Shows a menu and returns the chosen leaf together with its menu.

    ``last_menu`` is the branch the previous call ended in, so the caller can
    resume there; ``lines_rendered`` is the height of the frame left on
    screen by the previous call.
    """

    last_menu: int
    lines_rendered: int

    def display(self, start: int | None = None) -> Selection: ...


class Terminal(Protocol):
    def clear_lines(self, count: int) -> None: ...


class PresenterSink(Protocol):
    def emit_line(self, message: str, style: str | None) -> None: ...


class Presenter(Protocol):
    def line(self, message: str = "", style: str | None = None) -> None: ...
