from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from sm_menu.tree import MenuNode, MenuTree
from sm_ui.tui.navigator import Selection
from sm_ui.tui.presenter import PresenterBase

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "/"
PARENT_SEGMENT = ".."


def split_pick(pick: str | Sequence[str]) -> tuple[bool, list[str]]:
    """Split a scripted pick into (absolute, segments).

    ``"B/C"`` is relative to the menu the selector starts in, ``"/B/C"``
    starts from the root and ``".."`` steps up one menu.
    """
    if isinstance(pick, str):
        absolute = pick.startswith(PATH_SEPARATOR)
        segments = [seg for seg in pick.split(PATH_SEPARATOR) if seg]
        return absolute, segments
    return False, list(pick)


@dataclass
class HeadlessSelector:
    """Selector that replays scripted picks instead of reading keys.

    Each call to :meth:`display` consumes one pick. A pick that ends on a
    branch selects the first leaf below it; a pick that does not resolve, or
    an exhausted script, exits.
    """

    tree: MenuTree
    picks: Iterable[str | Sequence[str]] = ()
    last_menu: int = 0
    lines_rendered: int = 0
    history: list[Selection] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._queue: deque[str | Sequence[str]] = deque(self.picks)
        self.last_menu = self.tree.root

    def display(self, start: int | None = None) -> Selection:
        current = self.last_menu if start is None else start
        if not self._queue:
            return self._record(Selection(origin=current))

        pick = self._queue.popleft()
        leaf = self._resolve(current, pick)
        if leaf is None:
            logger.warning("Scripted pick %r does not match the menu; exiting", pick)
            return self._record(Selection(origin=current))
        origin = leaf.parent if leaf.parent is not None else self.tree.root
        return self._record(Selection(origin=origin, leaf=leaf))

    def _record(self, selection: Selection) -> Selection:
        self.last_menu = selection.origin
        self.history.append(selection)
        return selection

    def _resolve(self, start: int, pick: str | Sequence[str]) -> MenuNode | None:
        absolute, segments = split_pick(pick)
        current: int | None = self.tree.root if absolute else start
        for segment in segments:
            if current is None:
                return None
            if segment == PARENT_SEGMENT:
                current = self.tree.parent_of(current)
                continue
            current = self.tree.find_path([segment], start=current)
        if current is None:
            return None
        return self._first_leaf(self.tree.node(current))

    def _first_leaf(self, node: MenuNode) -> MenuNode | None:
        if node.is_leaf:
            return node
        for child in self.tree.children_of(node.index):
            leaf = self._first_leaf(child)
            if leaf is not None:
                return leaf
        return None


class _RecordingPresenterSink:
    def __init__(self, messages: list[str]) -> None:
        self._messages = messages

    def emit_line(self, message: str, style: str | None) -> None:
        self._messages.append(f"LINE[{style or ''}]: {message}")


class RecordingPresenter(PresenterBase):
    """Presenter that keeps every message instead of printing it."""

    def __init__(self) -> None:
        self.messages: list[str] = []
        super().__init__(_RecordingPresenterSink(self.messages))
