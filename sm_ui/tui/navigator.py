"""Menu navigation state machine, independent of any terminal.

The interactive selector binds keys to :class:`NavAction` values and feeds
them to a :class:`MenuNavigator`; the headless selector and the tests drive
the same navigator directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sm_menu.tree import ROOT, MenuNode, MenuTree


class NavAction(str, Enum):
    UP = "up"
    DOWN = "down"
    SELECT = "select"
    BACK = "back"
    QUIT = "quit"


@dataclass
class SelectionState:
    current: int
    cursor: int = 0


@dataclass(frozen=True)
class Selection:
    """Outcome of one selector run: the menu it ended in and the chosen leaf."""

    origin: int
    leaf: MenuNode | None = None

    @property
    def is_exit(self) -> bool:
        return self.leaf is None


class MenuNavigator:
    def __init__(
        self,
        tree: MenuTree,
        start: int = ROOT,
        *,
        back_exits_at_root: bool = False,
    ) -> None:
        if not tree.node(start).is_branch:
            raise ValueError(f"navigation must start on a branch, got {tree.node(start).label!r}")
        self.tree = tree
        self.back_exits_at_root = back_exits_at_root
        self.state = SelectionState(current=start)
        self.result: Selection | None = None

    @property
    def done(self) -> bool:
        return self.result is not None

    @property
    def current_menu(self) -> MenuNode:
        return self.tree.node(self.state.current)

    @property
    def entries(self) -> list[MenuNode]:
        return self.tree.children_of(self.state.current)

    @property
    def highlighted(self) -> MenuNode | None:
        entries = self.entries
        if not entries:
            return None
        return entries[self.state.cursor]

    def move(self, delta: int) -> None:
        count = len(self.current_menu.children)
        if count == 0:
            return
        self.state.cursor = (self.state.cursor + delta) % count

    def select(self) -> Selection | None:
        entry = self.highlighted
        if entry is None:
            return None
        if entry.is_leaf:
            self.result = Selection(origin=self.state.current, leaf=entry)
            return self.result
        self.state = SelectionState(current=entry.index, cursor=0)
        return None

    def back(self) -> Selection | None:
        parent = self.tree.parent_of(self.state.current)
        if parent is None:
            if self.back_exits_at_root:
                return self.quit()
            return None
        # Put the cursor back on the submenu we just left.
        cursor = self.tree.position_in_parent(self.state.current)
        self.state = SelectionState(current=parent, cursor=cursor)
        return None

    def quit(self) -> Selection:
        self.result = Selection(origin=self.state.current, leaf=None)
        return self.result

    def handle(self, action: NavAction) -> Selection | None:
        if self.done:
            return self.result
        if action is NavAction.UP:
            self.move(-1)
        elif action is NavAction.DOWN:
            self.move(1)
        elif action is NavAction.SELECT:
            return self.select()
        elif action is NavAction.BACK:
            return self.back()
        elif action is NavAction.QUIT:
            return self.quit()
        return None
