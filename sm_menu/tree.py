"""Navigable menu tree built from MenuItem records.

Nodes live in a flat arena and refer to each other by integer handle. A
branch lists its children's handles in display order and every node but the
root records its parent's handle, which is what "go back" follows.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Sequence

from sm_menu.models import MenuItem

ROOT = 0


class NodeKind(str, Enum):
    LEAF = "leaf"
    BRANCH = "branch"


@dataclass(frozen=True)
class MenuNode:
    index: int
    label: str
    depth: int
    kind: NodeKind
    command: str = ""
    children: tuple[int, ...] = ()
    parent: int | None = None

    @property
    def is_leaf(self) -> bool:
        return self.kind is NodeKind.LEAF

    @property
    def is_branch(self) -> bool:
        return self.kind is NodeKind.BRANCH


@dataclass(frozen=True)
class MenuTree:
    nodes: tuple[MenuNode, ...] = field(default_factory=tuple)

    @property
    def root(self) -> int:
        return ROOT

    def node(self, index: int) -> MenuNode:
        return self.nodes[index]

    def children_of(self, index: int) -> list[MenuNode]:
        return [self.nodes[child] for child in self.nodes[index].children]

    def parent_of(self, index: int) -> int | None:
        return self.nodes[index].parent

    def position_in_parent(self, index: int) -> int:
        """Return the display position of ``index`` within its parent (0 for the root)."""
        parent = self.nodes[index].parent
        if parent is None:
            return 0
        return self.nodes[parent].children.index(index)

    def path_to(self, index: int) -> list[str]:
        """Labels from the root down to ``index``."""
        labels: list[str] = []
        current: int | None = index
        while current is not None:
            node = self.nodes[current]
            labels.append(node.label)
            current = node.parent
        return list(reversed(labels))

    def find_path(self, labels: Sequence[str], start: int = ROOT) -> int | None:
        """Follow child labels from ``start``; None when a segment is missing."""
        current = start
        for label in labels:
            match = next(
                (child.index for child in self.children_of(current) if child.label == label),
                None,
            )
            if match is None:
                return None
            current = match
        return current

    def walk(self, start: int = ROOT) -> Iterator[MenuNode]:
        """Depth-first, display-order traversal starting at ``start``."""
        stack = [start]
        while stack:
            node = self.nodes[stack.pop()]
            yield node
            stack.extend(reversed(node.children))

    def __len__(self) -> int:
        return len(self.nodes)


class _TreeBuilder:
    def __init__(self) -> None:
        self._nodes: list[MenuNode | None] = []

    def _reserve(self) -> int:
        self._nodes.append(None)
        return len(self._nodes) - 1

    def branch(
        self, name: str, depth: int, items: Sequence[MenuItem], parent: int | None
    ) -> int:
        index = self._reserve()
        children: list[int] = []
        for item in items:
            if item.is_branch:
                children.append(
                    self.branch(item.name, depth + 1, item.children or [], index)
                )
            else:
                children.append(self.leaf(item, depth, index))
        self._nodes[index] = MenuNode(
            index=index,
            label=name,
            depth=depth,
            kind=NodeKind.BRANCH,
            children=tuple(children),
            parent=parent,
        )
        return index

    def leaf(self, item: MenuItem, depth: int, parent: int) -> int:
        index = self._reserve()
        self._nodes[index] = MenuNode(
            index=index,
            label=item.name,
            depth=depth,
            kind=NodeKind.LEAF,
            command=item.command or "",
            parent=parent,
        )
        return index

    def finish(self) -> MenuTree:
        return MenuTree(nodes=tuple(node for node in self._nodes if node is not None))


def build(name: str, depth: int, items: Sequence[MenuItem]) -> MenuTree:
    """Build a menu tree whose root branch is ``name`` at ``depth``.

    Leaves sit at the depth of the menu that lists them; a sub-branch is one
    level deeper than its parent. Input order is display order.
    """
    builder = _TreeBuilder()
    builder.branch(name, depth, items, None)
    return builder.finish()


def build_from_item(root: MenuItem) -> MenuTree:
    """Build the tree for a loaded menu file, rooted at its top-level entry."""
    return build(root.name, 0, root.children or [])
