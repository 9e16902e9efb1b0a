"""Formatted-text rendering of the current menu frame."""

from __future__ import annotations

from typing import TypeAlias

from sm_ui.tui.navigator import MenuNavigator
from sm_ui.tui.theme import SelectorStyle

Fragment: TypeAlias = tuple[str, str]

EMPTY_MENU_TEXT = "(empty)"


def _header(navigator: MenuNavigator, style: SelectorStyle) -> list[Fragment]:
    menu = navigator.current_menu
    path = navigator.tree.path_to(menu.index)
    line: list[Fragment] = [("", style.indent * menu.depth)]
    if len(path) > 1:
        line.append(("class:path", " › ".join(path[:-1]) + " › "))
    line.append(("class:title", f"{menu.label}:"))
    return line


def _entry_lines(navigator: MenuNavigator, style: SelectorStyle) -> list[list[Fragment]]:
    indent = style.indent * navigator.current_menu.depth
    entries = navigator.entries
    if not entries:
        return [[("", f"{indent}  "), ("class:empty", EMPTY_MENU_TEXT)]]

    lines: list[list[Fragment]] = []
    for position, entry in enumerate(entries):
        selected = position == navigator.state.cursor
        base = "submenu" if entry.is_branch else "item"
        prompt = style.prompt_for(entry.is_branch)
        cursor = prompt if selected else " " * len(prompt)
        row_style = f"class:{base}.selected" if selected else f"class:{base}"
        line: list[Fragment] = [
            ("", f"{indent} "),
            (row_style, f"{cursor}{style.suffix}{entry.label}"),
        ]
        if entry.is_branch:
            line.append(("class:marker", f" {style.submenu_marker}"))
        lines.append(line)
    return lines


def menu_lines(navigator: MenuNavigator, style: SelectorStyle) -> list[list[Fragment]]:
    """The header line followed by one line per entry, or a single "(empty)" line."""
    return [_header(navigator, style), *_entry_lines(navigator, style)]


def menu_fragments(navigator: MenuNavigator, style: SelectorStyle) -> list[Fragment]:
    fragments: list[Fragment] = []
    for number, line in enumerate(menu_lines(navigator, style)):
        if number:
            fragments.append(("", "\n"))
        fragments.extend(line)
    return fragments


def frame_height(navigator: MenuNavigator) -> int:
    """Number of terminal lines the current frame occupies."""
    return 1 + max(1, len(navigator.entries))


def frame_text(navigator: MenuNavigator, style: SelectorStyle) -> str:
    """Plain text of the current frame, one line per menu row."""
    return "".join(text for _, text in menu_fragments(navigator, style))
