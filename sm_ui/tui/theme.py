from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

RUNNING_STYLE = "dim italic"
ERROR_STYLE = "red"


@dataclass(frozen=True)
class SelectorStyle:
    """Cursor glyphs and colors for the menu, fixed for the whole session."""

    item_prompt: str = "❯"
    submenu_prompt: str = "❯"
    item_color: str = "ansiyellow"
    submenu_color: str = "ansicyan"
    suffix: str = " "
    submenu_marker: str = "▸"
    indent: str = "  "

    def prompt_for(self, is_branch: bool) -> str:
        return self.submenu_prompt if is_branch else self.item_prompt


DEFAULT_SELECTOR_STYLE = SelectorStyle()


def prompt_toolkit_menu_style(style: SelectorStyle = DEFAULT_SELECTOR_STYLE) -> Mapping[str, str]:
    return {
        "title": "bold",
        "path": "fg:ansiblue",
        "item": "",
        "submenu": "",
        "item.selected": f"fg:{style.item_color} bold",
        "submenu.selected": f"fg:{style.submenu_color} bold",
        "marker": "fg:ansibrightblack",
        "empty": "fg:ansibrightblack italic",
    }
