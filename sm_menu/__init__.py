"""Menu file loading and menu tree construction."""

from sm_menu.api import MenuItem, MenuTree, build, build_from_item, load_menu_file

__all__ = ["MenuItem", "MenuTree", "build", "build_from_item", "load_menu_file"]
