"""Public API surface for sm_menu."""

from sm_menu.loader import SUPPORTED_EXTENSIONS, load_menu_file, parse_menu_data
from sm_menu.models import MenuItem
from sm_menu.tree import ROOT, MenuNode, MenuTree, NodeKind, build, build_from_item

__all__ = [
    "MenuItem",
    "MenuNode",
    "MenuTree",
    "NodeKind",
    "ROOT",
    "SUPPORTED_EXTENSIONS",
    "build",
    "build_from_item",
    "load_menu_file",
    "parse_menu_data",
]
