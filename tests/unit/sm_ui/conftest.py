import pytest

from sm_menu.models import MenuItem
from sm_menu.tree import MenuTree, build_from_item

SAMPLE_MENU = {
    "name": "Main",
    "item": [
        {"name": "A", "command": "echo a"},
        {
            "name": "Sub",
            "item": [
                {"name": "B", "command": "echo b"},
                {"name": "C", "command": "_echo c"},
            ],
        },
        {"name": "Z", "command": "!true"},
    ],
}


@pytest.fixture
def sample_tree(sample_menu) -> MenuTree:
    return build_from_item(MenuItem.model_validate(sample_menu))


@pytest.fixture
def sample_menu() -> dict:
    return SAMPLE_MENU
