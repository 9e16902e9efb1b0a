import pytest

from sm_menu.models import MenuItem
from sm_menu.tree import ROOT, NodeKind, build, build_from_item

pytestmark = pytest.mark.unit_menu


def _sample_root() -> MenuItem:
    return MenuItem.model_validate(
        {
            "name": "Main",
            "item": [
                {"name": "A", "command": "echo a"},
                {
                    "name": "Sub",
                    "item": [
                        {"name": "B", "command": "echo b"},
                        {"name": "Deeper", "item": [{"name": "D", "command": "echo d"}]},
                        {"name": "C", "command": "echo c"},
                    ],
                },
                {"name": "Z", "command": "echo z"},
            ],
        }
    )


def test_build_keeps_shape_and_order() -> None:
    tree = build_from_item(_sample_root())
    root = tree.node(ROOT)

    assert root.label == "Main"
    assert root.parent is None
    assert root.depth == 0
    assert [child.label for child in tree.children_of(ROOT)] == ["A", "Sub", "Z"]

    sub = tree.children_of(ROOT)[1]
    assert sub.kind is NodeKind.BRANCH
    assert [child.label for child in tree.children_of(sub.index)] == ["B", "Deeper", "C"]


def test_depths_follow_the_menu_that_lists_the_entry() -> None:
    tree = build_from_item(_sample_root())
    by_label = {node.label: node for node in tree.walk()}

    assert by_label["A"].depth == 0
    assert by_label["Sub"].depth == 1
    assert by_label["B"].depth == 1
    assert by_label["Deeper"].depth == 2
    assert by_label["D"].depth == 2


def test_parent_links_and_positions() -> None:
    tree = build_from_item(_sample_root())
    sub = tree.find_path(["Sub"])
    c = tree.find_path(["Sub", "C"])

    assert sub is not None and c is not None
    assert tree.parent_of(c) == sub
    assert tree.parent_of(sub) == ROOT
    assert tree.position_in_parent(c) == 2
    assert tree.position_in_parent(sub) == 1
    assert tree.position_in_parent(ROOT) == 0
    assert tree.path_to(c) == ["Main", "Sub", "C"]


def test_every_non_root_node_is_listed_by_its_parent() -> None:
    tree = build_from_item(_sample_root())
    for node in tree.walk():
        if node.index == ROOT:
            continue
        assert node.index in tree.node(node.parent).children


def test_walk_is_display_order() -> None:
    tree = build_from_item(_sample_root())
    assert [node.label for node in tree.walk()] == [
        "Main", "A", "Sub", "B", "Deeper", "D", "C", "Z",
    ]
    assert len(tree) == 8


def test_find_path_missing_segment() -> None:
    tree = build_from_item(_sample_root())
    assert tree.find_path(["Sub", "nope"]) is None
    assert tree.find_path([]) == ROOT


def test_missing_command_becomes_empty_leaf() -> None:
    tree = build("Main", 0, [MenuItem(name="Nothing")])
    leaf = tree.children_of(ROOT)[0]
    assert leaf.is_leaf
    assert leaf.command == ""


def test_record_with_command_and_children_is_a_branch() -> None:
    item = MenuItem.model_validate(
        {"name": "Both", "command": "echo ignored", "item": [{"name": "X", "command": "x"}]}
    )
    tree = build("Main", 0, [item])
    node = tree.children_of(ROOT)[0]

    assert node.is_branch
    assert node.command == ""
    assert [child.label for child in tree.children_of(node.index)] == ["X"]


def test_empty_item_list_is_a_leaf() -> None:
    item = MenuItem.model_validate({"name": "Hollow", "command": "true", "item": []})
    tree = build("Main", 0, [item])
    assert tree.children_of(ROOT)[0].is_leaf


def test_empty_root_menu() -> None:
    tree = build("Main", 3, [])
    assert len(tree) == 1
    assert tree.node(ROOT).depth == 3
    assert tree.children_of(ROOT) == []
