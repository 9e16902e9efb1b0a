"""Tests for menu file loading."""

from __future__ import annotations

import json

import pytest

from sm_common.errors import MenuFileError, UnsupportedFormatError
from sm_menu.loader import load_menu_file, parse_menu_data


pytestmark = pytest.mark.unit_menu

MENU = {
    "name": "Main",
    "item": [
        {"name": "A", "command": "echo a"},
        {
            "name": "Sub",
            "item": [
                {"name": "B", "command": "echo b"},
                {"name": "C", "command": "!ls -la"},
            ],
        },
    ],
}


def test_load_json(tmp_path) -> None:
    path = tmp_path / "menu.json"
    path.write_text(json.dumps(MENU))

    root = load_menu_file(path)

    assert root.name == "Main"
    assert [child.name for child in root.children] == ["A", "Sub"]
    assert root.children[0].command == "echo a"
    assert root.children[1].is_branch
    assert [child.command for child in root.children[1].children] == ["echo b", "!ls -la"]


def test_load_yaml(tmp_path) -> None:
    path = tmp_path / "menu.yaml"
    path.write_text(
        "name: Main\n"
        "item:\n"
        "  - name: A\n"
        "    command: echo a\n"
        "  - name: Sub\n"
        "    item:\n"
        "      - name: B\n"
        "        command: _make quiet\n"
    )

    root = load_menu_file(path)

    assert root.children[0].command == "echo a"
    assert root.children[1].children[0].command == "_make quiet"


@pytest.mark.parametrize("name", ["menu.toml", "menu.yml", "menu"])
def test_wrong_extension(tmp_path, name) -> None:
    path = tmp_path / name
    path.write_text("{}")

    with pytest.raises(UnsupportedFormatError) as excinfo:
        load_menu_file(path)

    assert str(excinfo.value).startswith("wrong extension: ")
    assert excinfo.value.context["supported"] == [".json", ".yaml"]


def test_wrong_extension_names_the_suffix(tmp_path) -> None:
    with pytest.raises(UnsupportedFormatError, match="wrong extension: .toml"):
        load_menu_file(tmp_path / "menu.toml")


def test_missing_file(tmp_path) -> None:
    with pytest.raises(MenuFileError, match="Failed to read menu file"):
        load_menu_file(tmp_path / "absent.json")


def test_malformed_json(tmp_path) -> None:
    path = tmp_path / "menu.json"
    path.write_text('{"name": "Main", ')

    with pytest.raises(MenuFileError) as excinfo:
        load_menu_file(path)

    assert excinfo.value.context["format"] == "json"
    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)


def test_malformed_yaml(tmp_path) -> None:
    path = tmp_path / "menu.yaml"
    path.write_text("name: [unclosed\n")

    with pytest.raises(MenuFileError) as excinfo:
        load_menu_file(path)

    assert excinfo.value.context["format"] == "yaml"


def test_top_level_must_be_mapping() -> None:
    with pytest.raises(MenuFileError, match="mapping"):
        parse_menu_data(["not", "a", "menu"])


def test_missing_name_is_reported() -> None:
    with pytest.raises(MenuFileError) as excinfo:
        parse_menu_data({"item": [{"command": "ls"}]}, source="menu.json")
    assert excinfo.value.context["path"] == "menu.json"
    assert excinfo.value.context["errors"]


def test_unknown_keys_are_ignored() -> None:
    root = parse_menu_data({"name": "Main", "color": "red", "item": []})
    assert root.name == "Main"
    assert root.children == []
    assert not root.is_branch
