import pytest

from sm_ui.tui.keys import KEY_MAP, action_for_key, build_key_bindings
from sm_ui.tui.navigator import NavAction

pytestmark = pytest.mark.unit_ui


@pytest.mark.parametrize(
    ("key", "action"),
    [
        ("up", NavAction.UP),
        ("k", NavAction.UP),
        ("c-p", NavAction.UP),
        ("down", NavAction.DOWN),
        ("j", NavAction.DOWN),
        ("c-n", NavAction.DOWN),
        ("enter", NavAction.SELECT),
        ("right", NavAction.SELECT),
        ("l", NavAction.SELECT),
        ("left", NavAction.BACK),
        ("h", NavAction.BACK),
        ("backspace", NavAction.BACK),
        ("c-c", NavAction.QUIT),
        ("escape", NavAction.QUIT),
        ("q", NavAction.QUIT),
    ],
)
def test_key_map(key, action) -> None:
    assert action_for_key(key) is action


def test_unknown_keys_have_no_action() -> None:
    assert action_for_key("x") is None
    assert action_for_key("tab") is None


def test_keys_are_bound_once_each() -> None:
    keys = [key for group in KEY_MAP.values() for key in group]
    assert len(keys) == len(set(keys))

    kb = build_key_bindings(lambda action, event: None)
    assert len(kb.bindings) == len(keys)
    assert all(binding.eager() for binding in kb.bindings)
