"""Key map for the interactive selector."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from prompt_toolkit.key_binding import KeyBindings

from sm_ui.tui.navigator import NavAction

KEY_MAP: Mapping[NavAction, tuple[str, ...]] = {
    NavAction.UP: ("up", "k", "c-p"),
    NavAction.DOWN: ("down", "j", "c-n"),
    NavAction.SELECT: ("enter", "right", "l"),
    NavAction.BACK: ("left", "h", "backspace"),
    NavAction.QUIT: ("c-c", "escape", "q"),
}


def action_for_key(key: str) -> NavAction | None:
    """Return the action bound to ``key``; unknown keys map to None."""
    for action, keys in KEY_MAP.items():
        if key in keys:
            return action
    return None


def build_key_bindings(on_action: Callable[[NavAction, Any], None]) -> KeyBindings:
    """Bind every key in KEY_MAP to ``on_action(action, event)``.

    Keys outside the map have no binding and are dropped by prompt_toolkit.
    """
    kb = KeyBindings()

    for action, keys in KEY_MAP.items():
        for key in keys:
            _bind(kb, key, action, on_action)

    return kb


def _bind(
    kb: KeyBindings,
    key: str,
    action: NavAction,
    on_action: Callable[[NavAction, Any], None],
) -> None:
    @kb.add(key, eager=True)
    def _(event: Any) -> None:
        on_action(action, event)
