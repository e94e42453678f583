"""Built-in navigation keymap (vim-style letters plus the usual keys)."""

from __future__ import annotations

from typing import Iterable, Tuple

from textview_engine.actions import navigation

from .models import ActionRef, Binding, KeyInput
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(id="nav.home", handler=navigation.scroll_home, description="Move to the top"),
    ActionRef(id="nav.end", handler=navigation.scroll_end, description="Move to the bottom"),
    ActionRef(id="nav.down", handler=navigation.scroll_down, description="Move down"),
    ActionRef(id="nav.up", handler=navigation.scroll_up, description="Move up"),
    ActionRef(id="nav.left", handler=navigation.scroll_left, description="Move left"),
    ActionRef(id="nav.right", handler=navigation.scroll_right, description="Move right"),
    ActionRef(
        id="nav.page_down", handler=navigation.page_down, description="Move down by one page"
    ),
    ActionRef(id="nav.page_up", handler=navigation.page_up, description="Move up by one page"),
)

# (key, modifiers, action id)
_DEFAULT_KEYS: Tuple[Tuple[str, Tuple[str, ...], str], ...] = (
    ("g", (), "nav.home"),
    ("HOME", (), "nav.home"),
    ("G", (), "nav.end"),
    ("END", (), "nav.end"),
    ("j", (), "nav.down"),
    ("DOWN", (), "nav.down"),
    ("k", (), "nav.up"),
    ("UP", (), "nav.up"),
    ("h", (), "nav.left"),
    ("LEFT", (), "nav.left"),
    ("l", (), "nav.right"),
    ("RIGHT", (), "nav.right"),
    ("PGDN", (), "nav.page_down"),
    ("f", ("ctrl",), "nav.page_down"),
    ("PGUP", (), "nav.page_up"),
    ("b", ("ctrl",), "nav.page_up"),
)


def default_bindings() -> Iterable[Binding]:
    for key, modifiers, action_id in _DEFAULT_KEYS:
        stroke = KeyInput(key=key, modifiers=modifiers)
        yield Binding(id=f"default.{stroke.token}", key=stroke, action_id=action_id)


def load_default_keymaps(registry: KeymapRegistry) -> KeymapRegistry:
    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=True)
    for binding in default_bindings():
        registry.register_binding(binding, replace=True)
    return registry


__all__ = ["DEFAULT_ACTIONS", "default_bindings", "load_default_keymaps"]
