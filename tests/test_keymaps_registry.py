import pytest

from textview_engine.keymaps import (
    ActionRef,
    Binding,
    KeyInput,
    KeymapConflictError,
    KeymapRegistry,
    load_default_keymaps,
)
from textview_engine.view import TextView
from textview_engine.viewport import ViewportScroller


def make_action(action_id: str = "nav.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    key: KeyInput | None = None,
    action_id: str = "nav.test",
) -> Binding:
    return Binding(id=binding_id, key=key or KeyInput("x"), action_id=action_id)


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="custom.x")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings()) == [binding]
    assert registry.resolve("x") is registry.get_action("nav.test")


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="custom.x"))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(make_binding(binding_id="custom.x.duplicate"))

    assert excinfo.value.existing.id == "custom.x"


def test_replace_takes_over_the_key() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action("nav.a"))
    registry.register_action(make_action("nav.b"))
    registry.register_binding(make_binding(binding_id="first", action_id="nav.a"))

    registry.register_binding(
        make_binding(binding_id="second", action_id="nav.b"), replace=True
    )

    assert registry.resolve("x") is registry.get_action("nav.b")
    assert registry.stats().binding_count == 1


def test_binding_requires_known_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="orphan"))


def test_duplicate_action_requires_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    with pytest.raises(ValueError):
        registry.register_action(make_action())
    registry.register_action(make_action(), replace=True)


def test_unregister_binding_frees_the_key() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="custom.x"))

    removed = registry.unregister_binding("custom.x")

    assert removed is not None
    assert registry.resolve("x") is None
    assert registry.unregister_binding("custom.x") is None


def test_key_input_normalizes_modifiers() -> None:
    stroke = KeyInput("f", modifiers=("CTRL", " ctrl", ""))

    assert stroke.modifiers == ("ctrl",)
    assert stroke.token == "ctrl+f"
    with pytest.raises(ValueError):
        KeyInput("")


def test_default_keymaps_cover_navigation() -> None:
    registry = load_default_keymaps(KeymapRegistry())

    stats = registry.stats()
    assert stats.action_count == 8
    assert stats.binding_count == 16
    expected = {
        "g": "nav.home",
        "HOME": "nav.home",
        "G": "nav.end",
        "END": "nav.end",
        "j": "nav.down",
        "DOWN": "nav.down",
        "k": "nav.up",
        "UP": "nav.up",
        "h": "nav.left",
        "LEFT": "nav.left",
        "l": "nav.right",
        "RIGHT": "nav.right",
        "PGDN": "nav.page_down",
        "ctrl+f": "nav.page_down",
        "PGUP": "nav.page_up",
        "ctrl+b": "nav.page_up",
    }
    for token, action_id in expected.items():
        action = registry.resolve(token)
        assert action is not None, token
        assert action.id == action_id


def test_loading_defaults_twice_is_harmless() -> None:
    registry = load_default_keymaps(KeymapRegistry())

    load_default_keymaps(registry)

    assert registry.stats().binding_count == 16


def test_view_uses_custom_keymap() -> None:
    def jump_ten(scroller: ViewportScroller) -> None:
        scroller.move_line(10)

    registry = load_default_keymaps(KeymapRegistry())
    registry.register_action(ActionRef(id="nav.jump", handler=jump_ten))
    registry.register_binding(
        Binding(id="custom.J", key=KeyInput("J"), action_id="nav.jump")
    )
    view = TextView(keymaps=registry)

    result = view.handle_key(KeyInput("J"))

    assert result.action == "nav.jump"
    assert view.scroll_offset == (10, 0)
