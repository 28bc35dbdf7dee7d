import pytest

from sea_editor.errors import EditorError
from sea_editor.keymaps import (
    ActionRef,
    Binding,
    KeymapConflictError,
    KeymapRegistry,
    load_default_keymaps,
)


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    token: str = "ctrl+g",
    action_id: str = "core.test",
) -> Binding:
    return Binding(id=binding_id, token=token, action_id=action_id)


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    action = make_action()
    registry.register_action(action)
    binding = make_binding(binding_id="goto")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings()) == [binding]
    match = registry.lookup("ctrl+g")
    assert match is not None
    assert match.binding == binding
    assert match.action == action


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="goto"))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(make_binding(binding_id="goto.duplicate"))

    assert isinstance(excinfo.value, EditorError)
    assert excinfo.value.existing.id == "goto"


def test_register_binding_requires_known_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="orphan"))


def test_register_binding_with_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    first = make_binding(binding_id="first")
    second = make_binding(binding_id="second")

    registry.register_binding(first)
    registry.register_binding(second, replace=True)

    assert list(registry.iter_bindings()) == [second]
    match = registry.lookup("ctrl+g")
    assert match is not None and match.binding.id == "second"


def test_unregister_binding() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="binding")
    registry.register_binding(binding)
    before = registry.revision()

    removed = registry.unregister_binding("binding")

    assert removed == binding
    assert registry.stats().binding_count == 0
    assert registry.lookup("ctrl+g") is None
    assert registry.revision() == before + 1


def test_binding_token_normalization() -> None:
    upper = Binding(id="upper", token="Q", action_id="core.test")
    named = Binding(id="named", token="  CTRL+S ", action_id="core.test")

    assert upper.token == "Q"
    assert named.token == "ctrl+s"


def test_load_default_keymaps_binds_editor_keys() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    expected = {
        "ctrl+q": "file.quit",
        "ctrl+s": "file.save",
        "enter": "edit.newline",
        "backspace": "edit.delete_backward",
        "ctrl+h": "edit.delete_backward",
        "delete": "edit.delete_forward",
        "up": "motion.up",
        "down": "motion.down",
        "left": "motion.left",
        "right": "motion.right",
        "pageup": "motion.page_up",
        "pagedown": "motion.page_down",
        "escape": "core.noop",
    }
    for token, action_id in expected.items():
        match = registry.lookup(token)
        assert match is not None, token
        assert match.action.id == action_id


def test_load_default_keymaps_exclude_and_extra() -> None:
    registry = KeymapRegistry()
    custom = Binding(id="quit.alt", token="ctrl+q", action_id="core.noop")

    load_default_keymaps(
        registry, exclude_bindings=("escape",), extra_bindings=(custom,)
    )

    assert registry.lookup("escape") is None
    match = registry.lookup("ctrl+q")
    assert match is not None
    assert match.binding.id == "quit.alt"
    with pytest.raises(KeyError):
        registry.get_binding("quit")
