"""Tests for dependency wiring and startup."""

import pytest

from gui_modules import start
from gui_modules.core import create_container
from gui_modules.modules import ModuleRegistry
from gui_modules.windows import (
    ON_PLAYER_CREATED,
    CustomInputEvent,
    HostEventRouter,
    NamespaceRegistry,
    PlayerEvent,
    WindowDefinition,
    WindowManager,
    WindowStateStore,
)


@pytest.mark.unit
def test_container_provides_singletons(toolkit, host, settings, storage):
    container = create_container(toolkit, host, storage, settings)

    manager = container.get(WindowManager)
    assert manager is container.get(WindowManager)
    assert manager.namespaces is container.get(NamespaceRegistry)
    assert manager.store is container.get(WindowStateStore)
    assert manager.store.storage is storage
    assert manager.toolkit is toolkit
    assert container.get(ModuleRegistry).module_types() == ["window_frame"]
    assert container.get(HostEventRouter).manager is manager


@pytest.mark.unit
def test_start_end_to_end(toolkit, host, settings, player):
    """Define a window, open it with a custom input, close it via its frame."""
    manager = start(toolkit, host, settings=settings, configure=False)
    register = manager.new_namespace(
        WindowDefinition(
            namespace="notes",
            root="screen",
            definition=[{"type": "module", "module_type": "window_frame", "name": "notes", "title": "Notes"}],
        )
    )
    register(None, None, "notes-toggle")

    assert toolkit.handle_events_calls == 1
    assert host.fire("notes-toggle", CustomInputEvent(player.index, "notes-toggle")) == [True]

    handlers, wrapper = toolkit.registrations[-1]
    wrapper(PlayerEvent(player.index), handlers["frame_closed"])
    assert manager.get_state(player, "notes").root.visible is False

    host.fire(ON_PLAYER_CREATED, PlayerEvent(2))
    assert manager.store.get("notes", 2) is not None
