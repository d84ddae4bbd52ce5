"""Pytest configuration and fixtures."""

import os
from typing import Any, Callable, Dict, List, Optional

import pytest
from hypothesis import HealthCheck, settings

from gui_modules.core import Settings
from gui_modules.modules import ModuleDefinition, ModuleRegistry, ParameterSpec
from gui_modules.builtin import WINDOW_FRAME
from gui_modules.windows import (
    EventRouter,
    HostEventRouter,
    NamespaceRegistry,
    WindowDefinition,
    WindowManager,
    WindowStateStore,
)


# Cold-start input generation (Hypothesis warm-up) can trip the too_slow health check.
settings.register_profile("default", suppress_health_check=[HealthCheck.too_slow])
settings.load_profile("default")


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ['GUI_LOG_LEVEL'] = 'DEBUG'


# ============================================================================
# Host Fakes
# ============================================================================

class FakeWidget:
    """Stand-in for a toolkit element handle."""

    def __init__(self, name: Optional[str] = None, visible: bool = True):
        self.name = name
        self.visible = visible
        self.valid = True
        self.toggled = False

    def destroy(self) -> None:
        self.valid = False


class FakePlayer:
    def __init__(self, index: int):
        self.index = index
        self.opened: Any = None
        self.gui = {"screen": f"screen-{index}", "left": f"left-{index}"}
        self.shortcuts: Dict[str, Any] = {}

    def set_shortcut_toggled(self, prototype_name: str, toggled: bool) -> None:
        self.shortcuts[prototype_name] = toggled


class FakeToolkit:
    """Builds FakeWidgets for every named node, records handler registrations."""

    def __init__(self):
        self.built: List[tuple] = []
        self.registrations: List[tuple] = []
        self.handle_events_calls = 0

    def add(self, parent: Any, definition: List[dict]):
        elems: Dict[str, FakeWidget] = {}
        root = None

        def build(node: dict) -> FakeWidget:
            widget = FakeWidget(node.get("name"), node.get("visible", True))
            if widget.name:
                elems[widget.name] = widget
            for child in node.get("children", []):
                build(child)
            return widget

        for node in definition:
            widget = build(node)
            root = root or widget

        self.built.append((parent, definition))
        return elems, root

    def add_handlers(self, handlers: dict, wrapper: Callable) -> None:
        self.registrations.append((handlers, wrapper))

    def handle_events(self) -> None:
        self.handle_events_calls += 1


class FakeHost:
    def __init__(self, players: Optional[List[FakePlayer]] = None):
        self.players = {p.index: p for p in players or []}
        self.subscriptions: Dict[str, List[Callable]] = {}

    def get_player(self, index: int) -> Optional[FakePlayer]:
        return self.players.get(index)

    def on_event(self, event_name: str, handler: Callable) -> None:
        self.subscriptions.setdefault(event_name, []).append(handler)

    def fire(self, event_name: str, event: Any) -> List[Any]:
        return [handler(event) for handler in self.subscriptions.get(event_name, [])]


# ============================================================================
# Module Fixtures
# ============================================================================

def on_click(state, namespace, event):
    state.elems.setdefault("clicks", []).append(event)


def build_button_row(node: dict) -> dict:
    return {
        "type": "flow",
        "name": node.get("name", "button_row"),
        "children": [
            {"type": "button", "caption": str(i), "handler": "on_click"}
            for i in range(node["count"])
        ],
    }


BUTTON_ROW = ModuleDefinition(
    module_type="button_row",
    parameters={
        "count": ParameterSpec(type={"number"}, is_optional=False),
        "name": ParameterSpec(type="string", is_optional=True),
    },
    handlers={"on_click": on_click},
    build_func=build_button_row,
)


@pytest.fixture
def button_row():
    """The button_row module definition."""
    return BUTTON_ROW


@pytest.fixture
def module_registry():
    """Registry with button_row and window_frame."""
    return ModuleRegistry([BUTTON_ROW, WINDOW_FRAME])


@pytest.fixture
def settings():
    """Test settings without environment providers."""
    return Settings(module_providers=["gui_modules.builtin.window_frame"])


# ============================================================================
# Window Fixtures
# ============================================================================

@pytest.fixture
def make_player():
    return FakePlayer


@pytest.fixture
def make_widget():
    return FakeWidget


@pytest.fixture
def player():
    return FakePlayer(1)


@pytest.fixture
def toolkit():
    return FakeToolkit()


@pytest.fixture
def host(player):
    return FakeHost([player, FakePlayer(2)])


@pytest.fixture
def storage():
    """Host persistent storage."""
    return {}


@pytest.fixture
def store(storage):
    return WindowStateStore(storage)


@pytest.fixture
def namespaces():
    return NamespaceRegistry()


@pytest.fixture
def manager(module_registry, namespaces, store, toolkit):
    """Window manager wired to fakes."""
    return WindowManager(
        modules=module_registry,
        namespaces=namespaces,
        store=store,
        toolkit=toolkit,
        router=EventRouter(store),
    )


@pytest.fixture
def host_router(host, toolkit, manager, namespaces):
    return HostEventRouter(host, toolkit, manager, namespaces)


@pytest.fixture
def window_def():
    """Window with a frame module wrapping a button row."""
    return WindowDefinition(
        namespace="inventory",
        root="screen",
        version=1,
        definition=[
            {
                "type": "module",
                "module_type": "window_frame",
                "name": "inventory_frame",
                "title": "Inventory",
                "has_pin_button": True,
                "children": [
                    {"type": "module", "module_type": "button_row", "count": 2},
                    {"type": "button", "name": "refresh", "handler": {"on_gui_click": "refresh"}},
                ],
            }
        ],
    )


def refresh(state, namespace, event):
    state.elems["refreshed"] = True


@pytest.fixture
def registered(manager, window_def):
    """The inventory namespace, fully registered."""
    register = manager.new_namespace(window_def)
    register({"refresh": refresh}, "inventory-shortcut", "inventory-toggle")
    return window_def
