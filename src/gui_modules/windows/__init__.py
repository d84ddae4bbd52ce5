"""
Window System
Namespaces, per-player window state and event routing
"""

from .types import (
    ON_LUA_SHORTCUT,
    ON_PLAYER_CREATED,
    CustomInputEvent,
    Host,
    Player,
    PlayerEvent,
    ShortcutEvent,
    Widget,
    WidgetToolkit,
    WindowDefinition,
    WindowState,
)
from .handlers import standard_handlers
from .state import WindowStateStore, VERSION_KEY
from .router import EventRouter
from .namespaces import NamespaceRegistry
from .manager import WindowManager
from .lifecycle import HostEventRouter

__all__ = [
    "ON_LUA_SHORTCUT",
    "ON_PLAYER_CREATED",
    "CustomInputEvent",
    "Host",
    "Player",
    "PlayerEvent",
    "ShortcutEvent",
    "Widget",
    "WidgetToolkit",
    "WindowDefinition",
    "WindowState",
    "standard_handlers",
    "WindowStateStore",
    "VERSION_KEY",
    "EventRouter",
    "NamespaceRegistry",
    "WindowManager",
    "HostEventRouter",
]
