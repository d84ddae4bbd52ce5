"""
Window Type Definitions
Window definitions, per-player window state, and the host boundary
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Tuple

from ..modules.types import HandlerTable, Node

# Host event names this layer subscribes to
ON_PLAYER_CREATED = "on_player_created"
ON_LUA_SHORTCUT = "on_lua_shortcut"


class Widget(Protocol):
    """Handle to a built on-screen element"""

    valid: bool
    visible: bool


class Player(Protocol):
    """Host-side user identity that owns windows"""

    index: int
    opened: Any
    gui: Mapping[str, Any]

    def set_shortcut_toggled(self, prototype_name: str, toggled: bool) -> None:
        """Set the toggle state of a shortcut button"""
        ...


# wrapper(event, handler) invoked by the toolkit for each element event
EventWrapper = Callable[[Any, Callable[..., Any]], Any]


class WidgetToolkit(Protocol):
    """Primitive widget builder and element-event dispatcher"""

    def add(self, parent: Any, definition: List[Node]) -> Tuple[Dict[str, Any], Any]:
        """Build elements under parent; returns (named elements, root)"""
        ...

    def add_handlers(self, handlers: HandlerTable, wrapper: EventWrapper) -> None:
        """Register handlers for dispatch, each call routed through wrapper"""
        ...

    def handle_events(self) -> None:
        """Hook the toolkit's dispatcher into the host's element events"""
        ...


class Host(Protocol):
    """Host event subsystem and player lookup"""

    def get_player(self, index: int) -> Optional[Player]:
        ...

    def on_event(self, event_name: str, handler: Callable[[Any], Any]) -> None:
        ...


@dataclass
class WindowDefinition:
    """
    Definition of one window kind.

    ``definition`` is expanded and resolved in place during registration.
    """

    namespace: str
    root: str
    definition: List[Node]
    version: Any = 1


@dataclass
class WindowState:
    """Live per-player record of a built window"""

    root: Any
    elems: Dict[str, Any] = field(default_factory=dict)
    player: Any = None
    pinned: bool = False

    @property
    def valid(self) -> bool:
        """Whether the root element still exists"""
        return bool(getattr(self.root, "valid", False))


@dataclass(frozen=True)
class PlayerEvent:
    """Any host event raised on behalf of a player"""

    player_index: int


@dataclass(frozen=True)
class CustomInputEvent(PlayerEvent):
    input_name: str = ""


@dataclass(frozen=True)
class ShortcutEvent(PlayerEvent):
    prototype_name: str = ""
