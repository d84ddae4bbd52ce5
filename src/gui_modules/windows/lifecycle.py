"""Host lifecycle wiring: new players, custom inputs and shortcuts."""

from typing import Any, Optional, Set

from ..core.logging_config import get_logger
from .handlers import toggle
from .manager import WindowManager
from .namespaces import NamespaceRegistry
from .types import ON_LUA_SHORTCUT, ON_PLAYER_CREATED, Host, Player, WidgetToolkit

logger = get_logger(__name__)


class HostEventRouter:
    """
    Subscribes this layer to host events and opens windows in response.

    Subscriptions are made once per router; a custom input name is
    subscribed once no matter how often it is mapped.
    """

    def __init__(
        self,
        host: Host,
        toolkit: WidgetToolkit,
        manager: WindowManager,
        namespaces: NamespaceRegistry,
    ) -> None:
        self.host = host
        self.toolkit = toolkit
        self.manager = manager
        self.namespaces = namespaces
        self.installed = False
        self._subscribed_inputs: Set[str] = set()
        namespaces.on_custom_input_mapped(self._custom_input_mapped)

    def install(self) -> None:
        """Subscribe to host events (no-op after the first call)"""
        if self.installed:
            logger.warning("host_events_already_installed")
            return
        self.installed = True

        self.toolkit.handle_events()
        self.host.on_event(ON_PLAYER_CREATED, self.on_player_created)
        self.host.on_event(ON_LUA_SHORTCUT, self.on_shortcut)
        for input_name in list(self.namespaces.custom_inputs):
            self._subscribe_input(input_name)
        logger.info("host_events_installed", custom_inputs=len(self._subscribed_inputs))

    def _custom_input_mapped(self, input_name: str) -> None:
        if self.installed:
            self._subscribe_input(input_name)

    def _subscribe_input(self, input_name: str) -> None:
        if input_name in self._subscribed_inputs:
            return
        self._subscribed_inputs.add(input_name)
        self.host.on_event(input_name, self.on_custom_input)

    def on_player_created(self, event: Any) -> None:
        """Build every ready namespace for a new player"""
        player = self.host.get_player(event.player_index)
        if player is None:
            return

        for namespace in self.namespaces.ready_namespaces():
            self.manager.build(player, namespace)

    def on_custom_input(
        self,
        event: Any,
        player: Optional[Player] = None,
        namespace: Optional[str] = None,
    ) -> Optional[bool]:
        """
        Toggle the player's window for the event's input.

        Builds the window first when none is live.

        Returns:
            The new visibility, or None when the event is not ours
        """
        namespace = namespace or self.namespaces.namespace_for_custom_input(
            getattr(event, "input_name", None)
        )
        if not namespace:
            return None
        player = player or self.host.get_player(event.player_index)
        if player is None:
            return None

        state = self.manager.get_or_build(player, namespace)
        return toggle(state, namespace, event)

    def on_shortcut(self, event: Any) -> None:
        """Toggle the window bound to a shortcut and mirror it on the button"""
        namespace = self.namespaces.namespace_for_shortcut(event.prototype_name)
        if not namespace:
            return
        player = self.host.get_player(event.player_index)
        if player is None:
            return

        new_state = self.on_custom_input(event, player, namespace)
        player.set_shortcut_toggled(event.prototype_name, new_state)
