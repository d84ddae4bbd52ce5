"""Event Router - routes toolkit element events to namespace handlers."""

from typing import Any, Callable

from ..core.logging_config import get_logger
from ..monitoring import metrics_collector
from .state import WindowStateStore
from .types import EventWrapper

logger = get_logger(__name__)


class EventRouter:
    """Looks up the player's window state before invoking a handler"""

    def __init__(self, store: WindowStateStore) -> None:
        self.store = store

    def dispatch(self, namespace: str, event: Any, handler: Callable[..., Any]) -> Any:
        """
        Invoke ``handler(state, namespace, event)`` for the event's player.

        Events for players without a window are dropped. Events for a window
        whose root is no longer valid are dropped and the entry removed.
        """
        player_index = event.player_index
        state = self.store.get(namespace, player_index)
        if state is None:
            metrics_collector.record_event(namespace, "no_state")
            return None

        if not state.valid:
            self.store.delete(namespace, player_index)
            metrics_collector.record_event(namespace, "stale")
            logger.debug("stale_window_dropped", namespace=namespace, player=player_index)
            return None

        metrics_collector.record_event(namespace, "dispatched")
        return handler(state, namespace, event)

    def wrap(self, namespace: str) -> EventWrapper:
        """Wrapper the toolkit calls as wrapper(event, handler) for this namespace"""

        def wrapper(event: Any, handler: Callable[..., Any]) -> Any:
            return self.dispatch(namespace, event, handler)

        return wrapper
