"""Window State Store - per-namespace, per-player window records."""

from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple

from ..core.logging_config import get_logger
from .types import WindowState

logger = get_logger(__name__)

# Player indices start at 1, so slot 0 holds the definition version
VERSION_KEY = 0


class WindowStateStore:
    """
    Window states keyed by namespace, then player index.

    Backed by the host's persistent store when one is given; the store only
    relies on it behaving as a mutable mapping.
    """

    def __init__(self, storage: Optional[MutableMapping[str, Dict[int, Any]]] = None):
        self.storage = storage if storage is not None else {}

    def init_namespace(self, namespace: str, version: Any) -> None:
        """
        Prepare storage for a namespace and record its definition version.

        States left over from a different version are purged.
        """
        entries = self.storage.setdefault(namespace, {})
        previous = entries.get(VERSION_KEY)

        if VERSION_KEY in entries and previous != version:
            purged = 0
            for index in [k for k in entries if k != VERSION_KEY]:
                _destroy(entries.pop(index))
                purged += 1
            logger.info(
                "namespace_version_changed",
                namespace=namespace,
                previous=previous,
                version=version,
                purged=purged,
            )

        entries[VERSION_KEY] = version

    def is_initialized(self, namespace: str) -> bool:
        return VERSION_KEY in self.storage.get(namespace, {})

    def version(self, namespace: str) -> Any:
        return self.storage.get(namespace, {}).get(VERSION_KEY)

    def get(self, namespace: str, player_index: int) -> Optional[WindowState]:
        if player_index == VERSION_KEY:
            return None
        return self.storage.get(namespace, {}).get(player_index)

    def set(self, namespace: str, player_index: int, state: WindowState) -> None:
        if player_index == VERSION_KEY:
            raise ValueError("player index 0 is reserved for the namespace version")
        self.storage[namespace][player_index] = state

    def delete(self, namespace: str, player_index: int) -> None:
        self.storage.get(namespace, {}).pop(player_index, None)

    def states(self, namespace: str) -> Iterator[Tuple[int, WindowState]]:
        """Iterate (player index, state) pairs, skipping the version slot"""
        for index, state in list(self.storage.get(namespace, {}).items()):
            if index != VERSION_KEY:
                yield index, state


def _destroy(state: Any) -> None:
    root = getattr(state, "root", None)
    if root is not None and getattr(root, "valid", False) and hasattr(root, "destroy"):
        root.destroy()
