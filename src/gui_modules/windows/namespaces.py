"""
Namespace Registry
Per-namespace window definitions, handler tables and input mappings
"""

from typing import Callable, Dict, List, Optional, Set

from ..core.errors import NamespaceAlreadyRegistered, UndefinedNamespace
from ..core.logging_config import get_logger
from ..modules.types import HandlerTable
from .types import WindowDefinition

logger = get_logger(__name__)


class NamespaceRegistry:
    """
    Registry of window namespaces.

    A namespace is defined once (definition + handler table) and becomes
    ready once its handlers are registered. Handler tables are never shared
    across namespaces.
    """

    def __init__(self) -> None:
        self.definitions: Dict[str, WindowDefinition] = {}
        self.handlers: Dict[str, HandlerTable] = {}
        self.shortcuts: Dict[str, str] = {}
        self.custom_inputs: Dict[str, str] = {}
        self._ready: Set[str] = set()
        self._custom_input_listeners: List[Callable[[str], None]] = []

    def define(self, window_def: WindowDefinition, handlers: HandlerTable) -> None:
        """Store an expanded definition with its handler table"""
        namespace = window_def.namespace
        if namespace in self.definitions:
            raise NamespaceAlreadyRegistered(namespace)
        self.definitions[namespace] = window_def
        self.handlers[namespace] = handlers
        logger.info("namespace_defined", namespace=namespace)

    def get(self, namespace: str) -> Optional[WindowDefinition]:
        return self.definitions.get(namespace)

    def require(self, namespace: str) -> WindowDefinition:
        """Get a definition or raise UndefinedNamespace"""
        window_def = self.definitions.get(namespace)
        if window_def is None:
            raise UndefinedNamespace(namespace)
        return window_def

    def handler_table(self, namespace: str) -> HandlerTable:
        self.require(namespace)
        return self.handlers[namespace]

    def mark_ready(self, namespace: str) -> None:
        self._ready.add(namespace)

    def is_ready(self, namespace: str) -> bool:
        return namespace in self._ready

    def ready_namespaces(self) -> List[str]:
        """Namespaces with registered handlers, in definition order"""
        return [ns for ns in self.definitions if ns in self._ready]

    def map_shortcut(self, shortcut_name: str, namespace: str) -> None:
        self.shortcuts[shortcut_name] = namespace

    def map_custom_input(self, input_name: str, namespace: str) -> None:
        self.custom_inputs[input_name] = namespace
        for listener in self._custom_input_listeners:
            listener(input_name)

    def namespace_for_shortcut(self, shortcut_name: str) -> Optional[str]:
        return self.shortcuts.get(shortcut_name)

    def namespace_for_custom_input(self, input_name: str) -> Optional[str]:
        return self.custom_inputs.get(input_name)

    def on_custom_input_mapped(self, listener: Callable[[str], None]) -> None:
        """Call listener(input_name) for every custom input mapped from now on"""
        self._custom_input_listeners.append(listener)

    def __contains__(self, namespace: object) -> bool:
        return namespace in self.definitions
