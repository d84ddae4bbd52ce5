"""
Window Manager
Namespace registration protocol and per-player window builds
"""

from functools import partial
from typing import Any, Callable, Optional, Sequence

from ..blueprint import DEFAULT_CHILD_FIELDS, ModuleExpander, resolve_handlers
from ..core.errors import (
    GuiModuleError,
    NamespaceAlreadyRegistered,
    UndefinedNamespace,
    UnknownHandler,
)
from ..core.logging_config import LogContext, get_logger
from ..modules.registry import ModuleRegistry
from ..modules.types import HandlerTable
from ..monitoring import metrics_collector
from .handlers import standard_handlers
from .namespaces import NamespaceRegistry
from .router import EventRouter
from .state import WindowStateStore
from .types import Player, WindowDefinition, WindowState, WidgetToolkit

logger = get_logger(__name__)

RegisterHandlers = Callable[..., None]


class WindowManager:
    """
    Registers window namespaces and builds their windows per player.

    Registration is two-stage: ``new_namespace`` expands modules and returns
    a function that registers the namespace's own handlers, resolves handler
    names and makes the namespace ready for builds and events.
    """

    def __init__(
        self,
        modules: ModuleRegistry,
        namespaces: NamespaceRegistry,
        store: WindowStateStore,
        toolkit: WidgetToolkit,
        router: Optional[EventRouter] = None,
        child_fields: Sequence[str] = DEFAULT_CHILD_FIELDS,
    ):
        self.modules = modules
        self.namespaces = namespaces
        self.store = store
        self.toolkit = toolkit
        self.router = router or EventRouter(store)
        self.child_fields = tuple(child_fields)
        self.expander = ModuleExpander(modules, self.child_fields)

    def new_namespace(self, window_def: WindowDefinition) -> RegisterHandlers:
        """
        Define a namespace from a window definition.

        Args:
            window_def: Window definition; its tree is expanded in place

        Returns:
            register_handlers(new_handlers, shortcut_name=None, custominput_name=None)
            bound to this namespace

        Raises:
            NamespaceAlreadyRegistered: Namespace already defined
            GuiModuleError: Module expansion failed; nothing is registered
        """
        namespace = window_def.namespace
        if namespace in self.namespaces:
            raise NamespaceAlreadyRegistered(namespace)

        handlers = standard_handlers()
        with LogContext(namespace=namespace):
            try:
                self.expander.expand(window_def.definition, handlers)
            except GuiModuleError as e:
                metrics_collector.record_setup_error(type(e).__name__)
                logger.error("namespace_expansion_failed", error=str(e))
                raise

        self.namespaces.define(window_def, handlers)
        return partial(self.register_handlers, namespace)

    def register_handlers(
        self,
        namespace: str,
        new_handlers: Optional[HandlerTable] = None,
        shortcut_name: Optional[str] = None,
        custominput_name: Optional[str] = None,
    ) -> None:
        """
        Add namespace handlers, resolve the tree and make the namespace ready.

        A handler name already in the table keeps its first registration;
        the collision is logged.

        Raises:
            UndefinedNamespace: Namespace never defined
            NamespaceAlreadyRegistered: Handlers already registered
            UnknownHandler: Tree references a name missing from the table
        """
        window_def = self.namespaces.require(namespace)
        if self.namespaces.is_ready(namespace):
            raise NamespaceAlreadyRegistered(namespace)

        table = self.namespaces.handler_table(namespace)
        merged = dict(table)
        with LogContext(namespace=namespace):
            for name, handler in (new_handlers or {}).items():
                if name in merged:
                    logger.warning("duplicate_handler_name", handler=name)
                    metrics_collector.record_handler_collision("namespace")
                    continue
                merged[name] = handler

            # Resolve before publishing so a failure leaves the table as it was
            try:
                resolve_handlers(window_def.definition, merged, self.child_fields)
            except GuiModuleError as e:
                metrics_collector.record_setup_error(type(e).__name__)
                logger.error("handler_resolution_failed", error=str(e))
                raise

            # Update in place: the toolkit keeps a reference to this table
            table.update(merged)
            self.toolkit.add_handlers(table, self.router.wrap(namespace))
            self.store.init_namespace(namespace, window_def.version)

            if shortcut_name:
                self.namespaces.map_shortcut(shortcut_name, namespace)
            if custominput_name:
                self.namespaces.map_custom_input(custominput_name, namespace)

            self.namespaces.mark_ready(namespace)
            logger.info("namespace_registered", handlers=len(table), version=window_def.version)

    def build(self, player: Player, namespace: str) -> WindowState:
        """
        Build the namespace's window for a player and store its state.

        Raises:
            UndefinedNamespace: Namespace not defined or handlers not registered
        """
        info = self.namespaces.get(namespace)
        if info is None:
            raise UndefinedNamespace(namespace)
        if not self.namespaces.is_ready(namespace):
            raise UndefinedNamespace(namespace, "has no registered handlers")

        elems, root = self.toolkit.add(player.gui[info.root], info.definition)
        state = WindowState(root=root, elems=elems, player=player, pinned=False)
        self.store.set(namespace, player.index, state)

        metrics_collector.record_build(namespace)
        logger.debug("window_built", namespace=namespace, player=player.index)
        return state

    def get_state(self, player: Player, namespace: str) -> Optional[WindowState]:
        """Stored state for the player, or None"""
        return self.store.get(namespace, player.index)

    def get_or_build(self, player: Player, namespace: str) -> WindowState:
        """Live state for the player, building one when absent or invalid"""
        state = self.get_state(player, namespace)
        if state is None or not state.valid:
            state = self.build(player, namespace)
        return state

    def dispatch(self, namespace: str, handler_name: str, event: Any) -> Any:
        """
        Run a named handler of the namespace through the event router.

        Raises:
            UnknownHandler: handler_name is not in the namespace's table
        """
        handler = self.namespaces.handler_table(namespace).get(handler_name)
        if handler is None:
            raise UnknownHandler(handler_name)
        return self.router.dispatch(namespace, event, handler)
