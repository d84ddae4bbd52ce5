"""Dependency Injection Container."""

from typing import Any, Dict, MutableMapping, Optional

from injector import Injector, Module, provider, singleton

from ..modules.registry import ModuleRegistry
from ..windows import (
    EventRouter,
    Host,
    HostEventRouter,
    NamespaceRegistry,
    WidgetToolkit,
    WindowManager,
    WindowStateStore,
)
from .config import Settings, get_settings


class CoreModule(Module):
    """Core dependencies. Toolkit, host and storage come from the host side."""

    def __init__(
        self,
        toolkit: WidgetToolkit,
        host: Host,
        storage: Optional[MutableMapping[str, Dict[int, Any]]] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.toolkit = toolkit
        self.host = host
        self.storage = storage
        self.settings = settings

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        """Provide settings (explicit override or environment)."""
        return self.settings or get_settings()

    @singleton
    @provider
    def provide_module_registry(self, settings: Settings) -> ModuleRegistry:
        """Provide module registry loaded from configured providers."""
        return ModuleRegistry.from_references(settings.provider_references())

    @singleton
    @provider
    def provide_namespace_registry(self) -> NamespaceRegistry:
        """Provide namespace registry singleton."""
        return NamespaceRegistry()

    @singleton
    @provider
    def provide_state_store(self) -> WindowStateStore:
        """Provide window state store over the host's persistent storage."""
        return WindowStateStore(self.storage)

    @singleton
    @provider
    def provide_event_router(self, store: WindowStateStore) -> EventRouter:
        """Provide event router singleton."""
        return EventRouter(store)

    @singleton
    @provider
    def provide_window_manager(
        self,
        settings: Settings,
        modules: ModuleRegistry,
        namespaces: NamespaceRegistry,
        store: WindowStateStore,
        router: EventRouter,
    ) -> WindowManager:
        """Provide window manager with all dependencies."""
        return WindowManager(
            modules=modules,
            namespaces=namespaces,
            store=store,
            toolkit=self.toolkit,
            router=router,
            child_fields=settings.child_fields,
        )

    @singleton
    @provider
    def provide_host_event_router(
        self, manager: WindowManager, namespaces: NamespaceRegistry
    ) -> HostEventRouter:
        """Provide host lifecycle router."""
        return HostEventRouter(self.host, self.toolkit, manager, namespaces)


def create_container(
    toolkit: WidgetToolkit,
    host: Host,
    storage: Optional[MutableMapping[str, Dict[int, Any]]] = None,
    settings: Optional[Settings] = None,
) -> Injector:
    """Create configured injector."""
    return Injector([CoreModule(toolkit, host, storage, settings)])
