"""
Startup
Wires the GUI layer into a host at load time.
"""

from typing import Any, Dict, MutableMapping, Optional

from .core import Settings, configure_logging, create_container, get_logger, get_settings
from .windows import Host, HostEventRouter, WidgetToolkit, WindowManager

logger = get_logger(__name__)


def start(
    toolkit: WidgetToolkit,
    host: Host,
    storage: Optional[MutableMapping[str, Dict[int, Any]]] = None,
    settings: Optional[Settings] = None,
    configure: bool = True,
) -> WindowManager:
    """
    Load modules, subscribe to host events and return the window manager.

    Args:
        toolkit: Primitive widget toolkit
        host: Host event subsystem
        storage: Host persistent storage (in-memory when omitted)
        settings: Settings override (environment when omitted)
        configure: Configure logging from settings

    Returns:
        Window manager; call ``new_namespace`` on it to define windows
    """
    settings = settings or get_settings()
    if configure:
        configure_logging(settings.log_level, settings.json_logs)

    container = create_container(toolkit, host, storage, settings)
    manager = container.get(WindowManager)
    container.get(HostEventRouter).install()

    logger.info("gui_modules_started", modules=manager.modules.module_types())
    return manager
