"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .errors import (
    GuiModuleError,
    ParameterError,
    ParameterExtra,
    ParameterInvalidType,
    ParameterMissing,
    NoModuleName,
    UnknownModule,
    UnknownHandler,
    UndefinedNamespace,
    NamespaceAlreadyRegistered,
    InvalidModuleProvider,
)
from .logging_config import configure_logging, get_logger, LogContext


def create_container(*args, **kwargs):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(*args, **kwargs)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "GuiModuleError",
    "ParameterError",
    "ParameterExtra",
    "ParameterInvalidType",
    "ParameterMissing",
    "NoModuleName",
    "UnknownModule",
    "UnknownHandler",
    "UndefinedNamespace",
    "NamespaceAlreadyRegistered",
    "InvalidModuleProvider",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # DI
    "create_container",
]
