"""
GUI Modules
Declarative window composition: module expansion, handler resolution and
per-player window state.
"""

from .bootstrap import start
from .modules import ModuleDefinition, ModuleRegistry, ParameterSpec
from .windows import (
    CustomInputEvent,
    PlayerEvent,
    ShortcutEvent,
    WindowDefinition,
    WindowManager,
    WindowState,
)

__version__ = "0.1.0"

__all__ = [
    "start",
    "ModuleDefinition",
    "ModuleRegistry",
    "ParameterSpec",
    "CustomInputEvent",
    "PlayerEvent",
    "ShortcutEvent",
    "WindowDefinition",
    "WindowManager",
    "WindowState",
]
