"""
Built-in Modules
Module definitions shipped with the package
"""

from .window_frame import MODULE as WINDOW_FRAME

__all__ = [
    "WINDOW_FRAME",
]
