"""Standard handlers every namespace starts with.

All handlers take ``(state, namespace, event)``; the standard ones only
look at the state.
"""

from typing import Any

from ..modules.types import HandlerTable
from .types import WindowState


def close(state: WindowState, namespace: Any = None, event: Any = None) -> None:
    """Release host focus from the window, unless pinned."""
    if state.pinned:
        return
    state.player.opened = None


def hide(state: WindowState, namespace: Any = None, event: Any = None) -> None:
    state.root.visible = False


def show(state: WindowState, namespace: Any = None, event: Any = None) -> None:
    """Make the window visible; focus it unless pinned."""
    state.root.visible = True
    if not state.pinned:
        state.player.opened = state.root


def toggle(state: WindowState, namespace: Any = None, event: Any = None) -> bool:
    """Flip visibility and return the new visibility."""
    if state.root.visible:
        hide(state)
    else:
        show(state)
    return state.root.visible


def standard_handlers() -> HandlerTable:
    """Fresh handler table seeded with close/hide/show/toggle"""
    return {
        "close": close,
        "hide": hide,
        "show": show,
        "toggle": toggle,
    }
