"""
Window Frame Module
A titled, draggable frame with optional pin and close buttons
"""

from typing import Any

from ..modules.types import ModuleDefinition, Node, ParameterSpec
from ..windows.handlers import hide
from ..windows.types import WindowState

MODULE_TYPE = "window_frame"


def pin_button_name(name: str) -> str:
    return f"{name}_pin_button"


def close_button_name(name: str) -> str:
    return f"{name}_close_button"


def toggle_pin(state: WindowState, namespace: Any = None, event: Any = None) -> bool:
    """Flip the pinned flag; pinned windows give up host focus."""
    state.pinned = not state.pinned

    if state.pinned:
        if state.player.opened is state.root:
            state.player.opened = None
    elif state.root.visible:
        state.player.opened = state.root

    name = getattr(state.root, "name", None)
    button = state.elems.get(pin_button_name(name)) if name else None
    if button is not None:
        button.toggled = state.pinned
    return state.pinned


def frame_closed(state: WindowState, namespace: Any = None, event: Any = None) -> None:
    """Hide on host close, unless pinned."""
    if not state.pinned:
        hide(state)


def build(node: Node) -> Node:
    name = node["name"]

    titlebar = [
        {
            "type": "label",
            "style": "frame_title",
            "caption": node["title"],
            "ignored_by_interaction": True,
        },
        {
            "type": "empty-widget",
            "style": "flib_titlebar_drag_handle",
            "ignored_by_interaction": True,
        },
    ]
    if node.get("has_pin_button", False):
        titlebar.append({
            "type": "sprite-button",
            "name": pin_button_name(name),
            "style": "frame_action_button",
            "sprite": "flib_pin_white",
            "handler": {"on_gui_click": "pin"},
        })
    if node.get("has_close_button", True):
        titlebar.append({
            "type": "sprite-button",
            "name": close_button_name(name),
            "style": "frame_action_button",
            "sprite": "utility/close_white",
            "handler": {"on_gui_click": "hide"},
        })

    return {
        "type": "frame",
        "name": name,
        "direction": "vertical",
        "visible": False,
        "handler": {"on_gui_closed": "frame_closed"},
        "children": [
            {
                "type": "flow",
                "style": "flib_titlebar_flow",
                "drag_target": name,
                "children": titlebar,
            },
            *node.get("children", []),
        ],
    }


MODULE = ModuleDefinition(
    module_type=MODULE_TYPE,
    description="Titled window frame with drag handle, pin and close buttons",
    parameters={
        "name": ParameterSpec(type=["string"]),
        "title": ParameterSpec(type=["string"]),
        "children": ParameterSpec(type=["table"], is_optional=True),
        "has_close_button": ParameterSpec(type=["boolean"], is_optional=True),
        "has_pin_button": ParameterSpec(type=["boolean"], is_optional=True),
    },
    handlers={
        "pin": toggle_pin,
        "frame_closed": frame_closed,
    },
    build_func=build,
)
