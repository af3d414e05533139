# hexmorph/input/__init__.py
from hexmorph.input.context import (
    QUIT,
    TOGGLE_CURSOR_MODE,
    TOGGLE_GRID,
    TOGGLE_LINES,
    TOGGLE_TRIANGLES,
    InputAction,
    InputContext,
    viewer_context,
)
from hexmorph.input.cursor import CursorMode, apply_cursor
from hexmorph.input.handler import InputHandler

__all__ = [
    "CursorMode",
    "InputAction",
    "InputContext",
    "InputHandler",
    "apply_cursor",
    "viewer_context",
    "QUIT",
    "TOGGLE_CURSOR_MODE",
    "TOGGLE_GRID",
    "TOGGLE_LINES",
    "TOGGLE_TRIANGLES",
]
