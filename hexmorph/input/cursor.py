# hexmorph/input/cursor.py
from enum import Enum
from typing import Tuple

from hexmorph.graphics.settings import DrawSettings
from hexmorph.types import Size

# Cursor travel across the full window maps to this range of a and b.
HEX_PARAM_SCALE = 10.0


class CursorMode(str, Enum):
    """What moving the cursor controls."""

    HEX_PARAMS = "hex_params"
    OFFSET = "offset"

    def toggled(self) -> "CursorMode":
        if self is CursorMode.HEX_PARAMS:
            return CursorMode.OFFSET
        return CursorMode.HEX_PARAMS


def apply_cursor(
    state: DrawSettings,
    mode: CursorMode,
    position: Tuple[float, float],
    size: Size,
) -> bool:
    """
    Update `state` from a cursor position in window pixels.

    HEX_PARAMS drives a from x and b from y, centered on the window middle.
    OFFSET moves the second grid copy, with y pointing up.
    Returns False when nothing changed (zero-sized window).
    """
    width, height = size
    if width <= 0 or height <= 0:
        return False

    u = position[0] / width - 0.5
    v = position[1] / height - 0.5

    if mode is CursorMode.HEX_PARAMS:
        state.a = u * HEX_PARAM_SCALE
        state.b = v * HEX_PARAM_SCALE
    else:
        state.offset = (u, -v)
    return True
