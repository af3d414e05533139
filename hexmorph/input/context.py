# hexmorph/input/context.py
from typing import Dict, Optional

import pygame

InputAction = str

QUIT: InputAction = "QUIT"
TOGGLE_GRID: InputAction = "TOGGLE_GRID"
TOGGLE_TRIANGLES: InputAction = "TOGGLE_TRIANGLES"
TOGGLE_LINES: InputAction = "TOGGLE_LINES"
TOGGLE_CURSOR_MODE: InputAction = "TOGGLE_CURSOR_MODE"


class InputContext:
    """
    A named collection of Key -> Action mappings.
    Example:
        viewer = InputContext("viewer", {K_g: TOGGLE_GRID})
    """

    def __init__(self, name: str, bindings: Dict[int, InputAction] | None = None):
        self.name = name
        # Mapping: Pygame Key Code (int) -> Action String
        self.bindings: Dict[int, InputAction] = dict(bindings) if bindings else {}

    def bind(self, key: int, action: InputAction):
        """Map a physical key to an abstract action."""
        self.bindings[key] = action

    def unbind(self, key: int):
        if key in self.bindings:
            del self.bindings[key]

    def get_action(self, key: int) -> Optional[InputAction]:
        return self.bindings.get(key)


def viewer_context() -> InputContext:
    return InputContext(
        "viewer",
        {
            pygame.K_ESCAPE: QUIT,
            pygame.K_g: TOGGLE_GRID,
            pygame.K_t: TOGGLE_TRIANGLES,
            pygame.K_l: TOGGLE_LINES,
            pygame.K_o: TOGGLE_CURSOR_MODE,
        },
    )
