# hexmorph/input/handler.py
from typing import Optional, Tuple

import pygame

from hexmorph.input.context import QUIT, InputAction, InputContext


class InputHandler:
    """
    Turns pygame events into viewer actions and tracks the cursor.
    """

    def __init__(self, context: InputContext):
        self.context = context
        self.cursor_position: Tuple[float, float] | None = None
        self.cursor_moved = False

    def process_event(self, event: pygame.event.Event) -> Optional[InputAction]:
        """Feed Pygame events here; returns the action a key press triggered."""
        if event.type == pygame.QUIT:
            return QUIT

        if event.type == pygame.KEYDOWN:
            return self.context.get_action(event.key)

        if event.type == pygame.MOUSEMOTION:
            self.cursor_position = (float(event.pos[0]), float(event.pos[1]))
            self.cursor_moved = True

        return None

    def consume_cursor(self) -> Tuple[float, float] | None:
        """Latest cursor position if it moved since the last call."""
        if not self.cursor_moved:
            return None
        self.cursor_moved = False
        return self.cursor_position
