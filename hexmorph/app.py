# hexmorph/app.py
from __future__ import annotations

import logging
from typing import Optional

import pygame

from hexmorph.graphics.renderer import HexRenderer
from hexmorph.graphics.settings import DrawSettings, ViewerSettings
from hexmorph.graphics.window import Window
from hexmorph.input.context import (
    QUIT,
    TOGGLE_CURSOR_MODE,
    TOGGLE_GRID,
    TOGGLE_LINES,
    TOGGLE_TRIANGLES,
    InputAction,
    viewer_context,
)
from hexmorph.input.cursor import CursorMode, apply_cursor
from hexmorph.input.handler import InputHandler
from hexmorph.meshing.assembler import assemble

logger = logging.getLogger(__name__)


class Viewer:
    """
    Interactive window showing the morphing hex grid.

    Keys: ESC quits, G/T/L toggle grid, triangles and lines, O switches
    the cursor between driving (a, b) and the offset of the second copy.
    """

    def __init__(self, settings: Optional[ViewerSettings] = None):
        self.settings = settings or ViewerSettings()
        self.state = DrawSettings()
        self.cursor_mode = CursorMode.HEX_PARAMS
        self.input = InputHandler(viewer_context())

        self.window: Window | None = None
        self.renderer: HexRenderer | None = None
        self.running = False
        self.fps = 60

    def handle_action(self, action: InputAction) -> bool:
        """Apply an action; returns True when the frame must be redrawn."""
        state = self.state
        if action == QUIT:
            self.running = False
            return False
        if action == TOGGLE_GRID:
            state.draw_grid = not state.draw_grid
            return True
        if action == TOGGLE_TRIANGLES:
            state.draw_triangles = not state.draw_triangles
            return True
        if action == TOGGLE_LINES:
            state.draw_lines = not state.draw_lines
            return True
        if action == TOGGLE_CURSOR_MODE:
            self.cursor_mode = self.cursor_mode.toggled()
            logger.info("Cursor now controls %s", self.cursor_mode.value)
            return False
        return False

    def _start(self) -> None:
        s = self.settings
        self.window = Window(s.width, s.height, s.title)
        self.renderer = HexRenderer(self.window.ctx)

        mesh = assemble(s.rows, s.columns, s.size, s.mesh_settings)
        self.renderer.set_mesh(mesh)
        logger.info(
            "Uploaded %dx%d grid (%d vertices)", s.rows, s.columns, mesh.vertex_count
        )

    def run(self) -> None:
        self._start()
        assert self.window and self.renderer

        self.running = True
        need_draw = True
        clock = pygame.time.Clock()

        try:
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.VIDEORESIZE:
                        self.window.resize(event.w, event.h)
                        need_draw = True
                        continue

                    action = self.input.process_event(event)
                    if action:
                        need_draw |= self.handle_action(action)

                position = self.input.consume_cursor()
                if position is not None:
                    need_draw |= apply_cursor(
                        self.state, self.cursor_mode, position, self.window.size
                    )

                if need_draw and self.running:
                    self.renderer.draw(self.state)
                    self.window.present()
                    need_draw = False

                clock.tick(self.fps)
        finally:
            self.renderer.release()
            self.window.destroy()
