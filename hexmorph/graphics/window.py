# hexmorph/graphics/window.py
import logging

import moderngl
import pygame

from hexmorph.types import Size

logger = logging.getLogger(__name__)


class Window:
    """
    Manages the OS Window and OpenGL Context.
    """

    def __init__(self, width: int, height: int, title: str = "hexmorph"):
        if not pygame.get_init():
            pygame.init()

        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MAJOR_VERSION, 3)
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MINOR_VERSION, 3)
        pygame.display.gl_set_attribute(
            pygame.GL_CONTEXT_PROFILE_MASK, pygame.GL_CONTEXT_PROFILE_CORE
        )
        pygame.display.gl_set_attribute(pygame.GL_DOUBLEBUFFER, 1)

        self._screen = pygame.display.set_mode(
            (width, height), pygame.OPENGL | pygame.DOUBLEBUF | pygame.RESIZABLE
        )
        pygame.display.set_caption(title)

        self.ctx = moderngl.create_context()

        version = self.ctx.version_code
        logger.info(
            "OpenGL Context Created: %s.%s", str(version)[0], str(version)[1:]
        )

    @property
    def size(self) -> Size:
        width, height = self._screen.get_size()
        return width, height

    def resize(self, width: int, height: int) -> None:
        self.ctx.viewport = (0, 0, width, height)

    def present(self) -> None:
        pygame.display.flip()

    def destroy(self) -> None:
        pygame.quit()
