# hexmorph/graphics/renderer.py
from __future__ import annotations

from typing import Optional, Tuple

import moderngl

from hexmorph.graphics.gpu_mesh import GPUHexMesh, Primitive
from hexmorph.graphics.settings import Color, DrawSettings
from hexmorph.graphics.shaders.shader_manager import MORPH_PROGRAM, ShaderManager
from hexmorph.graphics.uniforms import set_uniform
from hexmorph.meshing.types import Mesh


class HexRenderer:
    """
    Draws an uploaded hex mesh with the morph program.

    Each frame draws the whole grid twice, once in place and once shifted
    by DrawSettings.offset. Per copy: the unmorphed wireframe, the morphed
    fill, then the morphed wireframe.
    """

    def __init__(
        self,
        ctx: moderngl.Context,
        shader_manager: Optional[ShaderManager] = None,
    ) -> None:
        self._ctx = ctx
        self._shaders = shader_manager or ShaderManager(ctx)
        self._program = self._shaders.get(MORPH_PROGRAM).program
        self._gpu_mesh: GPUHexMesh | None = None

    @property
    def gpu_mesh(self) -> GPUHexMesh | None:
        return self._gpu_mesh

    def set_mesh(self, mesh: Mesh) -> None:
        if self._gpu_mesh is not None:
            self._gpu_mesh.release()
        self._gpu_mesh = GPUHexMesh(self._ctx, mesh)

    def draw(self, state: DrawSettings) -> None:
        ctx = self._ctx
        ctx.clear(0.0, 0.0, 0.0, 0.0)
        ctx.enable(moderngl.BLEND)
        ctx.blend_func = moderngl.SRC_COLOR, moderngl.ONE_MINUS_SRC_COLOR

        if self._gpu_mesh is None:
            return

        for offset in ((0.0, 0.0), state.offset):
            if state.draw_grid:
                self._draw("lines", 0.0, 0.0, offset, state.grid_color)
            if state.draw_triangles:
                self._draw("triangles", state.a, state.b, offset, state.fill_color)
            if state.draw_lines:
                self._draw("lines", state.a, state.b, offset, state.line_color)

    def _draw(
        self,
        primitive: Primitive,
        a: float,
        b: float,
        offset: Tuple[float, float],
        color: Color,
    ) -> None:
        assert self._gpu_mesh
        program = self._program
        set_uniform(program, "a", a)
        set_uniform(program, "b", b)
        set_uniform(program, "offset", tuple(offset))
        set_uniform(program, "color", tuple(color))
        self._gpu_mesh.render(program, primitive)

    def release(self) -> None:
        if self._gpu_mesh is not None:
            self._gpu_mesh.release()
            self._gpu_mesh = None
        self._shaders.release()
