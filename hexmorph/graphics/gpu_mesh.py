# hexmorph/graphics/gpu_mesh.py
from typing import Dict, Literal, Tuple

import moderngl

from hexmorph.meshing.types import VERTEX_LAYOUT, Mesh

Primitive = Literal["lines", "triangles"]

RENDER_MODES: Dict[str, int] = {
    "lines": moderngl.LINES,
    "triangles": moderngl.TRIANGLES,
}


class GPUHexMesh:
    """
    Holds the GPU resources for a hex mesh: one VBO per vertex attribute,
    one IBO per primitive type, and the VAOs joining them.

    Empty buffers are never uploaded; a primitive without indices simply
    renders nothing.
    """

    def __init__(self, ctx: moderngl.Context, mesh: Mesh) -> None:
        self._ctx = ctx
        self.vertex_count = mesh.vertex_count
        self.index_element_size = mesh.index_dtype.itemsize

        self.vbos: Dict[str, moderngl.Buffer] = {}
        if mesh.vertex_count:
            for layout in VERTEX_LAYOUT:
                data = getattr(mesh, layout.buffer)
                self.vbos[layout.buffer] = ctx.buffer(data.tobytes())

        self.ibos: Dict[str, moderngl.Buffer] = {}
        self.index_counts: Dict[str, int] = {}
        for primitive, indices in (
            ("lines", mesh.lines),
            ("triangles", mesh.triangles),
        ):
            if indices.size and mesh.vertex_count:
                self.ibos[primitive] = ctx.buffer(indices.tobytes())
                self.index_counts[primitive] = int(indices.size)

        self._vaos: Dict[Tuple[int, str], moderngl.VertexArray] = {}

    def get_vao(
        self, program: moderngl.Program, primitive: Primitive
    ) -> moderngl.VertexArray | None:
        """Retrieves or creates the VAO drawing `primitive` with `program`."""
        ibo = self.ibos.get(primitive)
        if ibo is None:
            return None

        key = (program.glo, primitive)
        if key in self._vaos:
            return self._vaos[key]

        content = [
            (self.vbos[layout.buffer], layout.format, *layout.attributes)
            for layout in VERTEX_LAYOUT
        ]
        vao = self._ctx.vertex_array(
            program,
            content,
            index_buffer=ibo,
            index_element_size=self.index_element_size,
        )

        self._vaos[key] = vao
        return vao

    def render(self, program: moderngl.Program, primitive: Primitive) -> None:
        vao = self.get_vao(program, primitive)
        if vao is None:
            return
        vao.render(RENDER_MODES[primitive], vertices=self.index_counts[primitive])

    def release(self) -> None:
        for vao in self._vaos.values():
            vao.release()
        self._vaos.clear()

        for buffer in (*self.vbos.values(), *self.ibos.values()):
            buffer.release()
        self.vbos.clear()
        self.ibos.clear()
        self.index_counts.clear()
