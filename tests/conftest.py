import re
from typing import Any, Dict, List, Tuple

import moderngl
import pytest

from hexmorph.meshing.assembler import assemble
from hexmorph.meshing.settings import MeshSettings

UNIFORM_DECL = re.compile(r"^\s*uniform\s+\w+\s+(\w+)\s*;", re.MULTILINE)


class FakeBuffer:
    def __init__(self, data: bytes):
        self.data = data
        self.released = False

    def release(self):
        self.released = True


class FakeUniform:
    """Stands in for moderngl.Uniform; writes land in the owning program."""

    def __init__(self, program, name):
        self._program = program
        self.name = name

    @property
    def value(self):
        return self._program.uniforms[self.name]

    @value.setter
    def value(self, value):
        self._program.uniforms[self.name] = value
        self._program.uniform_log.append((self.name, value))


class FakeProgram:
    _next_glo = 1

    def __init__(self, vertex_shader, fragment_shader, geometry_shader=None):
        self.glo = FakeProgram._next_glo
        FakeProgram._next_glo += 1
        self.vertex_shader = vertex_shader
        self.fragment_shader = fragment_shader
        self.geometry_shader = geometry_shader
        self.released = False
        self.uniforms: Dict[str, Any] = {}
        self.uniform_log: List[Tuple[str, Any]] = []
        self._members = {
            name: FakeUniform(self, name)
            for source in (vertex_shader, fragment_shader, geometry_shader or "")
            for name in UNIFORM_DECL.findall(source)
        }

    def __contains__(self, name):
        return name in self._members

    def __getitem__(self, name):
        return self._members[name]

    def release(self):
        self.released = True


class FakeVertexArray:
    def __init__(self, ctx, program, content, index_buffer, index_element_size):
        self.ctx = ctx
        self.program = program
        self.content = content
        self.index_buffer = index_buffer
        self.index_element_size = index_element_size
        self.released = False

    def render(self, mode, vertices=-1):
        self.ctx.render_log.append((mode, vertices))
        self.ctx.draw_log.append((mode, dict(self.program.uniforms)))

    def release(self):
        self.released = True


class FakeContext:
    """Records what a moderngl.Context would have been asked to do."""

    def __init__(self):
        self.buffers: List[FakeBuffer] = []
        self.vertex_arrays: List[FakeVertexArray] = []
        self.programs: List[FakeProgram] = []
        self.render_log: List[Tuple[int, int]] = []
        self.draw_log: List[Tuple[int, Dict[str, Any]]] = []
        self.clears = 0
        self.enabled = []
        self.blend_func = None
        self.viewport = (0, 0, 0, 0)

    def buffer(self, data):
        buf = FakeBuffer(data)
        self.buffers.append(buf)
        return buf

    def vertex_array(self, program, content, index_buffer=None, index_element_size=4):
        vao = FakeVertexArray(self, program, content, index_buffer, index_element_size)
        self.vertex_arrays.append(vao)
        return vao

    def program(self, vertex_shader, fragment_shader, geometry_shader=None):
        prog = FakeProgram(vertex_shader, fragment_shader, geometry_shader)
        self.programs.append(prog)
        return prog

    def clear(self, *color):
        self.clears += 1

    def enable(self, flags):
        self.enabled.append(flags)


@pytest.fixture
def fake_ctx(monkeypatch):
    """A fresh recording GL context for each test."""
    monkeypatch.setattr(moderngl, "Uniform", FakeUniform)
    return FakeContext()


@pytest.fixture
def unit_mesh():
    """A single hexagon of edge size 1."""
    return assemble(1, 1, 1.0)


@pytest.fixture
def grid_mesh():
    """A 3x4 grid, enough for both column parities."""
    return assemble(3, 4, 0.25)


@pytest.fixture
def web_settings():
    return MeshSettings(index_width=16)
