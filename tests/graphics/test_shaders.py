import pytest

from hexmorph.graphics.shaders.program_types import ShaderId, ShaderStages
from hexmorph.graphics.shaders.shader_manager import (
    MORPH_PROGRAM,
    ShaderManager,
    ShaderRequest,
)
from hexmorph.graphics.shaders.sources import load_shader_source
from hexmorph.meshing.kinds import Kind

def test_desktop_shader_uses_kind_values():
    source = load_shader_source("morph.vert")

    assert f"in_kind == {int(Kind.CORNER)}u ? 0.0" in source
    assert f"in_kind == {int(Kind.INTERNAL)}u ? b : a" in source
    for name in ("in_position", "in_attractor", "uniform vec2 offset"):
        assert name in source

def test_web_shader_compares_float_kinds():
    source = load_shader_source("morph_web.vert")

    assert "attribute float in_kind" in source
    assert "in_kind > 1.5 ? 0.0 : (in_kind < 0.5 ? b : a)" in source

def test_missing_shader_file():
    with pytest.raises(FileNotFoundError, match="missing"):
        load_shader_source("nope.vert")

def test_manager_compiles_from_files(fake_ctx):
    manager = ShaderManager(fake_ctx)
    handle = manager.get(MORPH_PROGRAM)

    assert handle.label == "HexMorph"
    assert "in_attractor" in handle.program.vertex_shader
    assert "f_color" in handle.program.fragment_shader

def test_manager_caches_programs(fake_ctx):
    manager = ShaderManager(fake_ctx)

    assert manager.get(MORPH_PROGRAM) is manager.get(MORPH_PROGRAM)
    assert len(fake_ctx.programs) == 1

def test_manager_rejects_missing_stage(fake_ctx):
    req = ShaderRequest(ShaderId("broken"), ShaderStages(vertex="void main() {}\n"))

    with pytest.raises(ValueError, match="missing vertex or fragment"):
        ShaderManager(fake_ctx).get(req)
