# hexmorph/graphics/shaders/shader_manager.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

import moderngl

from hexmorph.graphics.shaders.program_types import (
    ProgramHandle,
    ShaderId,
    ShaderStages,
)
from hexmorph.graphics.shaders.sources import shader_path

logger = logging.getLogger(__name__)


def _load_source(src: str | None) -> str | None:
    """
    Load shader source.

    If src looks like a file path, load it.
    Otherwise assume it is raw GLSL.
    """
    if src is None:
        return None
    if "\n" not in src:
        p = Path(src)
        if p.exists():
            return p.read_text(encoding="utf-8")
    return src


@dataclass(frozen=True, slots=True)
class ShaderRequest:
    """Request to load/compile a shader program."""

    shader_id: ShaderId
    stages: ShaderStages
    label: str = ""


MORPH_PROGRAM = ShaderRequest(
    shader_id=ShaderId("morph"),
    stages=ShaderStages(
        vertex=str(shader_path("morph.vert")),
        fragment=str(shader_path("solid.frag")),
    ),
    label="HexMorph",
)


class ShaderManager:
    """Compiles shader programs and caches one per shader id."""

    def __init__(self, gl: moderngl.Context) -> None:
        self._gl = gl
        self._shader_cache: Dict[ShaderId, ProgramHandle] = {}

    def get(self, req: ShaderRequest) -> ProgramHandle:
        """Return a compiled program for the request, compiling and caching as needed."""
        cached = self._shader_cache.get(req.shader_id)
        if cached is not None:
            return cached

        vert = _load_source(req.stages.vertex)
        frag = _load_source(req.stages.fragment)
        geom = _load_source(req.stages.geometry)

        if vert is None or frag is None:
            raise ValueError(
                f"Shader {req.shader_id} is missing vertex or fragment stage."
            )
        program = self._gl.program(
            vertex_shader=vert,
            fragment_shader=frag,
            geometry_shader=geom,
        )
        logger.debug("Compiled shader program %s", req.label or req.shader_id)

        handle = ProgramHandle(program=program, label=req.label or str(req.shader_id))
        self._shader_cache[req.shader_id] = handle
        return handle

    def release(self) -> None:
        for handle in self._shader_cache.values():
            handle.program.release()
        self._shader_cache.clear()
