# hexmorph/graphics/shaders/__init__.py
from hexmorph.graphics.shaders.program_types import (
    ProgramHandle,
    ShaderId,
    ShaderStages,
)
from hexmorph.graphics.shaders.shader_manager import (
    MORPH_PROGRAM,
    ShaderManager,
    ShaderRequest,
)
from hexmorph.graphics.shaders.sources import load_shader_source, shader_path

__all__ = [
    "MORPH_PROGRAM",
    "ProgramHandle",
    "ShaderId",
    "ShaderManager",
    "ShaderRequest",
    "ShaderStages",
    "load_shader_source",
    "shader_path",
]
