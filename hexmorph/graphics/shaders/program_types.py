# hexmorph/graphics/shaders/program_types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import NewType, Optional

import moderngl

ShaderId = NewType("ShaderId", str)


@dataclass(frozen=True, slots=True)
class ShaderStages:
    """
    All stages for a single GPU program.

    Each stage is either a path to a shader file or raw GLSL.
    """

    vertex: Optional[str] = None
    fragment: Optional[str] = None
    geometry: Optional[str] = None


@dataclass(frozen=True)
class ProgramHandle:
    """Wraps a compiled ModernGL program."""

    program: moderngl.Program
    label: str
