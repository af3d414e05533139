# hexmorph/graphics/uniforms.py
from typing import Any

import moderngl


def set_uniform(
    program: moderngl.Program | None, name: str, value: Any
) -> None:
    """Write a uniform, skipping ones the GLSL compiler optimised out."""
    if not program:
        return

    if name not in program:
        return

    member = program[name]

    if isinstance(member, moderngl.Uniform):
        if isinstance(value, bytes):
            member.write(value)
        else:
            member.value = value
