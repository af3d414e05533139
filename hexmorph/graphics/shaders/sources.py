# hexmorph/graphics/shaders/sources.py
from pathlib import Path

SHADER_DIR = Path(__file__).parent / "default"


def shader_path(name: str) -> Path:
    return SHADER_DIR / name


def load_shader_source(name: str) -> str:
    """Read one of the bundled shader files, e.g. "morph.vert"."""
    path = shader_path(name)
    if not path.exists():
        raise FileNotFoundError(f"Shader {name} missing in {SHADER_DIR}")
    return path.read_text(encoding="utf-8")
