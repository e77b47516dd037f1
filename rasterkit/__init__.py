"""Software rasterizer with Phong shading, OBJ loading and TGA output."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "matrix",
    "model",
    "render",
    "scene",
    "shader",
    "tgaimage",
    "triangle",
    "vector",
]