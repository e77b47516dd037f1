"""Command line entry point: render a model to a TGA file."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .model import Model
from .render import Render
from .scene import Camera, Light, Scene
from .shader import ShaderType
from .tgaimage import ImageFormat, TGAError, TGAImage
from .vector import Vec3

DEFAULT_MODEL = "model/african_head"
DEFAULT_SIZE = 2048
DEFAULT_OUTPUT = "output.tga"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rasterkit",
        description="Render a textured Wavefront OBJ model to a TGA image.",
    )
    parser.add_argument(
        "model",
        nargs="?",
        default=DEFAULT_MODEL,
        help="model path without extension (reads <model>.obj and <model>_*.tga)",
    )
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help="output TGA file")
    parser.add_argument(
        "-s", "--size", type=int, default=DEFAULT_SIZE, help="image width and height in pixels"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)
    if args.size <= 0:
        parser.error("size must be positive")

    width = height = args.size
    camera = Camera(Vec3(-1, 1, -3), Vec3(0, 0, 0), 45, width / height, 0.035, 50)
    scene = Scene(camera)
    scene.add_model(Model(args.model))
    scene.add_light(Light(Vec3(2, 2, 2), Vec3(15, 15, 15)))
    scene.add_light(Light(Vec3(-2, 2, -2), Vec3(15, 15, 15)))

    image = TGAImage(width, height, ImageFormat.RGB)
    render = Render(image, ShaderType.PHONG_SHADING)
    scene.models[0].position = Vec3(0, 0, 0)
    render.render_scene(scene)
    try:
        image.write_tga_file(args.output)
    except TGAError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())