"""Wavefront OBJ models with diffuse, normal and specular textures."""

from __future__ import annotations

import logging
import os
from os import PathLike
from typing import Union

from .tgaimage import TGAError, TGAImage
from .triangle import Triangle
from .vector import Vec3

logger = logging.getLogger(__name__)


def _load_texture(path: str) -> TGAImage:
    try:
        image = TGAImage.read_tga_file(path)
    except TGAError as exc:
        logger.warning("%s", exc)
        return TGAImage()
    image.flip_vertically()
    return image


def _floats(tokens: list[str]) -> list[float]:
    values: list[float] = []
    for token in tokens[:3]:
        try:
            values.append(float(token))
        except ValueError:
            break
    return values


class Model:
    """A triangle mesh loaded from ``<name>.obj`` plus ``<name>_*.tga`` maps."""

    def __init__(self, filename: Union[str, "PathLike[str]"]) -> None:
        base = os.fspath(filename)
        self.verts: list[Vec3] = []
        self.faces: list[Triangle] = []
        self.texcoords: list[Vec3] = []
        self.position = Vec3()
        self.rotation = Vec3()
        self.scale = Vec3.splat(1)
        self.normal_map = _load_texture(base + "_nm.tga")
        self.diffuse_map = _load_texture(base + "_diffuse.tga")
        self.spec_map = _load_texture(base + "_spec.tga")
        try:
            with open(base + ".obj", encoding="utf-8", errors="replace") as handle:
                for line in handle:
                    self._parse_line(line.rstrip("\r\n"))
        except OSError as exc:
            logger.warning("can't open model %s: %s", base + ".obj", exc)
            return
        logger.info("# v# %d f# %d", len(self.verts), len(self.faces))

    def _parse_line(self, line: str) -> None:
        if line.startswith("v "):
            self.verts.append(Vec3(*_floats(line.split()[1:])))
        elif line.startswith("f "):
            self.faces.append(self._parse_face(line))
        elif line.startswith("vt "):
            self.texcoords.append(Vec3(*_floats(line.split()[1:])))

    def _parse_face(self, line: str) -> Triangle:
        groups: list[tuple[int, int, int]] = []
        for token in line.split()[1:]:
            try:
                v, vt, vn = (int(part) - 1 for part in token.split("/"))
            except ValueError:
                break
            groups.append((v, vt, vn))
        if len(groups) < 3:
            raise ValueError(f"malformed face line: {line!r}")
        tri = Triangle([self.vert(g[0]) for g in groups[:3]])
        tri.set_uv_coords([self.texcoord(g[1]) for g in groups[:3]])
        tri.diffuse_map = self.diffuse_map
        tri.normal_map = self.normal_map
        tri.spec_map = self.spec_map
        return tri

    def num_verts(self) -> int:
        return len(self.verts)

    def num_faces(self) -> int:
        return len(self.faces)

    def vert(self, i: int) -> Vec3:
        if not 0 <= i < len(self.verts):
            raise IndexError(f"vertex index {i} out of range")
        return self.verts[i]

    def texcoord(self, i: int) -> Vec3:
        if not 0 <= i < len(self.texcoords):
            raise IndexError(f"texture coordinate index {i} out of range")
        return self.texcoords[i]

    def face(self, idx: int) -> Triangle:
        return self.faces[idx]