"""Vertex and fragment shaders."""

from __future__ import annotations

import abc
import enum
import math
from dataclasses import dataclass
from typing import List

from .matrix import Matrix4
from .scene import Light
from .tgaimage import TGAColor
from .triangle import Triangle
from .vector import Vec3, Vec4

_SHININESS = 150
_KA = Vec3.splat(0.05)
_AMBIENT = Vec3(10, 10, 10)


class ShaderType(enum.Enum):
    """The available shading models."""

    PHONG_SHADING = "phong"


@dataclass
class ShadingPixel:
    """Everything a fragment shader needs for one pixel."""

    tex_coord: Vec3
    frag_pos: Vec3
    eye_pos: Vec3
    obj: Triangle
    lights: List[Light]


class Shader(abc.ABC):
    """A shader that maps vertices to the screen and shades fragments."""

    def __init__(self, viewport_matrix: Matrix4) -> None:
        self.viewport_matrix = viewport_matrix

    def transform_vertices(self, mat: Matrix4, tri: Triangle) -> None:
        """Apply ``mat`` to the triangle's homogeneous vertices and divide x, y, z by w."""
        transformed = []
        for vert in tri.v_homogeneous:
            v = mat * vert
            transformed.append(Vec4(v.x / v.w, v.y / v.w, v.z / v.w, v.w))
        tri.v_homogeneous = transformed

    @abc.abstractmethod
    def vertex_process(self, mvp: Matrix4, tri: Triangle) -> None:
        """Move the triangle's vertices into screen space."""

    @abc.abstractmethod
    def fragment_process(self, pix: ShadingPixel) -> TGAColor:
        """Colour of one pixel."""


def _attenuate(intensity: Vec3, r2: float) -> Vec3:
    if r2 != 0:
        return intensity / r2
    return Vec3(*(math.copysign(math.inf, c) if c else math.nan for c in intensity))


def _channel(value: float) -> float:
    if math.isnan(value):
        return 0
    return value if value < 255 else 255


class PhongShader(Shader):
    """Blinn-Phong shading driven by diffuse, normal and specular maps."""

    def vertex_process(self, mvp: Matrix4, tri: Triangle) -> None:
        self.transform_vertices(mvp, tri)
        self.transform_vertices(self.viewport_matrix, tri)

    def fragment_process(self, pix: ShadingPixel) -> TGAColor:
        obj = pix.obj
        pcolor = obj.get_color(pix.tex_coord)
        pnormal = obj.get_normal(pix.tex_coord)
        scolor = obj.get_spec(pix.tex_coord)
        kd = Vec3(pcolor.r, pcolor.g, pcolor.b)
        ks = Vec3(scolor.r, scolor.g, scolor.b)
        n = Vec3(pnormal.r, pnormal.g, pnormal.b).normalized()
        v = (pix.eye_pos - pix.frag_pos).normalized()
        c = Vec3()
        for light in pix.lights:
            to_light = light.pos - pix.frag_pos
            r2 = to_light.norm2()
            l = to_light.normalized()
            falloff = _attenuate(light.intensity, r2)
            c = c + kd.cwise(falloff) * max(0.0, n.dot(l))
            h = (v + l).normalized()
            c = c + ks.cwise(falloff) * max(0.0, n.dot(h)) ** _SHININESS
            c = c + _KA.cwise(_AMBIENT)
        return TGAColor(_channel(c.x), _channel(c.y), _channel(c.z), 255)