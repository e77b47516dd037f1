"""Triangles with texture lookup and barycentric helpers."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .tgaimage import TGAColor, TGAImage
from .vector import Vec3, Vec4


def interpolate_color(p0: TGAColor, p1: TGAColor, t: float) -> TGAColor:
    """Linear blend of two colours: ``p0`` at t = 0, ``p1`` at t = 1."""

    def mix(a: int, b: int) -> float:
        return a * (1.0 - t) + b * t

    return TGAColor(mix(p0.r, p1.r), mix(p0.g, p1.g), mix(p0.b, p1.b), mix(p0.a, p1.a))


def bilinear_interpolate(img: TGAImage, u: float, v: float) -> TGAColor:
    """Blend the four pixels around (u, v), clamping at the right and bottom edges."""
    iu, iv = int(u), int(v)
    u0 = iu if iu < img.width else img.width - 1
    u1 = u0 + 1 if u0 + 1 < img.width else u0
    v0 = iv if iv < img.height else img.height - 1
    v1 = v0 + 1 if v0 + 1 < img.height else v0
    p0 = img.get(u0, v0)
    p1 = img.get(u0, v1)
    p2 = img.get(u1, v0)
    p3 = img.get(u1, v1)
    s = iv + 1 - v
    t = iu + 1 - u
    return interpolate_color(interpolate_color(p0, p1, s), interpolate_color(p2, p3, s), t)


def _three_vectors(items: Iterable[Vec3], what: str) -> list[Vec3]:
    vectors = [Vec3(*item) for item in items]
    if len(vectors) != 3:
        raise ValueError(f"a triangle needs exactly three {what}, got {len(vectors)}")
    return vectors


class Triangle:
    """A triangle with object-space vertices, homogeneous vertices and texture maps."""

    def __init__(
        self,
        verts: Optional[Sequence[Vec3]] = None,
        color: Optional[TGAColor] = None,
    ) -> None:
        self.verts: list[Vec3] = [Vec3() for _ in range(3)]
        self.screen_coords: list[Vec3] = [Vec3() for _ in range(3)]
        self.uv_coords: list[Vec3] = [Vec3() for _ in range(3)]
        self.n_coords: list[Vec3] = []
        self.v_homogeneous: list[Vec4] = [Vec4() for _ in range(3)]
        self.diffuse_map: Optional[TGAImage] = None
        self.normal_map: Optional[TGAImage] = None
        self.spec_map: Optional[TGAImage] = None
        self.normal = Vec3()
        self.color = TGAColor(bytespp=1)
        if color is not None:
            self.color = color
        if verts is None:
            return
        self.verts = _three_vectors(verts, "vertices")
        if color is None:
            self.v_homogeneous = [Vec4.from_vec3(v) for v in self.verts]
        a, b, c = self.verts
        self.normal = (c - a).cross(b - a).normalized()

    def __getitem__(self, idx: int) -> Vec3:
        return self.verts[idx]

    def __repr__(self) -> str:
        return f"Triangle({self.verts!r})"

    def is_inside(self, pos) -> bool:
        """Whether the point strictly lies inside the projected (x, y) triangle."""
        t0, t1, t2 = (Vec3(v.x, v.y, 1) for v in self.v_homogeneous)
        f0 = t1.cross(t0)
        f1 = t2.cross(t1)
        f2 = t0.cross(t2)
        p = Vec3(pos[0], pos[1], 1.0)
        return (
            p.dot(f0) * f0.dot(t2) > 0
            and p.dot(f1) * f1.dot(t0) > 0
            and p.dot(f2) * f2.dot(t1) > 0
        )

    def barycentric(self, x: float, y: float) -> tuple[float, float, float]:
        """Barycentric coordinates of (x, y) against the projected vertices."""
        v0, v1, v2 = self.v_homogeneous
        alpha = (-(x - v1.x) * (v2.y - v1.y) + (y - v1.y) * (v2.x - v1.x)) / (
            -(v0.x - v1.x) * (v2.y - v1.y) + (v0.y - v1.y) * (v2.x - v1.x)
        )
        beta = (-(x - v2.x) * (v0.y - v2.y) + (y - v2.y) * (v0.x - v2.x)) / (
            -(v1.x - v2.x) * (v0.y - v2.y) + (v1.y - v2.y) * (v0.x - v2.x)
        )
        return alpha, beta, 1.0 - alpha - beta

    def set_uv_coords(self, uv_coords: Sequence[Vec3]) -> None:
        self.uv_coords = _three_vectors(uv_coords, "texture coordinates")

    def set_n_coords(self, n_coords: Sequence[Vec3]) -> None:
        self.n_coords = _three_vectors(n_coords, "normal coordinates")

    @staticmethod
    def _sample(
        image: Optional[TGAImage], size_source: Optional[TGAImage], texcoords, name: str
    ) -> TGAColor:
        if image is None or size_source is None:
            raise ValueError(f"triangle has no {name} map")
        fx = texcoords[0] * (size_source.width - 1)
        fy = texcoords[1] * (size_source.height - 1)
        return bilinear_interpolate(image, fx, fy)

    def get_color(self, texcoords) -> TGAColor:
        """Diffuse colour at the given texture coordinates."""
        return self._sample(self.diffuse_map, self.diffuse_map, texcoords, "diffuse")

    def get_normal(self, texcoords) -> TGAColor:
        """Normal-map texel at the given texture coordinates."""
        return self._sample(self.normal_map, self.normal_map, texcoords, "normal")

    def get_spec(self, texcoords) -> TGAColor:
        """Specular texel; coordinates are scaled by the normal map's size."""
        if self.normal_map is None:
            raise ValueError("triangle has no normal map")
        return self._sample(self.spec_map, self.normal_map, texcoords, "specular")