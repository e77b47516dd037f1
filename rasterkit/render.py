"""Scan conversion of scenes into a TGA image."""

from __future__ import annotations

import logging
import math
import sys
from typing import Sequence

from .matrix import Matrix4
from .model import Model
from .scene import PI, Camera, Scene
from .shader import PhongShader, Shader, ShaderType, ShadingPixel
from .tgaimage import TGAColor, TGAImage
from .triangle import Triangle
from .vector import Vec3, Vec4

logger = logging.getLogger(__name__)

FAR_DEPTH = -sys.float_info.max


class Render:
    """Rasterises scenes into an image with a depth buffer."""

    def __init__(self, image: TGAImage, shader_type: ShaderType = ShaderType.PHONG_SHADING) -> None:
        self.image = image
        self.width = image.width
        self.height = image.height
        self.zbuffer = [FAR_DEPTH] * (self.width * self.height)
        self.shader = self._make_shader(shader_type)

    def _make_shader(self, shader_type: ShaderType) -> Shader:
        if shader_type is ShaderType.PHONG_SHADING:
            half_w = self.width / 2.0
            half_h = self.height / 2.0
            viewport = Matrix4(
                [
                    (half_w, 0, 0, half_w),
                    (0, half_h, 0, half_h),
                    (0, 0, 1, 0),
                    (0, 0, 0, 1),
                ]
            )
            return PhongShader(viewport)
        raise ValueError(f"unsupported shader type {shader_type!r}")

    def draw_line(self, p0, p1, image: TGAImage, color: TGAColor) -> None:
        """Draw a line between two points with Bresenham's algorithm."""
        x0, y0 = int(p0[0]), int(p0[1])
        x1, y1 = int(p1[0]), int(p1[1])
        steep = abs(x0 - x1) < abs(y0 - y1)
        if steep:
            x0, y0 = y0, x0
            x1, y1 = y1, x1
        if x0 > x1:
            x0, x1 = x1, x0
            y0, y1 = y1, y0
        dx = x1 - x0
        derror2 = abs(y1 - y0) * 2
        step = 1 if y1 > y0 else -1
        error2 = 0
        y = y0
        for x in range(x0, x1 + 1):
            if steep:
                image.set(y, x, color)
            else:
                image.set(x, y, color)
            error2 += derror2
            if error2 > dx:
                y += step
                error2 -= dx * 2

    def draw_triangle(self, triangle: Triangle, scene: Scene, worldpos: Sequence[Vec4]) -> None:
        """Fill a screen-space triangle, depth-testing and shading each covered pixel."""
        v0, v1, v2 = triangle.v_homogeneous
        xs = (v0.x, v1.x, v2.x)
        ys = (v0.y, v1.y, v2.y)
        minx, maxx = int(min(xs)), int(max(xs))
        miny, maxy = int(min(ys)), int(max(ys))
        uv0, uv1, uv2 = triangle.uv_coords
        w0, w1, w2 = worldpos
        for i in range(minx, maxx + 1):
            for j in range(miny, maxy + 1):
                if not triangle.is_inside((i, j)):
                    continue
                alpha, beta, gamma = triangle.barycentric(i + 0.5, j + 0.5)
                big_z = 1.0 / (alpha / v0.w + beta / v1.w + gamma / v2.w)
                zp = alpha * v0.z / v0.w + beta * v1.z / v1.w + gamma * v2.z / v2.w
                z = zp * big_z
                idx = self.index_of(i, j)
                if not (0 <= idx < len(self.zbuffer) and self.zbuffer[idx] < z):
                    continue
                texcoord = (
                    uv0 * alpha / v0.w + uv1 * beta / v1.w + uv2 * gamma / v0.w
                ) * big_z
                shading = (
                    w0 * alpha / v0.w + w1 * beta / v1.w + w2 * gamma / v0.w
                ) * big_z
                pix = ShadingPixel(
                    tex_coord=texcoord,
                    frag_pos=Vec3(shading.x, shading.y, shading.z),
                    eye_pos=scene.camera.pos,
                    obj=triangle,
                    lights=scene.lights,
                )
                self.zbuffer[idx] = z
                self.image.set(i, j, self.shader.fragment_process(pix))

    def render_scene(self, scene: Scene) -> None:
        """Transform and rasterise every face of every model in the scene."""
        trans = self.projection_matrix(scene.camera) * self.view_matrix(scene.camera)
        for model in scene.models:
            model_matrix = self.model_matrix(model)
            trans = trans * model_matrix
            for face in model.faces:
                worldpos = [model_matrix * v for v in face.v_homogeneous]
                self.shader.vertex_process(trans, face)
                self.draw_triangle(face, scene, worldpos)

    def index_of(self, x: int, y: int) -> int:
        """Depth-buffer index of pixel (x, y)."""
        return y * self.width + x

    def model_matrix(self, model: Model) -> Matrix4:
        """Placement of a model: position, rotation and scale."""
        alpha = PI * model.rotation.x / 360.0
        beta = PI * model.rotation.y / 360.0
        theta = PI * model.rotation.z / 360.0
        rotation_alpha = Matrix4(
            [
                (1, 0, 0, 0),
                (0, math.cos(alpha), -math.sin(alpha), 0),
                (0, math.sin(alpha), math.cos(alpha), 0),
                (0, 0, 0, 1),
            ]
        )
        rotation_beta = Matrix4(
            [
                (math.cos(beta), 0, math.sin(beta), 0),
                (0, 1, 0, 0),
                (-math.sin(beta), 0, math.cos(beta), 0),
                (0, 0, 0, 1),
            ]
        )
        rotation_theta = Matrix4(
            [
                (math.cos(theta), -math.sin(theta), 0, 0),
                (math.sin(theta), math.cos(theta), 0, 0),
                (0, 0, 1, 0),
                (0, 0, 0, 1),
            ]
        )
        rotation = rotation_alpha * rotation_beta * rotation_theta
        scale = Matrix4(
            [
                (model.scale.x, 0, 0, 0),
                (0, model.scale.y, 0, 0),
                (0, 0, model.scale.z, 0),
                (0, 0, 0, 1),
            ]
        )
        position = Matrix4(
            [
                (1, 0, 0, model.position.x),
                (0, 1, 0, model.position.y),
                (0, 0, 1, model.position.z),
                (0, 0, 0, 1),
            ]
        )
        return position * rotation * scale

    def view_matrix(self, camera: Camera) -> Matrix4:
        """Camera placement: translation to the eye followed by its orientation."""
        pos = camera.pos
        translation = Matrix4(
            [
                (1, 0, 0, -pos.x),
                (0, 1, 0, -pos.y),
                (0, 0, 1, -pos.z),
                (0, 0, 0, 1),
            ]
        )
        g = camera.look_at
        t = camera.up
        gxt = g.cross(t).normalized()
        orientation = Matrix4(
            [
                (gxt.x, gxt.y, gxt.z, 0),
                (t.x, t.y, t.z, 0),
                (-g.x, -g.y, -g.z, 0),
                (0, 0, 0, 1),
            ]
        )
        return orientation * translation

    def projection_matrix(self, camera: Camera) -> Matrix4:
        """Perspective projection from the camera's field of view and clip planes."""
        h = math.tan(camera.fov / 360.0 * PI) * camera.z_near * 2
        w = camera.aspect_ratio * h
        n = -camera.z_near
        f = -camera.z_far
        logger.debug("h: %s w: %s", h, w)
        ortho_translate = Matrix4(
            [
                (1, 0, 0, 0),
                (0, 1, 0, 0),
                (0, 0, 1, -(n + f) / 2),
                (0, 0, 0, 1),
            ]
        )
        ortho_scale = Matrix4(
            [
                (2.0 / w, 0, 0, 0),
                (0, 2.0 / h, 0, 0),
                (0, 0, 2.0 / (n - f), 0),
                (0, 0, 0, 1),
            ]
        )
        perspective = Matrix4(
            [
                (n, 0, 0, 0),
                (0, n, 0, 0),
                (0, 0, n + f, -n * f),
                (0, 0, 1, 0),
            ]
        )
        return ortho_scale * ortho_translate * perspective