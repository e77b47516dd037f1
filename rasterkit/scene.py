"""Cameras, lights and the scene that holds models."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

from .tgaimage import TGAColor
from .vector import Vec3

if TYPE_CHECKING:
    from .model import Model

PI = math.pi
EPSILON = 1e-5
WHITE = TGAColor(255, 255, 255, 255)
RED = TGAColor(255, 0, 0, 255)
GREEN = TGAColor(0, 255, 0, 255)


@dataclass
class Light:
    """A point light with a per-channel intensity."""

    pos: Vec3 = field(default_factory=Vec3)
    intensity: Vec3 = field(default_factory=Vec3)


class Camera:
    """A perspective camera looking along ``look_at`` from ``pos``."""

    def __init__(
        self,
        look_at: Vec3,
        pos: Vec3,
        fov: float,
        aspect_ratio: float,
        z_near: float,
        z_far: float,
    ) -> None:
        self.look_at = look_at.normalized()
        self.pos = Vec3(*pos)
        self.fov = fov
        self.aspect_ratio = aspect_ratio
        self.z_near = z_near
        self.z_far = z_far
        world_up = Vec3(0, 1, 0)
        if abs(self.look_at.dot(world_up) - 1.0) < EPSILON:
            world_up = Vec3(1, 0, 0)
        self.up = self.look_at.cross(world_up).normalized().cross(self.look_at).normalized()

    def __repr__(self) -> str:
        return f"Camera(look_at={self.look_at!r}, pos={self.pos!r}, fov={self.fov!r})"


class Scene:
    """Models and lights seen through one camera."""

    def __init__(self, camera: Camera) -> None:
        self.camera = camera
        self.models: List["Model"] = []
        self.lights: List[Light] = []

    def add_model(self, model: "Model") -> None:
        self.models.append(model)

    def add_light(self, light: Light) -> None:
        self.lights.append(light)