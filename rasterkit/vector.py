"""Small 2-, 3- and 4-component vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


@dataclass(slots=True)
class Vec2:
    """A 2D vector; indices other than 1 read the x component."""

    x: float = 0
    y: float = 0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, idx: int) -> float:
        return self.y if idx == 1 else self.x

    def __add__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> "Vec2":
        if not isinstance(k, Real):
            return NotImplemented
        return Vec2(self.x * k, self.y * k)

    def __truediv__(self, k: float) -> "Vec2":
        if not isinstance(k, Real):
            return NotImplemented
        return Vec2(self.x / k, self.y / k)

    def dot(self, other: "Vec2") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vec2") -> float:
        """The z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x


@dataclass(slots=True)
class Vec3:
    """A 3D vector; indices past 1 address the z component."""

    x: float = 0
    y: float = 0
    z: float = 0

    @classmethod
    def splat(cls, value: float) -> "Vec3":
        """A vector with every component equal to ``value``."""
        return cls(value, value, value)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, idx: int) -> float:
        if idx == 0:
            return self.x
        if idx == 1:
            return self.y
        return self.z

    def __setitem__(self, idx: int, value: float) -> None:
        if idx == 0:
            self.x = value
        elif idx == 1:
            self.y = value
        else:
            self.z = value

    def __add__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, k: float) -> "Vec3":
        if not isinstance(k, Real):
            return NotImplemented
        return Vec3(self.x * k, self.y * k, self.z * k)

    def __rmul__(self, k: float) -> "Vec3":
        return self.__mul__(k)

    def __truediv__(self, k: float) -> "Vec3":
        if not isinstance(k, Real):
            return NotImplemented
        return Vec3(self.x / k, self.y / k, self.z / k)

    def norm2(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def norm(self) -> float:
        return math.sqrt(self.norm2())

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def normalized(self) -> "Vec3":
        """Unit vector of the same direction; all NaN for the zero vector."""
        length = self.norm()
        if length == 0:
            return Vec3.splat(math.nan)
        return self / length

    def cwise(self, other: "Vec3") -> "Vec3":
        """Component-wise product."""
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)


@dataclass(slots=True)
class Vec4:
    """A homogeneous 4D vector; indices past 2 address the w component."""

    x: float = 0
    y: float = 0
    z: float = 0
    w: float = 0

    @classmethod
    def splat(cls, value: float) -> "Vec4":
        """A vector with every component equal to ``value``."""
        return cls(value, value, value, value)

    @classmethod
    def from_vec3(cls, vec: Vec3) -> "Vec4":
        """The point ``vec`` in homogeneous coordinates (w = 1)."""
        return cls(vec.x, vec.y, vec.z, 1)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __getitem__(self, idx: int) -> float:
        if idx == 0:
            return self.x
        if idx == 1:
            return self.y
        if idx == 2:
            return self.z
        return self.w

    def __setitem__(self, idx: int, value: float) -> None:
        if idx == 0:
            self.x = value
        elif idx == 1:
            self.y = value
        elif idx == 2:
            self.z = value
        else:
            self.w = value

    def __add__(self, other: "Vec4") -> "Vec4":
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Vec4") -> "Vec4":
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, k: float) -> "Vec4":
        if not isinstance(k, Real):
            return NotImplemented
        return Vec4(self.x * k, self.y * k, self.z * k, self.w * k)

    def __rmul__(self, k: float) -> "Vec4":
        return self.__mul__(k)

    def __truediv__(self, k: float) -> "Vec4":
        if not isinstance(k, Real):
            return NotImplemented
        return Vec4(self.x / k, self.y / k, self.z / k, self.w / k)

    def norm2(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def norm(self) -> float:
        return math.sqrt(self.norm2())

    def dot(self, other: "Vec4") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def normalized(self) -> "Vec4":
        """Unit vector of the same direction; all NaN for the zero vector."""
        length = self.norm()
        if length == 0:
            return Vec4.splat(math.nan)
        return self / length