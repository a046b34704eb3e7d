#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/entities.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from dataclasses import dataclass
from typing import Union

from .math_utils import Vec3, distance


@dataclass(frozen=True)
class Color:
    """RGBA color, channels 0-255."""
    red: float
    green: float
    blue: float
    alpha: float = 255.0

    @property
    def rgb(self):
        return (self.red, self.green, self.blue)


class Point:
    """
    A renderable vertex.

    When drawn on its own the point shows as a disc whose apparent size
    shrinks with camera distance; radius is its size in world units.
    Triangles built from a shared point list reference the same Point
    objects, so translating a point moves every triangle that uses it.
    """
    __slots__ = ('position', 'radius', 'color')

    def __init__(self, x: float, y: float, z: float, radius: float = 1.0,
                 color: Color = Color(255, 255, 255)):
        if radius < 0:
            raise ValueError(f"radius must be non-negative, got {radius!r}")
        self.position = Vec3(x, y, z)
        self.radius = float(radius)
        self.color = color

    def __repr__(self):
        return f"Point({self.x:.2f}, {self.y:.2f}, {self.z:.2f}, radius={self.radius:.2f})"

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    @property
    def z(self) -> float:
        return self.position.z

    def translate_by(self, dx: float, dy: float, dz: float):
        self.position.translate_by(dx, dy, dz)

    def distance_to_camera(self, camera) -> float:
        return distance(self.position, camera.position)


class Triangle:
    """Three points and a fill color."""
    __slots__ = ('a', 'b', 'c', 'color')

    def __init__(self, a: Point, b: Point, c: Point, color: Color):
        self.a = a
        self.b = b
        self.c = c
        self.color = color

    def __repr__(self):
        return f"Triangle({self.a!r}, {self.b!r}, {self.c!r})"

    @property
    def points(self):
        return (self.a, self.b, self.c)

    def centroid(self) -> Vec3:
        a, b, c = self.a, self.b, self.c
        return Vec3((a.x + b.x + c.x) / 3,
                    (a.y + b.y + c.y) / 3,
                    (a.z + b.z + c.z) / 3)

    def distance_to_camera(self, camera) -> float:
        """Distance to the vertex mean; an ordering proxy, not the nearest point."""
        return distance(self.centroid(), camera.position)


Renderable = Union[Point, Triangle]
