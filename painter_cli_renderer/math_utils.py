#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math


class Vec3:
    """Mutable 3-component vector.

    Used by value inside Point and Camera; the free functions below
    operate on anything exposing x, y and z.
    """
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vec3 index out of range")

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __add__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, scalar):
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def translate_by(self, dx: float, dy: float, dz: float):
        """Offset the vector in place."""
        self.x += dx
        self.y += dy
        self.z += dz

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


def dot(a, b) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def relative_to(a, b) -> Vec3:
    """Vector from b to a."""
    return Vec3(a.x - b.x, a.y - b.y, a.z - b.z)


def distance(a, b) -> float:
    return relative_to(a, b).magnitude()


def angle_between(a, b) -> float:
    """
    Angle between two vectors in radians, in [0, pi].

    A zero-length operand has no direction; it is reported as aligned (0.0).
    The cosine ratio is clamped so rounding drift cannot push acos into NaN.
    """
    mags = magnitude_of(a) * magnitude_of(b)
    if mags == 0.0:
        return 0.0
    ratio = dot(a, b) / mags
    return math.acos(clamp(ratio, -1.0, 1.0))


def magnitude_of(v) -> float:
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def horizontal_direction(angle: float) -> Vec3:
    """Unit vector at the given heading in the XZ plane."""
    return Vec3(math.cos(angle), 0.0, math.sin(angle))


def clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value
