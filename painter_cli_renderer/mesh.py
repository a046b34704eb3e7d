#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .entities import Point, Triangle


class Mesh:
    """A shared point list and the index triples that make triangles of it."""

    def __init__(self, points, faces):
        self.points = list(points)
        self.faces = [tuple(face) for face in faces]
        for face in self.faces:
            if len(face) != 3:
                raise ValueError(f"faces must be index triples, got {face!r}")
            for idx in face:
                if not 0 <= idx < len(self.points):
                    raise ValueError(f"face index {idx} out of range")

    def triangles(self, color_factory):
        """Build one Triangle per face; all of them reference self.points."""
        return [Triangle(self.points[i], self.points[j], self.points[k], color_factory())
                for i, j, k in self.faces]

    @classmethod
    def cube(cls, x, y, z, side):
        """Axis-aligned cube of 12 triangles centred on (x, y, z)."""
        r = side / 2
        points = [
            Point(x - r, y - r, z - r), Point(x + r, y - r, z - r),
            Point(x - r, y + r, z - r), Point(x + r, y + r, z - r),
            Point(x - r, y - r, z + r), Point(x + r, y - r, z + r),
            Point(x - r, y + r, z + r), Point(x + r, y + r, z + r),
        ]
        faces = [
            (4, 5, 6), (7, 5, 6),  # front
            (0, 1, 2), (3, 1, 2),  # back
            (2, 3, 6), (7, 3, 6),  # top
            (0, 1, 4), (5, 1, 4),  # bottom
            (0, 2, 4), (6, 2, 4),  # left
            (1, 3, 5), (7, 3, 5),  # right
        ]
        return cls(points, faces)

    @classmethod
    def pyramid(cls, x, y, z, side):
        """Square-based pyramid of 6 triangles with its apex above (x, y, z)."""
        r = side / 2
        points = [
            Point(x - r, y - r, z - r),  # left front
            Point(x + r, y - r, z - r),  # right front
            Point(x - r, y - r, z + r),  # left back
            Point(x + r, y - r, z + r),  # right back
            Point(x, y + r, z),          # apex
        ]
        faces = [
            (4, 0, 1), (4, 2, 3), (4, 0, 2), (4, 1, 3),
            (0, 1, 2), (1, 2, 3),  # base
        ]
        return cls(points, faces)
