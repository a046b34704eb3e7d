#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import random

from .entities import Color, Point, Triangle
from .mesh import Mesh

LOGGER = logging.getLogger(__name__)


class Scene:
    """
    The renderable set.

    An ordered list of Points and Triangles.  Order is insertion order until
    a render pass sorts it back-to-front; entries are never removed while
    frames are running.
    """

    def __init__(self):
        self.renderables = []

    def __len__(self):
        return len(self.renderables)

    def __iter__(self):
        return iter(self.renderables)

    def add(self, entity):
        if not isinstance(entity, (Point, Triangle)):
            raise TypeError(f"cannot render {type(entity).__name__}")
        self.renderables.append(entity)

    def add_mesh(self, mesh: Mesh, color_factory):
        """Add every face of the mesh as a triangle sharing the mesh's points."""
        triangles = mesh.triangles(color_factory)
        self.renderables.extend(triangles)
        return triangles

    def add_tower(self, x, y, z, side, color_factory):
        """A plus-shaped stack of seven cubes capped by a pyramid at each end."""
        for dx, dy, dz in ((0, 0, 0), (0, 1, 0), (0, -1, 0), (1, 0, 0),
                           (-1, 0, 0), (0, 0, 1), (0, 0, -1)):
            self.add_mesh(Mesh.cube(x + dx * side, y + dy * side, z + dz * side, side),
                          color_factory)
        self.add_mesh(Mesh.pyramid(x, y + 2 * side, z, side), color_factory)
        self.add_mesh(Mesh.pyramid(x, y - 2 * side, z, side), color_factory)

    def clear(self):
        """Remove all objects from the scene."""
        self.renderables.clear()


def populate_world(scene: Scene, config, rng=None) -> Scene:
    """
    Scatter loose triangles, cubes, pyramids and towers through the world box.

    Uses rng when given, else a random.Random seeded from config.seed, so a
    fixed seed always builds the same world.
    """
    if rng is None:
        rng = random.Random(config.seed)

    def spread(extent):
        return (rng.random() - 0.5) * extent

    def random_position():
        return (spread(config.world_width), spread(config.world_height),
                spread(config.world_depth))

    def shape_color():
        return Color(rng.random() * 100 + 155, rng.random() * 100 + 155,
                     rng.random() * 100 + 155, 255)

    def random_side():
        return rng.random() * 4 + 2

    for _ in range(config.loose_triangles):
        a = Point(*random_position())
        b = Point(a.x + spread(8), a.y + spread(8), a.z + spread(8))
        c = Point(a.x + spread(8), a.y + spread(8), a.z + spread(8))
        color = Color(rng.random() * 100 + 155, rng.random() * 100 + 155,
                      rng.random() * 100 + 155, rng.random() * 100 + 155)
        scene.add(Triangle(a, b, c, color))

    for _ in range(config.cubes):
        scene.add_mesh(Mesh.cube(*random_position(), random_side()), shape_color)

    for _ in range(config.pyramids):
        scene.add_mesh(Mesh.pyramid(*random_position(), random_side()), shape_color)

    for _ in range(config.towers):
        scene.add_tower(*random_position(), random_side(), shape_color)

    LOGGER.info("populated world: %d triangles (%d loose, %d cubes, %d pyramids, %d towers)",
                len(scene), config.loose_triangles, config.cubes,
                config.pyramids, config.towers)
    return scene
