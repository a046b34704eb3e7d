import unittest

from painter_cli_renderer.config import RenderConfig
from painter_cli_renderer.entities import Color, Point, Triangle
from painter_cli_renderer.mesh import Mesh
from painter_cli_renderer.scene import Scene, populate_world


def white():
    return Color(255, 255, 255)


class MeshTests(unittest.TestCase):
    def test_cube(self) -> None:
        mesh = Mesh.cube(1.0, 2.0, 3.0, 4.0)
        self.assertEqual(len(mesh.points), 8)
        self.assertEqual(len(mesh.faces), 12)
        xs = sorted({p.x for p in mesh.points})
        self.assertEqual(xs, [-1.0, 3.0])

    def test_pyramid(self) -> None:
        mesh = Mesh.pyramid(0.0, 0.0, 0.0, 2.0)
        self.assertEqual(len(mesh.points), 5)
        self.assertEqual(len(mesh.faces), 6)
        self.assertEqual(max(p.y for p in mesh.points), 1.0)

    def test_triangles_share_points(self) -> None:
        mesh = Mesh.cube(0.0, 0.0, 0.0, 2.0)
        triangles = mesh.triangles(white)
        self.assertIs(triangles[0].a, mesh.points[4])
        mesh.points[4].translate_by(0.0, 10.0, 0.0)
        self.assertEqual(triangles[0].a.y, 9.0)

    def test_bad_faces_rejected(self) -> None:
        points = [Point(0, 0, 0), Point(1, 0, 0), Point(0, 1, 0)]
        with self.assertRaises(ValueError):
            Mesh(points, [(0, 1)])
        with self.assertRaises(ValueError):
            Mesh(points, [(0, 1, 3)])


class SceneTests(unittest.TestCase):
    def test_add_rejects_non_renderables(self) -> None:
        scene = Scene()
        with self.assertRaises(TypeError):
            scene.add("triangle")
        scene.add(Point(0, 0, 0))
        self.assertEqual(len(scene), 1)

    def test_insertion_order_kept(self) -> None:
        scene = Scene()
        first = Point(1, 1, 1)
        second = Triangle(Point(0, 0, 0), Point(1, 0, 0), Point(0, 1, 0), white())
        scene.add(first)
        scene.add(second)
        self.assertEqual(list(scene), [first, second])
        scene.clear()
        self.assertEqual(len(scene), 0)

    def test_tower(self) -> None:
        scene = Scene()
        scene.add_tower(0.0, 0.0, 0.0, 2.0, white)
        self.assertEqual(len(scene), 7 * 12 + 2 * 6)
        top = max(p.y for t in scene for p in t.points)
        self.assertEqual(top, 5.0)


class PopulateTests(unittest.TestCase):
    def test_default_counts(self) -> None:
        scene = populate_world(Scene(), RenderConfig(seed=3))
        self.assertEqual(len(scene), 100 + 20 * 12 + 20 * 6 + 20 * 96)
        self.assertTrue(all(isinstance(e, Triangle) for e in scene))

    def test_seed_is_deterministic(self) -> None:
        config = RenderConfig(seed=42, loose_triangles=10, cubes=2, pyramids=2, towers=1)
        a = populate_world(Scene(), config)
        b = populate_world(Scene(), config)
        coords_a = [(p.x, p.y, p.z) for t in a for p in t.points]
        coords_b = [(p.x, p.y, p.z) for t in b for p in t.points]
        self.assertEqual(coords_a, coords_b)
        self.assertEqual([t.color for t in a], [t.color for t in b])

    def test_positions_within_world(self) -> None:
        config = RenderConfig(seed=5, loose_triangles=200, cubes=0, pyramids=0, towers=0)
        scene = populate_world(Scene(), config)
        for triangle in scene:
            self.assertLessEqual(abs(triangle.a.x), config.world_width / 2)
            self.assertLessEqual(abs(triangle.a.y), config.world_height / 2)
            self.assertLessEqual(abs(triangle.a.z), config.world_depth / 2)
            self.assertGreaterEqual(triangle.color.alpha, 155)

    def test_shape_colors_opaque(self) -> None:
        config = RenderConfig(seed=9, loose_triangles=0, cubes=3, pyramids=0, towers=0)
        scene = populate_world(Scene(), config)
        for triangle in scene:
            self.assertEqual(triangle.color.alpha, 255)
            self.assertTrue(all(155 <= c < 255 for c in triangle.color.rgb))


if __name__ == "__main__":
    unittest.main()
