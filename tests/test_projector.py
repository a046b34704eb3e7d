import math
import unittest

from painter_cli_renderer.camera import Camera
from painter_cli_renderer.entities import Point
from painter_cli_renderer.projector import (CAMERA_RANGE, project, should_render,
                                            surface_half_diagonal)

WIDTH = 800
HEIGHT = 600


class VisibilityTests(unittest.TestCase):
    def setUp(self) -> None:
        self.camera = Camera(0.0, 0.0, 0.0, vision_angle=math.pi / 4, y_rotation=0.0)

    def test_point_on_axis_is_visible(self) -> None:
        self.assertTrue(should_render(Point(10.0, 0.0, 0.0), self.camera))

    def test_point_at_right_angle_is_never_visible(self) -> None:
        for dist in (0.5, 10.0, 100.0, 5000.0):
            self.assertFalse(should_render(Point(0.0, 0.0, dist), self.camera))
            self.assertFalse(should_render(Point(0.0, 0.0, dist), self.camera,
                                           camera_range=1e9))

    def test_points_outside_cone_not_visible(self) -> None:
        for bearing in (0.80, 1.2, 2.0, 3.0):
            for dist in (1.0, 50.0, 900.0):
                point = Point(dist * math.cos(bearing), 0.0, dist * math.sin(bearing))
                self.assertFalse(should_render(point, self.camera), (bearing, dist))

    def test_cone_edge(self) -> None:
        self.assertTrue(should_render(Point(10.0, 0.0, 9.99), self.camera))
        self.assertFalse(should_render(Point(10.0, 0.0, 10.01), self.camera))

    def test_vertical_angle_also_culls(self) -> None:
        self.assertFalse(should_render(Point(10.0, 10.5, 0.0), self.camera))

    def test_range_boundary(self) -> None:
        eps = 1e-6
        self.assertTrue(should_render(Point(CAMERA_RANGE - eps, 0.0, 0.0), self.camera))
        self.assertFalse(should_render(Point(CAMERA_RANGE + eps, 0.0, 0.0), self.camera))

    def test_custom_range(self) -> None:
        self.assertFalse(should_render(Point(60.0, 0.0, 0.0), self.camera, camera_range=50.0))
        self.assertTrue(should_render(Point(40.0, 0.0, 0.0), self.camera, camera_range=50.0))

    def test_rotated_camera(self) -> None:
        camera = Camera(5.0, 0.0, 5.0, vision_angle=math.pi / 6, y_rotation=math.pi / 2)
        self.assertTrue(should_render(Point(5.0, 0.0, 30.0), camera))
        self.assertFalse(should_render(Point(30.0, 0.0, 5.0), camera))


class ProjectionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.camera = Camera(0.0, 0.0, 0.0, vision_angle=math.pi / 4, y_rotation=0.0)

    def test_on_axis_projects_to_centre(self) -> None:
        for dist in (0.001, 1.0, 10.0, 250.0, CAMERA_RANGE - 1.0):
            x, y = project(Point(dist, 0.0, 0.0), self.camera, WIDTH, HEIGHT)
            self.assertEqual((x, y), (WIDTH / 2, HEIGHT / 2))

    def test_on_axis_with_rotated_camera(self) -> None:
        camera = Camera(1.0, 2.0, 3.0, vision_angle=math.pi / 3, y_rotation=0.7)
        point = Point(1.0 + 20 * math.cos(0.7), 2.0, 3.0 + 20 * math.sin(0.7))
        x, y = project(point, camera, WIDTH, HEIGHT)
        self.assertAlmostEqual(x, WIDTH / 2, places=3)
        self.assertAlmostEqual(y, HEIGHT / 2, places=3)

    def test_point_at_camera_is_finite(self) -> None:
        x, y = project(Point(0.0, 0.0, 0.0), self.camera, WIDTH, HEIGHT)
        self.assertEqual((x, y), (WIDTH / 2, HEIGHT / 2))

    def test_end_to_end_scenario(self) -> None:
        ahead = Point(10.0, 0.0, 0.0)
        self.assertTrue(should_render(ahead, self.camera))
        x, y = project(ahead, self.camera, WIDTH, HEIGHT)
        self.assertAlmostEqual(x, WIDTH / 2)
        self.assertAlmostEqual(y, HEIGHT / 2)
        self.assertFalse(should_render(Point(0.0, 0.0, 10.0), self.camera))

    def test_horizontal_offset_is_linear_in_bearing(self) -> None:
        bearing = 0.2
        point = Point(10 * math.cos(bearing), 0.0, 10 * math.sin(bearing))
        x, y = project(point, self.camera, WIDTH, HEIGHT)
        expected = WIDTH / 2 + bearing / (math.pi / 4) * surface_half_diagonal(WIDTH, HEIGHT)
        self.assertAlmostEqual(x, expected, places=3)
        self.assertAlmostEqual(y, HEIGHT / 2, delta=0.5)

    def test_left_and_right(self) -> None:
        toward_complement = project(Point(10.0, 0.0, 2.0), self.camera, WIDTH, HEIGHT)
        away_from_complement = project(Point(10.0, 0.0, -2.0), self.camera, WIDTH, HEIGHT)
        self.assertGreater(toward_complement[0], WIDTH / 2)
        self.assertLess(away_from_complement[0], WIDTH / 2)

    def test_vertical_sign_follows_height(self) -> None:
        above = project(Point(10.0, 2.0, 0.0), self.camera, WIDTH, HEIGHT)
        below = project(Point(10.0, -2.0, 0.0), self.camera, WIDTH, HEIGHT)
        self.assertLess(above[1], HEIGHT / 2)
        self.assertGreater(below[1], HEIGHT / 2)
        self.assertAlmostEqual(above[1] - HEIGHT / 2, HEIGHT / 2 - below[1], places=6)
        self.assertLess(abs(above[0] - WIDTH / 2), abs(above[1] - HEIGHT / 2))

    def test_points_behind_camera_are_finite(self) -> None:
        for point in (Point(-10.0, 0.0, 0.0), Point(-10.0, 3.0, 1.0),
                      Point(0.0, 50.0, 0.0), Point(0.0, -50.0, 0.0)):
            x, y = project(point, self.camera, WIDTH, HEIGHT)
            self.assertTrue(math.isfinite(x) and math.isfinite(y), point)

    def test_scale_follows_surface_size(self) -> None:
        point = Point(10.0, 0.0, 1.0)
        small = project(point, self.camera, 400, 300)
        large = project(point, self.camera, 800, 600)
        self.assertAlmostEqual((large[0] - 400) / (small[0] - 200), 2.0, places=6)

    def test_half_diagonal(self) -> None:
        self.assertAlmostEqual(surface_half_diagonal(800, 600), 500.0)
        self.assertEqual(surface_half_diagonal(0, 0), 0.0)


if __name__ == "__main__":
    unittest.main()
