import math
import unittest
from unittest import mock

from painter_cli_renderer.config import RenderConfig
from painter_cli_renderer.projector import CAMERA_RANGE


class RenderConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        config = RenderConfig()
        self.assertAlmostEqual(config.vision_angle, math.pi / 4)
        self.assertEqual(config.camera_range, CAMERA_RANGE)
        self.assertEqual(config.half_bounds, (100.0, 25.0, 100.0))

    def test_validation(self) -> None:
        with self.assertRaises(ValueError):
            RenderConfig(vision_angle=0.0)
        with self.assertRaises(ValueError):
            RenderConfig(vision_angle=math.pi)
        with self.assertRaises(ValueError):
            RenderConfig(camera_range=0.0)
        with self.assertRaises(ValueError):
            RenderConfig(cubes=-1)

    def test_detect_dumb_terminal(self) -> None:
        with mock.patch.dict("os.environ", {"TERM": "dumb", "LANG": "C"}):
            config = RenderConfig.detect_terminal()
        self.assertFalse(config.use_color)
        self.assertFalse(config.use_braille)

    def test_detect_utf8_xterm(self) -> None:
        with mock.patch.dict("os.environ", {"TERM": "xterm-256color", "LANG": "en_US.UTF-8"}):
            config = RenderConfig.detect_terminal()
        self.assertTrue(config.use_color)
        self.assertTrue(config.use_braille)

    def test_detect_linux_console(self) -> None:
        with mock.patch.dict("os.environ", {"TERM": "linux", "LANG": "en_US.UTF-8"}):
            config = RenderConfig.detect_terminal()
        self.assertTrue(config.use_color)
        self.assertFalse(config.use_braille)

    def test_detect_with_overrides(self) -> None:
        with mock.patch.dict("os.environ", {"TERM": "xterm", "LANG": "en_US.UTF-8"}):
            config = RenderConfig.detect_terminal(use_braille=False, seed=8)
        self.assertFalse(config.use_braille)
        self.assertEqual(config.seed, 8)


if __name__ == "__main__":
    unittest.main()
