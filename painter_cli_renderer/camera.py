#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

from .math_utils import Vec3, clamp, horizontal_direction


class Camera:
    """
    The single viewpoint of the scene.

    Holds a world position, the half-angle of the horizontal field of view
    (vision_angle) and the horizontal facing angle (y_rotation), both in
    radians.  The projector and depth sorter only read these values; the
    frame driver moves and turns the camera between frames.
    """
    __slots__ = ('position', 'vision_angle', 'y_rotation')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0,
                 vision_angle: float = math.pi / 4, y_rotation: float = 0.0):
        if not 0.0 < vision_angle < math.pi:
            raise ValueError(f"vision_angle must be in (0, pi), got {vision_angle!r}")
        self.position = Vec3(x, y, z)
        self.vision_angle = float(vision_angle)
        self.y_rotation = 0.0
        self.rotate_y_by(y_rotation)

    def __repr__(self):
        return (f"Camera({self.x:.2f}, {self.y:.2f}, {self.z:.2f}, "
                f"vision_angle={self.vision_angle:.3f}, "
                f"y_rotation={self.y_rotation:.3f})")

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    @property
    def z(self) -> float:
        return self.position.z

    def forward(self) -> Vec3:
        """Unit facing direction in the horizontal plane."""
        return horizontal_direction(self.y_rotation)

    def rotate_y_by(self, rotation: float):
        """Rotate the facing angle; the result always lies in [0, pi)."""
        wrapped = (self.y_rotation + rotation) % math.pi
        # x % pi can round up to pi itself for tiny negative x
        self.y_rotation = 0.0 if wrapped >= math.pi else wrapped

    # ── Frame driver movement ───────────────────────────────────────────

    def turn(self, delta: float):
        """Free heading change used by interactive steering, kept in [0, 2pi)."""
        wrapped = (self.y_rotation + delta) % math.tau
        self.y_rotation = 0.0 if wrapped >= math.tau else wrapped

    def move_forward(self, step: float):
        self._step_along(self.y_rotation, step)

    def strafe(self, step: float):
        """Sidestep; positive steps go to the right of the heading."""
        self._step_along(self.y_rotation + math.pi / 2, step)

    def rise(self, step: float):
        self.position.translate_by(0.0, step, 0.0)

    def clamp_to(self, half_width: float, half_height: float, half_depth: float):
        """Keep the camera inside an axis-aligned box centred on the origin."""
        p = self.position
        p.x = clamp(p.x, -half_width, half_width)
        p.y = clamp(p.y, -half_height, half_height)
        p.z = clamp(p.z, -half_depth, half_depth)

    def _step_along(self, heading: float, step: float):
        self.position.translate_by(math.cos(heading) * step, 0.0,
                                   math.sin(heading) * step)
