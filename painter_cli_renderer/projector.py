#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/projector.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Angular projection and cone culling.

No view matrix is involved.  A point's screen offset from the centre is
proportional to its angular distance from the camera's forward direction,
with a whole vision_angle of bearing mapping to one screen half-diagonal.
The direction of that offset comes from a second reference direction,
the forward vector swung horizontally by +vision_angle: knowing the
point's angle to both references pins its bearing down to two mirror
images via the Law of Cosines, and the point's height relative to the
camera picks one.
"""

import math
from typing import Tuple

from .math_utils import angle_between, clamp, horizontal_direction, relative_to

CAMERA_RANGE = 1000.0

# Below this bearing a point is treated as lying on the forward axis.
_AXIS_EPSILON = 1e-12


def surface_half_diagonal(width: float, height: float) -> float:
    return math.hypot(width / 2, height / 2)


def should_render(point, camera, camera_range: float = CAMERA_RANGE) -> bool:
    """True when the point lies inside the vision cone and within range."""
    offset = relative_to(point, camera.position)
    if angle_between(offset, camera.forward()) > camera.vision_angle:
        return False
    if offset.magnitude() > camera_range:
        return False
    return True


def project(point, camera, width: float, height: float) -> Tuple[float, float]:
    """
    Screen position of a world point as seen by the camera.

    Points behind or beside the camera still get a finite position; callers
    use should_render to decide whether the result is meaningful.
    """
    center_x = width / 2
    center_y = height / 2

    offset = relative_to(point, camera.position)
    vision = camera.vision_angle
    angle = angle_between(offset, camera.forward())
    if angle < _AXIS_EPSILON:
        return (center_x, center_y)

    complement = horizontal_direction(camera.y_rotation + vision)
    angle_to_complement = angle_between(offset, complement)

    # Law of Cosines on the angular triangle (forward, complement, point)
    cos_to_intersection = ((vision * vision + angle * angle
                            - angle_to_complement * angle_to_complement)
                           / (2 * vision * angle))
    cos_to_intersection = clamp(cos_to_intersection, -1.0, 1.0)

    x_projection = angle * cos_to_intersection / vision
    y_projection = angle * math.sin(math.acos(cos_to_intersection)) / vision

    scale = surface_half_diagonal(width, height)
    screen_x = center_x + x_projection * scale
    # Both roots share x; a point above the camera's eye level takes the upper one.
    if point.y > camera.y:
        screen_y = center_y - y_projection * scale
    else:
        screen_y = center_y + y_projection * scale
    return (screen_x, screen_y)
