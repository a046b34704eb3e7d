#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
import os
from dataclasses import dataclass
from typing import Optional, Tuple

from .projector import CAMERA_RANGE


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline and the demo world."""
    use_color: bool = True
    use_braille: bool = True
    bg_color: Tuple[int, int, int] = (0, 0, 0)

    # Camera
    vision_angle: float = math.pi / 4
    camera_range: float = CAMERA_RANGE
    move_step: float = 1.0
    turn_step: float = 0.05
    target_fps: float = 30.0

    # World bounds (full extents, centred on the origin)
    world_width: float = 200.0
    world_height: float = 50.0
    world_depth: float = 200.0

    # Scene population
    loose_triangles: int = 100
    cubes: int = 20
    pyramids: int = 20
    towers: int = 20
    seed: Optional[int] = None

    def __post_init__(self):
        if not 0.0 < self.vision_angle < math.pi:
            raise ValueError(f"vision_angle must be in (0, pi), got {self.vision_angle!r}")
        if self.camera_range <= 0:
            raise ValueError(f"camera_range must be positive, got {self.camera_range!r}")
        for name in ('loose_triangles', 'cubes', 'pyramids', 'towers'):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    @property
    def half_bounds(self):
        """(half_width, half_height, half_depth) of the world box."""
        return (self.world_width / 2, self.world_height / 2, self.world_depth / 2)

    @classmethod
    def detect_terminal(cls, **overrides) -> 'RenderConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks TERM and LANG environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        # Accurate color detection requires curses initialization,
        # so this is a pre-init guess.
        is_dumb = term in ('dumb', 'unknown')
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        settings = dict(
            use_color=not is_dumb,
            # Linux console font often lacks braille, so default off there
            use_braille=supports_utf8 and not is_linux_console,
        )
        settings.update(overrides)
        return cls(**settings)
