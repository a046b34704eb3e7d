#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3, dot, angle_between
from .camera import Camera
from .entities import Color, Point, Triangle, Renderable
from .projector import CAMERA_RANGE, project, should_render, surface_half_diagonal
from .depth_sort import depth_sort
from .config import RenderConfig
from .canvas import Canvas
from .color import Palette, parse_hex_color
from .mesh import Mesh
from .scene import Scene, populate_world
from .renderer import (CanvasBackend, DrawingBackend, FrameStats, RenderContext,
                       Renderer, render_entity)
