#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging
import math
from dataclasses import dataclass
from typing import Protocol, Tuple

from .camera import Camera
from .canvas import Canvas, render_cell_ascii, render_cell_braille
from .color import Palette, blend_over
from .config import RenderConfig
from .depth_sort import depth_sort
from .entities import Color, Point, Triangle
from .projector import CAMERA_RANGE, project, should_render, surface_half_diagonal
from .rasterizer import fill_circle, fill_triangle
from .scene import Scene

LOGGER = logging.getLogger(__name__)

ScreenPoint = Tuple[float, float]

# A point closer than this has no finite apparent size
_MIN_POINT_DISTANCE = 1e-9


class DrawingBackend(Protocol):
    def fill_triangle(self, a: ScreenPoint, b: ScreenPoint, c: ScreenPoint,
                      color: Color) -> None: ...

    def fill_circle(self, center: ScreenPoint, diameter: float,
                    color: Color) -> None: ...


@dataclass
class RenderContext:
    """Everything one frame needs: the camera, the renderables, the surface size."""
    camera: Camera
    scene: Scene
    width: int
    height: int
    camera_range: float = CAMERA_RANGE

    def resize(self, width: int, height: int):
        self.width = width
        self.height = height


@dataclass
class FrameStats:
    total: int = 0
    drawn: int = 0

    @property
    def culled(self) -> int:
        return self.total - self.drawn


class CanvasBackend:
    """Draws onto a Canvas, compositing each color over the background."""

    def __init__(self, canvas: Canvas, bg_rgb=(0, 0, 0)):
        self.canvas = canvas
        self.bg_rgb = bg_rgb

    def fill_triangle(self, a, b, c, color):
        rgb = blend_over(color, self.bg_rgb)
        if rgb is not None:
            fill_triangle(self.canvas, a, b, c, rgb)

    def fill_circle(self, center, diameter, color):
        rgb = blend_over(color, self.bg_rgb)
        if rgb is not None:
            fill_circle(self.canvas, center, diameter, rgb)


def render_triangle(triangle: Triangle, context: RenderContext, backend) -> bool:
    camera, width, height = context.camera, context.width, context.height
    positions = [project(p, camera, width, height) for p in triangle.points]

    mean_x = sum(pos[0] for pos in positions) / 3
    mean_y = sum(pos[1] for pos in positions) / 3
    off_screen = (math.hypot(mean_x - width / 2, mean_y - height / 2)
                  > surface_half_diagonal(width, height))
    if off_screen and not any(should_render(p, camera, context.camera_range)
                              for p in triangle.points):
        return False

    backend.fill_triangle(positions[0], positions[1], positions[2], triangle.color)
    return True


def render_point(point: Point, context: RenderContext, backend) -> bool:
    camera = context.camera
    if not should_render(point, camera, context.camera_range):
        return False
    dist = point.distance_to_camera(camera)
    if dist < _MIN_POINT_DISTANCE:
        return False

    center = project(point, camera, context.width, context.height)
    diameter = (point.radius / (dist * math.sin(camera.vision_angle))
                * surface_half_diagonal(context.width, context.height))
    backend.fill_circle(center, diameter, point.color)
    return True


def render_entity(entity, context: RenderContext, backend) -> bool:
    """Draw one renderable if it is visible; returns whether a draw was issued."""
    if isinstance(entity, Triangle):
        return render_triangle(entity, context, backend)
    if isinstance(entity, Point):
        return render_point(entity, context, backend)
    raise TypeError(f"cannot render {type(entity).__name__}")


class Renderer:
    """
    Painter's-algorithm renderer.

    render_frame() sorts the scene back-to-front and issues draw calls to any
    DrawingBackend.  render() does the same onto a terminal-sized Canvas and
    writes it to a curses screen.
    """

    def __init__(self, palette: Palette = None):
        self.palette = palette if palette is not None else Palette()
        self.last_stats = FrameStats()

    def init_colors(self, config: RenderConfig):
        """Initialize curses color pairs.  Call once after curses.wrapper init."""
        self.palette = Palette(config.bg_color).init_colors(config.use_color)

    def render_frame(self, context: RenderContext, backend) -> FrameStats:
        renderables = context.scene.renderables
        depth_sort(renderables, context.camera)

        stats = FrameStats(total=len(renderables))
        for entity in renderables:
            if render_entity(entity, context, backend):
                stats.drawn += 1

        self.last_stats = stats
        LOGGER.debug("frame: %d drawn, %d culled of %d",
                     stats.drawn, stats.culled, stats.total)
        return stats

    def render(self, stdscr, context: RenderContext, config: RenderConfig) -> FrameStats:
        """
        Render one frame and output to curses screen.

        The canvas is rebuilt from the terminal size every frame, and the
        context is resized to match so projection uses the current surface.
        Row 0 is left for the caller's HUD.

        Does NOT call stdscr.refresh() — the caller should do that after
        optional HUD / overlay drawing.
        """
        th, tw = stdscr.getmaxyx()
        W = (tw - 1) * 2
        H = (th - 2) * 4
        if W <= 0 or H <= 0:
            stdscr.erase()
            return FrameStats()

        canv = Canvas(W, H)
        context.resize(W, H)
        stats = self.render_frame(context, CanvasBackend(canv, config.bg_color))

        # ── Output to curses ────────────────────────────────────────────
        stdscr.erase()

        palette = self.palette
        if config.use_color and palette.bg_pair:
            try:
                stdscr.bkgd(' ', curses.color_pair(palette.bg_pair))
            except curses.error:
                pass

        grid = canv.grid
        c_grid = canv.c_grid
        use_color = config.use_color
        render_cell = render_cell_braille if config.use_braille else render_cell_ascii

        for y in range(min(th - 2, len(grid))):
            row_grid = grid[y]
            row_color = c_grid[y]
            for x in range(min(tw - 1, len(row_grid))):
                mask = row_grid[x]
                if not mask:
                    continue
                attr = curses.color_pair(0)
                if use_color:
                    attr = curses.color_pair(palette.pair_for(row_color[x]))
                try:
                    stdscr.addstr(y + 1, x, render_cell(mask), attr)
                except curses.error:
                    pass
        return stats
