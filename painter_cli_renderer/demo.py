#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging
import math
import time

from .camera import Camera
from .config import RenderConfig
from .renderer import RenderContext, Renderer
from .scene import Scene, populate_world

LOGGER = logging.getLogger(__name__)

PAUSE_TEXT = "- P A U S E D -"


class DemoApp:
    """
    Interactive frame driver: reads keys, moves the camera, renders the
    scene, and draws the HUD.  Owns the single camera and the render context
    for the lifetime of the session.
    """

    def __init__(self, stdscr, config: RenderConfig, scene: Scene = None):
        self.stdscr = stdscr
        self.config = config
        self.running = True
        self.paused = False

        # ── Curses setup ────────────────────────────────────────────────
        curses.curs_set(0)
        stdscr.nodelay(True)

        self.renderer = Renderer()
        self.renderer.init_colors(config)

        if scene is None:
            scene = populate_world(Scene(), config)
        camera = Camera(0.0, 0.0, 0.0, vision_angle=config.vision_angle)
        th, tw = stdscr.getmaxyx()
        self.context = RenderContext(camera, scene, max(0, (tw - 1) * 2),
                                     max(0, (th - 2) * 4), config.camera_range)

        # ── Frame counter ───────────────────────────────────────────────
        self.frame_count = 0
        self.fps = 0
        self.last_fps_time = time.time()

    @property
    def camera(self) -> Camera:
        return self.context.camera

    # ────────────────────────────────────────────────────────────────────
    # Input
    # ────────────────────────────────────────────────────────────────────
    def handle_input(self):
        """Drain every key pressed since the last frame."""
        while True:
            try:
                key = self.stdscr.getch()
            except curses.error:
                key = -1
            if key == -1:
                return
            self.apply_key(key)

    def apply_key(self, key):
        if key in (ord('q'), ord('Q')):
            self.running = False
            return
        if key in (ord('p'), ord('P')):
            self.paused = not self.paused
            LOGGER.info("paused" if self.paused else "resumed")
            return
        if self.paused:
            return

        camera = self.camera
        step = self.config.move_step
        turn = self.config.turn_step

        if key in (ord('w'), curses.KEY_UP):
            camera.move_forward(step)
        elif key in (ord('s'), curses.KEY_DOWN):
            camera.move_forward(-step)
        elif key == ord('a'):
            camera.strafe(-step)
        elif key == ord('d'):
            camera.strafe(step)
        elif key in (ord('j'), curses.KEY_LEFT):
            camera.turn(-turn)
        elif key in (ord('l'), curses.KEY_RIGHT):
            camera.turn(turn)
        elif key in (ord(' '), ord('r')):
            camera.rise(step)
        elif key in (ord('f'), ord('z')):
            camera.rise(-step)
        elif key == ord('c'):
            self.config.use_color = not self.config.use_color
        elif key == ord('b'):
            self.config.use_braille = not self.config.use_braille

        camera.clamp_to(*self.config.half_bounds)

    # ────────────────────────────────────────────────────────────────────
    # Main loop
    # ────────────────────────────────────────────────────────────────────
    def step(self):
        """Run one frame.  A paused frame skips all geometry work."""
        start_time = time.time()
        self.handle_input()

        if self.paused:
            self.draw_pause_overlay()
            self.stdscr.refresh()
            return

        self.renderer.render(self.stdscr, self.context, self.config)

        self.frame_count += 1
        now = time.time()
        if now - self.last_fps_time >= 1.0:
            self.fps = self.frame_count
            self.frame_count = 0
            self.last_fps_time = now

        self.draw_hud((now - start_time) * 1000)
        self.stdscr.refresh()

    def run(self):
        frame_time = 1.0 / self.config.target_fps if self.config.target_fps > 0 else 0.0
        while self.running:
            start = time.time()
            self.step()
            remaining = frame_time - (time.time() - start)
            if remaining > 0:
                time.sleep(remaining)

    def draw_hud(self, ms):
        _, tw = self.stdscr.getmaxyx()
        stats = self.renderer.last_stats
        camera = self.camera
        hdr = (f" OBJ:{stats.total} DRAWN:{stats.drawn}"
               f" | FPS:{self.fps}"
               f" | {ms:.1f}ms"
               f" | ({camera.x:.0f},{camera.y:.0f},{camera.z:.0f})"
               f" {math.degrees(camera.y_rotation):.0f}deg ")
        try:
            self.stdscr.addstr(0, 0, hdr.center(max(1, tw - 1), '=')[:max(0, tw - 1)],
                               curses.color_pair(0) | curses.A_BOLD)
        except curses.error:
            pass

    def draw_pause_overlay(self):
        th, tw = self.stdscr.getmaxyx()
        row = th // 2
        col = max(0, (tw - len(PAUSE_TEXT)) // 2)
        try:
            self.stdscr.addstr(row, col, PAUSE_TEXT[:max(0, tw - 1)],
                               curses.A_BOLD | curses.A_REVERSE)
        except curses.error:
            pass


def main(stdscr, config: RenderConfig):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, config)
    app.run()
