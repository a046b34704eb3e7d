#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging

LOGGER = logging.getLogger(__name__)


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None


def blend_over(color, background):
    """
    Composite an RGBA color over an opaque (r, g, b) background.
    Returns an integer (r, g, b) tuple, or None when the color is fully
    transparent.
    """
    alpha = max(0.0, min(255.0, color.alpha)) / 255.0
    if alpha <= 0.0:
        return None
    out = []
    for channel, bg in zip(color.rgb, background):
        channel = max(0.0, min(255.0, channel))
        out.append(int(round(bg + (channel - bg) * alpha)))
    return tuple(out)

# Levels of each axis of the xterm 6x6x6 color cube (indices 16-231).
_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)

# Approximate RGB of the basic ANSI colors 0-7.
_ANSI8 = (
    (0, 0, 0),        # black
    (128, 0, 0),      # red
    (0, 128, 0),      # green
    (128, 128, 0),    # yellow
    (0, 0, 128),      # blue
    (128, 0, 128),    # magenta
    (0, 128, 128),    # cyan
    (192, 192, 192),  # white
)


def _distance_sq(a, b):
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2 + (a[2] - b[2]) ** 2


def rgb_to_xterm(r, g, b):
    """Nearest xterm-256 index, searching the color cube and the gray ramp."""
    levels = [min(range(6), key=lambda i: abs(v - _CUBE_LEVELS[i])) for v in (r, g, b)]
    cube_rgb = tuple(_CUBE_LEVELS[i] for i in levels)
    cube_idx = 16 + levels[0] * 36 + levels[1] * 6 + levels[2]

    # Gray ramp 232-255 runs 8, 18, ..., 238
    gray_step = max(0, min(23, ((r + g + b) // 3 - 3) // 10))
    gv = 8 + gray_step * 10

    if _distance_sq((r, g, b), (gv, gv, gv)) < _distance_sq((r, g, b), cube_rgb):
        return 232 + gray_step
    return cube_idx


def rgb_to_ansi8(r, g, b):
    """Nearest basic ANSI color index (0-7), for 8-color terminals."""
    return min(range(8), key=lambda i: _distance_sq((r, g, b), _ANSI8[i]))


class Palette:
    """
    Maps (r, g, b) cell colors to curses color pairs.

    Pairs are allocated on first use against the chosen background, one per
    distinct terminal color index, until the terminal runs out of pairs;
    after that unseen colors fall back to pair 0.
    Color mode cascade:
      1. xterm-256   – 256+ colors: nearest xterm-256 index
      2. 8-color     – basic ANSI palette approximation
      3. Mono        – no color
    """

    def __init__(self, bg_rgb=(0, 0, 0)):
        self.bg_rgb = bg_rgb
        self.enabled = False
        self.bg_pair = 0
        self._num_colors = 0
        self._max_pairs = 0
        self._bg_slot = -1
        self._pairs = {}
        self._next_pair = 1

    def init_colors(self, use_color=True):
        """Start curses color support.  Call once after curses.wrapper init."""
        self.enabled = False
        if not use_color:
            return self
        try:
            if not curses.has_colors():
                return self
            curses.start_color()
        except curses.error:
            LOGGER.warning("terminal refused color initialisation, using mono")
            return self

        default_bg = False
        try:
            curses.use_default_colors()
            default_bg = True
        except curses.error:
            pass

        self._num_colors = getattr(curses, 'COLORS', 8)
        self._max_pairs = getattr(curses, 'COLOR_PAIRS', 64)
        if self._num_colors < 8:
            return self

        if self.bg_rgb == (0, 0, 0) and default_bg:
            self._bg_slot = -1
        else:
            self._bg_slot = self._terminal_index(self.bg_rgb)
        self.enabled = True

        # Background pair for screen fill
        fg_for_bg = 7 if self._bg_slot != 7 else 0
        self.bg_pair = self._allocate(fg_for_bg) or 0
        LOGGER.debug("palette ready: %d colors, %d pairs",
                     self._num_colors, self._max_pairs)
        return self

    def pair_for(self, rgb):
        """curses color pair id for an (r, g, b) color (0 when unavailable)."""
        if not self.enabled or rgb is None:
            return 0
        idx = self._terminal_index(rgb)
        pair = self._pairs.get(idx)
        if pair is None:
            pair = self._allocate(idx)
            self._pairs[idx] = pair
        return pair

    def _terminal_index(self, rgb):
        r, g, b = rgb
        if self._num_colors >= 256:
            return rgb_to_xterm(r, g, b)
        return rgb_to_ansi8(r, g, b)

    def _allocate(self, fg_slot):
        if self._next_pair >= self._max_pairs:
            return 0
        pair_id = self._next_pair
        try:
            curses.init_pair(pair_id, fg_slot, self._bg_slot)
        except curses.error:
            return 0
        self._next_pair += 1
        return pair_id
