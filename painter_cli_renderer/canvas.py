#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

class Canvas:
    """
    Dot canvas packed into terminal cells, 2 dots wide and 4 dots tall each.

    There is no depth buffer: every set_pixel overwrites, and the last color
    written into a cell is the one the cell shows.  Draw order alone decides
    what ends up on top.
    """
    __slots__ = ['w', 'h', 'grid', 'c_grid']

    # Braille dot mapping for 2x4 grid
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    # 0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80
    BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

    def __init__(self, w, h):
        self.w, self.h = w, h
        # Grid stores 8-bit masks for 2x4 cells
        self.grid = [[0] * (w // 2 + 1) for _ in range(h // 4 + 1)]
        # Color grid stores an (r, g, b) tuple per cell, None when untouched
        self.c_grid = [[None] * (w // 2 + 1) for _ in range(h // 4 + 1)]

    @property
    def cell_width(self):
        return len(self.grid[0])

    @property
    def cell_height(self):
        return len(self.grid)

    def set_pixel(self, x, y, color):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return

        cx, cy = x >> 1, y >> 2
        # Bit index 0-7: 0,1,2,3 for left col; 4,5,6,7 for right col
        self.grid[cy][cx] |= (1 << ((y & 3) + (x & 1) * 4))
        self.c_grid[cy][cx] = color

    def fill_span(self, y, x_start, x_end, color):
        """Set every dot in row y from x_start to x_end inclusive."""
        if y < 0 or y >= self.h: return
        x_start = max(0, x_start)
        x_end = min(self.w - 1, x_end)
        if x_start > x_end: return

        row_mask = self.grid[y >> 2]
        row_color = self.c_grid[y >> 2]
        bit = y & 3
        for x in range(x_start, x_end + 1):
            cx = x >> 1
            row_mask[cx] |= (1 << (bit + (x & 1) * 4))
            row_color[cx] = color


def render_cell_ascii(mask: int) -> str:
    """
    Renders a 2x4 cell mask as an ASCII character based on pixel density.
    Used when Braille is unavailable.
    """
    if not mask:
        return ' '

    density = bin(mask).count('1')
    chars = " .:-=+*#%@"
    return chars[density] if density < len(chars) else '@'


def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(Canvas.BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)
