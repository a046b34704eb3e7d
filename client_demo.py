#!/usr/bin/env python3
#
# PROJECT: painter-cli-renderer
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import curses
import logging
import math
import os
import sys

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from painter_cli_renderer.config import RenderConfig
from painter_cli_renderer.color import parse_hex_color
from painter_cli_renderer.demo import DemoApp

LOGGER = logging.getLogger("painter_cli_renderer")


def parse_args(argv=None):
    """CLI argument parser."""
    epilog = """\
controls:
  w/s or up/down      move forward / back
  a/d                 strafe left / right
  j/l or left/right   turn
  space/r, f/z        rise / sink
  c, b                toggle color, toggle Braille
  p                   pause
  q                   quit

examples:
  %(prog)s                                  Default world, 45 degree half field of view
  %(prog)s --seed 7 --towers 40             Reproducible world with more towers
  %(prog)s --vision-angle 30 --range 300    Narrow view, short draw distance
  %(prog)s --ascii --mono                   Plain ASCII, monochrome
  %(prog)s --log-file render.log --log-level DEBUG
"""
    parser = argparse.ArgumentParser(
        description="Painter's-algorithm 3D renderer for the terminal",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--no-color", "--mono", dest="no_color", action="store_true",
                        help="Disable color output")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII characters instead of Braille")
    parser.add_argument("--bg-color", default="#000000",
                        help="Background color in hex #RRGGBB (default: #000000)")
    parser.add_argument("--vision-angle", type=float, default=45.0,
                        help="Half field of view in degrees, 0-180 exclusive (default: 45)")
    parser.add_argument("--range", dest="camera_range", type=float, default=1000.0,
                        help="Maximum render distance (default: 1000)")
    parser.add_argument("--fps", type=float, default=30.0,
                        help="Target frames per second, 0 = unlimited (default: 30)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for world generation")
    parser.add_argument("--triangles", type=int, default=100,
                        help="Number of loose triangles (default: 100)")
    parser.add_argument("--cubes", type=int, default=20,
                        help="Number of cubes (default: 20)")
    parser.add_argument("--pyramids", type=int, default=20,
                        help="Number of pyramids (default: 20)")
    parser.add_argument("--towers", type=int, default=20,
                        help="Number of towers (default: 20)")
    parser.add_argument("--log-file", default=None,
                        help="Write log records to this file (nothing is logged otherwise)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Log level for --log-file (default: INFO)")
    return parser, parser.parse_args(argv)


def build_config(parser, args) -> RenderConfig:
    bg_rgb = parse_hex_color(args.bg_color)
    if bg_rgb is None:
        parser.error(f"invalid --bg-color {args.bg_color!r}, expected #RRGGBB")
    try:
        config = RenderConfig.detect_terminal(
            bg_color=bg_rgb,
            vision_angle=math.radians(args.vision_angle),
            camera_range=args.camera_range,
            target_fps=args.fps,
            seed=args.seed,
            loose_triangles=args.triangles,
            cubes=args.cubes,
            pyramids=args.pyramids,
            towers=args.towers,
        )
    except ValueError as e:
        parser.error(str(e))
    if args.no_color:
        config.use_color = False
    if args.ascii:
        config.use_braille = False
    return config


def configure_logging(args):
    # curses owns the terminal, so records only go to a file
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, args.log_level),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.getLogger().addHandler(logging.NullHandler())


def main(stdscr, config):
    app = DemoApp(stdscr, config)
    app.run()


def run(argv=None):
    parser, args = parse_args(argv)
    config = build_config(parser, args)
    configure_logging(args)
    LOGGER.info("starting with %r", config)
    try:
        curses.wrapper(lambda s: main(s, config))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        LOGGER.exception("renderer crashed")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(run())
