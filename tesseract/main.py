# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "numpy",
#     "pillow",
#     "raylib",
# ]
# ///
"""
Rotating Tesseract - a 3D projection of a 4D hypercube.

Usage:
    tesseract [--width 960] [--height 540] [--fps 60]
    tesseract --export tesseract.gif [--frames 120]
"""

import argparse
import logging

from .config import (
    EXPORT_FRAME_MS,
    EXPORT_FRAMES,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TARGET_FPS,
)
from .viewer import TesseractViewer


def run_window(width, height, fps):
    from .raylib_host import RaylibHost, RaylibSurface

    host = RaylibHost(width, height, fps)
    host.open()
    viewer = TesseractViewer(host, RaylibSurface)
    try:
        viewer.mount()
        host.run()
    finally:
        # Surface textures must go before the GL context
        viewer.unmount()
        host.close()


def positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"{value} is not a positive integer")
    return number


def build_parser():
    parser = argparse.ArgumentParser(description="Rotating tesseract visualization")
    parser.add_argument("--width", type=positive_int, default=SCREEN_WIDTH, help="Window or frame width")
    parser.add_argument("--height", type=positive_int, default=SCREEN_HEIGHT, help="Window or frame height")
    parser.add_argument("--fps", type=positive_int, default=TARGET_FPS, help="Target frames per second")
    parser.add_argument("--export", "-e", metavar="PATH", help="Render a GIF instead of opening a window")
    parser.add_argument("--frames", "-n", type=positive_int, default=EXPORT_FRAMES, help="Frames to export")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.export:
        from .export import export_gif

        export_gif(
            args.export,
            num_frames=args.frames,
            width=args.width,
            height=args.height,
            duration_ms=max(EXPORT_FRAME_MS, 1000 // args.fps),
        )
    else:
        run_window(args.width, args.height, args.fps)


if __name__ == "__main__":
    main()
