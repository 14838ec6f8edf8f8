"""
Render the rotating tesseract off-screen and save it as an animated GIF.
"""

import logging

from .config import EXPORT_FRAME_MS, EXPORT_FRAMES, EXPORT_HEIGHT, EXPORT_WIDTH
from .headless import HeadlessHost, ImageSurface
from .viewer import TesseractViewer

logger = logging.getLogger(__name__)


def render_frames(num_frames=EXPORT_FRAMES, width=EXPORT_WIDTH, height=EXPORT_HEIGHT):
    """
    Run the viewer headless and collect one PIL image per frame.

    Args:
        num_frames: Number of frames to render
        width: Frame width in pixels
        height: Frame height in pixels
    """
    if num_frames < 1:
        raise ValueError(f"num_frames must be positive, got {num_frames}")
    if width < 1 or height < 1:
        raise ValueError(f"invalid frame size {width}x{height}")

    host = HeadlessHost(width, height)
    surface = ImageSurface()
    viewer = TesseractViewer(host, lambda: surface)

    # mount() draws the first frame
    viewer.mount()
    frames = [surface.to_image()]
    try:
        while len(frames) < num_frames:
            host.step()
            frames.append(surface.to_image())
    finally:
        viewer.unmount()

    logger.debug("Rendered %d frames at %dx%d", len(frames), width, height)
    return frames


def export_gif(
    output_path,
    num_frames=EXPORT_FRAMES,
    width=EXPORT_WIDTH,
    height=EXPORT_HEIGHT,
    duration_ms=EXPORT_FRAME_MS,
):
    """
    Render the animation and save it as a looping GIF.

    Args:
        output_path: Path for output GIF
        num_frames: Number of frames in the animation
        width: Frame width in pixels
        height: Frame height in pixels
        duration_ms: Duration per frame in milliseconds
    """
    frames = render_frames(num_frames, width, height)

    frames[0].save(
        output_path,
        save_all=True,
        append_images=frames[1:],
        duration=duration_ms,
        loop=0,
    )

    print(f"Created {output_path} with {num_frames} frames")
    return output_path
