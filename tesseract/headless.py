"""
Off-screen backend: a host stepped by hand and a Pillow image surface.
"""

import numpy as np
from PIL import Image, ImageDraw

from .host import Host, Surface
from .scene import hex_to_rgb

# Supersampling factor used when antialiasing
SUPERSAMPLE = 2


class HeadlessHost(Host):
    """Host with a fixed-size container whose frames advance on step()."""

    def __init__(self, width, height, device_pixel_ratio=1.0):
        super().__init__()
        self._width = width
        self._height = height
        self.device_pixel_ratio = device_pixel_ratio
        self.frame_count = 0

    @property
    def client_width(self):
        return self._width

    @property
    def client_height(self):
        return self._height

    def resize(self, width, height):
        """Change the container size and notify resize listeners."""
        self._width = width
        self._height = height
        self.emit("resize")

    def step(self, frames=1):
        """Advance the given number of frames. Returns frames actually run."""
        ran = 0
        for _ in range(frames):
            if not self.has_pending_frames:
                break
            self.run_frame_callbacks()
            self.frame_count += 1
            ran += 1
        return ran


class ImageSurface(Surface):
    """Rasterises line segments into a PIL image."""

    def __init__(self, antialias=True):
        super().__init__(antialias=antialias)
        self.image = None

    def render(self, scene, camera):
        width, height = self.drawing_size
        factor = SUPERSAMPLE if self.antialias else 1
        canvas_w, canvas_h = width * factor, height * factor

        canvas = Image.new("RGB", (canvas_w, canvas_h), hex_to_rgb(scene.background))
        draw = ImageDraw.Draw(canvas)
        view_proj = camera.projection_matrix @ camera.view_matrix()

        for obj in scene.children:
            if obj.disposed:
                continue
            line_width = max(1, int(round(obj.material.linewidth * self.pixel_ratio * factor)))
            for start, end, c0, c1 in obj.segments():
                p0 = _to_screen(view_proj, start, canvas_w, canvas_h)
                p1 = _to_screen(view_proj, end, canvas_w, canvas_h)
                if p0 is None or p1 is None:
                    continue
                # PIL draws a line in one color: average the two ends
                color = tuple(int(round((a + b) / 2 * 255)) for a, b in zip(c0, c1))
                draw.line([p0, p1], fill=color, width=line_width)

        if factor > 1:
            canvas = canvas.resize((width, height), Image.Resampling.LANCZOS)
        self.image = canvas

    def to_image(self):
        """Copy of the last rendered frame, or None before the first render."""
        return self.image.copy() if self.image is not None else None

    def dispose(self):
        self.image = None
        super().dispose()


def _to_screen(view_proj, point, width, height):
    """Project a world point to pixel coordinates, None if behind the camera."""
    clip = view_proj @ np.array([point[0], point[1], point[2], 1.0])
    if clip[3] <= 0:
        return None
    ndc = clip[:3] / clip[3]
    x = (ndc[0] + 1) * 0.5 * width
    y = (1 - ndc[1]) * 0.5 * height
    return (float(x), float(y))
