"""
Line-segment mesh for the projected tesseract.

A mesh owns its geometry buffers and its material. Once disposed, their
data is gone and the mesh must not be drawn again.
"""

import colorsys
import logging
from dataclasses import dataclass

import numpy as np

from .config import EDGE_HSL, LINE_WIDTH
from .geometry import (
    project_vertices,
    rotate_x,
    rotate_y,
    rotate_z,
    tesseract_edges,
    tesseract_vertices,
)

logger = logging.getLogger(__name__)


def hsl_to_rgb(h, s, l):
    """Convert hue, saturation, lightness (all 0..1) to an RGB tuple."""
    return colorsys.hls_to_rgb(h, l, s)


class BufferGeometry:
    """Named float32 vertex attributes, each of shape (N, item_size)."""

    def __init__(self):
        self.attributes = {}
        self.disposed = False

    def set_attribute(self, name, values, item_size=3):
        self.attributes[name] = np.asarray(values, dtype=np.float32).reshape(
            -1, item_size
        )

    def get_attribute(self, name):
        return self.attributes[name]

    def dispose(self):
        self.attributes.clear()
        self.disposed = True


@dataclass
class LineBasicMaterial:
    vertex_colors: bool = True
    linewidth: int = LINE_WIDTH
    disposed: bool = False

    def dispose(self):
        self.disposed = True


@dataclass
class Euler:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class LineSegments:
    """Drawable made of independent segments: points 2k and 2k+1 form one line."""

    def __init__(self, geometry, material):
        self.geometry = geometry
        self.material = material
        self.rotation = Euler()
        self.parent = None

    @property
    def disposed(self):
        return self.geometry.disposed or self.material.disposed

    def world_positions(self):
        """Positions with the mesh rotation applied (Euler order XYZ)."""
        verts = self.geometry.get_attribute("position").astype(float)
        verts = rotate_z(verts, self.rotation.z)
        verts = rotate_y(verts, self.rotation.y)
        verts = rotate_x(verts, self.rotation.x)
        return verts

    def segments(self):
        """Yield (start, end, start_color, end_color) in world space."""
        positions = self.world_positions()
        colors = self.geometry.get_attribute("color")
        for k in range(0, len(positions), 2):
            yield positions[k], positions[k + 1], colors[k], colors[k + 1]

    def dispose(self):
        self.geometry.dispose()
        self.material.dispose()


def build_line_geometry(projected, edges, color):
    """Lay out one position pair and one color pair per edge."""
    positions = []
    colors = []
    for v1_idx, v2_idx in edges:
        positions.append(projected[v1_idx])
        positions.append(projected[v2_idx])
        colors.append(color)
        colors.append(color)

    geometry = BufferGeometry()
    geometry.set_attribute("position", positions)
    geometry.set_attribute("color", colors)
    return geometry


def build_tesseract_mesh():
    """Generate, project and lay out the tesseract as line segments."""
    vertices = tesseract_vertices()
    edges = tesseract_edges(vertices)
    projected = project_vertices(vertices)

    color = hsl_to_rgb(*EDGE_HSL)
    geometry = build_line_geometry(projected, edges, color)
    material = LineBasicMaterial(vertex_colors=True, linewidth=LINE_WIDTH)

    logger.debug("Built tesseract mesh: %d vertices, %d edges", len(vertices), len(edges))
    return LineSegments(geometry, material)
