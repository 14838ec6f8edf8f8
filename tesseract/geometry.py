"""
Tesseract geometry: vertices, edges and the 4D to 3D projection.
"""

import numpy as np

from .config import PROJECTION_DISTANCE


# --- 4D Geometry ---


def tesseract_vertices():
    """
    Build the 16 vertices of a tesseract as a (16, 4) array.

    Bit k of the vertex index selects the sign of coordinate k
    (bit0 -> x, bit1 -> y, bit2 -> z, bit3 -> w).
    """
    vertices = np.empty((16, 4), dtype=float)
    for i in range(16):
        for k in range(4):
            vertices[i, k] = 1.0 if i & (1 << k) else -1.0
    return vertices


def hamming_distance(a, b):
    """Count the coordinates at which two vertices differ."""
    return int(np.count_nonzero(np.asarray(a) != np.asarray(b)))


def tesseract_edges(vertices=None):
    """
    List the edges (i, j), i < j, joining vertices that differ in one coordinate.
    """
    if vertices is None:
        vertices = tesseract_vertices()

    edges = []
    n = len(vertices)
    for i in range(n):
        for j in range(i + 1, n):
            if hamming_distance(vertices[i], vertices[j]) == 1:
                edges.append((i, j))
    return edges


# --- Projection ---


def project_vertex(vertex, distance=PROJECTION_DISTANCE):
    """
    Project one 4D vertex to 3D.

    x, y and z are scaled by 1 / (distance - w), so vertices further along w
    shrink towards the center and the tesseract reads as a cube inside a cube.
    """
    x, y, z, w = (float(c) for c in vertex)
    if distance == w:
        raise ValueError(f"projection distance {distance} equals w coordinate")
    scale = 1.0 / (distance - w)
    return np.array([x * scale, y * scale, z * scale])


def project_vertices(vertices, distance=PROJECTION_DISTANCE):
    """Project a (N, 4) array of vertices to a (N, 3) array."""
    vertices = np.asarray(vertices, dtype=float)
    denom = distance - vertices[:, 3]
    if np.any(denom == 0):
        raise ValueError(f"projection distance {distance} equals a w coordinate")
    scale = 1.0 / denom
    return vertices[:, :3] * scale[:, np.newaxis]


# --- 3D Rotation ---


def rotate_x(verts, angle):
    """Rotate (N, 3) vertices around the X axis."""
    c, s = np.cos(angle), np.sin(angle)
    v_new = verts.copy()
    v_new[:, 1] = verts[:, 1] * c - verts[:, 2] * s
    v_new[:, 2] = verts[:, 1] * s + verts[:, 2] * c
    return v_new


def rotate_y(verts, angle):
    """Rotate (N, 3) vertices around the Y axis."""
    c, s = np.cos(angle), np.sin(angle)
    v_new = verts.copy()
    v_new[:, 0] = verts[:, 0] * c + verts[:, 2] * s
    v_new[:, 2] = -verts[:, 0] * s + verts[:, 2] * c
    return v_new


def rotate_z(verts, angle):
    """Rotate (N, 3) vertices around the Z axis."""
    c, s = np.cos(angle), np.sin(angle)
    v_new = verts.copy()
    v_new[:, 0] = verts[:, 0] * c - verts[:, 1] * s
    v_new[:, 1] = verts[:, 0] * s + verts[:, 1] * c
    return v_new
