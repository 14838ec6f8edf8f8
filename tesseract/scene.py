"""
Scene graph and perspective camera.
"""

import math

import numpy as np

from .config import CAMERA_FAR, CAMERA_FOV, CAMERA_NEAR


def hex_to_rgb(value):
    """Split a 0xRRGGBB integer into an (r, g, b) tuple of 0..255 ints."""
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


class Scene:
    def __init__(self, background=0x000000):
        self.background = background
        self.children = []

    def add(self, obj):
        if obj not in self.children:
            self.children.append(obj)
            obj.parent = self

    def remove(self, obj):
        if obj in self.children:
            self.children.remove(obj)
            obj.parent = None


class PerspectiveCamera:
    """Y-up perspective camera looking at a target point."""

    def __init__(self, fov=CAMERA_FOV, aspect=1.0, near=CAMERA_NEAR, far=CAMERA_FAR):
        self.fov = fov
        self.aspect = aspect
        self.near = near
        self.far = far
        self.position = np.zeros(3)
        self.up = np.array([0.0, 1.0, 0.0])
        self.target = np.zeros(3)
        self.projection_matrix = np.eye(4)
        self.update_projection_matrix()

    def update_projection_matrix(self):
        """Recompute the projection matrix after fov/aspect/near/far change."""
        f = 1.0 / math.tan(math.radians(self.fov) / 2)
        near, far = self.near, self.far
        self.projection_matrix = np.array(
            [
                [f / self.aspect, 0, 0, 0],
                [0, f, 0, 0],
                [0, 0, (far + near) / (near - far), 2 * far * near / (near - far)],
                [0, 0, -1, 0],
            ]
        )

    def look_at(self, target):
        self.target = np.asarray(target, dtype=float).copy()

    def view_matrix(self):
        """World to camera transform (camera looks down its local -Z)."""
        forward = self.target - self.position
        norm = np.linalg.norm(forward)
        forward = forward / norm if norm > 0 else np.array([0.0, 0.0, -1.0])

        right = np.cross(forward, self.up)
        if np.linalg.norm(right) < 1e-9:
            # Looking straight along up: pick any perpendicular
            right = np.cross(forward, np.array([0.0, 0.0, 1.0]))
        right /= np.linalg.norm(right)
        true_up = np.cross(right, forward)

        view = np.eye(4)
        view[0, :3] = right
        view[1, :3] = true_up
        view[2, :3] = -forward
        view[:3, 3] = -view[:3, :3] @ self.position
        return view
