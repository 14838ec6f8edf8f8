"""
Orbit camera controls: drag to orbit around a target, wheel to dolly.

The camera position is kept in spherical coordinates around the target
(radius, polar angle phi from +Y, azimuth theta around Y). Pointer input only
accumulates deltas; update() applies them, with damping if enabled, so it has
to be called once per frame.
"""

import math

import numpy as np

EPS = 1e-6


class OrbitControls:
    def __init__(self, camera, dom_element):
        self.camera = camera
        self.dom_element = dom_element
        self.target = np.zeros(3)

        self.enabled = True
        self.enable_damping = False
        self.damping_factor = 0.05
        self.enable_rotate = True
        self.rotate_speed = 1.0
        self.enable_zoom = True
        self.zoom_speed = 1.0
        self.enable_pan = True

        self.min_distance = 0.0
        self.max_distance = math.inf
        self.min_polar_angle = 0.0
        self.max_polar_angle = math.pi

        # Pending input, consumed by update()
        self._theta_delta = 0.0
        self._phi_delta = 0.0
        self._scale = 1.0
        self._pan_offset = np.zeros(3)

        self.dom_element.add_pointer_listener(self._on_pointer)
        self.update()

    # --- Input ---

    def _on_pointer(self, event):
        if not self.enabled:
            return

        if event.kind == "rotate" and self.enable_rotate:
            height = self.dom_element.height or 1
            self.rotate_left(2 * math.pi * event.dx / height * self.rotate_speed)
            self.rotate_up(2 * math.pi * event.dy / height * self.rotate_speed)
        elif event.kind == "dolly" and self.enable_zoom:
            if event.dy < 0:
                self.dolly_in(self._zoom_scale())
            elif event.dy > 0:
                self.dolly_out(self._zoom_scale())
        elif event.kind == "pan" and self.enable_pan:
            self.pan(event.dx, event.dy)

    def _zoom_scale(self):
        return 0.95**self.zoom_speed

    def rotate_left(self, angle):
        self._theta_delta -= angle

    def rotate_up(self, angle):
        self._phi_delta -= angle

    def dolly_in(self, dolly_scale):
        self._scale *= dolly_scale

    def dolly_out(self, dolly_scale):
        self._scale /= dolly_scale

    def pan(self, dx, dy):
        """Move the target in the camera plane by a pointer delta in pixels."""
        offset = self.camera.position - self.target
        distance = np.linalg.norm(offset) * math.tan(math.radians(self.camera.fov) / 2)
        height = self.dom_element.height or 1

        view = self.camera.view_matrix()
        right, up = view[0, :3], view[1, :3]
        self._pan_offset += -right * (2 * dx * distance / height)
        self._pan_offset += up * (2 * dy * distance / height)

    # --- State ---

    def get_distance(self):
        return float(np.linalg.norm(self.camera.position - self.target))

    def get_polar_angle(self):
        offset = self.camera.position - self.target
        radius = np.linalg.norm(offset)
        if radius == 0:
            return 0.0
        return math.acos(max(-1.0, min(1.0, offset[1] / radius)))

    def get_azimuthal_angle(self):
        offset = self.camera.position - self.target
        return math.atan2(offset[0], offset[2])

    def update(self):
        """Apply pending rotation/dolly/pan. Returns True if the camera moved."""
        position = self.camera.position
        offset = position - self.target

        radius = float(np.linalg.norm(offset))
        theta = math.atan2(offset[0], offset[2])
        phi = math.acos(max(-1.0, min(1.0, offset[1] / radius))) if radius > 0 else 0.0

        if self.enable_damping:
            theta += self._theta_delta * self.damping_factor
            phi += self._phi_delta * self.damping_factor
        else:
            theta += self._theta_delta
            phi += self._phi_delta

        phi = max(self.min_polar_angle, min(self.max_polar_angle, phi))
        phi = max(EPS, min(math.pi - EPS, phi))

        radius = max(self.min_distance, min(self.max_distance, radius * self._scale))

        if self.enable_damping:
            self.target = self.target + self._pan_offset * self.damping_factor
        else:
            self.target = self.target + self._pan_offset

        sin_phi_radius = radius * math.sin(phi)
        offset = np.array(
            [
                sin_phi_radius * math.sin(theta),
                radius * math.cos(phi),
                sin_phi_radius * math.cos(theta),
            ]
        )
        new_position = self.target + offset
        moved = float(np.sum((new_position - position) ** 2)) > EPS

        self.camera.position = new_position
        self.camera.look_at(self.target)

        if self.enable_damping:
            self._theta_delta *= 1 - self.damping_factor
            self._phi_delta *= 1 - self.damping_factor
            self._pan_offset = self._pan_offset * (1 - self.damping_factor)
        else:
            self._theta_delta = 0.0
            self._phi_delta = 0.0
            self._pan_offset = np.zeros(3)
        self._scale = 1.0

        return moved

    def dispose(self):
        self.dom_element.remove_pointer_listener(self._on_pointer)
