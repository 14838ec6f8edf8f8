"""
Tesseract viewer: owns the scene, camera, surface, controls and the frame loop.

mount() acquires everything and starts the loop; unmount() stops the loop and
releases everything. Every other entry point checks that what it needs is
present, so calling it before mount or after unmount does nothing.
"""

import logging

import numpy as np

from .config import (
    BACKGROUND,
    CAMERA_FAR,
    CAMERA_FOV,
    CAMERA_NEAR,
    CAMERA_Z,
    DAMPING_FACTOR,
    MAX_DISTANCE,
    MAX_POLAR_ANGLE,
    MIN_DISTANCE,
    MIN_POLAR_ANGLE,
    ROTATE_SPEED,
    ROTATION_STEP,
    ZOOM_SPEED,
)
from .controls import OrbitControls
from .mesh import build_tesseract_mesh
from .scene import PerspectiveCamera, Scene

logger = logging.getLogger(__name__)


class TesseractViewer:
    def __init__(self, host, surface_factory):
        """
        Args:
            host: Host providing the container, frame scheduling and resize events
            surface_factory: Callable returning a new output surface
        """
        self.host = host
        self.surface_factory = surface_factory

        self.scene = None
        self.camera = None
        self.renderer = None
        self.tesseract_mesh = None
        self.controls = None
        self.animation_frame_id = None
        self.running = False

    # --- Lifecycle ---

    def mount(self):
        """Build the scene, attach the surface to the host and start animating."""
        if self.running:
            return

        self.scene = Scene(background=BACKGROUND)

        # Aspect 1 until the first resize reports the real container size
        self.camera = PerspectiveCamera(CAMERA_FOV, 1.0, CAMERA_NEAR, CAMERA_FAR)
        self.camera.position = np.array([0.0, 0.0, CAMERA_Z])

        self.renderer = self.surface_factory()
        self.renderer.set_pixel_ratio(self.host.device_pixel_ratio)
        self.host.append_child(self.renderer)

        self.handle_resize()

        self.controls = OrbitControls(self.camera, self.renderer)
        self.controls.enable_damping = True
        self.controls.damping_factor = DAMPING_FACTOR
        self.controls.enable_pan = False
        self.controls.min_distance = MIN_DISTANCE
        self.controls.max_distance = MAX_DISTANCE
        self.controls.min_polar_angle = MIN_POLAR_ANGLE
        self.controls.max_polar_angle = MAX_POLAR_ANGLE
        self.controls.rotate_speed = ROTATE_SPEED
        self.controls.zoom_speed = ZOOM_SPEED

        self.create_tesseract()

        self.host.add_listener("resize", self.handle_resize)

        self.running = True
        logger.debug("Viewer mounted")
        self.animate()

    def unmount(self):
        """Stop the loop and release the mesh, controls and surface, in that order."""
        self.host.remove_listener("resize", self.handle_resize)

        self.running = False
        if self.animation_frame_id is not None:
            self.host.cancel_frame(self.animation_frame_id)
            self.animation_frame_id = None

        if self.tesseract_mesh is not None:
            if self.scene is not None:
                self.scene.remove(self.tesseract_mesh)
            self.tesseract_mesh.geometry.dispose()
            self.tesseract_mesh.material.dispose()

        if self.controls is not None:
            self.controls.dispose()

        if self.renderer is not None:
            self.renderer.dispose()
            if self.host.contains(self.renderer):
                self.host.remove_child(self.renderer)

        self.scene = None
        self.camera = None
        self.renderer = None
        self.controls = None
        self.tesseract_mesh = None
        logger.debug("Viewer unmounted")

    # --- Geometry ---

    def create_tesseract(self):
        """(Re)build the tesseract mesh, releasing the previous one first."""
        if self.scene is None:
            return None

        if self.tesseract_mesh is not None:
            self.scene.remove(self.tesseract_mesh)
            self.tesseract_mesh.geometry.dispose()
            self.tesseract_mesh.material.dispose()

        self.tesseract_mesh = build_tesseract_mesh()
        self.scene.add(self.tesseract_mesh)
        logger.debug("Tesseract mesh created")
        return self.tesseract_mesh

    # --- Viewport ---

    def handle_resize(self):
        """Match camera aspect and surface size to the container's client size."""
        if self.camera is None or self.renderer is None:
            return

        width = self.host.client_width
        height = self.host.client_height
        if width <= 0 or height <= 0:
            return

        self.camera.aspect = width / height
        self.camera.update_projection_matrix()
        self.renderer.set_size(width, height)
        logger.debug("Resized to %dx%d", width, height)

    # --- Frame loop ---

    def animate(self):
        """One tick: schedule the next one, rotate, update controls, draw."""
        if not self.running:
            return
        self.animation_frame_id = self.host.request_frame(self.animate)

        if self.tesseract_mesh is not None:
            self.tesseract_mesh.rotation.x += ROTATION_STEP
            self.tesseract_mesh.rotation.y += ROTATION_STEP

        if self.controls is not None:
            self.controls.update()

        self.render()

    def render(self):
        """Draw one frame if the scene, camera and surface are all present."""
        if self.renderer is not None and self.scene is not None and self.camera is not None:
            self.renderer.render(self.scene, self.camera)
