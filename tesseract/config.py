"""
Configuration constants for the tesseract viewer.
"""

import math

# --- Window ---
SCREEN_WIDTH = 960
SCREEN_HEIGHT = 540
TARGET_FPS = 60
WINDOW_TITLE = "Rotating Tesseract Visualization"
CAPTION = (
    "A 3D projection of a 4D tesseract rotating. "
    "Drag with the mouse to orbit, scroll to zoom."
)

# --- Geometry ---
# Distance of the 4D viewpoint along w. Must not equal any w coordinate (+-1).
PROJECTION_DISTANCE = 2.0

# --- Animation ---
# Per frame, not per second: speed follows the frame rate.
ROTATION_STEP = 0.005

# --- Camera ---
CAMERA_FOV = 75.0  # Vertical, degrees
CAMERA_NEAR = 0.1
CAMERA_FAR = 1000.0
CAMERA_Z = 3.0

# --- Orbit controls ---
DAMPING_FACTOR = 0.05
MIN_DISTANCE = 2.0
MAX_DISTANCE = 10.0
MIN_POLAR_ANGLE = 0.0
MAX_POLAR_ANGLE = math.pi / 2  # Never below the horizon
ROTATE_SPEED = 1.0
ZOOM_SPEED = 1.0

# --- Colors ---
BACKGROUND = 0x1A1A2E
# Hue, saturation, lightness of every edge
EDGE_HSL = (0.6, 0.7, 0.5)
LINE_WIDTH = 2
TITLE_COLOR = (129, 140, 248)  # Indigo
CAPTION_COLOR = (209, 213, 219)  # Gray

# --- Export ---
EXPORT_FRAMES = 120
EXPORT_WIDTH = 640
EXPORT_HEIGHT = 480
EXPORT_FRAME_MS = 16
