"""
Interactive backend: a resizable raylib window and a render-texture surface.
"""

import pyray as rl

from .config import (
    CAPTION,
    CAPTION_COLOR,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TARGET_FPS,
    TITLE_COLOR,
    WINDOW_TITLE,
)
from .host import Host, PointerEvent, Surface
from .scene import hex_to_rgb


class RaylibHost(Host):
    """The window is the container; frames are paced by raylib."""

    def __init__(self, width=SCREEN_WIDTH, height=SCREEN_HEIGHT, fps=TARGET_FPS, title=WINDOW_TITLE):
        super().__init__()
        self.width = width
        self.height = height
        self.fps = fps
        self.title = title
        self.is_open = False

    def open(self):
        rl.set_config_flags(
            rl.ConfigFlags.FLAG_MSAA_4X_HINT | rl.ConfigFlags.FLAG_WINDOW_RESIZABLE
        )
        rl.init_window(self.width, self.height, self.title)
        rl.set_target_fps(self.fps)
        self.is_open = True

    def close(self):
        if self.is_open:
            rl.close_window()
            self.is_open = False

    @property
    def device_pixel_ratio(self):
        if not self.is_open:
            return 1.0
        return rl.get_window_scale_dpi().x

    @property
    def client_width(self):
        return rl.get_screen_width() if self.is_open else 0

    @property
    def client_height(self):
        return rl.get_screen_height() if self.is_open else 0

    def run(self):
        """Pump window events and frame callbacks until closed or nothing is scheduled."""
        while not rl.window_should_close() and self.has_pending_frames:
            if rl.is_window_resized():
                self.emit("resize")

            for surface in self.children:
                surface.poll_input()

            self.run_frame_callbacks()


class RaylibSurface(Surface):
    """Draws the scene into a render texture, then upscales it to the window."""

    def __init__(self, antialias=True, title=WINDOW_TITLE, caption=CAPTION):
        super().__init__(antialias=antialias)
        self.title = title
        self.caption = caption
        self.target = None

    def set_size(self, width, height):
        super().set_size(width, height)
        if self.target is not None:
            rl.unload_render_texture(self.target)
        tex_w, tex_h = self.drawing_size
        self.target = rl.load_render_texture(tex_w, tex_h)

    def poll_input(self):
        """Turn this frame's mouse state into pointer events."""
        if rl.is_mouse_button_down(rl.MouseButton.MOUSE_BUTTON_LEFT):
            delta = rl.get_mouse_delta()
            if delta.x or delta.y:
                self.dispatch_pointer(PointerEvent("rotate", delta.x, delta.y))
        elif rl.is_mouse_button_down(rl.MouseButton.MOUSE_BUTTON_RIGHT):
            delta = rl.get_mouse_delta()
            if delta.x or delta.y:
                self.dispatch_pointer(PointerEvent("pan", delta.x, delta.y))

        # Raylib reports wheel-up as positive, browsers as negative deltaY
        wheel = rl.get_mouse_wheel_move()
        if wheel:
            self.dispatch_pointer(PointerEvent("dolly", 0.0, -wheel))

    def render(self, scene, camera):
        if self.target is None:
            return

        r, g, b = hex_to_rgb(scene.background)
        cam3d = rl.Camera3D(
            rl.Vector3(*(float(c) for c in camera.position)),
            rl.Vector3(*(float(c) for c in camera.target)),
            rl.Vector3(*(float(c) for c in camera.up)),
            camera.fov,
            rl.CameraProjection.CAMERA_PERSPECTIVE,
        )

        # --- DRAW TO TEXTURE ---
        rl.begin_texture_mode(self.target)
        rl.clear_background(rl.Color(r, g, b, 255))
        rl.begin_mode_3d(cam3d)
        for obj in scene.children:
            if obj.disposed:
                continue
            for start, end, c0, _ in obj.segments():
                rl.draw_line_3d(
                    rl.Vector3(*(float(c) for c in start)),
                    rl.Vector3(*(float(c) for c in end)),
                    rl.Color(*(int(round(c * 255)) for c in c0), 255),
                )
        rl.end_mode_3d()
        rl.end_texture_mode()

        # --- DRAW TO SCREEN ---
        rl.begin_drawing()
        rl.clear_background(rl.BLACK)

        tex = self.target.texture
        source_rec = rl.Rectangle(0, 0, tex.width, -tex.height)
        dest_rec = rl.Rectangle(0, 0, self.width, self.height)
        rl.draw_texture_pro(tex, source_rec, dest_rec, rl.Vector2(0, 0), 0.0, rl.WHITE)

        title_size = 28
        title_w = rl.measure_text(self.title, title_size)
        rl.draw_text(self.title, (self.width - title_w) // 2, 16, title_size, rl.Color(*TITLE_COLOR, 255))
        caption_size = 14
        caption_w = rl.measure_text(self.caption, caption_size)
        rl.draw_text(
            self.caption,
            (self.width - caption_w) // 2,
            self.height - caption_size - 12,
            caption_size,
            rl.Color(*CAPTION_COLOR, 255),
        )
        rl.end_drawing()

    def dispose(self):
        if self.target is not None:
            rl.unload_render_texture(self.target)
            self.target = None
        super().dispose()
