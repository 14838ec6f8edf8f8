"""
Host and surface contracts shared by the window and headless backends.

A host plays the part of the page: it is the container the output surface
is attached to, it schedules per-frame callbacks and it notifies listeners
when the window is resized. A surface is the drawable the viewer renders
into.
"""

import itertools
from dataclasses import dataclass


@dataclass
class PointerEvent:
    """Pointer input in surface pixels. kind is "rotate", "dolly" or "pan"."""

    kind: str
    dx: float = 0.0
    dy: float = 0.0


class Surface:
    """Base output surface: size, pixel ratio and pointer listeners."""

    def __init__(self, antialias=True):
        self.antialias = antialias
        self.width = 0
        self.height = 0
        self.pixel_ratio = 1.0
        self.disposed = False
        self._pointer_listeners = []

    @property
    def drawing_size(self):
        """Size of the backing buffer in device pixels."""
        return (
            max(1, int(self.width * self.pixel_ratio)),
            max(1, int(self.height * self.pixel_ratio)),
        )

    def set_pixel_ratio(self, ratio):
        self.pixel_ratio = ratio

    def set_size(self, width, height):
        self.width = width
        self.height = height

    def add_pointer_listener(self, callback):
        self._pointer_listeners.append(callback)

    def remove_pointer_listener(self, callback):
        if callback in self._pointer_listeners:
            self._pointer_listeners.remove(callback)

    def dispatch_pointer(self, event):
        for callback in list(self._pointer_listeners):
            callback(event)

    def render(self, scene, camera):
        """Draw one frame of scene as seen by camera. Override in backends."""
        raise NotImplementedError

    def dispose(self):
        self.disposed = True


class Host:
    """Base host: container children, window listeners and frame callbacks."""

    device_pixel_ratio = 1.0

    def __init__(self):
        self.children = []
        self._listeners = {}
        self._frame_callbacks = {}
        self._frame_ids = itertools.count(1)

    # --- Container ---

    @property
    def client_width(self):
        """Container width in logical pixels. Override in backends."""
        raise NotImplementedError

    @property
    def client_height(self):
        """Container height in logical pixels. Override in backends."""
        raise NotImplementedError

    def append_child(self, surface):
        self.children.append(surface)

    def remove_child(self, surface):
        self.children.remove(surface)

    def contains(self, surface):
        return surface in self.children

    # --- Window notifications ---

    def add_listener(self, event, callback):
        self._listeners.setdefault(event, []).append(callback)

    def remove_listener(self, event, callback):
        callbacks = self._listeners.get(event, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event):
        for callback in list(self._listeners.get(event, [])):
            callback()

    # --- Frame scheduling ---

    def request_frame(self, callback):
        """Run callback on the next frame. Returns an id for cancel_frame()."""
        frame_id = next(self._frame_ids)
        self._frame_callbacks[frame_id] = callback
        return frame_id

    def cancel_frame(self, frame_id):
        self._frame_callbacks.pop(frame_id, None)

    @property
    def has_pending_frames(self):
        return bool(self._frame_callbacks)

    def run_frame_callbacks(self):
        """Run the callbacks due this frame. Ones requested meanwhile wait."""
        callbacks = self._frame_callbacks
        self._frame_callbacks = {}
        for callback in callbacks.values():
            callback()
