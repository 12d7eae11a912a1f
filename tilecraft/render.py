"""Cameras, draw layers and the render manager that draws them onto a target."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from tilecraft.console import DEBUG, log

Vec2 = tuple[float, float]
Colour = tuple[int, int, int]

_OWNER = "RenderManager"
MAGENTA: Colour = (255, 0, 255)
INT_MIN = -(2**31)

LAYER_UNKNOWN = 0
LAYER_TILE_BACKGROUND = 5
LAYER_TILE_FOREGROUND = 10
LAYER_ACTOR = 11
LAYER_PLAYER = 12
LAYER_UI_START = 35
LAYER_UI_HUD = 40
LAYER_UI_MENU = 50
LAYER_DEBUG_WORLD_OVERLAY = 20
LAYER_DEBUG_UI_OVERLAY = 60


@dataclass(frozen=True)
class View:
    """A rectangle of world space, given by its centre and size."""

    center: Vec2
    size: Vec2

    def pixel_to_coords(self, pixel: tuple[int, int], target_size: tuple[int, int]) -> Vec2:
        tw, th = target_size
        return (
            self.center[0] + (pixel[0] / tw - 0.5) * self.size[0],
            self.center[1] + (pixel[1] / th - 0.5) * self.size[1],
        )

    def coords_to_pixel(self, point: Vec2, target_size: tuple[int, int]) -> tuple[int, int]:
        tw, th = target_size
        return (
            int(((point[0] - self.center[0]) / self.size[0] + 0.5) * tw),
            int(((point[1] - self.center[1]) / self.size[1] + 0.5) * th),
        )


class RenderTarget:
    """A surface of a given pixel size that records what is drawn on it."""

    def __init__(self, size: tuple[int, int]) -> None:
        self.size = (int(size[0]), int(size[1]))
        self.view = self.default_view
        self.clear_colour: Optional[Colour] = None
        self.drawn: list[Any] = []

    @property
    def default_view(self) -> View:
        w, h = self.size
        return View((w / 2, h / 2), (float(w), float(h)))

    def clear(self, colour: Colour) -> None:
        self.clear_colour = colour
        self.drawn.clear()

    def set_view(self, view: View) -> None:
        self.view = view

    def draw(self, item: Any) -> None:
        self.drawn.append(item)


class Drawable(ABC):
    """Something drawn on one or more layers."""

    @abstractmethod
    def draw_layers(self) -> list[int]:
        """The layers this object draws on."""

    @abstractmethod
    def draw(self, target: RenderTarget, layer: int) -> None:
        """Draw the part of this object that belongs to ``layer``."""


class Camera:
    """A view into the world; the highest-priority registered camera is active."""

    def __init__(self, identifier: str, manager: RenderManager, priority: int = 0, size: float = 300.0) -> None:
        self.identifier = identifier
        self._manager = manager
        self._priority = priority
        self.size = size
        self.position: Vec2 = (0.0, 0.0)
        manager.register_camera(self)

    @property
    def priority(self) -> int:
        return self._priority

    def set_priority(self, priority: int) -> None:
        self._priority = priority
        self._manager._on_camera_order_changed()

    def as_view(self) -> View:
        return View(self.position, (self.size / self._manager.aspect, self.size))

    def close(self) -> None:
        """Remove the camera from its manager."""
        self._manager.unregister_camera(self)

    def __enter__(self) -> Camera:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class RenderManager:
    """Draws registered drawables layer by layer through the active camera."""

    def __init__(self) -> None:
        self._added: dict[Drawable, None] = {}
        self._removed: dict[Drawable, None] = {}
        self._layers: dict[int, dict[Drawable, None]] = {}
        self._cameras: dict[Camera, None] = {}
        self._active: Optional[Camera] = None
        self._ui_camera: Optional[Camera] = None
        self._target: Optional[RenderTarget] = None
        self._aspect = 1.0

    @property
    def aspect(self) -> float:
        return self._aspect

    def register_drawable(self, drawable: Drawable) -> None:
        self._added[drawable] = None

    def unregister_drawable(self, drawable: Drawable) -> None:
        self._added.pop(drawable, None)
        self._removed[drawable] = None

    def register_camera(self, camera: Camera) -> None:
        self._cameras[camera] = None
        self._on_camera_order_changed()

    def unregister_camera(self, camera: Camera) -> None:
        self._cameras.pop(camera, None)
        self._on_camera_order_changed()

    def _on_camera_order_changed(self) -> None:
        previous, self._active = self._active, None
        for camera in self._cameras:
            if self._active is None or camera.priority > self._active.priority:
                self._active = camera
        if self._active is not None and self._active is not previous:
            log(DEBUG, "Camera switched to '{}'", self._active.identifier, owner=_OWNER)

    def _update_target_view(self) -> None:
        if self._target is not None:
            self._target.set_view(self._active.as_view() if self._active else self._target.default_view)

    def render(self) -> None:
        """Draw every layer in order; layers from the UI start use the UI camera."""
        target = self._target
        if target is None:
            return
        if self._ui_camera is None:
            self._ui_camera = Camera("ui", self, INT_MIN, 600.0)
            self._ui_camera.close()

        for drawable in self._added:
            for layer in drawable.draw_layers():
                self._layers.setdefault(layer, {})[drawable] = None
        self._added.clear()
        for drawable in self._removed:
            for contents in self._layers.values():
                contents.pop(drawable, None)
        self._removed.clear()

        target.clear(MAGENTA)
        self._update_target_view()
        entered_ui = False
        for layer in sorted(self._layers):
            if not entered_ui and layer >= LAYER_UI_START:
                target.set_view(self._ui_camera.as_view())
                entered_ui = True
            for drawable in list(self._layers[layer]):
                drawable.draw(target, layer)

    def set_target(self, target: Optional[RenderTarget]) -> None:
        self._target = target
        if target is None:
            return
        width, height = target.size
        self._aspect = height / width

    def active_camera(self) -> Optional[Camera]:
        return self._active

    def ui_camera(self) -> Optional[Camera]:
        return self._ui_camera

    def _require_target(self) -> RenderTarget:
        if self._target is None:
            raise RuntimeError("no render target set")
        return self._target

    def _world_view(self, target: RenderTarget) -> View:
        return self._active.as_view() if self._active else target.default_view

    def _ui_view(self) -> View:
        if self._ui_camera is None:
            raise RuntimeError("no UI camera yet")
        return self._ui_camera.as_view()

    def pixel_to_world(self, pixel: tuple[int, int]) -> Vec2:
        target = self._require_target()
        return self._world_view(target).pixel_to_coords(pixel, target.size)

    def world_to_pixel(self, point: Vec2) -> tuple[int, int]:
        target = self._require_target()
        return self._world_view(target).coords_to_pixel(point, target.size)

    def pixel_to_ui(self, pixel: tuple[int, int]) -> Vec2:
        target = self._require_target()
        return self._ui_view().pixel_to_coords(pixel, target.size)

    def ui_to_pixel(self, point: Vec2) -> tuple[int, int]:
        target = self._require_target()
        return self._ui_view().coords_to_pixel(point, target.size)