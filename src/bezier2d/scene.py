from __future__ import annotations

from enum import Enum
from typing import Any

from loguru import logger

from src.bezier2d.buffer import PixelBuffer, as_pixel_buffer
from src.bezier2d.curve import sample_curve
from src.bezier2d.geometry import IntPoint
from src.bezier2d.rasterizer import draw_grid, draw_polyline
from src.bezier2d.settings import RenderSettings


class SceneState(Enum):
    EMPTY = "empty"
    PARTIAL = "partial"
    INTERPOLATABLE = "interpolatable"

    @classmethod
    def from_count(cls, count: int) -> "SceneState":
        if count == 0:
            return cls.EMPTY
        if count < 3:
            return cls.PARTIAL
        return cls.INTERPOLATABLE


class Scene:
    """Ordered control points plus the per-frame draw of grid, curve and polygon."""

    def __init__(self, settings: RenderSettings | None = None) -> None:
        self.settings = settings or RenderSettings.from_dict()
        self._points: list[IntPoint] = []

    @property
    def points(self) -> tuple[IntPoint, ...]:
        return tuple(self._points)

    @property
    def state(self) -> SceneState:
        return SceneState.from_count(len(self._points))

    def append_point(self, x: int, y: int) -> None:
        self._points.append(IntPoint(int(x), int(y)))
        logger.debug("Appended control point ({}, {}); scene is {}.", x, y, self.state.value)

    def clear_points(self) -> None:
        self._points.clear()
        logger.debug("Cleared control points.")

    def new_buffer(self) -> PixelBuffer:
        return PixelBuffer(policy=self.settings.bounds_policy)

    def render(self, buffer: Any) -> None:
        screen = as_pixel_buffer(buffer, policy=self.settings.bounds_policy)
        settings = self.settings
        state = self.state
        logger.debug("Rendering {} scene with {} control points.", state.value, len(self._points))

        draw_grid(screen, settings.background, settings.grid_line, settings.grid_spacing)

        if state is SceneState.INTERPOLATABLE:
            curve = sample_curve(self._points, settings.curve_samples)
            draw_polyline(screen, curve, settings.curve)
            draw_polyline(screen, self._points, settings.control_polyline)
        elif state is SceneState.PARTIAL:
            draw_polyline(screen, self._points, settings.control_polyline)

    # alias for callers that drive the frame with print(buffer)
    print = render
