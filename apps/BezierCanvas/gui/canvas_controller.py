from __future__ import annotations

from loguru import logger
from PyQt5.QtCore import QObject
from PyQt5.QtWidgets import QLabel, QWidget

from apps.BezierCanvas.gui.canvas_widget import CanvasWidget
from src.bezier2d.buffer import PixelBuffer
from src.bezier2d.scene import Scene


class CanvasController(QObject):
    def __init__(
        self,
        parent: QWidget,
        canvas: CanvasWidget,
        status_label: QLabel,
        scene: Scene | None = None,
    ) -> None:
        super().__init__(parent)
        self._canvas = canvas
        self._status_label = status_label
        self._scene = scene or Scene()
        self._buffer: PixelBuffer = self._scene.new_buffer()

    def connect_signals(self) -> None:
        self._canvas.pointClicked.connect(self.on_point_clicked)
        self._canvas.clearRequested.connect(self.on_clear_requested)

    def on_point_clicked(self, x: int, y: int) -> None:
        self._scene.append_point(x, y)
        self.redraw()

    def on_clear_requested(self) -> None:
        self._scene.clear_points()
        logger.info("Scene cleared.")
        self.redraw()

    def redraw(self) -> None:
        try:
            self._scene.render(self._buffer)
        except (ValueError, IndexError, OverflowError) as exc:
            # the canvas keeps showing the last frame that rendered cleanly
            logger.warning("Render failed: {}", exc)
            self._status_label.setText(f"Scene status: {exc}")
            self._buffer = self._scene.new_buffer()
            return

        self._canvas.show_buffer(self._buffer)
        self._status_label.setText(
            f"Scene status: {self._scene.state.value} ({len(self._scene.points)} points)"
        )

    @property
    def scene(self) -> Scene:
        return self._scene

    @property
    def buffer(self) -> PixelBuffer:
        return self._buffer
