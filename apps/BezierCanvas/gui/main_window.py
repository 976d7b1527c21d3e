from __future__ import annotations

from PyQt5.QtWidgets import QLabel, QVBoxLayout, QWidget

from apps.BezierCanvas.gui.canvas_controller import CanvasController
from apps.BezierCanvas.gui.canvas_widget import CanvasWidget
from src.bezier2d.scene import Scene
from src.bezier2d.settings import RenderSettings


class BezierCanvasMainWindow:
    def __init__(self, settings: RenderSettings | None = None) -> None:
        self._window = QWidget()
        self._window.setWindowTitle("Bezier Curve")

        self.canvas = CanvasWidget(self._window)
        self.status_label = QLabel("Scene status: empty (0 points)", self._window)

        layout = QVBoxLayout(self._window)
        layout.addWidget(self.canvas)
        layout.addWidget(self.status_label)
        layout.setContentsMargins(0, 0, 0, 0)

        self.controller = CanvasController(
            self._window,
            self.canvas,
            self.status_label,
            scene=Scene(settings),
        )
        self.controller.connect_signals()
        self.canvas.exitRequested.connect(self.close)
        self.controller.redraw()

    def show(self) -> None:
        self._window.show()
        self.canvas.setFocus()

    def close(self) -> None:
        self._window.close()
