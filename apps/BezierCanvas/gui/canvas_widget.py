from __future__ import annotations

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QImage, QKeyEvent, QMouseEvent, QPainter, QPaintEvent
from PyQt5.QtWidgets import QSizePolicy, QWidget

from src.bezier2d.buffer import PixelBuffer
from src.bezier2d.constants import HEIGHT, WIDTH
from src.bezier2d.viewport import window_pos_to_clamped_pixel


class CanvasWidget(QWidget):
    pointClicked = pyqtSignal(int, int)
    clearRequested = pyqtSignal()
    exitRequested = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setFixedSize(WIDTH, HEIGHT)
        self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
        self.setFocusPolicy(Qt.StrongFocus)
        self._image: QImage | None = None

    def show_buffer(self, buffer: PixelBuffer) -> None:
        frame = buffer.to_bytes()
        # QImage does not own the bytes; copy() detaches it from `frame`
        self._image = QImage(
            frame, buffer.width, buffer.height, 4 * buffer.width, QImage.Format_RGBA8888
        ).copy()
        self.update()

    @property
    def image(self) -> QImage | None:
        return self._image

    def paintEvent(self, event: QPaintEvent) -> None:
        if self._image is None:
            return
        painter = QPainter(self)
        painter.drawImage(self.rect(), self._image)
        painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.LeftButton:
            super().mousePressEvent(event)
            return
        x, y = window_pos_to_clamped_pixel(
            (event.pos().x(), event.pos().y()),
            (self.width(), self.height()),
        )
        self.pointClicked.emit(x, y)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() == Qt.Key_C:
            self.clearRequested.emit()
        elif event.key() == Qt.Key_Escape:
            self.exitRequested.emit()
        else:
            super().keyPressEvent(event)
