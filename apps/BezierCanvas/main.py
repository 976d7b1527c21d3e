import sys

from PyQt5.QtWidgets import QApplication

from apps.BezierCanvas.gui.main_window import BezierCanvasMainWindow
from src.bezier2d.settings import RenderSettings


def main(settings: RenderSettings | None = None) -> int:
    app = QApplication.instance() or QApplication(sys.argv)
    window = BezierCanvasMainWindow(settings)
    window.show()
    return app.exec_()


if __name__ == "__main__":
    raise SystemExit(main())
