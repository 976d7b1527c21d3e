from __future__ import annotations

from pathlib import Path

from loguru import logger
from matplotlib import image

from src.bezier2d.buffer import PixelBuffer


def save_png(path: str | Path, buffer: PixelBuffer) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    image.imsave(path, buffer.pixels, format="png")
    logger.info("Wrote {}x{} frame to {}.", buffer.width, buffer.height, path)
    return path
