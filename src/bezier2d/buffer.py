from __future__ import annotations

from enum import Enum
from typing import Any

import numpy as np

from src.bezier2d.constants import CHANNELS, HEIGHT, WIDTH
from src.bezier2d.geometry import Color, IntPoint


class BoundsPolicy(Enum):
    CLIP = "clip"
    RAISE = "raise"


class PixelBuffer:
    """RGBA8 frame of WIDTH x HEIGHT pixels, row-major, origin top-left.

    Wraps the caller's bytes without copying, so writes land in the
    passed ``bytearray`` / ``memoryview`` / numpy array. ``pixels`` is a
    ``(HEIGHT, WIDTH, 4)`` view and ``data`` the flat byte view used for
    offset arithmetic.
    """

    width = WIDTH
    height = HEIGHT

    def __init__(self, data: Any = None, policy: BoundsPolicy = BoundsPolicy.CLIP) -> None:
        size = CHANNELS * WIDTH * HEIGHT
        if data is None:
            data = np.zeros(size, dtype=np.uint8)

        if isinstance(data, np.ndarray):
            if data.dtype != np.uint8:
                raise ValueError(f"Pixel buffer must be uint8, got {data.dtype}.")
            if not data.flags.c_contiguous:
                raise ValueError("Pixel buffer array must be C-contiguous.")
            flat = data.reshape(-1)
        else:
            flat = np.frombuffer(data, dtype=np.uint8)

        if flat.size != size:
            raise ValueError(f"Pixel buffer must hold {size} bytes, got {flat.size}.")
        if not flat.flags.writeable:
            raise ValueError("Pixel buffer must be writable.")

        self.policy = BoundsPolicy(policy)
        self.data = flat
        self.pixels = flat.reshape(HEIGHT, WIDTH, CHANNELS)

    def contains(self, point: IntPoint) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def offset(self, point: IntPoint) -> int:
        return CHANNELS * (point.y * self.width + point.x)

    def fill(self, color: Color) -> None:
        self.pixels[:, :] = color.as_tuple()

    def get_pixel(self, x: int, y: int) -> Color:
        if not self.contains(IntPoint(x, y)):
            raise IndexError(f"Pixel ({x}, {y}) is outside the {self.width}x{self.height} buffer.")
        return Color.from_sequence(self.pixels[y, x].tolist())

    def to_bytes(self) -> bytes:
        return self.data.tobytes()


def as_pixel_buffer(buffer: Any, policy: BoundsPolicy = BoundsPolicy.CLIP) -> PixelBuffer:
    """Wrap ``buffer`` so writes follow ``policy``, sharing the same bytes."""
    if isinstance(buffer, PixelBuffer):
        if buffer.policy is BoundsPolicy(policy):
            return buffer
        return PixelBuffer(buffer.data, policy=policy)
    return PixelBuffer(buffer, policy=policy)
