from __future__ import annotations

from src.bezier2d.constants import HEIGHT, WIDTH


def clamp_pixel_pos(pos: tuple[float, float]) -> tuple[int, int]:
    x, y = pos
    return (
        max(0, min(WIDTH - 1, int(x))),
        max(0, min(HEIGHT - 1, int(y))),
    )


def window_pos_to_pixel(
    pos: tuple[float, float],
    window_size: tuple[int, int],
) -> tuple[int, int] | None:
    """Map a window position to buffer pixels; None when it falls outside."""
    window_w, window_h = window_size
    if window_w <= 0 or window_h <= 0:
        raise ValueError("Window size must be positive.")
    x = pos[0] * WIDTH / window_w
    y = pos[1] * HEIGHT / window_h
    if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
        return None
    return int(x), int(y)


def window_pos_to_clamped_pixel(
    pos: tuple[float, float],
    window_size: tuple[int, int],
) -> tuple[int, int]:
    pixel = window_pos_to_pixel(pos, window_size)
    if pixel is not None:
        return pixel
    window_w, window_h = window_size
    return clamp_pixel_pos((pos[0] * WIDTH / window_w, pos[1] * HEIGHT / window_h))
