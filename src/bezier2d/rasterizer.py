from __future__ import annotations

from typing import Sequence

from src.bezier2d.buffer import BoundsPolicy, PixelBuffer
from src.bezier2d.geometry import Color, IntPoint, LineSegment


def draw_cell(buffer: PixelBuffer, point: IntPoint, color: Color) -> None:
    if not buffer.contains(point):
        if buffer.policy is BoundsPolicy.RAISE:
            raise IndexError(
                f"Pixel ({point.x}, {point.y}) is outside the "
                f"{buffer.width}x{buffer.height} buffer."
            )
        return

    index = buffer.offset(point)
    buffer.data[index] = color.red
    buffer.data[index + 1] = color.green
    buffer.data[index + 2] = color.blue
    buffer.data[index + 3] = color.alpha


def _bresenham(start: IntPoint, end: IntPoint) -> list[IntPoint]:
    x, y = start.x, start.y
    dx = abs(end.x - start.x)
    dy = abs(end.y - start.y)
    sx = -1 if end.x < start.x else 1
    sy = -1 if end.y < start.y else 1
    err = dx - dy

    cells = []
    while True:
        cells.append(IntPoint(x, y))
        if x == end.x and y == end.y:
            return cells

        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def line_cells(segment: LineSegment) -> list[IntPoint]:
    """Cells plotted for ``segment``, ordered from start to end.

    Rasterized from the lexicographically smaller endpoint so that A->B and
    B->A cover the same pixels.
    """
    start, end = segment.start, segment.end
    if (end.x, end.y) < (start.x, start.y):
        cells = _bresenham(end, start)
        cells.reverse()
        return cells
    return _bresenham(start, end)


def draw_line(buffer: PixelBuffer, segment: LineSegment, color: Color) -> None:
    for cell in line_cells(segment):
        draw_cell(buffer, cell, color)


def draw_polyline(buffer: PixelBuffer, points: Sequence[IntPoint], color: Color) -> None:
    for previous, current in zip(points, points[1:]):
        draw_line(buffer, LineSegment(previous, current), color)


def draw_grid(
    buffer: PixelBuffer,
    background: Color,
    line_color: Color,
    spacing: int,
) -> None:
    buffer.fill(background)
    for column in range(buffer.width // spacing):
        x = column * spacing
        draw_line(
            buffer,
            LineSegment(IntPoint(x, 0), IntPoint(x, buffer.height - 1)),
            line_color,
        )
    # one extra row covers the partial cell at the bottom edge
    for row in range(buffer.height // spacing + 1):
        y = row * spacing
        if y >= buffer.height:
            break
        draw_line(
            buffer,
            LineSegment(IntPoint(0, y), IntPoint(buffer.width - 1, y)),
            line_color,
        )
