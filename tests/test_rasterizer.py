import numpy as np
import pytest

from src.bezier2d.buffer import BoundsPolicy, PixelBuffer
from src.bezier2d.constants import HEIGHT, WIDTH
from src.bezier2d.geometry import Color, IntPoint, LineSegment
from src.bezier2d.rasterizer import draw_cell, draw_grid, draw_line, line_cells

BACKGROUND = Color(71, 110, 252, 255)
GRID = Color(100, 132, 250, 255)
WHITE = Color(255, 255, 255, 255)

SEGMENTS = [
    ((0, 0), (0, 0)),
    ((0, 0), (7, 0)),
    ((3, 9), (3, -4)),
    ((0, 0), (5, 5)),
    ((0, 0), (2, 1)),
    ((10, 3), (-7, 12)),
    ((-20, -3), (41, 17)),
    ((100, 50), (97, 400)),
    ((12, 5), (1, 2)),
]


def _segment(start, end):
    return LineSegment(IntPoint(*start), IntPoint(*end))


def test_line_plots_both_endpoints():
    for start, end in SEGMENTS:
        cells = line_cells(_segment(start, end))
        assert cells[0] == IntPoint(*start)
        assert cells[-1] == IntPoint(*end)


def test_line_has_no_gaps():
    for start, end in SEGMENTS:
        cells = line_cells(_segment(start, end))
        for previous, current in zip(cells, cells[1:]):
            assert abs(current.x - previous.x) <= 1
            assert abs(current.y - previous.y) <= 1
            assert previous != current


def test_line_pixel_set_is_direction_independent():
    for start, end in SEGMENTS:
        forward = set(line_cells(_segment(start, end)))
        backward = set(line_cells(_segment(end, start)))
        assert forward == backward


def test_axis_aligned_lines():
    assert line_cells(_segment((0, 0), (3, 0))) == [
        IntPoint(0, 0),
        IntPoint(1, 0),
        IntPoint(2, 0),
        IntPoint(3, 0),
    ]
    assert line_cells(_segment((0, 3), (0, 0))) == [
        IntPoint(0, 3),
        IntPoint(0, 2),
        IntPoint(0, 1),
        IntPoint(0, 0),
    ]


def test_diagonal_steps_both_axes():
    cells = line_cells(_segment((0, 0), (3, 3)))
    assert cells == [IntPoint(i, i) for i in range(4)]


def test_shallow_line_cells():
    assert line_cells(_segment((0, 0), (2, 1))) == [
        IntPoint(0, 0),
        IntPoint(1, 0),
        IntPoint(2, 1),
    ]
    assert line_cells(_segment((2, 1), (0, 0))) == [
        IntPoint(2, 1),
        IntPoint(1, 0),
        IntPoint(0, 0),
    ]


def test_draw_cell_writes_rgba_at_row_major_offset():
    frame = bytearray(4 * WIDTH * HEIGHT)
    buffer = PixelBuffer(frame)
    draw_cell(buffer, IntPoint(3, 2), Color(1, 2, 3, 4))

    offset = 4 * (2 * WIDTH + 3)
    assert frame[offset:offset + 4] == bytes([1, 2, 3, 4])
    assert sum(frame) == 10


def test_draw_cell_clip_policy_skips_out_of_range():
    buffer = PixelBuffer()
    for x, y in [(WIDTH, 0), (-1, 0), (0, HEIGHT), (0, -1)]:
        draw_cell(buffer, IntPoint(x, y), WHITE)
    assert not buffer.data.any()


def test_draw_cell_raise_policy_rejects_out_of_range():
    buffer = PixelBuffer(policy=BoundsPolicy.RAISE)
    with pytest.raises(IndexError):
        draw_cell(buffer, IntPoint(WIDTH, 0), WHITE)
    with pytest.raises(IndexError):
        draw_cell(buffer, IntPoint(0, -1), WHITE)


def test_draw_line_clips_partially_visible_segment():
    buffer = PixelBuffer()
    draw_line(buffer, _segment((-5, 0), (5, 0)), WHITE)

    lit = np.argwhere(buffer.pixels[:, :, 3] == 255)
    assert sorted(map(tuple, lit.tolist())) == [(0, x) for x in range(6)]


def test_draw_grid_lays_out_sixteen_pixel_cells():
    buffer = PixelBuffer()
    draw_grid(buffer, BACKGROUND, GRID, 16)

    assert buffer.get_pixel(8, 8) == BACKGROUND
    assert buffer.get_pixel(16, 5) == GRID
    assert buffer.get_pixel(784, 300) == GRID
    assert buffer.get_pixel(799, 300) == BACKGROUND
    assert buffer.get_pixel(5, 592) == GRID
    assert buffer.get_pixel(5, 599) == BACKGROUND
    assert buffer.get_pixel(799, 0) == GRID


def test_pixel_buffer_rejects_bad_input():
    with pytest.raises(ValueError):
        PixelBuffer(bytearray(10))
    with pytest.raises(ValueError):
        PixelBuffer(bytes(4 * WIDTH * HEIGHT))
    with pytest.raises(ValueError):
        PixelBuffer(np.zeros((HEIGHT, WIDTH, 4), dtype=np.float32))


def test_pixel_buffer_writes_through_to_numpy_frame():
    frame = np.zeros((HEIGHT, WIDTH, 4), dtype=np.uint8)
    buffer = PixelBuffer(frame)
    draw_cell(buffer, IntPoint(10, 20), WHITE)
    assert frame[20, 10].tolist() == [255, 255, 255, 255]
