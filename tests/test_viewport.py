import pytest

from src.bezier2d.viewport import (
    clamp_pixel_pos,
    window_pos_to_clamped_pixel,
    window_pos_to_pixel,
)


def test_window_pos_maps_one_to_one_at_native_size():
    assert window_pos_to_pixel((12.7, 40.2), (800, 600)) == (12, 40)


def test_window_pos_scales_with_window_size():
    assert window_pos_to_pixel((200.0, 300.0), (1600, 1200)) == (100, 150)


def test_window_pos_outside_is_none():
    assert window_pos_to_pixel((800.0, 10.0), (800, 600)) is None
    assert window_pos_to_pixel((-1.0, 10.0), (800, 600)) is None


def test_outside_positions_are_clamped():
    assert clamp_pixel_pos((-40, 900)) == (0, 599)
    assert clamp_pixel_pos((1200, -3)) == (799, 0)
    assert window_pos_to_clamped_pixel((850.0, 620.0), (800, 600)) == (799, 599)


def test_window_size_must_be_positive():
    with pytest.raises(ValueError):
        window_pos_to_pixel((0.0, 0.0), (0, 600))
