"""Tests for Tile geometry and drawing."""

import pytest
from cubegrid import CornerLocation, Tile


class RecordingRenderer:
    def __init__(self) -> None:
        self.calls = []

    def fill_tile(self, rect, color, corner, corner_size) -> None:
        self.calls.append((rect, color, corner, corner_size))


def test_tile_defaults():
    tile = Tile(10, 20, 30, 40)
    assert (tile.x, tile.y, tile.width, tile.height) == (10, 20, 30, 40)
    assert tile.corner is CornerLocation.NONE
    assert tile.corner_size == 0
    assert tile.fraction == 1.0


def test_width_and_height_are_read_only():
    tile = Tile(0, 0, 30, 40)
    with pytest.raises(AttributeError):
        tile.width = 5
    with pytest.raises(AttributeError):
        tile.height = 5


def test_scaled_rect_full_size():
    tile = Tile(100, 200, 100, 50)
    assert tile.scaled_rect() == (100.0, 200.0, 100.0, 50.0)


def test_scaled_rect_shrinks_about_center():
    tile = Tile(100, 200, 100, 50)
    tile.fraction = 0.5
    x, y, w, h = tile.scaled_rect()
    assert (w, h) == (50.0, 25.0)
    assert x + w / 2 == 150.0
    assert y + h / 2 == 225.0


def test_scaled_rect_collapsed():
    tile = Tile(0, 0, 100, 100)
    tile.fraction = 0.0
    assert tile.scaled_rect() == (50.0, 50.0, 0.0, 0.0)


def test_draw_passes_decoration():
    tile = Tile(0, 0, 10, 10, color=(9, 9, 9), corner=CornerLocation.TOP_RIGHT, corner_size=4)
    tile.fraction = 0.8
    renderer = RecordingRenderer()
    tile.draw(renderer)
    assert len(renderer.calls) == 1
    rect, color, corner, corner_size = renderer.calls[0]
    assert rect == pytest.approx((1.0, 1.0, 8.0, 8.0))
    assert color == (9, 9, 9)
    assert corner is CornerLocation.TOP_RIGHT
    assert corner_size == 4


def test_repr_names_position():
    tile = Tile(0, 0, 10, 10, row=1, column=2)
    assert "row=1" in repr(tile)
    assert "column=2" in repr(tile)
