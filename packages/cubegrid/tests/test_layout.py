"""Tests for the layout builder and corner classification."""

import pytest
from cubegrid import (
    ConfigurationError,
    CornerLocation,
    GridOptions,
    PulseTiming,
    build_tiles,
    classify_corner,
)


def _corners(tiles):
    return {
        (tile.row, tile.column): tile.corner
        for row in tiles
        for tile in row
        if tile.corner is not CornerLocation.NONE
    }


class TestGeometry:
    """Test tile positions and sizes."""

    def test_three_by_three_reference(self):
        """300x300 split 3x3 gives 100x100 tiles at (j*100, i*100)."""
        tiles = build_tiles(GridOptions(total_width=300, total_height=300, rows=3, columns=3))
        assert len(tiles) == 3
        for i, row in enumerate(tiles):
            assert len(row) == 3
            for j, tile in enumerate(row):
                assert (tile.x, tile.y) == (j * 100, i * 100)
                assert (tile.width, tile.height) == (100, 100)
                assert (tile.row, tile.column) == (i, j)

    def test_width_follows_columns_height_follows_rows(self):
        tiles = build_tiles(GridOptions(total_width=400, total_height=90, rows=3, columns=2))
        assert tiles[0][0].width == 200
        assert tiles[0][0].height == 30
        assert (tiles[2][1].x, tiles[2][1].y) == (200, 60)

    def test_residual_pixels_not_redistributed(self):
        tiles = build_tiles(GridOptions(total_width=100, total_height=100, rows=3, columns=3))
        assert all(tile.width == 33 and tile.height == 33 for row in tiles for tile in row)
        assert tiles[2][2].x + tiles[2][2].width == 99

    def test_tiles_do_not_overlap(self):
        tiles = build_tiles(GridOptions(total_width=250, total_height=170, rows=4, columns=5))
        flat = [tile for row in tiles for tile in row]
        for a in flat:
            for b in flat:
                if a is b:
                    continue
                separate = (
                    a.x + a.width <= b.x
                    or b.x + b.width <= a.x
                    or a.y + a.height <= b.y
                    or b.y + b.height <= a.y
                )
                assert separate, (a, b)

    def test_fill_color_and_initial_fraction(self):
        tiles = build_tiles(
            GridOptions(total_width=30, total_height=30, rows=3, columns=3, fill_color=(1, 2, 3))
        )
        for row in tiles:
            for tile in row:
                assert tile.color == (1, 2, 3)
                assert tile.fraction == 1.0

    def test_delays_assigned_from_timing(self):
        tiles = build_tiles(
            GridOptions(total_width=30, total_height=30, rows=3, columns=3),
            PulseTiming(delay_unit=10),
        )
        assert [[t.delay for t in row] for row in tiles] == [
            [20, 30, 40],
            [10, 20, 30],
            [0, 10, 20],
        ]


class TestCorners:
    """Test corner decoration assignment."""

    def test_four_corners_on_regular_grid(self):
        tiles = build_tiles(
            GridOptions(total_width=300, total_height=300, rows=3, columns=3, corner_size=12)
        )
        assert _corners(tiles) == {
            (0, 0): CornerLocation.TOP_LEFT,
            (0, 2): CornerLocation.TOP_RIGHT,
            (2, 0): CornerLocation.BOTTOM_LEFT,
            (2, 2): CornerLocation.BOTTOM_RIGHT,
        }

    def test_only_corners_carry_corner_size(self):
        tiles = build_tiles(
            GridOptions(total_width=300, total_height=300, rows=3, columns=3, corner_size=12)
        )
        for row in tiles:
            for tile in row:
                expected = 0 if tile.corner is CornerLocation.NONE else 12
                assert tile.corner_size == expected

    @pytest.mark.parametrize("rows,columns", [(2, 2), (2, 5), (4, 3), (6, 6)])
    def test_exactly_four_corners(self, rows, columns):
        tiles = build_tiles(
            GridOptions(total_width=120, total_height=120, rows=rows, columns=columns)
        )
        corners = _corners(tiles)
        assert set(corners) == {
            (0, 0),
            (0, columns - 1),
            (rows - 1, 0),
            (rows - 1, columns - 1),
        }
        assert len(set(corners.values())) == 4

    def test_single_tile_is_top_left_only(self):
        assert classify_corner(0, 0, 1, 1) is CornerLocation.TOP_LEFT

    def test_single_row(self):
        """Top-left and top-right only; bottom checks never win."""
        assert [classify_corner(0, j, 1, 3) for j in range(3)] == [
            CornerLocation.TOP_LEFT,
            CornerLocation.NONE,
            CornerLocation.TOP_RIGHT,
        ]

    def test_single_column(self):
        """Bottom-left is checked before top-right and bottom-right."""
        assert [classify_corner(i, 0, 3, 1) for i in range(3)] == [
            CornerLocation.TOP_LEFT,
            CornerLocation.NONE,
            CornerLocation.BOTTOM_LEFT,
        ]

    def test_zero_corner_size_is_valid(self):
        tiles = build_tiles(GridOptions(total_width=30, total_height=30, rows=3, columns=3))
        assert all(tile.corner_size == 0 for row in tiles for tile in row)


class TestValidation:
    """Test configuration errors."""

    @pytest.mark.parametrize(
        "field,value",
        [("rows", 0), ("columns", -1), ("total_width", 0), ("total_height", -5)],
    )
    def test_non_positive_dimension(self, field, value):
        kwargs = dict(total_width=300, total_height=300, rows=3, columns=3)
        kwargs[field] = value
        with pytest.raises(ConfigurationError, match=field):
            build_tiles(GridOptions(**kwargs))

    def test_negative_corner_size(self):
        with pytest.raises(ConfigurationError, match="corner_size"):
            build_tiles(
                GridOptions(total_width=30, total_height=30, rows=3, columns=3, corner_size=-1)
            )

    def test_grid_too_small_for_tiles(self):
        with pytest.raises(ConfigurationError, match="too small"):
            build_tiles(GridOptions(total_width=2, total_height=30, rows=3, columns=3))

    def test_bad_timing(self):
        with pytest.raises(ConfigurationError, match="cycle"):
            build_tiles(
                GridOptions(total_width=30, total_height=30, rows=3, columns=3),
                PulseTiming(cycle=0),
            )

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            GridOptions(total_width=30, total_height=30, rows=0, columns=3).validate()
