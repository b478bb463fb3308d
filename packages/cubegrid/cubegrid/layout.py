"""Layout builder - tile geometry, corner decorations and start delays."""
from __future__ import annotations

from cubegrid.config import DEFAULT_TIMING, GridOptions, PulseTiming
from cubegrid.delays import delay_for
from cubegrid.log import get_logger
from cubegrid.types import CornerLocation, Tile

logger = get_logger(__name__)


def classify_corner(row: int, column: int, rows: int, columns: int) -> CornerLocation:
    """Corner decoration for a tile position; the first matching corner wins.

    Checked in the order top-left, bottom-left, top-right, bottom-right, so in a
    single row or column the shared tiles keep the earlier decoration.
    """
    last_row = row + 1 == rows
    last_column = column + 1 == columns
    if row == 0 and column == 0:
        return CornerLocation.TOP_LEFT
    if column == 0 and last_row:
        return CornerLocation.BOTTOM_LEFT
    if row == 0 and last_column:
        return CornerLocation.TOP_RIGHT
    if last_row and last_column:
        return CornerLocation.BOTTOM_RIGHT
    return CornerLocation.NONE


def build_tiles(
    options: GridOptions, timing: PulseTiming = DEFAULT_TIMING
) -> list[list[Tile]]:
    """Build the rows x columns tile array, validating before anything is allocated.

    Residual pixels from the integer division are not redistributed.
    """
    options.validate()
    timing.validate()

    rows, columns = options.rows, options.columns
    tile_w, tile_h = options.tile_width, options.tile_height
    logger.debug(
        "Building %dx%d grid of %dx%d tiles (corner size %d)",
        rows, columns, tile_w, tile_h, options.corner_size,
    )

    tiles: list[list[Tile]] = []
    for i in range(rows):
        row: list[Tile] = []
        for j in range(columns):
            corner = classify_corner(i, j, rows, columns)
            row.append(
                Tile(
                    j * tile_w,
                    i * tile_h,
                    tile_w,
                    tile_h,
                    color=options.fill_color,
                    row=i,
                    column=j,
                    delay=delay_for(i, j, rows, columns, timing.delay_unit),
                    corner=corner,
                    corner_size=0 if corner is CornerLocation.NONE else options.corner_size,
                )
            )
        tiles.append(row)
    return tiles
