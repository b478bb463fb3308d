"""Per-tile start delays producing a diagonal wave from the bottom-left corner."""
from __future__ import annotations

# Delay bands of the reference 3x3 grid, row-major from the top row.
REFERENCE_DELAYS: tuple[tuple[int, ...], ...] = (
    (2, 3, 4),
    (1, 2, 3),
    (0, 1, 2),
)


def band(row: int, column: int, rows: int) -> int:
    """Distance in diagonal bands from the bottom-left tile."""
    return (rows - 1 - row) + column


def delay_for(row: int, column: int, rows: int, columns: int, unit: int) -> int:
    if not (0 <= row < rows and 0 <= column < columns):
        raise ValueError(
            f"({row}, {column}) out of bounds for {rows}x{columns} grid"
        )
    return unit * band(row, column, rows)


def delay_table(rows: int, columns: int, unit: int) -> list[list[int]]:
    return [
        [delay_for(i, j, rows, columns, unit) for j in range(columns)]
        for i in range(rows)
    ]


def max_delay(rows: int, columns: int, unit: int) -> int:
    """Delay of the top-right tile, the last one to start."""
    return unit * (rows - 1 + columns - 1)
