"""Layout constants and color definitions."""

FPS = 60

# Grid
GRID_SIZE = 240
GRID_ROWS = 3
GRID_COLUMNS = 3
CORNER_SIZE = 18
LOOP_COUNT = 3
GRID_NAME = "loader"

# Layout dimensions
PAD = 40
STATUS_H = 36
SCREEN_W = GRID_SIZE + 2 * PAD
SCREEN_H = GRID_SIZE + 2 * PAD + STATUS_H

# Colors
BG_COLOR = (20, 20, 30)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
TILE_COLOR = (0x33, 0xB5, 0xE5)

INTERPOLATOR_NAMES = ["decelerate", "linear", "accelerate", "accelerate_decelerate"]
