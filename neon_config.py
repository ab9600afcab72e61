
"""Gameplay constants and runtime tunables"""

COLS, ROWS = 10, 20

LINES_PER_LEVEL = 10
SCORE_POINTS = {1: 40, 2: 100, 3: 300, 4: 1200}   # multiplied by level+1

BASE_DROP_MS = 1000       # drop interval at level 0
DROP_STEP_MS = 50         # faster per level
MIN_DROP_MS = 100         # speed floor

PREVIEW_GRID = 6          # next piece is centered in a 6x6 box

CONFIG = {
    "BLOCK_SIZE": 30,
    "NEXT_BLOCK_SIZE": 20,
    "TARGET_FPS": 60,
    "BAG_SEED": None,     # int for a reproducible piece sequence
    "LOG_LEVEL": "info",
}
