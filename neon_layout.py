# neon_layout.py
from dataclasses import dataclass
from typing import Tuple

from neon_config import COLS, CONFIG, PREVIEW_GRID, ROWS

@dataclass
class Dims:
    cell: int
    preview_cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    preview_x: int
    preview_y: int
    button: Tuple[int, int, int, int]

def compute_dims() -> Dims:
    cell = int(CONFIG["BLOCK_SIZE"])
    preview_cell = int(CONFIG["NEXT_BLOCK_SIZE"])
    margin = 16
    panel_w = max(180, PREVIEW_GRID * preview_cell + 2 * margin)

    board_w = COLS * cell
    board_h = ROWS * cell

    total_w = margin + board_w + margin + panel_w + margin
    total_h = margin + board_h + margin

    board_x = margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    preview_x = panel_x + (panel_w - PREVIEW_GRID * preview_cell) // 2
    preview_y = panel_y + 40
    button = (panel_x + 12, board_y + board_h - 56, panel_w - 24, 40)

    return Dims(
        cell=cell, preview_cell=preview_cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y,
        preview_x=preview_x, preview_y=preview_y,
        button=button,
    )

def preview_offset(shape) -> Tuple[int, int]:
    """Cell offset that centers a piece matrix inside the preview grid."""
    return (PREVIEW_GRID - len(shape[0])) // 2, (PREVIEW_GRID - len(shape)) // 2
