# tests/test_layout.py
from __future__ import annotations

from neon_config import COLS, CONFIG, ROWS
from neon_layout import compute_dims, preview_offset
from neon_piece import SHAPES


def test_board_area_matches_block_size() -> None:
    d = compute_dims()
    assert d.board_w == COLS * CONFIG["BLOCK_SIZE"]
    assert d.board_h == ROWS * CONFIG["BLOCK_SIZE"]
    assert d.panel_x > d.board_x + d.board_w


def test_preview_centers_each_matrix_size() -> None:
    assert preview_offset(SHAPES["O"]) == (2, 2)
    assert preview_offset(SHAPES["T"]) == (1, 1)
    assert preview_offset(SHAPES["I"]) == (1, 1)
