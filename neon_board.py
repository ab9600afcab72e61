
"""Board helpers: collide, merge, sweep"""
from typing import List, Optional

from neon_config import COLS, ROWS
from neon_piece import Piece

# None = empty, otherwise the color of a settled block
Board = List[List[Optional[str]]]

def empty_board() -> Board:
    return [[None] * COLS for _ in range(ROWS)]

def collide(board: Board, piece: Piece) -> bool:
    """True if any occupied cell is off the sides, below the floor, or on a block.

    Rows above the board (y < 0) are never tested.
    """
    for bx, by in piece.cells():
        if bx < 0 or bx >= COLS or by >= ROWS: return True
        if by >= 0 and board[by][bx] is not None: return True
    return False

def merge(board: Board, piece: Piece):
    """Write the piece's color into the board. Only called on a legal resting spot."""
    for bx, by in piece.cells():
        board[by][bx] = piece.color

def sweep(board: Board) -> int:
    """Remove full rows bottom-up and return how many were cleared.

    Row 0 is never cleared.
    """
    cleared = 0
    y = ROWS - 1
    while y > 0:
        if all(board[y][x] is not None for x in range(COLS)):
            del board[y]
            board.insert(0, [None] * COLS)
            cleared += 1
        else:
            y -= 1
    return cleared
