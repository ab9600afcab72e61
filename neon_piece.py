
"""Piece catalog, piece model and the kick-search rotation"""
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from neon_config import COLS

Shape = List[List[bool]]

PIECE_TYPES = "IOTSZJL"

COLORS: Dict[str, str] = {
    "I": "#00ffff",
    "O": "#ffff00",
    "T": "#ff00ff",
    "S": "#00ff00",
    "Z": "#ff0000",
    "J": "#0000ff",
    "L": "#ff8000",
}

def _shape(rows):
    return [[bool(v) for v in r] for r in rows]

SHAPES: Dict[str, Shape] = {
    "I": _shape([[0,0,0,0],[1,1,1,1],[0,0,0,0],[0,0,0,0]]),
    "O": _shape([[1,1],[1,1]]),
    "T": _shape([[0,1,0],[1,1,1],[0,0,0]]),
    "S": _shape([[0,1,1],[1,1,0],[0,0,0]]),
    "Z": _shape([[1,1,0],[0,1,1],[0,0,0]]),
    "J": _shape([[1,0,0],[1,1,1],[0,0,0]]),
    "L": _shape([[0,0,1],[1,1,1],[0,0,0]]),
}

def rotate_cw(m: Shape) -> Shape:
    """Transpose + reverse each row: 90 degrees clockwise for any square matrix."""
    return [list(r) for r in zip(*m[::-1])]

@dataclass
class Piece:
    t: str
    shape: Shape
    color: str
    x: int = 0
    y: int = 0

    @staticmethod
    def create(t: str) -> "Piece":
        return Piece(t, [r[:] for r in SHAPES[t]], COLORS[t])

    @property
    def width(self) -> int:
        return len(self.shape[0])

    def cells(self) -> Iterator[tuple]:
        """Absolute (x, y) of every occupied cell."""
        for y, row in enumerate(self.shape):
            for x, v in enumerate(row):
                if v:
                    yield self.x + x, self.y + y

    def moved(self, dx: int = 0, dy: int = 0) -> "Piece":
        return Piece(self.t, [r[:] for r in self.shape], self.color, self.x + dx, self.y + dy)

    def center(self):
        self.x = COLS // 2 - self.width // 2
        self.y = 0

# rotation

def kick_offsets(width: int) -> Iterator[int]:
    """Yield +1, -2, +3, -4, ... until the next positive step would exceed width.

    Offsets are relative to the previous attempt, so callers accumulate them.
    The step that overshoots is never tried.
    """
    offset = 1
    while True:
        nxt = -(offset + (1 if offset > 0 else -1))
        if nxt > width:
            return
        yield offset
        offset = nxt

def try_rotate(board, piece: Piece) -> Optional[Piece]:
    """Return the rotated (and possibly kicked) piece, or None if no spot fits."""
    from neon_board import collide
    test = Piece(piece.t, rotate_cw(piece.shape), piece.color, piece.x, piece.y)
    if not collide(board, test):
        return test
    for offset in kick_offsets(test.width):
        test.x += offset
        if not collide(board, test):
            return test
    return None
