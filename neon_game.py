
"""Game session: active/next piece, movement, drops and gravity"""
from __future__ import annotations

import logging
from typing import Optional

from neon_board import Board, collide, empty_board, merge, sweep
from neon_config import CONFIG
from neon_input import Action
from neon_piece import Piece, try_rotate
from neon_rng import PieceBag
from neon_scoring import SessionStats

logger = logging.getLogger("neon_tetris.game")


class Game:
    """
    One play session. Every piece of mutable state lives here:

      • board: settled cells, changed only by merge and sweep
      • current / next_piece: the falling piece and the preview
      • bag: 7-bag source for next_piece
      • stats: score, level, lines toward next level, drop interval
      • drop_counter: ms accumulated since the last drop

    Once game_over is set, every mutating call is rejected.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = CONFIG["BAG_SEED"] if seed is None else seed
        self.start()

    def start(self):
        """Reset to a fresh session and spawn the first piece."""
        self.board: Board = empty_board()
        self.bag = PieceBag(self.seed)
        self.stats = SessionStats()
        self.game_over = False
        self.drop_counter = 0.0
        self.current: Optional[Piece] = None
        self.next_piece = Piece.create(self.bag.next_piece())
        self.spawn()
        logger.info("session started, first piece %s", self.current.t)

    # shortcuts for the HUD
    @property
    def score(self) -> int: return self.stats.score
    @property
    def level(self) -> int: return self.stats.level
    @property
    def lines(self) -> int: return self.stats.lines

    def spawn(self):
        """Promote the preview piece, draw a new preview, and check for game over."""
        self.current = self.next_piece
        self.current.center()
        self.next_piece = Piece.create(self.bag.next_piece())
        if collide(self.board, self.current):
            self.game_over = True
            logger.info("game over: score=%d level=%d", self.stats.score, self.stats.level)

    def move(self, direction: int) -> bool:
        if self.game_over: return False
        if direction not in (-1, 1):
            raise ValueError(f"direction must be -1 or 1, got {direction}")
        test = self.current.moved(dx=direction)
        if collide(self.board, test): return False
        self.current.x = test.x
        return True

    def rotate(self) -> bool:
        if self.game_over: return False
        rotated = try_rotate(self.board, self.current)
        if rotated is None:
            logger.debug("rotation of %s at x=%d rejected", self.current.t, self.current.x)
            return False
        self.current = rotated
        return True

    def soft_drop(self) -> bool:
        """Move down one row, or lock the piece if it cannot. Resets the drop timer."""
        if self.game_over: return False
        self.drop_counter = 0.0
        test = self.current.moved(dy=1)
        if not collide(self.board, test):
            self.current.y = test.y
            return True
        self.lock()
        return True

    def hard_drop(self) -> bool:
        if self.game_over: return False
        while not collide(self.board, self.current):
            self.current.y += 1
        self.current.y -= 1
        return self.soft_drop()

    def lock(self):
        """Merge the current piece, clear rows, score them, then spawn the next piece."""
        merge(self.board, self.current)
        cleared = sweep(self.board)
        if cleared:
            level = self.stats.level
            points = self.stats.award(cleared)
            logger.debug("cleared %d rows for %d points", cleared, points)
            if self.stats.level != level:
                logger.info("level %d, drop interval %d ms", self.stats.level, self.stats.drop_interval)
        self.spawn()

    def advance(self, elapsed_ms: float) -> bool:
        """Apply gravity for one frame; returns True if a drop happened."""
        if self.game_over: return False
        self.drop_counter += elapsed_ms
        if self.drop_counter > self.stats.drop_interval:
            self.soft_drop()
            return True
        return False

    def handle(self, action: Optional[Action]) -> bool:
        """Dispatch one input action. Unknown actions and input after game over are ignored."""
        if action is None or self.game_over: return False
        if action is Action.LEFT: return self.move(-1)
        if action is Action.RIGHT: return self.move(1)
        if action is Action.SOFT_DROP: return self.soft_drop()
        if action is Action.ROTATE: return self.rotate()
        if action is Action.HARD_DROP: return self.hard_drop()
        return False
