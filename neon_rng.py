
"""7-bag randomizer module"""
import random
from typing import List, Optional

from neon_piece import PIECE_TYPES

class PieceBag:
    """Deals every piece kind once per shuffled bag, then refills.

    Within any two consecutive bags each kind shows up exactly twice.
    """
    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random(seed)
        self.bag: List[str] = []
        self.refill()

    def refill(self):
        self.bag = list(PIECE_TYPES)
        self.rng.shuffle(self.bag)

    def __len__(self):
        return len(self.bag)

    def next_piece(self) -> str:
        if not self.bag:
            self.refill()
        return self.bag.pop()
