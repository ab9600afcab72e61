
"""Keyboard mapping: pygame keys to game actions"""
from enum import Enum
from typing import Optional

import pygame

class Action(Enum):
    LEFT = "left"
    RIGHT = "right"
    SOFT_DROP = "soft_drop"
    ROTATE = "rotate"
    HARD_DROP = "hard_drop"
    START = "start"

KEYMAP = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_UP: Action.ROTATE,
    pygame.K_SPACE: Action.HARD_DROP,
    pygame.K_RETURN: Action.START,
    pygame.K_KP_ENTER: Action.START,
}

def action_for_key(key: int) -> Optional[Action]:
    """None for keys the game does not use."""
    return KEYMAP.get(key)
