
"""Frame scheduler and the RUNNING / GAME_OVER loop that drives a Game"""
from __future__ import annotations

import itertools
import logging
from enum import Enum
from typing import Callable, Dict, Optional, Protocol, runtime_checkable

from neon_game import Game
from neon_input import Action

logger = logging.getLogger("neon_tetris.loop")

FrameCallback = Callable[[float], None]


class FrameScheduler:
    """
    A cancelable "call me on the next frame" queue, the stand-in for a
    browser's requestAnimationFrame.

    The host calls run_pending(timestamp) once per frame. Callbacks requested
    while a frame is running are held for the following frame; a callback
    cancelled mid-frame does not run, even if it was part of that frame.
    """

    def __init__(self):
        self._ids = itertools.count(1)
        self._pending: Dict[int, FrameCallback] = {}
        self._running: Dict[int, FrameCallback] = {}

    def request(self, callback: FrameCallback) -> int:
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel(self, handle: Optional[int]):
        if handle is not None:
            self._pending.pop(handle, None)
            self._running.pop(handle, None)

    def __len__(self):
        return len(self._pending)

    def run_pending(self, timestamp: float) -> int:
        """Run every callback queued before this call; returns how many ran."""
        self._running, self._pending = self._pending, {}
        ran = 0
        while self._running:
            handle = next(iter(self._running))
            callback = self._running.pop(handle)
            callback(timestamp)
            ran += 1
        return ran


@runtime_checkable
class Presenter(Protocol):
    def render(self, game: Game) -> None:
        raise NotImplementedError

    def game_over(self, game: Game) -> None:
        raise NotImplementedError

    def start_enabled(self, label: str, enabled: bool) -> None:
        raise NotImplementedError


class NullPresenter:
    def render(self, game: Game) -> None:
        _ = game

    def game_over(self, game: Game) -> None:
        _ = game

    def start_enabled(self, label: str, enabled: bool) -> None:
        _ = label
        _ = enabled


class LoopState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


class GameLoop:
    """Advances gravity on every frame tick and reports to the presenter.

    While RUNNING each tick feeds the elapsed time to Game.advance, renders,
    and asks the scheduler for another tick. The first tick that sees the
    game over emits the game-over signal once, re-enables the start control,
    and stops scheduling.
    """

    def __init__(self, game: Game, scheduler: FrameScheduler, presenter: Optional[Presenter] = None):
        self.game = game
        self.scheduler = scheduler
        self.presenter = presenter or NullPresenter()
        self.state = LoopState.IDLE
        self.last_time: Optional[float] = None
        self._handle: Optional[int] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def start_session(self):
        """(Re)start: cancel any scheduled tick, reset the game, begin ticking."""
        self.scheduler.cancel(self._handle)
        self._handle = None
        self.game.start()
        self.last_time = None
        self.state = LoopState.RUNNING
        self.presenter.start_enabled("Good Luck!", False)
        logger.info("loop running")
        self._handle = self.scheduler.request(self.on_frame)

    def handle(self, action: Optional[Action]) -> bool:
        """Route one input action. START only works while the start control is enabled."""
        if action is Action.START:
            if self.state is LoopState.RUNNING:
                return False
            self.start_session()
            return True
        if self.state is not LoopState.RUNNING:
            return False
        return self.game.handle(action)

    def on_frame(self, timestamp: float):
        self._handle = None
        if self.state is not LoopState.RUNNING:
            return
        if self.game.game_over:
            self.state = LoopState.GAME_OVER
            self.presenter.game_over(self.game)
            self.presenter.start_enabled("Play Again", True)
            logger.info("loop stopped: game over")
            return

        elapsed = 0.0 if self.last_time is None else max(0.0, timestamp - self.last_time)
        self.last_time = timestamp
        self.game.advance(elapsed)

        self.presenter.render(self.game)
        self._handle = self.scheduler.request(self.on_frame)
