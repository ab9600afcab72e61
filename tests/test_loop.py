# tests/test_loop.py
from __future__ import annotations

from neon_config import COLS
from neon_game import Game
from neon_input import Action
from neon_loop import FrameScheduler, GameLoop, LoopState, NullPresenter, Presenter


class RecordingPresenter:
    def __init__(self) -> None:
        self.renders = 0
        self.game_overs = 0
        self.starts: list = []

    def render(self, game: Game) -> None:
        self.renders += 1

    def game_over(self, game: Game) -> None:
        self.game_overs += 1

    def start_enabled(self, label: str, enabled: bool) -> None:
        self.starts.append((label, enabled))


def _block_spawn(game: Game) -> None:
    for y in (0, 1):
        for x in range(COLS):
            game.board[y][x] = "#555555"
    game.spawn()


def _running_loop() -> tuple:
    scheduler = FrameScheduler()
    presenter = RecordingPresenter()
    loop = GameLoop(Game(seed=4), scheduler, presenter)
    loop.start_session()
    return loop, scheduler, presenter


def test_presenters_satisfy_the_protocol() -> None:
    assert isinstance(NullPresenter(), Presenter)
    assert isinstance(RecordingPresenter(), Presenter)


def test_scheduler_runs_and_cancels_callbacks() -> None:
    scheduler = FrameScheduler()
    seen: list = []
    scheduler.request(seen.append)
    dropped = scheduler.request(lambda t: seen.append(-t))
    scheduler.cancel(dropped)
    scheduler.cancel(None)

    assert scheduler.run_pending(16.0) == 1
    assert seen == [16.0]
    assert scheduler.run_pending(32.0) == 0


def test_scheduler_skips_callbacks_cancelled_mid_frame() -> None:
    scheduler = FrameScheduler()
    seen: list = []
    handles: dict = {}

    def a(t: float) -> None:
        seen.append("a")
        scheduler.cancel(handles["b"])

    handles["a"] = scheduler.request(a)
    handles["b"] = scheduler.request(lambda t: seen.append("b"))

    assert scheduler.run_pending(1.0) == 1
    assert seen == ["a"]
    assert scheduler.run_pending(2.0) == 0


def test_scheduler_defers_callbacks_requested_during_a_frame() -> None:
    scheduler = FrameScheduler()
    seen: list = []

    def again(t: float) -> None:
        seen.append(t)
        scheduler.request(again)

    scheduler.request(again)
    scheduler.run_pending(1.0)
    assert seen == [1.0]
    assert len(scheduler) == 1


def test_start_session_schedules_the_first_tick() -> None:
    loop, scheduler, presenter = _running_loop()
    assert loop.state is LoopState.RUNNING
    assert loop.pending
    assert len(scheduler) == 1
    assert presenter.starts == [("Good Luck!", False)]


def test_ticks_accumulate_elapsed_time_into_gravity() -> None:
    loop, scheduler, presenter = _running_loop()
    game = loop.game

    scheduler.run_pending(5000.0)  # first frame has no elapsed time
    assert game.drop_counter == 0
    scheduler.run_pending(5500.0)
    assert game.drop_counter == 500
    assert game.current.y == 0
    scheduler.run_pending(6100.0)
    assert game.current.y == 1
    assert game.drop_counter == 0
    assert presenter.renders == 3
    assert len(scheduler) == 1


def test_restart_cancels_the_pending_tick() -> None:
    loop, scheduler, _ = _running_loop()
    loop.start_session()
    assert len(scheduler) == 1


def test_game_over_is_signalled_once_and_stops_ticking() -> None:
    loop, scheduler, presenter = _running_loop()
    scheduler.run_pending(0.0)
    _block_spawn(loop.game)

    scheduler.run_pending(16.0)
    assert loop.state is LoopState.GAME_OVER
    assert presenter.game_overs == 1
    assert presenter.starts[-1] == ("Play Again", True)
    assert not loop.pending
    assert len(scheduler) == 0

    assert scheduler.run_pending(32.0) == 0
    assert presenter.game_overs == 1


def test_input_routing_follows_loop_state() -> None:
    scheduler = FrameScheduler()
    loop = GameLoop(Game(seed=4), scheduler)
    assert not loop.handle(Action.LEFT)  # idle

    assert loop.handle(Action.START)
    assert loop.state is LoopState.RUNNING
    assert not loop.handle(Action.START)
    assert not loop.handle(None)

    _block_spawn(loop.game)
    scheduler.run_pending(0.0)
    assert loop.state is LoopState.GAME_OVER
    assert not loop.handle(Action.ROTATE)

    assert loop.handle(Action.START)
    assert loop.state is LoopState.RUNNING
    assert not loop.game.game_over
