"""
Stateful game session.

Owns the board, the side to move, the mode and the timers that pace the
computer's reply and the post-game countdown. All rules come from
game.py and heuristic.py; this module only decides who may move when.

Every timer is tagged with the session generation it was scheduled
under. Replacing the board bumps the generation, so a timer that
survives a reset cannot touch the new board.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Union

import numpy as np

from .game import EMPTY_BOARD, O, SYMBOLS, X, Board, Outcome, RejectedMove, apply_move, outcome
from .heuristic import choose_heuristic_move
from .scheduler import Scheduler, Timer

logger = logging.getLogger(__name__)

HUMAN_MARK = X
COMPUTER_MARK = O


class Mode(Enum):
    PLAYER = "player"      # human vs human
    COMPUTER = "computer"  # human (X) vs heuristic (O)


@dataclass
class SessionConfig:
    """Session configuration."""

    # Pause before the computer replies (seconds)
    computer_delay: float = 0.3

    # Auto-restart countdown
    auto_restart: bool = True
    countdown_seconds: int = 3
    countdown_interval: float = 1.0

    # Seed for the heuristic's corner/any tie-breaks (None: nondeterministic)
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.computer_delay < 0:
            raise ValueError(f"computer_delay must be >= 0, got {self.computer_delay}")
        if self.countdown_seconds < 1:
            raise ValueError(f"countdown_seconds must be >= 1, got {self.countdown_seconds}")
        if self.countdown_interval <= 0:
            raise ValueError(f"countdown_interval must be > 0, got {self.countdown_interval}")


class GameSession:
    """One game screen: menu, board, turn, auto-restart."""

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.config = config or SessionConfig()
        self.scheduler = scheduler or Scheduler()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        self.mode: Optional[Mode] = None
        self.board: Board = EMPTY_BOARD
        self.player = X
        self.auto_restart = self.config.auto_restart
        self.countdown: Optional[int] = None
        self.generation = 0
        self._timers: List[Timer] = []

    @property
    def outcome(self) -> Outcome:
        return outcome(self.board)

    # --- Session transitions ---

    def start_new_game(self, mode: Union[Mode, str]) -> None:
        self.mode = Mode(mode)
        self._new_board()

    def reset_game(self) -> None:
        self._new_board()

    def back_to_menu(self) -> None:
        self.mode = None
        self._new_board()

    def close(self) -> None:
        """Tear down: no timer scheduled so far will ever act."""
        self._cancel_timers()
        self.generation += 1

    def toggle_auto_restart(self) -> None:
        self.auto_restart = not self.auto_restart
        if self.countdown is not None:
            self._cancel_timers()
            self.countdown = None
        elif self.auto_restart and self.mode is not None and self.outcome.is_over:
            self._start_countdown()

    def _new_board(self) -> None:
        self._cancel_timers()
        self.generation += 1
        self.board = EMPTY_BOARD
        self.player = X
        self.countdown = None

    # --- Moves ---

    def press(self, index: int) -> bool:
        """
        Human move on cell index.

        Returns:
            True if the move was played, False if it was ignored
        """
        if self.mode is None:
            return False
        if self.mode is Mode.COMPUTER and self.player != HUMAN_MARK:
            logger.debug("Ignoring press on %s: computer to move", index)
            return False
        return self._play(index, self.player)

    def _play(self, index: int, mark: int) -> bool:
        try:
            self.board = apply_move(self.board, index, mark)
        except RejectedMove as e:
            logger.debug("Ignoring move: %s", e)
            return False

        if self.outcome.is_over:
            if self.auto_restart:
                self._start_countdown()
            return True

        self.player = -self.player
        if self.mode is Mode.COMPUTER and self.player == COMPUTER_MARK:
            self._schedule(self.config.computer_delay, self._computer_move)
        return True

    def _computer_move(self) -> None:
        if self.player != COMPUTER_MARK or self.outcome.is_over:
            return
        index = choose_heuristic_move(self.board, COMPUTER_MARK, HUMAN_MARK, self.rng)
        self._play(index, COMPUTER_MARK)

    # --- Countdown ---

    def _start_countdown(self) -> None:
        self.countdown = self.config.countdown_seconds
        self._schedule(self.config.countdown_interval, self._tick)

    def _tick(self) -> None:
        if self.countdown is None or self.countdown <= 1:
            self.reset_game()
            return
        self.countdown -= 1
        self._schedule(self.config.countdown_interval, self._tick)

    # --- Timers ---

    def _schedule(self, delay: float, callback: Callable[[], None]) -> None:
        generation = self.generation

        def fire():
            if generation != self.generation:
                logger.debug("Dropping stale %s from generation %d", callback.__name__, generation)
                return
            callback()

        self._timers = [t for t in self._timers if t.active]
        self._timers.append(self.scheduler.call_later(delay, fire))

    def _cancel_timers(self) -> None:
        for timer in self._timers:
            timer.cancel()
        self._timers = []

    # --- Display ---

    def status(self) -> str:
        """Status line shown under the board."""
        if self.mode is None:
            return "Choose Game Mode"

        result = self.outcome
        if not result.is_over:
            if self.mode is Mode.COMPUTER:
                return "Your turn (X)" if self.player == HUMAN_MARK else "Computer thinking..."
            return f"Next: {SYMBOLS[self.player]}"

        text = "It's a Draw!" if result is Outcome.DRAW else f"Winner: {SYMBOLS[result.winner]}"
        if self.countdown is not None:
            text += f" - New game in {self.countdown}..."
        return text
