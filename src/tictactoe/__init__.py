"""
TicTacToe - board rules, a greedy one-ply opponent and a game session.

The engine (game, heuristic) is pure; the session owns the mutable state
and the timers that pace the computer and the auto-restart countdown.
"""

from .game import (
    BOARD_SIZE,
    EMPTY,
    EMPTY_BOARD,
    O,
    WIN_LINES,
    X,
    Outcome,
    RejectedMove,
    apply_move,
    as_board,
    is_terminal,
    legal_moves,
    outcome,
    swap_marks,
)
from .heuristic import choose_heuristic_move, winning_moves
from .symmetries import SYM_MAPS, apply_symmetry_board, apply_symmetry_index, get_all_symmetries
from .scheduler import Scheduler, Timer
from .session import GameSession, Mode, SessionConfig
from .eval import eval_heuristic_vs_random, play_game

__version__ = "0.1.0"
__all__ = [
    "BOARD_SIZE",
    "EMPTY",
    "EMPTY_BOARD",
    "O",
    "WIN_LINES",
    "X",
    "Outcome",
    "RejectedMove",
    "apply_move",
    "as_board",
    "is_terminal",
    "legal_moves",
    "outcome",
    "swap_marks",
    "choose_heuristic_move",
    "winning_moves",
    "SYM_MAPS",
    "apply_symmetry_board",
    "apply_symmetry_index",
    "get_all_symmetries",
    "Scheduler",
    "Timer",
    "GameSession",
    "Mode",
    "SessionConfig",
    "eval_heuristic_vs_random",
    "play_game",
]
