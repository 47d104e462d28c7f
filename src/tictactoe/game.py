"""
TicTacToe game rules.

Board representation: tuple[int] of length 9, row-major
  - 0: empty
  - +1: X
  - -1: O

X always moves first. Boards are values: every function here returns a
new board instead of changing the one it was given.
"""

import itertools
from enum import Enum
from numbers import Integral
from typing import Iterator, List, Sequence, Tuple

Board = Tuple[int, ...]

EMPTY = 0
X = +1
O = -1

BOARD_SIZE = 9
EMPTY_BOARD: Board = (EMPTY,) * BOARD_SIZE

SYMBOLS = {EMPTY: " ", X: "X", O: "O"}

# Winning lines (rows, columns, diagonals)
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
)


class RejectedMove(ValueError):
    """Move refused: occupied cell, index out of range, or game already over."""


class Outcome(Enum):
    """Game status derived from a board."""

    IN_PROGRESS = "in_progress"
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"

    @property
    def winner(self) -> int:
        """Winning mark, or EMPTY when nobody has won."""
        if self is Outcome.X_WINS:
            return X
        if self is Outcome.O_WINS:
            return O
        return EMPTY

    @property
    def is_over(self) -> bool:
        return self is not Outcome.IN_PROGRESS

    @classmethod
    def for_winner(cls, mark: int) -> "Outcome":
        _check_mark(mark)
        return cls.X_WINS if mark == X else cls.O_WINS


def _check_mark(mark: int):
    if mark not in (X, O):
        raise ValueError(f"Unknown mark: {mark!r}")


def as_board(cells: Sequence[int]) -> Board:
    """Normalise a 9-cell sequence of marks into a Board."""
    board = tuple(int(v) for v in cells)
    if len(board) != BOARD_SIZE:
        raise ValueError(f"Board must have {BOARD_SIZE} cells, got {len(board)}")
    for v in board:
        if v not in (EMPTY, X, O):
            raise ValueError(f"Invalid cell value: {v!r}")
    return board


def outcome(board: Sequence[int]) -> Outcome:
    """
    Derive the outcome of a board.

    Lines are scanned in WIN_LINES order and the first completed line
    decides the winner, so a board with lines of both marks reports the
    earlier one.
    """
    for a, b, c in WIN_LINES:
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return Outcome.for_winner(board[a])
    if all(v != EMPTY for v in board):
        return Outcome.DRAW
    return Outcome.IN_PROGRESS


def is_terminal(board: Sequence[int]) -> Tuple[bool, int]:
    """
    Check if board is terminal.

    Returns:
        (is_terminal, winner) where winner is +1/-1/0
    """
    result = outcome(board)
    return result.is_over, result.winner


def legal_moves(board: Sequence[int]) -> List[int]:
    """Return list of legal move indices (empty squares)."""
    return [i for i, v in enumerate(board) if v == EMPTY]


def apply_move(board: Sequence[int], index: int, mark: int) -> Board:
    """
    Place mark at index and return the new board.

    Raises:
        RejectedMove: index outside [0, 9), cell occupied, or game over.
        ValueError: mark is neither X nor O.
    """
    _check_mark(mark)
    if isinstance(index, bool) or not isinstance(index, Integral):
        raise RejectedMove(f"Cell index must be an integer, got {index!r}")
    if not 0 <= index < BOARD_SIZE:
        raise RejectedMove(f"Cell index {index} out of range")
    if board[index] != EMPTY:
        raise RejectedMove(f"Cell {index} is already taken")
    if outcome(board).is_over:
        raise RejectedMove("Game is already over")

    new_board = list(board)
    new_board[index] = mark
    return tuple(new_board)


def swap_marks(board: Sequence[int]) -> Board:
    """Relabel X as O and O as X."""
    return tuple(-v for v in board)


def iter_reachable_boards() -> Iterator[Tuple[Board, int]]:
    """
    Every board reachable in play (X first) that is still in progress.

    Yields:
        (board, player) tuples, player being the side to move.
    """
    for board in itertools.product((EMPTY, X, O), repeat=BOARD_SIZE):
        # X moves first, so X is level with O or one ahead
        lead = board.count(X) - board.count(O)
        if lead not in (0, 1):
            continue
        # Finished games have no side to move
        if outcome(board).is_over:
            continue
        yield board, O if lead else X
