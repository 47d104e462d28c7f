"""
Greedy one-ply opponent.

Rules are tried in order and the first that applies picks the move:
win now, block, center, random corner, random empty cell. There is no
lookahead, so forks set up by the other side go unnoticed.
"""

from typing import List, Optional, Sequence

import numpy as np

from .game import EMPTY, Outcome, apply_move, legal_moves, outcome

CENTER = 4
CORNERS = (0, 2, 6, 8)


def winning_moves(board: Sequence[int], mark: int) -> List[int]:
    """Empty cells where mark completes a line, in ascending order."""
    target = Outcome.for_winner(mark)
    return [i for i in legal_moves(board) if outcome(apply_move(board, i, mark)) is target]


def choose_heuristic_move(
    board: Sequence[int],
    own_mark: int,
    opponent_mark: int,
    rng: Optional[np.random.Generator] = None,
) -> int:
    """
    Pick a move for own_mark.

    Args:
        board: Board still in progress
        own_mark: Mark the heuristic plays
        opponent_mark: Mark of the other side
        rng: Generator for the corner/any tie-breaks; a fresh unseeded one if None

    Returns:
        Index of an empty cell
    """
    if outcome(board).is_over:
        raise ValueError("No move to choose on a finished board")

    wins = winning_moves(board, own_mark)
    if wins:
        return wins[0]

    blocks = winning_moves(board, opponent_mark)
    if blocks:
        return blocks[0]

    if board[CENTER] == EMPTY:
        return CENTER

    if rng is None:
        rng = np.random.default_rng()

    corners = [i for i in CORNERS if board[i] == EMPTY]
    if corners:
        return int(rng.choice(corners))

    return int(rng.choice(legal_moves(board)))
