"""
Evaluation functions.

Plays the heuristic opponent against a uniformly random one to measure
how often its greedy rules hold up.
"""

from typing import Callable, Dict, Optional, Sequence, Tuple

import numpy as np
from tqdm.auto import trange

from .game import EMPTY_BOARD, O, X, apply_move, is_terminal, legal_moves
from .heuristic import choose_heuristic_move

# (board, player) -> cell index
Policy = Callable[[Sequence[int], int], int]


def random_policy(rng: np.random.Generator) -> Policy:
    """Policy picking any empty cell uniformly."""
    def policy(board, player):
        return int(rng.choice(legal_moves(board)))
    return policy


def heuristic_policy(rng: np.random.Generator) -> Policy:
    """Policy playing the greedy one-ply heuristic for whichever side moves."""
    def policy(board, player):
        return choose_heuristic_move(board, player, -player, rng)
    return policy


def play_game(x_policy: Policy, o_policy: Policy) -> Tuple[int, int]:
    """
    Play one game from the empty board, X first.

    Returns:
        (winner, length) where winner is +1/-1/0 and length the number of moves
    """
    board = EMPTY_BOARD
    player = X
    length = 0

    while True:
        done, winner = is_terminal(board)
        if done:
            return winner, length

        policy = x_policy if player == X else o_policy
        board = apply_move(board, policy(board, player), player)
        player = -player
        length += 1


def eval_heuristic_vs_random(
    games: int = 500,
    rng: Optional[np.random.Generator] = None,
    progress: bool = False,
) -> Dict[str, float]:
    """
    Evaluate the heuristic vs a random opponent, alternating who plays X.

    Returns:
        Dict with 'games', 'heuristic_w', 'heuristic_d', 'heuristic_l'
    """
    if games < 1:
        raise ValueError(f"games must be >= 1, got {games}")
    if rng is None:
        rng = np.random.default_rng()

    heuristic = heuristic_policy(rng)
    opponent = random_policy(rng)
    wins = draws = losses = 0

    for g in trange(games, desc="heuristic vs random", disable=not progress, leave=False):
        heuristic_side = X if (g % 2 == 0) else O
        if heuristic_side == X:
            winner, _ = play_game(heuristic, opponent)
        else:
            winner, _ = play_game(opponent, heuristic)

        if winner == 0:
            draws += 1
        elif winner == heuristic_side:
            wins += 1
        else:
            losses += 1

    total = wins + draws + losses
    return {
        "games": total,
        "heuristic_w": wins / total,
        "heuristic_d": draws / total,
        "heuristic_l": losses / total,
    }
