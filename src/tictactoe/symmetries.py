"""
D4 symmetries of the TicTacToe board (8 transforms).

Transform ids: 0-3 rotate clockwise by 0°, 90°, 180°, 270°;
4-7 reflect left-right, top-bottom, main diagonal, anti-diagonal.
"""

from typing import List, Sequence

import numpy as np

from .game import Board


def _build_symmetry_maps() -> np.ndarray:
    """Stack the transformed 3x3 grids of cell indices into an [8, 9] table."""
    grid = np.arange(9).reshape(3, 3)
    grids = [np.rot90(grid, -k) for k in range(4)] + [
        np.fliplr(grid),
        np.flipud(grid),
        grid.T,
        np.rot90(grid, 2).T,
    ]
    maps = np.stack([g.ravel() for g in grids])
    maps.setflags(write=False)
    return maps


# SYM_MAPS[k, i] is the source cell that lands on cell i under transform k
SYM_MAPS = _build_symmetry_maps()

# INVERSE_MAPS[k, i] is where cell i lands under transform k
INVERSE_MAPS = np.argsort(SYM_MAPS, axis=1)


def apply_symmetry_board(board: Sequence[int], sym_id: int) -> Board:
    """Apply symmetry transform sym_id (0-7) to a board."""
    cells = np.asarray(board, dtype=np.int64)
    return tuple(int(v) for v in cells[SYM_MAPS[sym_id]])


def apply_symmetry_index(index: int, sym_id: int) -> int:
    """Where cell index ends up after applying transform sym_id."""
    return int(INVERSE_MAPS[sym_id, index])


def get_all_symmetries(board: Sequence[int]) -> List[Board]:
    """Return all 8 symmetric versions of a board."""
    return [apply_symmetry_board(board, k) for k in range(len(SYM_MAPS))]
