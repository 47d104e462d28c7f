"""Tests for board rules: outcome, move application and helpers."""

import itertools

import pytest

from tictactoe.game import (
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
    iter_reachable_boards,
    legal_moves,
    outcome,
    swap_marks,
)

_ = EMPTY

ALL_BOARDS = [tuple(cells) for cells in itertools.product((EMPTY, X, O), repeat=BOARD_SIZE)]


def completed_marks(board):
    return {board[a] for a, b, c in WIN_LINES if board[a] != EMPTY and board[a] == board[b] == board[c]}


class TestOutcome:
    def test_empty_board_in_progress(self):
        assert outcome(EMPTY_BOARD) is Outcome.IN_PROGRESS

    @pytest.mark.parametrize("line", WIN_LINES)
    @pytest.mark.parametrize("mark", [X, O])
    def test_every_line_wins(self, line, mark):
        board = [EMPTY] * 9
        for i in line:
            board[i] = mark
        assert outcome(board) is Outcome.for_winner(mark)

    def test_full_board_without_line_is_draw(self):
        assert outcome([X, O, X, X, O, O, O, X, X]) is Outcome.DRAW

    def test_all_full_boards_without_line_are_draws(self):
        for board in ALL_BOARDS:
            if EMPTY not in board and not completed_marks(board):
                assert outcome(board) is Outcome.DRAW

    def test_win_on_full_board_is_not_draw(self):
        assert outcome([X, X, X, O, O, X, X, O, O]) is Outcome.X_WINS

    def test_first_line_in_canonical_order_wins(self):
        # Row 0 (X) comes before row 1 (O)
        board = [X, X, X, O, O, O, _, _, _]
        assert outcome(board) is Outcome.X_WINS
        assert outcome(swap_marks(board)) is Outcome.O_WINS

    def test_symmetric_under_relabeling(self):
        swapped = {
            Outcome.IN_PROGRESS: Outcome.IN_PROGRESS,
            Outcome.DRAW: Outcome.DRAW,
            Outcome.X_WINS: Outcome.O_WINS,
            Outcome.O_WINS: Outcome.X_WINS,
        }
        for board in ALL_BOARDS:
            assert outcome(swap_marks(board)) is swapped[outcome(board)]

    def test_outcome_helpers(self):
        assert Outcome.X_WINS.winner == X
        assert Outcome.O_WINS.winner == O
        assert Outcome.DRAW.winner == EMPTY
        assert not Outcome.IN_PROGRESS.is_over
        assert Outcome.DRAW.is_over
        with pytest.raises(ValueError):
            Outcome.for_winner(EMPTY)

    def test_is_terminal(self):
        assert is_terminal(EMPTY_BOARD) == (False, 0)
        assert is_terminal([O, O, O, X, X, _, X, _, _]) == (True, O)
        assert is_terminal([X, O, X, X, O, O, O, X, X]) == (True, 0)


class TestApplyMove:
    def test_places_mark_and_returns_new_board(self):
        board = EMPTY_BOARD
        new_board = apply_move(board, 4, X)
        assert new_board[4] == X
        assert board == EMPTY_BOARD
        assert isinstance(new_board, tuple)

    def test_input_list_is_not_mutated(self):
        board = [X, _, _, _, O, _, _, _, _]
        apply_move(board, 8, X)
        assert board == [X, _, _, _, O, _, _, _, _]

    def test_occupied_cell_rejected_and_board_unchanged(self):
        board = apply_move(EMPTY_BOARD, 0, X)
        with pytest.raises(RejectedMove):
            apply_move(board, 0, O)
        assert board == (X, _, _, _, _, _, _, _, _)

    @pytest.mark.parametrize("index", [-1, 9, 100, 2.0, "3", None, True])
    def test_bad_index_rejected(self, index):
        with pytest.raises(RejectedMove):
            apply_move(EMPTY_BOARD, index, X)

    def test_move_after_game_over_rejected(self):
        board = (X, X, X, O, O, _, _, _, _)
        with pytest.raises(RejectedMove):
            apply_move(board, 5, O)

    def test_rejected_move_is_value_error(self):
        assert issubclass(RejectedMove, ValueError)

    def test_unknown_mark(self):
        with pytest.raises(ValueError):
            apply_move(EMPTY_BOARD, 0, 2)

    def test_accepted_move_changes_exactly_one_cell(self):
        for board, player in iter_reachable_boards():
            for index in legal_moves(board):
                new_board = apply_move(board, index, player)
                changed = [i for i in range(9) if new_board[i] != board[i]]
                assert changed == [index]
                assert sum(v != EMPTY for v in new_board) == sum(v != EMPTY for v in board) + 1


class TestHelpers:
    def test_as_board(self):
        assert as_board([0, 1, -1, 0, 0, 0, 0, 0, 0]) == (0, 1, -1, 0, 0, 0, 0, 0, 0)
        with pytest.raises(ValueError):
            as_board([0] * 8)
        with pytest.raises(ValueError):
            as_board([0] * 8 + [2])

    def test_legal_moves(self):
        assert legal_moves(EMPTY_BOARD) == list(range(9))
        assert legal_moves([X, O, X, X, O, O, O, X, _]) == [8]

    def test_reachable_boards(self):
        states = list(iter_reachable_boards())
        # 5478 legal positions, 958 of them terminal
        assert len(states) == 5478 - 958
        for board, player in states:
            assert outcome(board) is Outcome.IN_PROGRESS
            assert board.count(X) - board.count(O) == (1 if player == O else 0)

    def test_reachable_boards_side_to_move(self):
        states = dict(iter_reachable_boards())
        assert states[EMPTY_BOARD] == X
        assert states[apply_move(EMPTY_BOARD, 4, X)] == O
        assert states[(X, O, _, _, _, _, _, _, _)] == X

    def test_unreachable_boards_skipped(self):
        states = dict(iter_reachable_boards())
        # O cannot move first, X cannot move twice in a row
        assert (O, _, _, _, _, _, _, _, _) not in states
        assert (X, X, _, _, _, _, _, _, _) not in states
        # Won and drawn boards have no side to move
        assert (X, X, X, O, O, _, _, _, _) not in states
        assert (X, O, X, X, O, O, O, X, X) not in states
