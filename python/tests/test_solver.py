"""Solvability scanner tests.

Each legal move the scanner reports is replayed through the real game
engine to check that the controller accepts it.
"""

from __future__ import annotations

import random

import pytest

from tileconnect.engine.gameplay.game import GamePlay, SelectOutcome
from tileconnect.engine.gamegenerator import GameGenerator
from tileconnect.engine.gamesolver import PathFinder, Solver
from tileconnect.engine.gamestate import GameStatus
from tileconnect.models.board import Board
from tileconnect.models.config import GameConfig


# -- helpers ------------------------------------------------------------------


def _assert_clears(board: Board, seed: int) -> None:
    """Play scanner moves until the board is empty; reshuffles are allowed."""
    config = GameConfig(rows=board.rows, cols=board.cols, time_limit=10_000)
    game = GamePlay.from_board(board, config, random.Random(seed))

    while not game.is_won:
        move = Solver.find_move(game.board)
        assert move is not None, f"Stuck with {game.board.pairs_remaining} pairs (seed {seed})"

        first = game.select_cell(*move.first)
        assert first.outcome is SelectOutcome.SELECTED
        second = game.select_cell(*move.second)
        assert second.outcome is SelectOutcome.MATCHED, (
            f"Move {move.first} -> {move.second} rejected (seed {seed})"
        )

    assert game.status is GameStatus.WON
    assert game.board.is_cleared


# -- tests --------------------------------------------------------------------


def test_finds_a_move() -> None:
    board = Board.from_rows([[1, 2, 1], [3, 2, 3]])
    move = Solver.find_move(board)
    assert move is not None
    tiles = {board.get(*move.first).type_id, board.get(*move.second).type_id}
    assert len(tiles) == 1
    assert move.path[0] == move.first and move.path[-1] == move.second


def test_deadlocked_board_has_no_move() -> None:
    assert Solver.find_move(Board.from_rows([[1, 2], [2, 1]])) is None
    assert not Solver.has_move(Board.from_rows([[0, 1, 2], [0, 2, 1]]))


def test_empty_board_has_no_move() -> None:
    assert Solver.find_move(Board.from_rows([[0, 0]])) is None


def test_checks_distant_pairs_not_just_neighbours() -> None:
    # The only legal match is the pair of 1s at opposite ends of the top row.
    board = Board.from_rows([[1, 2, 3, 4, 1], [2, 3, 4, 5, 5]])
    moves = list(Solver.iter_moves(board))
    pairs = {frozenset((m.first, m.second)) for m in moves}
    assert frozenset(((1, 1), (1, 5))) in pairs


def test_iter_moves_lists_every_legal_pair() -> None:
    board = Board.from_rows([[1, 1], [2, 2]])
    moves = list(Solver.iter_moves(board))
    assert {(m.first, m.second) for m in moves} == {((1, 1), (1, 2)), ((2, 1), (2, 2))}
    for m in moves:
        assert PathFinder.count_turns(m.path) == 0


def test_types_with_four_tiles_try_every_pair() -> None:
    # Only the outer two of the four 1s can connect (via the border).
    board = Board.from_rows([[1, 2, 2, 1], [3, 1, 1, 3]])
    pairs = {(m.first, m.second) for m in Solver.iter_moves(board) if board.get(*m.first).type_id == 1}
    assert ((1, 1), (1, 4)) in pairs
    assert ((2, 2), (2, 3)) in pairs


@pytest.mark.parametrize("seed", range(12))
def test_scanner_moves_clear_dealt_boards(seed: int) -> None:
    rng = random.Random(seed)
    rows, cols = rng.choice([(2, 4), (4, 4), (4, 6), (6, 6)])
    board = GameGenerator.generate(rows, cols, rng.randint(2, 12), rng)
    _assert_clears(board, seed)
