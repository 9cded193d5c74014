"""Board model tests."""

from __future__ import annotations

import pytest

from tileconnect.models.board import Board, Direction


def test_lattice_includes_border_ring() -> None:
    board = Board.from_rows([[1, 2, 3], [3, 2, 1]])
    assert (board.height, board.width) == (4, 5)
    assert all(cell is None for cell in board.grid[0])
    assert all(cell is None for cell in board.grid[-1])
    assert all(row[0] is None and row[-1] is None for row in board.grid)


def test_get_returns_visible_tiles_only() -> None:
    board = Board.from_rows([[1, 0], [0, 1]])
    tile = board.get(1, 1)
    assert tile is not None and tile.type_id == 1 and tile.pos == (1, 1)
    assert board.get(1, 2) is None  # cleared
    assert board.get(0, 0) is None  # border
    assert board.get(-1, 5) is None  # outside the lattice


def test_passability() -> None:
    board = Board.from_rows([[1, 0], [0, 1]])
    assert board.is_passable(0, 1)
    assert board.is_passable(3, 3)
    assert board.is_passable(1, 2)
    assert not board.is_passable(1, 1)
    assert not board.is_passable(-1, 0)
    assert not board.is_passable(4, 0)


def test_border_and_interior() -> None:
    board = Board.from_rows([[1, 1]])
    assert board.is_border(0, 0)
    assert board.is_border(2, 3)
    assert not board.is_border(1, 1)
    assert board.is_interior(1, 2)
    assert not board.is_interior(1, 3)


def test_hide_clears_tile() -> None:
    board = Board.from_rows([[1, 1], [2, 2]])
    board.grid[1][1].selected = True
    tile = board.hide(1, 1)
    assert not tile.visible and not tile.selected
    assert board.get(1, 1) is None
    assert board.is_passable(1, 1)
    assert board.pairs_remaining == 1  # three visible tiles, integer pairs


def test_hide_empty_cell_raises() -> None:
    board = Board.from_rows([[1, 1]])
    board.hide(1, 1)
    with pytest.raises(ValueError):
        board.hide(1, 1)
    with pytest.raises(ValueError):
        board.hide(0, 0)


def test_visible_tiles_row_major() -> None:
    board = Board.from_rows([[2, 0, 1], [1, 2, 0]])
    assert [t.pos for t in board.visible_tiles()] == [(1, 1), (1, 3), (2, 1), (2, 2)]
    assert board.type_counts() == {1: 2, 2: 2}
    assert board.pairs_remaining == 2
    assert not board.is_cleared


def test_cleared_board() -> None:
    board = Board.from_rows([[0, 0], [0, 0]])
    assert board.is_cleared
    assert board.pairs_remaining == 0


@pytest.mark.parametrize(
    "layout",
    [
        [[1, 2]],  # odd count per type
        [[1, 1, 1]],  # odd total
        [[1, -1, 1, -1]],  # negative type id
        [[1, 1], [2]],  # ragged
        [],
    ],
)
def test_invalid_layouts_raise(layout: list[list[int]]) -> None:
    with pytest.raises(ValueError):
        Board.from_rows(layout)


def test_from_types_checks_length() -> None:
    with pytest.raises(ValueError):
        Board.from_types(2, 2, [1, 1])


def test_direction_geometry() -> None:
    assert Direction.UP.delta == (-1, 0)
    assert Direction.RIGHT.delta == (0, 1)
    assert Direction.UP.opposite is Direction.DOWN
