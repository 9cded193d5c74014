"""Solvability scanner: finds legal matches anywhere on the board."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import combinations

from tileconnect.engine.gamesolver.pathfinder import PathFinder
from tileconnect.models.board import Board, Position, Tile


@dataclass(frozen=True)
class Move:
    first: Position
    second: Position
    path: list[Position]


class Solver:
    """Stateless scanner — all methods are static."""

    @staticmethod
    def iter_moves(board: Board) -> Iterator[Move]:
        """Yield every legal match on *board*.

        Tiles are grouped by type and every pair within a group is tried,
        not only neighbouring ones.
        """
        groups: dict[int, list[Tile]] = defaultdict(list)
        for tile in board.visible_tiles():
            groups[tile.type_id].append(tile)

        for tiles in groups.values():
            for a, b in combinations(tiles, 2):
                path = PathFinder.find_path(board, a.pos, b.pos)
                if path is not None:
                    yield Move(a.pos, b.pos, path)

    @staticmethod
    def find_move(board: Board) -> Move | None:
        """Return the first legal match found, or ``None`` if the board is stuck."""
        return next(Solver.iter_moves(board), None)

    @staticmethod
    def has_move(board: Board) -> bool:
        return Solver.find_move(board) is not None
