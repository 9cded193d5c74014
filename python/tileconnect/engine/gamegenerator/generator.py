"""Deals boards and reshuffles them back into a solvable state."""

from __future__ import annotations

import logging
import random

from tileconnect.engine.gamesolver import Solver
from tileconnect.models.board import Board

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates boards and permutes tile types — all methods are static."""

    @staticmethod
    def deal(rows: int, cols: int, types: int, rng: random.Random | None = None) -> list[int]:
        """Return a shuffled row-major list of type ids, two per pair slot.

        Pair slot ``i`` gets type ``i % types + 1``, so a small type pool
        repeats cyclically and a type may occur four or six times.
        """
        rng = rng or random.Random()
        if rows < 1 or cols < 1:
            raise ValueError(f"Board must be at least 1×1, got {rows}×{cols}.")
        if (rows * cols) % 2:
            raise ValueError(f"Cannot deal pairs onto {rows}×{cols} = {rows * cols} cells.")
        if types < 1:
            raise ValueError(f"Need at least one tile type, got {types}.")

        tiles: list[int] = []
        for i in range(rows * cols // 2):
            type_id = i % types + 1
            tiles.extend((type_id, type_id))
        rng.shuffle(tiles)
        return tiles

    @staticmethod
    def generate(rows: int, cols: int, types: int, rng: random.Random | None = None) -> Board:
        """Return a freshly dealt board.  It may still have no legal match."""
        return Board.from_types(rows, cols, GameGenerator.deal(rows, cols, types, rng))

    @staticmethod
    def shuffle_types(board: Board, rng: random.Random | None = None) -> None:
        """Permute the type ids of visible tiles in-place; positions stay put."""
        rng = rng or random.Random()
        tiles = board.visible_tiles()
        type_ids = [t.type_id for t in tiles]
        rng.shuffle(type_ids)
        for tile, type_id in zip(tiles, type_ids):
            tile.type_id = type_id
            tile.selected = False

    @staticmethod
    def regenerate(board: Board, rng: random.Random | None = None) -> Board:
        """Scatter the remaining tiles over the whole interior of a new board.

        The multiset of visible types is kept; positions are redrawn.
        """
        rng = rng or random.Random()
        remaining = [t.type_id for t in board.visible_tiles()]
        cells = remaining + [0] * (board.rows * board.cols - len(remaining))
        rng.shuffle(cells)
        return Board.from_types(board.rows, board.cols, cells)

    @staticmethod
    def make_solvable(
        board: Board,
        rng: random.Random | None = None,
        max_reshuffles: int = 10,
        max_regenerations: int = 3,
    ) -> Board:
        """Reshuffle *board* until it has a legal match.

        Tries up to *max_reshuffles* type-only shuffles.  When those run
        out the remaining tiles are regenerated at new positions and the
        shuffles start over, up to *max_regenerations* times.  Returns the
        board to play on, which is *board* itself unless it was regenerated.
        """
        rng = rng or random.Random()
        if board.is_cleared or Solver.has_move(board):
            return board

        for round_ in range(max_regenerations + 1):
            if round_:
                board = GameGenerator.regenerate(board, rng)
                logger.debug("Regenerated board (round %d)", round_)
                if Solver.has_move(board):
                    return board
            for attempt in range(1, max_reshuffles + 1):
                GameGenerator.shuffle_types(board, rng)
                if Solver.has_move(board):
                    logger.debug("Board solvable after %d reshuffle(s)", attempt)
                    return board

        logger.warning(
            "No legal match after %d reshuffles and %d regenerations (%d pairs left)",
            max_reshuffles * (max_regenerations + 1),
            max_regenerations,
            board.pairs_remaining,
        )
        return board
