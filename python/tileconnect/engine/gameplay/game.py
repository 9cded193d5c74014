"""Core gameplay logic — selection, matching, hints and shuffles."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import StrEnum

from tileconnect.engine.gamegenerator import GameGenerator
from tileconnect.engine.gamesolver import PathFinder, Solver
from tileconnect.engine.gamestate import (
    GameState,
    GameStatus,
    Highlight,
    HighlightKind,
    StateSnapshot,
)
from tileconnect.engine.gamestate.state import Listener
from tileconnect.models.board import Board, Position, Tile
from tileconnect.models.config import GameConfig

logger = logging.getLogger(__name__)


class SelectOutcome(StrEnum):
    IGNORED = "ignored"
    SELECTED = "selected"
    DESELECTED = "deselected"
    RESELECTED = "reselected"
    MATCHED = "matched"
    MISMATCHED = "mismatched"


@dataclass(frozen=True)
class SelectResult:
    outcome: SelectOutcome
    path: list[Position] | None = None
    points: int = 0
    reshuffled: bool = False


_IGNORED = SelectResult(SelectOutcome.IGNORED)


class GamePlay:
    """Orchestrates a single game session.

    The session starts ``idle``; call :meth:`start` to deal a board.
    Gameplay calls made while the session is not playing do nothing.
    """

    def __init__(self, config: GameConfig | None = None, rng: random.Random | None = None) -> None:
        self.config = config or GameConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.state = GameState(self.config)
        self.selected: Tile | None = None

    @classmethod
    def from_board(
        cls,
        board: Board,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
    ) -> GamePlay:
        """Create a session already playing on an existing board.

        Restarting it later deals a new board shaped by *config*.
        """
        game = cls(config, rng)
        game.start(board)
        return game

    # -- lifecycle ------------------------------------------------------------

    def start(self, board: Board | None = None) -> None:
        """Reset counters and begin playing on *board*, or on a fresh deal."""
        self.selected = None
        if board is None:
            c = self.config
            board = GameGenerator.generate(c.rows, c.cols, c.types, self.rng)
        board = self._make_solvable(board)
        self.state.reset(board)
        self.state.notify()

    def restart(self) -> None:
        self.start()

    # -- selection ------------------------------------------------------------

    def select_cell(self, row: int, col: int) -> SelectResult:
        """Pick the tile at (row, col).

        Empty, border and out-of-range cells are ignored, as is anything
        while the game is not being played.
        """
        if not self.state.is_active or self.board is None:
            return _IGNORED
        tile = self.board.get(row, col)
        if tile is None:
            return _IGNORED

        result = self._select(tile)
        self.state.notify()
        return result

    def _select(self, tile: Tile) -> SelectResult:
        current = self.selected
        if current is None:
            self._set_selection(tile)
            self.state.clear_highlight()
            return SelectResult(SelectOutcome.SELECTED)

        if current is tile:
            self._clear_selection()
            return SelectResult(SelectOutcome.DESELECTED)

        if current.type_id != tile.type_id:
            self._set_selection(tile)
            return SelectResult(SelectOutcome.RESELECTED)

        path = PathFinder.find_path(self.board, current.pos, tile.pos)
        if path is None:
            self._set_selection(tile)
            return SelectResult(SelectOutcome.MISMATCHED)

        return self._resolve_match(current, tile, path)

    def _resolve_match(self, first: Tile, second: Tile, path: list[Position]) -> SelectResult:
        self._clear_selection()
        self.board.hide(*first.pos)
        self.board.hide(*second.pos)
        points = self.state.award_match()
        self.state.show_path(HighlightKind.MATCH, path, self.config.match_flash_duration)
        logger.debug(
            "Matched type %d %s-%s with %d turn(s) (+%d, %d pairs left)",
            first.type_id, first.pos, second.pos, PathFinder.count_turns(path),
            points, self.board.pairs_remaining,
        )

        reshuffled = False
        if self.board.is_cleared:
            self.state.mark_won()
        elif not Solver.has_move(self.board):
            logger.info("No legal match left; reshuffling %d pairs", self.board.pairs_remaining)
            self._shuffle_board()
            reshuffled = True
        return SelectResult(SelectOutcome.MATCHED, path, points, reshuffled)

    def _set_selection(self, tile: Tile) -> None:
        if self.selected is not None:
            self.selected.selected = False
        tile.selected = True
        self.selected = tile

    def _clear_selection(self) -> None:
        if self.selected is not None:
            self.selected.selected = False
            self.selected = None

    # -- hints & shuffles -----------------------------------------------------

    def use_hint(self) -> list[Position] | None:
        """Highlight one legal match and spend a hint.

        Returns the hinted path, or ``None`` if no hint was given.  The
        board and the current selection are left untouched.
        """
        if not self.state.is_active or self.state.hint_budget <= 0 or self.board is None:
            return None
        move = Solver.find_move(self.board)
        if move is None:
            return None

        self.state.consume_hint()
        self.state.show_path(HighlightKind.HINT, move.path, self.config.hint_duration)
        self.state.notify()
        return move.path

    def shuffle(self, costs_budget: bool = True) -> bool:
        """Reassign types among the visible tiles.

        A paid shuffle spends one unit of the shuffle budget and is refused
        when the budget is empty.  A free shuffle skips the budget.  Both
        are refused once the game is no longer being played.  Returns True
        if the board was shuffled.
        """
        if self.board is None or not self.state.is_active:
            return False
        if costs_budget and not self.state.consume_shuffle():
            return False
        self._shuffle_board()
        self.state.notify()
        return True

    def _shuffle_board(self) -> None:
        self._clear_selection()
        GameGenerator.shuffle_types(self.board, self.rng)
        self.state.board = self._make_solvable(self.board)

    def _make_solvable(self, board: Board) -> Board:
        return GameGenerator.make_solvable(
            board,
            self.rng,
            max_reshuffles=self.config.max_reshuffles,
            max_regenerations=self.config.max_regenerations,
        )

    # -- clock ----------------------------------------------------------------

    def tick(self, dt: float = 1.0) -> bool:
        """Advance the countdown.  Returns True if a snapshot was emitted."""
        changed = self.state.tick(dt)
        if self.state.status is GameStatus.TIMED_OUT:
            self._clear_selection()
        if changed:
            self.state.notify()
        return changed

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board | None:
        return self.state.board

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def highlight(self) -> Highlight | None:
        return self.state.highlight

    @property
    def snapshot(self) -> StateSnapshot:
        return self.state.snapshot()

    @property
    def is_won(self) -> bool:
        return self.state.status is GameStatus.WON

    @property
    def is_over(self) -> bool:
        return self.state.status in (GameStatus.WON, GameStatus.TIMED_OUT)

    def subscribe(self, listener: Listener) -> None:
        self.state.subscribe(listener)
