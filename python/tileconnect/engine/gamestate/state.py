"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from tileconnect.models.board import Board, Position
from tileconnect.models.config import GameConfig

logger = logging.getLogger(__name__)


class GameStatus(StrEnum):
    IDLE = "idle"
    PLAYING = "playing"
    WON = "won"
    TIMED_OUT = "timed_out"


class HighlightKind(StrEnum):
    HINT = "hint"
    MATCH = "match"


@dataclass(frozen=True)
class Highlight:
    kind: HighlightKind
    path: list[Position]
    expires_at: float


@dataclass(frozen=True)
class StateSnapshot:
    """What the presentation layer needs to draw the status bar."""

    score: int
    pairs_remaining: int
    remaining_time: int
    hint_budget: int
    shuffle_budget: int
    status: GameStatus


Listener = Callable[[StateSnapshot], None]


class GameState:
    """Holds the board, counters, countdown and status of one session."""

    def __init__(self, config: GameConfig, board: Board | None = None) -> None:
        self.config = config
        self.board = board
        self.status = GameStatus.IDLE
        self.score: int = 0
        self.remaining_time: float = config.time_limit
        self.elapsed: float = 0.0
        self.hint_budget: int = config.hint_budget
        self.shuffle_budget: int = config.shuffle_budget
        self.highlight: Highlight | None = None
        self._listeners: list[Listener] = []

    # -- lifecycle ------------------------------------------------------------

    def reset(self, board: Board) -> None:
        """Start a fresh session on *board*."""
        self.board = board
        self.score = 0
        self.remaining_time = self.config.time_limit
        self.elapsed = 0.0
        self.hint_budget = self.config.hint_budget
        self.shuffle_budget = self.config.shuffle_budget
        self.highlight = None
        self.status = GameStatus.PLAYING
        logger.info(
            "Session started: %d×%d board, %d pairs, %.0fs",
            board.rows, board.cols, board.pairs_remaining, self.remaining_time,
        )

    @property
    def is_active(self) -> bool:
        return self.status is GameStatus.PLAYING

    def mark_won(self) -> None:
        if self.is_active:
            self.status = GameStatus.WON
            # The clock stops here, so a pending highlight would never expire.
            self.highlight = None
            logger.info("Board cleared with score %d", self.score)

    # -- time tracking --------------------------------------------------------

    def tick(self, dt: float = 1.0) -> bool:
        """Advance the clock by *dt*.  Returns True if anything visible changed."""
        changed = False
        if self.is_active:
            self.elapsed += dt
            before = math.ceil(self.remaining_time)
            self.remaining_time = max(0.0, self.remaining_time - dt)
            changed = math.ceil(self.remaining_time) != before
            if self.remaining_time <= 0:
                self.status = GameStatus.TIMED_OUT
                self.highlight = None
                logger.info("Time is up with %d pairs left", self.pairs_remaining)
                changed = True

        if self.highlight is not None and self.elapsed >= self.highlight.expires_at:
            self.highlight = None
            changed = True
        return changed

    def show_path(self, kind: HighlightKind, path: list[Position], duration: float) -> None:
        self.highlight = Highlight(kind, path, self.elapsed + duration)

    def clear_highlight(self) -> None:
        self.highlight = None

    # -- counters -------------------------------------------------------------

    def award_match(self) -> int:
        """Add base points plus the time bonus; return the points awarded."""
        bonus = math.ceil(self.remaining_time) // self.config.time_bonus_divisor
        points = self.config.base_score + bonus
        self.score += points
        return points

    def consume_hint(self) -> bool:
        if not self.is_active or self.hint_budget <= 0:
            return False
        self.hint_budget -= 1
        return True

    def consume_shuffle(self) -> bool:
        if not self.is_active or self.shuffle_budget <= 0:
            return False
        self.shuffle_budget -= 1
        return True

    @property
    def pairs_remaining(self) -> int:
        return self.board.pairs_remaining if self.board is not None else 0

    # -- snapshots ------------------------------------------------------------

    def snapshot(self) -> StateSnapshot:
        return StateSnapshot(
            score=self.score,
            pairs_remaining=self.pairs_remaining,
            remaining_time=math.ceil(self.remaining_time),
            hint_budget=self.hint_budget,
            shuffle_budget=self.shuffle_budget,
            status=self.status,
        )

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
