"""Game settings shared by the engine and the frontends."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Board shape, limits, scoring and reshuffle recovery caps.

    Times are in seconds (one ``tick()`` unit each by default).
    """

    rows: int = 8
    cols: int = 14
    types: int = 25

    time_limit: float = 180.0
    hint_budget: int = 3
    shuffle_budget: int = 3

    base_score: int = 10
    time_bonus_divisor: int = 10

    hint_duration: float = 1.0
    match_flash_duration: float = 0.5

    max_reshuffles: int = 10
    max_regenerations: int = 3

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"Board must be at least 1×1, got {self.rows}×{self.cols}.")
        if (self.rows * self.cols) % 2:
            raise ValueError(
                f"A {self.rows}×{self.cols} board has an odd number of cells; "
                "tiles are dealt in pairs."
            )
        if self.types < 1:
            raise ValueError(f"Need at least one tile type, got {self.types}.")
        if self.time_limit <= 0:
            raise ValueError("Time limit must be positive.")
        if self.hint_budget < 0 or self.shuffle_budget < 0:
            raise ValueError("Hint and shuffle budgets cannot be negative.")
        if self.time_bonus_divisor < 1:
            raise ValueError("Time bonus divisor must be at least 1.")
        if self.max_reshuffles < 1 or self.max_regenerations < 0:
            raise ValueError("Need at least one reshuffle attempt.")

    @property
    def pairs(self) -> int:
        return self.rows * self.cols // 2
