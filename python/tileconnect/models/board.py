"""Board model for the tile-connect game."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import StrEnum

# Lattice coordinates: (row, col) including the border ring.
Position = tuple[int, int]

BORDER = 1


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass
class Tile:
    type_id: int
    row: int
    col: int
    visible: bool = True
    selected: bool = False

    @property
    def pos(self) -> Position:
        return (self.row, self.col)


@dataclass
class Board:
    """Represents the tile-connect board.

    ``grid`` is the full ``(rows + 2) x (cols + 2)`` lattice.  The outer
    ring is the border: always ``None``, usable as a path corridor.  Hidden
    (matched) tiles stay in the grid with ``visible=False``.
    """

    rows: int
    cols: int
    grid: list[list[Tile | None]] = field(repr=False)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_types(cls, rows: int, cols: int, types: list[int]) -> Board:
        """Create a board from a flat row-major list of interior type ids.

        ``0`` marks an already-cleared interior cell.

        Example::

            Board.from_types(2, 2, [1, 2, 1, 2])
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Board needs at least one row and column, got {rows}×{cols}.")
        if len(types) != rows * cols:
            raise ValueError(
                f"Expected {rows * cols} cells for a {rows}×{cols} board, "
                f"got {len(types)}."
            )

        counts = Counter(t for t in types if t != 0)
        if any(t < 0 for t in counts):
            raise ValueError("Tile type ids must be positive.")
        odd = sorted(t for t, n in counts.items() if n % 2)
        if odd:
            raise ValueError(f"Every tile type must appear an even number of times; odd: {odd}.")

        grid: list[list[Tile | None]] = [
            [None] * (cols + 2 * BORDER) for _ in range(rows + 2 * BORDER)
        ]
        for i, type_id in enumerate(types):
            r, c = divmod(i, cols)
            r += BORDER
            c += BORDER
            grid[r][c] = Tile(type_id, r, c, visible=type_id != 0)
        return cls(rows=rows, cols=cols, grid=grid)

    @classmethod
    def from_rows(cls, layout: list[list[int]]) -> Board:
        """Create a board from interior rows, e.g. ``[[1, 2], [1, 2]]``."""
        if not layout or not layout[0]:
            raise ValueError("Layout must contain at least one row and column.")
        cols = len(layout[0])
        if any(len(row) != cols for row in layout):
            raise ValueError("Layout rows must all have the same length.")
        return cls.from_types(len(layout), cols, [t for row in layout for t in row])

    # -- geometry -------------------------------------------------------------

    @property
    def height(self) -> int:
        """Lattice height, border included."""
        return self.rows + 2 * BORDER

    @property
    def width(self) -> int:
        return self.cols + 2 * BORDER

    def in_lattice(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def is_interior(self, row: int, col: int) -> bool:
        return BORDER <= row <= self.rows and BORDER <= col <= self.cols

    def is_border(self, row: int, col: int) -> bool:
        return self.in_lattice(row, col) and not self.is_interior(row, col)

    # -- queries --------------------------------------------------------------

    def get(self, row: int, col: int) -> Tile | None:
        """Return the visible tile at (row, col), or ``None`` if the cell is empty."""
        if not self.is_interior(row, col):
            return None
        tile = self.grid[row][col]
        if tile is None or not tile.visible:
            return None
        return tile

    def is_passable(self, row: int, col: int) -> bool:
        """True for border cells and cleared interior cells.

        Visible tiles are never passable, the endpoints of a path included.
        """
        return self.in_lattice(row, col) and self.get(row, col) is None

    def visible_tiles(self) -> list[Tile]:
        """All visible tiles in row-major order."""
        return [
            tile
            for row in self.grid[BORDER : self.rows + BORDER]
            for tile in row[BORDER : self.cols + BORDER]
            if tile is not None and tile.visible
        ]

    def type_counts(self) -> Counter[int]:
        return Counter(t.type_id for t in self.visible_tiles())

    @property
    def pairs_remaining(self) -> int:
        return len(self.visible_tiles()) // 2

    @property
    def is_cleared(self) -> bool:
        return not self.visible_tiles()

    # -- mutation -------------------------------------------------------------

    def hide(self, row: int, col: int) -> Tile:
        """Mark the tile at (row, col) as matched and return it."""
        tile = self.get(row, col)
        if tile is None:
            raise ValueError(f"No visible tile at ({row}, {col}).")
        tile.visible = False
        tile.selected = False
        return tile
