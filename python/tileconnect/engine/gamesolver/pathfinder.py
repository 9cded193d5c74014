"""Turn-limited path search between two tiles.

The search runs over states ``(row, col, incoming direction)``.  Moving
one cell in the incoming direction is free; moving in any other
direction costs one turn.  Because edge costs are only ever 0 or 1, a
0-1 breadth-first search (straight steps to the front of the deque,
turns to the back) dequeues states in order of turn count, so the first
time the destination comes off the queue it has been reached with the
fewest possible turns.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable, Iterable
from typing import NamedTuple, TypeVar

from tileconnect.models.board import Board, Direction, Position

MAX_TURNS = 2

S = TypeVar("S", bound=Hashable)


# -- generic search -----------------------------------------------------------


def labeled_bfs(
    starts: Iterable[S],
    expand: Callable[[S], Iterable[tuple[S, int]]],
    is_goal: Callable[[S], bool],
    max_cost: int | None = None,
) -> list[S] | None:
    """Breadth-first search over a graph whose edges are labeled 0 or 1.

    *expand* yields ``(next_state, label)`` pairs.  Returns the chain of
    states from a start to the first goal dequeued, or ``None`` if every
    state within *max_cost* has been explored.
    """
    cost: dict[S, int] = {}
    parent: dict[S, S | None] = {}
    queue: deque[S] = deque()

    for state in starts:
        if state not in cost:
            cost[state] = 0
            parent[state] = None
            queue.append(state)

    while queue:
        state = queue.popleft()
        if is_goal(state):
            chain: list[S] = []
            node: S | None = state
            while node is not None:
                chain.append(node)
                node = parent[node]
            chain.reverse()
            return chain

        base = cost[state]
        for nxt, label in expand(state):
            new_cost = base + label
            if max_cost is not None and new_cost > max_cost:
                continue
            if nxt in cost and cost[nxt] <= new_cost:
                continue
            cost[nxt] = new_cost
            parent[nxt] = state
            if label == 0:
                queue.appendleft(nxt)
            else:
                queue.append(nxt)

    return None


# -- tile paths ---------------------------------------------------------------


class _Step(NamedTuple):
    row: int
    col: int
    heading: Direction | None


class PathFinder:
    """Stateless path search — all methods are static."""

    @staticmethod
    def find_path(
        board: Board, start: Position, end: Position, max_turns: int = MAX_TURNS
    ) -> list[Position] | None:
        """Return every lattice point from *start* to *end*, or ``None``.

        Intermediate cells must be passable (border or cleared).  *end*
        holds a visible tile and is only ever entered as the last step.
        """
        if start == end:
            return None

        def expand(step: _Step) -> Iterable[tuple[_Step, int]]:
            for direction in Direction:
                if step.heading is not None and direction is step.heading.opposite:
                    continue
                dr, dc = direction.delta
                nr, nc = step.row + dr, step.col + dc
                if (nr, nc) != end and not board.is_passable(nr, nc):
                    continue
                turn = 0 if step.heading in (None, direction) else 1
                yield _Step(nr, nc, direction), turn

        def is_goal(step: _Step) -> bool:
            return (step.row, step.col) == end

        chain = labeled_bfs([_Step(*start, None)], expand, is_goal, max_cost=max_turns)
        if chain is None:
            return None
        return [(s.row, s.col) for s in chain]

    @staticmethod
    def count_turns(path: list[Position]) -> int:
        """Number of axis changes along *path*."""
        turns = 0
        prev_horizontal: bool | None = None
        for (r0, _c0), (r1, _c1) in zip(path, path[1:]):
            horizontal = r0 == r1
            if prev_horizontal is not None and horizontal != prev_horizontal:
                turns += 1
            prev_horizontal = horizontal
        return turns
