from tileconnect.engine.gamesolver.pathfinder import MAX_TURNS, PathFinder, labeled_bfs
from tileconnect.engine.gamesolver.solver import Move, Solver

__all__ = ["MAX_TURNS", "Move", "PathFinder", "Solver", "labeled_bfs"]
