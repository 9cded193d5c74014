from tileconnect.models.board import BORDER, Board, Direction, Position, Tile
from tileconnect.models.config import GameConfig

__all__ = ["BORDER", "Board", "Direction", "GameConfig", "Position", "Tile"]
