from tileconnect.engine.gamestate.state import (
    GameState,
    GameStatus,
    Highlight,
    HighlightKind,
    StateSnapshot,
)

__all__ = ["GameState", "GameStatus", "Highlight", "HighlightKind", "StateSnapshot"]
