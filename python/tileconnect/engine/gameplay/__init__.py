from tileconnect.engine.gameplay.game import GamePlay, SelectOutcome, SelectResult

__all__ = ["GamePlay", "SelectOutcome", "SelectResult"]
