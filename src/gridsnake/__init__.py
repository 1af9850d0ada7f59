from .engine import Engine
from .state import Difficulty, GameStatus, Snapshot

__all__ = ["Engine", "Difficulty", "GameStatus", "Snapshot"]
