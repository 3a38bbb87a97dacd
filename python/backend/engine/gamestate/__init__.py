from backend.engine.gamestate.sessions import SessionStore
from backend.engine.gamestate.state import GameState

__all__ = ["GameState", "SessionStore"]
