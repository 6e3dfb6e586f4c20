from taquin.engine.gamestate.state import GameState

__all__ = ["GameState"]
