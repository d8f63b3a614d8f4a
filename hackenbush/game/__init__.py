"""Game controller for Hackenbush."""

from .controller import GameController, GameSnapshot, Listener

__all__ = ["GameController", "GameSnapshot", "Listener"]
