"""Game layer: ply history over immutable positions."""

from plyline.game.history import GameHistory

__all__ = ["GameHistory"]
