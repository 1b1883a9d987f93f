"""Reversi building blocks: value types, the 8x8 board and game state."""

__version__ = "0.1.0"
__all__ = ["board", "state", "types"]