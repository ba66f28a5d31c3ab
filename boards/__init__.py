"""
Expose the public board classes.
"""
from .hex_board import HexBoard

__all__ = ["HexBoard"]
