"""
HexBoard – an offset‑row hexagonal play‑field for circle packing.

Used by:
    • BubblePop – bubbles hanging from the ceiling

The board itself does *no* game rules; it only:
    1. Manages a 2‑D array of cells ([row][col], None when empty).
    2. Converts between (row, col) <‑‑> pixel coordinates.
    3. Knows the six hex neighbours of a cell for the current row parity.
    4. Provides a drawing helper.

Row parity
    A row is *offset* (shifted right by one radius) when
    ``(row + phase) % 2 == 1``.  ``phase`` starts at 0 so odd rows are the
    offset ones; every ``shift_down`` flips it, which lets shifted bubbles
    keep their x while staying on canonical positions.
"""
from __future__ import annotations
import math
from typing import Iterator, List, Tuple, TYPE_CHECKING
import pygame

if TYPE_CHECKING:
    from core.bubble import Bubble

# (d_row, d_col) for the six hex neighbours
_EVEN_DELTAS = ((0, -1), (0, 1), (-1, -1), (-1, 0), (1, -1), (1, 0))
_ODD_DELTAS  = ((0, -1), (0, 1), (-1, 0), (-1, 1), (1, 0), (1, 1))

class HexBoard:
    def __init__(self, rows: int, cols: int, radius: float, phase: int = 0):
        self.rows     = rows
        self.cols     = cols
        self.radius   = radius
        self.diameter = radius * 2
        self.row_height = radius * math.sqrt(3)
        self.phase    = phase % 2
        self.grid: List[List[Bubble | None]] = [
            [None for _ in range(cols)] for _ in range(rows)
        ]

    @classmethod
    def for_width(cls, width: float, rows: int, radius: float) -> "HexBoard":
        """As many columns as whole diameters fit into *width*."""
        return cls(rows, int(width // (radius * 2)), radius)

    # ───────────────────────────── geometry ──────────────────────────
    def is_offset(self, row: int) -> bool:
        return (row + self.phase) % 2 == 1

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell_to_pixel(self, row: int, col: int) -> Tuple[float, float]:
        x = col * self.diameter + self.radius
        if self.is_offset(row):
            x += self.radius
        y = row * self.row_height + self.radius
        return x, y

    def pixel_to_cell(self, x: float, y: float) -> Tuple[int, int]:
        """
        Nearest cell to (x, y), clamped into the board.
        The row is picked first so the column rounding uses its parity.
        """
        row = round((y - self.radius) / self.row_height)
        row = min(max(row, 0), self.rows - 1)
        offset = self.radius if self.is_offset(row) else 0
        col = round((x - self.radius - offset) / self.diameter)
        col = min(max(col, 0), self.cols - 1)
        return row, col

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        deltas = _ODD_DELTAS if self.is_offset(row) else _EVEN_DELTAS
        return [(row + dr, col + dc) for dr, dc in deltas
                if self.in_bounds(row + dr, col + dc)]

    # ───────────────────────────── storage ───────────────────────────
    def get(self, row: int, col: int) -> Bubble | None:
        if not self.in_bounds(row, col):
            return None
        return self.grid[row][col]

    def place(self, bubble: Bubble, row: int, col: int) -> Bubble:
        """Commit *bubble* at (row, col) on the cell's canonical position."""
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell out of bounds: ({row}, {col})")
        if self.grid[row][col] is not None:
            raise ValueError(f"Cell already occupied: ({row}, {col})")
        bubble.x, bubble.y = self.cell_to_pixel(row, col)
        bubble.dx = bubble.dy = 0.0
        bubble.row, bubble.col = row, col
        self.grid[row][col] = bubble
        return bubble

    def remove(self, row: int, col: int) -> Bubble | None:
        bubble = self.get(row, col)
        if bubble is not None:
            self.grid[row][col] = None
            bubble.row = bubble.col = None
        return bubble

    def occupied(self) -> Iterator[Tuple[int, int, Bubble]]:
        """Row‑major, column‑ascending walk over the non‑empty cells."""
        for r in range(self.rows):
            for c in range(self.cols):
                b = self.grid[r][c]
                if b is not None:
                    yield r, c, b

    def bubbles(self) -> List[Bubble]:
        return [b for _, _, b in self.occupied()]

    def free_cells(self) -> int:
        return sum(cell is None for row in self.grid for cell in row)

    def shift_down(self) -> List[Bubble]:
        """
        Move every row down by one (bottom row falls off) and empty row 0.
        Returns the bubbles pushed off the bottom.
        """
        dropped = [b for b in self.grid[-1] if b is not None]
        for b in dropped:
            b.row = b.col = None
        for r in range(self.rows - 1, 0, -1):
            self.grid[r] = self.grid[r - 1]
            for b in self.grid[r]:
                if b is not None:
                    b.row = r
                    b.y  += self.row_height
        self.grid[0] = [None for _ in range(self.cols)]
        self.phase ^= 1
        return dropped

    # ─────────────────────────── rendering ───────────────────────────
    def draw(self, target: pygame.Surface, origin: Tuple[int, int] = (0, 0)) -> None:
        for _, _, b in self.occupied():
            b.draw(target, origin)
