# core/bubble.py
"""
Bubble – one coloured sphere, either flying (the projectile) or parked on
the HexBoard.  Committed bubbles carry their (row, col); the board keeps
those in sync, so nobody ever has to round a pixel position back to a cell.
"""
from __future__ import annotations
import math, random
from enum import Enum
from typing import Sequence, Tuple

import pygame
from constants import PALETTE, BUBBLE_RADIUS, SHOT_SPEED

BubbleColor = Enum("BubbleColor", PALETTE)   # member.value → RGB

def random_color(rng: random.Random | None = None,
                 palette: Sequence[BubbleColor] | None = None) -> BubbleColor:
    return (rng or random).choice(list(palette or BubbleColor))


class Bubble:
    __slots__ = ("x", "y", "radius", "color", "dx", "dy", "row", "col")

    def __init__(self, x: float, y: float, color: BubbleColor,
                 radius: float = BUBBLE_RADIUS):
        self.x, self.y = x, y
        self.radius    = radius
        self.color     = color
        self.dx = self.dy = 0.0
        self.row: int | None = None
        self.col: int | None = None

    def __repr__(self) -> str:
        cell = f" @({self.row},{self.col})" if self.row is not None else ""
        return f"Bubble({self.color.name} {self.x:.1f},{self.y:.1f}{cell})"

    # ─────────── state ───────────
    @property
    def at_rest(self) -> bool:
        return self.dx == 0 and self.dy == 0

    @property
    def bottom(self) -> float:
        return self.y + self.radius

    @property
    def top(self) -> float:
        return self.y - self.radius

    # ─────────── physics ───────────
    def launch_toward(self, px: float, py: float, speed: float = SHOT_SPEED) -> None:
        """Set the velocity so the bubble heads for (px, py)."""
        angle   = math.atan2(py - self.y, px - self.x)
        self.dx = math.cos(angle) * speed
        self.dy = math.sin(angle) * speed

    def advance(self, width: float) -> None:
        """One fixed step; side walls reflect dx, nothing reflects dy."""
        self.x += self.dx
        self.y += self.dy
        if self.x - self.radius < 0 or self.x + self.radius > width:
            self.dx = -self.dx

    def collides_with(self, other: "Bubble") -> bool:
        return math.hypot(other.x - self.x, other.y - self.y) < self.radius + other.radius

    def distance_to(self, point: Tuple[float, float]) -> float:
        return math.hypot(point[0] - self.x, point[1] - self.y)

    # ─────────── rendering ───────────
    def draw(self, target: pygame.Surface, origin: Tuple[int, int] = (0, 0)) -> None:
        ox, oy = origin
        pygame.draw.circle(target, self.color.value,
                           (round(ox + self.x), round(oy + self.y)), round(self.radius))
