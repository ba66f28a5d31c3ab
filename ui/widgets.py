"""
Reusable UI widgets (buttons & translucent overlays).
"""
from __future__ import annotations
import pygame
from typing import Tuple
from config    import FONT_NAME
from constants import BUTTON_BG_COLOR, BUTTON_FG_COLOR, OVERLAY_COLOR

# --------------------------------------------------------------------
class Button:
    def __init__(self, rect: pygame.Rect, text: str,
                 bg=BUTTON_BG_COLOR, fg=BUTTON_FG_COLOR):
        self.rect = rect
        self.text = text
        self.bg   = bg
        self.fg   = fg

        font = pygame.font.Font(FONT_NAME, 20)
        self.surface = pygame.Surface(rect.size, pygame.SRCALPHA)
        self.surface.fill(bg)
        lbl = font.render(text, True, fg)
        self.surface.blit(lbl, lbl.get_rect(center=self.surface.get_rect().center))

    def draw(self, screen):  screen.blit(self.surface, self.rect.topleft)
    def hovered(self, pos):  return self.rect.collidepoint(pos)

# --------------------------------------------------------------------
class Overlay:
    """Dims a rectangle of the screen; built once, blitted every frame."""
    def __init__(self, rect: pygame.Rect, colour: Tuple[int,int,int,int] = OVERLAY_COLOR):
        self.rect    = rect
        self.surface = pygame.Surface(rect.size, pygame.SRCALPHA)
        self.surface.fill(colour)

    def draw(self, screen):  screen.blit(self.surface, self.rect.topleft)
