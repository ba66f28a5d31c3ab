# scenes/bubblepop.py
"""
BubblePop — GameAlchemy bubble shooter
──────────────────────────────────────
Controls
  mouse       : aim (line shows while the bubble is loaded)
  click/SPACE : fire
  R           : restart
  ESC         : quit

The rules live in core.simulation; this scene only drives ticks at a fixed
rate, forwards the pointer and draws what the simulation holds.
"""

from __future__ import annotations
import logging, random
import pygame
from typing import Tuple

from config     import WIDTH, SEED
from constants  import (MENU_BG_COLOR, PLAYFIELD_BG_COLOR, PLAYFIELD_BORDER_COLOR,
                        AIM_LINE_COLOR, BUTTON_QUIT_BG_COLOR, PLAYFIELD_SIZE,
                        PLAYFIELD_MARGIN_TOP, TICK_RATE, MAX_TICKS_PER_FRAME)
from core.bubble     import BubbleColor
from core.simulation import BubbleSimulation
from ui.widgets      import Button, Overlay

logger = logging.getLogger(__name__)

# ───────────────────────── presets ─────────────────────────────────
PRESETS = {
    #   palette size
    "Classic": {"colors": 6},
    "Casual":  {"colors": 4},
}

# ───────────────────────── scene class ─────────────────────────────
class BubblePopScene:
    STEP = 1.0 / TICK_RATE

    def __init__(self, screen: pygame.Surface, colors: int = 6,
                 preset_name: str = "Classic", seed: int | None = None):
        self.scr    = screen
        self.preset = preset_name

        pw, ph    = PLAYFIELD_SIZE
        self.pf   = pygame.Rect((WIDTH - pw)//2, PLAYFIELD_MARGIN_TOP, pw, ph)
        palette   = list(BubbleColor)[:max(1, colors)]
        self.sim  = BubbleSimulation(pw, ph, rng=random.Random(seed), palette=palette)
        self.sim.add_game_over_listener(self._on_game_over)

        # UI
        mid, y = WIDTH//2, self.pf.centery
        self.btn_restart = Button(pygame.Rect(mid-170, y, 150, 40), "Restart")
        self.btn_quit    = Button(pygame.Rect(mid+ 20, y, 150, 40), "Quit",
                                  bg=BUTTON_QUIT_BG_COLOR)
        self.shade  = Overlay(self.pf)
        self.f_big  = pygame.font.Font(None, 48)
        self.f_sml  = pygame.font.Font(None, 24)

        self._reset()

    # ─────────── helpers ───────────
    @property
    def origin(self) -> Tuple[int, int]:
        return self.pf.topleft

    def _to_playfield(self, pos) -> Tuple[float, float]:
        return pos[0] - self.pf.x, pos[1] - self.pf.y

    def _on_game_over(self, sim: BubbleSimulation) -> None:
        self.game_over = True

    def _reset(self):
        logger.debug("Restarting %s", self.preset)
        self.sim.reset()
        self.timer = 0.0
        self.game_over = False

    # ─────────── event handling ───────────
    def handle_event(self, ev):
        if self.game_over:
            if ev.type==pygame.MOUSEBUTTONDOWN and ev.button==1:
                if self.btn_restart.hovered(ev.pos): self._reset(); return
                if self.btn_quit.hovered(ev.pos):    return "quit"
            if ev.type==pygame.KEYDOWN:
                if ev.key==pygame.K_ESCAPE: return "quit"
                if ev.key==pygame.K_r:      self._reset()
            return

        if ev.type==pygame.MOUSEMOTION:
            self.sim.aim(*self._to_playfield(ev.pos))

        elif ev.type==pygame.MOUSEBUTTONDOWN and ev.button==1:
            self.sim.aim(*self._to_playfield(ev.pos))
            self.sim.fire()

        elif ev.type==pygame.KEYDOWN:
            if ev.key==pygame.K_ESCAPE: return "quit"
            if ev.key==pygame.K_SPACE:  self.sim.fire()
            if ev.key==pygame.K_r:      self._reset()

    # ─────────── update loop ───────────
    def update(self, dt: float):
        if self.game_over: return
        self.timer = min(self.timer + dt, self.STEP * MAX_TICKS_PER_FRAME)
        while self.timer >= self.STEP and not self.game_over:
            self.timer -= self.STEP
            self.sim.tick()

    # ─────────── rendering ───────────
    def draw(self):
        self.scr.fill(MENU_BG_COLOR)
        pygame.draw.rect(self.scr, PLAYFIELD_BG_COLOR, self.pf)

        # clip so bubbles on the side walls never smear onto the HUD
        self.scr.set_clip(self.pf)
        self.sim.board.draw(self.scr, self.origin)
        p = self.sim.projectile
        p.draw(self.scr, self.origin)
        if p.at_rest and not self.game_over:
            ox, oy = self.origin
            px, py = self.sim.pointer
            pygame.draw.line(self.scr, AIM_LINE_COLOR,
                             (ox + p.x, oy + p.y), (ox + px, oy + py))
        self.scr.set_clip(None)
        pygame.draw.rect(self.scr, PLAYFIELD_BORDER_COLOR, self.pf, 3)

        # HUD
        self.scr.blit(self.f_sml.render(self.preset, True, (250,250,250)),
                      (self.pf.right+20, self.pf.top))
        self.scr.blit(self.f_sml.render(f"Row drops in: {self.sim.shots_until_drop}",
                                        True, (250,250,250)),
                      (self.pf.right+20, self.pf.top+28))

        if self.game_over:
            self.shade.draw(self.scr)
            txt = self.f_big.render("GAME OVER", True, (255,220,220))
            self.scr.blit(txt, txt.get_rect(center=(WIDTH//2, self.pf.centery-50)))
            self.btn_restart.draw(self.scr)
            self.btn_quit.draw(self.scr)

# ───────────────────────── loader hook ─────────────────────────────
def register(registry):
    def launch(scr: pygame.Surface, **kw):
        name = kw.get("preset_name", "Classic")
        opts = PRESETS.get(name, PRESETS["Classic"])
        return BubblePopScene(
            scr,
            colors      = kw.get("colors", opts["colors"]),
            preset_name = name,
            seed        = kw.get("seed", SEED),
        )
    presets = {n: {**v, "preset_name": n} for n, v in PRESETS.items()}
    registry.register("BubblePop", launcher=launch, presets=presets)
