# core/simulation.py
"""
BubbleSimulation – the whole BubblePop rule set, no pygame required.

One ``tick()`` is one atomic step:

    advance projectile → collision scan → snap & commit → match removal
    → floating prune (only after a removal) → shot counter / row drop
    → fresh projectile → lose check

The scene feeds it ``aim()`` / ``fire()`` and reads ``board``,
``projectile`` and ``pointer`` to draw.  ``reset()`` rebuilds everything.
"""
from __future__ import annotations
import logging, random
from dataclasses import dataclass, field
from typing import Callable, List, Sequence, Tuple

from boards.hex_board import HexBoard
from core.bubble import Bubble, BubbleColor, random_color
from core.clusters import find_floating, find_matches, remove_cells
from constants import (BUBBLE_RADIUS, ROWS, INITIAL_ROWS, SHOT_SPEED,
                       MIN_MATCH, MAX_SHOTS_WITHOUT_BURST, LAUNCH_OFFSET)

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

@dataclass
class TickResult:
    placed:    Cell | None = None
    matched:   List[Cell] = field(default_factory=list)
    dropped:   List[Cell] = field(default_factory=list)
    injected:  bool = False
    discarded: bool = False
    game_over: bool = False


class BubbleSimulation:
    def __init__(
        self,
        width: float,
        height: float,
        rows: int = ROWS,
        radius: float = BUBBLE_RADIUS,
        initial_rows: int = INITIAL_ROWS,
        rng: random.Random | None = None,
        palette: Sequence[BubbleColor] | None = None,
        shot_speed: float = SHOT_SPEED,
    ):
        self.width, self.height = width, height
        self.rows         = rows
        self.radius       = radius
        self.initial_rows = initial_rows
        self.rng          = rng or random.Random()
        self.palette      = tuple(palette or BubbleColor)
        self.shot_speed   = shot_speed
        self.launch_pos   = (width / 2, height - LAUNCH_OFFSET)

        self._listeners: List[Callable[["BubbleSimulation"], None]] = []
        self._in_tick = False
        self.reset()

    # ─────────── lifecycle ───────────
    def reset(self) -> None:
        """Fresh board, seeded rows, new projectile, counters cleared."""
        self.board = HexBoard.for_width(self.width, self.rows, self.radius)
        self.shots_without_match = 0
        self.game_over = False
        self.pointer: Tuple[float, float] = (self.launch_pos[0], self.launch_pos[1])
        for r in range(min(self.initial_rows, self.rows)):
            self._fill_row(r)
        self._spawn_projectile()
        logger.info("New game: %dx%d board, %d seeded rows",
                    self.board.rows, self.board.cols, self.initial_rows)

    def add_game_over_listener(self, callback: Callable[["BubbleSimulation"], None]) -> None:
        self._listeners.append(callback)

    @property
    def shots_until_drop(self) -> int:
        return MAX_SHOTS_WITHOUT_BURST - self.shots_without_match

    # ─────────── input ───────────
    def aim(self, x: float, y: float) -> None:
        self.pointer = (x, y)

    def fire(self) -> bool:
        """Launch toward the pointer; only upward shots from a resting bubble."""
        if self.game_over or not self.projectile.at_rest:
            return False
        if self.pointer[1] >= self.projectile.y:
            return False
        self.projectile.launch_toward(*self.pointer, speed=self.shot_speed)
        logger.debug("Fired %s toward %s", self.projectile.color.name, self.pointer)
        return True

    # ─────────── tick ───────────
    def tick(self) -> TickResult:
        result = TickResult(game_over=self.game_over)
        if self.game_over:
            return result
        if self._in_tick:
            raise RuntimeError("tick() re-entered while a tick is in flight")
        self._in_tick = True
        try:
            p = self.projectile
            if not p.at_rest:
                p.advance(self.width)
                if self.find_collision() is not None:
                    self._snap(result)
                elif p.top <= 0:
                    logger.debug("Shot reached the ceiling, discarded")
                    result.discarded = True
                    self._spawn_projectile()
            result.game_over = self.check_lose()
        finally:
            self._in_tick = False
        return result

    def find_collision(self) -> Cell | None:
        """First grid bubble within one diameter, row‑major scan."""
        p = self.projectile
        for r, c, b in self.board.occupied():
            if p.collides_with(b):
                return r, c
        return None

    def _resolve_snap(self) -> Cell | None:
        """
        Nearest cell to the projectile.  If rounding lands on an occupied
        cell, walk outward ring by ring and take the free cell closest to
        the projectile; None when the board is full.
        """
        p = self.projectile
        target = self.board.pixel_to_cell(p.x, p.y)
        if self.board.get(*target) is None:
            return target

        seen = {target}
        ring = [target]
        while ring:
            nxt: List[Cell] = []
            for cell in ring:
                for n in self.board.neighbors(*cell):
                    if n not in seen:
                        seen.add(n)
                        nxt.append(n)
            free = [n for n in nxt if self.board.get(*n) is None]
            if free:
                cell = min(free, key=lambda n: p.distance_to(self.board.cell_to_pixel(*n)))
                logger.warning("Snap target %s occupied, using %s", target, cell)
                return cell
            ring = nxt
        return None

    def _snap(self, result: TickResult) -> None:
        cell = self._resolve_snap()
        if cell is None:
            logger.warning("No free cell left for the shot, discarded")
            result.discarded = True
            self._spawn_projectile()
            return

        placed = self.board.place(self.projectile, *cell)
        result.placed = cell
        logger.debug("Snapped %s", placed)

        matches = find_matches(self.board, *cell, placed.color)
        if len(matches) >= MIN_MATCH:
            remove_cells(self.board, matches)
            result.matched = matches
            result.dropped = self.prune_floating()
            self.shots_without_match = 0
            logger.debug("Burst %d %s, dropped %d", len(matches),
                         placed.color.name, len(result.dropped))
        else:
            self.shots_without_match += 1
            if self.shots_without_match >= MAX_SHOTS_WITHOUT_BURST:
                self.inject_row()
                result.injected = True

        self._spawn_projectile()

    # ─────────── clusters / rows ───────────
    def prune_floating(self) -> List[Cell]:
        """Clear every bubble with no path to the ceiling row."""
        floating = find_floating(self.board)
        remove_cells(self.board, floating)
        return floating

    def inject_row(self) -> None:
        pushed_off = self.board.shift_down()
        self._fill_row(0)
        self.shots_without_match = 0
        logger.info("Row dropped after %d shots without a burst%s",
                    MAX_SHOTS_WITHOUT_BURST,
                    f", {len(pushed_off)} pushed off the grid" if pushed_off else "")

    def check_lose(self) -> bool:
        if self.game_over:
            return True
        if any(b.bottom >= self.height for b in self.board.bubbles()):
            self.game_over = True
            logger.info("Game over: bubbles reached the bottom")
            for cb in list(self._listeners):
                cb(self)
        return self.game_over

    # ─────────── helpers ───────────
    def _fill_row(self, row: int) -> None:
        for c in range(self.board.cols):
            self.board.place(Bubble(0.0, 0.0, self._color(), self.radius), row, c)

    def _spawn_projectile(self) -> None:
        self.projectile = Bubble(*self.launch_pos, self._color(), self.radius)

    def _color(self) -> BubbleColor:
        return random_color(self.rng, self.palette)
