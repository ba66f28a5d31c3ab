"""Tests for the bubble shooter tick: snap, burst, prune, row drops and losing."""

import random

import pytest

from core.bubble import Bubble, BubbleColor
from core.simulation import BubbleSimulation

RED, BLUE, GREEN, YELLOW = BubbleColor.RED, BubbleColor.BLUE, BubbleColor.GREEN, BubbleColor.YELLOW
WIDTH, HEIGHT = 500, 600


def _sim(**kw) -> BubbleSimulation:
    kw.setdefault("initial_rows", 0)
    return BubbleSimulation(WIDTH, HEIGHT, rng=random.Random(1234), **kw)


def _put(sim: BubbleSimulation, row: int, col: int, color: BubbleColor) -> Bubble:
    return sim.board.place(Bubble(0.0, 0.0, color, sim.radius), row, col)


def _ceiling(sim: BubbleSimulation, *head: BubbleColor) -> None:
    """Fill row 0: *head* first, then alternating GREEN/BLUE."""
    for col in range(sim.board.cols):
        if col < len(head):
            color = head[col]
        else:
            color = GREEN if (col - len(head)) % 2 == 0 else BLUE
        _put(sim, 0, col, color)


def _shoot_into(sim: BubbleSimulation, row: int, col: int, color: BubbleColor):
    """Fly a bubble upward so that it lands a little above (row, col)'s centre."""
    x, y = sim.board.cell_to_pixel(row, col)
    shot = Bubble(x, y + 4, color, sim.radius)
    shot.dy = -10.0
    sim.projectile = shot
    return sim.tick()


def test_new_game_seeds_rows_and_projectile() -> None:
    sim = BubbleSimulation(WIDTH, HEIGHT, rng=random.Random(3))
    assert sim.board.cols == 12
    assert len(sim.board.bubbles()) == 5 * 12
    assert sim.projectile.at_rest
    assert (sim.projectile.x, sim.projectile.y) == (250, 570)
    assert sim.shots_without_match == 0
    assert not sim.game_over


def test_seeded_games_are_reproducible() -> None:
    a = BubbleSimulation(WIDTH, HEIGHT, rng=random.Random(99))
    b = BubbleSimulation(WIDTH, HEIGHT, rng=random.Random(99))
    assert [x.color for x in a.board.bubbles()] == [x.color for x in b.board.bubbles()]


def test_fire_needs_a_resting_projectile_and_an_upward_aim() -> None:
    sim = _sim()
    sim.aim(250, 600)
    assert not sim.fire()
    sim.aim(250, 100)
    assert sim.fire()
    assert sim.projectile.dx == pytest.approx(0, abs=1e-9)
    assert sim.projectile.dy == pytest.approx(-20)
    assert not sim.fire()


def test_resting_projectile_does_not_move() -> None:
    sim = _sim()
    result = sim.tick()
    assert (sim.projectile.x, sim.projectile.y) == (250, 570)
    assert result.placed is None and not result.discarded


def test_shot_reaching_the_ceiling_is_discarded() -> None:
    sim = _sim()
    sim.aim(250, 0)
    sim.fire()
    first = sim.projectile
    for _ in range(100):
        result = sim.tick()
        if result.discarded:
            break
    assert result.discarded
    assert sim.projectile is not first
    assert sim.projectile.at_rest
    assert (sim.projectile.x, sim.projectile.y) == (250, 570)
    assert sim.board.bubbles() == []
    assert sim.shots_without_match == 0


def test_collision_scan_takes_first_cell_row_major() -> None:
    sim = _sim()
    _put(sim, 0, 0, RED)
    _put(sim, 0, 1, BLUE)
    sim.projectile = Bubble(40, 45, GREEN, sim.radius)
    assert sim.find_collision() == (0, 0)


def test_fired_shot_snaps_to_grid() -> None:
    sim = _sim()
    _ceiling(sim)
    sim.aim(250, 0)
    sim.fire()
    shot = sim.projectile
    for _ in range(100):
        result = sim.tick()
        if result.placed:
            break
    row, col = result.placed
    assert row == 1
    assert sim.board.get(row, col) is shot
    assert (shot.x, shot.y) == sim.board.cell_to_pixel(row, col)
    assert shot.at_rest
    assert sim.projectile is not shot


def test_third_matching_bubble_bursts_exactly_three() -> None:
    sim = _sim()
    _ceiling(sim, RED, RED)
    result = _shoot_into(sim, 1, 0, RED)
    assert result.placed == (1, 0)
    assert set(result.matched) == {(0, 0), (0, 1), (1, 0)}
    assert result.dropped == []
    assert len(sim.board.bubbles()) == 10
    assert sim.board.get(0, 2) is not None
    assert sim.shots_without_match == 0


def test_two_matching_bubbles_burst_nothing() -> None:
    sim = _sim()
    _ceiling(sim, RED)
    result = _shoot_into(sim, 1, 0, RED)
    assert result.placed == (1, 0)
    assert result.matched == []
    assert len(sim.board.bubbles()) == 13
    assert sim.shots_without_match == 1


def test_burst_drops_floating_bubbles_only() -> None:
    sim = _sim()
    _ceiling(sim, RED, RED)
    _put(sim, 1, 6, BLUE)       # hangs from (0,6)/(0,7)
    _put(sim, 5, 6, YELLOW)     # no neighbours at all
    result = _shoot_into(sim, 1, 0, RED)
    assert set(result.matched) == {(0, 0), (0, 1), (1, 0)}
    assert result.dropped == [(5, 6)]
    assert sim.board.get(5, 6) is None
    assert sim.board.get(1, 6) is not None


def test_burst_drops_cluster_hanging_from_cleared_bubbles() -> None:
    sim = _sim()
    _put(sim, 0, 0, RED)
    _put(sim, 0, 1, RED)
    _put(sim, 1, 1, BLUE)       # only held by (0,1) and (0,2)
    _put(sim, 2, 1, GREEN)
    _put(sim, 0, 4, YELLOW)
    result = _shoot_into(sim, 1, 0, RED)
    assert set(result.matched) == {(0, 0), (0, 1), (1, 0)}
    assert set(result.dropped) == {(1, 1), (2, 1)}
    assert [(r, c) for r, c, _ in sim.board.occupied()] == [(0, 4)]


def test_snap_onto_occupied_cell_falls_back_to_nearest_free() -> None:
    sim = _sim()
    _put(sim, 0, 1, GREEN)
    _put(sim, 0, 2, BLUE)
    shot = Bubble(63, 22, RED, sim.radius)
    shot.dy = -1.0
    sim.projectile = shot
    result = sim.tick()
    assert result.placed == (1, 1)
    assert sim.board.get(1, 1) is shot
    assert sim.board.get(0, 1).color is GREEN


def test_full_board_rejects_the_shot() -> None:
    sim = BubbleSimulation(80, HEIGHT, rows=2, initial_rows=2, rng=random.Random(5))
    assert sim.board.free_cells() == 0
    shot = Bubble(40, 30, RED, sim.radius)
    shot.dy = -1.0
    sim.projectile = shot
    result = sim.tick()
    assert result.discarded
    assert result.placed is None
    assert sim.board.free_cells() == 0
    assert sim.shots_without_match == 0
    assert sim.projectile is not shot


def test_five_misses_drop_exactly_one_row() -> None:
    sim = _sim()
    _ceiling(sim)
    results = [_shoot_into(sim, 1, col, RED) for col in (0, 2, 4, 6, 8)]
    assert [r.injected for r in results] == [False, False, False, False, True]
    assert sim.shots_without_match == 0
    assert sim.board.phase == 1
    assert all(sim.board.get(0, c) is not None for c in range(sim.board.cols))
    assert all(sim.board.get(2, c) is not None for c in (0, 2, 4, 6, 8))
    for row, col, bubble in sim.board.occupied():
        assert (bubble.x, bubble.y) == pytest.approx(sim.board.cell_to_pixel(row, col))


def test_counter_counts_down_to_drop() -> None:
    sim = _sim()
    _ceiling(sim)
    assert sim.shots_until_drop == 5
    _shoot_into(sim, 1, 0, RED)
    _shoot_into(sim, 1, 2, RED)
    assert sim.shots_until_drop == 3


def test_match_on_third_shot_resets_counter_without_drop() -> None:
    sim = _sim()
    _ceiling(sim, RED, RED)
    first = _shoot_into(sim, 1, 4, YELLOW)
    second = _shoot_into(sim, 1, 6, YELLOW)
    assert sim.shots_without_match == 2
    third = _shoot_into(sim, 1, 0, RED)
    assert third.matched
    assert sim.shots_without_match == 0
    fourth = _shoot_into(sim, 1, 8, YELLOW)
    assert sim.shots_without_match == 1
    assert not any(r.injected for r in (first, second, third, fourth))
    assert sim.board.phase == 0


def test_bubble_at_bottom_ends_the_game() -> None:
    sim = _sim()
    calls = []
    sim.add_game_over_listener(calls.append)
    _put(sim, 17, 0, RED)       # bottom edge past 600
    result = sim.tick()
    assert result.game_over and sim.game_over
    assert calls == [sim]

    sim.aim(250, 100)
    assert not sim.fire()
    assert sim.tick().game_over
    assert calls == [sim]


def test_row_drop_pushing_grid_to_bottom_ends_the_game() -> None:
    sim = _sim(initial_rows=17)
    assert not sim.tick().game_over
    sim.inject_row()
    assert sim.tick().game_over


def test_reset_starts_over() -> None:
    sim = _sim(initial_rows=5)
    _put(sim, 17, 0, RED)
    sim.tick()
    assert sim.game_over
    sim.reset()
    assert not sim.game_over
    assert sim.shots_without_match == 0
    assert len(sim.board.bubbles()) == 5 * 12
    assert sim.board.phase == 0
    assert sim.projectile.at_rest
