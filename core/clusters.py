# core/clusters.py
"""
Connectivity on a HexBoard.

Both searches are stack‑based flood fills over the six hex neighbours with
an explicit visited set, same shape as Minesweeper's reveal flood:

    find_matches    – same‑colour cluster around a freshly placed bubble
    find_supported  – everything hanging (through any colour) from row 0
"""
from __future__ import annotations
from typing import Callable, Iterable, List, Set, Tuple

from boards.hex_board import HexBoard
from core.bubble import Bubble, BubbleColor

Cell = Tuple[int, int]

def _flood(board: HexBoard, seeds: Iterable[Cell],
           accept: Callable[[Bubble], bool]) -> List[Cell]:
    seen: Set[Cell] = set()
    found: List[Cell] = []
    stack = list(seeds)
    while stack:
        r, c = stack.pop()
        if (r, c) in seen:
            continue
        seen.add((r, c))
        b = board.get(r, c)
        if b is None or not accept(b):
            continue
        found.append((r, c))
        stack.extend(n for n in board.neighbors(r, c) if n not in seen)
    return found


def find_matches(board: HexBoard, row: int, col: int,
                 color: BubbleColor | None = None) -> List[Cell]:
    """Connected cells holding *color* (default: the seed's colour)."""
    seed = board.get(row, col)
    if seed is None:
        return []
    target = color or seed.color
    return _flood(board, [(row, col)], lambda b: b.color is target)


def find_supported(board: HexBoard) -> Set[Cell]:
    ceiling = [(0, c) for c in range(board.cols) if board.get(0, c) is not None]
    return set(_flood(board, ceiling, lambda b: True))


def find_floating(board: HexBoard) -> List[Cell]:
    supported = find_supported(board)
    return [(r, c) for r, c, _ in board.occupied() if (r, c) not in supported]


def remove_cells(board: HexBoard, cells: Iterable[Cell]) -> List[Bubble]:
    removed = []
    for r, c in cells:
        b = board.remove(r, c)
        if b is not None:
            removed.append(b)
    return removed
