from __future__ import annotations

from typing import Protocol

# (x, y) == (row, col)
MOVE_DELTAS: dict[str, tuple[int, int]] = {
    "UP": (-1, 0),
    "DOWN": (1, 0),
    "LEFT": (0, -1),
    "RIGHT": (0, 1),
}

DIRECTIONS = ["UP", "DOWN", "LEFT", "RIGHT"]


class WallMap(Protocol):
    def is_wall(self, cell: tuple[int, int]) -> bool: ...


def manhattan(a: tuple[int, int], b: tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def is_adjacent(pos1: tuple[int, int], pos2: tuple[int, int]) -> bool:
    dr = abs(pos1[0] - pos2[0])
    dc = abs(pos1[1] - pos2[1])
    return (dr == 1 and dc == 0) or (dr == 0 and dc == 1)


def apply_move(cell: tuple[int, int], move: str) -> tuple[int, int]:
    dx, dy = MOVE_DELTAS[move]
    return (cell[0] + dx, cell[1] + dy)


def is_legal_move(board: WallMap, cell: tuple[int, int], move: str) -> bool:
    """A move is legal unless it lands on a wall.

    Destinations with a negative coordinate are never looked up and count as legal;
    callers bounds-check before indexing anything with them.
    """
    dest = apply_move(cell, move)
    if dest[0] >= 0 and dest[1] >= 0:
        return not board.is_wall(dest)
    return True
