"""
Types and constants for the risk-field policy.

Move labels, board cell contents, pursuer modes, and DebugInfo.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

Cell = tuple[int, int]


class Move(Enum):
    """Decision returned once per tick."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    STOP = "STOP"  # No legal candidate
    TERMINAL = "TERMINAL"  # No items left on the board

    @property
    def is_direction(self) -> bool:
        return self in DIRECTION_MOVES


DIRECTION_MOVES: tuple[Move, ...] = (Move.UP, Move.DOWN, Move.LEFT, Move.RIGHT)


class CellContent(Enum):
    """Board cell states as reported by the belief state."""

    EMPTY = 0
    WALL = 1
    REGULAR_ITEM = 2
    LARGE_ITEM = 3
    AGENT = 4  # Agent standing on the cell (item already eaten)

    @property
    def is_item(self) -> bool:
        return self in (CellContent.REGULAR_ITEM, CellContent.LARGE_ITEM)


# ASCII glyphs used by Maze.from_ascii / Maze.to_ascii
GLYPH_TO_CONTENT: dict[str, CellContent] = {
    "#": CellContent.WALL,
    ".": CellContent.REGULAR_ITEM,
    "*": CellContent.LARGE_ITEM,
    " ": CellContent.EMPTY,
    "-": CellContent.EMPTY,
    "O": CellContent.AGENT,
    "P": CellContent.AGENT,
}

CONTENT_TO_GLYPH: dict[CellContent, str] = {
    CellContent.WALL: "#",
    CellContent.REGULAR_ITEM: ".",
    CellContent.LARGE_ITEM: "*",
    CellContent.EMPTY: " ",
    CellContent.AGENT: "O",
}


class PursuerMode(Enum):
    """How the agent treats one pursuer this tick."""

    EVASION = "evasion"  # Pursuer is dangerous - stamp threat around it
    PURSUIT = "pursuit"  # Pursuer is frightened - pull the agent toward it


# Game constants
BOARD_SIZE = 30
NUM_PURSUERS = 2
FEAR_THRESHOLD = 10  # Fear counter at or above this = huntable


@dataclass
class DebugInfo:
    """Structured debug info about agent's current intent."""

    mode: str = "idle"  # "evade", "hunt", "mixed", "done"
    goal: str = ""  # Current goal description
    target_pos: Optional[Cell] = None  # Goal item position

    def format(self, action_name: str) -> str:
        """Format as mode:goal:target:action."""
        target = str(self.target_pos) if self.target_pos else "-"
        return f"{self.mode}:{self.goal or '-'}:{target}:{action_name}"
