"""
Belief-state interface consumed by the risk-field policy.

BeliefState is the read-only view the game supplies each tick.
GridBeliefState is a plain implementation over a Maze.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Mapping, Optional, Protocol, Sequence

from pacman_agents.policy.scripted_agent.common.geometry import apply_move, is_legal_move

from .maze import Maze
from .types import DIRECTION_MOVES, Cell, CellContent, Move


class BeliefState(Protocol):
    """What the agent knows at the start of a tick."""

    def agent_cell(self) -> Cell: ...

    def cell_contents(self, x: int, y: int) -> CellContent:
        """Contents of a board cell. Off-board cells read as WALL."""
        ...

    def pursuer_hypotheses(self, pursuer_id: int) -> Sequence[Cell]:
        """Ordered, duplicate-free cells the pursuer may occupy."""
        ...

    def fear_counter(self, pursuer_id: int) -> int: ...

    def remaining_item_count(self) -> int: ...

    def enumerate_action_alternatives(self) -> Mapping[Hashable, Sequence[Move]]:
        """Outcome class -> interchangeable move labels leading to it."""
        ...


class BeliefWalls:
    """Wall lookups over a belief state, read through cell_contents."""

    def __init__(self, belief: BeliefState):
        self._belief = belief

    def is_wall(self, cell: Cell) -> bool:
        return self._belief.cell_contents(cell[0], cell[1]) is CellContent.WALL


@dataclass
class GridBeliefState:
    """Belief state over a concrete Maze."""

    maze: Maze
    agent: Cell
    hypotheses: list[list[Cell]] = field(default_factory=lambda: [[], []])
    fear: list[int] = field(default_factory=lambda: [0, 0])

    # Override the item count derived from the maze (e.g. levels with off-map items)
    item_count: Optional[int] = None

    # Override the default one-class-per-destination alternatives
    alternatives: Optional[dict[Hashable, list[Move]]] = None

    def agent_cell(self) -> Cell:
        return self.agent

    def cell_contents(self, x: int, y: int) -> CellContent:
        return self.maze.cell_contents(x, y)

    def pursuer_hypotheses(self, pursuer_id: int) -> Sequence[Cell]:
        if pursuer_id >= len(self.hypotheses):
            return []
        # Keep first occurrence order, drop duplicates
        return list(dict.fromkeys(self.hypotheses[pursuer_id]))

    def fear_counter(self, pursuer_id: int) -> int:
        if pursuer_id >= len(self.fear):
            return 0
        return self.fear[pursuer_id]

    def remaining_item_count(self) -> int:
        if self.item_count is not None:
            return self.item_count
        return self.maze.item_count()

    def enumerate_action_alternatives(self) -> Mapping[Hashable, Sequence[Move]]:
        if self.alternatives is not None:
            return self.alternatives
        # Moves that end on the same cell (e.g. blocked moves stay put) share a class
        outcomes: dict[Hashable, list[Move]] = {}
        for move in DIRECTION_MOVES:
            if is_legal_move(self.maze, self.agent, move.value):
                dest = apply_move(self.agent, move.value)
            else:
                dest = self.agent
            outcomes.setdefault(dest, []).append(move)
        return outcomes
