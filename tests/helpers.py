"""Board and belief builders shared by the risk-field tests."""

from __future__ import annotations

from typing import Optional

from pacman_agents.policy.scripted_agent.riskfield.belief import GridBeliefState
from pacman_agents.policy.scripted_agent.riskfield.maze import Maze
from pacman_agents.policy.scripted_agent.riskfield.types import Cell, CellContent

BOARD = 30
CENTER: Cell = (15, 15)


def make_maze(
    items: Optional[dict[Cell, CellContent]] = None,
    walls: Optional[list[Cell]] = None,
    size: int = BOARD,
) -> Maze:
    """Open board with the given walls and items."""
    maze = Maze.open(size)
    for cell in walls or []:
        maze.place(cell, CellContent.WALL)
    for cell, content in (items or {}).items():
        maze.place(cell, content)
    return maze


def make_belief(
    maze: Maze,
    agent: Cell = CENTER,
    hypotheses: Optional[list[list[Cell]]] = None,
    fear: Optional[list[int]] = None,
    item_count: Optional[int] = None,
) -> GridBeliefState:
    return GridBeliefState(
        maze=maze,
        agent=agent,
        hypotheses=hypotheses if hypotheses is not None else [[], []],
        fear=fear if fear is not None else [0, 0],
        item_count=item_count,
    )
