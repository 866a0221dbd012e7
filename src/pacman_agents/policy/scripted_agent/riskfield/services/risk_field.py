"""
RiskField service for the risk-field policy.

Dense per-cell integer risk; lower is preferred.
"""

from __future__ import annotations

import numpy as np

from pacman_agents.policy.scripted_agent.riskfield.types import BOARD_SIZE, Cell


class RiskField:
    """Owned by one brain. Single writer, never shared between agents."""

    def __init__(self, size: int = BOARD_SIZE):
        self.size = size
        self.grid = np.zeros((size, size), dtype=np.int64)

    def contains(self, cell: Cell) -> bool:
        return 0 <= cell[0] < self.size and 0 <= cell[1] < self.size

    def adjust(self, cell: Cell, delta: int) -> None:
        """Add delta to a cell. Off-board cells are ignored; stamps probe past the edge."""
        if self.contains(cell):
            self.grid[cell[0], cell[1]] += delta

    def set(self, cell: Cell, value: int) -> None:
        if self.contains(cell):
            self.grid[cell[0], cell[1]] = value

    def read(self, cell: Cell) -> int:
        if not self.contains(cell):
            raise IndexError(f"Cell {cell} outside {self.size}x{self.size} risk field")
        return int(self.grid[cell[0], cell[1]])

    def snapshot(self) -> np.ndarray:
        return self.grid.copy()
