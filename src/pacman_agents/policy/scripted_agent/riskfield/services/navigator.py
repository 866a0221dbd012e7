"""
Navigator service for the risk-field policy.

Handles path search, nearest-item goal selection, and the cached goal path.
Path search is greedy best-first: the frontier is ordered by Manhattan distance to
the goal only, so returned paths are wall-free but not necessarily shortest.
"""

from __future__ import annotations

import heapq
from typing import TYPE_CHECKING, Optional

from pacman_agents.policy.scripted_agent.common.geometry import manhattan
from pacman_agents.policy.scripted_agent.riskfield.config import RiskFieldConfig
from pacman_agents.policy.scripted_agent.riskfield.types import Cell, CellContent

if TYPE_CHECKING:
    from pacman_agents.policy.scripted_agent.riskfield.belief import BeliefState
    from pacman_agents.policy.scripted_agent.riskfield.state import GoalCache


class Navigator:
    """Path search and goal tracking over the belief state's board."""

    # Successor order: down, up, right, left
    SUCCESSOR_DELTAS = [(1, 0), (-1, 0), (0, 1), (0, -1)]

    def __init__(self, config: RiskFieldConfig):
        self._config = config
        self._max_expansions = config.board_size * config.board_size

    def find_path(self, board: BeliefState, start: Cell, goal: Cell) -> list[Cell]:
        """Greedy best-first search from start to goal, both inclusive.

        Returns [] if the goal cannot be reached.
        """
        tie_breaker = 0
        # (heuristic, tie_breaker, cell, parent)
        frontier: list[tuple[int, int, Cell, Optional[Cell]]] = [(manhattan(start, goal), tie_breaker, start, None)]
        came_from: dict[Cell, Optional[Cell]] = {}
        expansions = 0

        while frontier:
            _, _, current, parent = heapq.heappop(frontier)
            if current in came_from:
                continue
            came_from[current] = parent

            if current == goal:
                return self._reconstruct_path(came_from, current)

            expansions += 1
            if expansions > self._max_expansions:
                break

            for neighbor in self._successors(board, current):
                if neighbor in came_from:
                    continue
                tie_breaker += 1
                heapq.heappush(frontier, (manhattan(neighbor, goal), tie_breaker, neighbor, current))

        return []

    def _successors(self, board: BeliefState, cell: Cell) -> list[Cell]:
        x, y = cell
        result = []
        for dx, dy in self.SUCCESSOR_DELTAS:
            nx, ny = x + dx, y + dy
            if nx < 0 or ny < 0:
                continue
            if board.cell_contents(nx, ny) is CellContent.WALL:
                continue
            result.append((nx, ny))
        return result

    def _reconstruct_path(self, came_from: dict[Cell, Optional[Cell]], current: Cell) -> list[Cell]:
        path: list[Cell] = []
        node: Optional[Cell] = current
        while node is not None:
            path.append(node)
            node = came_from[node]
        path.reverse()
        return path

    def find_nearest_item(self, board: BeliefState, agent: Cell) -> Optional[Cell]:
        """Closest item cell by Manhattan distance; first in row-major scan order on ties."""
        cfg = self._config
        best: Optional[Cell] = None
        best_dist = 0
        for x in range(cfg.scan_min, cfg.scan_max):
            for y in range(cfg.scan_min, cfg.scan_max):
                if not board.cell_contents(x, y).is_item:
                    continue
                dist = manhattan((x, y), agent)
                if best is None or dist < best_dist:
                    best = (x, y)
                    best_dist = dist
        return best

    def goal_path(self, cache: GoalCache, board: BeliefState, agent: Cell) -> list[Cell]:
        """Cached path to the nearest item.

        Recomputed when the target no longer holds an item or once the cooldown
        counter exceeds the configured limit. The counter advances every call.
        """
        if self._needs_refresh(cache, board):
            cache.ticks_since_refresh = 0
            cache.target = self.find_nearest_item(board, agent)
            cache.path = self.find_path(board, agent, cache.target) if cache.target is not None else []
            cache.refreshes += 1
        cache.ticks_since_refresh += 1
        return cache.path

    def _needs_refresh(self, cache: GoalCache, board: BeliefState) -> bool:
        if cache.target is None:
            return True
        if cache.ticks_since_refresh > self._config.goal_cooldown:
            return True
        return not board.cell_contents(cache.target[0], cache.target[1]).is_item
