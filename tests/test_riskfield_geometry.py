"""Unit tests for grid geometry helpers."""

from __future__ import annotations

import pytest

from pacman_agents.policy.scripted_agent.common.geometry import (
    DIRECTIONS,
    apply_move,
    is_adjacent,
    is_legal_move,
    manhattan,
)
from pacman_agents.policy.scripted_agent.riskfield.types import CellContent

from helpers import make_maze


class TestManhattan:
    def test_zero_for_same_cell(self):
        assert manhattan((4, 7), (4, 7)) == 0

    def test_symmetric(self):
        assert manhattan((1, 2), (7, 3)) == manhattan((7, 3), (1, 2)) == 7

    def test_triangle_inequality(self):
        a, b, c = (0, 0), (5, 9), (12, 3)
        assert manhattan(a, c) <= manhattan(a, b) + manhattan(b, c)


class TestApplyMove:
    @pytest.mark.parametrize(
        "move,expected",
        [("UP", (4, 5)), ("DOWN", (6, 5)), ("LEFT", (5, 4)), ("RIGHT", (5, 6))],
    )
    def test_deltas(self, move, expected):
        assert apply_move((5, 5), move) == expected

    def test_every_direction_is_adjacent(self):
        for move in DIRECTIONS:
            assert is_adjacent((5, 5), apply_move((5, 5), move))


class TestIsLegalMove:
    def test_open_cell_is_legal(self):
        maze = make_maze()
        assert is_legal_move(maze, (5, 5), "RIGHT")

    def test_wall_is_illegal(self):
        maze = make_maze(walls=[(5, 6)])
        assert not is_legal_move(maze, (5, 5), "RIGHT")
        assert is_legal_move(maze, (5, 5), "LEFT")

    def test_negative_destination_is_legal(self):
        """Negative coordinates are never looked up."""
        maze = make_maze()
        assert is_legal_move(maze, (0, 0), "UP")
        assert is_legal_move(maze, (0, 0), "LEFT")

    def test_past_far_edge_reads_as_wall(self):
        maze = make_maze(size=10)
        assert not is_legal_move(maze, (9, 9), "DOWN")
        assert not is_legal_move(maze, (9, 9), "RIGHT")

    def test_items_do_not_block(self):
        maze = make_maze(items={(5, 6): CellContent.LARGE_ITEM})
        assert is_legal_move(maze, (5, 5), "RIGHT")
