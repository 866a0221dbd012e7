"""Unit tests for the concrete maze, the grid belief state, and configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pacman_agents.policy.scripted_agent.riskfield.config import RiskFieldConfig
from pacman_agents.policy.scripted_agent.riskfield.maze import Maze
from pacman_agents.policy.scripted_agent.riskfield.types import CellContent, Move

from helpers import make_belief, make_maze

SMALL_MAP = """\
#####
#.*O#
# # #
#####
"""


class TestMazeParsing:
    def test_glyphs(self):
        maze = Maze.from_ascii(SMALL_MAP)
        assert (maze.height, maze.width) == (4, 5)
        assert maze.cell_contents(0, 0) is CellContent.WALL
        assert maze.cell_contents(1, 1) is CellContent.REGULAR_ITEM
        assert maze.cell_contents(1, 2) is CellContent.LARGE_ITEM
        assert maze.cell_contents(1, 3) is CellContent.AGENT
        assert maze.cell_contents(2, 1) is CellContent.EMPTY

    def test_round_trip_ascii(self):
        maze = Maze.from_ascii(SMALL_MAP)
        assert maze.to_ascii() == SMALL_MAP.rstrip("\n")

    def test_ragged_rows_rejected(self):
        with pytest.raises(ValueError, match="width"):
            Maze.from_ascii("###\n##\n")

    def test_unknown_glyph_rejected(self):
        with pytest.raises(ValueError, match="Unknown glyph"):
            Maze.from_ascii("#?#\n")

    def test_empty_text_rejected(self):
        with pytest.raises(ValueError):
            Maze.from_ascii("")

    def test_board_larger_than_risk_field_rejected(self):
        with pytest.raises(ValueError, match="exceeds"):
            Maze.open(40)
        with pytest.raises(ValueError, match="exceeds"):
            Maze.from_ascii("#" * 31)

    def test_board_at_risk_field_size_accepted(self):
        assert Maze.open(30).height == 30

    def test_custom_size_limit(self):
        with pytest.raises(ValueError):
            Maze.open(6, max_size=5)
        assert Maze.open(40, max_size=40).width == 40


class TestMazeItems:
    def test_out_of_bounds_reads_as_wall(self):
        maze = Maze.from_ascii(SMALL_MAP)
        assert maze.cell_contents(-1, 0) is CellContent.WALL
        assert maze.cell_contents(0, 99) is CellContent.WALL

    def test_item_count_and_cells(self):
        maze = Maze.from_ascii(SMALL_MAP)
        assert maze.item_count() == 2
        assert list(maze.item_cells()) == [(1, 1), (1, 2)]

    def test_consume(self):
        maze = Maze.from_ascii(SMALL_MAP)
        assert maze.consume((1, 1))
        assert not maze.consume((1, 1))
        assert maze.item_count() == 1

    def test_place_out_of_bounds_raises(self):
        maze = Maze.open(5)
        with pytest.raises(IndexError):
            maze.place((5, 0), CellContent.WALL)


class TestGridBeliefState:
    def test_item_count_from_maze(self):
        maze = make_maze(items={(5, 5): CellContent.REGULAR_ITEM, (6, 6): CellContent.LARGE_ITEM})
        assert make_belief(maze).remaining_item_count() == 2

    def test_item_count_override(self):
        assert make_belief(make_maze(), item_count=140).remaining_item_count() == 140

    def test_hypotheses_deduplicated_in_order(self):
        belief = make_belief(make_maze(), hypotheses=[[(3, 3), (1, 1), (3, 3)], []])
        assert list(belief.pursuer_hypotheses(0)) == [(3, 3), (1, 1)]
        assert list(belief.pursuer_hypotheses(5)) == []

    def test_open_alternatives_one_class_per_move(self):
        belief = make_belief(make_maze(), agent=(5, 5))
        alternatives = belief.enumerate_action_alternatives()
        assert list(alternatives.values()) == [[Move.UP], [Move.DOWN], [Move.LEFT], [Move.RIGHT]]

    def test_blocked_moves_share_a_class(self):
        maze = make_maze(walls=[(4, 5), (6, 5)])
        alternatives = make_belief(maze, agent=(5, 5)).enumerate_action_alternatives()
        assert alternatives[(5, 5)] == [Move.UP, Move.DOWN]


class TestConfig:
    def test_defaults(self, config: RiskFieldConfig):
        assert config.fear_threshold == 10
        assert config.reward_milestones == (140, 165, 205)
        assert config.self_penalty == 15

    def test_frozen(self, config: RiskFieldConfig):
        with pytest.raises(ValidationError):
            config.self_penalty = 0  # type: ignore[misc]

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            RiskFieldConfig(not_a_field=1)  # type: ignore[call-arg]

    def test_scan_range_validated(self):
        with pytest.raises(ValidationError):
            RiskFieldConfig(scan_min=10, scan_max=5)
        with pytest.raises(ValidationError):
            RiskFieldConfig(board_size=20, scan_max=25)

    def test_negative_magnitude_rejected(self):
        with pytest.raises(ValidationError):
            RiskFieldConfig(threat_center=-1)
