#!/usr/bin/env -S uv run
"""Run a short risk-field rollout against random-walking pursuers and print a JSON summary."""

from __future__ import annotations

import argparse
import json
import random
from pathlib import Path
from typing import Optional

from pacman_agents.policy.scripted_agent.common.geometry import DIRECTIONS, apply_move, is_legal_move, manhattan
from pacman_agents.policy.scripted_agent.riskfield import GridBeliefState, Maze, Move, RiskFieldPolicy
from pacman_agents.policy.scripted_agent.riskfield.types import Cell, CellContent

DEFAULT_MAP = """\
##############################
##############################
##............##............##
##.####.#####.##.#####.####.##
##*####.#####.##.#####.####*##
##..........................##
##.####.##.########.##.####.##
##......##....##....##......##
######.######.##.######.######
######.##............##.######
######.##.###  ###.##.######
-------.  .#      #.  .-------
######.##.########.##.######
######.##............##.######
######.##.########.##.######
##............##............##
##.####.#####.##.#####.####.##
##*..##.......O........##..*##
####.##.##.########.##.##.####
##......##....##....##......##
##.##########.##.##########.##
##..........................##
##############################
##############################
"""

PURSUER_STARTS: list[Cell] = [(11, 13), (11, 16)]
CAPTURE_DISTANCE = 0


def _pad_map(text: str) -> str:
    """Pad every row with walls to the widest row so ragged hand-written maps parse."""
    rows = [row for row in text.splitlines() if row]
    width = max(len(row) for row in rows)
    return "\n".join(row.ljust(width, "#") for row in rows)


def _find_agent(maze: Maze) -> Cell:
    for x in range(maze.height):
        for y in range(maze.width):
            if maze.cell_contents(x, y) is CellContent.AGENT:
                return (x, y)
    raise ValueError("Map has no agent start ('O' or 'P')")


def _walk(maze: Maze, cell: Cell, rng: random.Random) -> Cell:
    moves = [m for m in DIRECTIONS if is_legal_move(maze, cell, m) and maze.in_bounds(apply_move(cell, m))]
    if not moves:
        return cell
    return apply_move(cell, rng.choice(moves))


def run_rollout(*, map_text: str, steps: int, seed: int, fear_steps: int, debug: int) -> dict:
    maze = Maze.from_ascii(_pad_map(map_text))
    rng = random.Random(seed)
    agent = _find_agent(maze)
    pursuers = list(PURSUER_STARTS)
    fear = [fear_steps, fear_steps]
    policy = RiskFieldPolicy(debug=debug)

    captures = 0
    eaten = 0
    hunted = 0
    result: Optional[Move] = None
    step = 0
    for step in range(1, steps + 1):
        belief = GridBeliefState(
            maze=maze,
            agent=agent,
            hypotheses=[[p] for p in pursuers],
            fear=list(fear),
        )
        result = policy.step(belief)
        if result is Move.TERMINAL:
            break
        if result.is_direction:
            agent = apply_move(agent, result.value)
        if maze.consume(agent):
            eaten += 1

        pursuers = [_walk(maze, p, rng) for p in pursuers]
        for i, p in enumerate(pursuers):
            if manhattan(p, agent) > CAPTURE_DISTANCE:
                continue
            if fear[i] > 0:
                hunted += 1
                pursuers[i] = PURSUER_STARTS[i]
            else:
                captures += 1
        fear = [max(0, f - 1) for f in fear]

    return {
        "steps": step,
        "final_move": result.value if result else None,
        "items_eaten": eaten,
        "items_left": maze.item_count(),
        "captures": captures,
        "pursuers_hunted": hunted,
        "debug": policy.logger.summary(),
    }


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--map", type=Path, default=None, help="ASCII map file (default: built-in maze)")
    parser.add_argument("--steps", type=int, default=300)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--fear", type=int, default=0, help="Initial fear counter for both pursuers")
    parser.add_argument("--debug", type=int, default=0, choices=[0, 1, 2])
    args = parser.parse_args()

    map_text = args.map.read_text(encoding="utf-8") if args.map else DEFAULT_MAP
    summary = run_rollout(map_text=map_text, steps=args.steps, seed=args.seed, fear_steps=args.fear, debug=args.debug)
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
