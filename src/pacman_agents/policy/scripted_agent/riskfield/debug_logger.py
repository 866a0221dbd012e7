"""
Debug logging for the risk-field policy.

Provides structured, per-tick debug output for diagnosing move choices.

Verbosity levels (``RiskFieldPolicy(debug=0/1/2)``):
    0 — disabled (default); records are still kept in memory
    1 — one summary line per tick: position, modes, goal and chosen move
    2 — full detail: adds the risk read for every candidate move

All output lines are prefixed with ``[riskfield:debug]`` so they can be grepped
from mixed output.
"""

from __future__ import annotations

import sys
from collections import Counter, deque
from dataclasses import dataclass, field
from typing import Any, Optional

from .types import Cell, Move, PursuerMode

# ---------------------------------------------------------------------------
# Per-tick record
# ---------------------------------------------------------------------------


@dataclass
class TickRecord:
    """Snapshot of one decision."""

    step: int
    agent: Cell
    modes: dict[int, PursuerMode] = field(default_factory=dict)
    goal_target: Optional[Cell] = None
    goal_path_length: int = 0
    item_count: int = 0
    reward_stamped: bool = False
    # Risk read at each legal candidate, in scan order
    candidate_risks: dict[Move, int] = field(default_factory=dict)
    move: Move = Move.STOP
    min_risk: Optional[int] = None

    def modes_str(self) -> str:
        if not self.modes:
            return "-"
        return ",".join(f"{pid}={mode.value}" for pid, mode in sorted(self.modes.items()))

    def as_dict(self) -> dict[str, Any]:
        return {
            "step": self.step,
            "agent": list(self.agent),
            "modes": {str(pid): mode.value for pid, mode in self.modes.items()},
            "goal_target": list(self.goal_target) if self.goal_target else None,
            "goal_path_length": self.goal_path_length,
            "item_count": self.item_count,
            "reward_stamped": self.reward_stamped,
            "candidate_risks": {move.value: risk for move, risk in self.candidate_risks.items()},
            "move": self.move.value,
            "min_risk": self.min_risk,
        }


# ---------------------------------------------------------------------------
# DebugLogger — the main interface
# ---------------------------------------------------------------------------


class DebugLogger:
    """Collects and emits structured debug output each tick.

    Parameters
    ----------
    level : int
        Verbosity level (0, 1 or 2).
    output : file-like, optional
        Where to write output. Defaults to ``sys.stderr`` so it doesn't
        pollute JSON output on stdout.
    history : int
        Number of recent records kept for inspection.
    """

    PREFIX = "[riskfield:debug]"

    def __init__(self, level: int = 0, output: Any = None, history: int = 200) -> None:
        self.level = level
        self._out = output or sys.stderr
        self.records: deque[TickRecord] = deque(maxlen=history)

        # Persistent counters
        self._ticks = 0
        self._moves: Counter[str] = Counter()
        self._pursuit_ticks = 0
        self._reward_stamps = 0

    @property
    def enabled(self) -> bool:
        return self.level >= 1

    def record(self, rec: TickRecord) -> None:
        self.records.append(rec)
        self._ticks += 1
        self._moves[rec.move.value] += 1
        if any(mode is PursuerMode.PURSUIT for mode in rec.modes.values()):
            self._pursuit_ticks += 1
        if rec.reward_stamped:
            self._reward_stamps += 1
        if self.enabled:
            self._emit(rec)

    def _emit(self, rec: TickRecord) -> None:
        target = f"({rec.goal_target[0]},{rec.goal_target[1]})" if rec.goal_target else "-"
        line = (
            f"{self.PREFIX} step={rec.step} pos=({rec.agent[0]},{rec.agent[1]}) "
            f"modes={rec.modes_str()} items={rec.item_count} goal={target}/{rec.goal_path_length} "
            f"move={rec.move.value} risk={rec.min_risk if rec.min_risk is not None else '-'}"
        )
        if rec.reward_stamped:
            line += " reward_stamp"
        self._write(line)
        if self.level >= 2 and rec.candidate_risks:
            risks = " ".join(f"{move.value}={risk}" for move, risk in rec.candidate_risks.items())
            self._write(f"{self.PREFIX}   candidates {risks}")

    def _write(self, line: str) -> None:
        print(line, file=self._out)

    def latest(self) -> Optional[TickRecord]:
        return self.records[-1] if self.records else None

    def summary(self) -> dict[str, Any]:
        return {
            "ticks": self._ticks,
            "moves": dict(self._moves),
            "pursuit_ticks": self._pursuit_ticks,
            "reward_stamps": self._reward_stamps,
        }
