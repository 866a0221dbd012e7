"""
State classes for the risk-field policy.

GoalCache and AgentState dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from .types import Cell, DebugInfo

if TYPE_CHECKING:
    from .debug_logger import TickRecord


@dataclass
class GoalCache:
    """Cached route to the nearest item, managed by Navigator."""

    target: Optional[Cell] = None
    path: list[Cell] = field(default_factory=list)
    ticks_since_refresh: int = 0
    refreshes: int = 0  # Total recomputations, for debugging


@dataclass
class AgentState:
    """Per-agent state carried between ticks. The risk field lives on the brain."""

    agent_id: int = 0
    step: int = 0
    goal: GoalCache = field(default_factory=GoalCache)
    debug_info: DebugInfo = field(default_factory=DebugInfo)

    # Last tick's decision record, including the transient risks that were reverted
    last_tick: Optional[TickRecord] = None
