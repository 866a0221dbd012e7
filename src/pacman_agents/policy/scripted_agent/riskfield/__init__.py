"""Risk-field maze agent: evades or hunts pursuers by reading a per-cell risk grid."""

from .belief import BeliefState, GridBeliefState
from .config import RiskFieldConfig
from .maze import Maze
from .policy import RiskFieldBrain, RiskFieldPolicy
from .types import CellContent, Move, PursuerMode

__all__ = [
    "BeliefState",
    "CellContent",
    "GridBeliefState",
    "Maze",
    "Move",
    "PursuerMode",
    "RiskFieldBrain",
    "RiskFieldConfig",
    "RiskFieldPolicy",
]
