"""
SafetyManager service for the risk-field policy.

Decides, per pursuer, whether to evade it or hunt it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pacman_agents.policy.scripted_agent.riskfield.config import RiskFieldConfig
from pacman_agents.policy.scripted_agent.riskfield.types import PursuerMode

if TYPE_CHECKING:
    from pacman_agents.policy.scripted_agent.riskfield.belief import BeliefState


class SafetyManager:
    """Maps fear counters to pursuer modes."""

    def __init__(self, config: RiskFieldConfig):
        self._config = config

    def mode_for(self, fear_counter: int) -> PursuerMode:
        """Huntable while the fear counter is at or above the threshold."""
        if fear_counter >= self._config.fear_threshold:
            return PursuerMode.PURSUIT
        return PursuerMode.EVASION

    def pursuer_modes(self, belief: BeliefState) -> dict[int, PursuerMode]:
        return {pid: self.mode_for(belief.fear_counter(pid)) for pid in range(self._config.num_pursuers)}

    def all_huntable(self, modes: dict[int, PursuerMode]) -> bool:
        """True when every pursuer is in pursuit mode (and there is at least one)."""
        return bool(modes) and all(mode is PursuerMode.PURSUIT for mode in modes.values())
