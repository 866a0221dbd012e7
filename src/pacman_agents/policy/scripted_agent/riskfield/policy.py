"""
Risk-field policy - main policy implementation.

RiskFieldBrain owns the risk field and runs one decision per tick.
RiskFieldPolicy is the game-facing wrapper with keyword-configured tunables.
"""

from __future__ import annotations

from contextlib import ExitStack
from typing import Any, Optional

from pacman_agents.policy.scripted_agent.common.geometry import apply_move, is_legal_move

from .belief import BeliefState, BeliefWalls
from .config import RiskFieldConfig
from .debug_logger import DebugLogger, TickRecord
from .services import Navigator, RiskField, RiskStamper, SafetyManager
from .state import AgentState
from .types import Cell, DebugInfo, Move, PursuerMode


class RiskFieldBrain:
    """Per-agent coordinator that owns the risk field and the services."""

    def __init__(
        self,
        config: Optional[RiskFieldConfig] = None,
        agent_id: int = 0,
        logger: Optional[DebugLogger] = None,
    ):
        self._config = config or RiskFieldConfig()
        self._agent_id = agent_id
        self._logger = logger

        self.field = RiskField(self._config.board_size)
        self.state = AgentState(agent_id=agent_id)

        # Create services
        self._navigator = Navigator(self._config)
        self._stamper = RiskStamper(self._config)
        self._safety = SafetyManager(self._config)

    @property
    def config(self) -> RiskFieldConfig:
        return self._config

    def choose_next_move(self, belief: BeliefState) -> Move:
        """Pick the legal move whose destination carries the least risk.

        Threat stamps, pursuit discounts and the goal-path discount are transient and
        reverted before returning. The self-penalty at the agent's cell and the
        milestone reward discount persist across ticks.
        """
        state = self.state
        cfg = self._config
        state.step += 1

        agent = belief.agent_cell()
        item_count = belief.remaining_item_count()
        modes = self._safety.pursuer_modes(belief)
        record = TickRecord(step=state.step, agent=agent, modes=modes, item_count=item_count)

        with ExitStack() as transient:
            for pursuer_id, mode in modes.items():
                hypotheses = list(belief.pursuer_hypotheses(pursuer_id))
                if mode is PursuerMode.EVASION:
                    transient.enter_context(self._stamper.threat(self.field, hypotheses))
                else:
                    paths = [self._navigator.find_path(belief, agent, h) for h in hypotheses]
                    per_cell = self._stamper.pursuit_discount_per_cell(len(hypotheses))
                    transient.enter_context(self._stamper.path_discount(self.field, paths, per_cell))

            if self._stamper.is_reward_milestone(item_count):
                self._stamper.apply_reward_discount(self.field, belief)
                record.reward_stamped = True

            goal_path = self._navigator.goal_path(state.goal, belief, agent)
            per_cell = cfg.goal_path_discount
            if self._safety.all_huntable(modes):
                per_cell += cfg.chase_discount
            transient.enter_context(self._stamper.path_discount(self.field, [goal_path], per_cell))
            record.goal_target = state.goal.target
            record.goal_path_length = len(goal_path)

            self.field.adjust(agent, cfg.self_penalty)

            best_move, min_risk = self._select_move(belief, agent, record)

        record.min_risk = min_risk
        if item_count == 0:
            move = Move.TERMINAL
        else:
            move = best_move if best_move is not None else Move.STOP
        record.move = move

        state.debug_info = DebugInfo(
            mode=self._mode_label(modes, move),
            goal="nearest_item",
            target_pos=state.goal.target,
        )
        state.last_tick = record
        if self._logger is not None:
            self._logger.record(record)
        return move

    def _select_move(
        self, belief: BeliefState, agent: Cell, record: TickRecord
    ) -> tuple[Optional[Move], Optional[int]]:
        """One-step lookahead over the supplied action alternatives. First scanned wins ties."""
        best_move: Optional[Move] = None
        min_risk: Optional[int] = None
        walls = BeliefWalls(belief)
        for moves in belief.enumerate_action_alternatives().values():
            for move in moves:
                if not move.is_direction:
                    continue
                if not is_legal_move(walls, agent, move.value):
                    continue
                dest = apply_move(agent, move.value)
                if not self.field.contains(dest):
                    continue
                risk = self.field.read(dest)
                record.candidate_risks.setdefault(move, risk)
                if min_risk is None or risk < min_risk:
                    min_risk = risk
                    best_move = move
        return best_move, min_risk

    def _mode_label(self, modes: dict[int, PursuerMode], move: Move) -> str:
        if move is Move.TERMINAL:
            return "done"
        if not modes:
            return "collect"
        hunting = [mode is PursuerMode.PURSUIT for mode in modes.values()]
        if all(hunting):
            return "hunt"
        if any(hunting):
            return "mixed"
        return "evade"


class RiskFieldPolicy:
    """Game-facing policy: one brain, one decision per tick.

    Keyword parameters override RiskFieldConfig fields, e.g.
    ``RiskFieldPolicy(fear_threshold=8, debug=1)``.
    """

    short_names = ["riskfield"]

    def __init__(
        self,
        # Debug level - 1 prints a line per tick, 2 adds candidate risks
        debug: int = 0,
        agent_id: int = 0,
        output: Any = None,
        **config_overrides: Any,
    ):
        self._config = RiskFieldConfig(**config_overrides)
        self._agent_id = agent_id
        self.logger = DebugLogger(level=debug, output=output)
        self.brain = self._new_brain()

    def _new_brain(self) -> RiskFieldBrain:
        return RiskFieldBrain(config=self._config, agent_id=self._agent_id, logger=self.logger)

    def step(self, belief: BeliefState) -> Move:
        return self.brain.choose_next_move(belief)

    def reset(self) -> None:
        """Start a new episode with a fresh risk field."""
        self.brain = self._new_brain()
