"""
RiskStamper service for the risk-field policy.

Applies threat stamps around pursuer hypotheses, discounts along paths, and the
standing reward discount. Every transient stamp is exposed as a context manager
whose exit applies the exact inverse.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, Sequence

from pacman_agents.policy.scripted_agent.riskfield.config import RiskFieldConfig
from pacman_agents.policy.scripted_agent.riskfield.types import Cell, CellContent

if TYPE_CHECKING:
    from pacman_agents.policy.scripted_agent.riskfield.belief import BeliefState
    from pacman_agents.policy.scripted_agent.riskfield.services.risk_field import RiskField


def threat_offsets(config: RiskFieldConfig) -> list[tuple[int, int, int]]:
    """(dx, dy, base magnitude) for every cell of one threat stamp."""
    offsets = [(0, 0, config.threat_center)]
    for dx, dy in [(-1, 0), (0, -1), (1, 0), (0, 1)]:
        offsets.append((dx, dy, config.threat_center))
    for dx, dy in [(-1, -1), (-1, 1), (1, 1), (1, -1)]:
        offsets.append((dx, dy, config.threat_diagonal))
    for dx, dy in [(-2, -1), (-2, 1), (1, 2), (1, -2), (-1, -2), (-1, 2), (2, 1), (2, -1)]:
        offsets.append((dx, dy, config.threat_knight))
    for dist, magnitude in [(2, config.threat_ring2), (3, config.threat_ring3)]:
        for dx, dy in [(-dist, 0), (dist, 0), (0, -dist), (0, dist)]:
            offsets.append((dx, dy, magnitude))
    return offsets


class RiskStamper:
    """Writes stamp patterns into a RiskField."""

    def __init__(self, config: RiskFieldConfig):
        self._config = config
        self._offsets = threat_offsets(config)

    # === Threat ===

    def apply_threat(self, field: RiskField, hypotheses: Sequence[Cell]) -> None:
        self._stamp_threat(field, hypotheses, sign=1)

    def revert_threat(self, field: RiskField, hypotheses: Sequence[Cell]) -> None:
        self._stamp_threat(field, hypotheses, sign=-1)

    def _stamp_threat(self, field: RiskField, hypotheses: Sequence[Cell], sign: int) -> None:
        n = len(hypotheses)
        if n == 0:
            return
        for x, y in hypotheses:
            for dx, dy, magnitude in self._offsets:
                # Divide each elementary stamp so apply/revert cancel exactly
                field.adjust((x + dx, y + dy), sign * (magnitude // n))

    @contextmanager
    def threat(self, field: RiskField, hypotheses: Sequence[Cell]) -> Iterator[None]:
        """Threat stamp held for the duration of the block."""
        hypotheses = list(hypotheses)
        self.apply_threat(field, hypotheses)
        try:
            yield
        finally:
            self.revert_threat(field, hypotheses)

    # === Path discounts ===

    def apply_path_discount(self, field: RiskField, paths: Sequence[Sequence[Cell]], per_cell: int) -> None:
        for path in paths:
            for cell in path:
                field.adjust(cell, -per_cell)

    def revert_path_discount(self, field: RiskField, paths: Sequence[Sequence[Cell]], per_cell: int) -> None:
        for path in paths:
            for cell in path:
                field.adjust(cell, per_cell)

    @contextmanager
    def path_discount(self, field: RiskField, paths: Sequence[Sequence[Cell]], per_cell: int) -> Iterator[None]:
        """Subtract per_cell on every cell of every path; overlapping paths compound."""
        paths = [list(path) for path in paths]
        self.apply_path_discount(field, paths, per_cell)
        try:
            yield
        finally:
            self.revert_path_discount(field, paths, per_cell)

    def pursuit_discount_per_cell(self, num_hypotheses: int) -> int:
        if num_hypotheses == 0:
            return 0
        return self._config.pursuit_discount // num_hypotheses

    # === Rewards ===

    def is_reward_milestone(self, item_count: int) -> bool:
        return item_count in self._config.reward_milestones

    def apply_reward_discount(self, field: RiskField, belief: BeliefState) -> int:
        """Overwrite risk on every scanned item cell. Never reverted.

        Returns the number of cells written.
        """
        cfg = self._config
        written = 0
        for x in range(cfg.scan_min, cfg.scan_max):
            for y in range(cfg.scan_min, cfg.scan_max):
                content = belief.cell_contents(x, y)
                if content is CellContent.LARGE_ITEM:
                    field.set((x, y), cfg.large_item_risk)
                    written += 1
                elif content is CellContent.REGULAR_ITEM:
                    field.set((x, y), cfg.regular_item_risk)
                    written += 1
        return written
