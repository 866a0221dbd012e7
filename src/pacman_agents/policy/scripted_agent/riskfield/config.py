"""Tunables for the risk-field policy."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .types import BOARD_SIZE, FEAR_THRESHOLD, NUM_PURSUERS


class RiskFieldConfig(BaseModel):
    """Risk magnitudes and thresholds for one agent.

    Defaults reproduce the hand-tuned values the stamp shapes were calibrated with.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    board_size: int = Field(default=BOARD_SIZE, ge=4)
    num_pursuers: int = Field(default=NUM_PURSUERS, ge=0)
    fear_threshold: int = Field(default=FEAR_THRESHOLD, ge=0)

    # Threat stamp, divided by the hypothesis count per elementary stamp
    threat_center: int = Field(default=500, ge=0)  # Center and 4-neighbors
    threat_diagonal: int = Field(default=100, ge=0)
    threat_knight: int = Field(default=40, ge=0)  # (±2,±1) and (±1,±2)
    threat_ring2: int = Field(default=100, ge=0)  # Orthogonal distance 2
    threat_ring3: int = Field(default=50, ge=0)  # Orthogonal distance 3

    pursuit_discount: int = Field(default=250, ge=0)  # Per approach path, divided by hypothesis count
    goal_path_discount: int = Field(default=25, ge=0)
    chase_discount: int = Field(default=200, ge=0)  # Extra goal-path discount when every pursuer is huntable
    self_penalty: int = Field(default=15, ge=0)  # Permanent, discourages backtracking

    large_item_risk: int = -50
    regular_item_risk: int = -20
    # Item totals at which reward discounts are (re)stamped - level pellet counts
    reward_milestones: tuple[int, ...] = (140, 165, 205)

    goal_cooldown: int = Field(default=4, ge=0)  # Recompute the goal once the counter exceeds this

    # Interior scan range [scan_min, scan_max) for items on both axes
    scan_min: int = Field(default=2, ge=0)
    scan_max: int = Field(default=25, ge=1)

    @model_validator(mode="after")
    def _check_scan_range(self) -> RiskFieldConfig:
        if self.scan_min >= self.scan_max:
            raise ValueError(f"scan_min ({self.scan_min}) must be below scan_max ({self.scan_max})")
        if self.scan_max > self.board_size:
            raise ValueError(f"scan_max ({self.scan_max}) exceeds board_size ({self.board_size})")
        return self
