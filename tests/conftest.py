"""Shared fixtures for risk-field policy tests."""

from __future__ import annotations

import pytest

from pacman_agents.policy.scripted_agent.riskfield.config import RiskFieldConfig
from pacman_agents.policy.scripted_agent.riskfield.policy import RiskFieldBrain
from pacman_agents.policy.scripted_agent.riskfield.services import Navigator, RiskField, RiskStamper


@pytest.fixture
def config() -> RiskFieldConfig:
    return RiskFieldConfig()


@pytest.fixture
def brain(config: RiskFieldConfig) -> RiskFieldBrain:
    return RiskFieldBrain(config=config)


@pytest.fixture
def navigator(config: RiskFieldConfig) -> Navigator:
    return Navigator(config)


@pytest.fixture
def stamper(config: RiskFieldConfig) -> RiskStamper:
    return RiskStamper(config)


@pytest.fixture
def field(config: RiskFieldConfig) -> RiskField:
    return RiskField(config.board_size)
