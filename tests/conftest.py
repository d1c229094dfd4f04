"""Shared fixtures for the pherobrain test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from pherobrain.brain.memory import AgentMemory
from pherobrain.brain.policy import DefaultBrain
from pherobrain.sensing.observation import AgentObservation
from pherobrain.simulation.config import PolicyConfig


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def default_config() -> PolicyConfig:
    """Default brain config (no YAML file needed)."""
    return PolicyConfig()


@pytest.fixture
def brain(default_config: PolicyConfig, rng: Generator) -> DefaultBrain:
    """The default brain with a seeded exploration RNG."""
    return DefaultBrain(config=default_config, rng=rng)


@pytest.fixture
def blank_observation() -> AgentObservation:
    """An observation where nothing is sensed."""
    return AgentObservation.blank()


@pytest.fixture
def memory() -> AgentMemory:
    """A freshly spawned ant's memory."""
    return AgentMemory()
