"""Tests for pherobrain.sensing and pherobrain.pheromones.channels."""

from dataclasses import FrozenInstanceError, replace

import numpy as np
import pytest

from pherobrain.pheromones.channels import CHANNEL_COUNT, PheromoneChannel
from pherobrain.sensing.observation import (
    MAX_LONGEVITY,
    SENTINEL_DISTANCE,
    AgentObservation,
    PheromoneChannelSense,
    SensedDirection,
)


class TestPheromoneChannel:
    """Tests for the channel enum."""

    def test_meaningful_indices(self) -> None:
        assert PheromoneChannel.TO_COLONY == 0
        assert PheromoneChannel.TO_FOOD == 1
        assert len(PheromoneChannel) == CHANNEL_COUNT

    def test_reserved_channels(self) -> None:
        assert not PheromoneChannel.TO_COLONY.is_reserved
        assert not PheromoneChannel.TO_FOOD.is_reserved
        assert all(PheromoneChannel(i).is_reserved for i in range(2, CHANNEL_COUNT))

    def test_from_name(self) -> None:
        assert PheromoneChannel.from_name("to_food") is PheromoneChannel.TO_FOOD
        assert PheromoneChannel.from_name("RESERVED_5") is PheromoneChannel.RESERVED_5

    def test_from_unknown_name(self) -> None:
        with pytest.raises(KeyError, match="unknown pheromone channel"):
            PheromoneChannel.from_name("to_enemy")


class TestSensedDirection:
    """Tests for sentinel handling on directional senses."""

    def test_default_is_not_detected(self) -> None:
        sense = SensedDirection()
        assert sense.distance == SENTINEL_DISTANCE
        assert not sense.is_detected

    def test_zero_distance_is_detected(self) -> None:
        """An enemy in the same cell is reported at distance 0."""
        assert SensedDirection(angle=0.0, distance=0.0).is_detected

    def test_is_within_is_strict(self) -> None:
        assert SensedDirection(angle=1.0, distance=4.99).is_within(5.0)
        assert not SensedDirection(angle=1.0, distance=5.0).is_within(5.0)

    def test_sentinel_never_within(self) -> None:
        assert not SensedDirection(angle=1.0, distance=-1.0).is_within(5.0)


class TestPheromoneChannelSense:
    """Tests for pheromone readings."""

    def test_zero_strength_is_no_signal(self) -> None:
        assert not PheromoneChannelSense(angle=0.7, strength=0.0).has_signal

    def test_positive_strength_is_signal(self) -> None:
        assert PheromoneChannelSense(angle=0.0, strength=0.5).has_signal


class TestAgentObservation:
    """Tests for the per-tick observation snapshot."""

    def test_blank_defaults(self) -> None:
        obs = AgentObservation.blank()
        assert not obs.is_carrying_food
        assert not obs.is_fighting
        assert obs.longevity == MAX_LONGEVITY
        assert len(obs.pheromone_senses) == CHANNEL_COUNT
        directions = (obs.wall_sense, obs.food_sense, obs.colony_sense, obs.enemy_sense)
        assert not any(sense.is_detected for sense in directions)
        assert not any(s.has_signal for s in obs.pheromone_senses)

    def test_is_read_only(self, blank_observation: AgentObservation) -> None:
        with pytest.raises(FrozenInstanceError):
            blank_observation.is_carrying_food = True  # type: ignore[misc]

    def test_wrong_channel_count_rejected(self) -> None:
        with pytest.raises(ValueError, match="expected 8 pheromone senses"):
            AgentObservation(pheromone_senses=(PheromoneChannelSense(),) * 3)

    def test_list_of_senses_becomes_tuple(self) -> None:
        obs = AgentObservation(
            pheromone_senses=[PheromoneChannelSense() for _ in range(CHANNEL_COUNT)],
        )
        assert isinstance(obs.pheromone_senses, tuple)

    def test_with_pheromone(self, blank_observation: AgentObservation) -> None:
        sense = PheromoneChannelSense(angle=-0.5, strength=2.0)
        obs = blank_observation.with_pheromone(PheromoneChannel.TO_COLONY, sense)
        assert obs.pheromone(PheromoneChannel.TO_COLONY) == sense
        # Original untouched
        assert not blank_observation.pheromone(0).has_signal

    def test_cell_sense(self, blank_observation: AgentObservation) -> None:
        obs = blank_observation.with_pheromone(
            PheromoneChannel.TO_FOOD,
            PheromoneChannelSense(cell_strength=12.5),
        )
        cells = obs.cell_sense
        assert cells.shape == (CHANNEL_COUNT,)
        assert cells[1] == 12.5
        assert np.count_nonzero(cells) == 1

    def test_replace_derives_variant(self, blank_observation: AgentObservation) -> None:
        obs = replace(blank_observation, is_carrying_food=True, longevity=10.0)
        assert obs.is_carrying_food
        assert obs.longevity == 10.0
