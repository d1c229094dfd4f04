"""Brain — the per-ant decision policy.

A brain is asked once per colony to configure pheromone decay, then once
per think tick per ant to turn an observation into a decision.  Every
tick is reactive: nothing carries over except the ant's own memory.

Default decision order:

- **Laying**: carriers lay TO_COLONY, searchers lay TO_FOOD, a fixed
  amount each tick.
- **Steering**, a fixed three-tier chain keyed on the current target
  (the nest while carrying, food otherwise):

  1. target directly sensed -> turn toward it;
  2. matching trail sensed -> turn toward the strongest signal;
  3. nothing usable -> random turn within ``max_turn_angle``.

- **Combat**: an enemy closer than ``engagement_radius`` overrides the
  steering result, whatever the tier.
- **Attack intent** is raised every tick; the host's combat resolver
  ignores it when there is no valid target.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pherobrain.brain.decision import AgentDecision
from pherobrain.pheromones.channels import PheromoneChannel
from pherobrain.simulation.config import PolicyConfig

if TYPE_CHECKING:
    from numpy.random import Generator

    from pherobrain.brain.memory import AgentMemory
    from pherobrain.colony.configuration import ColonyConfiguration
    from pherobrain.sensing.observation import AgentObservation

logger = logging.getLogger(__name__)


class Brain(ABC):
    """Interface every colony brain implements."""

    @abstractmethod
    def setup(self, configuration: ColonyConfiguration) -> None:
        """Populate every decay rate of ``configuration`` in place."""

    @abstractmethod
    def update(
        self,
        observation: AgentObservation,
        memory: AgentMemory,
    ) -> AgentDecision:
        """Decide one ant's action for the current think tick.

        ``observation`` is read-only.  ``memory`` belongs to this ant
        alone and may be rewritten in place to carry state to its next
        tick.
        """


@dataclass
class DefaultBrain(Brain):
    """Reactive forager: follow targets, then trails, then wander.

    Attributes:
        config: Tunables (deposit amount, engagement radius, turn range,
            decay rates).
        rng: Exploration random source.  Built from ``config.seed`` when
            not supplied, so tests can inject a seeded generator.
    """

    config: PolicyConfig = field(default_factory=PolicyConfig)
    rng: Generator | None = None

    def __post_init__(self) -> None:
        """Create the exploration RNG if none was injected."""
        if self.rng is None:
            self.rng = self.config.make_rng()

    def setup(self, configuration: ColonyConfiguration) -> None:
        """Write the configured decay rate for every channel.

        Channels without a configured rate get ``reserved_decay_rate``,
        so no channel is left at whatever the host pre-filled.
        """
        for channel, rate in self.config.channel_decay_rates().items():
            configuration.set_rate(channel, rate)
        summary = ", ".join(
            f"{channel.name.lower()}={configuration.rate(channel):.3f}"
            for channel in PheromoneChannel
        )
        logger.info("colony decay rates: %s", summary)

    def update(
        self,
        observation: AgentObservation,
        memory: AgentMemory,
    ) -> AgentDecision:
        """Run the laying, steering, combat and attack rules for one tick."""
        decision = AgentDecision()
        decision.lay(self._trail_to_lay(observation), self.config.deposit_amount)
        decision.turn_angle = self._steer(observation)

        enemy = observation.enemy_sense
        if enemy.is_within(self.config.engagement_radius):
            logger.debug(
                "enemy at angle %.3f, distance %.2f: overriding turn",
                enemy.angle,
                enemy.distance,
            )
            decision.turn_angle = enemy.angle

        decision.try_attack = True
        return decision

    # -- Private decision steps --

    @staticmethod
    def _trail_to_lay(observation: AgentObservation) -> PheromoneChannel:
        """Carriers mark the way home, searchers mark the way to food."""
        if observation.is_carrying_food:
            return PheromoneChannel.TO_COLONY
        return PheromoneChannel.TO_FOOD

    def _steer(self, observation: AgentObservation) -> float:
        """Pick a turn from the target / trail / wander chain."""
        if observation.is_carrying_food:
            target = observation.colony_sense
            trail = observation.pheromone(PheromoneChannel.TO_COLONY)
        else:
            target = observation.food_sense
            trail = observation.pheromone(PheromoneChannel.TO_FOOD)

        if target.is_detected:
            return target.angle
        if trail.has_signal:
            return trail.angle
        return self._explore()

    def _explore(self) -> float:
        """Uniform random turn in ``[-max_turn_angle, max_turn_angle]``."""
        limit = self.config.max_turn_angle
        return float(self.rng.uniform(-limit, limit))
