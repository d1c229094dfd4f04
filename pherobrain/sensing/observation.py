"""Observation — what an ant perceives during one think tick.

The host computes these values by sampling the ant's forward arc and
hands them over read-only.  Directional senses use a sentinel distance
of ``-1.0`` when nothing was detected; pheromone senses have no
sentinel, a strength of zero simply means "no signal".
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

import numpy as np
from numpy.typing import NDArray

from pherobrain.pheromones.channels import CHANNEL_COUNT, PheromoneChannel

SENTINEL_DISTANCE = -1.0
MAX_LONGEVITY = 300.0


@dataclass(frozen=True)
class SensedDirection:
    """Most salient detection of one entity type in the sensing arc.

    Attributes:
        angle: Relative angle in radians, counter-clockwise positive.
            Only meaningful when :attr:`is_detected` is True.
        distance: Distance in grid units, or ``SENTINEL_DISTANCE``.
    """

    angle: float = 0.0
    distance: float = SENTINEL_DISTANCE

    @property
    def is_detected(self) -> bool:
        """Return True if the host reported a real detection."""
        return self.distance >= 0.0

    def is_within(self, radius: float) -> bool:
        """Return True if detected strictly closer than ``radius``."""
        return self.is_detected and self.distance < radius


@dataclass(frozen=True)
class PheromoneChannelSense:
    """Pheromone reading for a single channel.

    Attributes:
        angle: Relative angle to the strongest in-arc signal.
        strength: Strength of that signal (0 = nothing sensed).
        cell_strength: Strength of the channel in the ant's own cell.
    """

    angle: float = 0.0
    strength: float = 0.0
    cell_strength: float = 0.0

    @property
    def has_signal(self) -> bool:
        """Return True if an in-arc signal was sensed."""
        return self.strength > 0.0


def _blank_pheromones() -> tuple[PheromoneChannelSense, ...]:
    return tuple(PheromoneChannelSense() for _ in range(CHANNEL_COUNT))


@dataclass(frozen=True)
class AgentObservation:
    """Snapshot of one ant's state and senses for one tick.

    Attributes:
        is_carrying_food: Whether the ant holds a piece of food.
        is_on_colony: Whether the ant stands on its own nest.
        is_on_food: Whether the ant stands on a food cell.
        pheromone_senses: One :class:`PheromoneChannelSense` per channel.
        wall_sense: Nearest wall segment in the arc.
        food_sense: Nearest food in the arc.
        colony_sense: Own nest, if within range and not occluded.
        enemy_sense: Nearest enemy in the cell or the arc.
        longevity: Remaining lifespan, doubling as health.
        is_fighting: Whether the ant is engaged in combat.
    """

    is_carrying_food: bool = False
    is_on_colony: bool = False
    is_on_food: bool = False
    pheromone_senses: tuple[PheromoneChannelSense, ...] = field(
        default_factory=_blank_pheromones,
    )
    wall_sense: SensedDirection = field(default_factory=SensedDirection)
    food_sense: SensedDirection = field(default_factory=SensedDirection)
    colony_sense: SensedDirection = field(default_factory=SensedDirection)
    enemy_sense: SensedDirection = field(default_factory=SensedDirection)
    longevity: float = MAX_LONGEVITY
    is_fighting: bool = False

    def __post_init__(self) -> None:
        """Normalise pheromone senses to a tuple of the right length."""
        senses = tuple(self.pheromone_senses)
        if len(senses) != CHANNEL_COUNT:
            msg = f"expected {CHANNEL_COUNT} pheromone senses, got {len(senses)}"
            raise ValueError(msg)
        object.__setattr__(self, "pheromone_senses", senses)

    @classmethod
    def blank(cls) -> AgentObservation:
        """Return an observation with nothing sensed and full longevity."""
        return cls()

    def pheromone(self, channel: PheromoneChannel | int) -> PheromoneChannelSense:
        """Return the sense for one channel."""
        return self.pheromone_senses[int(channel)]

    @property
    def cell_sense(self) -> NDArray[np.float64]:
        """Cell-local strength of every channel, indexed by channel."""
        return np.array(
            [sense.cell_strength for sense in self.pheromone_senses],
            dtype=np.float64,
        )

    def with_pheromone(
        self,
        channel: PheromoneChannel | int,
        sense: PheromoneChannelSense,
    ) -> AgentObservation:
        """Return a copy with one channel's sense replaced."""
        senses = list(self.pheromone_senses)
        senses[int(channel)] = sense
        return replace(self, pheromone_senses=tuple(senses))
