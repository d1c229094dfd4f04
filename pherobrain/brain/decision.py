"""AgentDecision — what an ant wants to do this tick."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from pherobrain.pheromones.channels import CHANNEL_COUNT, PheromoneChannel


def _no_deposits() -> NDArray[np.float64]:
    return np.zeros(CHANNEL_COUNT, dtype=np.float64)


@dataclass
class AgentDecision:
    """Output of one brain update.

    Attributes:
        turn_angle: Relative turn in radians, counter-clockwise positive.
        pheromone_amounts: Amount to lay in the current cell, per channel.
        try_attack: Whether the ant intends to attack.
    """

    turn_angle: float = 0.0
    pheromone_amounts: NDArray[np.float64] = field(default_factory=_no_deposits)
    try_attack: bool = False

    def lay(self, channel: PheromoneChannel | int, amount: float) -> None:
        """Set the deposit amount for one channel."""
        self.pheromone_amounts[int(channel)] = amount

    @property
    def laid_channels(self) -> list[PheromoneChannel]:
        """Channels that receive a non-zero deposit."""
        nonzero = np.flatnonzero(self.pheromone_amounts)
        return [PheromoneChannel(int(i)) for i in nonzero]
