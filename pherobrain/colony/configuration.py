"""ColonyConfiguration — per-channel pheromone decay rates for a colony.

Written once by the brain's ``setup`` call before the simulation starts,
then owned by the host's decay subsystem.  A rate is the fraction of
pheromone strength that *remains* after one unit of simulated time:
1.0 never decays, 0.0 vanishes within one interval.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from pherobrain.pheromones.channels import CHANNEL_COUNT, PheromoneChannel

# Rate the host uses for any channel before setup runs.
DEFAULT_DECAY_RATE = 0.9


def _default_rates() -> NDArray[np.float64]:
    return np.full(CHANNEL_COUNT, DEFAULT_DECAY_RATE, dtype=np.float64)


@dataclass
class ColonyConfiguration:
    """Decay rates for all pheromone channels of one colony.

    Attributes:
        decay_rates: One retained-fraction per channel, each in ``[0, 1]``.
    """

    decay_rates: NDArray[np.float64] = field(default_factory=_default_rates)

    def __post_init__(self) -> None:
        """Coerce rates to a float array and validate them."""
        rates = np.asarray(self.decay_rates, dtype=np.float64)
        if rates.shape != (CHANNEL_COUNT,):
            msg = f"expected {CHANNEL_COUNT} decay rates, got shape {rates.shape}"
            raise ValueError(msg)
        self.decay_rates = rates.copy()
        for channel in PheromoneChannel:
            _check_rate(float(self.decay_rates[channel]))

    def set_rate(self, channel: PheromoneChannel | int, rate: float) -> None:
        """Set the decay rate of a single channel.

        Args:
            channel: Channel to configure.
            rate: Fraction retained per unit time.

        Raises:
            ValueError: If ``rate`` is outside ``[0, 1]``.
        """
        _check_rate(rate)
        self.decay_rates[int(channel)] = rate

    def rate(self, channel: PheromoneChannel | int) -> float:
        """Return the decay rate of a single channel."""
        return float(self.decay_rates[int(channel)])

    def decay(
        self,
        strength: float,
        channel: PheromoneChannel | int,
        elapsed: float = 1.0,
    ) -> float:
        """Return ``strength`` after ``elapsed`` time units of decay.

        Args:
            strength: Current pheromone strength.
            channel: Channel whose rate applies.
            elapsed: Simulated time in decay intervals.
        """
        return strength * self.rate(channel) ** elapsed


def _check_rate(rate: float) -> None:
    if not 0.0 <= rate <= 1.0:
        msg = f"decay rate must lie in [0, 1], got {rate}"
        raise ValueError(msg)
