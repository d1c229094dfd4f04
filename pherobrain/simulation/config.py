"""Config — load brain tunables from YAML files.

Deposit amounts, the combat engagement radius, the exploration turn
range and per-channel decay rates live in YAML and are parsed into a
typed dataclass here, so strategies can be tuned without code changes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np
import yaml
from numpy.random import Generator

from pherobrain.pheromones.channels import PheromoneChannel


def _default_decay_rates() -> dict[str, float]:
    return {"to_colony": 0.99, "to_food": 0.9}


@dataclass
class PolicyConfig:
    """Tunable parameters of the default brain.

    Attributes:
        seed: Seed for the exploration RNG.  ``None`` draws fresh entropy.
        deposit_amount: Pheromone laid per think tick.
        engagement_radius: Enemies strictly closer than this are charged.
        max_turn_angle: Half-width of the random exploration turn (radians).
        decay_rates: Channel name to retained fraction per unit time.
            Channels not listed get ``reserved_decay_rate``.
        reserved_decay_rate: Decay rate for channels without an entry.
    """

    seed: int | None = None
    deposit_amount: float = 5.0
    engagement_radius: float = 5.0
    max_turn_angle: float = math.pi / 4.0
    decay_rates: dict[str, float] = field(default_factory=_default_decay_rates)
    reserved_decay_rate: float = 0.9

    def __post_init__(self) -> None:
        """Validate tunables so a loaded config can always be applied.

        Raises:
            ValueError: If a rate is outside ``[0, 1]``, a channel name is
                unknown, ``deposit_amount`` is not positive or
                ``max_turn_angle`` is negative.
        """
        if self.decay_rates is None:
            self.decay_rates = _default_decay_rates()
        if not self.deposit_amount > 0.0:
            msg = f"deposit_amount must be positive, got {self.deposit_amount}"
            raise ValueError(msg)
        if not self.max_turn_angle >= 0.0:
            msg = f"max_turn_angle must be >= 0, got {self.max_turn_angle}"
            raise ValueError(msg)
        _check_rate("reserved_decay_rate", self.reserved_decay_rate)

        resolved: dict[str, float] = {}
        for name, rate in self.decay_rates.items():
            try:
                channel = PheromoneChannel.from_name(name)
            except KeyError:
                msg = f"unknown pheromone channel {name!r} in decay_rates"
                raise ValueError(msg) from None
            if rate is None:
                msg = f"decay rate for {name!r} is missing"
                raise ValueError(msg)
            _check_rate(name, float(rate))
            resolved[channel.name.lower()] = float(rate)
        self.decay_rates = resolved

    @classmethod
    def from_yaml(cls, path: str | Path) -> PolicyConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated PolicyConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If a value fails validation.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        return cls(
            seed=data.get("seed"),
            deposit_amount=data.get("deposit_amount", cls.deposit_amount),
            engagement_radius=data.get(
                "engagement_radius",
                cls.engagement_radius,
            ),
            max_turn_angle=data.get("max_turn_angle", cls.max_turn_angle),
            decay_rates=data.get("decay_rates", _default_decay_rates()),
            reserved_decay_rate=data.get(
                "reserved_decay_rate",
                cls.reserved_decay_rate,
            ),
        )

    def make_rng(self) -> Generator:
        """Build the exploration random generator from ``seed``."""
        return np.random.default_rng(self.seed)

    def channel_decay_rates(self) -> dict[PheromoneChannel, float]:
        """Resolve ``decay_rates`` to a rate for every channel.

        Entries were validated on construction, so this cannot fail.
        """
        rates = {channel: self.reserved_decay_rate for channel in PheromoneChannel}
        for name, rate in self.decay_rates.items():
            rates[PheromoneChannel.from_name(name)] = float(rate)
        return rates


def _check_rate(name: str, rate: float) -> None:
    if not 0.0 <= rate <= 1.0:
        msg = f"{name} decay rate must lie in [0, 1], got {rate}"
        raise ValueError(msg)
