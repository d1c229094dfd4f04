"""PheromoneChannel — the eight trail fields an ant can sense and lay.

Only the first two channels carry meaning for the default brain.  The
remaining six are reserved for richer strategies; they keep their
numeric indices so decisions line up with the host's channel arrays.
"""

from __future__ import annotations

from enum import IntEnum

CHANNEL_COUNT = 8
MAX_PHEROMONE_AMOUNT = 255.0


class PheromoneChannel(IntEnum):
    """Pheromone channels, indexed as the host indexes its layers."""

    TO_COLONY = 0
    TO_FOOD = 1
    RESERVED_2 = 2
    RESERVED_3 = 3
    RESERVED_4 = 4
    RESERVED_5 = 5
    RESERVED_6 = 6
    RESERVED_7 = 7

    @property
    def is_reserved(self) -> bool:
        """Return True for channels the default brain never uses."""
        return self not in (PheromoneChannel.TO_COLONY, PheromoneChannel.TO_FOOD)

    @classmethod
    def from_name(cls, name: str) -> PheromoneChannel:
        """Look up a channel by its lower-case config name.

        Args:
            name: Channel name such as ``"to_colony"`` or ``"reserved_4"``.

        Raises:
            KeyError: If no channel has that name.
        """
        name_map: dict[str, PheromoneChannel] = {ch.name.lower(): ch for ch in cls}
        try:
            return name_map[name.lower()]
        except KeyError:
            msg = f"unknown pheromone channel {name!r}"
            raise KeyError(msg) from None
