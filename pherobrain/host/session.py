"""BrainSession — binds one brain to one colony for a whole game.

The session enforces the call contract the simulation relies on:

1. ``configure`` runs the brain's setup exactly once, before any tick.
2. ``spawn`` gives each new ant a zero-filled memory buffer.
3. ``think`` runs one update for one ant, with that ant's memory, and
   sanitises the result.  Calls for the same ant never overlap.
4. ``despawn`` drops the ant's memory when it dies.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pherobrain.brain.memory import AgentMemory
from pherobrain.colony.configuration import ColonyConfiguration
from pherobrain.host.sanitize import sanitize_decision

if TYPE_CHECKING:
    from pherobrain.brain.decision import AgentDecision
    from pherobrain.brain.policy import Brain
    from pherobrain.sensing.observation import AgentObservation

logger = logging.getLogger(__name__)


class SessionError(Exception):
    """Base class for host-side contract violations."""


class ConfigurationError(SessionError):
    """Raised when colony setup is requested more than once."""


class AgentError(SessionError):
    """Raised for unknown, duplicate or re-entrant agents."""


@dataclass
class BrainSession:
    """Host-side wrapper around one colony's brain.

    Attributes:
        brain: The brain making every decision for this colony.
        configuration: Decay rates, available after :meth:`configure`.
        memories: Live ants' memory buffers, keyed by agent id.
    """

    brain: Brain
    configuration: ColonyConfiguration | None = field(init=False, default=None)
    memories: dict[Hashable, AgentMemory] = field(init=False, default_factory=dict)
    _thinking: set[Hashable] = field(init=False, default_factory=set, repr=False)

    def configure(self) -> ColonyConfiguration:
        """Run the brain's setup once and return the decay configuration.

        Raises:
            ConfigurationError: If the colony was already configured.
        """
        if self.configuration is not None:
            msg = "colony already configured"
            raise ConfigurationError(msg)
        configuration = ColonyConfiguration()
        self.brain.setup(configuration)
        self.configuration = configuration
        return configuration

    def spawn(self, agent_id: Hashable) -> AgentMemory:
        """Allocate zeroed memory for a newly spawned ant.

        Raises:
            AgentError: If ``agent_id`` is already alive.
        """
        if agent_id in self.memories:
            msg = f"agent {agent_id!r} already spawned"
            raise AgentError(msg)
        memory = AgentMemory()
        self.memories[agent_id] = memory
        logger.debug("spawned agent %r", agent_id)
        return memory

    def despawn(self, agent_id: Hashable) -> None:
        """Destroy a dead ant's memory.

        Raises:
            AgentError: If ``agent_id`` is unknown or mid-update.
        """
        if agent_id in self._thinking:
            msg = f"agent {agent_id!r} is still thinking"
            raise AgentError(msg)
        if self.memories.pop(agent_id, None) is None:
            msg = f"unknown agent {agent_id!r}"
            raise AgentError(msg)
        logger.debug("despawned agent %r", agent_id)

    def think(
        self,
        agent_id: Hashable,
        observation: AgentObservation,
    ) -> AgentDecision:
        """Run one think tick for one ant.

        Args:
            agent_id: A spawned ant.
            observation: This tick's senses for that ant.

        Returns:
            The sanitised decision.

        Raises:
            AgentError: If the ant is unknown or already mid-update.
        """
        memory = self.memories.get(agent_id)
        if memory is None:
            msg = f"unknown agent {agent_id!r}"
            raise AgentError(msg)
        if agent_id in self._thinking:
            msg = f"agent {agent_id!r} is already thinking"
            raise AgentError(msg)

        self._thinking.add(agent_id)
        try:
            decision = self.brain.update(observation, memory)
        finally:
            self._thinking.discard(agent_id)
        return sanitize_decision(decision, agent_id=agent_id)

    @property
    def population(self) -> int:
        """Number of ants currently holding memory."""
        return len(self.memories)
