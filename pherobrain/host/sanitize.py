"""Clamp brain output into the ranges the simulation accepts."""

from __future__ import annotations

import logging
import math

import numpy as np

from pherobrain.brain.decision import AgentDecision
from pherobrain.pheromones.channels import CHANNEL_COUNT, MAX_PHEROMONE_AMOUNT

logger = logging.getLogger(__name__)


def sanitize_decision(
    decision: AgentDecision,
    *,
    agent_id: object = None,
) -> AgentDecision:
    """Return a copy of ``decision`` that the host can apply safely.

    - NaN deposit amounts become 0, the rest are clamped to
      ``[0, MAX_PHEROMONE_AMOUNT]``.
    - A NaN or infinite turn angle becomes 0 (no rotation); any other
      angle is wrapped into ``[0, 2*pi)``.

    Args:
        decision: Raw brain output.
        agent_id: Used only to label warnings.

    Returns:
        A new AgentDecision; the input is left untouched.

    Raises:
        ValueError: If ``pheromone_amounts`` does not hold one entry per
            channel.
    """
    amounts = np.asarray(decision.pheromone_amounts, dtype=np.float64).copy()
    if amounts.shape != (CHANNEL_COUNT,):
        msg = f"expected {CHANNEL_COUNT} pheromone amounts, got shape {amounts.shape}"
        raise ValueError(msg)
    nan_mask = np.isnan(amounts)
    for channel in np.flatnonzero(nan_mask):
        logger.warning(
            "agent %s: NaN pheromone amount on channel %d, using 0.0",
            agent_id,
            channel,
        )
    amounts[nan_mask] = 0.0
    np.clip(amounts, 0.0, MAX_PHEROMONE_AMOUNT, out=amounts)

    turn = float(decision.turn_angle)
    if not math.isfinite(turn):
        logger.warning("agent %s: non-finite turn angle, using 0.0", agent_id)
        turn = 0.0
    else:
        turn %= math.tau
        if turn >= math.tau:
            turn = 0.0

    return AgentDecision(
        turn_angle=turn,
        pheromone_amounts=amounts,
        try_attack=bool(decision.try_attack),
    )
