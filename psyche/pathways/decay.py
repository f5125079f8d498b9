"""
Exponential decay and its approximate inverse.

    decayed   = offset * (0.5 ^ (elapsed / half_life))
    regressed = offset * exp(ln2 * elapsed / half_life)
"""

import logging
import math
from typing import Optional

from psyche.pathways.config import EvolutionConfig

logger = logging.getLogger(__name__)


def get_decayed_offset(
    offset: float,
    elapsed_seconds: float,
    half_life_seconds: Optional[float]
) -> float:
    """
    Compute an offset after exponential decay.

    Shrinks |offset| monotonically and never flips its sign.

    Args:
        offset: Current offset
        elapsed_seconds: Time elapsed; zero or negative is a no-op
        half_life_seconds: Half-life in seconds; None means no decay

    Returns:
        Decayed offset
    """
    if elapsed_seconds <= 0 or half_life_seconds is None:
        return offset
    decay_factor = 0.5 ** (elapsed_seconds / half_life_seconds)
    return offset * decay_factor


def get_regressed_offset(
    offset: float,
    elapsed_seconds: float,
    half_life_seconds: Optional[float],
    guards: EvolutionConfig
) -> Optional[float]:
    """
    Estimate an offset as it was `elapsed_seconds` earlier.

    Args:
        offset: Current offset
        elapsed_seconds: Time to go back; zero or negative is a no-op
        half_life_seconds: Half-life in seconds; None means no decay
        guards: Epsilon, overflow exponent limit and result bound

    Returns:
        The earlier offset clamped to +/- reversal_bound, or None when
        the offset should be left unchanged (negligible, non-decaying,
        or the exponent would overflow)
    """
    if elapsed_seconds <= 0 or half_life_seconds is None or half_life_seconds <= 0:
        return None
    if abs(offset) <= guards.epsilon:
        return None

    exponent = math.log(2) * elapsed_seconds / half_life_seconds
    if exponent > guards.max_reversal_exponent:
        logger.debug(
            "Skipping decay reversal: exponent %.1f exceeds %.1f",
            exponent, guards.max_reversal_exponent
        )
        return None

    earlier = offset * math.exp(exponent)
    return max(-guards.reversal_bound, min(guards.reversal_bound, earlier))
