"""
State evolution: pure functions over IndividualState.

    advance_state              decay offsets forward in time
    apply_interpreted_event    route an event's buckets into the state
    regress_state              approximately undo decay
    reverse_interpreted_event  undo an event's temporary buckets (same instant only)

advance_state and apply_interpreted_event do not commute; one individual's
evolutions must be applied in timestamp order by the caller.
"""

import logging
from typing import Iterable, Optional, Tuple

from psyche.pathways.config import PathwaysConfig, get_config
from psyche.pathways.core import (
    DECAYING_DIMENSIONS,
    DecayingValue,
    HABITUATION,
)
from psyche.pathways.decay import get_decayed_offset, get_regressed_offset
from psyche.pathways.interpretation import InterpretedEvent
from psyche.pathways.state import IndividualState

logger = logging.getLogger(__name__)


# =============================================================================
# TIME
# =============================================================================

def advance_state(
    state: IndividualState,
    elapsed_seconds: float,
    config: Optional[PathwaysConfig] = None
) -> IndividualState:
    """
    Advance state forward in time by decaying every offset.

    Bases and habituation are untouched. Zero elapsed time is a no-op.

    Args:
        state: Starting state (not modified)
        elapsed_seconds: Time to advance
        config: Configuration for half-lives; defaults to the active one

    Returns:
        New state with decay applied
    """
    if elapsed_seconds <= 0:
        return state
    config = config or get_config()

    updated = {}
    for dim in DECAYING_DIMENSIONS:
        value = state.value(dim)
        dim_config = config.dimension(dim)
        updated[dim] = DecayingValue(
            base=value.base,
            fast_offset=get_decayed_offset(
                value.fast_offset, elapsed_seconds, dim_config.fast_half_life_seconds
            ),
            slow_offset=get_decayed_offset(
                value.slow_offset, elapsed_seconds, dim_config.slow_half_life_seconds
            ),
        )
    return state.with_values(updated)


def regress_state(
    state: IndividualState,
    elapsed_seconds: float,
    config: Optional[PathwaysConfig] = None
) -> IndividualState:
    """
    Regress state backward in time by reversing decay.

    Approximate inverse of advance_state. Each offset is regressed with its
    own half-life; offsets that are negligible, or whose reversal would
    overflow, are left unchanged. Bases and habituation never regress.

    Args:
        state: Current state (not modified)
        elapsed_seconds: Time to go back
        config: Configuration for half-lives and numeric guards

    Returns:
        New state with decay reversed where possible
    """
    if elapsed_seconds <= 0:
        return state
    config = config or get_config()
    guards = config.evolution

    updated = {}
    for dim in DECAYING_DIMENSIONS:
        value = state.value(dim)
        dim_config = config.dimension(dim)

        fast = get_regressed_offset(
            value.fast_offset, elapsed_seconds, dim_config.fast_half_life_seconds, guards
        )
        slow = get_regressed_offset(
            value.slow_offset, elapsed_seconds, dim_config.slow_half_life_seconds, guards
        )
        if fast is None and slow is None:
            continue

        updated[dim] = DecayingValue(
            base=value.base,
            fast_offset=value.fast_offset if fast is None else fast,
            slow_offset=value.slow_offset if slow is None else slow,
        )
    if not updated:
        return state
    return state.with_values(updated)


# =============================================================================
# EVENTS
# =============================================================================

def apply_interpreted_event(
    state: IndividualState,
    interpreted: InterpretedEvent,
    config: Optional[PathwaysConfig] = None
) -> IndividualState:
    """
    Apply an interpreted event's buckets to state.

    permanent -> base (irreversible), acute -> fast offset,
    chronic -> slow offset. Contributions within epsilon of zero are skipped.
    Habituation only ever takes positive permanent contributions.

    Args:
        state: Current state (not modified)
        interpreted: The interpreted event

    Returns:
        New state with the event applied
    """
    config = config or get_config()
    eps = config.evolution.epsilon
    deltas = interpreted.deltas

    updated = {}

    habituation = deltas.permanent.get(HABITUATION)
    if habituation > eps:
        updated[HABITUATION] = state.value(HABITUATION).shift_base(habituation)
    elif habituation < -eps:
        logger.debug(
            "Ignoring negative habituation contribution %.4f from %s",
            habituation, interpreted.event.event_type
        )

    for dim in DECAYING_DIMENSIONS:
        value = state.value(dim)
        permanent = deltas.permanent.get(dim)
        acute = deltas.acute.get(dim)
        chronic = deltas.chronic.get(dim)

        if abs(permanent) > eps:
            value = value.shift_base(permanent)
        if abs(acute) > eps:
            value = value.add_fast_offset(acute)
        if abs(chronic) > eps:
            value = value.add_slow_offset(chronic)

        if value is not state.value(dim):
            updated[dim] = value

    if not updated:
        return state
    return state.with_values(updated)


def reverse_interpreted_event(
    state: IndividualState,
    interpreted: InterpretedEvent,
    config: Optional[PathwaysConfig] = None
) -> IndividualState:
    """
    Subtract an event's acute and chronic buckets from the offsets.

    Permanent shifts and habituation are never reversed. Exact only when
    no advance_state happened since the matching apply_interpreted_event;
    undoing an event at a later time requires replaying history instead.

    Args:
        state: Current state (not modified)
        interpreted: The interpreted event previously applied

    Returns:
        New state with the temporary buckets removed
    """
    config = config or get_config()
    eps = config.evolution.epsilon
    deltas = interpreted.deltas

    updated = {}
    for dim in DECAYING_DIMENSIONS:
        value = state.value(dim)
        acute = deltas.acute.get(dim)
        chronic = deltas.chronic.get(dim)

        if abs(acute) > eps:
            value = value.add_fast_offset(-acute)
        if abs(chronic) > eps:
            value = value.add_slow_offset(-chronic)

        if value is not state.value(dim):
            updated[dim] = value

    if not updated:
        return state
    return state.with_values(updated)


# =============================================================================
# REPLAY
# =============================================================================

def state_at(
    initial: IndividualState,
    history: Iterable[Tuple[float, InterpretedEvent]],
    at: float,
    start: Optional[float] = None,
    config: Optional[PathwaysConfig] = None
) -> IndividualState:
    """
    Replay an ordered event history to get the state at a point in time.

    Args:
        initial: State at `start`, before any event in history
        history: (timestamp, interpreted event) pairs in timestamp order
        at: Query time in seconds
        start: Time `initial` refers to; defaults to the first event's time
        config: Configuration; defaults to the active one

    Returns:
        State at `at`. Events after `at` are ignored; a query before
        `start` (or before the first event when `start` is omitted)
        regresses the initial state.

    Raises:
        ValueError: If history is out of order or precedes `start`
    """
    config = config or get_config()
    history = list(history)

    if start is None and history:
        start = history[0][0]
    if start is not None and at < start:
        return regress_state(initial, start - at, config)

    state = initial
    current = start
    for timestamp, interpreted in history:
        if current is not None and timestamp < current:
            raise ValueError(
                f"History out of order: event at {timestamp} follows time {current}"
            )
        if timestamp > at:
            break
        if current is not None:
            state = advance_state(state, timestamp - current, config)
        state = apply_interpreted_event(state, interpreted, config)
        current = timestamp

    if current is None:
        return state
    return advance_state(state, at - current, config)
