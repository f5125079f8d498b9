"""
Shared builders for pathways tests.

Provides utilities to build templates, interpreted events and states with
exact offsets, without touching the global template registry.
"""

from typing import Dict, Optional, Tuple

from psyche.pathways.core import (
    AppliedDeltas,
    DecayingValue,
    DIMENSIONS,
    DimensionImpact,
    DimensionVector,
    Event,
    HABITUATION,
    ImpactTemplate,
    Personality,
)
from psyche.pathways.interpretation import InterpretedEvent, interpret_event
from psyche.pathways.state import IndividualState

# Arbitrary but varied authored rows used across property tests.
SAMPLE_ROWS: Dict[str, Tuple[float, float, bool]] = {
    dim: (
        round(((i * 37) % 19 - 9) / 10.0, 2),   # raw_impact in [-0.9, 0.9]
        round(((i * 11) % 10) / 10.0, 2),        # permanence in [0, 0.9]
        i % 3 == 0,                              # is_chronic
    )
    for i, dim in enumerate(DIMENSIONS)
}
SAMPLE_ROWS[HABITUATION] = (0.6, 0.2, True)


# =============================================================================
# TEMPLATE BUILDERS
# =============================================================================

def make_template(
    rows: Optional[Dict[str, Tuple[float, float, bool]]] = None,
    event_type: str = "test.custom"
) -> ImpactTemplate:
    """
    Build a template from dimension -> (raw_impact, permanence, is_chronic).

    Args:
        rows: Rows per dimension (default: SAMPLE_ROWS)
        event_type: Event type name for the template
    """
    rows = SAMPLE_ROWS if rows is None else rows
    return ImpactTemplate(
        event_type=event_type,
        dimensions={
            dim: DimensionImpact(raw_impact=raw, permanence=perm, is_chronic=chronic)
            for dim, (raw, perm, chronic) in rows.items()
        },
    )


def make_event(
    rows: Optional[Dict[str, Tuple[float, float, bool]]] = None,
    severity: float = 0.8,
    source: Optional[str] = None,
) -> Event:
    """Build an ad hoc event carrying its own template."""
    template = make_template(rows)
    return Event(
        event_type=template.event_type,
        severity=severity,
        source=source,
        template=template,
    )


def interpret_neutral(event: Event, current_arousal: float = 0.0) -> InterpretedEvent:
    """Interpret with an all-zero personality (emotionality factor 1)."""
    return interpret_event(event, Personality(), current_arousal)


def interpreted_from_deltas(deltas: AppliedDeltas) -> InterpretedEvent:
    """Wrap raw deltas in an InterpretedEvent for evolution tests."""
    event = make_event({})
    base = interpret_neutral(event)
    return InterpretedEvent(
        event=base.event,
        attribution=base.attribution,
        deltas=deltas,
        valence_delta=deltas.total("valence"),
        arousal_delta=deltas.total("arousal"),
        dominance_delta=deltas.total("dominance"),
        loneliness_delta=deltas.total("loneliness"),
        prc_delta=deltas.total("prc"),
        perceived_liability_delta=deltas.total("perceived_liability"),
        self_hate_delta=deltas.total("self_hate"),
        acquired_capability_delta=deltas.total(HABITUATION),
        interpersonal_hopelessness_delta=deltas.total("interpersonal_hopelessness"),
        salience=base.salience,
        perceived_severity=base.perceived_severity,
        memory_salience=base.memory_salience,
    )


# =============================================================================
# STATE SEEDING
# =============================================================================

def seed_offsets(
    state: IndividualState,
    dimension: str,
    fast: float = 0.0,
    slow: float = 0.0,
    base: Optional[float] = None
) -> IndividualState:
    """Return a copy of state with exact offsets on one dimension."""
    current = state.value(dimension)
    return state.with_value(dimension, DecayingValue(
        base=current.base if base is None else base,
        fast_offset=fast,
        slow_offset=slow,
    ))


def seed_all_offsets(state: IndividualState, fast: float, slow: float) -> IndividualState:
    """Seed the same offsets on every decaying dimension."""
    for dim in DIMENSIONS:
        if dim != HABITUATION:
            state = seed_offsets(state, dim, fast=fast, slow=slow)
    return state


def single_dimension_deltas(
    dimension: str,
    permanent: float = 0.0,
    acute: float = 0.0,
    chronic: float = 0.0
) -> AppliedDeltas:
    return AppliedDeltas(
        permanent=DimensionVector.from_mapping({dimension: permanent}),
        acute=DimensionVector.from_mapping({dimension: acute}),
        chronic=DimensionVector.from_mapping({dimension: chronic}),
    )
