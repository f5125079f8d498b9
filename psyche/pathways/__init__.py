"""
Pathways - temporal psychological state core.

Answers "what is this individual's psychological state at time t?" from a
stream of life events. Each event's impact is split into a permanent base
shift, a fast-decaying offset and a slow-decaying offset; habituation
(acquired capability) never decays.
"""

from psyche.pathways.core import (
    AppliedDeltas,
    Attribution,
    AttributionKind,
    AttributionStability,
    DecayingValue,
    DimensionImpact,
    DimensionVector,
    DIMENSIONS,
    Event,
    HABITUATION,
    HabituationValue,
    ImpactTemplate,
    Personality,
    Species,
)
from psyche.pathways.impact import apply_template
from psyche.pathways.interpretation import (
    InterpretedEvent,
    interpret_event,
)
from psyche.pathways.salience import compute_arousal_modulated_salience
from psyche.pathways.state import IndividualState
from psyche.pathways.evolution import (
    advance_state,
    apply_interpreted_event,
    regress_state,
    reverse_interpreted_event,
    state_at,
)
from psyche.pathways.templates import (
    get_template,
    register_template,
    TemplateValidationError,
    UnknownEventTypeError,
)

__all__ = [
    # Core data structures
    "AppliedDeltas",
    "Attribution",
    "AttributionKind",
    "AttributionStability",
    "DecayingValue",
    "DimensionImpact",
    "DimensionVector",
    "DIMENSIONS",
    "Event",
    "HABITUATION",
    "HabituationValue",
    "ImpactTemplate",
    "Personality",
    "Species",
    # Impact application
    "apply_template",
    # Interpretation
    "InterpretedEvent",
    "interpret_event",
    "compute_arousal_modulated_salience",
    # State evolution
    "IndividualState",
    "advance_state",
    "apply_interpreted_event",
    "regress_state",
    "reverse_interpreted_event",
    "state_at",
    # Templates
    "get_template",
    "register_template",
    "TemplateValidationError",
    "UnknownEventTypeError",
]
