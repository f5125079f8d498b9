"""
Event interpretation.

Wraps impact application with personality modulation, attribution
inference and salience scoring. The resulting InterpretedEvent feeds
state evolution and, outside this package, memory formation.
"""

from dataclasses import dataclass, replace
from typing import Callable, Optional

from psyche.pathways.config import get_config
from psyche.pathways.core import (
    AppliedDeltas,
    Attribution,
    AttributionKind,
    AttributionStability,
    Event,
    HABITUATION,
    ImpactTemplate,
    Personality,
    Species,
)
from psyche.pathways.impact import apply_template
from psyche.pathways.salience import compute_arousal_modulated_salience
from psyche.pathways.templates import get_template

# (base_salience, combined_arousal, valence, is_trauma, species) -> [0, 1]
SalienceFunction = Callable[[float, float, float, bool, Species], float]

# Dimensions modulated by emotionality.
MODULATED_DIMENSIONS = ("valence", "arousal")


@dataclass(frozen=True)
class InterpretedEvent:
    """
    An event as experienced by one individual.

    `deltas` carries the bucketed impact; the *_delta fields are per-dimension
    totals across buckets, kept for consumers that read summaries.
    """
    event: Event
    attribution: Attribution
    deltas: AppliedDeltas
    valence_delta: float
    arousal_delta: float
    dominance_delta: float
    loneliness_delta: float
    prc_delta: float
    perceived_liability_delta: float
    self_hate_delta: float
    acquired_capability_delta: float
    interpersonal_hopelessness_delta: float
    salience: float
    perceived_severity: float
    memory_salience: float

    def scaled_by(self, factor: float) -> "InterpretedEvent":
        """
        Uniformly rescale every delta, e.g. for age/period amplification.

        Salience and memory salience are left as computed; attribution
        is not recomputed.
        """
        return replace(
            self,
            deltas=self.deltas.scale(factor),
            valence_delta=self.valence_delta * factor,
            arousal_delta=self.arousal_delta * factor,
            dominance_delta=self.dominance_delta * factor,
            loneliness_delta=self.loneliness_delta * factor,
            prc_delta=self.prc_delta * factor,
            perceived_liability_delta=self.perceived_liability_delta * factor,
            self_hate_delta=self.self_hate_delta * factor,
            acquired_capability_delta=self.acquired_capability_delta * factor,
            interpersonal_hopelessness_delta=self.interpersonal_hopelessness_delta * factor,
            perceived_severity=self.perceived_severity * factor,
        )


# =============================================================================
# PERSONALITY MODULATION
# =============================================================================

def emotionality_factor(personality: Personality) -> float:
    """1 + emotionality * weight; amplifies felt valence and arousal."""
    weight = get_config().interpretation.emotionality_weight
    return 1.0 + personality.emotionality * weight


def modulate_deltas(deltas: AppliedDeltas, factor: float) -> AppliedDeltas:
    """Scale valence and arousal in every bucket by factor."""
    return AppliedDeltas(
        permanent=deltas.permanent.scale_dimensions(factor, MODULATED_DIMENSIONS),
        acute=deltas.acute.scale_dimensions(factor, MODULATED_DIMENSIONS),
        chronic=deltas.chronic.scale_dimensions(factor, MODULATED_DIMENSIONS),
    )


# =============================================================================
# ATTRIBUTION
# =============================================================================

def compute_attribution(event: Event, honesty_humility: float) -> Attribution:
    """
    Infer who or what is blamed for an event.

    With a recorded source the source is blamed. Otherwise high
    honesty-humility blames the self, low blames the situation, and
    anything in between stays unknown.
    """
    cfg = get_config().interpretation

    if event.severity > cfg.stable_severity_threshold:
        stability = AttributionStability.STABLE
    else:
        stability = AttributionStability.UNSTABLE

    if event.source is not None:
        return Attribution(AttributionKind.OTHER, stability, source=event.source)

    if honesty_humility > cfg.attribution_threshold:
        return Attribution(AttributionKind.SELF, stability)
    if honesty_humility < -cfg.attribution_threshold:
        return Attribution(AttributionKind.SITUATIONAL, stability)
    return Attribution(AttributionKind.UNKNOWN)


# =============================================================================
# SALIENCE
# =============================================================================

def compute_base_salience(template: ImpactTemplate, severity: float) -> float:
    """
    Salience before arousal modulation.

        0.3 + 0.5 * severity
        + 0.2 if habituation impact > 0.5, else + 0.1 if > 0
        + 0.1 if loneliness or caring-perception impact is large

    Boosts read the template's raw impacts. Clamped to [0, 1].
    """
    cfg = get_config().interpretation
    s = max(0.0, min(1.0, severity))

    habituation = template.raw(HABITUATION)
    if habituation > cfg.habituation_major_threshold:
        habituation_boost = cfg.habituation_major_boost
    elif habituation > 0.0:
        habituation_boost = cfg.habituation_minor_boost
    else:
        habituation_boost = 0.0

    if (
        abs(template.raw("loneliness")) > cfg.loneliness_salience_threshold
        or abs(template.raw("prc")) > cfg.prc_salience_threshold
    ):
        social_boost = cfg.social_salience_boost
    else:
        social_boost = 0.0

    salience = cfg.base_salience + s * cfg.severity_salience_weight + habituation_boost + social_boost
    return max(0.0, min(1.0, salience))


# =============================================================================
# INTERPRETATION
# =============================================================================

def resolve_template(event: Event) -> ImpactTemplate:
    """The event's ad hoc template, or the registered one for its type."""
    if event.template is not None:
        return event.template
    return get_template(event.event_type)


def interpret_event(
    event: Event,
    personality: Personality,
    current_arousal: float,
    species: Species = Species.HUMAN,
    salience_fn: Optional[SalienceFunction] = None,
) -> InterpretedEvent:
    """
    Interpret an event for an individual.

    Args:
        event: The event to interpret
        personality: The individual's HEXACO traits
        current_arousal: Effective arousal just before the event
        species: Species of the individual (drives the salience curve)
        salience_fn: Arousal-modulated salience function; defaults to
            compute_arousal_modulated_salience

    Returns:
        InterpretedEvent with modulated deltas, attribution and salience
    """
    if salience_fn is None:
        salience_fn = compute_arousal_modulated_salience

    template = resolve_template(event)
    factor = emotionality_factor(personality)
    deltas = modulate_deltas(apply_template(template, event.severity), factor)

    valence = deltas.total("valence")
    arousal = deltas.total("arousal")
    habituation = deltas.total(HABITUATION)

    salience = salience_fn(
        compute_base_salience(template, event.severity),
        current_arousal + arousal,
        valence,
        habituation > 0.0,
        species,
    )

    return InterpretedEvent(
        event=event,
        attribution=compute_attribution(event, personality.honesty_humility),
        deltas=deltas,
        valence_delta=valence,
        arousal_delta=arousal,
        dominance_delta=deltas.total("dominance"),
        loneliness_delta=deltas.total("loneliness"),
        prc_delta=deltas.total("prc"),
        perceived_liability_delta=deltas.total("perceived_liability"),
        self_hate_delta=deltas.total("self_hate"),
        acquired_capability_delta=habituation,
        interpersonal_hopelessness_delta=deltas.total("interpersonal_hopelessness"),
        salience=salience,
        perceived_severity=event.severity * factor,
        memory_salience=salience,
    )
