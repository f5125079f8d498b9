"""
Core data structures for the pathways state core.

Dimension vectors, impact templates, decaying scalars and the event record.
"""

import uuid
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Dict, Iterator, Mapping, Optional, Tuple


# =============================================================================
# DIMENSIONS
# =============================================================================

# The one dimension with no offsets and no decay.
HABITUATION = "acquired_capability"

# Subsystem -> dimensions, in canonical order.
SUBSYSTEMS: Dict[str, Tuple[str, ...]] = {
    "mood": ("valence", "arousal", "dominance"),
    "needs": ("fatigue", "stress", "purpose"),
    "social_cognition": (
        "loneliness",
        "prc",
        "perceived_liability",
        "self_hate",
        "perceived_competence",
    ),
    "mental_health": (
        "depression",
        "self_worth",
        "hopelessness",
        "interpersonal_hopelessness",
        HABITUATION,
    ),
    "disposition": (
        "impulse_control",
        "empathy",
        "aggression",
        "grievance",
        "reactance",
        "trust_propensity",
    ),
}

# Dimension -> (subsystem, field) accessor path.
DIMENSION_PATHS: Dict[str, Tuple[str, str]] = {
    dim: (subsystem, dim)
    for subsystem, dims in SUBSYSTEMS.items()
    for dim in dims
}

DIMENSIONS: Tuple[str, ...] = tuple(DIMENSION_PATHS)

# Dimensions that carry fast/slow offsets.
DECAYING_DIMENSIONS: Tuple[str, ...] = tuple(d for d in DIMENSIONS if d != HABITUATION)


@dataclass(frozen=True)
class DimensionVector:
    """One float per dimension. Missing dimensions are zero."""
    # Mood (PAD)
    valence: float = 0.0
    arousal: float = 0.0
    dominance: float = 0.0
    # Needs
    fatigue: float = 0.0
    stress: float = 0.0
    purpose: float = 0.0
    # Social cognition
    loneliness: float = 0.0
    prc: float = 0.0
    perceived_liability: float = 0.0
    self_hate: float = 0.0
    perceived_competence: float = 0.0
    # Mental health
    depression: float = 0.0
    self_worth: float = 0.0
    hopelessness: float = 0.0
    interpersonal_hopelessness: float = 0.0
    acquired_capability: float = 0.0
    # Disposition
    impulse_control: float = 0.0
    empathy: float = 0.0
    aggression: float = 0.0
    grievance: float = 0.0
    reactance: float = 0.0
    trust_propensity: float = 0.0

    @classmethod
    def from_mapping(cls, values: Mapping[str, float]) -> "DimensionVector":
        unknown = set(values) - set(DIMENSIONS)
        if unknown:
            raise ValueError(f"Unknown dimensions: {sorted(unknown)}")
        return cls(**{name: float(v) for name, v in values.items()})

    def get(self, dimension: str) -> float:
        return getattr(self, dimension)

    def items(self) -> Iterator[Tuple[str, float]]:
        for f in fields(self):
            yield f.name, getattr(self, f.name)

    def as_dict(self) -> Dict[str, float]:
        return dict(self.items())

    def scale(self, factor: float) -> "DimensionVector":
        return DimensionVector(**{name: v * factor for name, v in self.items()})

    def scale_dimensions(self, factor: float, dimensions) -> "DimensionVector":
        """Scale only the named dimensions, leaving the rest as-is."""
        return replace(self, **{name: self.get(name) * factor for name in dimensions})


# =============================================================================
# IMPACT TEMPLATES
# =============================================================================

@dataclass(frozen=True)
class DimensionImpact:
    """
    Authored impact of one event type on one dimension.

    raw_impact in [-1, 1], permanence in [0, 1].
    """
    raw_impact: float
    permanence: float = 0.0
    is_chronic: bool = False


_NO_IMPACT = DimensionImpact(raw_impact=0.0)


@dataclass(frozen=True)
class ImpactTemplate:
    """
    Per-event-type impact record across all dimensions.

    Dimensions absent from `dimensions` have no impact.
    """
    event_type: str
    dimensions: Mapping[str, DimensionImpact] = field(default_factory=dict)

    def impact_for(self, dimension: str) -> DimensionImpact:
        return self.dimensions.get(dimension, _NO_IMPACT)

    def raw(self, dimension: str) -> float:
        return self.impact_for(dimension).raw_impact


@dataclass(frozen=True)
class AppliedDeltas:
    """
    An event's impact partitioned into buckets.

    permanent -> base, acute -> fast offset, chronic -> slow offset.
    """
    permanent: DimensionVector = field(default_factory=DimensionVector)
    acute: DimensionVector = field(default_factory=DimensionVector)
    chronic: DimensionVector = field(default_factory=DimensionVector)

    def total(self, dimension: str) -> float:
        return (
            self.permanent.get(dimension)
            + self.acute.get(dimension)
            + self.chronic.get(dimension)
        )

    def scale(self, factor: float) -> "AppliedDeltas":
        return AppliedDeltas(
            permanent=self.permanent.scale(factor),
            acute=self.acute.scale(factor),
            chronic=self.chronic.scale(factor),
        )


# =============================================================================
# DECAYING SCALARS
# =============================================================================

@dataclass(frozen=True)
class DecayingValue:
    """
    Permanent base plus two independently decaying offsets.

    Effective value is base + fast_offset + slow_offset, clamped by the
    owning state to the dimension's valid range.
    """
    base: float
    fast_offset: float = 0.0
    slow_offset: float = 0.0

    @property
    def raw(self) -> float:
        return self.base + self.fast_offset + self.slow_offset

    def shift_base(self, amount: float) -> "DecayingValue":
        return replace(self, base=self.base + amount)

    def add_fast_offset(self, amount: float) -> "DecayingValue":
        return replace(self, fast_offset=self.fast_offset + amount)

    def add_slow_offset(self, amount: float) -> "DecayingValue":
        return replace(self, slow_offset=self.slow_offset + amount)


@dataclass(frozen=True)
class HabituationValue:
    """Non-decaying, non-decreasing accumulator (acquired capability)."""
    base: float

    @property
    def raw(self) -> float:
        return self.base

    def shift_base(self, amount: float) -> "HabituationValue":
        if amount <= 0:
            return self
        return HabituationValue(base=self.base + amount)


# =============================================================================
# PERSONALITY, SPECIES, ATTRIBUTION
# =============================================================================

def _clamp_trait(value: float) -> float:
    return max(-1.0, min(1.0, value))


@dataclass
class Personality:
    """HEXACO traits, each clamped to [-1, 1]."""
    honesty_humility: float = 0.0
    emotionality: float = 0.0
    extraversion: float = 0.0
    agreeableness: float = 0.0
    conscientiousness: float = 0.0
    openness: float = 0.0

    def __post_init__(self):
        for f in fields(self):
            setattr(self, f.name, _clamp_trait(getattr(self, f.name)))


class Species(Enum):
    HUMAN = "human"
    ANIMAL = "animal"
    ROBOTIC = "robotic"


class AttributionKind(Enum):
    SELF = "self"
    OTHER = "other"
    SITUATIONAL = "situational"
    UNKNOWN = "unknown"


class AttributionStability(Enum):
    STABLE = "stable"
    UNSTABLE = "unstable"


@dataclass(frozen=True)
class Attribution:
    """Inferred cause of an event and its temporal stability."""
    kind: AttributionKind
    stability: Optional[AttributionStability] = None
    source: Optional[str] = None  # set only for OTHER


# =============================================================================
# EVENTS
# =============================================================================

def _generate_event_id() -> str:
    return f"evt_{uuid.uuid4()}"


@dataclass
class Event:
    """
    A discrete life event experienced by an individual.

    Severity is clamped to [0, 1]. `template` overrides the registry
    lookup for ad hoc events.
    """
    event_type: str
    severity: float = 0.5
    source: Optional[str] = None       # who caused it, if anyone
    target: Optional[str] = None       # who it happened to
    timestamp: float = 0.0             # seconds, owned by the timeline
    template: Optional[ImpactTemplate] = None
    event_id: str = field(default_factory=_generate_event_id)

    def __post_init__(self):
        self.severity = max(0.0, min(1.0, self.severity))
