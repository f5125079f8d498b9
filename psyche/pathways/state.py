"""
Individual psychological state.

A fixed set of decaying scalars grouped into five subsystems. States are
immutable values; evolution functions return new states.
"""

from dataclasses import dataclass, replace
from typing import Dict, Optional, Union

from psyche.pathways.config import PathwaysConfig, get_config
from psyche.pathways.core import (
    DecayingValue,
    DIMENSION_PATHS,
    DIMENSIONS,
    HABITUATION,
    HabituationValue,
)

ScalarValue = Union[DecayingValue, HabituationValue]


@dataclass(frozen=True)
class Mood:
    """Pleasure-arousal-dominance mood. Bipolar dimensions."""
    valence: DecayingValue
    arousal: DecayingValue
    dominance: DecayingValue


@dataclass(frozen=True)
class Needs:
    fatigue: DecayingValue
    stress: DecayingValue
    purpose: DecayingValue


@dataclass(frozen=True)
class SocialCognition:
    loneliness: DecayingValue
    prc: DecayingValue  # perceived reciprocal caring
    perceived_liability: DecayingValue
    self_hate: DecayingValue
    perceived_competence: DecayingValue


@dataclass(frozen=True)
class MentalHealth:
    depression: DecayingValue
    self_worth: DecayingValue
    hopelessness: DecayingValue
    interpersonal_hopelessness: DecayingValue
    acquired_capability: HabituationValue


@dataclass(frozen=True)
class Disposition:
    impulse_control: DecayingValue
    empathy: DecayingValue
    aggression: DecayingValue
    grievance: DecayingValue
    reactance: DecayingValue
    trust_propensity: DecayingValue


_SUBSYSTEM_TYPES = {
    "mood": Mood,
    "needs": Needs,
    "social_cognition": SocialCognition,
    "mental_health": MentalHealth,
    "disposition": Disposition,
}


@dataclass(frozen=True)
class IndividualState:
    """
    Psychological state of one individual.

    Dimensions are reached through DIMENSION_PATHS so every evolution
    step iterates the same mapping instead of naming fields by hand.
    """
    mood: Mood
    needs: Needs
    social_cognition: SocialCognition
    mental_health: MentalHealth
    disposition: Disposition

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_bases(cls, bases: Dict[str, float]) -> "IndividualState":
        """Build a state with the given bases and no offsets."""
        subsystems = {}
        for name, subsystem_type in _SUBSYSTEM_TYPES.items():
            values = {}
            for subsystem, dim in DIMENSION_PATHS.values():
                if subsystem != name:
                    continue
                if dim == HABITUATION:
                    values[dim] = HabituationValue(base=bases[dim])
                else:
                    values[dim] = DecayingValue(base=bases[dim])
            subsystems[name] = subsystem_type(**values)
        return cls(**subsystems)

    @classmethod
    def create(cls, config: Optional[PathwaysConfig] = None) -> "IndividualState":
        """State at entity creation: configured defaults, no offsets."""
        config = config or get_config()
        return cls.from_bases({dim: config.dimension(dim).default for dim in DIMENSIONS})

    @classmethod
    def zeroed(cls) -> "IndividualState":
        """All bases and offsets zero."""
        return cls.from_bases({dim: 0.0 for dim in DIMENSIONS})

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def value(self, dimension: str) -> ScalarValue:
        subsystem, field_name = DIMENSION_PATHS[dimension]
        return getattr(getattr(self, subsystem), field_name)

    def with_value(self, dimension: str, value: ScalarValue) -> "IndividualState":
        subsystem, field_name = DIMENSION_PATHS[dimension]
        updated = replace(getattr(self, subsystem), **{field_name: value})
        return replace(self, **{subsystem: updated})

    def with_values(self, values: Dict[str, ScalarValue]) -> "IndividualState":
        """Replace several dimensions at once."""
        grouped: Dict[str, Dict[str, ScalarValue]] = {}
        for dimension, value in values.items():
            subsystem, field_name = DIMENSION_PATHS[dimension]
            grouped.setdefault(subsystem, {})[field_name] = value
        return replace(self, **{
            subsystem: replace(getattr(self, subsystem), **changes)
            for subsystem, changes in grouped.items()
        })

    def effective(self, dimension: str, config: Optional[PathwaysConfig] = None) -> float:
        """base + offsets, clamped to the dimension's valid range."""
        config = config or get_config()
        return config.dimension(dimension).clamp(self.value(dimension).raw)
