"""
Default arousal-modulated salience curve.

Memorability rises with arousal up to a ceiling (inverted U), then falls
off under extreme arousal unless the event is traumatic. Negative events
are remembered more strongly. Callers may supply any function with the
same signature to interpret_event().
"""

from psyche.pathways.core import Species

AROUSAL_THRESHOLD = 0.3
AROUSAL_CEILING = 0.8
EXTREME_AROUSAL_IMPAIRMENT = 0.3
NEGATIVITY_BIAS_MULTIPLIER = 1.2

AROUSAL_WEIGHT_HUMAN = 0.5
AROUSAL_WEIGHT_ANIMAL = 0.7
AROUSAL_WEIGHT_ROBOTIC = 0.0

_SPECIES_WEIGHTS = {
    Species.HUMAN: AROUSAL_WEIGHT_HUMAN,
    Species.ANIMAL: AROUSAL_WEIGHT_ANIMAL,
    Species.ROBOTIC: AROUSAL_WEIGHT_ROBOTIC,
}


def arousal_weight_for_species(species: Species) -> float:
    """How strongly arousal modulates memory for a species."""
    return _SPECIES_WEIGHTS[species]


def _arousal_boost(arousal: float, weight: float, is_trauma: bool) -> float:
    a = max(0.0, min(1.0, abs(arousal)))
    if a <= AROUSAL_THRESHOLD:
        return 0.0
    if a <= AROUSAL_CEILING:
        return weight * (a - AROUSAL_THRESHOLD) / (AROUSAL_CEILING - AROUSAL_THRESHOLD)
    if is_trauma:
        # Traumatic memories are not impaired by extreme arousal
        return weight
    excess = (a - AROUSAL_CEILING) / (1.0 - AROUSAL_CEILING)
    return weight - EXTREME_AROUSAL_IMPAIRMENT * weight * excess


def compute_arousal_modulated_salience(
    base_salience: float,
    combined_arousal: float,
    valence: float,
    is_trauma: bool,
    species: Species,
) -> float:
    """
    Modulate base salience by arousal, valence and trauma.

    Args:
        base_salience: Salience before modulation, [0, 1]
        combined_arousal: Current arousal plus the event's arousal delta
        valence: The event's (modulated) valence delta
        is_trauma: True when the event raised acquired capability
        species: Species of the experiencing individual

    Returns:
        Final salience in [0, 1]
    """
    boost = _arousal_boost(combined_arousal, arousal_weight_for_species(species), is_trauma)
    salience = base_salience * (1.0 + boost)
    if valence < 0.0:
        salience *= NEGATIVITY_BIAS_MULTIPLIER
    return max(0.0, min(1.0, salience))
