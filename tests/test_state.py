"""
Tests for dimension vectors and the individual state container.

See psyche/pathways/core.py and psyche/pathways/state.py for implementation.
"""

import dataclasses

import pytest

from psyche.pathways.core import (
    DecayingValue,
    DIMENSIONS,
    DimensionVector,
    HABITUATION,
    HabituationValue,
)
from psyche.pathways.state import IndividualState


def test_dimension_vector_rejects_unknown_names():
    with pytest.raises(ValueError, match="Unknown dimensions"):
        DimensionVector.from_mapping({"happiness": 0.2})


def test_dimension_vector_defaults_to_zero():
    vector = DimensionVector.from_mapping({"stress": 0.4})

    assert vector.get("stress") == 0.4
    assert vector.get("valence") == 0.0
    assert len(vector.as_dict()) == len(DIMENSIONS)


def test_dimension_vector_scaling():
    a = DimensionVector.from_mapping({"stress": 0.4, "valence": -0.2})

    assert a.scale(2).get("valence") == pytest.approx(-0.4)
    scaled = a.scale_dimensions(3, ("valence",))
    assert scaled.get("valence") == pytest.approx(-0.6)
    assert scaled.get("stress") == 0.4


def test_every_dimension_is_reachable(zero_state):
    for dim in DIMENSIONS:
        value = zero_state.value(dim)
        if dim == HABITUATION:
            assert isinstance(value, HabituationValue)
        else:
            assert isinstance(value, DecayingValue)


def test_with_values_replaces_only_named(zero_state):
    state = zero_state.with_values({
        "stress": DecayingValue(base=0.2, fast_offset=0.1),
        "valence": DecayingValue(base=-0.1),
    })

    assert state.value("stress").raw == pytest.approx(0.3)
    assert state.value("valence").base == -0.1
    assert state.value("fatigue") == zero_state.value("fatigue")
    assert zero_state.value("stress").base == 0.0


def test_state_is_immutable(zero_state):
    with pytest.raises(dataclasses.FrozenInstanceError):
        zero_state.mood = None
    with pytest.raises(dataclasses.FrozenInstanceError):
        zero_state.value("stress").base = 1.0


def test_effective_clamps_to_range(zero_state):
    state = zero_state.with_values({
        "valence": DecayingValue(base=-0.8, fast_offset=-0.5),
        "stress": DecayingValue(base=0.9, slow_offset=0.4),
        "fatigue": DecayingValue(base=0.1, fast_offset=-0.3),
    })

    assert state.effective("valence") == -1.0
    assert state.effective("stress") == 1.0
    assert state.effective("fatigue") == 0.0


def test_create_uses_configured_defaults():
    state = IndividualState.create()

    assert state.value("prc").base == 0.6
    assert state.value("valence").base == 0.0
    assert state.value("purpose").fast_offset == 0.0


def test_habituation_value_never_decreases():
    value = HabituationValue(base=0.3)

    assert value.shift_base(-0.2) is value
    assert value.shift_base(0.1).base == pytest.approx(0.4)
