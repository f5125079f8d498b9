"""
Tests for YAML config loader.

See psyche/pathways/config.py for implementation.
"""

import pytest
import tempfile
from pathlib import Path

import yaml

from psyche.pathways.config import (
    load_config_from_yaml,
    get_config,
    set_config,
    reset_config,
    PathwaysConfig,
    DimensionConfig,
)


def _write_yaml(text: str) -> str:
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        f.write(text)
        return f.name


def _default_data(config_dir) -> dict:
    with (config_dir / "pathways_defaults.yaml").open() as f:
        return yaml.safe_load(f)


def test_load_default_yaml(config_dir):
    """Default YAML should load successfully."""
    config = load_config_from_yaml(config_dir / "pathways_defaults.yaml")

    assert isinstance(config, PathwaysConfig)
    assert config.dimension("valence").minimum == -1.0
    assert config.dimension("valence").fast_half_life_hours == 6
    assert config.dimension("prc").default == 0.6
    assert config.dimension("acquired_capability").fast_half_life_hours is None
    assert config.interpretation.emotionality_weight == 0.3
    assert config.evolution.max_reversal_exponent == 700.0


def test_default_yaml_matches_code_defaults(config_dir):
    """On-disk defaults and in-code defaults must not drift apart."""
    assert load_config_from_yaml(config_dir / "pathways_defaults.yaml") == get_config()


def test_half_life_units():
    dim = DimensionConfig(0.0, 1.0, 0.0, fast_half_life_hours=2, slow_half_life_days=3)

    assert dim.fast_half_life_seconds == 7200
    assert dim.slow_half_life_seconds == 259200
    assert DimensionConfig(0.0, 1.0, 0.0).fast_half_life_seconds is None


def test_missing_file_raises():
    """Missing file should raise FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        load_config_from_yaml("nonexistent.yaml")


def test_invalid_yaml_raises():
    """Malformed YAML should raise ValueError."""
    temp_path = _write_yaml("{ invalid yaml syntax: [")
    try:
        with pytest.raises(ValueError, match="Failed to parse YAML"):
            load_config_from_yaml(temp_path)
    finally:
        Path(temp_path).unlink()


def test_missing_required_field(config_dir):
    """Missing required field should raise ValueError."""
    data = _default_data(config_dir)
    del data["dimensions"]["stress"]["default"]
    temp_path = _write_yaml(yaml.safe_dump(data))
    try:
        with pytest.raises(ValueError, match="Missing required field: dimensions.stress.default"):
            load_config_from_yaml(temp_path)
    finally:
        Path(temp_path).unlink()


def test_missing_dimension(config_dir):
    data = _default_data(config_dir)
    del data["dimensions"]["empathy"]
    temp_path = _write_yaml(yaml.safe_dump(data))
    try:
        with pytest.raises(ValueError, match="Missing required field: dimensions.empathy"):
            load_config_from_yaml(temp_path)
    finally:
        Path(temp_path).unlink()


def test_missing_section(config_dir):
    data = _default_data(config_dir)
    del data["evolution"]
    temp_path = _write_yaml(yaml.safe_dump(data))
    try:
        with pytest.raises(ValueError, match="Missing required field: root.evolution"):
            load_config_from_yaml(temp_path)
    finally:
        Path(temp_path).unlink()


def test_non_dict_root_raises():
    """YAML file with non-dict root should raise ValueError."""
    temp_path = _write_yaml("- just\n- a\n- list\n")
    try:
        with pytest.raises(ValueError, match="YAML root must be a dictionary"):
            load_config_from_yaml(temp_path)
    finally:
        Path(temp_path).unlink()


def test_unknown_dimension_raises(config_dir):
    data = _default_data(config_dir)
    data["dimensions"]["happiness"] = {"minimum": 0.0, "maximum": 1.0, "default": 0.0}
    temp_path = _write_yaml(yaml.safe_dump(data))
    try:
        with pytest.raises(ValueError, match="Unknown dimensions"):
            load_config_from_yaml(temp_path)
    finally:
        Path(temp_path).unlink()


@pytest.mark.parametrize("field, value, message", [
    ("default", 1.5, "outside"),
    ("minimum", 2.0, "exceeds maximum"),
    ("fast_half_life_hours", 0, "must be positive"),
])
def test_invalid_dimension_values(config_dir, field, value, message):
    data = _default_data(config_dir)
    data["dimensions"]["fatigue"][field] = value
    temp_path = _write_yaml(yaml.safe_dump(data))
    try:
        with pytest.raises(ValueError, match=message):
            load_config_from_yaml(temp_path)
    finally:
        Path(temp_path).unlink()


def test_types_are_correct(config_dir):
    """Loaded values should be floats."""
    config = load_config_from_yaml(config_dir / "pathways_defaults.yaml")

    assert isinstance(config.dimension("valence").fast_half_life_hours, float)
    assert isinstance(config.evolution.reversal_bound, float)
    assert isinstance(config.interpretation.base_salience, float)


def test_set_and_reset_config(config_dir):
    config = load_config_from_yaml(config_dir / "pathways_defaults.yaml")
    config.interpretation.emotionality_weight = 0.5

    set_config(config)
    assert get_config().interpretation.emotionality_weight == 0.5

    reset_config()
    assert get_config().interpretation.emotionality_weight == 0.3
