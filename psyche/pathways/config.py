"""
Configuration for the pathways state core.

All tunable parameters live here, not in code.
See data/pathways_defaults.yaml (shipped as package data) for the on-disk form.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)


@dataclass
class DimensionConfig:
    """Valid range, creation default and half-lives for one dimension."""
    minimum: float
    maximum: float
    default: float
    fast_half_life_hours: Optional[float] = None  # None = never decays
    slow_half_life_days: Optional[float] = None

    @property
    def fast_half_life_seconds(self) -> Optional[float]:
        if self.fast_half_life_hours is None:
            return None
        return self.fast_half_life_hours * 3600

    @property
    def slow_half_life_seconds(self) -> Optional[float]:
        if self.slow_half_life_days is None:
            return None
        return self.slow_half_life_days * 86400

    def clamp(self, value: float) -> float:
        return max(self.minimum, min(self.maximum, value))


@dataclass
class InterpretationConfig:
    """Personality modulation, attribution and salience constants."""
    emotionality_weight: float
    stable_severity_threshold: float
    attribution_threshold: float          # |honesty_humility| beyond this picks self/situational
    base_salience: float
    severity_salience_weight: float
    habituation_major_threshold: float
    habituation_major_boost: float
    habituation_minor_boost: float
    loneliness_salience_threshold: float
    prc_salience_threshold: float
    social_salience_boost: float


@dataclass
class EvolutionConfig:
    """Numeric guards for state evolution."""
    epsilon: float
    max_reversal_exponent: float
    reversal_bound: float


@dataclass
class PathwaysConfig:
    """Complete configuration."""
    dimensions: Dict[str, DimensionConfig]
    interpretation: InterpretationConfig
    evolution: EvolutionConfig

    def dimension(self, name: str) -> DimensionConfig:
        return self.dimensions[name]


def _mood(fast_hours: float, slow_days: float) -> DimensionConfig:
    return DimensionConfig(-1.0, 1.0, 0.0, fast_hours, slow_days)


def _unit(default: float, fast_hours: float, slow_days: float) -> DimensionConfig:
    return DimensionConfig(0.0, 1.0, default, fast_hours, slow_days)


# Default configuration - matches data/pathways_defaults.yaml
_DEFAULT_CONFIG = PathwaysConfig(
    dimensions={
        # Mood (PAD)
        "valence": _mood(6, 14),
        "arousal": _mood(6, 14),
        "dominance": _mood(6, 14),
        # Needs
        "fatigue": _unit(0.0, 8, 7),
        "stress": _unit(0.0, 12, 14),
        "purpose": _unit(0.5, 72, 60),
        # Social cognition
        "loneliness": _unit(0.0, 24, 30),
        "prc": _unit(0.6, 48, 30),
        "perceived_liability": _unit(0.0, 72, 30),
        "self_hate": _unit(0.0, 72, 30),
        "perceived_competence": _unit(0.5, 72, 60),
        # Mental health
        "depression": _unit(0.0, 336, 90),
        "self_worth": _unit(0.6, 168, 60),
        "hopelessness": _unit(0.0, 336, 90),
        "interpersonal_hopelessness": _unit(0.0, 336, 90),
        "acquired_capability": DimensionConfig(0.0, 1.0, 0.0),
        # Disposition
        "impulse_control": _unit(0.5, 168, 60),
        "empathy": _unit(0.5, 672, 120),
        "aggression": _unit(0.0, 168, 30),
        "grievance": _unit(0.0, 168, 60),
        "reactance": _unit(0.0, 24, 30),
        "trust_propensity": _unit(0.5, 672, 120),
    },
    interpretation=InterpretationConfig(
        emotionality_weight=0.3,
        stable_severity_threshold=0.7,
        attribution_threshold=0.3,
        base_salience=0.3,
        severity_salience_weight=0.5,
        habituation_major_threshold=0.5,
        habituation_major_boost=0.2,
        habituation_minor_boost=0.1,
        loneliness_salience_threshold=0.3,
        prc_salience_threshold=0.2,
        social_salience_boost=0.1,
    ),
    evolution=EvolutionConfig(
        epsilon=1.1920929e-07,  # single-precision machine epsilon
        max_reversal_exponent=700.0,
        reversal_bound=100.0,
    ),
)

# Active configuration (can be replaced at runtime)
_active_config: PathwaysConfig = _DEFAULT_CONFIG


def get_config() -> PathwaysConfig:
    """Get the active configuration."""
    return _active_config


def set_config(config: PathwaysConfig) -> None:
    """Set the active configuration."""
    global _active_config
    _active_config = config


def reset_config() -> None:
    """Reset to default configuration."""
    global _active_config
    _active_config = _DEFAULT_CONFIG


# =============================================================================
# YAML LOADING
# =============================================================================

def _require(data: dict, key: str, section: str):
    if not isinstance(data, dict) or key not in data:
        raise ValueError(f"Missing required field: {section}.{key}")
    return data[key]


def _optional_float(data: dict, key: str) -> Optional[float]:
    value = data.get(key)
    return None if value is None else float(value)


def _parse_dimension(name: str, data: dict) -> DimensionConfig:
    section = f"dimensions.{name}"
    dim = DimensionConfig(
        minimum=float(_require(data, "minimum", section)),
        maximum=float(_require(data, "maximum", section)),
        default=float(_require(data, "default", section)),
        fast_half_life_hours=_optional_float(data, "fast_half_life_hours"),
        slow_half_life_days=_optional_float(data, "slow_half_life_days"),
    )
    if dim.minimum > dim.maximum:
        raise ValueError(f"{section}: minimum {dim.minimum} exceeds maximum {dim.maximum}")
    if not dim.minimum <= dim.default <= dim.maximum:
        raise ValueError(f"{section}: default {dim.default} outside [{dim.minimum}, {dim.maximum}]")
    for half_life in (dim.fast_half_life_hours, dim.slow_half_life_days):
        if half_life is not None and half_life <= 0:
            raise ValueError(f"{section}: half-lives must be positive, got {half_life}")
    return dim


def load_config_from_yaml(path: Union[str, Path]) -> PathwaysConfig:
    """
    Load configuration from a YAML file.

    Every dimension known to the default configuration must be present.

    Args:
        path: Path to the YAML file

    Returns:
        Parsed PathwaysConfig

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML is malformed or a field is missing/invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a dictionary: {path}")

    dims_data = _require(data, "dimensions", "root")
    if not isinstance(dims_data, dict):
        raise ValueError("dimensions must be a mapping of dimension name -> settings")

    unknown = set(dims_data) - set(_DEFAULT_CONFIG.dimensions)
    if unknown:
        raise ValueError(f"Unknown dimensions in config: {sorted(unknown)}")

    dimensions = {}
    for name in _DEFAULT_CONFIG.dimensions:
        dimensions[name] = _parse_dimension(name, _require(dims_data, name, "dimensions"))

    interp = _require(data, "interpretation", "root")
    interpretation = InterpretationConfig(**{
        field: float(_require(interp, field, "interpretation"))
        for field in InterpretationConfig.__dataclass_fields__
    })

    evo = _require(data, "evolution", "root")
    evolution = EvolutionConfig(**{
        field: float(_require(evo, field, "evolution"))
        for field in EvolutionConfig.__dataclass_fields__
    })

    logger.info("Loaded pathways config from %s", path)
    return PathwaysConfig(
        dimensions=dimensions,
        interpretation=interpretation,
        evolution=evolution,
    )
