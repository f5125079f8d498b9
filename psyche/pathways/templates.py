"""
Event type -> impact template registry.

Templates are authored data. The default registry is loaded lazily from
the event_templates.yaml shipped in the package data directory; callers
may register ad hoc templates.
"""

import logging
from importlib import resources
from pathlib import Path
from typing import Dict, Optional, Union

import yaml

from psyche.pathways.core import DIMENSIONS, DimensionImpact, ImpactTemplate

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES_PACKAGE = "psyche.pathways"
DEFAULT_TEMPLATES_RESOURCE = "data/event_templates.yaml"


# =============================================================================
# ERRORS
# =============================================================================

class TemplateValidationError(ValueError):
    """Raised when an authored template is malformed."""
    pass


class UnknownEventTypeError(KeyError):
    """Raised when no template is registered for an event type."""
    pass


# =============================================================================
# PARSING
# =============================================================================

def _parse_row(event_type: str, dimension: str, row) -> DimensionImpact:
    """
    Parse one [raw_impact, permanence, is_chronic] row.

    A bare number is shorthand for [raw_impact, 0.0, false].
    """
    where = f"{event_type}.{dimension}"

    if dimension not in DIMENSIONS:
        raise TemplateValidationError(f"{where}: unknown dimension")

    if isinstance(row, (int, float)) and not isinstance(row, bool):
        row = [row, 0.0, False]
    if not isinstance(row, list) or len(row) != 3:
        raise TemplateValidationError(
            f"{where}: expected [raw_impact, permanence, is_chronic], got {row!r}"
        )

    raw_impact, permanence, is_chronic = row
    if not isinstance(is_chronic, bool):
        raise TemplateValidationError(f"{where}: is_chronic must be true/false")
    try:
        raw_impact = float(raw_impact)
        permanence = float(permanence)
    except (TypeError, ValueError) as e:
        raise TemplateValidationError(f"{where}: non-numeric value in {row!r}") from e

    if not -1.0 <= raw_impact <= 1.0:
        raise TemplateValidationError(f"{where}: raw_impact {raw_impact} outside [-1, 1]")
    if not 0.0 <= permanence <= 1.0:
        raise TemplateValidationError(f"{where}: permanence {permanence} outside [0, 1]")

    return DimensionImpact(raw_impact=raw_impact, permanence=permanence, is_chronic=is_chronic)


def parse_template(event_type: str, data: Dict) -> ImpactTemplate:
    """
    Build an ImpactTemplate from a dimension -> row mapping.

    Raises:
        TemplateValidationError: On unknown dimensions or out-of-range values
    """
    if not isinstance(data, dict):
        raise TemplateValidationError(f"{event_type}: template must be a mapping")
    dimensions = {
        dim: _parse_row(event_type, dim, row)
        for dim, row in data.items()
    }
    return ImpactTemplate(event_type=event_type, dimensions=dimensions)


def load_templates_from_yaml(path: Union[str, Path]) -> Dict[str, ImpactTemplate]:
    """
    Load impact templates from a YAML file.

    Args:
        path: Path to a YAML file with an `event_templates` mapping

    Returns:
        Dict mapping event_type -> ImpactTemplate

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML is malformed
        TemplateValidationError: If any template is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Template file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a dictionary: {path}")
    if "event_templates" not in data:
        raise ValueError(f"Missing required field: event_templates ({path})")

    body_map = data["event_templates"] or {}
    if not isinstance(body_map, dict):
        raise ValueError("event_templates must be a mapping of event type -> dimension rows")

    templates = {}
    errors = []
    for event_type, body in body_map.items():
        try:
            templates[event_type] = parse_template(event_type, body)
        except TemplateValidationError as e:
            errors.append(str(e))

    if errors:
        raise TemplateValidationError(
            f"Template validation failed with {len(errors)} errors:\n" +
            "\n".join(f"  - {e}" for e in errors)
        )

    logger.info("Loaded %d event templates from %s", len(templates), path)
    return templates


def load_default_templates() -> Dict[str, ImpactTemplate]:
    """Load the templates shipped with the package."""
    resource = resources.files(DEFAULT_TEMPLATES_PACKAGE).joinpath(DEFAULT_TEMPLATES_RESOURCE)
    with resources.as_file(resource) as path:
        return load_templates_from_yaml(path)


# =============================================================================
# REGISTRY
# =============================================================================

_registry: Optional[Dict[str, ImpactTemplate]] = None


def _get_registry() -> Dict[str, ImpactTemplate]:
    global _registry
    if _registry is None:
        _registry = load_default_templates()
    return _registry


def get_template(event_type: str) -> ImpactTemplate:
    """
    Look up the template for an event type.

    Raises:
        UnknownEventTypeError: If nothing is registered for event_type
    """
    registry = _get_registry()
    if event_type not in registry:
        raise UnknownEventTypeError(f"No impact template registered for '{event_type}'")
    return registry[event_type]


def register_template(template: ImpactTemplate) -> None:
    """Register (or replace) a template under its event type."""
    _get_registry()[template.event_type] = template


def registered_event_types():
    return sorted(_get_registry())


def reset_templates() -> None:
    """Drop registered templates; the defaults reload on next lookup."""
    global _registry
    _registry = None
