"""
Impact application: partition an event's impact into buckets.

    scaled    = raw_impact * severity
    permanent = scaled * permanence
    temporary = scaled * (1 - permanence)  -> chronic if is_chronic else acute

Habituation ignores permanence and chronic flags: it is always fully permanent.
"""

from psyche.pathways.core import (
    AppliedDeltas,
    DimensionVector,
    DIMENSIONS,
    HABITUATION,
    ImpactTemplate,
)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def apply_template(template: ImpactTemplate, severity: float) -> AppliedDeltas:
    """
    Partition a template's impact at a given severity.

    For every ordinary dimension permanent + acute + chronic equals
    raw_impact * severity. Pure; no error conditions.

    Args:
        template: Impact template for the event type
        severity: Event intensity, clamped to [0, 1]

    Returns:
        AppliedDeltas with permanent, acute and chronic vectors
    """
    s = _clamp(severity, 0.0, 1.0)

    permanent = {}
    acute = {}
    chronic = {}

    for dim in DIMENSIONS:
        impact = template.impact_for(dim)
        scaled = _clamp(impact.raw_impact, -1.0, 1.0) * s

        if dim == HABITUATION:
            permanent[dim] = scaled
            continue

        permanence = _clamp(impact.permanence, 0.0, 1.0)
        permanent[dim] = scaled * permanence
        temporary = scaled * (1.0 - permanence)
        if impact.is_chronic:
            chronic[dim] = temporary
        else:
            acute[dim] = temporary

    return AppliedDeltas(
        permanent=DimensionVector(**permanent),
        acute=DimensionVector(**acute),
        chronic=DimensionVector(**chronic),
    )
