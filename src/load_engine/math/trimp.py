"""Per-session training load: zone-weighted heart-rate TRIMP.

The classical Banister TRIMP weights intensity exponentially, which inflates
moderate steady work and drives an unrealistically negative balance for
regular endurance training. This score instead multiplies the heart-rate
reserve ratio by a stepwise zone weight:

    load = duration × HRR ratio × zone weight

References:
    - Banister (1991): heart-rate reserve TRIMP
    - Lucia et al. (2003): zone-based TRIMP in professional cyclists
    - Seiler (2010): polarised three-zone intensity distribution
"""

from __future__ import annotations

from load_engine.models.enums import (
    DEFAULT_MAX_HR,
    DEFAULT_RESTING_HR,
    HRR_ZONE_FLOORS,
    ZONE_WEIGHTS,
    HRZone,
)


def calculate_hr_reserve_ratio(avg_hr: float, max_hr: int, resting_hr: int) -> float:
    """Position of *avg_hr* between resting and maximum heart rate, clamped to [0, 1].

    The reserve ``max_hr - resting_hr`` is floored to 1 bpm so a
    misconfigured athlete never divides by zero.
    """
    reserve = max(max_hr - resting_hr, 1)
    ratio = (avg_hr - resting_hr) / reserve
    return max(0.0, min(1.0, ratio))


def classify_hr_zone(hr_reserve_ratio: float) -> HRZone:
    """Map an HRR ratio to its zone (floors are inclusive)."""
    zone = HRZone.BASE
    for candidate in HRZone:
        if hr_reserve_ratio >= HRR_ZONE_FLOORS[candidate]:
            zone = candidate
    return zone


def calculate_zone_trimp(
    duration_min: float,
    avg_hr: int | None,
    max_hr: int = DEFAULT_MAX_HR,
    resting_hr: int = DEFAULT_RESTING_HR,
) -> float:
    """Calculate the zone-weighted load of a single session.

    Args:
        duration_min: Session duration in minutes.
        avg_hr: Average heart rate, or None when the session has no HR data.
        max_hr: Athlete's maximum heart rate.
        resting_hr: Athlete's resting heart rate.

    Returns:
        Load in arbitrary units, >= 0. Sessions with no duration or no heart
        rate score 0.0.
    """
    if duration_min <= 0 or avg_hr is None:
        return 0.0
    ratio = calculate_hr_reserve_ratio(avg_hr, max_hr, resting_hr)
    return duration_min * ratio * ZONE_WEIGHTS[classify_hr_zone(ratio)]
