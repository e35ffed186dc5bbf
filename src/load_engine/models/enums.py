"""Enumerations and physiological constants for the load engine.

Zone breakpoints and weights are fixed for output compatibility; the
acute/chronic time constants follow the Banister impulse-response model.
"""

from enum import IntEnum


class HRZone(IntEnum):
    """Heart-rate-reserve zones used by the zone-weighted load score.

    Three-zone model of Seiler (2010) with the top zone split into
    threshold and anaerobic work, after Lucia et al. (2003).
    """

    BASE = 1
    TEMPO = 2
    THRESHOLD = 3
    ANAEROBIC = 4


# ---------------------------------------------------------------------------
# Zone-weighted load score
# ---------------------------------------------------------------------------

# Lower %HRR bound of each zone (inclusive)
HRR_ZONE_FLOORS = {
    HRZone.BASE: 0.0,
    HRZone.TEMPO: 0.68,
    HRZone.THRESHOLD: 0.82,
    HRZone.ANAEROBIC: 0.90,
}

ZONE_WEIGHTS = {
    HRZone.BASE: 1.0,
    HRZone.TEMPO: 2.0,
    HRZone.THRESHOLD: 3.0,
    HRZone.ANAEROBIC: 4.0,
}

DEFAULT_MAX_HR = 190
DEFAULT_RESTING_HR = 50

# ---------------------------------------------------------------------------
# Impulse-response filters, Banister (1991)
# ---------------------------------------------------------------------------
ACUTE_TIME_CONSTANT_DAYS = 7.0  # ATL, "fatigue"
CHRONIC_TIME_CONSTANT_DAYS = 42.0  # CTL, "fitness"
DEFAULT_SEED_DAYS = 7
DEFAULT_WINDOW_DAYS = 45

# ---------------------------------------------------------------------------
# Derived metric windows and numeric guards
# ---------------------------------------------------------------------------
RECENT_VOLUME_DAYS = 7
MONOTONY_WINDOW_DAYS = 7  # Foster (1998)
RAMP_LOOKBACK_DAYS = 7
SHORT_WINDOW_DAYS = 10

ACWR_MIN_CHRONIC = 1.0  # Below this the ratio is reported as neutral
NEUTRAL_RATIO = 1.0
STD_EPSILON = 0.001
MEAN_EPSILON = 0.001
SPIKE_MIN_BASELINE = 0.1
