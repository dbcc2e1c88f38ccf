import logging
from typing import Dict, Iterable, List, Optional, Sequence

from features.forecast.models.forecast_types import (
    NormalizedObservation,
    SpotGroup,
    GlobalScaleExtents,
    TideTrend
)

logger = logging.getLogger(__name__)

MIN_WAVE_MAX = 1.0
MIN_TIDE_LOW = 0.0
MIN_TIDE_HIGH = 5.0

def group_by_spot(observations: Iterable[NormalizedObservation]) -> List[SpotGroup]:
    """Group observations by spot, sorted by spot name.

    Within a group, timed observations are sorted by hour. The sort is
    stable, so equal hours keep their feed order.
    """
    timed: Dict[str, List[NormalizedObservation]] = {}
    untimed: Dict[str, List[NormalizedObservation]] = {}
    for obs in observations:
        timed.setdefault(obs.spot, [])
        untimed.setdefault(obs.spot, [])
        if obs.hour_of_day is None:
            untimed[obs.spot].append(obs)
        else:
            timed[obs.spot].append(obs)

    groups = []
    for spot in sorted(timed):
        if untimed[spot]:
            logger.debug(f"{spot}: {len(untimed[spot])} observation(s) without a usable hour")
        groups.append(SpotGroup(
            spot=spot,
            observations=sorted(timed[spot], key=lambda o: o.hour_of_day),
            untimed=untimed[spot]
        ))
    return groups

def compute_global_extents(observations: Iterable[NormalizedObservation]) -> GlobalScaleExtents:
    """Shared wave and tide axis bounds over every observation of every spot.

    Invalid heights are skipped. The wave maximum never drops below 1 ft and
    the tide range always covers [0, 5] ft.
    """
    wave_max = MIN_WAVE_MAX
    tide_low = MIN_TIDE_LOW
    tide_high = MIN_TIDE_HIGH
    for obs in observations:
        if obs.wave_height_ft is not None:
            wave_max = max(wave_max, obs.wave_height_ft)
        if obs.tide_height_ft is not None:
            tide_low = min(tide_low, obs.tide_height_ft)
            tide_high = max(tide_high, obs.tide_height_ft)
    return GlobalScaleExtents(wave_max=wave_max, tide_range=(tide_low, tide_high))

def locate_current_slot(hours: Sequence[float], now_hour: float) -> Optional[int]:
    """Index of the hour closest to now_hour; the first one wins a tie.

    Returns None for an empty sequence, meaning there is no current slot.
    """
    best_index = None
    best_diff = float('inf')
    for index, hour in enumerate(hours):
        diff = abs(hour - now_hour)
        if diff < best_diff:
            best_diff = diff
            best_index = index
    return best_index

def compare_tides(latest: Optional[float], previous: Optional[float]) -> TideTrend:
    if latest is None or previous is None:
        return TideTrend.UNKNOWN
    if latest > previous:
        return TideTrend.RISING
    if latest < previous:
        return TideTrend.FALLING
    return TideTrend.STEADY

def tide_trend(group: SpotGroup) -> TideTrend:
    """Trend between the two most recent timed observations of a spot."""
    if len(group.observations) < 2:
        return TideTrend.UNKNOWN
    latest, previous = group.observations[-1], group.observations[-2]
    return compare_tides(latest.tide_height_ft, previous.tide_height_ft)
