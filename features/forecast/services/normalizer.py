import logging
import math
import re
from typing import Iterable, List, Optional

from features.forecast.models.forecast_types import RawRecord, NormalizedObservation
from features.forecast.models.rating_categories import normalize_rating_key

logger = logging.getLogger(__name__)

_HOUR_PATTERN = re.compile(r"(\d{1,2})(?::(\d{1,2}))?\s*(?:([ap])m?)?", re.IGNORECASE)
_LEADING_FLOAT = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")
_TIDE_UNIT = re.compile(r"\s*FT\s*$", re.IGNORECASE)

def parse_float(value: Optional[str]) -> Optional[float]:
    """Parse the leading number of a field ("3ft" -> 3.0). Returns None if there is none."""
    if value is None:
        return None
    match = _LEADING_FLOAT.match(str(value))
    if not match:
        return None
    number = float(match.group(1))
    return number if math.isfinite(number) else None

def parse_hour(timestamp: Optional[str]) -> Optional[float]:
    """Convert a free-form hour label to an hour of day in [0, 24).

    Accepts "6pm", "6 PM", "06:30pm", "18:00" and bare digits. The first
    token carrying a meridiem or minutes wins ("7-8pm" -> 20.0). Labels
    with neither fall back to their digits mod 24. Returns None when the
    label has no digits at all.
    """
    if timestamp is None:
        return None
    text = str(timestamp).strip().lower()
    match = next(
        (m for m in _HOUR_PATTERN.finditer(text) if m.group(2) or m.group(3)),
        None
    )
    if match is None:
        digits = re.sub(r"\D", "", text)
        if not digits:
            return None
        return float(int(digits) % 24)

    hour_text, minute_text, meridiem = match.groups()
    hour = int(hour_text)
    if meridiem == "p" and hour != 12:
        hour += 12
    elif meridiem == "a" and hour == 12:
        hour = 0
    minutes = int(minute_text) if minute_text else 0
    return (hour + minutes / 60) % 24

def parse_wave_height(wave_surf: Optional[str]) -> Optional[float]:
    """Upper bound of a "lo-hi" range ("2-3" -> 3.0), or the single value."""
    if not wave_surf:
        return None
    parts = str(wave_surf).split('-')
    upper = parts[1] if len(parts) > 1 and parts[1].strip() else parts[0]
    height = parse_float(upper)
    if height is None or height < 0:
        return None
    return height

def parse_tide_height(tides_height: Optional[str]) -> Optional[float]:
    """Signed tide height from text like "-0.4 FT"."""
    if not tides_height:
        return None
    return parse_float(_TIDE_UNIT.sub("", str(tides_height)))

def parse_swell_period(swells_period: Optional[str]) -> Optional[float]:
    return parse_float(swells_period)

def parse_temperature(weather_temperature: Optional[str]) -> Optional[float]:
    return parse_float(weather_temperature)

def normalize_record(record: RawRecord, index: int = 0) -> Optional[NormalizedObservation]:
    """Build a NormalizedObservation. Only a missing spot name rejects the row."""
    spot = (record.get("spot") or "").strip()
    if not spot:
        logger.debug(f"Skipping row {index} without a spot name")
        return None

    return NormalizedObservation(
        spot=spot,
        timestamp=(record.get("timestamp") or "").strip(),
        hour_of_day=parse_hour(record.get("timestamp")),
        wave_surf=(record.get("wave_surf") or "").strip(),
        wave_height_ft=parse_wave_height(record.get("wave_surf")),
        tide_height_ft=parse_tide_height(record.get("tides_height")),
        rating_key=normalize_rating_key(record.get("rating_rating_key")),
        rating_text=(record.get("rating_rating_key") or "").strip(),
        swell_period_sec=parse_swell_period(record.get("swells_period")),
        wind_direction_type=(record.get("wind_directionType") or "").strip(),
        temperature_f=parse_temperature(record.get("weather_temperature")),
        weather_condition=(record.get("weather_condition") or "").strip(),
        feed_index=index
    )

def normalize_records(records: Iterable[RawRecord]) -> List[NormalizedObservation]:
    observations = []
    for index, record in enumerate(records):
        observation = normalize_record(record, index)
        if observation is not None:
            observations.append(observation)
    return observations
