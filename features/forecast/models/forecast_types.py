from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, Field, field_serializer

from features.forecast.models.rating_categories import RatingKey, RatingDisplay

# One CSV row keyed by header name. Short rows leave trailing fields as None.
RawRecord = Dict[str, Optional[str]]

FEED_COLUMNS = (
    "spot",
    "timestamp",
    "rating_rating_key",
    "wave_surf",
    "tides_height",
    "swells_period",
    "wind_directionType",
    "weather_temperature",
    "weather_condition",
)

class TideTrend(Enum):
    """Direction of the tide between the two most recent time slots."""
    RISING = "↑"
    FALLING = "↓"
    STEADY = "→"
    UNKNOWN = ""

class NormalizedObservation(BaseModel):
    """One spot at one time slot, with every field parsed or marked invalid (None)."""
    spot: str
    timestamp: str = ""
    hour_of_day: Optional[float] = None  # [0, 24)
    wave_surf: str = ""  # raw "lo-hi" text
    wave_height_ft: Optional[float] = None  # upper bound of the range
    tide_height_ft: Optional[float] = None  # may be negative
    rating_key: Optional[RatingKey] = None
    rating_text: str = ""
    swell_period_sec: Optional[float] = None
    wind_direction_type: str = ""
    temperature_f: Optional[float] = None
    weather_condition: str = ""
    feed_index: int = 0

    @field_serializer("rating_key")
    def serialize_rating_key(self, rating_key: Optional[RatingKey]) -> Optional[str]:
        return rating_key.name if rating_key else None

class SpotGroup(BaseModel):
    """Observations for one spot.

    ``observations`` holds the entries with a valid hour, sorted by hour with
    ties kept in feed order. Entries whose timestamp could not be parsed are
    kept apart in ``untimed``: they count toward the global extents but never
    take part in time ordering, the current slot or the charts.
    """
    spot: str
    observations: List[NormalizedObservation] = Field(default_factory=list)
    untimed: List[NormalizedObservation] = Field(default_factory=list)

    @property
    def all_observations(self) -> List[NormalizedObservation]:
        return self.observations + self.untimed

    @property
    def hours(self) -> List[float]:
        return [obs.hour_of_day for obs in self.observations]

class GlobalScaleExtents(BaseModel):
    """Axis domains shared by every spot's charts."""
    wave_max: float = 1.0
    tide_range: Tuple[float, float] = (0.0, 5.0)

class SpotDisplay(BaseModel):
    """Formatted summary cells for a spot."""
    wave: str
    tide: str
    swell_period: str
    wind: str
    temperature: str
    weather: str

class TimeSlotCell(BaseModel):
    """Wave and tide text for one fixed time column."""
    label: str
    wave: str
    tide: str

class SpotSummary(BaseModel):
    spot: str
    current_index: Optional[int] = None
    displayed: Optional[NormalizedObservation] = None
    rating: RatingDisplay
    tide_trend: TideTrend = TideTrend.UNKNOWN
    display: SpotDisplay
    slots: List[TimeSlotCell] = Field(default_factory=list)
    observations: List[NormalizedObservation] = Field(default_factory=list)
    untimed: List[NormalizedObservation] = Field(default_factory=list)

class DashboardResponse(BaseModel):
    """Complete render model for one feed fetch."""
    title: str
    subtitle: str
    generated_at: datetime
    now_hour: float
    extents: GlobalScaleExtents
    spots: List[SpotSummary]

    def get_spot(self, spot: str) -> Optional[SpotSummary]:
        return next((s for s in self.spots if s.spot == spot), None)
