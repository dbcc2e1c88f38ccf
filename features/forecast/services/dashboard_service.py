import logging
from datetime import datetime
from typing import List, Optional
from zoneinfo import ZoneInfo
from fastapi import HTTPException

from features.forecast.models.forecast_types import (
    DashboardResponse,
    NormalizedObservation,
    SpotDisplay,
    SpotGroup,
    SpotSummary,
    TimeSlotCell
)
from features.forecast.models.rating_categories import classify_rating
from features.forecast.services.csv_parser import parse_csv
from features.forecast.services.normalizer import normalize_records
from features.forecast.services.aggregator import (
    group_by_spot,
    compute_global_extents,
    locate_current_slot,
    tide_trend
)
from features.forecast.services.feed_client import SurfFeedClient
from features.common.exceptions.feed_exceptions import FeedFetchError
from features.common.utils.formatting import DisplayFormat
from core.config import settings

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to load surf data"

class DashboardService:
    """Builds the surf dashboard model from one fetch of the CSV feed."""

    def __init__(
        self,
        feed_client: SurfFeedClient,
        display_slots: Optional[List[str]] = None,
        timezone: Optional[str] = None
    ):
        self.feed_client = feed_client
        self.display_slots = display_slots if display_slots is not None else list(settings.display_slots)
        self.tz = ZoneInfo(timezone or settings.feed_timezone)

    def now(self) -> datetime:
        return datetime.now(self.tz)

    async def get_dashboard(self, now: Optional[datetime] = None) -> DashboardResponse:
        """Fetch the feed once and build a fresh model from it."""
        try:
            csv_text = await self.feed_client.fetch()
        except FeedFetchError as e:
            logger.error(f"❌ Surf feed unavailable: {str(e)}")
            raise HTTPException(status_code=503, detail=FETCH_FAILED_MESSAGE)

        try:
            return self.build_dashboard(csv_text, now or self.now())
        except Exception as e:
            logger.error(f"Error building surf dashboard: {str(e)}")
            raise HTTPException(status_code=500, detail=str(e))

    async def get_spot(self, spot: str, now: Optional[datetime] = None) -> SpotSummary:
        dashboard = await self.get_dashboard(now)
        summary = dashboard.get_spot(spot)
        if not summary:
            raise HTTPException(status_code=404, detail=f"Spot {spot} not found")
        return summary

    def build_dashboard(self, csv_text: str, now: datetime) -> DashboardResponse:
        """Run parse -> normalize -> group -> locate -> classify on feed text."""
        observations = normalize_records(parse_csv(csv_text))
        extents = compute_global_extents(observations)
        now_hour = now.hour + now.minute / 60

        spots = [self._summarize(group, now_hour) for group in group_by_spot(observations)]
        logger.info(f"Built dashboard with {len(spots)} spots from {len(observations)} observations")

        return DashboardResponse(
            title=settings.title,
            subtitle=f"{settings.region_name} • {now:%A, %B} {now.day}",
            generated_at=now,
            now_hour=now_hour,
            extents=extents,
            spots=spots
        )

    def _summarize(self, group: SpotGroup, now_hour: float) -> SpotSummary:
        current_index = locate_current_slot(group.hours, now_hour)
        displayed = self._displayed_observation(group, current_index)
        trend = tide_trend(group)

        display = SpotDisplay(
            wave=DisplayFormat.wave(displayed.wave_surf, displayed.wave_height_ft),
            tide=DisplayFormat.tide(displayed.tide_height_ft, trend.value),
            swell_period=DisplayFormat.swell_period(displayed.swell_period_sec),
            wind=displayed.wind_direction_type or DisplayFormat.text(None),
            temperature=DisplayFormat.temperature(displayed.temperature_f),
            weather=DisplayFormat.text(displayed.weather_condition)
        )

        return SpotSummary(
            spot=group.spot,
            current_index=current_index,
            displayed=displayed,
            rating=classify_rating(displayed.rating_key),
            tide_trend=trend,
            display=display,
            slots=[self._slot_cell(group, label) for label in self.display_slots],
            observations=group.observations,
            untimed=group.untimed
        )

    @staticmethod
    def _displayed_observation(
        group: SpotGroup,
        current_index: Optional[int]
    ) -> NormalizedObservation:
        """The current slot, or the first untimed entry when no hour parsed.

        Every group holds at least one observation.
        """
        if current_index is not None:
            return group.observations[current_index]
        return group.untimed[0]

    @staticmethod
    def _slot_cell(group: SpotGroup, label: str) -> TimeSlotCell:
        obs = next(
            (o for o in group.all_observations if o.timestamp.lower() == label.lower()),
            None
        )
        if obs is None:
            return TimeSlotCell(label=label, wave=DisplayFormat.text(None), tide=DisplayFormat.text(None))
        return TimeSlotCell(
            label=label,
            wave=DisplayFormat.wave(obs.wave_surf, obs.wave_height_ft),
            tide=DisplayFormat.tide(obs.tide_height_ft)
        )
