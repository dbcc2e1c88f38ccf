from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from fastapi import HTTPException

from features.forecast.models.forecast_types import TideTrend
from features.forecast.models.rating_categories import PLACEHOLDER
from features.forecast.services.dashboard_service import DashboardService, FETCH_FAILED_MESSAGE
from features.forecast.services.feed_client import SurfFeedClient
from tests.helpers import StaticFeedClient


def test_build_dashboard_end_to_end(dashboard_service, feed_text, evening):
    dashboard = dashboard_service.build_dashboard(feed_text, evening)

    assert [s.spot for s in dashboard.spots] == ["Blacks", "Ocean Beach"]
    assert dashboard.extents.wave_max == 4.0
    assert dashboard.extents.tide_range == (0.0, 5.0)
    assert dashboard.now_hour == pytest.approx(19 + 10 / 60)
    assert dashboard.subtitle.endswith("Sunday, October 18")

    blacks = dashboard.get_spot("Blacks")
    assert [o.timestamp for o in blacks.observations] == ["6pm", "7pm", "8pm"]
    assert blacks.current_index == 1
    assert blacks.displayed.timestamp == "7pm"
    assert blacks.tide_trend is TideTrend.RISING
    assert blacks.rating.label == "fair"
    assert blacks.display.wave == "2-3"
    assert blacks.display.tide == "2.8ft ↑"
    assert blacks.display.swell_period == "14s"
    assert blacks.display.temperature == "63°"
    assert blacks.display.weather == "clear"
    assert blacks.display.wind == "Cross-shore"


def test_unparseable_wave_renders_placeholder(dashboard_service, feed_text, evening):
    dashboard = dashboard_service.build_dashboard(feed_text, evening)

    ocean_beach = dashboard.get_spot("Ocean Beach")
    assert len(ocean_beach.observations) == 3
    assert ocean_beach.displayed.wave_height_ft is None
    assert ocean_beach.display.wave == PLACEHOLDER
    assert ocean_beach.rating.label == "poor"
    assert ocean_beach.display.weather == "partly cloudy"

    slots = {cell.label: cell for cell in ocean_beach.slots}
    assert slots["7pm"].wave == PLACEHOLDER
    assert slots["7pm"].tide == "2.9ft"
    assert slots["8pm"].wave == "1-2"


def test_invalid_wave_in_each_spot_still_builds(evening):
    csv_text = "\n".join([
        "spot,timestamp,rating_rating_key,wave_surf,tides_height,swells_period,wind_directionType,weather_temperature,weather_condition",
        "A,6pm,GOOD,2-3,1.0 FT,12,Offshore,60 F,CLEAR",
        "A,7pm,GOOD,N/A-N/A,1.5 FT,12,Offshore,60 F,CLEAR",
        "A,8pm,GOOD,3-5,2.0 FT,12,Offshore,60 F,CLEAR",
        "B,6pm,FAIR,N/A-N/A,-1.0 FT,9,Onshore,61 F,FOG",
        "B,7pm,FAIR,1-2,0.5 FT,9,Onshore,61 F,FOG",
        "B,8pm,FAIR,2-3,0.2 FT,9,Onshore,61 F,FOG",
    ])
    service = DashboardService(feed_client=StaticFeedClient(csv_text), display_slots=[])

    dashboard = service.build_dashboard(csv_text, evening)

    assert [s.spot for s in dashboard.spots] == ["A", "B"]
    assert dashboard.extents.wave_max == 5.0
    assert dashboard.extents.tide_range == (-1.0, 5.0)
    assert dashboard.get_spot("A").display.wave == PLACEHOLDER
    assert dashboard.get_spot("B").tide_trend is TideTrend.FALLING


def test_spot_without_parseable_hours(evening):
    csv_text = "spot,timestamp,wave_surf,tides_height\nReef,sometime,2-3,1.0 FT\n"
    service = DashboardService(feed_client=StaticFeedClient(csv_text), display_slots=["6pm"])

    dashboard = service.build_dashboard(csv_text, evening)

    reef = dashboard.get_spot("Reef")
    assert reef.current_index is None
    assert reef.observations == []
    assert reef.displayed.timestamp == "sometime"
    assert reef.tide_trend is TideTrend.UNKNOWN
    assert reef.rating.label == PLACEHOLDER
    assert reef.slots[0].wave == PLACEHOLDER
    assert dashboard.extents.wave_max == 3.0


def test_empty_feed(dashboard_service, evening):
    dashboard = dashboard_service.build_dashboard("", evening)

    assert dashboard.spots == []
    assert dashboard.extents.wave_max == 1.0


@pytest.mark.asyncio
async def test_get_dashboard_fetches_once_per_call(feed_text, evening):
    client = StaticFeedClient(feed_text)
    service = DashboardService(feed_client=client)

    await service.get_dashboard(evening)
    await service.get_dashboard(evening)

    assert client.calls == 2


@pytest.mark.asyncio
async def test_get_dashboard_reads_file_feed(dashboard_service, evening):
    dashboard = await dashboard_service.get_dashboard(evening)

    assert len(dashboard.spots) == 2


@pytest.mark.asyncio
async def test_fetch_failure_becomes_503(tmp_path, evening):
    service = DashboardService(feed_client=SurfFeedClient(str(tmp_path / "missing.csv")))

    with pytest.raises(HTTPException) as exc_info:
        await service.get_dashboard(evening)

    assert exc_info.value.status_code == 503
    assert exc_info.value.detail == FETCH_FAILED_MESSAGE


@pytest.mark.asyncio
async def test_unknown_spot_is_404(dashboard_service, evening):
    with pytest.raises(HTTPException) as exc_info:
        await dashboard_service.get_spot("Pipeline", evening)

    assert exc_info.value.status_code == 404


def test_subtitle_day_has_no_padding(dashboard_service, feed_text):
    morning = datetime(2026, 10, 5, 7, 0, tzinfo=ZoneInfo("America/Los_Angeles"))

    dashboard = dashboard_service.build_dashboard(feed_text, morning)

    assert dashboard.subtitle.endswith("Monday, October 5")


def test_overflowing_wave_height_keeps_extents_finite(dashboard_service, evening):
    csv_text = "spot,timestamp,rating_rating_key,wave_surf,tides_height\nBlacks,6pm,FAIR,1e999,1.0 FT\n"

    dashboard = dashboard_service.build_dashboard(csv_text, evening)

    assert dashboard.extents.wave_max == 1.0
    assert dashboard.spots[0].display.wave == PLACEHOLDER
