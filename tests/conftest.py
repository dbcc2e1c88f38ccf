from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

from features.forecast.services.dashboard_service import DashboardService
from features.forecast.services.feed_client import SurfFeedClient

FIXTURES = Path(__file__).parent / "fixtures"
PACIFIC = ZoneInfo("America/Los_Angeles")


@pytest.fixture
def feed_path() -> Path:
    return FIXTURES / "today.csv"


@pytest.fixture
def feed_text(feed_path: Path) -> str:
    return feed_path.read_text(encoding="utf-8")


@pytest.fixture
def evening() -> datetime:
    """19:10 local time, nearest to the 7pm slot."""
    return datetime(2026, 10, 18, 19, 10, tzinfo=PACIFIC)


@pytest.fixture
def dashboard_service(feed_path: Path) -> DashboardService:
    return DashboardService(
        feed_client=SurfFeedClient(str(feed_path)),
        display_slots=["6pm", "7pm", "8pm"],
        timezone="America/Los_Angeles",
    )
