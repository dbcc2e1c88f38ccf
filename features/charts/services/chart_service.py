import logging
from enum import Enum
from typing import Optional
from fastapi import HTTPException

from features.charts.models.scene_types import ChartScene, Theme
from features.charts.services.wave_chart import build_wave_chart
from features.charts.services.tide_chart import build_tide_chart
from features.forecast.models.forecast_types import GlobalScaleExtents, SpotSummary
from features.forecast.services.dashboard_service import DashboardService

logger = logging.getLogger(__name__)

class ChartKind(Enum):
    WAVE = "wave"
    TIDE = "tide"

_BUILDERS = {
    ChartKind.WAVE: build_wave_chart,
    ChartKind.TIDE: build_tide_chart,
}

class ChartService:
    """Renders per-spot chart scenes from a freshly built dashboard."""

    def __init__(self, dashboard_service: DashboardService):
        self.dashboard_service = dashboard_service

    @staticmethod
    def build_chart(
        kind: ChartKind,
        summary: SpotSummary,
        extents: GlobalScaleExtents,
        theme: Theme = Theme.LIGHT,
        hovered_key: Optional[str] = None
    ) -> ChartScene:
        return _BUILDERS[kind](
            summary.observations,
            extents,
            current_index=summary.current_index,
            hovered_key=hovered_key,
            theme=theme
        )

    async def get_chart(
        self,
        spot: str,
        kind: ChartKind,
        theme: Theme = Theme.LIGHT,
        hovered_key: Optional[str] = None
    ) -> ChartScene:
        dashboard = await self.dashboard_service.get_dashboard()
        summary = dashboard.get_spot(spot)
        if not summary:
            raise HTTPException(status_code=404, detail=f"Spot {spot} not found")
        logger.debug(f"Rendering {kind.value} chart for {spot} (theme={theme.value}, hover={hovered_key})")
        return self.build_chart(kind, summary, dashboard.extents, theme, hovered_key)
