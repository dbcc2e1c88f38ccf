from fastapi import APIRouter, Depends, Request
from features.forecast.models.forecast_types import DashboardResponse, SpotSummary
from features.forecast.services.dashboard_service import DashboardService
import logging

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/forecast",
    tags=["Forecast"]
)

def get_service(request: Request) -> DashboardService:
    """Dependency to get the DashboardService instance."""
    return request.app.state.dashboard_service

@router.get(
    "",
    response_model=DashboardResponse,
    summary="Get the surf dashboard",
    description="Fetches the surf feed and returns every spot with shared chart scales and the current time slot"
)
async def get_dashboard(
    service: DashboardService = Depends(get_service)
):
    """Get the full dashboard model."""
    return await service.get_dashboard()

@router.get(
    "/spots/{spot}",
    response_model=SpotSummary,
    summary="Get one spot",
    description="Returns the summary, time slots and observations for a single spot"
)
async def get_spot(
    spot: str,
    service: DashboardService = Depends(get_service)
):
    """Get the dashboard row for a single spot."""
    return await service.get_spot(spot)
