from typing import Optional
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import Response

from features.charts.models.scene_types import ChartScene, Theme
from features.charts.services.chart_service import ChartKind, ChartService
from features.charts.services.svg_renderer import render_svg
from core.config import settings

import logging

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/forecast/spots",
    tags=["Charts"]
)

def get_service(request: Request) -> ChartService:
    """Dependency to get the ChartService instance."""
    return request.app.state.chart_service

def resolve_theme(theme: Optional[Theme]) -> Theme:
    return theme or settings.default_theme

@router.get(
    "/{spot}/charts/{kind}.svg",
    summary="Get a spot chart as SVG",
    description="Renders the wave histogram or tide chart for a spot as an SVG document",
    response_class=Response
)
async def get_chart_svg(
    spot: str,
    kind: ChartKind,
    theme: Optional[Theme] = None,
    hover: Optional[str] = Query(None, description="Time label of the hovered slot"),
    service: ChartService = Depends(get_service)
):
    """Get a chart rendered to SVG."""
    scene = await service.get_chart(spot, kind, resolve_theme(theme), hover)
    return Response(content=render_svg(scene), media_type="image/svg+xml")

@router.get(
    "/{spot}/charts/{kind}",
    response_model=ChartScene,
    summary="Get a spot chart scene",
    description="Returns the declarative scene graph for the wave histogram or tide chart of a spot"
)
async def get_chart(
    spot: str,
    kind: ChartKind,
    theme: Optional[Theme] = None,
    hover: Optional[str] = Query(None, description="Time label of the hovered slot"),
    service: ChartService = Depends(get_service)
):
    """Get a chart scene graph."""
    return await service.get_chart(spot, kind, resolve_theme(theme), hover)
