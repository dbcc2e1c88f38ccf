import logging
from typing import Dict, Optional, Sequence

from features.charts.models.scene_types import (
    ChartScene,
    CircleShape,
    PALETTES,
    PathShape,
    TextShape,
    Theme
)
from features.charts.services.scales import LinearScale, PointScale
from features.forecast.models.forecast_types import GlobalScaleExtents, NormalizedObservation
from core.config import settings

logger = logging.getLogger(__name__)

MARGIN_TOP, MARGIN_RIGHT, MARGIN_BOTTOM, MARGIN_LEFT = 10, 5, 5, 5
POINT_PADDING = 0.5
RANGE_PADDING = 0.15
HOVER_RADIUS = 15

def build_tide_chart(
    observations: Sequence[NormalizedObservation],
    extents: GlobalScaleExtents,
    current_index: Optional[int] = None,
    hovered_key: Optional[str] = None,
    theme: Theme = Theme.LIGHT,
    width: Optional[float] = None,
    height: Optional[float] = None
) -> ChartScene:
    """Line chart of tide heights on the shared tide range.

    Slots whose tide did not parse keep their x position but get no point.
    """
    width = width or settings.chart_width
    height = height or settings.chart_height
    palette = PALETTES[theme]
    inner_width = width - MARGIN_LEFT - MARGIN_RIGHT
    inner_height = height - MARGIN_TOP - MARGIN_BOTTOM

    scene = ChartScene(
        kind="tide",
        width=width,
        height=height,
        offset_x=MARGIN_LEFT,
        offset_y=MARGIN_TOP,
        theme=theme
    )
    if not observations:
        return scene

    x = PointScale([obs.timestamp for obs in observations], inner_width, padding=POINT_PADDING)
    low, high = extents.tide_range
    pad = (high - low) * RANGE_PADDING
    y = LinearScale((low - pad, high + pad), (inner_height, 0))

    points = [
        (i, obs) for i, obs in enumerate(observations)
        if obs.tide_height_ft is not None
    ]
    if not points:
        return scene
    last = len(observations) - 1

    scene.shapes.append(PathShape(
        points=[(x(obs.timestamp), y(obs.tide_height_ft)) for _, obs in points],
        stroke=palette.line
    ))

    for _, obs in points:
        scene.shapes.append(CircleShape(
            cx=x(obs.timestamp),
            cy=y(obs.tide_height_ft),
            r=HOVER_RADIUS,
            hover_key=obs.timestamp
        ))

    for i, obs in points:
        highlighted = i == current_index or (hovered_key is not None and obs.timestamp == hovered_key)
        scene.shapes.append(CircleShape(
            cx=x(obs.timestamp),
            cy=y(obs.tide_height_ft),
            r=3 if highlighted else 1,
            fill=palette.ink if highlighted else palette.line
        ))

    # First, last and current are always labelled; hovering adds one more.
    # Slots sharing a time label get a single label.
    labelled: Dict[str, TextShape] = {}
    for i, obs in points:
        is_current = i == current_index
        if not (i in (0, last) or is_current or obs.timestamp == hovered_key):
            continue
        if obs.timestamp in labelled and not is_current:
            continue
        labelled[obs.timestamp] = TextShape(
            x=x(obs.timestamp),
            y=y(obs.tide_height_ft) - 5,
            text=f"{obs.tide_height_ft:.1f}",
            fill=palette.label,
            font_size=8,
            font_weight=600 if is_current else 400
        )
    scene.shapes.extend(labelled.values())

    return scene
