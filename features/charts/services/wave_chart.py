import logging
from typing import List, Optional, Sequence

from features.charts.models.scene_types import (
    ChartScene,
    LineShape,
    PALETTES,
    RectShape,
    TextShape,
    Theme
)
from features.charts.services.scales import BandScale, LinearScale
from features.forecast.models.forecast_types import GlobalScaleExtents, NormalizedObservation
from features.forecast.models.rating_categories import PLACEHOLDER, classify_rating
from core.config import settings

logger = logging.getLogger(__name__)

MARGIN_TOP, MARGIN_RIGHT, MARGIN_BOTTOM, MARGIN_LEFT = 10, 5, 15, 5
BAR_PADDING = 0.2
HEADROOM = 1.1

def build_wave_chart(
    observations: Sequence[NormalizedObservation],
    extents: GlobalScaleExtents,
    current_index: Optional[int] = None,
    hovered_key: Optional[str] = None,
    theme: Theme = Theme.LIGHT,
    width: Optional[float] = None,
    height: Optional[float] = None
) -> ChartScene:
    """Bar histogram of wave heights over a spot's time slots.

    Bars share the global wave scale and are colored by rating. The current
    and hovered bars get an outline. Value labels show on the first, last and
    current bars, or only on the hovered bar while hovering. A bar whose
    height did not parse is drawn flat with a placeholder label.
    """
    width = width or settings.chart_width
    height = height or settings.chart_height
    palette = PALETTES[theme]
    inner_width = width - MARGIN_LEFT - MARGIN_RIGHT
    inner_height = height - MARGIN_TOP - MARGIN_BOTTOM

    scene = ChartScene(
        kind="wave",
        width=width,
        height=height + 5,
        offset_x=MARGIN_LEFT,
        offset_y=MARGIN_TOP,
        theme=theme
    )
    if not observations:
        return scene

    times = [obs.timestamp for obs in observations]
    x = BandScale(times, inner_width, padding=BAR_PADDING)
    hover_x = BandScale(times, inner_width)
    y = LinearScale((0, extents.wave_max * HEADROOM), (inner_height, 0))
    last = len(observations) - 1

    hover_targets: List[RectShape] = []
    bars: List[RectShape] = []
    labels: List[TextShape] = []
    for i, obs in enumerate(observations):
        is_current = i == current_index
        is_hovered = hovered_key is not None and obs.timestamp == hovered_key
        color = classify_rating(obs.rating_key).color
        wave_height = obs.wave_height_ft if obs.wave_height_ft is not None else 0.0
        bar_top = y(wave_height)

        hover_targets.append(RectShape(
            x=hover_x(obs.timestamp),
            y=0,
            width=hover_x.bandwidth,
            height=inner_height,
            hover_key=obs.timestamp
        ))
        bars.append(RectShape(
            x=x(obs.timestamp),
            y=bar_top,
            width=x.bandwidth,
            height=inner_height - bar_top,
            fill=color,
            stroke=palette.ink if is_current or is_hovered else None,
            stroke_width=1.5 if is_current or is_hovered else 0,
            rx=1
        ))

        if hovered_key is not None:
            visible = is_hovered
        else:
            visible = i in (0, last) or is_current
        if visible:
            labels.append(TextShape(
                x=x(obs.timestamp) + x.bandwidth / 2,
                y=bar_top - 2,
                text=f"{obs.wave_height_ft:.1f}" if obs.wave_height_ft is not None else PLACEHOLDER,
                fill=color,
                font_size=8 if is_current else 7,
                font_weight=700 if is_current else 500
            ))

    scene.shapes.extend(hover_targets)
    scene.shapes.extend(bars)
    scene.shapes.extend(labels)
    scene.shapes.append(LineShape(
        x1=0,
        y1=inner_height,
        x2=inner_width,
        y2=inner_height,
        stroke=palette.axis
    ))

    # Time labels under the first, last and current bars
    seen = set()
    for i, obs in enumerate(observations):
        if not (i in (0, last) or i == current_index) or obs.timestamp in seen:
            continue
        seen.add(obs.timestamp)
        scene.shapes.append(TextShape(
            x=x(obs.timestamp) + x.bandwidth / 2,
            y=inner_height + 10,
            text=obs.timestamp,
            fill=palette.muted,
            font_size=6
        ))

    return scene
