from typing import List
from xml.sax.saxutils import escape, quoteattr

from features.charts.models.scene_types import (
    ChartScene,
    CircleShape,
    LineShape,
    PathShape,
    RectShape,
    TextShape
)

FONT_FAMILY = "-apple-system, BlinkMacSystemFont, sans-serif"

def _num(value: float) -> str:
    return f"{value:.2f}".rstrip('0').rstrip('.')

def _rect(shape: RectShape) -> str:
    attrs = (
        f'x="{_num(shape.x)}" y="{_num(shape.y)}" '
        f'width="{_num(shape.width)}" height="{_num(shape.height)}" '
        f'rx="{_num(shape.rx)}" fill="{shape.fill}"'
    )
    if shape.stroke:
        attrs += f' stroke="{shape.stroke}" stroke-width="{_num(shape.stroke_width)}"'
    if shape.hover_key is not None:
        attrs += f' data-hover-key={quoteattr(shape.hover_key)}'
    return f"<rect {attrs}/>"

def _circle(shape: CircleShape) -> str:
    attrs = f'cx="{_num(shape.cx)}" cy="{_num(shape.cy)}" r="{_num(shape.r)}" fill="{shape.fill}"'
    if shape.hover_key is not None:
        attrs += f' data-hover-key={quoteattr(shape.hover_key)}'
    return f"<circle {attrs}/>"

def _line(shape: LineShape) -> str:
    return (
        f'<line x1="{_num(shape.x1)}" y1="{_num(shape.y1)}" '
        f'x2="{_num(shape.x2)}" y2="{_num(shape.y2)}" '
        f'stroke="{shape.stroke}" stroke-width="{_num(shape.stroke_width)}"/>'
    )

def _path(shape: PathShape) -> str:
    # Straight segments; the curve hint is left to richer front ends
    d = " ".join(
        f"{'M' if i == 0 else 'L'}{_num(px)},{_num(py)}"
        for i, (px, py) in enumerate(shape.points)
    )
    return f'<path d="{d}" fill="none" stroke="{shape.stroke}" stroke-width="{_num(shape.stroke_width)}"/>'

def _text(shape: TextShape) -> str:
    return (
        f'<text x="{_num(shape.x)}" y="{_num(shape.y)}" text-anchor="{shape.anchor}" '
        f'font-size="{_num(shape.font_size)}" font-weight="{shape.font_weight}" '
        f'font-family="{FONT_FAMILY}" fill="{shape.fill}">{escape(shape.text)}</text>'
    )

_RENDERERS = {
    "rect": _rect,
    "circle": _circle,
    "line": _line,
    "path": _path,
    "text": _text,
}

def render_svg(scene: ChartScene) -> str:
    """Serialize a chart scene to a standalone SVG document."""
    body: List[str] = [_RENDERERS[shape.kind](shape) for shape in scene.shapes]
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{_num(scene.width)}" '
        f'height="{_num(scene.height)}" class="{scene.theme.value}">'
        f'<g transform="translate({_num(scene.offset_x)},{_num(scene.offset_y)})">'
        + "".join(body)
        + "</g></svg>"
    )
