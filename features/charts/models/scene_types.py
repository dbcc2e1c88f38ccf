from enum import Enum
from typing import Annotated, List, Literal, Optional, Tuple, Union
from pydantic import BaseModel, Field

class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"

class Palette(BaseModel):
    """Theme colors used by the chart renderers."""
    ink: str  # current/hovered highlight
    axis: str
    muted: str  # x-axis labels
    label: str  # tide value labels
    line: str  # tide curve and idle dots

PALETTES = {
    Theme.LIGHT: Palette(ink="#000", axis="#d2d2d7", muted="#86868b", label="#1d1d1f", line="#9ca3af"),
    Theme.DARK: Palette(ink="#fff", axis="#3a3a3c", muted="#98989d", label="#f5f5f7", line="#9ca3af"),
}

class RectShape(BaseModel):
    kind: Literal["rect"] = "rect"
    x: float
    y: float
    width: float
    height: float
    fill: str = "transparent"
    stroke: Optional[str] = None
    stroke_width: float = 0
    rx: float = 0
    hover_key: Optional[str] = None

class CircleShape(BaseModel):
    kind: Literal["circle"] = "circle"
    cx: float
    cy: float
    r: float
    fill: str = "transparent"
    hover_key: Optional[str] = None

class LineShape(BaseModel):
    kind: Literal["line"] = "line"
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    stroke_width: float = 0.5

class PathShape(BaseModel):
    kind: Literal["path"] = "path"
    points: List[Tuple[float, float]]
    stroke: str
    stroke_width: float = 1.5
    curve: str = "monotoneX"

class TextShape(BaseModel):
    kind: Literal["text"] = "text"
    x: float
    y: float
    text: str
    fill: str
    font_size: float = 8
    font_weight: int = 400
    anchor: str = "middle"

Shape = Annotated[
    Union[RectShape, CircleShape, LineShape, PathShape, TextShape],
    Field(discriminator="kind")
]

class ChartScene(BaseModel):
    """Declarative description of one chart: a canvas and shapes in draw order."""
    kind: str
    width: float
    height: float
    offset_x: float = 0  # plot margin applied to every shape
    offset_y: float = 0
    theme: Theme = Theme.LIGHT
    shapes: List[Shape] = Field(default_factory=list)

    def of_kind(self, kind: str) -> List[BaseModel]:
        return [shape for shape in self.shapes if shape.kind == kind]
