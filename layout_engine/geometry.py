"""
Geometry models - the render-ready output of the layout engine.
Absolute pixel coordinates only; no markup, no styling.
A Geometry is a disposable snapshot, rebuilt on every render.
"""

from typing import List, Optional
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from chart_data.models import ChartVariant


class TextRole(str, Enum):
    """What a piece of text is; the renderer maps roles to CSS classes."""
    MAIN_TITLE = "main_title"
    SUB_TITLE = "sub_title"
    X_AXIS_LABEL = "x_axis_label"
    Y_AXIS_LABEL = "y_axis_label"
    X_AXIS_TITLE = "x_axis_title"
    Y_AXIS_TITLE = "y_axis_title"
    DATA_LABEL = "data_label"
    KEY_TEXT = "key_text"


class Shape(BaseModel):
    """Base for all geometry elements (immutable)."""
    model_config = ConfigDict(frozen=True)


class Point(Shape):
    x: float
    y: float


class Rect(Shape):
    x: float
    y: float
    width: float
    height: float


class PlotArea(Rect):
    """The sub-rectangle of the canvas where data shapes are drawn."""

    @property
    def base_line(self) -> float:
        """Pixel y of the bottom edge."""
        return self.y + self.height


class Line(Shape):
    """Straight segment; used for axes and guide lines."""
    x1: float
    y1: float
    x2: float
    y2: float


class Text(Shape):
    x: float
    y: float
    text: str
    role: TextRole
    anchor: Optional[str] = Field(None, description="Overrides the role's default text-anchor")


class ValueDomain(Shape):
    """Value range covered by the value axis."""
    min_value: float
    max_value: float
    start: float
    top_pad: float
    range: float


class Tick(Shape):
    """A labelled position on the value axis."""
    value: float
    offset: float = Field(..., description="Pixel distance from the axis origin")
    label: Optional[Text] = None
    guide: Optional[Line] = None


class Bar(Shape):
    category: str
    series_index: int
    value: float
    x: float
    y: float
    width: float
    height: float


class Marker(Shape):
    """Data point marker on a line chart."""
    series_index: int
    x: float
    y: float
    radius: float


class Polyline(Shape):
    """
    One series drawn as connected points.
    Absent values break the line, so a series may have several segments.
    """
    series_index: int
    segments: List[List[Point]] = Field(default_factory=list)


class AreaFill(Shape):
    """Closed outline between a line segment and the base line."""
    series_index: int
    points: List[Point]


class PieSlice(Shape):
    """
    Arc between two cumulative angles, in degrees.
    0 is 12 o'clock, angles grow clockwise.
    """
    category: str
    style_index: int
    value: float
    fraction: float
    start_angle: float
    end_angle: float
    cx: float
    cy: float
    radius: float
    start: Point
    end: Point
    large_arc: bool
    full_circle: bool = False


class LegendEntry(Shape):
    style_index: int
    title: str
    swatch: Rect
    label: Text
    column: int = 0


class Geometry(Shape):
    """Everything the renderer needs to draw one chart."""
    variant: ChartVariant
    width: float
    height: float
    style_sheet: Optional[str] = None
    cycle_styles: bool = False

    plot_area: Optional[PlotArea] = None
    domain: Optional[ValueDomain] = None
    tick_interval: Optional[float] = None
    band_size: Optional[float] = None

    axes: List[Line] = Field(default_factory=list)
    ticks: List[Tick] = Field(default_factory=list)
    category_labels: List[Text] = Field(default_factory=list)
    axis_titles: List[Text] = Field(default_factory=list)
    titles: List[Text] = Field(default_factory=list)

    bars: List[Bar] = Field(default_factory=list)
    areas: List[AreaFill] = Field(default_factory=list)
    lines: List[Polyline] = Field(default_factory=list)
    markers: List[Marker] = Field(default_factory=list)
    slices: List[PieSlice] = Field(default_factory=list)
    data_labels: List[Text] = Field(default_factory=list)

    legend: List[LegendEntry] = Field(default_factory=list)
