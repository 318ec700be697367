"""
Line chart placement: one polyline per series through the band centres.
"""

from typing import List, Tuple

from chart_data.models import Dataset
from chart_data.options import LineOptions
from layout_engine import constants as c
from layout_engine.geometry import AreaFill, Marker, PlotArea, Point, Polyline, Text, TextRole
from layout_engine.scale import ValueScale, format_number


def series_lines(
    options: LineOptions,
    dataset: Dataset,
    area: PlotArea,
    band: float,
    scale: ValueScale
) -> Tuple[List[Polyline], List[AreaFill], List[Marker], List[Text]]:
    """
    Place every series.
    Returns (lines, area fills, point markers, value labels).
    """
    lines = []
    fills = []
    markers = []
    labels = []

    for series_index, series in enumerate(dataset.series):
        segments: List[List[Point]] = []
        current: List[Point] = []

        for index, category in enumerate(options.categories):
            value = series.value_for(category)
            if value is None:
                # absent value - break the line here
                if current:
                    segments.append(current)
                    current = []
                continue

            point = Point(
                x=area.x + band * index + band / 2,
                y=area.base_line - scale.to_pixels(value)
            )
            current.append(point)

            if options.show_data_points:
                markers.append(Marker(
                    series_index=series_index,
                    x=point.x,
                    y=point.y,
                    radius=c.DATA_POINT_RADIUS
                ))
            if options.show_data_values:
                labels.append(Text(
                    x=point.x,
                    y=point.y - c.POINT_LABEL_OFFSET,
                    text=format_number(value),
                    role=TextRole.DATA_LABEL
                ))

        if current:
            segments.append(current)

        lines.append(Polyline(series_index=series_index, segments=segments))

        if options.area_fill:
            for segment in segments:
                outline = list(segment)
                outline.append(Point(x=segment[-1].x, y=area.base_line))
                outline.append(Point(x=segment[0].x, y=area.base_line))
                fills.append(AreaFill(series_index=series_index, points=outline))

    return lines, fills, markers, labels
