"""
Pie placement.
Domain/range math does not apply: each value becomes a fraction of the
series total, then a cumulative start/end angle. 0 degrees is 12 o'clock,
angles grow clockwise.
"""

import math
import logging
from typing import List, Tuple

from chart_data.errors import ChartDataError
from chart_data.models import Dataset
from chart_data.options import PieOptions
from layout_engine import constants as c
from layout_engine.geometry import PieSlice, PlotArea, Point, Text, TextRole
from layout_engine.scale import format_number


logger = logging.getLogger(__name__)


def point_on_circle(cx: float, cy: float, radius: float, angle: float) -> Point:
    """Point at `angle` degrees clockwise from 12 o'clock."""
    radians = math.radians(angle)
    return Point(x=cx + radius * math.sin(radians), y=cy - radius * math.cos(radians))


def slice_label(options: PieOptions, value: float, fraction: float) -> str:
    """Label text: percent, actual value, or both."""
    percent = f"{round(fraction * 100)}%"
    if options.show_actual_values and options.show_percent:
        return f"{format_number(value)} ({percent})"
    if options.show_actual_values:
        return format_number(value)
    return percent


def pie_slices(options: PieOptions, dataset: Dataset, area: PlotArea) -> Tuple[List[PieSlice], List[Text]]:
    """
    Build the slices of the first series.
    Absent values count as zero; zero slices are left out.
    """
    if len(dataset.series) > 1:
        logger.debug(f"Pie draws the first series only, ignoring {len(dataset.series) - 1} more")
    series = dataset.series[0]

    values = []
    for category in options.categories:
        value = series.value_for(category)
        if value is not None and value < 0:
            raise ChartDataError(f"Pie values cannot be negative: {category}={format_number(value)}")
        values.append((category, value or 0.0))

    total = sum(value for _, value in values)
    if total == 0:
        raise ChartDataError("Cannot render proportions of a series that sums to zero")

    cx = area.x + area.width / 2
    cy = area.y + area.height / 2
    radius = min(area.width, area.height) / 2 - c.PIE_PADDING
    if radius <= 0:
        raise ChartDataError("Plot area is too small to draw a pie")

    slices = []
    labels = []
    cumulative = 0.0
    for style_index, (category, value) in enumerate(values):
        if value == 0:
            continue

        fraction = value / total
        start_angle = cumulative / total * 360
        cumulative += value
        end_angle = cumulative / total * 360

        slices.append(PieSlice(
            category=category,
            style_index=style_index,
            value=value,
            fraction=fraction,
            start_angle=start_angle,
            end_angle=end_angle,
            cx=cx,
            cy=cy,
            radius=radius,
            start=point_on_circle(cx, cy, radius, start_angle),
            end=point_on_circle(cx, cy, radius, end_angle),
            large_arc=(end_angle - start_angle) > 180,
            full_circle=fraction == 1
        ))

        if options.show_data_labels:
            anchor = point_on_circle(cx, cy, radius * c.PIE_LABEL_RADIUS, (start_angle + end_angle) / 2)
            labels.append(Text(
                x=anchor.x,
                y=anchor.y,
                text=slice_label(options, value, fraction),
                role=TextRole.DATA_LABEL
            ))

    return slices, labels
