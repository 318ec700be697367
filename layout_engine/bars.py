"""
Bar placement for vertical and horizontal bar charts.
Each category owns one band; every series in that band gets a bar of
width band - BAR_MARGIN, drawn over the others in series order.
"""

from typing import List, Tuple

from chart_data.models import Dataset
from chart_data.options import AxisOptions
from layout_engine import constants as c
from layout_engine.geometry import Bar, PlotArea, Text, TextRole
from layout_engine.scale import ValueScale, format_number


def _bar_width(band: float) -> float:
    return max(band - c.BAR_MARGIN, 1.0)


def vertical_bars(
    options: AxisOptions,
    dataset: Dataset,
    area: PlotArea,
    band: float,
    scale: ValueScale
) -> Tuple[List[Bar], List[Text]]:
    """Bars rising from the base line; value labels just above each bar."""
    bars = []
    labels = []
    bar_width = _bar_width(band)

    for index, category in enumerate(options.categories):
        left = area.x + band * index + c.BAR_MARGIN / 2
        for series_index, series in enumerate(dataset.series):
            value = series.value_for(category)
            if value is None:
                continue

            length = scale.to_pixels(value)
            top = area.base_line - max(length, 0)
            bars.append(Bar(
                category=category,
                series_index=series_index,
                value=value,
                x=left,
                y=top,
                width=bar_width,
                height=abs(length)
            ))

            if options.show_data_values:
                labels.append(Text(
                    x=left + bar_width / 2,
                    y=area.base_line - length - c.DATA_LABEL_OFFSET,
                    text=format_number(value),
                    role=TextRole.DATA_LABEL
                ))

    return bars, labels


def horizontal_bars(
    options: AxisOptions,
    dataset: Dataset,
    area: PlotArea,
    band: float,
    scale: ValueScale
) -> Tuple[List[Bar], List[Text]]:
    """
    Bars growing right from the left axis, first category at the bottom.
    Value labels start just past the bar end, on the band's midpoint.
    """
    bars = []
    labels = []
    bar_width = _bar_width(band)

    for index, category in enumerate(options.categories):
        top = area.base_line - band * index - band
        for series_index, series in enumerate(dataset.series):
            value = series.value_for(category)
            if value is None:
                continue

            length = scale.to_pixels(value)
            bars.append(Bar(
                category=category,
                series_index=series_index,
                value=value,
                x=area.x + min(length, 0),
                y=top,
                width=abs(length),
                height=bar_width
            ))

            if options.show_data_values:
                labels.append(Text(
                    x=area.x + length + c.DATA_LABEL_OFFSET,
                    y=top + bar_width / 2,
                    text=format_number(value),
                    role=TextRole.DATA_LABEL,
                    anchor="start"
                ))

    return bars, labels
