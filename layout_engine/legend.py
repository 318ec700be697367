"""
Legend (key) placement.
Right: one column beside the plot area.
Bottom: columns of `key_wrap` entries under the plot area.
"""

from typing import List, Sequence

from chart_data.models import KeyPosition
from chart_data.options import AxisOptions, ChartOptions
from layout_engine import constants as c
from layout_engine.geometry import LegendEntry, PlotArea, Rect, Text, TextRole

ENTRY_STEP = c.KEY_BOX_SIZE + c.KEY_PADDING


def _entry(style_index: int, title: str, x: float, y: float, column: int) -> LegendEntry:
    return LegendEntry(
        style_index=style_index,
        title=title,
        swatch=Rect(x=x, y=y, width=c.KEY_BOX_SIZE, height=c.KEY_BOX_SIZE),
        label=Text(
            x=x + c.KEY_BOX_SIZE + c.KEY_PADDING,
            y=y + c.KEY_BOX_SIZE,
            text=title,
            role=TextRole.KEY_TEXT
        ),
        column=column
    )


def bottom_key_start(options: ChartOptions, area: PlotArea) -> float:
    """Top of the bottom legend, clear of category labels and title."""
    y_key = area.base_line
    if isinstance(options, AxisOptions):
        if options.show_x_labels:
            y_key = area.base_line + c.KEY_BOTTOM_LABELS_GAP
        if options.show_x_title:
            y_key = area.base_line + c.KEY_BOTTOM_TITLE_GAP
    return y_key


def legend_entries(options: ChartOptions, area: PlotArea, titles: Sequence[str]) -> List[LegendEntry]:
    """
    One entry per title, in order.
    Entry n (1-based) sits at n * (box + padding) below the legend top; a
    new bottom column shifts right by key_column_width and up by
    KEY_COLUMN_RISE.
    """
    if not options.key:
        return []

    entries = []
    if options.key_position == KeyPosition.RIGHT:
        x_key = area.x + area.width + c.KEY_RIGHT_OFFSET
        for index, title in enumerate(titles):
            count = index + 1
            entries.append(_entry(index, title, x_key, area.y + ENTRY_STEP * count, column=0))
        return entries

    y_key = bottom_key_start(options, area)
    x_key = area.x
    for index, title in enumerate(titles):
        count = index + 1
        column = index // options.key_wrap
        if index > 0 and index % options.key_wrap == 0:
            x_key += options.key_column_width
            y_key -= c.KEY_COLUMN_RISE
        entries.append(_entry(index, title, x_key, y_key + ENTRY_STEP * count, column=column))
    return entries
