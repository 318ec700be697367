"""
Axis geometry: axis lines, value ticks with guide lines, category labels,
axis titles and the graph titles.
"""

from typing import List

from chart_data.options import AxisOptions, ChartOptions
from layout_engine import constants as c
from layout_engine.geometry import Line, PlotArea, Text, TextRole, Tick
from layout_engine.scale import ValueScale, format_number


def axis_lines(area: PlotArea) -> List[Line]:
    """Left axis then bottom axis."""
    return [
        Line(x1=area.x, y1=area.y, x2=area.x, y2=area.base_line),
        Line(x1=area.x, y1=area.base_line, x2=area.x + area.width, y2=area.base_line),
    ]


def vertical_ticks(options: AxisOptions, area: PlotArea, scale: ValueScale) -> List[Tick]:
    """Value ticks climbing the left axis, guide lines across the plot."""
    ticks = []
    if not options.show_y_labels:
        return ticks

    for count, (value, offset) in enumerate(scale.tick_offsets()):
        y = area.base_line - offset
        label = Text(
            x=area.x - c.VALUE_LABEL_GAP,
            y=y,
            text=format_number(value),
            role=TextRole.Y_AXIS_LABEL
        )
        guide = None
        if count > 0:
            guide = Line(x1=area.x, y1=y, x2=area.x + area.width, y2=y)
        ticks.append(Tick(value=value, offset=offset, label=label, guide=guide))
    return ticks


def horizontal_ticks(options: AxisOptions, area: PlotArea, scale: ValueScale) -> List[Tick]:
    """Value ticks along the bottom axis, guide lines up to the top edge."""
    ticks = []
    if not options.show_y_labels:
        return ticks

    for count, (value, offset) in enumerate(scale.tick_offsets()):
        x = area.x + offset
        # first label keeps the role's default anchor, the rest are centred
        label = Text(
            x=x,
            y=area.base_line + c.VALUE_LABEL_OFFSET,
            text=format_number(value),
            role=TextRole.Y_AXIS_LABEL,
            anchor=None if count == 0 else "middle"
        )
        guide = None
        if count > 0:
            guide = Line(x1=x, y1=area.base_line, x2=x, y2=area.y)
        ticks.append(Tick(value=value, offset=offset, label=label, guide=guide))
    return ticks


def bottom_category_labels(options: AxisOptions, area: PlotArea, band: float) -> List[Text]:
    """Category names centred under each band."""
    if not options.show_x_labels:
        return []
    return [
        Text(
            x=area.x + band * index + band / 2,
            y=area.base_line + c.CATEGORY_LABEL_OFFSET,
            text=category,
            role=TextRole.X_AXIS_LABEL
        )
        for index, category in enumerate(options.categories)
    ]


def left_category_labels(options: AxisOptions, area: PlotArea, band: float) -> List[Text]:
    """Category names left of each band, counted up from the base line."""
    if not options.show_x_labels:
        return []
    return [
        Text(
            x=area.x - c.CATEGORY_LABEL_OFFSET,
            y=area.base_line - band * index - band / 2,
            text=category,
            role=TextRole.X_AXIS_LABEL
        )
        for index, category in enumerate(options.categories)
    ]


def axis_titles(options: AxisOptions, area: PlotArea, horizontal: bool = False) -> List[Text]:
    """
    Bottom and left axis titles.
    A horizontal chart has its value axis at the bottom, so the titles swap.
    """
    titles = []
    if options.show_x_title:
        offset = c.X_TITLE_OFFSET if options.show_x_labels else c.X_TITLE_OFFSET_BARE
        titles.append(Text(
            x=area.width / 2 + area.x,
            y=area.base_line + offset,
            text=options.y_title if horizontal else options.x_title,
            role=TextRole.X_AXIS_TITLE
        ))
    if options.show_y_title:
        titles.append(Text(
            x=c.Y_TITLE_X,
            y=area.height / 2 + area.y,
            text=options.x_title if horizontal else options.y_title,
            role=TextRole.Y_AXIS_TITLE
        ))
    return titles


def graph_titles(options: ChartOptions, area: PlotArea) -> List[Text]:
    """Main title and subtitle, centred over the plot width."""
    titles = []
    if options.show_graph_title:
        titles.append(Text(
            x=area.width / 2,
            y=c.TITLE_Y,
            text=options.graph_title,
            role=TextRole.MAIN_TITLE
        ))
    if options.show_graph_subtitle:
        titles.append(Text(
            x=area.width / 2,
            y=c.SUBTITLE_Y if options.show_graph_title else c.TITLE_Y,
            text=options.graph_subtitle,
            role=TextRole.SUB_TITLE
        ))
    return titles
