"""
Plot area reduction.
Starts from the full canvas and carves out room for labels, titles and the
legend. Every step works on the already reduced rectangle, so the order is
part of the contract.
"""

from chart_data.models import KeyPosition
from chart_data.options import ChartOptions, AxisOptions
from layout_engine import constants as c
from layout_engine.geometry import PlotArea


def _reduce_for_axes(options: AxisOptions, x: float, y: float, w: float, h: float):
    if options.show_y_labels:
        w -= c.Y_LABELS_WIDTH
        x += c.Y_LABELS_WIDTH
    if options.show_y_title:
        w -= c.Y_TITLE_WIDTH
        x += c.Y_TITLE_WIDTH

    if options.show_x_labels:
        w -= c.X_LABELS_END_PAD
        # nothing on the left - pad that end as well
        if not options.show_y_labels and not options.show_y_title:
            w -= c.X_LABELS_END_PAD
            x += c.X_LABELS_END_PAD

    if options.show_x_labels:
        h -= c.X_LABELS_HEIGHT
    if options.show_x_title:
        h -= c.X_TITLE_HEIGHT

    if options.show_y_labels:
        h -= c.Y_LABELS_TOP_PAD
        y += c.Y_LABELS_TOP_PAD

    return x, y, w, h


def reduce_plot_area(options: ChartOptions) -> PlotArea:
    """
    Compute the plot rectangle for the given options.
    Variants without axes (pie) skip the axis steps.
    """
    x, y = 0.0, 0.0
    w, h = float(options.width), float(options.height)

    if isinstance(options, AxisOptions):
        x, y, w, h = _reduce_for_axes(options, x, y, w, h)

    if options.show_graph_title:
        h -= c.GRAPH_TITLE_HEIGHT
        y += c.GRAPH_TITLE_HEIGHT
    if options.show_graph_subtitle:
        h -= c.GRAPH_SUBTITLE_HEIGHT
        y += c.GRAPH_SUBTITLE_HEIGHT

    if options.key and options.key_position == KeyPosition.RIGHT:
        w -= c.KEY_RIGHT_WIDTH
    elif options.key and options.key_position == KeyPosition.BOTTOM:
        h -= c.KEY_BOTTOM_HEIGHT

    return PlotArea(x=x, y=y, width=w, height=h)
