# charts/line.py

"""Line chart with optional point markers and area fill."""

from chart_data.models import ChartVariant
from chart_data.options import LineOptions
from charts.base import Chart


class LineChart(Chart):
    """One polyline per series through the category band centres."""
    variant = ChartVariant.LINE
    options_class = LineOptions
