# charts/bar.py

"""Vertical bar chart: one band per category, one bar per series."""

from chart_data.models import ChartVariant
from chart_data.options import BarOptions
from charts.base import Chart


class BarChart(Chart):
    """
    Bars grow up from the base line.
    Value ticks on the left, category labels under each band.
    """
    variant = ChartVariant.BAR
    options_class = BarOptions
