# charts/bar_horizontal.py

"""Horizontal bar chart: categories up the left axis, values along the bottom."""

from chart_data.models import ChartVariant
from chart_data.options import BarHorizontalOptions
from charts.base import Chart


class BarHorizontalChart(Chart):
    """
    Bars grow right from the left axis, first category nearest the base line.
    The bottom axis title shows y_title and the left one x_title.
    """
    variant = ChartVariant.BAR_HORIZONTAL
    options_class = BarHorizontalOptions
