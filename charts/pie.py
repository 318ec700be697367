# charts/pie.py

"""Pie chart of the first series."""

from chart_data.models import ChartVariant
from chart_data.options import PieOptions
from charts.base import Chart


class PieChart(Chart):
    """
    Each category value becomes a slice proportional to the series total.
    The legend lists categories rather than series.
    """
    variant = ChartVariant.PIE
    options_class = PieOptions
