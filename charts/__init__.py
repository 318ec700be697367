"""
Charts package - the construction, data and render API.
Every variant funnels through the same layout engine and renderer.
"""

from charts.base import Chart
from charts.bar import BarChart
from charts.bar_horizontal import BarHorizontalChart
from charts.line import LineChart
from charts.pie import PieChart
from charts.factory import CHART_CLASSES, chart_class, create

__all__ = [
    'Chart',
    'BarChart',
    'BarHorizontalChart',
    'LineChart',
    'PieChart',
    'CHART_CLASSES',
    'chart_class',
    'create'
]

__version__ = "1.0.0"
