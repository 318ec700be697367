"""
Chart data package - dataset model, chart options and their validation.
"""

from chart_data.errors import (
    ChartError,
    ConfigError,
    ChartDataError,
    NoDataError,
    TemplateError
)

from chart_data.models import (
    ChartVariant,
    KeyPosition,
    Series,
    Dataset,
    to_value
)

from chart_data.options import (
    ChartOptions,
    AxisOptions,
    BarOptions,
    BarHorizontalOptions,
    LineOptions,
    PieOptions,
    canonical_key,
    resolve_options
)

from chart_data.validator import ConfigValidator

__all__ = [
    'ChartError',
    'ConfigError',
    'ChartDataError',
    'NoDataError',
    'TemplateError',
    'ChartVariant',
    'KeyPosition',
    'Series',
    'Dataset',
    'to_value',
    'ChartOptions',
    'AxisOptions',
    'BarOptions',
    'BarHorizontalOptions',
    'LineOptions',
    'PieOptions',
    'canonical_key',
    'resolve_options',
    'ConfigValidator'
]

__version__ = "1.0.0"
