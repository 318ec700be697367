# charts/factory.py

"""Chart construction by variant name."""

from typing import Any, Dict, Optional, Type, Union

from chart_data.errors import ConfigError
from chart_data.models import ChartVariant
from charts.bar import BarChart
from charts.bar_horizontal import BarHorizontalChart
from charts.base import Chart
from charts.line import LineChart
from charts.pie import PieChart
from visualization.renderer import SVGRenderer


CHART_CLASSES: Dict[ChartVariant, Type[Chart]] = {
    ChartVariant.BAR: BarChart,
    ChartVariant.BAR_HORIZONTAL: BarHorizontalChart,
    ChartVariant.LINE: LineChart,
    ChartVariant.PIE: PieChart,
}


def chart_class(variant: Union[str, ChartVariant]) -> Type[Chart]:
    """Look up the chart class for a variant name."""
    try:
        return CHART_CLASSES[ChartVariant(variant)]
    except ValueError:
        supported = ", ".join(v.value for v in ChartVariant)
        raise ConfigError(f"Unknown chart variant '{variant}'. Supported: {supported}")


def create(
    variant: Union[str, ChartVariant],
    config: Optional[Dict[str, Any]] = None,
    renderer: Optional[SVGRenderer] = None
) -> Chart:
    """
    Build a chart of the given variant.
    Raises ConfigError for an unknown variant or missing categories.
    """
    return chart_class(variant)(config, renderer=renderer)
