"""
Layout engine: (dataset, options) -> Geometry.
Pure computation - no I/O, no shared state between calls.
"""

import logging

from chart_data.errors import ConfigError, NoDataError
from chart_data.models import ChartVariant, Dataset
from chart_data.options import AxisOptions, ChartOptions, LineOptions, PieOptions
from layout_engine import axes
from layout_engine.area import reduce_plot_area
from layout_engine.bars import horizontal_bars, vertical_bars
from layout_engine.geometry import Geometry, PlotArea
from layout_engine.legend import legend_entries
from layout_engine.lines import series_lines
from layout_engine.pie import pie_slices
from layout_engine.scale import ValueScale, derive_domain, snap_pixels, tick_interval


logger = logging.getLogger(__name__)


class LayoutEngine:
    """
    Computes the fully resolved geometry of a chart.
    Flow:
    1. Reduce the canvas to the plot area
    2. Derive the value domain and tick interval (axis variants)
    3. Place variant shapes, labels, legend and titles
    """

    def compute_layout(self, variant: ChartVariant, options: ChartOptions, dataset: Dataset) -> Geometry:
        """Compute geometry for one render. Raises NoDataError without series."""
        if not dataset.series:
            raise NoDataError("No data available")
        if not options.categories:
            raise ConfigError("fields was not supplied or is empty")

        area = reduce_plot_area(options)
        if area.width <= 0 or area.height <= 0:
            raise ConfigError(
                f"Canvas {options.width:g}x{options.height:g} leaves no room for the plot area"
            )

        if variant == ChartVariant.PIE:
            geometry = self._pie_layout(options, dataset, area)
        elif variant in (ChartVariant.BAR, ChartVariant.BAR_HORIZONTAL, ChartVariant.LINE):
            if not isinstance(options, AxisOptions):
                raise ConfigError(f"Variant '{variant.value}' needs axis options")
            geometry = self._axis_layout(variant, options, dataset, area)
        else:
            raise ConfigError(f"Unsupported chart variant: {variant}")

        logger.debug(
            f"Layout {variant.value}: plot area {area.width:g}x{area.height:g} at "
            f"({area.x:g}, {area.y:g}), {len(dataset.series)} series, "
            f"{len(options.categories)} categories"
        )
        return geometry

    def _axis_layout(self, variant: ChartVariant, options: AxisOptions, dataset: Dataset, area: PlotArea) -> Geometry:
        horizontal = variant == ChartVariant.BAR_HORIZONTAL

        domain = derive_domain(dataset.present_values(options.categories), options.y_start)
        interval = tick_interval(domain, options.y_marker)

        category_length = area.height if horizontal else area.width
        value_length = area.width if horizontal else area.height
        band = snap_pixels(category_length / len(options.categories))
        scale = ValueScale(domain, interval, value_length)

        shapes = {}
        if horizontal:
            shapes["ticks"] = axes.horizontal_ticks(options, area, scale)
            shapes["category_labels"] = axes.left_category_labels(options, area, band)
            shapes["bars"], shapes["data_labels"] = horizontal_bars(options, dataset, area, band, scale)
        elif variant == ChartVariant.BAR:
            shapes["ticks"] = axes.vertical_ticks(options, area, scale)
            shapes["category_labels"] = axes.bottom_category_labels(options, area, band)
            shapes["bars"], shapes["data_labels"] = vertical_bars(options, dataset, area, band, scale)
        else:
            if not isinstance(options, LineOptions):
                raise ConfigError("Line charts need line options")
            shapes["ticks"] = axes.vertical_ticks(options, area, scale)
            shapes["category_labels"] = axes.bottom_category_labels(options, area, band)
            (
                shapes["lines"],
                shapes["areas"],
                shapes["markers"],
                shapes["data_labels"],
            ) = series_lines(options, dataset, area, band, scale)

        titles = [series.title or "" for series in dataset.series]

        return Geometry(
            variant=variant,
            width=options.width,
            height=options.height,
            style_sheet=options.style_sheet,
            cycle_styles=options.cycle_styles,
            plot_area=area,
            domain=domain,
            tick_interval=interval,
            band_size=band,
            axes=axes.axis_lines(area),
            axis_titles=axes.axis_titles(options, area, horizontal=horizontal),
            titles=axes.graph_titles(options, area),
            legend=legend_entries(options, area, titles),
            **shapes
        )

    def _pie_layout(self, options: ChartOptions, dataset: Dataset, area: PlotArea) -> Geometry:
        if not isinstance(options, PieOptions):
            raise ConfigError("Pie charts need pie options")

        slices, labels = pie_slices(options, dataset, area)

        return Geometry(
            variant=ChartVariant.PIE,
            width=options.width,
            height=options.height,
            style_sheet=options.style_sheet,
            cycle_styles=options.cycle_styles,
            plot_area=area,
            slices=slices,
            data_labels=labels,
            titles=axes.graph_titles(options, area),
            legend=legend_entries(options, area, list(options.categories)),
        )


def compute_layout(variant: ChartVariant, options: ChartOptions, dataset: Dataset) -> Geometry:
    """Compute geometry with a fresh engine."""
    return LayoutEngine().compute_layout(variant, options, dataset)
