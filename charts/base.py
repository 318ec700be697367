# charts/base.py

"""
Chart object: mutable options + dataset, disposable geometry.
Flow: options validated -> series added -> layout computed -> SVG rendered.
A chart is single-writer; build it, render it, optionally clear and rebuild.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Type

import pandas as pd
from pydantic import ValidationError

from chart_data.errors import ConfigError, NoDataError
from chart_data.models import ChartVariant, Dataset, Series
from chart_data.options import ChartOptions, canonical_key, resolve_options
from chart_data.validator import ConfigValidator
from layout_engine.engine import LayoutEngine
from layout_engine.geometry import Geometry
from visualization.renderer import SVGRenderer, svg_renderer


logger = logging.getLogger(__name__)


class Chart:
    """
    Base chart. Variants set `variant` and `options_class`.
    Constructing a chart without categories raises ConfigError.
    """
    variant: ChartVariant = None
    options_class: Type[ChartOptions] = ChartOptions

    def __init__(self, config: Optional[Dict[str, Any]] = None, renderer: Optional[SVGRenderer] = None):
        self.validator = ConfigValidator()
        self.options = resolve_options(self.options_class, config)
        self.validator.check(self.options)
        self.dataset = Dataset()
        self.engine = LayoutEngine()
        self.renderer = renderer or svg_renderer

    @property
    def categories(self) -> List[str]:
        return list(self.options.categories)

    # ---- options ----

    def get_option(self, name: str) -> Any:
        """Read one option by its public name."""
        field = canonical_key(name)
        if field in type(self.options).model_fields:
            return getattr(self.options, field)
        extras = self.options.model_extra or {}
        if name in extras:
            return extras[name]
        raise ConfigError(f"Unknown option '{name}' for {self.variant.value} charts")

    def set_option(self, name: str, value: Any) -> None:
        """
        Change one recognised option.
        Unlike construction, an invalid value raises instead of falling back.
        """
        field = canonical_key(name)
        if field not in type(self.options).model_fields:
            extras = self.options.model_extra or {}
            if name not in extras:
                raise ConfigError(f"Unknown option '{name}' for {self.variant.value} charts")
            extras[name] = value
            return

        previous = getattr(self.options, field)
        try:
            setattr(self.options, field, value)
        except ValidationError as e:
            reason = e.errors()[0]["msg"] if e.errors() else str(e)
            raise ConfigError(f"Invalid value {value!r} for option '{name}': {reason}") from e

        if field == "categories":
            errors = self.validator.validate_options(self.options)
            if errors:
                self.options.categories = previous
                raise ConfigError("; ".join(errors))

    # ---- data ----

    def add_series(self, values: Sequence[Any], title: Optional[str] = None) -> Series:
        """
        Add one series, values paired positionally with the categories.
        Missing trailing values stay absent; extra values are dropped.
        """
        return self.dataset.add_series(self.options.categories, values, title=title)

    def add_frame(self, frame: pd.DataFrame) -> List[Series]:
        """Add every DataFrame column as a series, rows matched by index label."""
        return self.dataset.add_frame(self.options.categories, frame)

    def clear_series(self) -> None:
        """Drop every series, keep the options."""
        self.dataset.clear()

    # ---- output ----

    def layout(self) -> Geometry:
        """Compute fresh geometry for the current options and dataset."""
        if not self.dataset.series:
            raise NoDataError("No data available")
        return self.engine.compute_layout(self.variant, self.options, self.dataset)

    def render(self) -> str:
        """Render the chart as a standalone SVG document."""
        geometry = self.layout()
        svg = self.renderer.render(geometry)
        logger.info(
            f"Rendered {self.variant.value} chart with {len(self.dataset)} series "
            f"over {len(self.options.categories)} categories"
        )
        return svg

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(categories={self.categories!r}, "
            f"series={len(self.dataset)})"
        )
