"""
Chart options - the resolved configuration of one chart.
Every recognised key has a default per variant; unrecognised keys are
passed through untouched (e.g. stylesheet hints for a custom template).
"""

import logging
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from chart_data.errors import ConfigError
from chart_data.models import KeyPosition


logger = logging.getLogger(__name__)

# Public option names that map onto a differently named field
OPTION_ALIASES = {
    "fields": "categories",
    "xfields": "categories",
}


def canonical_key(key: str) -> str:
    """Map a public option name to its field name."""
    return OPTION_ALIASES.get(key, key)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


class ChartOptions(BaseModel):
    """
    Options shared by every variant.
    Assignment is validated, so typed setters cannot store a bad value.
    """
    model_config = ConfigDict(extra="allow", validate_assignment=True)

    categories: List[str] = Field(
        default_factory=list,
        description="Category names, in axis order (public name: 'fields')"
    )
    width: float = Field(500, gt=0, description="Width of the whole SVG canvas")
    height: float = Field(300, gt=0, description="Height of the whole SVG canvas")
    style_sheet: Optional[str] = Field(
        None,
        description="External stylesheet href; None embeds the default stylesheet"
    )

    show_graph_title: bool = False
    graph_title: str = "Graph Title"
    show_graph_subtitle: bool = False
    graph_subtitle: str = "Graph Sub Title"

    key: bool = Field(False, description="Draw a legend")
    key_position: KeyPosition = KeyPosition.RIGHT
    key_wrap: int = Field(3, gt=0, description="Bottom legend entries per column")
    key_column_width: float = Field(200, gt=0, description="Horizontal step between bottom legend columns")

    cycle_styles: bool = Field(
        False,
        description="Reuse the 10 default style slots instead of leaving extra series unstyled"
    )

    @field_validator("categories", mode="before")
    @classmethod
    def coerce_categories(cls, v):
        """Category labels are names - numbers such as years become strings."""
        if isinstance(v, (list, tuple)):
            return [str(item) for item in v]
        return v

    @field_validator("style_sheet", mode="before")
    @classmethod
    def blank_style_sheet(cls, v):
        return _blank_to_none(v)


class AxisOptions(ChartOptions):
    """Options for variants with a value axis and a category axis."""
    show_data_values: bool = True

    y_start: Optional[float] = Field(
        0,
        description="Value where the value axis starts; None starts at the minimum value"
    )
    y_marker: Optional[float] = Field(
        None,
        gt=0,
        description="Gap between value axis ticks; None picks a tenth of the maximum"
    )

    show_x_labels: bool = True
    show_y_labels: bool = True

    show_x_title: bool = False
    x_title: str = "X Field names"
    show_y_title: bool = False
    y_title: str = "Y Scale"

    @field_validator("y_start", "y_marker", mode="before")
    @classmethod
    def blank_numbers(cls, v):
        return _blank_to_none(v)


class BarOptions(AxisOptions):
    """Vertical bar chart options."""


class BarHorizontalOptions(AxisOptions):
    """Horizontal bar chart options."""


class LineOptions(AxisOptions):
    """Line chart options."""
    show_data_points: bool = True
    area_fill: bool = False


class PieOptions(ChartOptions):
    """Pie chart options."""
    show_data_labels: bool = False
    show_percent: bool = True
    show_actual_values: bool = False


def resolve_options(options_cls: Type[ChartOptions], user_config: Optional[Dict[str, Any]] = None) -> ChartOptions:
    """
    Merge user options over the variant defaults.
    A recognised key with a value of the wrong type keeps its default;
    unrecognised keys are stored as pass-through extras.
    """
    if user_config is None:
        user_config = {}
    if not isinstance(user_config, dict):
        raise ConfigError("Chart config must be a mapping of option names to values")

    recognised: Dict[str, Any] = {}
    passthrough: Dict[str, Any] = {}
    for key, value in user_config.items():
        if not isinstance(key, str):
            raise ConfigError(f"Option names must be strings, got {key!r}")
        name = canonical_key(key)
        if name in options_cls.model_fields:
            recognised[name] = value
        else:
            passthrough[key] = value

    options = options_cls.model_validate(passthrough)

    for name, value in recognised.items():
        try:
            setattr(options, name, value)
        except ValidationError as e:
            reason = e.errors()[0]["msg"] if e.errors() else str(e)
            logger.warning(
                f"Ignoring invalid value {value!r} for option '{name}' ({reason}); "
                f"keeping default {getattr(options, name)!r}"
            )

    return options
