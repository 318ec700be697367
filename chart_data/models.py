"""
Dataset models: ordered categories x named series.
Series values are keyed by category name and iterated in category order.
Absent values are stored as None - never as zero.
"""

import math
import logging
from typing import Dict, List, Optional, Any, Iterator, Sequence
from enum import Enum

import pandas as pd
from pydantic import BaseModel, Field

from chart_data.errors import ChartDataError


logger = logging.getLogger(__name__)


class ChartVariant(str, Enum):
    """Supported chart variants."""
    BAR = "bar"
    BAR_HORIZONTAL = "bar_horizontal"
    LINE = "line"
    PIE = "pie"


class KeyPosition(str, Enum):
    """Where the legend (key) is drawn."""
    RIGHT = "right"
    BOTTOM = "bottom"


def to_value(raw: Any) -> Optional[float]:
    """
    Convert one raw data cell to a float, or None when absent.
    None, '' and NaN are absent; numeric strings are accepted.
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise ChartDataError(f"Boolean is not a numeric value: {raw!r}")
    if isinstance(raw, str):
        raw = raw.strip()
        if raw == "":
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        raise ChartDataError(f"Value is not numeric: {raw!r}")
    if math.isnan(value):
        return None
    if math.isinf(value):
        raise ChartDataError(f"Value is not finite: {raw!r}")
    return value


class Series(BaseModel):
    """
    One named collection of values, one per category.
    Insertion order of series = rendering order = legend order.
    """
    title: Optional[str] = Field(None, description="Legend title of the series")
    values: Dict[str, Optional[float]] = Field(
        default_factory=dict,
        description="Values keyed by category name (None = absent)"
    )

    def value_for(self, category: str) -> Optional[float]:
        """Get the value for a category, None if absent."""
        return self.values.get(category)


class Dataset(BaseModel):
    """Ordered collection of series sharing the chart's categories."""
    series: List[Series] = Field(default_factory=list)

    def add_series(
        self,
        categories: Sequence[str],
        values: Sequence[Any],
        title: Optional[str] = None
    ) -> Series:
        """
        Pair values positionally with categories and append a new series.
        Short value lists leave trailing categories absent; values beyond
        the category count are dropped.
        """
        if isinstance(values, pd.Series):
            values = values.tolist()
        if isinstance(values, (str, bytes, dict)) or not isinstance(values, Sequence):
            raise ChartDataError("Series values must be a sequence")

        if len(values) > len(categories):
            logger.debug(
                f"Dropping {len(values) - len(categories)} value(s) with no matching category"
            )

        paired: Dict[str, Optional[float]] = {}
        for index, category in enumerate(categories):
            paired[category] = to_value(values[index]) if index < len(values) else None

        series = Series(title=title, values=paired)
        self.series.append(series)
        return series

    def add_frame(self, categories: Sequence[str], frame: pd.DataFrame) -> List[Series]:
        """
        Add every column of a DataFrame as one series.
        Rows are matched to categories by index label; NaN cells are absent.
        """
        if not isinstance(frame, pd.DataFrame):
            raise ChartDataError("add_frame expects a pandas DataFrame")

        rows = {str(label): position for position, label in enumerate(frame.index)}
        added = []
        for column in frame.columns:
            column_values = frame[column].tolist()
            values = []
            for category in categories:
                position = rows.get(category)
                cell = column_values[position] if position is not None else None
                values.append(None if cell is None or pd.isna(cell) else cell)
            added.append(self.add_series(categories, values, title=str(column)))
        return added

    def clear(self) -> None:
        """Remove every series."""
        self.series = []

    def present_values(self, categories: Sequence[str]) -> Iterator[float]:
        """Yield every value actually present, in category then series order."""
        for category in categories:
            for series in self.series:
                value = series.value_for(category)
                if value is not None:
                    yield value

    def __len__(self) -> int:
        return len(self.series)
