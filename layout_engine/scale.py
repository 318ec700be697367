"""
Value domain, tick interval and pixel mapping.
Same dataset and options ALWAYS produce the same scale.
"""

import math
from typing import Iterable, Optional

from chart_data.errors import ChartDataError
from layout_engine import constants as c
from layout_engine.geometry import ValueDomain


def format_number(value: float) -> str:
    """
    Format a number for a label: 15 significant digits, no trailing zeros.
    Keeps float noise such as 1.8000000000000003 out of the output.
    """
    if value == 0:
        return "0"
    return f"{value:.15g}"


def derive_domain(values: Iterable[float], y_start: Optional[float]) -> ValueDomain:
    """
    Scan present values for min/max and derive the plotted range.
    An explicit y_start (zero included) wins over the minimum value.
    """
    min_value = None
    max_value = None
    for value in values:
        if min_value is None or value < min_value:
            min_value = value
        if max_value is None or value > max_value:
            max_value = value

    if min_value is None:
        raise ChartDataError("No values present in any series")

    start = y_start if y_start is not None else min_value
    if start > max_value:
        raise ChartDataError(
            f"Value axis start {format_number(start)} is above the maximum value {format_number(max_value)}"
        )

    if max_value - start == 0:
        top_pad = c.FLAT_TOP_PAD
    else:
        top_pad = (max_value - start) / c.TOP_PAD_DIVISOR

    value_range = (max_value + top_pad) - start
    if not math.isfinite(value_range):
        raise ChartDataError(
            f"Values from {format_number(start)} to {format_number(max_value)} are too far apart to scale"
        )

    return ValueDomain(
        min_value=min_value,
        max_value=max_value,
        start=start,
        top_pad=top_pad,
        range=value_range
    )


def default_tick_interval(max_value: float) -> float:
    """
    A tenth of the max value: whole numbers above 10, two decimals below.
    45 -> 4 (4.5 printed with no decimals), 4.5 -> 0.45.
    """
    interval = max_value / c.DEFAULT_TICK_DIVISOR
    if max_value > c.WHOLE_TICK_THRESHOLD:
        return float("%02.0f" % interval)
    return float("%02.2f" % interval)


def tick_interval(domain: ValueDomain, y_marker: Optional[float]) -> float:
    """Explicit marker if configured, otherwise the default interval."""
    if y_marker is not None:
        return float(y_marker)

    interval = default_tick_interval(domain.max_value)
    if interval <= 0:
        # max at or below zero, or too small for two decimals
        interval = domain.range / c.DEFAULT_TICK_DIVISOR
    return interval


def snap_pixels(size: float) -> float:
    """
    Snap a per-step pixel size down to whole pixels.
    Sub-pixel sizes are kept as they are so steps never collapse to zero.
    """
    if size >= 1:
        return float(math.floor(size))
    return size


class ValueScale:
    """Linear mapping from values to pixel offsets along the value axis."""

    def __init__(self, domain: ValueDomain, interval: float, axis_length: float):
        self.domain = domain
        self.interval = interval
        self.axis_length = axis_length
        tick_count = domain.range / interval
        # every tick needs at least one pixel
        if not math.isfinite(tick_count) or tick_count > axis_length:
            raise ChartDataError(
                f"Tick interval {format_number(interval)} gives {format_number(tick_count)} ticks "
                f"on a {format_number(axis_length)}px axis"
            )
        self.tick_pixels = snap_pixels(axis_length / tick_count)
        self.divider = self.tick_pixels / interval

    def to_pixels(self, value: float) -> float:
        """Pixel offset of a value from the axis origin."""
        return (value - self.domain.start) * self.divider

    def tick_offsets(self):
        """Yield (value, offset) for every tick that fits on the axis."""
        count = 0
        while self.tick_pixels * count < self.axis_length:
            yield self.domain.start + self.interval * count, self.tick_pixels * count
            count += 1
