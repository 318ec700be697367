"""
Layout engine package - turns a dataset plus options into chart geometry.
Pure and deterministic: same inputs ALWAYS produce the same geometry.
"""

from layout_engine.geometry import (
    TextRole,
    Point,
    Rect,
    PlotArea,
    Line,
    Text,
    ValueDomain,
    Tick,
    Bar,
    Marker,
    Polyline,
    AreaFill,
    PieSlice,
    LegendEntry,
    Geometry
)

from layout_engine.area import reduce_plot_area
from layout_engine.scale import (
    ValueScale,
    derive_domain,
    default_tick_interval,
    tick_interval,
    snap_pixels,
    format_number
)
from layout_engine.legend import legend_entries
from layout_engine.engine import LayoutEngine, compute_layout

__all__ = [
    'TextRole',
    'Point',
    'Rect',
    'PlotArea',
    'Line',
    'Text',
    'ValueDomain',
    'Tick',
    'Bar',
    'Marker',
    'Polyline',
    'AreaFill',
    'PieSlice',
    'LegendEntry',
    'Geometry',
    'reduce_plot_area',
    'ValueScale',
    'derive_domain',
    'default_tick_interval',
    'tick_interval',
    'snap_pixels',
    'format_number',
    'legend_entries',
    'LayoutEngine',
    'compute_layout'
]

__version__ = "1.0.0"
