"""
Visualization package - renders chart geometry to SVG.
Jinja2 templates walk precomputed geometry; no layout happens here.
"""

from visualization.svg_templates import (
    SVG_TEMPLATES,
    DOCUMENT_TEMPLATE_NAME,
    DEFAULT_STYLE_SLOTS,
    TEXT_CLASSES,
    STYLESHEET
)

from visualization.renderer import (
    SVGRenderer,
    svg_renderer,
    style_slot,
    path_data,
    build_environment
)

__all__ = [
    'SVG_TEMPLATES',
    'DOCUMENT_TEMPLATE_NAME',
    'DEFAULT_STYLE_SLOTS',
    'TEXT_CLASSES',
    'STYLESHEET',
    'SVGRenderer',
    'svg_renderer',
    'style_slot',
    'path_data',
    'build_environment'
]

__version__ = "1.0.0"
