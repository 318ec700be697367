# visualization/renderer.py

"""
Deterministic SVG rendering of computed chart geometry.
No layout decisions here - the renderer only serialises what the layout
engine placed.
"""

import logging
from typing import Dict, List, Optional, Sequence

import jinja2
from jinja2 import DictLoader, Environment, StrictUndefined

from chart_data.errors import TemplateError
from layout_engine.geometry import Geometry, Point
from layout_engine.scale import format_number
from visualization.svg_templates import (
    DEFAULT_STYLE_SLOTS,
    DOCUMENT_TEMPLATE_NAME,
    SVG_TEMPLATES,
    TEXT_CLASSES
)


logger = logging.getLogger(__name__)


def style_slot(index: int, cycle: bool = False) -> int:
    """
    Map a 0-based series/category index to its 1-based style slot.
    With cycling the slot wraps around the styled slots, otherwise it keeps
    counting and falls back to the neutral base class in the stylesheet.
    """
    if cycle:
        return (index % DEFAULT_STYLE_SLOTS) + 1
    return index + 1


def path_data(segments: Sequence[Sequence[Point]]) -> str:
    """SVG path data: one moveto per segment, lineto for the rest."""
    commands: List[str] = []
    for segment in segments:
        for position, point in enumerate(segment):
            command = "M" if position == 0 else "L"
            commands.append(f"{command}{format_number(point.x)} {format_number(point.y)}")
    return " ".join(commands)


def build_environment(templates: Dict[str, str]) -> Environment:
    """Jinja2 environment for a template set, with the SVG filters registered."""
    env = Environment(
        loader=DictLoader(templates),
        autoescape=True,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True
    )
    env.filters["num"] = format_number
    env.filters["slot"] = style_slot
    env.filters["path"] = path_data
    return env


# Shared, read-only after import
_DEFAULT_ENVIRONMENT = build_environment(SVG_TEMPLATES)


class SVGRenderer:
    """
    Renders Geometry to a standalone SVG 1.0 document.
    Same geometry ALWAYS produces the same bytes.
    """

    def __init__(self, templates: Optional[Dict[str, str]] = None):
        if templates is None:
            self.env = _DEFAULT_ENVIRONMENT
        else:
            self.env = build_environment(templates)

    def render(self, geometry: Geometry, template_name: str = DOCUMENT_TEMPLATE_NAME) -> str:
        """Serialise geometry into SVG text."""
        try:
            template = self.env.get_template(template_name)
            svg = template.render(geometry=geometry, text_classes=TEXT_CLASSES)
        except jinja2.TemplateError as e:
            logger.error(f"Rendering failed for template '{template_name}': {e}")
            raise TemplateError(str(e), template_name=template_name) from e

        logger.debug(f"Rendered {geometry.variant.value} chart: {len(svg)} characters")
        return svg


# Global renderer instance
svg_renderer = SVGRenderer()
