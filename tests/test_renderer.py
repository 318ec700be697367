"""
Tests for SVG rendering of computed geometry.
"""

import jinja2
import pytest

from chart_data.errors import TemplateError
from chart_data.models import ChartVariant, Dataset
from chart_data.options import (
    BarHorizontalOptions,
    BarOptions,
    LineOptions,
    PieOptions,
    resolve_options
)
from layout_engine.engine import compute_layout
from layout_engine.geometry import Point
from visualization.renderer import SVGRenderer, path_data, style_slot, svg_renderer


MONTHS = ["Jan", "Feb", "Mar"]


def _geometry(variant=ChartVariant.BAR, options_cls=BarOptions, series_count=1, **config):
    options = resolve_options(options_cls, {"fields": MONTHS, **config})
    dataset = Dataset()
    for index in range(series_count):
        dataset.add_series(MONTHS, [12.975 + index, 45, 21], title=f"Series {index + 1}")
    return compute_layout(variant, options, dataset)


class TestStyleSlots:
    """Test series index to style slot mapping."""

    def test_slots_are_one_based(self):
        """Index 0 uses slot 1."""
        assert style_slot(0) == 1
        assert style_slot(9) == 10

    def test_beyond_palette_without_cycling(self):
        """Slots keep counting; the stylesheet leaves them on the neutral class."""
        assert style_slot(11) == 12

    def test_cycling_wraps(self):
        """With cycling, slot = (index mod 10) + 1."""
        assert style_slot(10, cycle=True) == 1
        assert style_slot(23, cycle=True) == 4


class TestPathData:
    """Test SVG path data."""

    def test_segments(self):
        """Each segment starts with a moveto."""
        segments = [
            [Point(x=1, y=2), Point(x=3.5, y=4)],
            [Point(x=10, y=0)]
        ]

        assert path_data(segments) == "M1 2 L3.5 4 M10 0"


class TestDocument:
    """Test the rendered document."""

    def test_header_and_embedded_stylesheet(self):
        """Standalone SVG 1.0 document with the default stylesheet."""
        svg = svg_renderer.render(_geometry())

        assert svg.startswith('<?xml version="1.0"?>\n<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.0//EN"')
        assert '<svg width="500" height="300" viewBox="0 0 500 300"' in svg
        assert '<style type="text/css">' in svg
        assert ".svgBackground{" in svg
        assert "xml-stylesheet" not in svg
        assert svg.rstrip().endswith("</svg>")

    def test_external_stylesheet_replaces_embedded_block(self):
        """A configured stylesheet is referenced, the defaults are omitted."""
        svg = svg_renderer.render(_geometry(style_sheet="/css/chart.css"))

        assert '<?xml-stylesheet href="/css/chart.css" type="text/css"?>' in svg
        assert "<defs>" not in svg
        assert "<style" not in svg

    def test_deterministic(self):
        """Identical inputs produce identical output."""
        first = SVGRenderer().render(_geometry(key=True, show_graph_title=True))
        second = SVGRenderer().render(_geometry(key=True, show_graph_title=True))

        assert first == second

    def test_bar_elements(self):
        """One rect per bar with slot classes, plus value labels."""
        svg = svg_renderer.render(_geometry(series_count=2))

        assert svg.count('class="fill fill1"') == 3
        assert svg.count('class="fill fill2"') == 3
        assert '<rect x="188" y="32.5" width="143" height="247.5" class="fill fill1"/>' in svg
        assert 'class="dataPointLabel">45</text>' in svg
        assert svg.count('class="axis"') == 2
        assert 'class="guideLines"' in svg

    def test_text_is_escaped(self):
        """Titles are escaped as XML text."""
        svg = svg_renderer.render(_geometry(show_graph_title=True, graph_title="Sales & <Profit>"))

        assert ">Sales &amp; &lt;Profit&gt;</text>" in svg

    def test_anchor_override(self):
        """Horizontal value labels carry an explicit text anchor."""
        svg = svg_renderer.render(_geometry(variant=ChartVariant.BAR_HORIZONTAL, options_cls=BarHorizontalOptions))

        assert 'style="text-anchor: start;"' in svg
        assert 'style="text-anchor: middle;"' in svg

    def test_series_beyond_palette(self):
        """Extra series fall back to the neutral class instead of failing."""
        svg = svg_renderer.render(_geometry(series_count=12))

        assert 'class="fill fill12"' in svg
        assert ".fill10{" in svg
        assert ".fill12{" not in svg
        assert ".fill{" in svg

    def test_cycle_styles(self):
        """Cycling reuses the styled slots."""
        svg = svg_renderer.render(_geometry(series_count=12, cycle_styles=True))

        assert 'class="fill fill11"' not in svg
        assert svg.count('class="fill fill1"') == 6

    def test_line_elements(self):
        """Polyline paths, markers and area fills."""
        svg = svg_renderer.render(_geometry(
            variant=ChartVariant.LINE,
            options_cls=LineOptions,
            area_fill=True
        ))

        assert 'class="line line1"' in svg
        assert svg.count('<circle') == 3
        assert 'class="dataPoint dataPoint1"' in svg
        assert ' Z" class="fill fill1"' in svg

    def test_pie_elements(self):
        """Slices are arcs; no axes are drawn."""
        svg = svg_renderer.render(_geometry(
            variant=ChartVariant.PIE,
            options_cls=PieOptions,
            key=True
        ))

        assert svg.count(" A140 140 0 ") == 3
        assert 'class="key key3"' in svg
        assert 'class="axis"' not in svg
        assert 'class="keyText">Mar</text>' in svg


class TestTemplateErrors:
    """Test wrapping of template engine failures."""

    def test_undefined_attribute(self):
        """Rendering errors surface as TemplateError with the cause kept."""
        renderer = SVGRenderer(templates={"chart.svg": "{{ geometry.no_such_field }}"})

        with pytest.raises(TemplateError) as exc_info:
            renderer.render(_geometry())

        assert isinstance(exc_info.value.__cause__, jinja2.TemplateError)
        assert "chart.svg" in str(exc_info.value)

    def test_syntax_error(self):
        """Broken templates surface as TemplateError too."""
        renderer = SVGRenderer(templates={"chart.svg": "{% if %}"})

        with pytest.raises(TemplateError):
            renderer.render(_geometry())

    def test_missing_template(self):
        """An unknown template name is a template failure."""
        with pytest.raises(TemplateError):
            svg_renderer.render(_geometry(), template_name="missing.svg")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
