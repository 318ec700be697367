"""
SVG templates for chart rendering.
Templates only walk the geometry - every coordinate is already computed.
"""

from typing import Dict

DOCUMENT_TEMPLATE_NAME = "chart.svg"

# CSS class per text role
TEXT_CLASSES = {
    "main_title": "mainTitle",
    "sub_title": "subTitle",
    "x_axis_label": "xAxisLabels",
    "y_axis_label": "yAxisLabels",
    "x_axis_title": "xAxisTitle",
    "y_axis_title": "yAxisTitle",
    "data_label": "dataPointLabel",
    "key_text": "keyText",
}

# Number of styled series slots in the default stylesheet
DEFAULT_STYLE_SLOTS = 10

_FILL_COLOURS = [
    "#cc0000", "#0000cc", "#00cc00", "#ffcc00", "#00ccff",
    "#ff00ff", "#00ffff", "#ffff00", "#cc6666", "#663399",
]
_LINE_COLOURS = [
    "#ff0000", "#0000ff", "#00ff00", "#ffcc00", "#00ccff",
    "#ff00ff", "#00ffff", "#ffff00", "#cc6666", "#663399",
]


def _slot_rules() -> str:
    rules = ["/* default fill styles */"]
    for slot, colour in enumerate(_FILL_COLOURS, start=1):
        rules.append(f".fill{slot}{{\n\tfill: {colour};\n\tfill-opacity: 0.2;\n\tstroke: none;\n}}")
    rules.append("/* default line styles */")
    for slot, colour in enumerate(_LINE_COLOURS, start=1):
        rules.append(f".line{slot}{{\n\tfill: none;\n\tstroke: {colour};\n\tstroke-width: 1px;\n}}")
    rules.append("/* default key and data point styles */")
    for slot, colour in enumerate(_LINE_COLOURS, start=1):
        rules.append(f".key{slot},.dataPoint{slot}{{\n\tfill: {colour};\n\tstroke: none;\n\tstroke-width: 1px;\n}}")
    return "\n".join(rules)


STYLESHEET = """.svgBackground{
	fill:#ffffff;
}
.graphBackground{
	fill:#f0f0f0;
}

/* graphs titles */
.mainTitle{
	text-anchor: middle;
	fill: #000000;
	font-size: 14px;
	font-family: "Arial", sans-serif;
	font-weight: normal;
}
.subTitle{
	text-anchor: middle;
	fill: #999999;
	font-size: 12px;
	font-family: "Arial", sans-serif;
	font-weight: normal;
}

.axis{
	stroke: #000000;
	stroke-width: 1px;
}

.guideLines{
	stroke: #666666;
	stroke-width: 1px;
	stroke-dasharray: 5 5;
}

.xAxisLabels{
	text-anchor: middle;
	fill: #000000;
	font-size: 12px;
	font-family: "Arial", sans-serif;
	font-weight: normal;
}

.yAxisLabels{
	text-anchor: end;
	fill: #000000;
	font-size: 12px;
	font-family: "Arial", sans-serif;
	font-weight: normal;
}

.xAxisTitle{
	text-anchor: middle;
	fill: #ff0000;
	font-size: 14px;
	font-family: "Arial", sans-serif;
	font-weight: normal;
}

.yAxisTitle{
	fill: #ff0000;
	writing-mode: tb;
	glyph-orientation-vertical: 0;
	text-anchor: middle;
	font-size: 14px;
	font-family: "Arial", sans-serif;
	font-weight: normal;
}

.dataPointLabel{
	fill: #000000;
	text-anchor:middle;
	font-size: 10px;
	font-family: "Arial", sans-serif;
	font-weight: normal;
}

/* neutral styles for series beyond the styled slots */
.fill{
	fill: #999999;
	fill-opacity: 0.2;
	stroke: none;
}
.line{
	fill: none;
	stroke: #666666;
	stroke-width: 1px;
}
.key,.dataPoint{
	fill: #666666;
	stroke: none;
	stroke-width: 1px;
}

""" + _slot_rules() + """
.keyText{
	fill: #000000;
	text-anchor:start;
	font-size: 10px;
	font-family: "Arial", sans-serif;
	font-weight: normal;
}
"""

_TEXT_MACRO = """{% macro text(item) -%}
<text x="{{ item.x|num }}" y="{{ item.y|num }}" class="{{ text_classes[item.role.value] }}"
{%- if item.anchor %} style="text-anchor: {{ item.anchor }};"{% endif %}>{{ item.text }}</text>
{%- endmacro %}"""

DOCUMENT_TEMPLATE = _TEXT_MACRO + """
<?xml version="1.0"?>
<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.0//EN"
	"http://www.w3.org/TR/2001/REC-SVG-20010904/DTD/svg10.dtd">
{% if geometry.style_sheet %}
<?xml-stylesheet href="{{ geometry.style_sheet }}" type="text/css"?>
{% endif %}
<svg width="{{ geometry.width|num }}" height="{{ geometry.height|num }}" viewBox="0 0 {{ geometry.width|num }} {{ geometry.height|num }}" xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink">
{% if not geometry.style_sheet %}
<!-- include default stylesheet if none specified -->
<defs>
<style type="text/css">
<![CDATA[
{% include "stylesheet.css" %}
]]>
</style>
</defs>
{% endif %}
<!-- svg bg -->
<rect x="0" y="0" width="{{ geometry.width|num }}" height="{{ geometry.height|num }}" class="svgBackground"/>
{% set area = geometry.plot_area %}
{% if geometry.axes %}
<!-- graph bg -->
<rect x="{{ area.x|num }}" y="{{ area.y|num }}" width="{{ area.width|num }}" height="{{ area.height|num }}" class="graphBackground"/>
<!-- axis -->
{% for axis in geometry.axes %}
<path d="M{{ axis.x1|num }} {{ axis.y1|num }} L{{ axis.x2|num }} {{ axis.y2|num }}" class="axis"/>
{% endfor %}
{% endif %}
{% for tick in geometry.ticks %}
{% if tick.label %}
{{ text(tick.label) }}
{% endif %}
{% if tick.guide %}
<path d="M{{ tick.guide.x1|num }} {{ tick.guide.y1|num }} L{{ tick.guide.x2|num }} {{ tick.guide.y2|num }}" class="guideLines"/>
{% endif %}
{% endfor %}
{% for label in geometry.category_labels %}
{{ text(label) }}
{% endfor %}
{% for title in geometry.axis_titles %}
{{ text(title) }}
{% endfor %}
<!-- data -->
{% for fill in geometry.areas %}
<path d="{{ [fill.points]|path }} Z" class="fill fill{{ fill.series_index|slot(geometry.cycle_styles) }}"/>
{% endfor %}
{% for bar in geometry.bars %}
<rect x="{{ bar.x|num }}" y="{{ bar.y|num }}" width="{{ bar.width|num }}" height="{{ bar.height|num }}" class="fill fill{{ bar.series_index|slot(geometry.cycle_styles) }}"/>
{% endfor %}
{% for line in geometry.lines %}
{% if line.segments %}
<path d="{{ line.segments|path }}" class="line line{{ line.series_index|slot(geometry.cycle_styles) }}"/>
{% endif %}
{% endfor %}
{% for marker in geometry.markers %}
<circle cx="{{ marker.x|num }}" cy="{{ marker.y|num }}" r="{{ marker.radius|num }}" class="dataPoint dataPoint{{ marker.series_index|slot(geometry.cycle_styles) }}"/>
{% endfor %}
{% for slice in geometry.slices %}
{% if slice.full_circle %}
<circle cx="{{ slice.cx|num }}" cy="{{ slice.cy|num }}" r="{{ slice.radius|num }}" class="key key{{ slice.style_index|slot(geometry.cycle_styles) }}"/>
{% else %}
<path d="M{{ slice.cx|num }} {{ slice.cy|num }} L{{ slice.start.x|num }} {{ slice.start.y|num }} A{{ slice.radius|num }} {{ slice.radius|num }} 0 {{ 1 if slice.large_arc else 0 }} 1 {{ slice.end.x|num }} {{ slice.end.y|num }} Z" class="key key{{ slice.style_index|slot(geometry.cycle_styles) }}"/>
{% endif %}
{% endfor %}
{% for label in geometry.data_labels %}
{{ text(label) }}
{% endfor %}
{% if geometry.legend %}
<!-- key -->
{% for entry in geometry.legend %}
<rect x="{{ entry.swatch.x|num }}" y="{{ entry.swatch.y|num }}" width="{{ entry.swatch.width|num }}" height="{{ entry.swatch.height|num }}" class="key key{{ entry.style_index|slot(geometry.cycle_styles) }}"/>
{{ text(entry.label) }}
{% endfor %}
{% endif %}
{% for title in geometry.titles %}
{{ text(title) }}
{% endfor %}
</svg>
"""

SVG_TEMPLATES: Dict[str, str] = {
    DOCUMENT_TEMPLATE_NAME: DOCUMENT_TEMPLATE,
    "stylesheet.css": STYLESHEET,
}
