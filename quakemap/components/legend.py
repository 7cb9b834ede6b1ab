"""Depth legend control for the quake map."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from branca.element import MacroElement
from jinja2 import Template

from quakefeed.encoding import depth_to_color
from quakemap.config.theme import LegendConfig


def legend_bands(grades: Sequence[int] = LegendConfig.GRADES) -> List[Tuple[str, str]]:
    """Return ``(label, color)`` per depth band, colored like the markers."""
    bands = []
    for i, grade in enumerate(grades):
        if i + 1 < len(grades):
            label = f"{grade}–{grades[i + 1]}"
        else:
            label = f"{grade}+"
        # Sample just inside the band so the swatch matches its markers.
        bands.append((label, depth_to_color(grade + 1)))
    return bands


def render_legend_html(title: str = LegendConfig.TITLE) -> str:
    rows = "".join(
        f'<i style="background:{color}"></i> {label}<br>' for label, color in legend_bands()
    )
    return f"<strong>{title}</strong><br><br>{rows}"


class DepthLegend(MacroElement):
    """Leaflet control holding the static depth swatches."""

    _template = Template(
        """
        {% macro header(this, kwargs) %}
            <style>
                .legend {
                    padding: 6px 8px;
                    background: rgba(255, 255, 255, 0.85);
                    border-radius: 5px;
                    line-height: 18px;
                    color: #333;
                }
                .legend i {
                    width: 18px;
                    height: 18px;
                    float: left;
                    margin-right: 8px;
                    opacity: 0.9;
                }
            </style>
        {% endmacro %}

        {% macro script(this, kwargs) %}
            var {{ this.get_name() }} = L.control({position: {{ this.position|tojson }}});
            {{ this.get_name() }}.onAdd = function (map) {
                var div = L.DomUtil.create('div', 'legend');
                div.innerHTML = {{ this.html|tojson }};
                return div;
            };
            {{ this.get_name() }}.addTo({{ this._parent.get_name() }});
        {% endmacro %}
        """
    )

    def __init__(self, position: str = LegendConfig.POSITION, title: str = LegendConfig.TITLE):
        super().__init__()
        self._name = "DepthLegend"
        self.position = position
        self.html = render_legend_html(title)
