"""Colour theme shared by matplotlib and Plotly figures."""

from __future__ import annotations

from typing import Dict


PRIMARY_BLUE = "#2E86AB"
PRIMARY_NAVY = "#1F4788"
SECONDARY_TEAL = "#06A77D"
WARNING_ORANGE = "#FF6F00"
NEUTRAL_GRAY = "#757575"
BACKGROUND = "#FAFAFA"
CARD_BACKGROUND = "#FFFFFF"
TEXT_COLOR = "#1E1E1E"


DEFAULT_THEME: Dict[str, object] = {
    "name": "light",
    "palette": {
        "primary_blue": PRIMARY_BLUE,
        "primary_navy": PRIMARY_NAVY,
        "secondary_teal": SECONDARY_TEAL,
        "warning": WARNING_ORANGE,
        "neutral": NEUTRAL_GRAY,
    },
    "plotly_template": {
        "layout": {
            "font": {"family": "Roboto, Open Sans, sans-serif", "color": TEXT_COLOR},
            "paper_bgcolor": BACKGROUND,
            "plot_bgcolor": CARD_BACKGROUND,
            "title": {"font": {"size": 22, "color": TEXT_COLOR}},
            "legend": {"bgcolor": CARD_BACKGROUND, "bordercolor": "#E0E0E0"},
            "xaxis": {"gridcolor": "#E0E0E0", "linecolor": "#BDBDBD", "zerolinecolor": "#E0E0E0"},
            "yaxis": {"gridcolor": "#E0E0E0", "linecolor": "#BDBDBD", "zerolinecolor": "#E0E0E0"},
        }
    },
}
