"""Chart construction and theming."""

from .theme import dark_mode_layout
from .chart import build_hovertemplate, build_price_chart, render_chart

__all__ = [
    "dark_mode_layout",
    "build_hovertemplate",
    "build_price_chart",
    "render_chart"
]
