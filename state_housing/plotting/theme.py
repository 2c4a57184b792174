"""Dark mode theme for plotly price charts."""

from typing import Any, Dict, Optional

from ..config import ThemeSettings


def _axis_style(theme: ThemeSettings, tick_label_color: str) -> Dict[str, Any]:
    return {
        "title": {"text": ""},
        "showline": True,
        "linecolor": theme.foreground,
        "linewidth": theme.axis_line_width,
        "ticks": "outside",
        "tickcolor": theme.tick_color,
        "tickwidth": theme.tick_width,
        "tickfont": {"color": tick_label_color},
        "showgrid": True,
        "gridcolor": theme.accent,
        "gridwidth": theme.grid_width,
        "zeroline": False,
    }


def dark_mode_layout(theme: Optional[ThemeSettings] = None) -> Dict[str, Any]:
    """
    Build plotly layout properties for the dark chart theme.

    Dark canvas with light text, dark-grey date labels, light-grey price
    labels, a thin dark-grey grid and no legend.

    Parameters
    ----------
    theme : ThemeSettings, optional
        Colours and widths (default: the darcula palette)

    Returns
    -------
    dict
        Keyword arguments for ``Figure.update_layout``
    """
    if theme is None:
        theme = ThemeSettings()

    return {
        "paper_bgcolor": theme.background,
        "plot_bgcolor": theme.background,
        "font": {"color": theme.foreground},
        "title": {"font": {"color": theme.foreground}, "x": 0.5},
        "showlegend": False,
        "hoverlabel": {
            "bgcolor": theme.background,
            "bordercolor": theme.foreground,
            "font": {"color": theme.foreground},
        },
        "xaxis": _axis_style(theme, theme.accent),
        "yaxis": _axis_style(theme, theme.foreground),
    }
