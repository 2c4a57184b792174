"""Line chart of average sale prices per state."""

import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from ..config import constants, Settings, get_default_settings
from .theme import dark_mode_layout

logger = logging.getLogger(__name__)


def build_hovertemplate(
    date_format: str = constants.TOOLTIP_DATE_FORMAT,
    price_format: str = constants.TOOLTIP_PRICE_FORMAT
) -> str:
    """Tooltip showing region, snapshot month and formatted price."""
    return (
        "%{customdata[0]}<br>"
        f"%{{x|{date_format}}}<br>"
        f"%{{y:{price_format}}}"
        "<extra></extra>"
    )


def _chronological(points: pd.DataFrame) -> pd.DataFrame:
    # Keep first-appearance order of each line, dates ascending within a line
    order = points.groupby(
        [constants.STATE, constants.REGION], sort=False
    ).ngroup()
    return (
        points.assign(_line=order)
        .sort_values(["_line", constants.DATE], kind="stable")
        .drop(columns="_line")
    )


def build_price_chart(
    points: pd.DataFrame,
    settings: Optional[Settings] = None
) -> go.Figure:
    """
    Create the interactive price chart.

    Parameters
    ----------
    points : pd.DataFrame
        Observations to plot (size, region, state, date, price)
    settings : Settings, optional
        Chart parameters (default: get_default_settings())

    Returns
    -------
    go.Figure
        One colour per state, one line per region
    """
    if settings is None:
        settings = get_default_settings()

    if points.empty:
        logger.warning("No observations to plot")
        fig = go.Figure()
    else:
        fig = px.line(
            _chronological(points),
            x=constants.DATE,
            y=constants.PRICE,
            color=constants.STATE,
            line_group=constants.REGION,
            custom_data=[constants.REGION]
        )
        fig.update_traces(
            line={"width": settings.line_width},
            opacity=settings.line_opacity,
            hovertemplate=build_hovertemplate(
                settings.date_format, settings.price_format
            )
        )

    fig.update_layout(
        title_text=settings.title,
        width=settings.width,
        height=settings.height
    )
    fig.update_layout(**dark_mode_layout(settings.theme))
    fig.update_xaxes(tickformat=settings.date_format)
    fig.update_yaxes(tickformat=settings.price_format)

    logger.info(
        f"Built chart with {len(fig.data)} lines for "
        f"{points[constants.STATE].nunique()} states"
    )
    return fig


def render_chart(
    fig: go.Figure,
    output_path: Optional[Union[str, Path]] = None
) -> Optional[Path]:
    """
    Display the chart, or write it to a standalone HTML file.

    Parameters
    ----------
    fig : go.Figure
        Chart to render
    output_path : str or Path, optional
        HTML target; when None the chart opens in the default renderer

    Returns
    -------
    Path or None
        Written file, if any
    """
    if output_path is None:
        fig.show()
        return None

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(str(output_path))
    logger.info(f"Wrote chart to {output_path}")
    return output_path
