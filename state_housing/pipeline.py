"""
Read, reshape, filter and plot in a single pass.

The pipeline is a one-shot batch job: every failure (missing file, schema
mismatch) propagates to the caller unchanged.
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pandas as pd
import plotly.graph_objects as go

from .config import Settings, get_default_settings
from .data import load_price_history, build_plot_points, summarize_observations
from .plotting import build_price_chart, render_chart

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Artifacts of one pipeline run."""

    observations: pd.DataFrame
    figure: go.Figure
    output_path: Optional[Path]
    execution_time_seconds: float


def run_pipeline(
    settings: Optional[Settings] = None,
    show: bool = True
) -> PipelineResult:
    """
    Run the full pipeline.

    Parameters
    ----------
    settings : Settings, optional
        Run configuration (default: get_default_settings())
    show : bool, default True
        Whether to render the chart. When ``settings.output_path`` is set the
        chart is written there instead of opened.

    Returns
    -------
    PipelineResult
        Plotted observations, the figure and the written file (if any)
    """
    if settings is None:
        settings = get_default_settings()
    settings.validate()

    start_time = time.perf_counter()

    logger.info(f"Reading price history from {settings.input_path}")
    wide = load_price_history(
        settings.input_path,
        date_column_offset=settings.date_column_offset
    )

    points = build_plot_points(
        wide,
        tracked_states=settings.tracked_states,
        date_column_offset=settings.date_column_offset,
        validate=False
    )

    summary = summarize_observations(points)
    if logger.isEnabledFor(logging.DEBUG):
        for state, row in summary.iterrows():
            logger.debug(
                f"{state}: {row['observations']:,} observations, "
                f"{row['regions']} regions, latest {row['latest_price']:,.0f}"
            )

    fig = build_price_chart(points, settings)

    output_path = None
    if show or settings.output_path:
        output_path = render_chart(fig, settings.output_path)

    elapsed = time.perf_counter() - start_time
    logger.info(
        f"Plotted {len(points):,} observations across {len(summary)} states "
        f"in {elapsed:.2f} seconds"
    )

    return PipelineResult(
        observations=points,
        figure=fig,
        output_path=output_path,
        execution_time_seconds=elapsed
    )
