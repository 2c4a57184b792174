"""Data processing module for the state housing price table."""

from .schemas import (
    wide_price_schema,
    observation_schema,
    split_columns,
    parse_date_columns,
    validate_wide_prices,
    validate_observations
)
from .loaders import load_price_history
from .filters import (
    drop_missing_prices,
    filter_tracked_states,
    summarize_observations
)
from .reshape import (
    melt_price_history,
    sort_by_size,
    build_plot_points
)

__all__ = [
    "wide_price_schema",
    "observation_schema",
    "split_columns",
    "parse_date_columns",
    "validate_wide_prices",
    "validate_observations",
    "load_price_history",
    "drop_missing_prices",
    "filter_tracked_states",
    "summarize_observations",
    "melt_price_history",
    "sort_by_size",
    "build_plot_points"
]
