"""Wide-to-long reshaping of regional price history."""

import logging
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from ..config import constants
from .filters import drop_missing_prices, filter_tracked_states
from .schemas import (
    parse_date_columns,
    split_columns,
    validate_observations,
    validate_wide_prices
)

logger = logging.getLogger(__name__)

_ROW = "_row"


def melt_price_history(
    wide: pd.DataFrame,
    date_column_offset: int = constants.DATE_COLUMN_OFFSET,
    drop_empty: bool = True,
    validate: bool = True
) -> pd.DataFrame:
    """
    Expand a wide price table into one row per region and snapshot date.

    Every column from ``date_column_offset`` onwards is price history. Rows
    are emitted row-major: all dates of the first region in column order,
    then all dates of the second region, and so on. Prices are copied
    unchanged.

    Parameters
    ----------
    wide : pd.DataFrame
        Wide table with SizeRank, RegionName and StateName among its leading
        columns
    date_column_offset : int, default 5
        Position of the first date column
    drop_empty : bool, default True
        Whether to omit observations without a price
    validate : bool, default True
        Whether to validate the wide table first

    Returns
    -------
    pd.DataFrame
        Observations with columns size, region, state, date, price

    Raises
    ------
    SchemaMismatchError
        If a date column name is not a ``YYYY-MM-DD`` date
    """
    if validate:
        wide = validate_wide_prices(wide, date_column_offset)
    else:
        wide = wide.rename(columns=str)
        parse_date_columns(split_columns(wide, date_column_offset)[1])

    _, date_columns = split_columns(wide, date_column_offset)

    frame = wide[constants.IDENTIFIER_COLUMNS].rename(
        columns=constants.IDENTIFIER_RENAMES
    )
    frame = pd.concat([frame, wide[date_columns]], axis=1)
    frame[_ROW] = np.arange(len(frame))

    long = frame.melt(
        id_vars=[_ROW, constants.SIZE, constants.REGION, constants.STATE],
        value_vars=date_columns,
        var_name=constants.DATE,
        value_name=constants.PRICE
    )
    # melt is column-major; a stable sort on the source row makes it row-major
    long = long.sort_values(_ROW, kind="stable")

    if drop_empty:
        long = drop_missing_prices(long)

    long = long.assign(**{
        constants.DATE: pd.to_datetime(
            long[constants.DATE], format=constants.DATE_FORMAT
        ),
        constants.PRICE: long[constants.PRICE].astype("float64"),
    })

    return long[constants.OBSERVATION_COLUMNS].reset_index(drop=True)


def sort_by_size(df: pd.DataFrame) -> pd.DataFrame:
    """Stable sort on size rank; ties keep their current order."""
    return df.sort_values(constants.SIZE, kind="stable").reset_index(drop=True)


def build_plot_points(
    wide: pd.DataFrame,
    tracked_states: Optional[Iterable[str]] = None,
    date_column_offset: int = constants.DATE_COLUMN_OFFSET,
    validate: bool = True
) -> pd.DataFrame:
    """
    Turn a wide price table into the observations that get plotted.

    Reshapes with empty-drop, sorts by size rank and keeps only the
    tracked states.

    Parameters
    ----------
    wide : pd.DataFrame
        Wide price table
    tracked_states : iterable of str, optional
        State codes to keep (default: from constants)
    date_column_offset : int, default 5
        Position of the first date column
    validate : bool, default True
        Whether to validate the wide table first

    Returns
    -------
    pd.DataFrame
        Validated observations
    """
    long = melt_price_history(
        wide,
        date_column_offset=date_column_offset,
        drop_empty=True,
        validate=validate
    )
    logger.info(f"Reshaped {len(wide):,} regions into {len(long):,} observations")

    long = sort_by_size(long)
    points = filter_tracked_states(long, tracked_states)

    return validate_observations(points)
