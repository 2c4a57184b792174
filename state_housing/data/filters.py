"""Row filters applied to tidy price observations."""

import pandas as pd
from typing import Iterable, Optional
import logging

from ..config import constants

logger = logging.getLogger(__name__)


def drop_missing_prices(df: pd.DataFrame) -> pd.DataFrame:
    """
    Remove observations without a recorded price.
    
    Parameters
    ----------
    df : pd.DataFrame
        Observations with a price column
        
    Returns
    -------
    pd.DataFrame
        Observations whose price is present
    """
    initial_count = len(df)
    df = df.dropna(subset=[constants.PRICE])
    logger.debug(f"Dropped {initial_count - len(df):,} empty price cells")
    return df


def filter_tracked_states(
    df: pd.DataFrame,
    tracked_states: Optional[Iterable[str]] = None
) -> pd.DataFrame:
    """
    Keep only observations whose state is in the allow-list.
    
    Matching is exact and case-sensitive.
    
    Parameters
    ----------
    df : pd.DataFrame
        Observations with a state column
    tracked_states : iterable of str, optional
        State codes to keep (default: from constants)
        
    Returns
    -------
    pd.DataFrame
        Filtered observations, original order preserved
    """
    if tracked_states is None:
        tracked_states = constants.TRACKED_STATES
    tracked_states = list(tracked_states)
    
    initial_count = len(df)
    mask = df[constants.STATE].isin(tracked_states)
    df = df[mask].reset_index(drop=True)
    
    logger.info(
        f"Removed {initial_count - len(df):,} observations outside "
        f"{len(tracked_states)} tracked states"
    )
    
    return df


def summarize_observations(df: pd.DataFrame) -> pd.DataFrame:
    """
    Summarize observations per state.
    
    Parameters
    ----------
    df : pd.DataFrame
        Tidy observations
        
    Returns
    -------
    pd.DataFrame
        One row per state with observation and region counts, the first and
        last snapshot dates and the mean price on the last date
    """
    columns = ['observations', 'regions', 'first_date', 'last_date', 'latest_price']
    if df.empty:
        return pd.DataFrame(columns=columns, index=pd.Index([], name=constants.STATE))
    
    grouped = df.groupby(constants.STATE)
    summary = grouped.agg(
        observations=(constants.PRICE, 'size'),
        regions=(constants.REGION, 'nunique'),
        first_date=(constants.DATE, 'min'),
        last_date=(constants.DATE, 'max')
    )
    
    on_last_date = df[constants.DATE] == grouped[constants.DATE].transform('max')
    summary['latest_price'] = (
        df[on_last_date].groupby(constants.STATE)[constants.PRICE].mean()
    )
    
    return summary[columns]
