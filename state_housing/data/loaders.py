"""Data loading utilities for the state housing price table."""

import pandas as pd
from pathlib import Path
from typing import Union
import logging

from .schemas import validate_wide_prices
from ..utils.exceptions import SchemaMismatchError
from ..config import constants

logger = logging.getLogger(__name__)


def load_price_history(
    filepath: Union[str, Path],
    validate: bool = True,
    date_column_offset: int = constants.DATE_COLUMN_OFFSET,
    **kwargs
) -> pd.DataFrame:
    """
    Load the wide regional price table from file.
    
    Parameters
    ----------
    filepath : str or Path
        Path to the price history file
    validate : bool, default True
        Whether to validate data against schema
    date_column_offset : int, default 5
        Position of the first date column
    **kwargs
        Additional arguments passed to pandas read function
        
    Returns
    -------
    pd.DataFrame
        Wide price table (validated if requested)
        
    Raises
    ------
    FileNotFoundError
        If the file does not exist
    ValueError
        If file format is not supported
    SchemaMismatchError
        If the column layout is wrong or a row has more fields than the header
    DataValidationError
        If a column holds values of the wrong type
    """
    filepath = Path(filepath)
    
    if not filepath.exists():
        raise FileNotFoundError(f"Price history file not found: {filepath}")
    
    file_ext = filepath.suffix.lower()
    
    if file_ext == '.csv':
        df = pd.read_csv(filepath, **kwargs)
        # Extra fields in a row make pandas move the leading columns into the index
        if "index_col" not in kwargs and not isinstance(df.index, pd.RangeIndex):
            raise SchemaMismatchError(
                f"Ragged rows in {filepath}: a row has more fields than the header"
            )
    elif file_ext == '.parquet':
        df = pd.read_parquet(filepath, **kwargs)
    elif file_ext == '.feather':
        df = pd.read_feather(filepath, **kwargs)
    else:
        raise ValueError(
            f"Unsupported file format: {file_ext}. "
            f"Supported formats: {constants.SUPPORTED_INPUT_FORMATS}"
        )
    
    n_dates = max(len(df.columns) - date_column_offset, 0)
    
    if validate:
        df = validate_wide_prices(df, date_column_offset)
        logger.info(
            f"Loaded and validated {len(df):,} regions with {n_dates:,} snapshots "
            f"from {filepath}"
        )
    else:
        logger.info(f"Loaded {len(df):,} regions (unvalidated) from {filepath}")
    
    return df

