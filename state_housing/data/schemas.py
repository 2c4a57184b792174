"""Data validation schemas using Pandera for the state housing price table."""

import re
from typing import List, Sequence, Tuple

import pandas as pd
import pandera.pandas as pa
from pandera.errors import SchemaError, SchemaErrors

from ..config import constants
from ..utils.exceptions import DataValidationError, SchemaMismatchError


def wide_price_schema(date_columns: Sequence[str]) -> pa.DataFrameSchema:
    """
    Build the schema of the wide price table for a given set of date columns.

    Columns outside the identifier block and ``date_columns`` are ignored.
    """
    columns = {
        constants.SIZE_RANK_COLUMN: pa.Column(
            int,
            nullable=False,
            coerce=True,
            description="Rank of the region by size (1 = largest)"
        ),
        constants.REGION_NAME_COLUMN: pa.Column(
            str,
            nullable=False,
            coerce=True,
            description="Region name"
        ),
        constants.STATE_NAME_COLUMN: pa.Column(
            str,
            nullable=False,
            coerce=True,
            description="Two-letter state code"
        ),
    }
    for name in date_columns:
        columns[name] = pa.Column(
            float,
            nullable=True,  # Missing prices are dropped during reshape
            coerce=True,
            description=f"Average sale price on {name}"
        )
    return pa.DataFrameSchema(columns, strict=False)


# Tidy observation schema (one row per region and date)
observation_schema = pa.DataFrameSchema({
    constants.SIZE: pa.Column(
        int,
        nullable=False,
        coerce=True,
        description="Size rank carried from the source row"
    ),
    constants.REGION: pa.Column(
        str,
        nullable=False,
        coerce=True,
        description="Region name carried from the source row"
    ),
    constants.STATE: pa.Column(
        str,
        nullable=False,
        coerce=True,
        description="State code carried from the source row"
    ),
    constants.DATE: pa.Column(
        "datetime64[ns]",
        nullable=False,
        coerce=True,
        description="Snapshot date parsed from the column name"
    ),
    constants.PRICE: pa.Column(
        float,
        nullable=False,
        coerce=True,
        description="Average sale price, copied verbatim"
    ),
}, strict=True, ordered=True)


def split_columns(
    df: pd.DataFrame,
    date_column_offset: int = constants.DATE_COLUMN_OFFSET
) -> Tuple[List[str], List[str]]:
    """
    Split column names into the leading identifier block and the date columns.

    The split is positional: everything from ``date_column_offset`` onwards is
    treated as price history.

    Parameters
    ----------
    df : pd.DataFrame
        Wide price table
    date_column_offset : int, default 5
        Position of the first date column

    Returns
    -------
    tuple
        (leading columns, date columns)
    """
    names = [str(c) for c in df.columns]
    return names[:date_column_offset], names[date_column_offset:]


def parse_date_columns(names: Sequence[str]) -> pd.DatetimeIndex:
    """
    Parse date column names using the fixed ``YYYY-MM-DD`` pattern.

    Parameters
    ----------
    names : sequence of str
        Column names to parse

    Returns
    -------
    pd.DatetimeIndex
        Parsed dates, in column order

    Raises
    ------
    SchemaMismatchError
        If a name does not match the pattern or is not a calendar date
    """
    dates = []
    for name in names:
        name = str(name)
        if not re.match(constants.DATE_COLUMN_PATTERN, name):
            raise SchemaMismatchError(
                f"Column {name!r} is not a {constants.DATE_FORMAT} date",
                column=name
            )
        try:
            dates.append(pd.to_datetime(name, format=constants.DATE_FORMAT))
        except ValueError as exc:
            raise SchemaMismatchError(
                f"Column {name!r} is not a valid calendar date: {exc}",
                column=name
            ) from exc
    return pd.DatetimeIndex(dates)


def validate_wide_prices(
    df: pd.DataFrame,
    date_column_offset: int = constants.DATE_COLUMN_OFFSET
) -> pd.DataFrame:
    """
    Validate the layout and types of a wide price table.

    Parameters
    ----------
    df : pd.DataFrame
        Raw wide price table
    date_column_offset : int, default 5
        Position of the first date column

    Returns
    -------
    pd.DataFrame
        Validated table with coerced dtypes

    Raises
    ------
    SchemaMismatchError
        If the column layout does not match the expected wide format
    DataValidationError
        If a column holds values of the wrong type
    """
    df = df.rename(columns=str)

    if len(df.columns) < date_column_offset:
        raise SchemaMismatchError(
            f"Expected at least {date_column_offset} leading columns, "
            f"found {len(df.columns)}"
        )

    leading, date_columns = split_columns(df, date_column_offset)

    missing = [c for c in constants.IDENTIFIER_COLUMNS if c not in leading]
    if missing:
        raise SchemaMismatchError(
            f"Identifier columns {missing} not found in the first "
            f"{date_column_offset} columns: {leading}"
        )

    if not date_columns:
        raise SchemaMismatchError("No price history columns found")

    duplicated = pd.Index(date_columns)[pd.Index(date_columns).duplicated()]
    if len(duplicated) > 0:
        raise SchemaMismatchError(
            f"Duplicated date columns: {list(duplicated)}",
            column=duplicated[0]
        )

    parse_date_columns(date_columns)

    try:
        return wide_price_schema(date_columns).validate(df)
    except (SchemaError, SchemaErrors) as exc:
        raise DataValidationError(f"Wide price table failed validation: {exc}") from exc


def validate_observations(df: pd.DataFrame) -> pd.DataFrame:
    """
    Validate a tidy observation table against schema.

    Parameters
    ----------
    df : pd.DataFrame
        Tidy observations

    Returns
    -------
    pd.DataFrame
        Validated observations

    Raises
    ------
    DataValidationError
        If validation fails
    """
    try:
        return observation_schema.validate(df)
    except (SchemaError, SchemaErrors) as exc:
        raise DataValidationError(f"Observations failed validation: {exc}") from exc
