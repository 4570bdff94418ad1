"""
FARS Accident Record Schema (Functional Core)

Column names of the FARS accident file that this package reads, plus the
name-based check applied before any column is accessed.

Package Location: src/fars/analysis/schema.py

Only the fields below are used.  ``fars_read`` returns every column in the
file; each consumer validates the subset it needs so that a malformed
file fails with a clear message instead of a bare ``KeyError``.

    MONTH     : int,   1-12
    STATE     : int,   FARS state code (FIPS-based)
    LATITUDE  : float, > 90 means "not reported"
    LONGITUD  : float, > 900 means "not reported"
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

MONTH_COLUMN: str = "MONTH"
STATE_COLUMN: str = "STATE"
LATITUDE_COLUMN: str = "LATITUDE"
LONGITUDE_COLUMN: str = "LONGITUD"

# Added by the batch loader, not present in the source files
YEAR_COLUMN: str = "year"

MAP_COLUMNS = (STATE_COLUMN, LATITUDE_COLUMN, LONGITUDE_COLUMN)


def validate_columns(df: pd.DataFrame, required: Iterable[str]) -> None:
    """
    Raise ValueError if any required columns are absent.

    Args:
        df: DataFrame to check.
        required: Column names that must be present.

    Raises:
        ValueError: Listing the missing columns.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")
