"""
FARS Monthly Summary (Functional Core)

Pure functions only. No I/O, no side effects.

Turns the per-year ``(MONTH, year)`` tables produced by the reader into a
wide month-by-year count matrix.

Package Location: src/fars/analysis/summary.py

Shape rule:
    The result always has exactly 12 rows, one per calendar month in
    ascending order.  A month with no records for a year shows ``0`` in
    that year's column; a month with no records in any year is still
    present.  A year whose table is missing (``None``) gets no column; a
    year whose table is empty gets an all-zero column.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import pandas as pd

from .schema import MONTH_COLUMN, YEAR_COLUMN, validate_columns

MONTHS: List[int] = list(range(1, 13))


def summarize_counts(tables: Sequence[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """
    Count accidents per month for each year and pivot years into columns.

    Args:
        tables: Sequence of ``(MONTH, year)`` DataFrames as returned by
            ``fars_read_years``.  ``None`` entries are skipped.

    Returns:
        DataFrame with a ``MONTH`` column (1-12) followed by one ``int64``
        column per year, in the order the years first appear.  When no
        tables are available only the ``MONTH`` column is returned.

    Raises:
        ValueError: If a table lacks the ``MONTH`` or ``year`` column.
    """
    frames = [t for t in tables if t is not None]
    for frame in frames:
        validate_columns(frame, required=[MONTH_COLUMN, YEAR_COLUMN])

    if not frames:
        return pd.DataFrame({MONTH_COLUMN: MONTHS})

    # First-seen order of years, including years whose table is empty
    year_order = list(dict.fromkeys(
        year for frame in frames for year in _frame_years(frame)
    ))

    combined = pd.concat(frames, ignore_index=True)
    if combined.empty:
        empty = pd.DataFrame(0, index=MONTHS, columns=year_order, dtype="int64")
        return empty.rename_axis(MONTH_COLUMN).reset_index()

    counts = (
        combined
        .groupby([YEAR_COLUMN, MONTH_COLUMN])
        .size()
        .rename("n")
        .reset_index()
    )
    wide = counts.pivot(index=MONTH_COLUMN, columns=YEAR_COLUMN, values="n")

    wide = (
        wide.reindex(index=MONTHS, columns=year_order)
        .fillna(0)
        .astype("int64")
    )
    wide.columns.name = None
    return wide.rename_axis(MONTH_COLUMN).reset_index()


def _frame_years(frame: pd.DataFrame) -> List[int]:
    """Years of one table: the reader's ``attrs`` tag, else its values."""
    if YEAR_COLUMN in frame.attrs:
        return [int(frame.attrs[YEAR_COLUMN])]
    return [int(y) for y in frame[YEAR_COLUMN].dropna().unique()]
