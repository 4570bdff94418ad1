"""
FARS Data Reader (Imperative Shell)

Locates and reads the yearly FARS accident files and assembles the
per-year tables consumed by the summary and mapping functions.

Package Location: src/fars/data/reader.py

File convention:
    One bz2-compressed CSV per year, named ``accident_<YYYY>.csv.bz2``,
    located in the working directory unless a ``data_dir`` is supplied.
    Decompression is inferred by pandas from the file suffix.

Failure isolation:
    ``fars_read`` raises on a missing file.  ``load_years`` catches load
    failures per year, logs a warning and records the failure on that
    year's ``YearResult`` so the remaining years are still returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

import numpy as np
import pandas as pd

from ..analysis.schema import MONTH_COLUMN, YEAR_COLUMN, validate_columns

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# File naming
# ---------------------------------------------------------------------------

FILENAME_TEMPLATE: str = "accident_{year:d}.csv.bz2"

PathLike = Union[str, Path]


@dataclass(frozen=True, eq=False)
class YearResult:
    """Outcome of loading one year of accident data.

    Attributes:
        year:  The requested year, as an ``int`` when it could be coerced,
               otherwise the raw value that was passed in.
        data:  Two-column ``(MONTH, year)`` DataFrame, or ``None`` when the
               year could not be loaded.
        error: Human-readable reason for the failure, ``None`` on success.
    """

    year: Any
    data: Optional[pd.DataFrame] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.data is not None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def make_filename(year: Any) -> str:
    """
    Build the accident file name for a given year.

    Args:
        year: Year as an int or anything ``int()`` accepts (e.g. ``"2013"``).

    Returns:
        File name such as ``'accident_2013.csv.bz2'``.

    Raises:
        ValueError: If *year* is a non-numeric string.
        TypeError: If *year* cannot be converted to ``int`` at all.
    """
    return FILENAME_TEMPLATE.format(year=int(year))


def fars_read(filename: PathLike) -> pd.DataFrame:
    """
    Read one FARS accident file into a DataFrame.

    No schema validation happens here; callers check the columns they
    need with :func:`fars.analysis.schema.validate_columns`.

    Args:
        filename: Path to a (possibly bz2-compressed) CSV file.

    Returns:
        DataFrame with one row per accident record and the file's columns
        unchanged.

    Raises:
        FileNotFoundError: If *filename* does not exist.
    """
    path = Path(filename)
    if not path.exists():
        raise FileNotFoundError(f"file '{filename}' does not exist")

    log.debug("Reading %s", path)
    # low_memory=False parses in one pass, avoiding mixed-dtype warnings
    return pd.read_csv(path, compression="infer", low_memory=False)


def load_years(
    years: Any,
    data_dir: Optional[PathLike] = None,
) -> List[YearResult]:
    """
    Load the ``(MONTH, year)`` projection for each requested year.

    Args:
        years: A single year or any iterable of years (list, tuple,
            range, numpy array, generator).
        data_dir: Directory holding the yearly files.  Defaults to the
            current working directory.

    Returns:
        One ``YearResult`` per input year, in input order.  Failed years
        carry ``data=None`` and the failure reason in ``error``.
    """
    results: List[YearResult] = []
    for year in _as_year_list(years):
        try:
            year_int = int(year)
            path = _resolve(make_filename(year_int), data_dir)
            df = fars_read(path)
            validate_columns(df, required=[MONTH_COLUMN])
        except (OSError, ValueError, TypeError) as exc:
            log.warning(
                f"invalid year: {year}",
                extra={"year": str(year), "reason": str(exc)},
            )
            results.append(YearResult(year=year, error=str(exc)))
            continue

        projected = pd.DataFrame({
            MONTH_COLUMN: df[MONTH_COLUMN].to_numpy(),
            YEAR_COLUMN: year_int,
        })
        # survives an empty file, where the year column has no values
        projected.attrs[YEAR_COLUMN] = year_int
        results.append(YearResult(year=year_int, data=projected))

    return results


def fars_read_years(
    years: Any,
    data_dir: Optional[PathLike] = None,
) -> List[Optional[pd.DataFrame]]:
    """
    Load several years, substituting ``None`` for years that fail.

    Thin wrapper over :func:`load_years` returning only the tables.

    Args:
        years: A single year or an iterable of years.
        data_dir: Directory holding the yearly files.

    Returns:
        List the same length as *years*; each element is a two-column
        ``(MONTH, year)`` DataFrame or ``None``.
    """
    return [result.data for result in load_years(years, data_dir)]


def resolve_year_path(year: Any, data_dir: Optional[PathLike] = None) -> Path:
    """Return the path of the accident file for *year* under *data_dir*."""
    return _resolve(make_filename(year), data_dir)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _resolve(filename: str, data_dir: Optional[PathLike]) -> Path:
    if data_dir is None:
        return Path(filename)
    return Path(data_dir) / filename


def _as_year_list(years: Any) -> List[Any]:
    """Normalise scalar or iterable year input to a list."""
    if isinstance(years, (str, bytes, int, float, np.integer, np.floating)):
        return [years]
    if isinstance(years, Iterable):
        return list(years)
    return [years]
