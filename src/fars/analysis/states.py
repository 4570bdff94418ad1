"""
FARS State Selection (Functional Core)

Pure functions only. No I/O, no side effects.

Package Location: src/fars/analysis/states.py

State codes:
    FARS identifies states by their two-digit FIPS code (Alabama = 1 ...
    Wyoming = 56), plus 43 for Puerto Rico and 52 for the U.S. Virgin
    Islands.  A code is only accepted if it actually occurs in the loaded
    year's ``STATE`` column.

Coordinate sentinels:
    Unreported positions are coded with out-of-range values (e.g.
    ``77.7777``/``99.9999`` latitude, ``777.7777``/``999.9999`` longitude).
    Longitudes above 900 and latitudes above 90 are treated as missing.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import pandas as pd

from .schema import (
    LATITUDE_COLUMN,
    LONGITUDE_COLUMN,
    MAP_COLUMNS,
    STATE_COLUMN,
    validate_columns,
)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_LONGITUDE_SENTINEL: float = 900.0
_LATITUDE_SENTINEL: float = 90.0

FARS_STATE_NAMES: Dict[int, str] = {
    1: "Alabama",          2: "Alaska",          4: "Arizona",
    5: "Arkansas",         6: "California",      8: "Colorado",
    9: "Connecticut",      10: "Delaware",       11: "District of Columbia",
    12: "Florida",         13: "Georgia",        15: "Hawaii",
    16: "Idaho",           17: "Illinois",       18: "Indiana",
    19: "Iowa",            20: "Kansas",         21: "Kentucky",
    22: "Louisiana",       23: "Maine",          24: "Maryland",
    25: "Massachusetts",   26: "Michigan",       27: "Minnesota",
    28: "Mississippi",     29: "Missouri",       30: "Montana",
    31: "Nebraska",        32: "Nevada",         33: "New Hampshire",
    34: "New Jersey",      35: "New Mexico",     36: "New York",
    37: "North Carolina",  38: "North Dakota",   39: "Ohio",
    40: "Oklahoma",        41: "Oregon",         42: "Pennsylvania",
    43: "Puerto Rico",     44: "Rhode Island",   45: "South Carolina",
    46: "South Dakota",    47: "Tennessee",      48: "Texas",
    49: "Utah",            50: "Vermont",        51: "Virginia",
    52: "Virgin Islands",  53: "Washington",     54: "West Virginia",
    55: "Wisconsin",       56: "Wyoming",
}


class InvalidStateError(ValueError):
    """Raised when a state code does not occur in the loaded data."""

    def __init__(self, state_id: Any) -> None:
        self.state_id = state_id
        super().__init__(f"invalid STATE number: {state_id}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def state_name(state_id: int) -> str:
    """Return the state's name, or ``'State <code>'`` for unknown codes."""
    return FARS_STATE_NAMES.get(int(state_id), f"State {int(state_id)}")


def select_state(df: pd.DataFrame, state_id: Any) -> pd.DataFrame:
    """
    Return the accident records of one state.

    Args:
        df: Full accident table for one year.
        state_id: FARS state code; coerced with ``int()``.

    Returns:
        Copy of the rows whose ``STATE`` equals *state_id*.  May be empty.

    Raises:
        ValueError: If the state or coordinate columns are missing, or
            *state_id* is not numeric.
        InvalidStateError: If *state_id* does not appear in ``STATE``.
    """
    validate_columns(df, required=MAP_COLUMNS)
    state_id = int(state_id)

    known = pd.to_numeric(df[STATE_COLUMN], errors="coerce").dropna().unique()
    if state_id not in set(known.astype(int).tolist()):
        raise InvalidStateError(state_id)

    mask = pd.to_numeric(df[STATE_COLUMN], errors="coerce") == state_id
    return df.loc[mask].copy()


def sanitize_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with NaN.

    Args:
        df: Accident records with ``LATITUDE`` and ``LONGITUD`` columns.

    Returns:
        Copy of *df* with float coordinate columns; longitudes > 900 and
        latitudes > 90 are NaN.
    """
    validate_columns(df, required=[LATITUDE_COLUMN, LONGITUDE_COLUMN])
    out = df.copy()
    lon = pd.to_numeric(out[LONGITUDE_COLUMN], errors="coerce").astype(float)
    lat = pd.to_numeric(out[LATITUDE_COLUMN], errors="coerce").astype(float)
    out[LONGITUDE_COLUMN] = lon.mask(lon > _LONGITUDE_SENTINEL, np.nan)
    out[LATITUDE_COLUMN] = lat.mask(lat > _LATITUDE_SENTINEL, np.nan)
    return out


def coordinate_bounds(
    df: pd.DataFrame,
) -> Optional[Tuple[float, float, float, float]]:
    """
    Bounding box of the non-missing coordinates.

    Longitude and latitude ranges are taken independently, ignoring NaN.

    Returns:
        ``(lon_min, lon_max, lat_min, lat_max)``, or ``None`` when either
        coordinate has no valid value.
    """
    lon = df[LONGITUDE_COLUMN].dropna()
    lat = df[LATITUDE_COLUMN].dropna()
    if lon.empty or lat.empty:
        return None
    return (
        float(lon.min()), float(lon.max()),
        float(lat.min()), float(lat.max()),
    )
