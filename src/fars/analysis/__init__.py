"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept DataFrames and return transformed data.

Modules:
- schema:  Column names and required-column validation
- summary: Month-by-year accident counts
- states:  State selection, coordinate sanitizing, state names
"""

from .schema import validate_columns

from .summary import (
    MONTHS,
    summarize_counts,
)

from .states import (
    FARS_STATE_NAMES,
    InvalidStateError,
    state_name,
    select_state,
    sanitize_coordinates,
    coordinate_bounds,
)

__all__ = [
    # Schema
    'validate_columns',
    # Summary
    'MONTHS',
    'summarize_counts',
    # States
    'FARS_STATE_NAMES',
    'InvalidStateError',
    'state_name',
    'select_state',
    'sanitize_coordinates',
    'coordinate_bounds',
]
