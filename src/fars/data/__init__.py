"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS tools.

Modules:
- reader: yearly file names, CSV reading and per-year batch loading
"""

from .reader import (
    YearResult,
    make_filename,
    fars_read,
    load_years,
    fars_read_years,
    resolve_year_path,
)

__all__ = [
    'YearResult',
    'make_filename',
    'fars_read',
    'load_years',
    'fars_read_years',
    'resolve_year_path',
]
