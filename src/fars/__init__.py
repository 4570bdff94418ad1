"""
FARS - Fatality Analysis Reporting System accident tools

Loads the yearly US FARS accident files (``accident_<YYYY>.csv.bz2``),
summarises accident counts by month and year, and maps accident
locations for a state, using the Functional Core, Imperative Shell
architecture.

Structure:
- data/     : Imperative Shell (file names, CSV reading, batch loading)
- analysis/ : Functional Core (pure DataFrame transformations)
- plotting/ : plotting functions returning plotly figures
- reports/  : orchestration of the public operations
"""

from .data.reader import make_filename, fars_read, fars_read_years
from .reports.generators import fars_summarize_years, fars_map_state

__version__ = "0.1.0"

__all__ = [
    'make_filename',
    'fars_read',
    'fars_read_years',
    'fars_summarize_years',
    'fars_map_state',
]
