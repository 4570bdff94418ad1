"""
FARS Reports Package (Imperative Shell)

Orchestrates data loading, the functional core and plot output.
No analysis logic lives here.

Modules:
    generators: fars_summarize_years() and fars_map_state().
"""

from .generators import (
    fars_summarize_years,
    fars_map_state,
)

__all__ = [
    'fars_summarize_years',
    'fars_map_state',
]
