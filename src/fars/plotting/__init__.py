"""
FARS Plotting Package (Functional Core)

Pure plotting functions only – no file I/O, no side effects.
Every public function accepts DataFrames and returns a
``plotly.graph_objects.Figure``.

Modules:
    state_map: Accident locations for one state and year on a
               geographic map with state boundaries.
"""

from .state_map import plot_state_map

__all__ = [
    'plot_state_map',
]
