"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: sanitized accident records for one state and year.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Map extent:
    The geo axes are clipped to the bounding box of the valid coordinates
    (plus a small margin) so the state fills the frame, with state
    boundaries drawn as sub-units.  Records with a missing latitude or
    longitude are not plotted but do not affect the extent of the other
    axis.  When no record has valid coordinates the map shows the whole
    continent.
"""

from __future__ import annotations

from typing import Any

import pandas as pd
import plotly.graph_objects as go

from ..analysis.schema import LATITUDE_COLUMN, LONGITUDE_COLUMN, validate_columns
from ..analysis.states import coordinate_bounds, state_name

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Degrees added on every side of the data bounding box
_BBOX_PAD_DEG: float = 0.25

_MARKER_STYLE = dict(size=3, color='firebrick', opacity=0.7)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_map(
    df_state: pd.DataFrame,
    state_id: Any,
    year: Any,
) -> go.Figure:
    """
    Build a map of accident locations for one state.

    Args:
        df_state: Accident records already filtered to one state, with
            sentinel coordinates replaced by NaN (see
            ``fars.analysis.states.sanitize_coordinates``).  Columns::

                LONGITUD : float
                LATITUDE : float

        state_id: FARS state code, used for the title.
        year: Data year, used for the title.

    Returns:
        ``plotly.graph_objects.Figure`` with a single ``Scattergeo`` trace
        holding one marker per record with both coordinates present.

    Raises:
        ValueError: If *df_state* is missing the coordinate columns.
    """
    validate_columns(df_state, required=[LATITUDE_COLUMN, LONGITUDE_COLUMN])

    points = df_state.dropna(subset=[LATITUDE_COLUMN, LONGITUDE_COLUMN])

    fig = go.Figure()
    fig.add_trace(go.Scattergeo(
        lon=points[LONGITUDE_COLUMN],
        lat=points[LATITUDE_COLUMN],
        mode='markers',
        marker=_MARKER_STYLE,
        name='Fatal accident',
        hovertemplate='Lat %{lat:.4f}<br>Lon %{lon:.4f}<extra></extra>',
    ))

    geo = dict(
        scope='north america',
        projection=dict(type='mercator'),
        showsubunits=True,
        subunitcolor='gray',
        showland=True,
        landcolor='whitesmoke',
        showlakes=False,
    )

    bounds = coordinate_bounds(df_state)
    if bounds is not None:
        lon_min, lon_max, lat_min, lat_max = bounds
        geo['lonaxis'] = dict(
            range=[lon_min - _BBOX_PAD_DEG, lon_max + _BBOX_PAD_DEG]
        )
        geo['lataxis'] = dict(
            range=[lat_min - _BBOX_PAD_DEG, lat_max + _BBOX_PAD_DEG]
        )

    fig.update_layout(
        title=_build_title(state_id, year, n_points=len(points)),
        geo=geo,
        showlegend=False,
        margin=dict(l=10, r=10, t=60, b=10),
        template='plotly_white',
    )
    return fig


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _build_title(state_id: Any, year: Any, n_points: int) -> str:
    return f'{state_name(state_id)} – Fatal Accidents {int(year)} ({n_points:,} mapped)'
