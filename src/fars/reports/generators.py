"""
FARS Report Generators (Imperative Shell)

Thin orchestration layer: resolves yearly file names, calls reader.py to
load DataFrames, calls the functional core to summarise or filter them,
calls the plotting functions to build figures, and writes output files.

Package Location: src/fars/reports/generators.py

Usage::

    from fars.reports.generators import fars_summarize_years, fars_map_state

    table = fars_summarize_years([2013, 2014, 2015], data_dir="data")
    fig = fars_map_state(33, 2013, data_dir="data", output="nh_2013.html")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import pandas as pd
import plotly.graph_objects as go

from ..analysis.states import sanitize_coordinates, select_state
from ..analysis.summary import summarize_counts
from ..data.reader import PathLike, fars_read, fars_read_years, resolve_year_path
from ..plotting.state_map import plot_state_map

log = logging.getLogger(__name__)


def fars_summarize_years(
    years: Any,
    data_dir: Optional[PathLike] = None,
) -> pd.DataFrame:
    """
    Count accidents per month for each requested year.

    Years whose file cannot be loaded are logged by the reader and left
    out of the result; they are not an error here.

    Args:
        years: A single year or an iterable of years.
        data_dir: Directory holding the yearly files (default: cwd).

    Returns:
        12-row DataFrame: ``MONTH`` (1-12) plus one integer count column
        per loaded year.
    """
    tables = fars_read_years(years, data_dir=data_dir)
    return summarize_counts(tables)


def fars_map_state(
    state_id: Any,
    year: Any,
    data_dir: Optional[PathLike] = None,
    output: Optional[PathLike] = None,
) -> Optional[go.Figure]:
    """
    Map the accidents of one state for one year.

    Args:
        state_id: FARS state code (e.g. ``33`` for New Hampshire).
        year: Data year.
        data_dir: Directory holding the yearly files (default: cwd).
        output: Optional path; when given the figure is written there as
            a standalone HTML file.

    Returns:
        The map figure, or ``None`` when the state has no records to plot.

    Raises:
        FileNotFoundError: If the year's file does not exist.
        InvalidStateError: If *state_id* does not occur in that year.
    """
    df = fars_read(resolve_year_path(year, data_dir))
    df_state = select_state(df, state_id)

    if df_state.empty:
        log.info("no accidents to plot", extra={"state": state_id, "year": year})
        return None

    df_state = sanitize_coordinates(df_state)
    fig = plot_state_map(df_state, state_id=state_id, year=year)

    if output is not None:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(out_path))
        log.info(f"Map saved → {out_path}")

    return fig
