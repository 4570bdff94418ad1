import logging

import pandas as pd
import plotly.graph_objects as go
import pytest

from fars import fars_map_state
from fars.analysis.states import InvalidStateError
from fars.reports import generators


def test_returns_figure(in_data_dir):
    fig = fars_map_state(33, 2013)
    assert isinstance(fig, go.Figure)
    assert len(fig.data[0].lat) == sum(range(1, 13))


def test_sentinel_record_not_plotted(data_dir):
    fig = fars_map_state(1, 2013, data_dir=data_dir)
    assert list(fig.data[0].lat) == [32.5]


def test_writes_html_to_output(data_dir, tmp_path):
    out = tmp_path / "maps" / "nh.html"
    fars_map_state("33", "2013", data_dir=data_dir, output=out)
    assert out.exists()
    assert "plotly" in out.read_text(encoding="utf-8").lower()


def test_invalid_state(in_data_dir):
    with pytest.raises(InvalidStateError, match="invalid STATE number: 99"):
        fars_map_state(99, 2013)


def test_missing_year_is_fatal(in_data_dir):
    with pytest.raises(FileNotFoundError, match="accident_1999.csv.bz2"):
        fars_map_state(33, 1999)


def test_nothing_to_plot_is_a_no_op(data_dir, tmp_path, monkeypatch, caplog):
    def _empty_selection(df, state_id):
        return df.iloc[0:0].copy()

    monkeypatch.setattr(generators, "select_state", _empty_selection)
    out = tmp_path / "empty.html"

    with caplog.at_level(logging.INFO, logger="fars"):
        result = fars_map_state(33, 2013, data_dir=data_dir, output=out)

    assert result is None
    assert not out.exists()
    assert "no accidents to plot" in caplog.text
